"""
Adaptogen - normalize LLM provider responses into one content model.

Each provider encodes text, tool calls, tool results and reasoning in its
own JSON shape. Adaptogen provides:
- A closed, provider-independent ContentFrame / ContentBlock model
- A pluggable ModelResponseParser interface
- A ParserRegistry that dispatches raw responses by their model identifier
- Reference parsers for Claude and Qwen response bodies
"""

__version__ = "0.1.0"

from .config import ConflictPolicy, RegistrySettings, load_settings
from .models.normalized import (
    ContentBlock,
    ContentFrame,
    TextBlock,
    ThinkingBlock,
    ToolResultBlock,
    ToolUseBlock,
)
from .parsers import (
    ClaudeParser,
    InvalidJsonError,
    JsonResponseParser,
    MissingFieldError,
    ModelResponseParser,
    ParseError,
    ParserConflictError,
    PayloadStructureError,
    QwenParser,
    UnknownBlockTypeError,
    UnsupportedModelError,
)
from .registry import ParserRegistry, create_default_registry, get_default_registry, parse

__all__ = [
    # Registry
    "ParserRegistry",
    "create_default_registry",
    "get_default_registry",
    "parse",

    # Normalized model
    "ContentFrame",
    "ContentBlock",
    "TextBlock",
    "ToolUseBlock",
    "ToolResultBlock",
    "ThinkingBlock",

    # Parsers
    "ModelResponseParser",
    "JsonResponseParser",
    "ClaudeParser",
    "QwenParser",

    # Errors
    "ParseError",
    "InvalidJsonError",
    "MissingFieldError",
    "UnsupportedModelError",
    "PayloadStructureError",
    "UnknownBlockTypeError",
    "ParserConflictError",

    # Config
    "ConflictPolicy",
    "RegistrySettings",
    "load_settings",
]
