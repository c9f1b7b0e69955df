"""Parser interface, typed errors and the bundled reference parsers."""

from .base import JsonResponseParser, ModelResponseParser
from .claude import ClaudeParser
from .errors import (
    InvalidJsonError,
    MissingFieldError,
    ParseError,
    ParserConflictError,
    PayloadStructureError,
    UnknownBlockTypeError,
    UnsupportedModelError,
)
from .qwen import QwenParser

__all__ = [
    "ModelResponseParser",
    "JsonResponseParser",
    "ClaudeParser",
    "QwenParser",
    "ParseError",
    "InvalidJsonError",
    "MissingFieldError",
    "UnsupportedModelError",
    "PayloadStructureError",
    "UnknownBlockTypeError",
    "ParserConflictError",
]
