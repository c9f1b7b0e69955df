from .normalized import (
    ContentBlock,
    ContentFrame,
    TextBlock,
    ThinkingBlock,
    ToolResultBlock,
    ToolUseBlock,
    content_block_adapter,
)

__all__ = [
    "ContentBlock",
    "ContentFrame",
    "TextBlock",
    "ThinkingBlock",
    "ToolResultBlock",
    "ToolUseBlock",
    "content_block_adapter",
]
