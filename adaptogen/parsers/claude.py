"""Parser for Anthropic Messages API response bodies."""

from typing import Any, Dict, Iterable, Optional

from ..config.constants import CLAUDE_MODELS
from ..models.normalized import (
    ContentBlock,
    ContentFrame,
    TextBlock,
    ThinkingBlock,
    ToolResultBlock,
    ToolUseBlock,
)
from .base import JsonResponseParser
from .errors import MissingFieldError, PayloadStructureError, UnknownBlockTypeError


class ClaudeParser(JsonResponseParser):
    """
    Normalize ``{"id", "model", "content": [...]}`` message bodies.

    Content items are mapped by their ``type`` tag: ``text``, ``tool_use``,
    ``tool_result`` and ``thinking``. Any other tag raises
    ``UnknownBlockTypeError`` instead of being dropped.
    """

    def __init__(self, models: Optional[Iterable[str]] = None):
        self._models = frozenset(CLAUDE_MODELS if models is None else models)

    def supported_models(self) -> Iterable[str]:
        return self._models

    def parse(self, raw_response: str) -> ContentFrame:
        data = self.load_json(raw_response)
        response_id = self.require_str(data, "id")
        model = self.require_str(data, "model")

        content = data.get("content")
        if content is None:
            content = []
        elif not isinstance(content, list):
            raise PayloadStructureError(
                "'content' must be an array", model=model, parser=self.name
            )

        blocks = [self._parse_block(item, index, model) for index, item in enumerate(content)]
        return self.build_frame(response_id, model, blocks)

    def _parse_block(self, item: Any, index: int, model: str) -> ContentBlock:
        if not isinstance(item, dict):
            raise PayloadStructureError(
                f"content[{index}] must be an object", model=model, parser=self.name
            )

        block_type = item.get("type")
        if not isinstance(block_type, str):
            raise MissingFieldError(f"content[{index}].type", model=model, parser=self.name)

        if block_type == "text":
            return TextBlock(text=self._field(item, "text", index, model))

        if block_type == "tool_use":
            if "input" not in item:
                raise MissingFieldError(f"content[{index}].input", model=model, parser=self.name)
            return ToolUseBlock(
                id=self._field(item, "id", index, model),
                name=self._field(item, "name", index, model),
                input=item["input"],
            )

        if block_type == "tool_result":
            return ToolResultBlock(
                tool_use_id=self._field(item, "tool_use_id", index, model),
                content=item.get("content", ""),
                is_error=bool(item.get("is_error", False)),
            )

        if block_type == "thinking":
            return ThinkingBlock(text=self._field(item, "thinking", index, model))

        raise UnknownBlockTypeError(block_type, index=index, model=model, parser=self.name)

    def _field(self, item: Dict[str, Any], field: str, index: int, model: str) -> str:
        value = item.get(field)
        if not isinstance(value, str):
            raise MissingFieldError(f"content[{index}].{field}", model=model, parser=self.name)
        return value

