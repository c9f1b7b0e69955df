"""
Parser for OpenAI-compatible chat completion bodies emitted by Qwen models.

Qwen3 served through an OpenAI-compatible endpoint inlines its reasoning in
the message content as ``<think>...</think>`` followed by the answer, and
reports function calls under ``message.tool_calls`` with JSON-encoded
argument strings. Some servers instead split reasoning into a separate
``reasoning_content`` field; both forms are normalized to ``ThinkingBlock``.
"""

import json
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config.constants import QWEN_MODELS, THINK_CLOSE_TAG, THINK_OPEN_TAG
from ..models.normalized import ContentBlock, ContentFrame, TextBlock, ThinkingBlock, ToolUseBlock
from .base import JsonResponseParser
from .errors import MissingFieldError, PayloadStructureError, UnknownBlockTypeError


def split_thinking(content: str) -> Tuple[Optional[str], str]:
    """
    Split inline ``<think>`` reasoning from the visible answer.

    Returns:
        Tuple of (thinking text or None, remaining answer text), both stripped
    """
    close_at = content.find(THINK_CLOSE_TAG)
    if close_at == -1:
        return None, content.strip()

    head = content[:close_at].strip()
    if head.startswith(THINK_OPEN_TAG):
        head = head[len(THINK_OPEN_TAG):].strip()
    answer = content.rsplit(THINK_CLOSE_TAG, 1)[-1].strip()
    return (head or None), answer


class QwenParser(JsonResponseParser):
    """Normalize ``choices[0].message`` of a chat completion into blocks."""

    def __init__(self, models: Optional[Iterable[str]] = None):
        self._models = frozenset(QWEN_MODELS if models is None else models)

    def supported_models(self) -> Iterable[str]:
        return self._models

    def parse(self, raw_response: str) -> ContentFrame:
        data = self.load_json(raw_response)
        response_id = self.require_str(data, "id")
        model = self.require_str(data, "model")

        choices = data.get("choices")
        if choices is None:
            choices = []
        elif not isinstance(choices, list):
            raise PayloadStructureError("'choices' must be an array", model=model, parser=self.name)

        blocks: List[ContentBlock] = []
        if choices:
            first = choices[0]
            if not isinstance(first, dict):
                raise PayloadStructureError("choices[0] must be an object", model=model, parser=self.name)
            message = first.get("message")
            if not isinstance(message, dict):
                raise MissingFieldError("choices[0].message", model=model, parser=self.name)
            blocks = self._parse_message(message, model)

        return self.build_frame(response_id, model, blocks)

    def _parse_message(self, message: Dict[str, Any], model: str) -> List[ContentBlock]:
        blocks: List[ContentBlock] = []

        reasoning = message.get("reasoning_content")
        if isinstance(reasoning, str) and reasoning.strip():
            blocks.append(ThinkingBlock(text=reasoning.strip()))

        content = message.get("content")
        if isinstance(content, str):
            thinking, answer = split_thinking(content)
            if thinking:
                blocks.append(ThinkingBlock(text=thinking))
            if answer:
                blocks.append(TextBlock(text=answer))
        elif isinstance(content, list):
            blocks.extend(self._parse_content_parts(content, model))
        elif content is not None:
            raise PayloadStructureError(
                "choices[0].message.content must be a string, array or null",
                model=model,
                parser=self.name
            )

        tool_calls = message.get("tool_calls")
        if tool_calls is not None:
            if not isinstance(tool_calls, list):
                raise PayloadStructureError(
                    "choices[0].message.tool_calls must be an array", model=model, parser=self.name
                )
            for index, tool_call in enumerate(tool_calls):
                blocks.append(self._parse_tool_call(tool_call, index, model))

        return blocks

    def _parse_content_parts(self, parts: List[Any], model: str) -> List[ContentBlock]:
        blocks: List[ContentBlock] = []
        for index, part in enumerate(parts):
            path = f"choices[0].message.content[{index}]"
            if not isinstance(part, dict):
                raise PayloadStructureError(f"{path} must be an object", model=model, parser=self.name)
            part_type = part.get("type")
            if part_type != "text":
                raise UnknownBlockTypeError(str(part_type), index=index, model=model, parser=self.name)
            text = part.get("text")
            if not isinstance(text, str):
                raise MissingFieldError(f"{path}.text", model=model, parser=self.name)
            blocks.append(TextBlock(text=text))
        return blocks

    def _parse_tool_call(self, tool_call: Any, index: int, model: str) -> ToolUseBlock:
        path = f"choices[0].message.tool_calls[{index}]"
        if not isinstance(tool_call, dict):
            raise PayloadStructureError(f"{path} must be an object", model=model, parser=self.name)

        call_type = tool_call.get("type", "function")
        if call_type != "function":
            raise UnknownBlockTypeError(str(call_type), index=index, model=model, parser=self.name)

        call_id = tool_call.get("id")
        if not isinstance(call_id, str):
            raise MissingFieldError(f"{path}.id", model=model, parser=self.name)
        function = tool_call.get("function")
        if not isinstance(function, dict):
            raise MissingFieldError(f"{path}.function", model=model, parser=self.name)
        name = function.get("name")
        if not isinstance(name, str):
            raise MissingFieldError(f"{path}.function.name", model=model, parser=self.name)

        return ToolUseBlock(id=call_id, name=name, input=self._decode_arguments(function.get("arguments")))

    @staticmethod
    def _decode_arguments(arguments: Any) -> Any:
        # Arguments arrive JSON-encoded; undecodable strings are kept under "raw"
        if arguments is None:
            return {}
        if not isinstance(arguments, str):
            return arguments
        if not arguments.strip():
            return {}
        try:
            return json.loads(arguments)
        except (ValueError, RecursionError):
            return {"raw": arguments}
