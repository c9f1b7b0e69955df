"""Mock parser classes for testing registry dispatch."""

from typing import Iterable, List, Optional

from adaptogen.models.normalized import ContentFrame, TextBlock
from adaptogen.parsers.base import JsonResponseParser, ModelResponseParser
from adaptogen.parsers.errors import PayloadStructureError, UnknownBlockTypeError


class RecordingParser(ModelResponseParser):
    """Parser returning a canned frame and recording every raw input."""

    def __init__(
        self,
        models: Iterable[str],
        frame: Optional[ContentFrame] = None,
        error: Optional[Exception] = None,
        name: Optional[str] = None
    ):
        self._models = list(models)
        self._frame = frame
        self._error = error
        self._name = name
        self.calls: List[str] = []

    def supported_models(self) -> Iterable[str]:
        return self._models

    def parse(self, raw_response: str) -> ContentFrame:
        self.calls.append(raw_response)
        if self._error is not None:
            raise self._error
        if self._frame is not None:
            return self._frame
        return ContentFrame(
            id="test_id",
            model=self._models[0] if self._models else "unknown",
            blocks=[TextBlock(text="Test response")]
        )

    @property
    def name(self) -> str:
        return self._name or super().name


class DemoParser(JsonResponseParser):
    """Maps ``content[].type == "text"`` items to TextBlock."""

    def supported_models(self) -> Iterable[str]:
        return {"demo"}

    def parse(self, raw_response: str) -> ContentFrame:
        data = self.load_json(raw_response)
        response_id = self.require_str(data, "id")
        model = self.require_str(data, "model")

        blocks = []
        for index, item in enumerate(self.require_list(data, "content", model=model)):
            if not isinstance(item, dict):
                raise PayloadStructureError(f"content[{index}] must be an object", model=model)
            if item.get("type") != "text":
                raise UnknownBlockTypeError(str(item.get("type")), index=index, model=model)
            blocks.append(TextBlock(text=self.require_str(item, "text", model=model)))

        return self.build_frame(response_id, model, blocks)
