"""
Base Parser Interface

This module defines the abstract base class for all model response parsers.
A parser converts one raw provider response body into a ``ContentFrame``.
The registry only depends on this interface, so provider-specific parsers
can live anywhere and be supplied by the host application.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic import ValidationError

from ..models.normalized import ContentBlock, ContentFrame
from .errors import InvalidJsonError, MissingFieldError, PayloadStructureError


class ModelResponseParser(ABC):
    """
    Abstract base class for model response parsers.

    A parser is responsible for:
    - Declaring which model identifiers it handles
    - Decoding the provider's raw JSON body
    - Mapping provider content items onto the normalized block variants

    Parsers should NOT:
    - Perform I/O or mutate shared state
    - Let non-``ParseError`` exceptions escape on malformed input
    - Drop content items they do not understand
    """

    @abstractmethod
    def supported_models(self) -> Iterable[str]:
        """
        Return the model identifiers this parser handles.

        The registry reads this once at registration time, so the result
        must be stable across calls.
        """
        pass

    @abstractmethod
    def parse(self, raw_response: str) -> ContentFrame:
        """
        Parse one raw response body into a ContentFrame.

        Args:
            raw_response: The complete JSON body returned by the provider

        Returns:
            A fully populated ContentFrame

        Raises:
            ParseError: For any malformed or unexpected input
        """
        pass

    def can_handle(self, model: str) -> bool:
        """Check whether ``model`` is one of the supported identifiers."""
        return model in set(self.supported_models())

    @property
    def name(self) -> str:
        """
        Short name of this parser.

        By default, returns the class name without 'Parser' suffix.
        """
        class_name = self.__class__.__name__
        if class_name.endswith("Parser") and len(class_name) > len("Parser"):
            return class_name[:-6].lower()
        return class_name.lower()


class JsonResponseParser(ModelResponseParser):
    """
    Parser base with helpers for decoding JSON response bodies.

    The helpers raise typed errors tagged with this parser's name, so
    subclasses can extract fields without wrapping every lookup.
    """

    def load_json(self, raw_response: str) -> Dict[str, Any]:
        """Decode the body and require a top-level JSON object."""
        try:
            data = json.loads(raw_response)
        except (ValueError, RecursionError, TypeError) as e:
            raise InvalidJsonError(e, parser=self.name)
        if not isinstance(data, dict):
            raise PayloadStructureError(
                f"expected a JSON object, got {type(data).__name__}",
                parser=self.name
            )
        return data

    def require_str(self, obj: Dict[str, Any], field: str, model: Optional[str] = None) -> str:
        value = obj.get(field)
        if not isinstance(value, str):
            raise MissingFieldError(field, model=model, parser=self.name)
        return value

    def require_object(self, obj: Dict[str, Any], field: str, model: Optional[str] = None) -> Dict[str, Any]:
        value = obj.get(field)
        if not isinstance(value, dict):
            raise MissingFieldError(field, model=model, parser=self.name)
        return value

    def require_list(self, obj: Dict[str, Any], field: str, model: Optional[str] = None) -> List[Any]:
        value = obj.get(field)
        if not isinstance(value, list):
            raise MissingFieldError(field, model=model, parser=self.name)
        return value

    def build_frame(
        self,
        response_id: str,
        model: str,
        blocks: Sequence[ContentBlock]
    ) -> ContentFrame:
        """Construct the frame, reporting validation failures as ParseErrors."""
        if not response_id:
            raise MissingFieldError("id", model=model, parser=self.name)
        try:
            return ContentFrame(id=response_id, model=model, blocks=tuple(blocks))
        except ValidationError as e:
            raise PayloadStructureError(
                f"invalid normalized frame: {e.error_count()} validation error(s)",
                model=model,
                parser=self.name
            ) from e
