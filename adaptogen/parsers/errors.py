"""
Typed errors raised while normalizing provider responses.

Every failure a parser or the registry can report is a ``ParseError``
subclass. Callers branch on the concrete class (or on ``kind``) to tell
"we don't know this model" apart from "we know this model but its payload
shape is unexpected".
"""

from typing import Optional


class ParseError(ValueError):
    """
    Base exception for all normalization failures.

    Attributes:
        kind: Stable machine-readable error kind
        model: Model identifier the failure relates to, if known
        parser: Name of the parser that raised, if any
    """

    kind = "parse_error"

    def __init__(
        self,
        message: str,
        model: Optional[str] = None,
        parser: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.model = model
        self.parser = parser


class InvalidJsonError(ParseError):
    """The raw response is not syntactically valid JSON."""

    kind = "invalid_json"

    def __init__(
        self,
        original_error: Optional[Exception] = None,
        model: Optional[str] = None,
        parser: Optional[str] = None
    ):
        self.original_error = original_error
        message = "Invalid JSON"
        if original_error is not None:
            message = f"Invalid JSON: {original_error}"
        super().__init__(message, model=model, parser=parser)


class MissingFieldError(ParseError):
    """A required field was absent or had the wrong type."""

    kind = "missing_field"

    def __init__(
        self,
        field: str,
        model: Optional[str] = None,
        parser: Optional[str] = None
    ):
        self.field = field
        super().__init__(f"Missing field: {field}", model=model, parser=parser)


class UnsupportedModelError(ParseError):
    """No parser is registered for the model identifier."""

    kind = "unsupported_model"

    def __init__(self, model: str):
        super().__init__(f"Unsupported model: {model}", model=model)


class PayloadStructureError(ParseError):
    """The payload belongs to a known model but has an unexpected shape."""

    kind = "structure"

    def __init__(
        self,
        detail: str,
        model: Optional[str] = None,
        parser: Optional[str] = None
    ):
        self.detail = detail
        super().__init__(f"Parsing error: {detail}", model=model, parser=parser)


class UnknownBlockTypeError(PayloadStructureError):
    """A content item carries a type tag the parser does not recognize."""

    def __init__(
        self,
        block_type: str,
        index: Optional[int] = None,
        model: Optional[str] = None,
        parser: Optional[str] = None
    ):
        self.block_type = block_type
        self.index = index
        detail = f"unknown content block type '{block_type}'"
        if index is not None:
            detail += f" at index {index}"
        super().__init__(detail, model=model, parser=parser)


class ParserConflictError(ValueError):
    """Raised when a model identifier is already claimed by another parser."""

    def __init__(self, model: str, existing: str, new: str):
        self.model = model
        self.existing = existing
        self.new = new
        super().__init__(
            f"Model '{model}' already registered to parser '{existing}', "
            f"refusing registration of parser '{new}'"
        )
