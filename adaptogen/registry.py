"""Parser registry.

The registry maps model identifiers to parser instances and dispatches raw
responses to the parser registered for the response's ``model`` field.
Host applications register parsers at startup; lookups are exact and
case-sensitive.

Duplicate identifiers are resolved by the registry's ``ConflictPolicy``:
with ``REPLACE`` (the default) the last registration wins, with ``REJECT``
the second registration raises ``ParserConflictError``.
"""

import json
import threading
from typing import Dict, Optional

from .config.settings import ConflictPolicy, RegistrySettings, load_settings
from .models.normalized import ContentFrame
from .observability.logging import ParserLogger
from .parsers.base import ModelResponseParser
from .parsers.errors import (
    InvalidJsonError,
    MissingFieldError,
    ParserConflictError,
    UnsupportedModelError,
)

logger = ParserLogger("registry")


class ParserRegistry:
    """Registry of model response parsers.

    One parser instance may be registered under any number of model
    identifiers; the registry keeps references to the shared instance.
    """

    def __init__(
        self,
        settings: Optional[RegistrySettings] = None,
        conflict_policy: Optional[ConflictPolicy] = None
    ):
        settings = settings or RegistrySettings()
        self._conflict_policy = ConflictPolicy(conflict_policy or settings.conflict_policy)
        self._parsers: Dict[str, ModelResponseParser] = {}
        self._lock = threading.RLock()

    @property
    def conflict_policy(self) -> ConflictPolicy:
        return self._conflict_policy

    def register_parser(self, parser: ModelResponseParser) -> None:
        """Register a parser under every identifier it supports.

        Args:
            parser: Parser instance to register

        Raises:
            TypeError: If parser doesn't implement ModelResponseParser, or
                declares a non-string identifier
            ParserConflictError: If the policy is REJECT and an identifier
                is already held by a different parser. Nothing is
                registered in that case.
        """
        if not isinstance(parser, ModelResponseParser):
            raise TypeError(
                f"Parser must inherit from ModelResponseParser, got {type(parser)}"
            )

        models = list(parser.supported_models())
        for model in models:
            if not isinstance(model, str):
                raise TypeError(
                    f"Parser '{parser.name}' declared a non-string model identifier: {model!r}"
                )

        with self._lock:
            if self._conflict_policy == ConflictPolicy.REJECT:
                for model in models:
                    existing = self._parsers.get(model)
                    if existing is not None and existing is not parser:
                        raise ParserConflictError(model, existing.name, parser.name)

            for model in models:
                existing = self._parsers.get(model)
                if existing is not None and existing is not parser:
                    logger.warning(
                        f"Replacing parser '{existing.name}'",
                        model=model,
                        parser=parser.name
                    )
                self._parsers[model] = parser

        logger.info(
            f"Registered parser '{parser.name}' for {len(models)} model(s)",
            parser=parser.name
        )

    def parse(self, raw_response: str) -> ContentFrame:
        """Parse a raw model response.

        1. Extract the model identifier from the response
        2. Look up the parser registered for that identifier
        3. Delegate the original raw string to that parser

        Errors raised by the delegate propagate unchanged.

        Raises:
            InvalidJsonError: The response is not valid JSON
            MissingFieldError: The response has no string ``model`` field
            UnsupportedModelError: No parser is registered for the model
            ParseError: Any failure reported by the selected parser
        """
        model = self.extract_model(raw_response)

        parser = self.get_parser(model)
        if parser is None:
            logger.debug("No parser registered", model=model)
            raise UnsupportedModelError(model)

        with logger.track_parse(model, parser.name) as metadata:
            frame = parser.parse(raw_response)
            metadata['blocks'] = len(frame.blocks)
        return frame

    @staticmethod
    def extract_model(raw_response: str) -> str:
        """Extract the top-level ``model`` field from a raw response.

        Raises:
            InvalidJsonError: The response is not valid JSON
            MissingFieldError: ``model`` is absent or not a string
        """
        try:
            data = json.loads(raw_response)
        except (ValueError, RecursionError, TypeError) as e:
            raise InvalidJsonError(e)

        model = data.get("model") if isinstance(data, dict) else None
        if not isinstance(model, str):
            raise MissingFieldError("model")
        return model

    def get_parser(self, model: str) -> Optional[ModelResponseParser]:
        """Get the parser registered for a model identifier, or None."""
        with self._lock:
            return self._parsers.get(model)

    def has_model(self, model: str) -> bool:
        with self._lock:
            return model in self._parsers

    def list_models(self) -> Dict[str, str]:
        """Map each registered model identifier to its parser's name."""
        with self._lock:
            return {model: parser.name for model, parser in sorted(self._parsers.items())}

    def unregister_model(self, model: str) -> bool:
        """Remove a single model identifier.

        Returns:
            True if the identifier was registered, False if not found
        """
        with self._lock:
            if model in self._parsers:
                del self._parsers[model]
                logger.info("Unregistered model", model=model)
                return True
        return False

    def clear(self) -> None:
        """Remove all registrations (mainly for testing)."""
        with self._lock:
            self._parsers.clear()
        logger.info("Cleared all registered parsers")

    def __contains__(self, model: object) -> bool:
        return isinstance(model, str) and self.has_model(model)

    def __len__(self) -> int:
        with self._lock:
            return len(self._parsers)


def create_default_registry(settings: Optional[RegistrySettings] = None) -> ParserRegistry:
    """Create a registry with the bundled Qwen and Claude parsers.

    Without explicit settings, they are loaded from the environment (and ``.env``).
    """
    from .parsers.claude import ClaudeParser
    from .parsers.qwen import QwenParser

    registry = ParserRegistry(settings=settings or load_settings())
    registry.register_parser(QwenParser())
    registry.register_parser(ClaudeParser())
    return registry


_default_registry: Optional[ParserRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> ParserRegistry:
    """Get the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = create_default_registry()
    return _default_registry


def parse(raw_response: str) -> ContentFrame:
    """Parse a raw response with the default registry."""
    return get_default_registry().parse(raw_response)
