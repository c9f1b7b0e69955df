"""
Structured logging utility for the parser registry and parsers.

Messages carry standard fields such as component, model and parser in a
``[key=value ...]`` prefix so log lines stay greppable across providers.
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Optional


class ParserLogger:
    """Structured logger for normalization components."""

    def __init__(self, component: str):
        """
        Initialize logger for a specific component.

        Args:
            component: Name of the component (e.g., "registry", "claude")
        """
        self.component = component
        self.logger = logging.getLogger(f"adaptogen.{component}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"component={self.component}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, model: Optional[str] = None, **kwargs):
        """Log debug message with structured fields."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(message, model=model, **kwargs))

    def info(self, message: str, model: Optional[str] = None, **kwargs):
        """Log info message with structured fields."""
        self.logger.info(self._format_message(message, model=model, **kwargs))

    def warning(self, message: str, model: Optional[str] = None,
                error: Optional[Exception] = None, **kwargs):
        """Log warning message with structured fields."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)

        self.logger.warning(self._format_message(message, model=model, **kwargs))

    @contextmanager
    def track_parse(self, model: str, parser: Optional[str] = None):
        """
        Context manager to time one parse call and log its outcome.

        Failures are logged and re-raised unchanged.

        Yields:
            Dict with parse metadata (model, parser, start_time)
        """
        start_time = time.perf_counter()
        self.debug("Dispatching parse", model=model, parser=parser)

        metadata: Dict[str, Any] = {
            'model': model,
            'parser': parser,
            'start_time': start_time
        }

        try:
            yield metadata
        except Exception as e:
            duration = time.perf_counter() - start_time
            self.warning(
                "Parse failed",
                model=model,
                parser=parser,
                duration_ms=round(duration * 1000, 3),
                error=e
            )
            raise

        duration = time.perf_counter() - start_time
        self.debug(
            "Parse completed",
            model=model,
            parser=parser,
            duration_ms=round(duration * 1000, 3),
            blocks=metadata.get('blocks')
        )
