"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Wraps Python's logging module and emits one JSON object per record.

Example:
    >>> logger = StructuredLogger(component="parser")
    >>> logger.info(
    ...     event=LogEvent.DOCUMENT_PARSED,
    ...     message="Parsed FeatureCollection",
    ...     metadata={'shape_count': 3}
    ... )

Output:
    {
        "timestamp": "2026-10-19T15:30:45.123456",
        "level": "INFO",
        "component": "parser",
        "event": "document.parsed",
        "message": "Parsed FeatureCollection",
        "metadata": {"shape_count": 3}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "parser", "builder")
        logger: Underlying Python logger instance

    Thread Safety:
        Thread-safe via Python's logging module.
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Args:
            component: Component identifier (e.g., "parser")
            level: Minimum level this instance emits (default: INFO).
                   Held per instance; the shared stdlib logger's level
                   is left alone.
            logger_name: Custom logger name (default: geoscene.<component>)
        """
        self.component = component
        self.level = level
        self.logger_name = logger_name or f"geoscene.{component}"
        self.logger = logging.getLogger(self.logger_name)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        if log_level < self.level or self.logger.disabled:
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        # handle() skips the stdlib logger's own level check, so filtering
        # stays with this instance
        record = self.logger.makeRecord(
            self.logger_name,
            log_level,
            "(unknown file)",
            0,
            json.dumps(log_entry, default=str),
            None,
            (type(exc_info), exc_info, exc_info.__traceback__)
            if exc_info and level == 'ERROR' else None,
        )
        self.logger.handle(record)

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message (per-shape detail)."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Example:
            >>> logger.info(
            ...     event=LogEvent.CONFIG_LOADED,
            ...     message="Loaded scene config",
            ...     metadata={'path': 'scene.yaml'}
            ... )
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log WARNING level message.

        Example:
            >>> logger.warning(
            ...     event=LogEvent.DOCUMENT_SKIPPED,
            ...     message="Unrecognised GeoJSON type",
            ...     metadata={'type': 'Circle'}
            ... )
        """
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance for traceback
        """
        self._log('ERROR', event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """
    Pass-through formatter: StructuredLogger already produced the JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("parser", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
