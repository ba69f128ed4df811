"""
Structured Logging for geoscene
===============================

Bounded Context: Observability

JSON-structured logs for the parser and builder.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from geoscene.logging import create_logger, LogEvent
    >>> logger = create_logger("parser")
    >>> logger.warning(
    ...     event=LogEvent.DOCUMENT_SKIPPED,
    ...     message="Feature has no geometry",
    ...     metadata={'type': 'Feature'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, JSONFormatter, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'JSONFormatter',
    'create_logger',
]
