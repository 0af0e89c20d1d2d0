"""
Structured Logging for Cupertino Spatial
========================================

Bounded Context: Observability

JSON-structured logging for the factory and configuration layers.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from cupertino_spatial.logging import create_logger, LogEvent
    >>> logger = create_logger("factory")
    >>> logger.warning(
    ...     event=LogEvent.SHAPE_NEGATIVE_RADIUS,
    ...     message="Circle created with negative radius",
    ...     metadata={'radius': -1.0}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
