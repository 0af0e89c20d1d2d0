"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for the factory and configuration layers.
Geometry primitives never log; only code that builds shapes from
external input does.

Event Naming Convention:
    <area>.<category>.<action>

    area: shape, config, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - shape.*: Shape construction through GeometryFactory
    - config.*: Configuration loading
    - error.*: Rejected input
    """

    # ========== Shape Events ==========
    SHAPE_CREATED = "shape.created"
    """Shape built by the factory (DEBUG)."""

    SHAPE_DEGENERATE = "shape.degenerate"
    """Zero-radius circle or zero-length line."""

    SHAPE_NEGATIVE_RADIUS = "shape.negative_radius"
    """Circle created with radius < 0 (accepted, caller's responsibility)."""

    SHAPE_NON_FINITE = "shape.non_finite"
    """NaN or infinite coordinate passed to a factory."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """GeometryConfig loaded from YAML."""

    # ========== Error Events ==========
    INVALID_RECTANGLE = "error.invalid_rectangle"
    """Rectangle with inverted bounds rejected."""

    CONFIG_ERROR = "error.config"
    """Configuration file could not be loaded or validated."""


SHAPE_EVENTS = {
    LogEvent.SHAPE_CREATED,
    LogEvent.SHAPE_DEGENERATE,
    LogEvent.SHAPE_NEGATIVE_RADIUS,
    LogEvent.SHAPE_NON_FINITE,
}

ERROR_EVENTS = {
    LogEvent.INVALID_RECTANGLE,
    LogEvent.CONFIG_ERROR,
}
