"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for the parser's structured logs.

Event Naming Convention:
    <component>.<action>

    component: document, shape, polygon, config, error
    action: parsed, skipped, built, hole_reversed, loaded

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, metadata.geometry_type
    | filter event = "document.skipped"
    | stats count() by metadata.reason
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - document.*: Dispatcher walking a GeoJSON tree
    - shape.*: Builder producing shapes
    - polygon.*: Ring orientation
    - config.*: Configuration lifecycle
    - error.*: Error conditions
    """

    # ========== Document Events ==========
    DOCUMENT_PARSED = "document.parsed"
    """Top-level GeoJSON document converted into shapes."""

    DOCUMENT_SKIPPED = "document.skipped"
    """Unrecognised type or missing member; branch produced nothing."""

    # ========== Shape Events ==========
    SHAPE_BUILT = "shape.built"
    """A single marker, polyline or polygon was constructed."""

    POLYGON_HOLE_REVERSED = "polygon.hole_reversed"
    """Hole ring reversed to wind opposite the outer ring."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Scene configuration loaded from YAML."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration failed validation."""
