"""
Document Layer
==============

Bounded Context: GeoJSON document traversal.

Responsibilities:
- Read the ``type`` discriminator
- Resolve inherited properties and default options
- Delegate each geometry to the GeometryBuilder
- Collect results (single shape, flat list, or None)

Non-responsibilities:
- Coordinate conversion and bounds (handled by geometry)
- JSON text decoding (callers pass already-parsed values)
"""

from geoscene.document.types import GeometryType, SIMPLE_GEOMETRY_TYPES
from geoscene.document.scene import Scene, flatten_result
from geoscene.document.dispatcher import DocumentParser, parse

__all__ = [
    "GeometryType",
    "SIMPLE_GEOMETRY_TYPES",
    "Scene",
    "flatten_result",
    "DocumentParser",
    "parse",
]
