"""
GeoJSON type discriminator.

The ``type`` member of every GeoJSON object selects how it is handled.
Anything outside this closed set is treated as "produce nothing".
"""

from enum import Enum
from typing import Any, Optional


class GeometryType(str, Enum):
    """GeoJSON object types understood by the parser."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"

    @classmethod
    def from_value(cls, value: Any) -> Optional["GeometryType"]:
        """Member for a raw ``type`` value, or None if unrecognised."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# Coordinate-bearing geometries handed straight to the builder
SIMPLE_GEOMETRY_TYPES = {
    GeometryType.POINT,
    GeometryType.MULTI_POINT,
    GeometryType.LINE_STRING,
    GeometryType.MULTI_LINE_STRING,
    GeometryType.POLYGON,
    GeometryType.MULTI_POLYGON,
}
