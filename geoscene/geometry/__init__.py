"""
Geometry Layer
==============

Bounded Context: Shapes, bounds and ring orientation.

Responsibilities:
- Shape representation (Marker, Polyline, Polygon)
- Bounding-box accumulation
- Hole winding correction
- GeoJSON coordinates -> shapes (GeometryBuilder)
- NO document traversal, NO drawing

Design Philosophy:
- Pure functions where possible
- Per-shape copies of options and properties
- Zero side effects on the input document
"""

from geoscene.geometry.shapes import LatLng, LatLngBounds, Marker, Polyline, Polygon
from geoscene.geometry.winding import signed_area, is_clockwise, orient_rings
from geoscene.geometry.builder import GeometryBuilder, icon_url

__all__ = [
    "LatLng",
    "LatLngBounds",
    "Marker",
    "Polyline",
    "Polygon",
    "signed_area",
    "is_clockwise",
    "orient_rings",
    "GeometryBuilder",
    "icon_url",
]
