"""
Scene aggregate.

parse() returns a single shape, a list, or None depending on the input's
shape. Scene flattens any of those into one ordered collection and unions
the per-shape bounds, which is what a map needs to fit itself to the data.
"""

from typing import Any, Dict, Iterator, List

from geoscene.geometry.shapes import LatLngBounds, Marker, Polyline, Polygon


def flatten_result(result: Any) -> List[Any]:
    """Parse result (shape, nested lists, or None) -> flat list of shapes."""
    if result is None:
        return []
    if isinstance(result, (list, tuple)):
        shapes: List[Any] = []
        for item in result:
            shapes.extend(flatten_result(item))
        return shapes
    return [result]


class Scene:
    """
    Ordered collection of shapes produced from one GeoJSON document.

    Order follows the document: features, geometries and multi-geometry
    members appear in input order.
    """

    def __init__(self, shapes: List[Any] | None = None):
        self.shapes: List[Any] = list(shapes or [])

    @classmethod
    def from_result(cls, result: Any) -> "Scene":
        return cls(flatten_result(result))

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.shapes)

    def __bool__(self) -> bool:
        return bool(self.shapes)

    @property
    def markers(self) -> List[Marker]:
        return [s for s in self.shapes if isinstance(s, Marker)]

    @property
    def polylines(self) -> List[Polyline]:
        return [s for s in self.shapes if isinstance(s, Polyline)]

    @property
    def polygons(self) -> List[Polygon]:
        return [s for s in self.shapes if isinstance(s, Polygon)]

    @property
    def bounds(self) -> LatLngBounds:
        """
        Union of every shape's cached bounds.

        Computed fresh on each access; the shapes' own boxes are not modified.
        Shapes whose bounds are not LatLngBounds (custom factories) are skipped.
        """
        total = LatLngBounds()
        for shape in self.shapes:
            shape_bounds = getattr(shape, 'properties', {}).get('bounds')
            if isinstance(shape_bounds, LatLngBounds):
                total.union(shape_bounds)
        return total

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-friendly export of the shapes plus the overall bounds.

        Shapes without a to_dict() (custom factories) are left out of
        'shapes' but still counted in 'shape_count'.
        """
        return {
            'shape_count': len(self.shapes),
            'bounds': self.bounds.to_dict(),
            'shapes': [
                shape.to_dict() for shape in self.shapes
                if callable(getattr(shape, 'to_dict', None))
            ],
        }

    def __repr__(self) -> str:
        return (
            f"Scene(markers={len(self.markers)}, polylines={len(self.polylines)}, "
            f"polygons={len(self.polygons)})"
        )
