"""
Shape Factory Module
====================

The shape-construction capability the builder depends on.

Design:
- ShapeFactory is a Protocol (interface); nothing here draws anything
- SceneShapeFactory is the default, producing geoscene dataclasses
- A map-library adapter implements the same four methods and is injected
  into GeometryBuilder instead

Contract:
    The builder hands over fully-resolved options (position/path/paths
    already set) and afterwards assigns the property bag to the returned
    object's ``properties`` attribute.
"""

from typing import Any, Dict, List, Protocol

from geoscene.geometry.shapes import LatLng, LatLngBounds, Marker, Polyline, Polygon


class ShapeFactory(Protocol):
    """Protocol for shape construction backends (interface)."""

    def make_marker(self, position: LatLng, options: Dict[str, Any]) -> Any:
        """Create a point shape at position."""
        ...

    def make_polyline(self, path: List[LatLng], options: Dict[str, Any]) -> Any:
        """Create an open path shape."""
        ...

    def make_polygon(self, paths: List[List[LatLng]], options: Dict[str, Any]) -> Any:
        """Create a filled shape; paths[0] is the outer ring."""
        ...

    def make_bounds(self) -> Any:
        """Create an empty bounding box supporting extend(point)."""
        ...


class SceneShapeFactory:
    """
    Default factory: in-memory, renderer-agnostic shapes.

    Stateless; one instance can be shared across builders and threads.
    """

    def make_marker(self, position: LatLng, options: Dict[str, Any]) -> Marker:
        return Marker(position=position, options=options)

    def make_polyline(self, path: List[LatLng], options: Dict[str, Any]) -> Polyline:
        return Polyline(path=path, options=options)

    def make_polygon(self, paths: List[List[LatLng]], options: Dict[str, Any]) -> Polygon:
        return Polygon(paths=paths, options=options)

    def make_bounds(self) -> LatLngBounds:
        return LatLngBounds()
