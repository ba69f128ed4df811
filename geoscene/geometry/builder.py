"""
Geometry Builder Module
=======================

Turns GeoJSON coordinate structures into shapes with cached bounds.

Design:
- Two entry points per singular geometry: one takes the geometry object and
  unwraps ``coordinates``, the other takes raw coordinates. Multi-variants
  call the raw one per element.
- Options and properties are copied per shape, so siblings never share a bag
- Shapes are constructed through an injected ShapeFactory
- No validation: malformed coordinates raise where they are converted
"""

from typing import Any, Dict, List, Optional, Sequence

from geoscene.geometry.shapes import LatLng
from geoscene.geometry.winding import orient_rings
from geoscene.logging import LogEvent, StructuredLogger, create_logger
from geoscene.rendering.factory import SceneShapeFactory, ShapeFactory

Position = Sequence[float]
Options = Dict[str, Any]
Properties = Dict[str, Any]


def icon_url(properties: Properties) -> Optional[str]:
    """
    Marker icon URL from the ``style.iconStyle.url`` property extension.

    Returns:
        The URL, or None when any level is missing
    """
    style = properties.get('style')
    if not isinstance(style, dict):
        return None
    icon_style = style.get('iconStyle')
    if not isinstance(icon_style, dict):
        return None
    return icon_style.get('url')


class GeometryBuilder:
    """
    Builds markers, polylines and polygons from GeoJSON coordinates.

    Stateless apart from its collaborators; safe to reuse across documents.

    Usage:
        builder = GeometryBuilder()
        marker = builder.build_point(
            {"type": "Point", "coordinates": [-0.12, 51.5]},
            options={"draggable": False},
            properties={"name": "London"},
        )
        marker.position          # LatLng(lat=51.5, lng=-0.12)
        marker.properties["bounds"]
    """

    def __init__(
        self,
        factory: Optional[ShapeFactory] = None,
        correct_winding: bool = True,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            factory: Shape construction backend (default: SceneShapeFactory)
            correct_winding: Reverse holes that wind like the outer ring
            logger: Structured logger (default: component "builder")
        """
        self.factory = factory or SceneShapeFactory()
        self.correct_winding = correct_winding
        self.logger = logger or create_logger("builder")

    # ------------------------------------------------------------------
    # Points
    # ------------------------------------------------------------------

    def build_point(self, geometry: Dict[str, Any], options: Options, properties: Properties):
        """Build a marker from a Point geometry object."""
        return self.build_point_coordinates(geometry['coordinates'], options, properties)

    def build_point_coordinates(self, position: Position, options: Options, properties: Properties):
        """
        Build a marker from a single [lon, lat] position.

        Returns:
            Marker whose properties carry 'type' (default "Point") and
            'bounds' (a box around the one position)
        """
        options = dict(options)
        properties = dict(properties)

        latlng = LatLng.from_position(position)
        options['position'] = latlng

        url = icon_url(properties)
        if url is not None:
            options['icon'] = url

        bounds = self.factory.make_bounds()
        bounds.extend(latlng)

        marker = self.factory.make_marker(latlng, options)
        return self._attach(marker, properties, 'Point', bounds)

    def build_multi_point(self, geometry: Dict[str, Any], options: Options, properties: Properties) -> List[Any]:
        """One independent marker per position; bounds are not unioned."""
        return [
            self.build_point_coordinates(position, options, properties)
            for position in geometry['coordinates']
        ]

    # ------------------------------------------------------------------
    # Lines
    # ------------------------------------------------------------------

    def build_line_string(self, geometry: Dict[str, Any], options: Options, properties: Properties):
        """Build a polyline from a LineString geometry object."""
        return self.build_line_string_coordinates(geometry['coordinates'], options, properties)

    def build_line_string_coordinates(
        self,
        positions: Sequence[Position],
        options: Options,
        properties: Properties,
    ):
        """
        Build a polyline from a list of [lon, lat] positions.

        The path keeps input order; bounds are the tightest box around it.
        """
        options = dict(options)
        properties = dict(properties)

        bounds = self.factory.make_bounds()
        path = []
        for position in positions:
            latlng = LatLng.from_position(position)
            bounds.extend(latlng)
            path.append(latlng)

        options['path'] = path
        line = self.factory.make_polyline(path, options)
        return self._attach(line, properties, 'LineString', bounds)

    def build_multi_line_string(self, geometry: Dict[str, Any], options: Options, properties: Properties) -> List[Any]:
        return [
            self.build_line_string_coordinates(line, options, properties)
            for line in geometry['coordinates']
        ]

    # ------------------------------------------------------------------
    # Polygons
    # ------------------------------------------------------------------

    def build_polygon(self, geometry: Dict[str, Any], options: Options, properties: Properties):
        """Build a polygon from a Polygon geometry object."""
        return self.build_polygon_coordinates(geometry['coordinates'], options, properties)

    def build_polygon_coordinates(
        self,
        rings: Sequence[Sequence[Position]],
        options: Options,
        properties: Properties,
    ):
        """
        Build a polygon from rings of [lon, lat] positions.

        Ring 0 is the outer boundary, the rest are holes. One box is extended
        with every point of every ring. With correct_winding on, holes that
        wind like the outer ring are reversed; the outer ring never is.
        """
        options = dict(options)
        properties = dict(properties)

        bounds = self.factory.make_bounds()
        paths = []
        for ring in rings:
            path = []
            for position in ring:
                latlng = LatLng.from_position(position)
                bounds.extend(latlng)
                path.append(latlng)
            paths.append(path)

        if self.correct_winding:
            paths, reversed_indices = orient_rings(paths)
            if reversed_indices:
                self.logger.debug(
                    event=LogEvent.POLYGON_HOLE_REVERSED,
                    message=f"Reversed {len(reversed_indices)} hole ring(s)",
                    metadata={'ring_indices': reversed_indices, 'ring_count': len(paths)},
                )

        options['paths'] = paths
        polygon = self.factory.make_polygon(paths, options)
        return self._attach(polygon, properties, 'Polygon', bounds)

    def build_multi_polygon(self, geometry: Dict[str, Any], options: Options, properties: Properties) -> List[Any]:
        return [
            self.build_polygon_coordinates(rings, options, properties)
            for rings in geometry['coordinates']
        ]

    # ------------------------------------------------------------------

    def _attach(self, shape: Any, properties: Properties, default_type: str, bounds: Any) -> Any:
        """Write the synthesized 'type' and 'bounds' entries and hand the bag over."""
        if not properties.get('type'):
            properties['type'] = default_type
        properties['bounds'] = bounds
        shape.properties = properties

        self.logger.debug(
            event=LogEvent.SHAPE_BUILT,
            message=f"Built {default_type} shape",
            metadata={'type': properties['type']},
        )
        return shape
