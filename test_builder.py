"""
Test Geometry Builder
=====================

Axis swap, bounds, icon style, per-shape copies and Multi variants.

Usage:
    pytest test_builder.py
"""

import pytest

from geoscene.geometry import (
    GeometryBuilder,
    LatLng,
    LatLngBounds,
    Marker,
    Polyline,
    Polygon,
    icon_url,
    is_clockwise,
)


@pytest.fixture
def builder():
    return GeometryBuilder()


# ----------------------------------------------------------------------
# Points
# ----------------------------------------------------------------------

def test_point_swaps_axes(builder):
    """GeoJSON [lon, lat] becomes position (lat, lng)."""
    marker = builder.build_point({"type": "Point", "coordinates": [-122.4, 37.8]}, {}, {})

    assert isinstance(marker, Marker)
    assert marker.position == LatLng(lat=37.8, lng=-122.4)
    assert marker.options["position"] == marker.position


def test_point_bounds_hold_exactly_the_position(builder):
    marker = builder.build_point_coordinates([10.0, 20.0], {}, {})
    bounds = marker.properties["bounds"]

    assert isinstance(bounds, LatLngBounds)
    assert (bounds.south, bounds.west, bounds.north, bounds.east) == (20.0, 10.0, 20.0, 10.0)
    assert marker.bounds is bounds


def test_point_type_defaults_and_is_kept(builder):
    default = builder.build_point_coordinates([0, 0], {}, {})
    custom = builder.build_point_coordinates([0, 0], {}, {"type": "station"})

    assert default.properties["type"] == "Point"
    assert custom.properties["type"] == "station"


def test_point_altitude_is_ignored(builder):
    marker = builder.build_point_coordinates([1.0, 2.0, 300.0], {}, {})
    assert marker.position == LatLng(lat=2.0, lng=1.0)


def test_icon_style_url_copied_into_options(builder):
    properties = {"style": {"iconStyle": {"url": "https://example.com/pin.png"}}}
    marker = builder.build_point_coordinates([0, 0], {"title": "pin"}, properties)

    assert marker.options["icon"] == "https://example.com/pin.png"
    assert marker.options["title"] == "pin"


def test_icon_url_lookup():
    assert icon_url({}) is None
    assert icon_url({"style": None}) is None
    assert icon_url({"style": {"iconStyle": {}}}) is None
    assert icon_url({"style": {"iconStyle": {"url": "a.png"}}}) == "a.png"


def test_inputs_are_not_mutated(builder):
    options = {"clickable": True}
    properties = {"name": "x"}

    marker = builder.build_point_coordinates([0, 0], options, properties)

    assert options == {"clickable": True}
    assert properties == {"name": "x"}
    assert marker.options is not options
    assert marker.properties is not properties


def test_malformed_coordinates_raise(builder):
    with pytest.raises(ValueError):
        builder.build_point_coordinates(["east", "north"], {}, {})
    with pytest.raises(IndexError):
        builder.build_point_coordinates([1.0], {}, {})


def test_multi_point_gives_independent_markers(builder):
    geometry = {"type": "MultiPoint", "coordinates": [[0, 0], [5, 5]]}
    markers = builder.build_multi_point(geometry, {"z": 1}, {"name": "pair"})

    assert [m.position for m in markers] == [LatLng(0, 0), LatLng(5, 5)]
    # Per-point bounds, never unioned
    assert markers[0].bounds == LatLngBounds([LatLng(0, 0)])
    assert markers[1].bounds == LatLngBounds([LatLng(5, 5)])

    markers[0].properties["name"] = "changed"
    markers[0].options["z"] = 99
    assert markers[1].properties["name"] == "pair"
    assert markers[1].options["z"] == 1


# ----------------------------------------------------------------------
# Lines
# ----------------------------------------------------------------------

def test_line_string_path_and_tight_bounds(builder):
    coordinates = [[0, 0], [2, 1], [-1, 3], [4, -2]]
    line = builder.build_line_string({"type": "LineString", "coordinates": coordinates}, {}, {})

    assert isinstance(line, Polyline)
    assert line.path == [LatLng(lat=c[1], lng=c[0]) for c in coordinates]
    assert line.options["path"] is line.path
    assert line.properties["type"] == "LineString"

    bounds = line.bounds
    assert (bounds.south, bounds.west, bounds.north, bounds.east) == (-2, -1, 3, 4)
    assert all(bounds.contains(p) for p in line.path)


def test_multi_line_string(builder):
    geometry = {
        "type": "MultiLineString",
        "coordinates": [[[0, 0], [1, 1]], [[10, 10], [11, 12]]],
    }
    lines = builder.build_multi_line_string(geometry, {}, {})

    assert len(lines) == 2
    assert lines[1].path[-1] == LatLng(lat=12, lng=11)
    assert lines[0].bounds.north == 1
    assert lines[0].properties is not lines[1].properties


# ----------------------------------------------------------------------
# Polygons
# ----------------------------------------------------------------------

SQUARE = [[0, 0], [0, 1], [1, 1], [1, 0]]
HOLE = [[0.2, 0.2], [0.2, 0.4], [0.4, 0.4], [0.4, 0.2]]


def test_polygon_reverses_same_wound_hole(builder):
    polygon = builder.build_polygon({"type": "Polygon", "coordinates": [SQUARE, HOLE]}, {}, {})

    assert isinstance(polygon, Polygon)
    assert polygon.outer_ring == [LatLng.from_position(p) for p in SQUARE]
    assert polygon.holes[0] == [LatLng.from_position(p) for p in reversed(HOLE)]
    assert polygon.options["paths"] is polygon.paths
    assert polygon.properties["type"] == "Polygon"


def test_polygon_keeps_opposite_wound_hole(builder):
    hole = list(reversed(HOLE))
    polygon = builder.build_polygon_coordinates([SQUARE, hole], {}, {})

    assert polygon.holes[0] == [LatLng.from_position(p) for p in hole]


def test_polygon_holes_always_oppose_outer(builder):
    for outer in (SQUARE, list(reversed(SQUARE))):
        for hole in (HOLE, list(reversed(HOLE))):
            polygon = builder.build_polygon_coordinates([outer, hole], {}, {})
            assert polygon.outer_ring == [LatLng.from_position(p) for p in outer]
            assert is_clockwise(polygon.holes[0]) != is_clockwise(polygon.outer_ring)


def test_polygon_bounds_cover_every_ring():
    builder = GeometryBuilder()
    outer = [[-5, -5], [-5, 5], [5, 5], [5, -5], [-5, -5]]
    hole = [[1, 1], [1, 2], [2, 2], [2, 1], [1, 1]]
    polygon = builder.build_polygon_coordinates([outer, hole], {}, {})

    for ring in polygon.paths:
        assert all(polygon.bounds.contains(p) for p in ring)
    assert polygon.bounds.to_dict() == {"south": -5, "west": -5, "north": 5, "east": 5}


def test_single_ring_polygon(builder):
    polygon = builder.build_polygon_coordinates([list(reversed(SQUARE))], {}, {})
    assert polygon.paths == [[LatLng.from_position(p) for p in reversed(SQUARE)]]
    assert polygon.holes == []


def test_winding_correction_can_be_disabled():
    builder = GeometryBuilder(correct_winding=False)
    polygon = builder.build_polygon_coordinates([SQUARE, HOLE], {}, {})
    assert polygon.holes[0] == [LatLng.from_position(p) for p in HOLE]


def test_multi_polygon(builder):
    geometry = {
        "type": "MultiPolygon",
        "coordinates": [[SQUARE, HOLE], [[[10, 10], [10, 11], [11, 11], [11, 10]]]],
    }
    polygons = builder.build_multi_polygon(geometry, {}, {"name": "islands"})

    assert len(polygons) == 2
    assert len(polygons[0].paths) == 2
    assert polygons[1].bounds.south == 10
    assert polygons[0].bounds.north == 1
    assert polygons[0].properties is not polygons[1].properties


# ----------------------------------------------------------------------
# Custom factory
# ----------------------------------------------------------------------

class RecordingFactory:
    """Stand-in for a map-library adapter."""

    class Shape:
        def __init__(self, kind, geometry, options):
            self.kind = kind
            self.geometry = geometry
            self.options = options

    def __init__(self):
        self.calls = []

    def make_marker(self, position, options):
        self.calls.append("marker")
        return self.Shape("marker", position, options)

    def make_polyline(self, path, options):
        self.calls.append("polyline")
        return self.Shape("polyline", path, options)

    def make_polygon(self, paths, options):
        self.calls.append("polygon")
        return self.Shape("polygon", paths, options)

    def make_bounds(self):
        self.calls.append("bounds")
        return LatLngBounds()


def test_builder_constructs_through_injected_factory():
    factory = RecordingFactory()
    builder = GeometryBuilder(factory=factory)

    shape = builder.build_line_string_coordinates([[0, 0], [1, 1]], {"strokeWeight": 3}, {})

    assert factory.calls == ["bounds", "polyline"]
    assert shape.kind == "polyline"
    assert shape.options["strokeWeight"] == 3
    assert shape.properties["type"] == "LineString"
    assert shape.properties["bounds"].north == 1
