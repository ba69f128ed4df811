"""
Geometric Shapes Module
========================

Renderer-agnostic shapes produced from GeoJSON.

Design:
- LatLng is immutable (frozen dataclass)
- LatLngBounds grows monotonically via extend(), never shrinks
- Shapes own their coordinates, options and property bag outright
- to_dict() for JSON export

Axis order:
    GeoJSON positions are [lon, lat]. Everything in this module is (lat, lng);
    the swap happens once, in LatLng.from_position().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class LatLng:
    """
    Immutable geographic point in (lat, lng) order.

    Example:
        >>> LatLng.from_position([-122.4, 37.8])
        LatLng(lat=37.8, lng=-122.4)
    """

    lat: float
    lng: float

    @classmethod
    def from_position(cls, position: Sequence[float]) -> "LatLng":
        """
        Build from a GeoJSON position ([lon, lat, ...]).

        Extra members (altitude) are ignored. Non-numeric or short positions
        raise the native TypeError / ValueError / IndexError.
        """
        return cls(lat=float(position[1]), lng=float(position[0]))

    def to_dict(self) -> Dict[str, float]:
        return {'lat': self.lat, 'lng': self.lng}

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "LatLng":
        """
        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(lat=float(data['lat']), lng=float(data['lng']))
        except KeyError as e:
            raise ValueError(f"Missing required LatLng field: {e}") from e
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid LatLng data: {e}") from e


class LatLngBounds:
    """
    Axis-aligned box in (lat, lng) space.

    Starts empty; every extend() grows it to include the point.

    Invariants:
        - south <= north and west <= east once non-empty
        - extend() never shrinks the box
    """

    __slots__ = ('south', 'west', 'north', 'east')

    def __init__(self, points: Optional[Sequence[LatLng]] = None):
        self.south: Optional[float] = None
        self.west: Optional[float] = None
        self.north: Optional[float] = None
        self.east: Optional[float] = None
        for point in points or ():
            self.extend(point)

    @property
    def is_empty(self) -> bool:
        return self.south is None

    def extend(self, point: LatLng) -> "LatLngBounds":
        """Grow the box to include point. Returns self for chaining."""
        if self.is_empty:
            self.south = self.north = point.lat
            self.west = self.east = point.lng
            return self

        self.south = min(self.south, point.lat)
        self.north = max(self.north, point.lat)
        self.west = min(self.west, point.lng)
        self.east = max(self.east, point.lng)
        return self

    def union(self, other: "LatLngBounds") -> "LatLngBounds":
        """Grow the box to include another box. Returns self."""
        if other.is_empty:
            return self
        self.extend(LatLng(other.south, other.west))
        self.extend(LatLng(other.north, other.east))
        return self

    def contains(self, point: LatLng) -> bool:
        if self.is_empty:
            return False
        return (
            self.south <= point.lat <= self.north
            and self.west <= point.lng <= self.east
        )

    @property
    def south_west(self) -> Optional[LatLng]:
        return None if self.is_empty else LatLng(self.south, self.west)

    @property
    def north_east(self) -> Optional[LatLng]:
        return None if self.is_empty else LatLng(self.north, self.east)

    @property
    def center(self) -> Optional[LatLng]:
        if self.is_empty:
            return None
        return LatLng(
            lat=(self.south + self.north) / 2,
            lng=(self.west + self.east) / 2,
        )

    def copy(self) -> "LatLngBounds":
        clone = LatLngBounds()
        clone.south, clone.west = self.south, self.west
        clone.north, clone.east = self.north, self.east
        return clone

    def to_dict(self) -> Optional[Dict[str, float]]:
        """Serialize to dict; None for an empty box."""
        if self.is_empty:
            return None
        return {
            'south': self.south,
            'west': self.west,
            'north': self.north,
            'east': self.east,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, float]]) -> "LatLngBounds":
        """
        Deserialize from dict (None gives an empty box).

        Raises:
            ValueError: If required keys missing or invalid values
        """
        bounds = cls()
        if data is None:
            return bounds
        try:
            bounds.extend(LatLng(float(data['south']), float(data['west'])))
            bounds.extend(LatLng(float(data['north']), float(data['east'])))
        except KeyError as e:
            raise ValueError(f"Missing required bounds field: {e}") from e
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid bounds data: {e}") from e
        return bounds

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LatLngBounds):
            return NotImplemented
        return (
            self.south == other.south
            and self.west == other.west
            and self.north == other.north
            and self.east == other.east
        )

    def __repr__(self) -> str:
        if self.is_empty:
            return "LatLngBounds(empty)"
        return (
            f"LatLngBounds(south={self.south}, west={self.west}, "
            f"north={self.north}, east={self.east})"
        )


def _export_properties(properties: Dict[str, Any]) -> Dict[str, Any]:
    exported = dict(properties)
    bounds = exported.get('bounds')
    if isinstance(bounds, LatLngBounds):
        exported['bounds'] = bounds.to_dict()
    return exported


def _export_options(options: Dict[str, Any], *geometry_keys: str) -> Dict[str, Any]:
    return {k: v for k, v in options.items() if k not in geometry_keys}


@dataclass
class Marker:
    """
    Point shape.

    Attributes:
        position: Marker location
        options: Construction options (style, icon, interactivity flags)
        properties: Property bag; carries 'type' and 'bounds' once built
    """

    position: LatLng
    options: Dict[str, Any] = field(default_factory=dict)
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def bounds(self) -> Optional[LatLngBounds]:
        return self.properties.get('bounds')

    def to_dict(self) -> Dict[str, Any]:
        return {
            'shape': 'marker',
            'position': self.position.to_dict(),
            'options': _export_options(self.options, 'position'),
            'properties': _export_properties(self.properties),
        }


@dataclass
class Polyline:
    """Open path shape built from a LineString."""

    path: List[LatLng]
    options: Dict[str, Any] = field(default_factory=dict)
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def bounds(self) -> Optional[LatLngBounds]:
        return self.properties.get('bounds')

    def to_dict(self) -> Dict[str, Any]:
        return {
            'shape': 'polyline',
            'path': [p.to_dict() for p in self.path],
            'options': _export_options(self.options, 'path'),
            'properties': _export_properties(self.properties),
        }


@dataclass
class Polygon:
    """
    Filled shape built from a Polygon.

    paths[0] is the outer ring; paths[1:] are holes, wound opposite to the
    outer ring.
    """

    paths: List[List[LatLng]]
    options: Dict[str, Any] = field(default_factory=dict)
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def bounds(self) -> Optional[LatLngBounds]:
        return self.properties.get('bounds')

    @property
    def outer_ring(self) -> List[LatLng]:
        return self.paths[0] if self.paths else []

    @property
    def holes(self) -> List[List[LatLng]]:
        return self.paths[1:]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'shape': 'polygon',
            'paths': [[p.to_dict() for p in ring] for ring in self.paths],
            'options': _export_options(self.options, 'paths'),
            'properties': _export_properties(self.properties),
        }
