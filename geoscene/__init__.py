"""
geoscene
========

Bounded Context: GeoJSON -> renderer-agnostic shapes.

Design Philosophy:
- Separation of Concerns: Geometry, Document traversal, Rendering separated
- Best-effort input: unrecognised pieces are skipped, not fatal
- Per-shape ownership: no two shapes share a property bag or options

Architecture:

    geoscene/
    ├── geometry/          # Shapes, bounds, winding, GeometryBuilder
    │   ├── shapes.py      # LatLng, LatLngBounds, Marker, Polyline, Polygon
    │   ├── winding.py     # Shoelace signed area, hole orientation
    │   └── builder.py     # GeometryBuilder
    │
    ├── rendering/         # Shape construction seam
    │   └── factory.py     # ShapeFactory protocol, SceneShapeFactory
    │
    ├── document/          # GeoJSON traversal
    │   ├── types.py       # GeometryType
    │   ├── dispatcher.py  # DocumentParser, parse()
    │   └── scene.py       # Scene (flattened shapes + union bounds)
    │
    ├── logging/           # Structured JSON logs
    └── config.py          # SceneConfig (YAML)

Usage:

    # 1. One-shot
    from geoscene import parse

    shapes = parse(feature_collection, options={"clickable": True})

    # 2. Configured parser
    from geoscene import DocumentParser, SceneConfig

    parser = DocumentParser.from_config(
        SceneConfig(default_options={"strokeWeight": 2})
    )
    scene = parser.parse_scene(feature_collection)
    scene.bounds        # fit the map to every shape

    # 3. Custom shape backend
    from geoscene import GeometryBuilder

    parser = DocumentParser(builder=GeometryBuilder(factory=MyMapAdapter()))
"""

# Geometry Layer
from geoscene.geometry.shapes import LatLng, LatLngBounds, Marker, Polyline, Polygon
from geoscene.geometry.winding import signed_area, is_clockwise, orient_rings
from geoscene.geometry.builder import GeometryBuilder

# Rendering Layer
from geoscene.rendering.factory import ShapeFactory, SceneShapeFactory

# Document Layer
from geoscene.document.types import GeometryType
from geoscene.document.scene import Scene
from geoscene.document.dispatcher import DocumentParser, parse

# Configuration
from geoscene.config import SceneConfig

__all__ = [
    # Geometry
    "LatLng",
    "LatLngBounds",
    "Marker",
    "Polyline",
    "Polygon",
    "signed_area",
    "is_clockwise",
    "orient_rings",
    "GeometryBuilder",
    # Rendering
    "ShapeFactory",
    "SceneShapeFactory",
    # Document
    "GeometryType",
    "Scene",
    "DocumentParser",
    "parse",
    # Configuration
    "SceneConfig",
]

__version__ = "1.0.0"
