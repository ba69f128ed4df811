"""
Document Dispatcher Module
==========================

Walks a parsed GeoJSON tree and hands each geometry to the builder.

    FeatureCollection -> Feature -> geometry
    GeometryCollection -> geometry (GeometryCollection members recurse)
    bare geometry

Failure policy:
    Unrecognised types and missing members (features, geometries, geometry,
    coordinates) produce nothing: the branch returns None, a warning is
    logged, and sibling features carry on. Malformed coordinates are not
    validated and raise from the builder.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from geoscene.config import SceneConfig
from geoscene.document.scene import Scene, flatten_result
from geoscene.document.types import GeometryType, SIMPLE_GEOMETRY_TYPES
from geoscene.geometry.builder import GeometryBuilder
from geoscene.logging import LogEvent, StructuredLogger, create_logger
from geoscene.rendering.factory import ShapeFactory

ParseResult = Union[Any, List[Any], None]


class DocumentParser:
    """
    GeoJSON document -> shape, list of shapes, or None.

    Return shape follows the input:
    - bare geometry or Feature of a singular geometry: one shape
    - Multi* geometry: list of shapes
    - FeatureCollection / GeometryCollection: flat list, input order
    - anything unrecognised or incomplete: None

    Usage:
        parser = DocumentParser()
        shapes = parser.parse(document, options={"clickable": True})

        # Or from YAML config
        parser = DocumentParser.from_yaml("scene.yaml")
        scene = parser.parse_scene(document)
        scene.bounds
    """

    def __init__(
        self,
        builder: Optional[GeometryBuilder] = None,
        config: Optional[SceneConfig] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            builder: Geometry builder (default: built from config)
            config: Defaults for options/properties (default: SceneConfig())
            logger: Structured logger (default: component "parser")
        """
        self.config = config or SceneConfig()
        self.logger = logger or create_logger("parser", level=self.config.logging_level)
        self.builder = builder or GeometryBuilder(
            correct_winding=self.config.correct_winding,
            logger=create_logger("builder", level=self.config.logging_level),
        )

        self._builders = {
            GeometryType.POINT: self.builder.build_point,
            GeometryType.MULTI_POINT: self.builder.build_multi_point,
            GeometryType.LINE_STRING: self.builder.build_line_string,
            GeometryType.MULTI_LINE_STRING: self.builder.build_multi_line_string,
            GeometryType.POLYGON: self.builder.build_polygon,
            GeometryType.MULTI_POLYGON: self.builder.build_multi_polygon,
        }

    @classmethod
    def from_config(
        cls,
        config: SceneConfig,
        factory: Optional[ShapeFactory] = None,
    ) -> "DocumentParser":
        """Wire builder, factory and loggers from a config."""
        builder = GeometryBuilder(
            factory=factory,
            correct_winding=config.correct_winding,
            logger=create_logger("builder", level=config.logging_level),
        )
        return cls(builder=builder, config=config)

    @classmethod
    def from_yaml(
        cls,
        yaml_path: Union[str, Path],
        factory: Optional[ShapeFactory] = None,
    ) -> "DocumentParser":
        """
        Load a SceneConfig from YAML and build a parser from it.

        Raises:
            FileNotFoundError: If yaml_path does not exist
            ValueError: If the config fails validation
        """
        logger = create_logger("config")
        try:
            config = SceneConfig.from_yaml(yaml_path)
        except ValueError as e:
            logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Scene config failed validation",
                metadata={'path': str(yaml_path)},
                exc_info=e,
            )
            raise

        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded scene config",
            metadata={
                'path': str(yaml_path),
                'correct_winding': config.correct_winding,
                'log_level': config.log_level,
            },
        )
        return cls.from_config(config, factory=factory)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(
        self,
        document: Any,
        options: Optional[Dict[str, Any]] = None,
        properties: Optional[Dict[str, Any]] = None,
    ) -> ParseResult:
        """
        Convert a GeoJSON document into shapes.

        Args:
            document: Parsed GeoJSON (dicts/lists/scalars); never mutated
            options: Render options forwarded to every shape
                     (default: config.default_options)
            properties: Properties used when the document has none
                        (default: config.default_properties)

        Returns:
            A shape, a list of shapes, or None
        """
        if options is None:
            options = self.config.options()

        result = self._dispatch(document, options, properties)

        self.logger.info(
            event=LogEvent.DOCUMENT_PARSED,
            message="Parsed GeoJSON document",
            metadata={
                'type': document.get('type') if isinstance(document, dict) else None,
                'shape_count': len(flatten_result(result)),
            },
        )
        return result

    def parse_scene(
        self,
        document: Any,
        options: Optional[Dict[str, Any]] = None,
        properties: Optional[Dict[str, Any]] = None,
    ) -> Scene:
        """parse() flattened into a Scene (empty when nothing was produced)."""
        return Scene.from_result(self.parse(document, options, properties))

    def create_feature(
        self,
        geometry: Any,
        options: Dict[str, Any],
        properties: Dict[str, Any],
    ) -> ParseResult:
        """
        Geometry-only dispatch.

        Simple geometries go to the builder; a GeometryCollection re-enters
        full dispatch. Everything else produces nothing.
        """
        if not isinstance(geometry, dict):
            return self._skip(geometry, "geometry is not an object")

        geometry_type = GeometryType.from_value(geometry.get('type'))

        if geometry_type in SIMPLE_GEOMETRY_TYPES:
            if geometry.get('coordinates') is None:
                return self._skip(geometry, "missing coordinates")
            return self._builders[geometry_type](geometry, options, properties)

        if geometry_type is GeometryType.GEOMETRY_COLLECTION:
            return self._dispatch(geometry, options, properties)

        return self._skip(geometry, "unsupported geometry type")

    # ------------------------------------------------------------------

    def _dispatch(
        self,
        document: Any,
        options: Dict[str, Any],
        properties: Optional[Dict[str, Any]],
    ) -> ParseResult:
        if not isinstance(document, dict):
            return self._skip(document, "document is not an object")

        if isinstance(document.get('properties'), dict):
            properties = document['properties']
        elif properties is None:
            properties = self.config.properties()

        document_type = GeometryType.from_value(document.get('type'))

        if document_type is GeometryType.FEATURE_COLLECTION:
            features = document.get('features')
            if features is None:
                return self._skip(document, "missing features")
            return self._collect(
                self._collection_member(feature, options, properties) for feature in features
            )

        if document_type is GeometryType.GEOMETRY_COLLECTION:
            geometries = document.get('geometries')
            if geometries is None:
                return self._skip(document, "missing geometries")
            return self._collect(
                self.create_feature(geometry, options, properties) for geometry in geometries
            )

        if document_type is GeometryType.FEATURE:
            geometry = document.get('geometry')
            if geometry is None:
                return self._skip(document, "missing geometry")
            return self.create_feature(geometry, options, properties)

        if document_type in SIMPLE_GEOMETRY_TYPES:
            if document.get('coordinates') is None:
                return self._skip(document, "missing coordinates")
            return self.create_feature(document, options, properties)

        return self._skip(document, "unrecognised type")

    def _collection_member(
        self,
        feature: Any,
        options: Dict[str, Any],
        properties: Dict[str, Any],
    ) -> ParseResult:
        """
        One FeatureCollection member.

        The member's own ``type`` tag is not checked; its geometry is built
        directly. Its own properties, when a mapping, take precedence over
        the collection's.
        """
        if not isinstance(feature, dict):
            return self._skip(feature, "feature is not an object")

        if isinstance(feature.get('properties'), dict):
            properties = feature['properties']

        geometry = feature.get('geometry')
        if geometry is None:
            return self._skip(feature, "missing geometry")
        return self.create_feature(geometry, options, properties)

    @staticmethod
    def _collect(results) -> List[Any]:
        """Flatten member results into one list, dropping members that produced nothing."""
        shapes: List[Any] = []
        for result in results:
            if result is None:
                continue
            if isinstance(result, list):
                shapes.extend(result)
            else:
                shapes.append(result)
        return shapes

    def _skip(self, node: Any, reason: str) -> None:
        self.logger.warning(
            event=LogEvent.DOCUMENT_SKIPPED,
            message=f"Skipped GeoJSON object: {reason}",
            metadata={
                'reason': reason,
                'type': node.get('type') if isinstance(node, dict) else type(node).__name__,
            },
        )
        return None


def parse(
    document: Any,
    options: Optional[Dict[str, Any]] = None,
    properties: Optional[Dict[str, Any]] = None,
    factory: Optional[ShapeFactory] = None,
) -> ParseResult:
    """
    One-shot convenience: parse a document with default configuration.

    Example:
        >>> marker = parse({"type": "Point", "coordinates": [2.35, 48.85]})
        >>> marker.position
        LatLng(lat=48.85, lng=2.35)
    """
    return DocumentParser.from_config(SceneConfig(), factory=factory).parse(
        document, options, properties
    )
