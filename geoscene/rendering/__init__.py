"""
Rendering Layer
===============

Bounded Context: Shape construction.

Responsibilities:
- Define the ShapeFactory interface the builder constructs through
- Provide the default in-memory factory

Non-responsibilities:
- Drawing (left to whatever consumes the shapes)
- Coordinate handling (handled by geometry)
"""

from geoscene.rendering.factory import ShapeFactory, SceneShapeFactory

__all__ = [
    "ShapeFactory",
    "SceneShapeFactory",
]
