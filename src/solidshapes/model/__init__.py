"""
The MODEL layer holds the shapes and nothing else.
It has NO knowledge of formatting or console output.
"""
from solidshapes.model.errors import InvalidDimensionError, ShapeError, UnknownShapeError
from solidshapes.model.shapes import (
    Circle,
    Cube,
    EquilateralTriangle,
    Rectangle,
    Shape,
    ShapeKind,
    Solid,
    Square,
    TaggedShape,
    validate_dimension,
)
