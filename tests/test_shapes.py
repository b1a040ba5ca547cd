"""Area and volume formulas, dimension validation and the tagged shape."""

import math

import pytest

from solidshapes.config import AREA_REL_TOLERANCE
from solidshapes.model import (
    Circle,
    Cube,
    EquilateralTriangle,
    InvalidDimensionError,
    Rectangle,
    Shape,
    ShapeError,
    ShapeKind,
    Solid,
    Square,
    TaggedShape,
    UnknownShapeError,
)


@pytest.mark.parametrize(
    "shape, expected",
    [
        (Square(100.0), 10000.0),
        (Circle(50.0), math.pi * 2500.0),
        (EquilateralTriangle(100.0), math.sqrt(3) / 4 * 10000.0),
        (Rectangle(100.0, 200.0), 20000.0),
        (Cube(100.0), 60000.0),
        (Square(0.5), 0.25),
        (Rectangle(3, 7), 21.0),
    ],
)
def test_area_matches_closed_form(shape, expected):
    assert shape.area() == pytest.approx(expected, rel=AREA_REL_TOLERANCE)


def test_reference_areas():
    assert Square(100.0).area() == 10000.0
    assert round(Circle(50.0).area(), 2) == 7853.98
    assert round(EquilateralTriangle(100.0).area(), 2) == 4330.13
    assert Rectangle(height=100.0, width=200.0).area() == 20000.0


def test_cube_has_volume_and_surface_area():
    cube = Cube(100.0)
    assert cube.area() == 60000.0
    assert cube.volume() == 1_000_000.0
    assert isinstance(cube, Solid)


@pytest.mark.parametrize("shape", [Square(1.0), Circle(1.0), EquilateralTriangle(1.0), Rectangle(1.0, 2.0)])
def test_flat_shapes_have_no_volume(shape):
    assert not isinstance(shape, Solid)
    assert not hasattr(shape, "volume")


def test_square_and_rectangle_are_siblings():
    assert not issubclass(Square, Rectangle)
    assert not issubclass(Rectangle, Square)
    assert issubclass(Square, Shape) and issubclass(Rectangle, Shape)


def test_shapes_are_immutable():
    square = Square(10.0)
    with pytest.raises(AttributeError):
        square.side = 20.0


def test_dimensions_are_stored_as_floats():
    square = Square(10)
    assert isinstance(square.side, float)
    assert square == Square(10.0)


def test_kind_tags():
    assert Square.kind is ShapeKind.SQUARE
    assert Circle(1.0).kind is ShapeKind.CIRCLE
    assert EquilateralTriangle.kind == "equilateral triangle"
    assert Cube.kind is ShapeKind.CUBE


def test_circle_from_diameter():
    circle = Circle.from_diameter(100.0)
    assert circle.radius == 50.0
    assert circle.diameter == 100.0
    assert circle.area() == pytest.approx(Circle(50.0).area(), rel=AREA_REL_TOLERANCE)


@pytest.mark.parametrize("value", [0, 0.0, -1.0, math.inf, -math.inf, math.nan, "10", None, True])
def test_invalid_dimensions_are_rejected(value):
    with pytest.raises(InvalidDimensionError) as exc_info:
        Square(value)
    assert exc_info.value.dimension == "side"
    assert exc_info.value.shape_name == "Square"


def test_invalid_second_dimension_is_named():
    with pytest.raises(InvalidDimensionError, match="'width'"):
        Rectangle(10.0, -5.0)


def test_invalid_diameter():
    with pytest.raises(InvalidDimensionError, match="'diameter'"):
        Circle.from_diameter(0.0)


def test_shape_errors_are_value_errors():
    assert issubclass(InvalidDimensionError, ShapeError)
    assert issubclass(UnknownShapeError, ShapeError)
    assert issubclass(ShapeError, ValueError)


def test_describe():
    assert Square(100.0).describe() == "Square(side=100)"
    assert Rectangle(1.5, 2.0).describe() == "Rectangle(height=1.5, width=2)"
    assert TaggedShape(ShapeKind.CIRCLE, 50.0).describe() == "TaggedShape(circle, width=50)"


class TestTaggedShape:
    @pytest.mark.parametrize(
        "kind, expected",
        [
            (ShapeKind.SQUARE, 10000.0),
            (ShapeKind.CIRCLE, math.pi * 10000.0),
            (ShapeKind.EQUILATERAL_TRIANGLE, math.sqrt(3) / 4 * 10000.0),
        ],
    )
    def test_area_by_kind(self, kind, expected):
        assert TaggedShape(kind, 100.0).area() == pytest.approx(expected, rel=AREA_REL_TOLERANCE)

    def test_matches_class_per_kind(self):
        assert TaggedShape(ShapeKind.CIRCLE, 50.0).area() == Circle(50.0).area()
        assert TaggedShape(ShapeKind.SQUARE, 7.0).area() == Square(7.0).area()

    def test_kind_accepts_string_value(self):
        shape = TaggedShape("square", 2.0)
        assert shape.kind is ShapeKind.SQUARE
        assert shape.area() == 4.0

    @pytest.mark.parametrize("kind", [ShapeKind.UNKNOWN, ShapeKind.RECTANGLE, ShapeKind.CUBE])
    def test_unknown_kind_fails_on_area(self, kind):
        shape = TaggedShape(kind, 100.0)
        with pytest.raises(UnknownShapeError) as exc_info:
            shape.area()
        assert exc_info.value.kind is kind

    def test_unrecognised_kind_name_is_rejected(self):
        with pytest.raises(ValueError):
            TaggedShape("hexagon", 1.0)

    def test_width_is_validated(self):
        with pytest.raises(InvalidDimensionError):
            TaggedShape(ShapeKind.SQUARE, -1.0)
