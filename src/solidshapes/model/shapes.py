"""
Shape Model
===========
Area (and volume) capable shapes used by the demos.

Two styles of dispatch live here side by side:

1. ``TaggedShape``: one class carrying a ``ShapeKind`` tag and a single width.
   The area formula is chosen by matching on the tag. Adding a kind means
   editing ``area()``.
2. ``Shape`` subclasses: one frozen dataclass per kind, each owning exactly
   the dimensions it needs. Adding a kind means adding a class.

Conventions:
    Circles are always described by their radius. Use ``Circle.from_diameter``
    when only a diameter is at hand.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import StrEnum
from math import isfinite, pi, sqrt
from numbers import Real
from typing import ClassVar

from solidshapes.model.errors import InvalidDimensionError, UnknownShapeError

SQRT3_OVER_4: float = sqrt(3) / 4


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class ShapeKind(StrEnum):
    SQUARE = "square"
    CIRCLE = "circle"
    EQUILATERAL_TRIANGLE = "equilateral triangle"
    RECTANGLE = "rectangle"
    CUBE = "cube"
    UNKNOWN = "unknown"


# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------
def validate_dimension(shape_name: str, dimension: str, value: object) -> float:
    """
    Check that a dimension is a finite real number greater than zero.

    Returns:
        The value as a float.

    Raises:
        InvalidDimensionError: for non-numeric, non-finite, zero or negative values.
    """
    # bool is a Real, but Square(True) is certainly a mistake
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidDimensionError(shape_name, dimension, value)

    number = float(value)
    if not isfinite(number) or number <= 0.0:
        raise InvalidDimensionError(shape_name, dimension, value)
    return number


def _format_dimension(value: float) -> str:
    return f"{value:g}"


# ------------------------------------------------------------------------------
# Capabilities
# ------------------------------------------------------------------------------
class Shape(ABC):
    """
    Anything with an area.
    Subclasses are dataclasses whose fields are all dimensions.
    """
    kind: ClassVar[ShapeKind] = ShapeKind.UNKNOWN

    def __post_init__(self) -> None:
        for f in fields(self):
            number = validate_dimension(type(self).__name__, f.name, getattr(self, f.name))
            # frozen dataclass: normalise ints to floats through object.__setattr__
            object.__setattr__(self, f.name, number)

    @abstractmethod
    def area(self) -> float:
        """Return the area (surface area for solids)."""
        pass

    def describe(self) -> str:
        dims = ", ".join(f"{f.name}={_format_dimension(getattr(self, f.name))}" for f in fields(self))
        return f"{type(self).__name__}({dims})"


class Solid(ABC):
    """Anything with a volume. Kept apart from Shape so flat shapes never have to fake one."""

    @abstractmethod
    def volume(self) -> float:
        pass


# ------------------------------------------------------------------------------
# Concrete shapes
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Square(Shape):
    side: float
    kind: ClassVar[ShapeKind] = ShapeKind.SQUARE

    def area(self) -> float:
        return self.side * self.side


@dataclass(frozen=True)
class Circle(Shape):
    radius: float
    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    @classmethod
    def from_diameter(cls, diameter: float) -> Circle:
        validate_dimension(cls.__name__, "diameter", diameter)
        return cls(radius=diameter / 2)

    @property
    def diameter(self) -> float:
        return 2 * self.radius

    def area(self) -> float:
        return pi * self.radius * self.radius


@dataclass(frozen=True)
class EquilateralTriangle(Shape):
    side: float
    kind: ClassVar[ShapeKind] = ShapeKind.EQUILATERAL_TRIANGLE

    def area(self) -> float:
        return SQRT3_OVER_4 * self.side * self.side


@dataclass(frozen=True)
class Rectangle(Shape):
    height: float
    width: float
    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    def area(self) -> float:
        return self.height * self.width


@dataclass(frozen=True)
class Cube(Shape, Solid):
    side: float
    kind: ClassVar[ShapeKind] = ShapeKind.CUBE

    def area(self) -> float:
        """Surface area of all six faces."""
        return 6 * self.side * self.side

    def volume(self) -> float:
        return self.side * self.side * self.side


# ------------------------------------------------------------------------------
# Kind-tagged shape
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class TaggedShape:
    """
    A single class for every flat shape, told apart by ``kind``.

    ``width`` is the side length for squares and triangles and the radius
    for circles. Any kind without a formula (rectangles need two dimensions,
    cubes are solids) fails in ``area()``.
    """
    kind: ShapeKind
    width: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ShapeKind(self.kind))
        object.__setattr__(self, "width", validate_dimension(f"TaggedShape[{self.kind}]", "width", self.width))

    def area(self) -> float:
        match self.kind:
            case ShapeKind.SQUARE:
                return self.width * self.width
            case ShapeKind.CIRCLE:
                return pi * self.width * self.width
            case ShapeKind.EQUILATERAL_TRIANGLE:
                return SQRT3_OVER_4 * self.width * self.width
            case _:
                raise UnknownShapeError(self.kind)

    def describe(self) -> str:
        return f"TaggedShape({self.kind}, width={_format_dimension(self.width)})"
