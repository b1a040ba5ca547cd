"""
Liskov Substitution: a square that inherits from a mutable rectangle.

The two classes below are the cautionary example. Setting the width of a
SynchronizedSquare also sets its height, so code written against
MutableRectangle gets the wrong area when handed a square. The shapes in
solidshapes.model avoid this by making Square and Rectangle siblings.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from math import isclose
from typing import Optional, TextIO

from solidshapes.calculator import AreaCalculator, TotalAreaCalculator
from solidshapes.config import AREA_REL_TOLERANCE
from solidshapes.demos.console import banner, emit, separator
from solidshapes.formatters import format_number, to_text
from solidshapes.model.shapes import Circle, EquilateralTriangle, Rectangle, Shape, Square

logger = logging.getLogger(__name__)

TITLE = "Liskov Substitution Principle (LSP)"


class MutableRectangle:
    def __init__(self, height: float, width: float):
        self._height = height
        self._width = width

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = value

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = value

    def area(self) -> float:
        return self.height * self.width


class SynchronizedSquare(MutableRectangle):
    """Keeps width and height equal, which breaks MutableRectangle's contract."""

    def __init__(self, side: float):
        super().__init__(side, side)

    @property
    def side(self) -> float:
        return self._width

    @side.setter
    def side(self, value: float) -> None:
        self._width = value
        self._height = value

    @MutableRectangle.height.setter
    def height(self, value: float) -> None:
        self.side = value

    @MutableRectangle.width.setter
    def width(self, value: float) -> None:
        self.side = value


@dataclass(frozen=True)
class SubstitutionCheck:
    label: str
    expected_area: float
    actual_area: float

    @property
    def holds(self) -> bool:
        return isclose(self.actual_area, self.expected_area, rel_tol=AREA_REL_TOLERANCE)


def resize_width(rectangle: MutableRectangle, width: float) -> float:
    """Caller written against MutableRectangle: only the width should change."""
    rectangle.width = width
    return rectangle.area()


def check_substitution(label: str, rectangle: MutableRectangle, new_width: float) -> SubstitutionCheck:
    expected = rectangle.height * new_width
    actual = resize_width(rectangle, new_width)
    check = SubstitutionCheck(label=label, expected_area=expected, actual_area=actual)
    if not check.holds:
        logger.warning(f"{label}: expected area {expected}, got {actual}")
    return check


def build_shapes() -> list[Shape]:
    return [
        Rectangle(100.0, 100.0),
        Circle(50.0),
        Square(200.0),
        EquilateralTriangle(100.0),
    ]


def run(stream: Optional[TextIO] = None, calculator: Optional[TotalAreaCalculator] = None) -> None:
    banner(TITLE, stream)

    calculator = calculator or AreaCalculator()
    emit(to_text(calculator.calculate_total_area(build_shapes())), stream)

    separator(stream)

    emit(f"Rectangle Area: {format_number(Rectangle(100.0, 200.0).area())}", stream)
    emit(f"Square Area: {format_number(Square(100.0).area())}", stream)

    separator(stream)

    checks = [
        check_substitution("MutableRectangle(200, 100)", MutableRectangle(200.0, 100.0), 100.0),
        check_substitution("SynchronizedSquare(200)", SynchronizedSquare(200.0), 100.0),
    ]
    for check in checks:
        emit(f"New Rectangle Area: {format_number(check.actual_area)}", stream)
        status = "OK" if check.holds else "VIOLATION"
        emit(f"{check.label}: expected {format_number(check.expected_area)} -> {status}", stream)
        separator(stream)
