"""
First design: one shape class switching on a kind tag, and a total
calculation that also prints. Works, but every new kind touches both.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, TextIO

from solidshapes.demos.console import banner, emit
from solidshapes.formatters import to_text
from solidshapes.model.shapes import ShapeKind, TaggedShape

logger = logging.getLogger(__name__)

TITLE = "SOLID OOP Development (First Design) - WORKING BAD DESIGN"

NOTES = (
    "For every shape added we have to change area()",
    "and the total area calculation.",
    "",
    "There are many reasons for the class to change.",
    "It means the class is violating the SRP.",
    "",
    "The class is not closed for modifications and not easily",
    "extendable. It means the class is violating the OCP.",
)


def build_shapes() -> list[TaggedShape]:
    return [
        TaggedShape(ShapeKind.SQUARE, 100.0),
        TaggedShape(ShapeKind.CIRCLE, 50.0),
        TaggedShape(ShapeKind.SQUARE, 200.0),
        TaggedShape(ShapeKind.EQUILATERAL_TRIANGLE, 100.0),
    ]


def print_total_area(shapes: Iterable[TaggedShape], stream: Optional[TextIO] = None) -> None:
    """Sums and prints in one go; the coupling this demo is about."""
    total_area = 0.0
    for shape in shapes:
        total_area += shape.area()
    emit(to_text(total_area), stream)


def run(stream: Optional[TextIO] = None) -> None:
    banner(TITLE, stream)
    for line in NOTES:
        print(line, file=stream)
    print(file=stream)

    shapes = build_shapes()
    logger.debug("Shapes: " + ", ".join(s.describe() for s in shapes))
    print_total_area(shapes, stream)
