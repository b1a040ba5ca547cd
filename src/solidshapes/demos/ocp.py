"""
Open/Closed: one class per shape kind. A new kind is a new class; the
calculator and the formatters stay untouched.
"""
from __future__ import annotations

import logging
from typing import Optional, TextIO

from solidshapes.calculator import calculate_total_area
from solidshapes.demos.console import banner, emit
from solidshapes.formatters import to_html, to_json, to_text
from solidshapes.model.shapes import Circle, EquilateralTriangle, Shape, Square

logger = logging.getLogger(__name__)

TITLE = "Open closed principle (OCP)"


def build_shapes() -> list[Shape]:
    return [
        Square(100.0),
        Circle(50.0),
        Square(200.0),
        EquilateralTriangle(100.0),
    ]


def run(stream: Optional[TextIO] = None) -> None:
    banner(TITLE, stream)

    shapes = build_shapes()
    logger.debug("Shapes: " + ", ".join(s.describe() for s in shapes))
    total = calculate_total_area(shapes)

    emit(to_json(total), stream)
    emit(to_html(total), stream)
    emit(to_text(total), stream)
