"""
Interface Segregation: area and volume are separate capabilities, so a
Square is never asked for a volume it does not have.
"""
from __future__ import annotations

import logging
from typing import Optional, TextIO

from solidshapes.calculator import calculate_total_volume
from solidshapes.demos.console import banner, emit
from solidshapes.formatters import format_number
from solidshapes.model.shapes import Circle, Cube, Shape, Solid, Square

logger = logging.getLogger(__name__)

TITLE = "Interface segregation principle (ISP)"


def run(stream: Optional[TextIO] = None) -> None:
    banner(TITLE, stream)

    cube = Cube(100.0)
    emit(f"Cube Area:   {format_number(cube.area())}", stream)
    emit(f"Cube Volume: {format_number(cube.volume())}", stream)

    square = Square(100.0)
    emit(f"Square Area:   {format_number(square.area())}", stream)

    # Only the solids take part in the volume total
    mixed: list[Shape] = [square, cube, Circle(50.0), Cube(10.0)]
    solids = [shape for shape in mixed if isinstance(shape, Solid)]
    logger.debug(f"{len(solids)} of {len(mixed)} shapes have a volume")
    emit(f"Total Volume: {format_number(calculate_total_volume(solids))}", stream)
