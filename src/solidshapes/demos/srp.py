"""
Single Responsibility: the shapes only know their area, the calculator only
sums, and formatting lives in its own module.
"""
from __future__ import annotations

import logging
from typing import Optional, TextIO

from solidshapes.calculator import calculate_total_area
from solidshapes.demos.console import banner, emit
from solidshapes.demos.first_design import build_shapes
from solidshapes.formatters import OutputFormat, format_total

logger = logging.getLogger(__name__)

TITLE = "Single Responsibility Principle (SRP)"


def run(stream: Optional[TextIO] = None) -> None:
    banner(TITLE, stream)

    shapes = build_shapes()
    logger.debug("Shapes: " + ", ".join(s.describe() for s in shapes))
    total = calculate_total_area(shapes)

    for fmt in OutputFormat:
        emit(format_total(total, fmt), stream)
