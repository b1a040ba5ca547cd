"""Area and volume aggregation over shape collections."""
from __future__ import annotations

import logging
from typing import Iterable, Protocol

import numpy as np

from solidshapes.model.shapes import Shape, Solid, TaggedShape

logger = logging.getLogger(__name__)

AreaShape = Shape | TaggedShape


class TotalAreaCalculator(Protocol):
    def calculate_total_area(self, shapes: Iterable[AreaShape]) -> float: ...


def calculate_total_area(shapes: Iterable[AreaShape]) -> float:
    """
    Sum the area of every shape in the collection.

    Args:
        shapes: Any iterable of objects with an ``area()`` method. It is consumed once.

    Returns:
        The total area, 0.0 for an empty collection.
    """
    areas = np.fromiter((shape.area() for shape in shapes), dtype=np.float64)
    total = float(areas.sum())
    logger.debug(f"Total area of {areas.size} shapes: {total}")
    return total


def calculate_total_volume(solids: Iterable[Solid]) -> float:
    """Sum the volume of every solid in the collection."""
    volumes = np.fromiter((solid.volume() for solid in solids), dtype=np.float64)
    total = float(volumes.sum())
    logger.debug(f"Total volume of {volumes.size} solids: {total}")
    return total


class AreaCalculator:
    """Stateless object form of calculate_total_area, for code that takes a TotalAreaCalculator."""

    def calculate_total_area(self, shapes: Iterable[AreaShape]) -> float:
        return calculate_total_area(shapes)
