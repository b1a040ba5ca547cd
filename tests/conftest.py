"""
Shared pytest fixtures.

Pytest discovers this file automatically and makes the fixtures available
to every test in this folder.
"""

import io
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
# Allow running the tests from a checkout without installing the package.
sys.path.insert(0, str(SRC_DIR))

from solidshapes.model import (  # noqa: E402
    Circle,
    Cube,
    EquilateralTriangle,
    Rectangle,
    ShapeKind,
    Square,
    TaggedShape,
)


@pytest.fixture
def stream():
    # In-memory text stream for demos and messagers.
    return io.StringIO()


@pytest.fixture
def mixed_shapes():
    return [
        Square(100.0),
        Circle(50.0),
        EquilateralTriangle(100.0),
        Rectangle(100.0, 200.0),
        Cube(10.0),
    ]


@pytest.fixture
def tagged_shapes():
    return [
        TaggedShape(ShapeKind.SQUARE, 100.0),
        TaggedShape(ShapeKind.CIRCLE, 50.0),
        TaggedShape(ShapeKind.SQUARE, 200.0),
        TaggedShape(ShapeKind.EQUILATERAL_TRIANGLE, 100.0),
    ]
