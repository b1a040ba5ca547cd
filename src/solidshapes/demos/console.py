"""Small printing helpers shared by the demos."""
from __future__ import annotations

from typing import Optional, TextIO

from solidshapes.config import RULE_WIDTH


def banner(title: str, stream: Optional[TextIO] = None) -> None:
    """Print a title between two rules as wide as the title."""
    rule = "=" * len(title)
    print(rule, file=stream)
    print(title, file=stream)
    print(rule + "\n", file=stream)


def separator(stream: Optional[TextIO] = None) -> None:
    print("=" * RULE_WIDTH + "\n", file=stream)


def emit(text: str, stream: Optional[TextIO] = None) -> None:
    """Print a result line followed by a blank line."""
    print(text + "\n", file=stream)
