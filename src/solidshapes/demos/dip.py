"""
Dependency Inversion: the program depends on the Messager abstraction and
picks the concrete messager at run time.
"""
from __future__ import annotations

from typing import Optional, TextIO

from solidshapes.demos.console import banner
from solidshapes.messaging import Messager, TextMessager, create_messager

TITLE = "Dependency inversion principle (DIP)"

TOTAL_AREA = 100.0


def report(messager: Messager, value: float) -> None:
    messager.message(value)


def run(stream: Optional[TextIO] = None) -> None:
    banner(TITLE, stream)

    message = create_messager("html", stream)
    report(message, TOTAL_AREA)

    report(TextMessager(stream), TOTAL_AREA)
