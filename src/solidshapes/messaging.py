"""
Messagers
=========
Objects that deliver a total area to an output stream.

High level code asks the registry for a messager by key and calls
``message()``; it never learns which template is used.
"""
from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import ClassVar, Optional, TextIO

from solidshapes.formatters import OutputFormat, format_total


class Messager(ABC):
    """Delivers one total per call."""
    KEY: ClassVar[str] = ""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stdout is looked up on every call
        return self._stream if self._stream is not None else sys.stdout

    @abstractmethod
    def message(self, value: float) -> None:
        pass


class FormattedMessager(Messager):
    """Writes the total in a fixed OutputFormat, followed by a blank line."""
    FORMAT: ClassVar[OutputFormat] = OutputFormat.TEXT

    def message(self, value: float) -> None:
        self.stream.write(format_total(value, self.FORMAT) + "\n\n")


_REGISTRY: dict[str, type[Messager]] = {}


def register_messager(cls: type[Messager]) -> type[Messager]:
    """Class decorator to register a messager by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls


def create_messager(key: str, stream: Optional[TextIO] = None) -> Messager:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No messager registered for key '{key}'")
    return cls(stream)


def list_messagers() -> list[str]:
    return list(_REGISTRY.keys())


@register_messager
class TextMessager(FormattedMessager):
    KEY = "text"
    FORMAT = OutputFormat.TEXT


@register_messager
class JsonMessager(FormattedMessager):
    KEY = "json"
    FORMAT = OutputFormat.JSON


@register_messager
class HtmlMessager(FormattedMessager):
    KEY = "html"
    FORMAT = OutputFormat.HTML
