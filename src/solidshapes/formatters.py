"""
Output Formatting
=================
Renders a total area into one of the fixed text templates.

All functions are pure: they return strings and never print.
"""
from __future__ import annotations

from enum import StrEnum

TEXT_TEMPLATE = "Total Area: {0}"
JSON_TEMPLATE = '{{ "Total Area" : {0} }}'
HTML_TEMPLATE = "<span><strong>Total Area: </strong></span><span>{0}</span>"


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"
    HTML = "html"


def format_number(value: float) -> str:
    """
    Shortest round-trip representation of a float, without a trailing ".0".

    Examples:
        100.0 -> "100"
        7853.981633974483 -> "7853.981633974483"
    """
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def to_text(value: float) -> str:
    return TEXT_TEMPLATE.format(format_number(value))


def to_json(value: float) -> str:
    return JSON_TEMPLATE.format(format_number(value))


def to_html(value: float) -> str:
    return HTML_TEMPLATE.format(format_number(value))


def format_total(value: float, fmt: OutputFormat | str = OutputFormat.TEXT) -> str:
    """
    Render ``value`` in the requested format.

    Raises:
        ValueError: if ``fmt`` is not one of the OutputFormat values.
    """
    match OutputFormat(fmt):
        case OutputFormat.TEXT:
            return to_text(value)
        case OutputFormat.JSON:
            return to_json(value)
        case OutputFormat.HTML:
            return to_html(value)
