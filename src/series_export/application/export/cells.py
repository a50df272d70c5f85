"""Application export – CSV cell and row formatting.

Numbers, booleans and ``None`` are written as bare literals (``3``,
``true``, ``null``). Any other value is treated as text: HTML entities are
resolved, the text is CSV-escaped and then wrapped in double quotes.
"""
from __future__ import annotations

import html
import math
import re
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable

__all__ = [
    "END_COLUMN",
    "END_ROW",
    "QUOTE",
    "csv_escaped",
    "format_cell",
    "format_row",
    "format_special_header",
    "html_decoded",
    "markup_unescaped",
]

END_COLUMN = ","
END_ROW = "\r\n"
QUOTE = '"'

_ENTITY_RE = re.compile(r"&[^;]+;")
_FORMULA_TRIGGER_RE = re.compile(r"^([-+=@])")
_TRAILING_SPACE_RE = re.compile(r"\s+\Z")
_MARKUP_ENTITY_RE = re.compile(r"&(?:amp|lt|gt|quot|#39);")
_MARKUP_ENTITIES = {"&amp;": "&", "&lt;": "<", "&gt;": ">", "&quot;": "\"", "&#39;": "'"}


def _decode_entity(match: re.Match[str]) -> str:
    return html.unescape(match.group(0))


def html_decoded(text: str) -> str:
    """Resolve ``&...;`` character references, twice for doubly-encoded text."""
    if not text:
        return text
    return _ENTITY_RE.sub(_decode_entity, _ENTITY_RE.sub(_decode_entity, text))


def markup_unescaped(text: str) -> str:
    """Decode only the five markup entities: amp, lt, gt, quot and #39."""
    return _MARKUP_ENTITY_RE.sub(lambda match: _MARKUP_ENTITIES[match.group(0)], text)


def csv_escaped(text: str) -> str:
    """Double quotes, neutralise a leading formula trigger, drop trailing space."""
    if not text:
        return text
    text = text.replace(QUOTE, QUOTE + QUOTE)
    text = _FORMULA_TRIGGER_RE.sub(r"'\1", text)
    return _TRAILING_SPACE_RE.sub("", text)


def _format_float(value: float) -> str:
    # shortest round-trip digits, positional for 1e-6 <= |value| < 1e21
    shortest = repr(value)
    magnitude = abs(value)
    if magnitude == 0 or 1e-6 <= magnitude < 1e21:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(shortest), "f")
    mantissa, exponent = shortest.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def _format_number(value: Any) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _format_float(value)
    return str(value)


def format_cell(value: Any) -> str:
    """Render one field. Empty text is returned as-is, without quotes."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Real, Decimal)):
        return _format_number(value)

    text = value if isinstance(value, str) else str(value)
    if not text:
        return text
    return f"{QUOTE}{csv_escaped(markup_unescaped(html_decoded(text)))}{QUOTE}"


def format_row(row: Iterable[Any], add_end_row_delimiter: bool = True) -> str:
    text = END_COLUMN.join(format_cell(cell) for cell in row)
    return text + END_ROW if add_end_row_delimiter else text


def format_special_header(excel: bool) -> str:  # noqa: ARG001
    """Reserved for an Excel ``sep=`` preamble; nothing is emitted yet."""
    return ""
