"""
Unicode superscript / subscript glyph tables.

Forward tables map a single glyph to its ASCII base character; reverse
tables are derived from them once, at import time, and are read-only.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Forward maps: glyph → ASCII
# ---------------------------------------------------------------------------
SUPERSCRIPT_GLYPHS: Mapping[str, str] = MappingProxyType({
    "⁰": "0", "¹": "1", "²": "2", "³": "3", "⁴": "4",
    "⁵": "5", "⁶": "6", "⁷": "7", "⁸": "8", "⁹": "9",
    "⁺": "+", "⁻": "-", "⁼": "=", "⁽": "(", "⁾": ")",
    "ⁿ": "n", "ⁱ": "i",
})

SUBSCRIPT_GLYPHS: Mapping[str, str] = MappingProxyType({
    "₀": "0", "₁": "1", "₂": "2", "₃": "3", "₄": "4",
    "₅": "5", "₆": "6", "₇": "7", "₈": "8", "₉": "9",
    "₊": "+", "₋": "-", "₌": "=", "₍": "(", "₎": ")",
    "ₐ": "a", "ₑ": "e", "ₒ": "o", "ₓ": "x", "ₕ": "h",
    "ₖ": "k", "ₗ": "l", "ₘ": "m", "ₙ": "n", "ₚ": "p",
    "ₛ": "s", "ₜ": "t",
})


def _invert(table: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType({ascii_: glyph for glyph, ascii_ in table.items()})


# ---------------------------------------------------------------------------
# Reverse maps: ASCII → glyph
# ---------------------------------------------------------------------------
SUPERSCRIPT_FROM_ASCII: Mapping[str, str] = _invert(SUPERSCRIPT_GLYPHS)
SUBSCRIPT_FROM_ASCII: Mapping[str, str] = _invert(SUBSCRIPT_GLYPHS)


def is_superscript_glyph(char: str) -> bool:
    return char in SUPERSCRIPT_GLYPHS


def is_subscript_glyph(char: str) -> bool:
    return char in SUBSCRIPT_GLYPHS
