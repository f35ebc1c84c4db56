"""
Rewrite passes that turn plain-text notation into rich-text tags.

Each pass is a pure ``str -> str`` function parameterised by a
FormatConfig.  The pipeline in api.py chains them in a fixed order:

  1. Unicode glyphs   x² → x<sup>…2…</sup>
  2. Caret notation   x^2, e^{2x}, x^(n+1)
  3. Underscore       x_1, a_{ij}
  4. Fractions        1/2, (a+b)/(c+d), {x}/{y}
  5. Chemical         H2O → H<sub>…2…</sub>O  (outside existing tags only)

Malformed notation is left untouched rather than raising.
"""
from __future__ import annotations

import re
from typing import Callable

from .config import FormatConfig
from .glyphs import SUBSCRIPT_GLYPHS, SUPERSCRIPT_GLYPHS
from .markup import fraction, subscript, superscript

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------
# Script operand: {group} | (group) | run of word chars, '+' or '-'
_SCRIPT_OPERAND = r"(\{[^}]+\}|\([^)]+\)|[\w+\-]+)"
_CARET_RE = re.compile(r"\^" + _SCRIPT_OPERAND)
_UNDERSCORE_RE = re.compile(r"_" + _SCRIPT_OPERAND)

_FRACTION_OPERAND = r"(\([^)]+\)|\{[^}]+\}|\d+)"
_FRACTION_RE = re.compile(_FRACTION_OPERAND + "/" + _FRACTION_OPERAND)

_CHEMICAL_RE = re.compile(r"([A-Z][a-z]?)(\d+)")

# A complete tag such as <sub> or <size=60%>
_TAG_RE = re.compile(r"<[^<>]*>")

_DELIMITERS = {"{": "}", "(": ")"}


def _strip_delimiters(content: str) -> str:
    """Remove one enclosing ``{}`` or ``()`` pair, if present."""
    if len(content) >= 2 and _DELIMITERS.get(content[0]) == content[-1]:
        return content[1:-1]
    return content


# ---------------------------------------------------------------------------
# Pass 1 – Unicode glyphs
# ---------------------------------------------------------------------------

def convert_unicode_glyphs(text: str, config: FormatConfig) -> str:
    """Replace each super/subscript glyph with a tag around its ASCII base."""
    table = {
        glyph: superscript(base, config.superscript_size)
        for glyph, base in SUPERSCRIPT_GLYPHS.items()
    }
    table.update(
        (glyph, subscript(base, config.subscript_size))
        for glyph, base in SUBSCRIPT_GLYPHS.items()
    )
    return text.translate(str.maketrans(table))


# ---------------------------------------------------------------------------
# Passes 2 & 3 – caret / underscore
# ---------------------------------------------------------------------------

def _script_replacer(
    wrap: Callable[[str, float], str], size: float
) -> Callable[[re.Match], str]:
    def _replace(m: re.Match) -> str:
        content = m.group(1)
        if not content:
            return m.group(0)
        content = _strip_delimiters(content)
        if not content:
            return m.group(0)
        return wrap(content, size)

    return _replace


def convert_caret_notation(text: str, config: FormatConfig) -> str:
    """Convert ``^x`` / ``^{...}`` / ``^(...)`` into superscript tags."""
    return _CARET_RE.sub(_script_replacer(superscript, config.superscript_size), text)


def convert_underscore_subscript(text: str, config: FormatConfig) -> str:
    """Convert ``_x`` / ``_{...}`` / ``_(...)`` into subscript tags."""
    return _UNDERSCORE_RE.sub(_script_replacer(subscript, config.subscript_size), text)


# ---------------------------------------------------------------------------
# Pass 4 – fractions
# ---------------------------------------------------------------------------

def convert_fractions(text: str, config: FormatConfig) -> str:
    """Convert ``A/B`` (digits, ``(...)`` or ``{...}`` on each side) into a fraction."""

    def _replace(m: re.Match) -> str:
        num = _strip_delimiters(m.group(1))
        den = _strip_delimiters(m.group(2))
        if not num or not den:
            return m.group(0)
        return fraction(num, den, config.fraction_size)

    return _FRACTION_RE.sub(_replace, text)


# ---------------------------------------------------------------------------
# Pass 5 – chemical formulas
# ---------------------------------------------------------------------------

def convert_chemical_formulas(text: str, config: FormatConfig) -> str:
    """Subscript the digit run after an element symbol, skipping text inside tags."""

    def _replace(m: re.Match) -> str:
        return m.group(1) + subscript(m.group(2), config.subscript_size)

    parts = _TAG_RE.split(text)
    tags = _TAG_RE.findall(text)
    processed: list[str] = []
    for k, part in enumerate(parts):
        processed.append(_CHEMICAL_RE.sub(_replace, part))
        if k < len(tags):
            processed.append(tags[k])
    return "".join(processed)


# Pipeline order; keys match FormatConfig.passes().
PASSES: tuple[tuple[str, Callable[[str, FormatConfig], str]], ...] = (
    ("unicode", convert_unicode_glyphs),
    ("caret", convert_caret_notation),
    ("underscore", convert_underscore_subscript),
    ("fractions", convert_fractions),
    ("chemical", convert_chemical_formulas),
)
