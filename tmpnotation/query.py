"""Read-only helpers: tag stripping and glyph detection."""
from __future__ import annotations

import re
from typing import Mapping, Optional

from .glyphs import SUBSCRIPT_GLYPHS, SUPERSCRIPT_GLYPHS, is_subscript_glyph, is_superscript_glyph

_ANY_TAG_RE = re.compile(r"<[^>]+>")
_TAG_OPENERS = ("<sup>", "<sub>", "<size=")


def plain_text(text: Optional[str]) -> Optional[str]:
    """Strip every ``<...>`` tag, keeping the text between them."""
    if not text:
        return text
    return _ANY_TAG_RE.sub("", text)


def has_formatting(text: Optional[str]) -> bool:
    """True if *text* contains a superscript, subscript or size tag opener."""
    if not text:
        return False
    return any(opener in text for opener in _TAG_OPENERS)


def has_unicode_superscript(text: Optional[str]) -> bool:
    if not text:
        return False
    return any(is_superscript_glyph(ch) for ch in text)


def has_unicode_subscript(text: Optional[str]) -> bool:
    if not text:
        return False
    return any(is_subscript_glyph(ch) for ch in text)


def has_unicode_scripts(text: Optional[str]) -> bool:
    """True if *text* contains any superscript or subscript glyph."""
    return has_unicode_superscript(text) or has_unicode_subscript(text)


def _distinct_glyphs(text: Optional[str], table: Mapping[str, str]) -> list[str]:
    if not text:
        return []
    # dict preserves first-occurrence order
    return list(dict.fromkeys(ch for ch in text if ch in table))


def get_unicode_superscripts(text: Optional[str]) -> list[str]:
    """Distinct superscript glyphs in *text*, in order of first appearance."""
    return _distinct_glyphs(text, SUPERSCRIPT_GLYPHS)


def get_unicode_subscripts(text: Optional[str]) -> list[str]:
    """Distinct subscript glyphs in *text*, in order of first appearance."""
    return _distinct_glyphs(text, SUBSCRIPT_GLYPHS)
