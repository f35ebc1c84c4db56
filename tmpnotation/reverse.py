"""
Convert generated rich-text tags back to Unicode super/subscript glyphs.

Only the exact tag shapes built by markup.py are recognised.  A tag whose
content cannot be expressed entirely in glyphs (``2x`` has no superscript
``x``) is replaced by its bare content instead of a partial mixture.
"""
from __future__ import annotations

import logging
import re
from typing import Mapping, Optional

from .glyphs import SUBSCRIPT_FROM_ASCII, SUPERSCRIPT_FROM_ASCII

logger = logging.getLogger(__name__)

_SUPERSCRIPT_TAG_RE = re.compile(r"<sup><size=\d+(?:\.\d+)?%>([^<]+)</size></sup>")
_SUBSCRIPT_TAG_RE = re.compile(r"<sub><size=\d+(?:\.\d+)?%>([^<]+)</size></sub>")


def _to_glyphs(content: str, table: Mapping[str, str]) -> str:
    """Map every character of *content* through *table*, or return it unchanged."""
    if all(ch in table for ch in content):
        return "".join(table[ch] for ch in content)
    logger.debug("No glyph form for %r; keeping plain content", content)
    return content


def to_unicode(text: Optional[str]) -> Optional[str]:
    """
    Replace superscript and subscript tags with Unicode glyphs where possible.

    ``"A<sub><size=60%>0</size></sub>"`` → ``"A₀"``.  Superscript tags are
    handled first, then subscript tags.  Empty or ``None`` input is returned
    unchanged.
    """
    if not text:
        return text

    result = _SUPERSCRIPT_TAG_RE.sub(
        lambda m: _to_glyphs(m.group(1), SUPERSCRIPT_FROM_ASCII), text
    )
    result = _SUBSCRIPT_TAG_RE.sub(
        lambda m: _to_glyphs(m.group(1), SUBSCRIPT_FROM_ASCII), result
    )
    return result
