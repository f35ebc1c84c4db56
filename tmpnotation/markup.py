"""
Rich-text tag builders.

Tag shapes are fixed, since the rendering host parses them literally::

    <sup><size=60%>2</size></sup>
    <sub><size=60%>2</size></sub>
    <sup><size=70%>1</size></sup>/<sub><size=70%>2</size></sub>
"""
from __future__ import annotations

from decimal import Decimal
from typing import Optional

DEFAULT_SCRIPT_SIZE = 60.0
DEFAULT_FRACTION_SIZE = 70.0


def format_size(size: float) -> str:
    """Render a percentage in plain positional notation, keeping full precision.

    60.0 → "60", 62.5 → "62.5", 0.00001 → "0.00001".  Never uses an exponent.
    """
    text = format(Decimal(repr(float(size))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _wrap(tag: str, text: str, size: float) -> str:
    return f"<{tag}><size={format_size(size)}%>{text}</size></{tag}>"


def superscript(text: Optional[str], size: float = DEFAULT_SCRIPT_SIZE) -> Optional[str]:
    """Wrap *text* in a superscript tag; empty or ``None`` input is returned as is."""
    if not text:
        return text
    return _wrap("sup", text, size)


def subscript(text: Optional[str], size: float = DEFAULT_SCRIPT_SIZE) -> Optional[str]:
    """Wrap *text* in a subscript tag; empty or ``None`` input is returned as is."""
    if not text:
        return text
    return _wrap("sub", text, size)


def fraction(
    numerator: Optional[str],
    denominator: Optional[str],
    size: float = DEFAULT_FRACTION_SIZE,
) -> str:
    """
    Build ``superscript(num) + "/" + subscript(den)``.

    If either side is empty the bare ``num/den`` text is returned, so a
    fraction never renders as an empty tag.
    """
    if not numerator or not denominator:
        return f"{numerator or ''}/{denominator or ''}"
    return f"{superscript(numerator, size)}/{subscript(denominator, size)}"
