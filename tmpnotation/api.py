"""Programmatic API: run the notation passes over a string."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from .config import FormatConfig, load_config, load_config_from_dict
from .passes import PASSES

logger = logging.getLogger(__name__)

ConfigLike = FormatConfig | Mapping[str, Any] | str | Path | None


def format_text(text: Optional[str], config: ConfigLike = None) -> Optional[str]:
    """Convert plain-text notation in *text* into rich-text tags.

    Args:
        text: Input string.  ``None`` is returned as ``None`` and the empty
            string as the empty string.
        config: One of:
            - ``None`` (all passes, default sizes)
            - ``FormatConfig`` instance
            - dict-like mapping using the same schema as ``config.yaml``
            - path to a YAML config file

    Returns:
        The input with enabled passes applied in order: unicode glyphs,
        caret, underscore, fractions, chemical formulas.

    Example::

        >>> format_text("E = mc^2")
        'E = mc<sup><size=60%>2</size></sup>'
    """
    if text is None:
        return None
    if not isinstance(text, str):
        raise TypeError(f"text must be a string or None, not {type(text).__name__}.")
    if not text:
        return text

    resolved = _resolve_config(config)
    enabled = set(resolved.passes())
    for name, apply_pass in PASSES:
        if name in enabled:
            text = apply_pass(text, resolved)
    logger.debug("Applied passes: %s", ", ".join(resolved.passes()) or "none")
    return text


def _resolve_config(config: ConfigLike) -> FormatConfig:
    if config is None:
        return FormatConfig.default()
    if isinstance(config, FormatConfig):
        return config
    if isinstance(config, Mapping):
        return load_config_from_dict(config)
    if isinstance(config, (str, Path)):
        return load_config(Path(config))
    raise TypeError(
        "config must be None, FormatConfig, dict-like mapping, or a config file path."
    )
