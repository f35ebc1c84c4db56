from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .api import format_text
from .config import FormatConfig, load_config, load_config_from_dict
from .markup import fraction, subscript, superscript
from .query import (
    get_unicode_subscripts,
    get_unicode_superscripts,
    has_formatting,
    has_unicode_scripts,
    has_unicode_subscript,
    has_unicode_superscript,
    plain_text,
)
from .reverse import to_unicode

try:
    __version__ = version("tmpnotation")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "FormatConfig",
    "format_text",
    "fraction",
    "get_unicode_subscripts",
    "get_unicode_superscripts",
    "has_formatting",
    "has_unicode_scripts",
    "has_unicode_subscript",
    "has_unicode_superscript",
    "load_config",
    "load_config_from_dict",
    "plain_text",
    "subscript",
    "superscript",
    "to_unicode",
]
