from __future__ import annotations

import math
import warnings
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

# Per-field fallbacks used whenever a size outside (0, 200] is assigned.
SIZE_DEFAULTS: dict[str, float] = {
    "superscript_size": 60.0,
    "subscript_size": 60.0,
    "fraction_size": 70.0,
}
MAX_SIZE = 200.0

# Pipeline order: toggle field name, short pass name.
PASS_TOGGLES: tuple[tuple[str, str], ...] = (
    ("enable_unicode_conversion", "unicode"),
    ("enable_caret_notation", "caret"),
    ("enable_underscore_subscript", "underscore"),
    ("enable_fractions", "fractions"),
    ("enable_chemical_formulas", "chemical"),
)


def _validated_size(value: Any, default: float) -> float:
    """Return *value* as a float if it lies in (0, MAX_SIZE], else *default*."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if math.isnan(value) or not 0 < value <= MAX_SIZE:
        return default
    return float(value)


@dataclass
class FormatConfig:
    """Feature toggles and tag sizes (percent of the base text size)."""

    superscript_size: float = 60.0
    subscript_size: float = 60.0
    fraction_size: float = 70.0
    enable_unicode_conversion: bool = True  # ² → <sup>…2…</sup>
    enable_caret_notation: bool = True  # x^2, e^{2x}, x^(n+1)
    enable_underscore_subscript: bool = True  # x_1, a_{ij}
    enable_fractions: bool = True  # 1/2, (a+b)/(c+d)
    enable_chemical_formulas: bool = True  # H2O, CO2

    def __setattr__(self, name: str, value: Any) -> None:
        if name in SIZE_DEFAULTS:
            value = _validated_size(value, SIZE_DEFAULTS[name])
        super().__setattr__(name, value)

    @classmethod
    def default(cls) -> FormatConfig:
        """Return a fresh configuration with every pass enabled."""
        return cls()

    def passes(self) -> list[str]:
        """Names of the enabled passes, in pipeline order."""
        return [name for attr, name in PASS_TOGGLES if getattr(self, attr)]


_FIELD_NAMES = frozenset(f.name for f in fields(FormatConfig))
_SIZE_ALIASES = {
    "superscript": "superscript_size",
    "subscript": "subscript_size",
    "fraction": "fraction_size",
}
_PASS_ALIASES = {name: attr for attr, name in PASS_TOGGLES}
_TOGGLE_STRINGS = {
    "true": True, "yes": True, "on": True, "1": True,
    "false": False, "no": False, "off": False, "0": False,
}


def load_config(path: Optional[Path]) -> FormatConfig:
    """Load configuration from a YAML file, returning defaults if *path* is None or missing."""
    if path is None or not path.exists():
        return FormatConfig()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, Mapping):
        raise ValueError(f"'{path}' must contain a YAML mapping at the top level.")
    return load_config_from_dict(data)


def load_config_from_dict(data: Mapping[str, Any]) -> FormatConfig:
    """
    Build a FormatConfig from a mapping.

    Accepts flat field names (``superscript_size``, ``enable_fractions``…)
    and the nested ``sizes`` / ``passes`` sections used in YAML files::

        sizes:
          superscript: 50
        passes:
          chemical: false

    Flat keys win over nested ones.  Unknown keys are ignored with a warning.
    """
    values: dict[str, Any] = {}
    unknown: list[str] = []

    for key, value in data.items():
        if key == "sizes" and isinstance(value, Mapping):
            _merge_section(value, _SIZE_ALIASES, values, unknown, "sizes")
        elif key == "passes" and isinstance(value, Mapping):
            _merge_section(value, _PASS_ALIASES, values, unknown, "passes")
        elif key not in _FIELD_NAMES:
            unknown.append(str(key))

    for key, value in data.items():
        if key in _FIELD_NAMES:
            values[key] = value

    if unknown:
        warnings.warn(
            f"Ignoring unknown config keys: {', '.join(sorted(unknown))}",
            UserWarning,
            stacklevel=2,
        )

    invalid: list[str] = []
    for attr, _ in PASS_TOGGLES:
        if attr in values:
            flag = _coerce_toggle(values[attr])
            if flag is None:
                invalid.append(f"{attr}={values.pop(attr)!r}")
            else:
                values[attr] = flag

    if invalid:
        warnings.warn(
            f"Ignoring non-boolean pass toggles: {', '.join(invalid)}",
            UserWarning,
            stacklevel=2,
        )

    return FormatConfig(**values)


def _coerce_toggle(value: Any) -> Optional[bool]:
    """Return *value* as a bool, accepting yes/no style strings; None if unrecognised."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _TOGGLE_STRINGS.get(value.strip().lower())
    return None


def _merge_section(
    section: Mapping[str, Any],
    aliases: Mapping[str, str],
    values: dict[str, Any],
    unknown: list[str],
    prefix: str,
) -> None:
    for key, value in section.items():
        attr = aliases.get(key)
        if attr is None:
            unknown.append(f"{prefix}.{key}")
        else:
            values[attr] = value
