from __future__ import annotations

"""Named elevation presets and interactive elevation states.

Preset names are normalized the same way registry keys are across the
codebase (``"deepInset"``, ``"deep-inset"`` and ``"deep_inset"`` are the
same preset).
"""

import re
from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType
from typing import Mapping, Optional, Union

ELEVATION_PRESETS: Mapping[str, float] = MappingProxyType(
    {
        "deep_inset": -0.75,
        "inset": -0.3,
        "none": 0.0,
        "subtle": 0.15,
        "small": 0.25,
        "medium": 0.5,
        "large": 0.75,
        "xlarge": 1.0,
    }
)

ElevationInput = Union[float, int, str]


def _normalize_key(name: str) -> str:
    """Preset key normalization (e.g. "deepInset" -> "deep_inset")."""
    name = name.strip().replace("-", "_")
    if any(c.isupper() for c in name):
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
        name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return name.lower()


def resolve_elevation(value: ElevationInput) -> float:
    """Resolve a raw elevation or a preset name to a number.

    Raises
    ------
    KeyError
        Unknown preset name.
    TypeError
        Neither a number nor a string.
    """
    if isinstance(value, bool):
        raise TypeError("elevation must be a number or a preset name, not bool")
    if isinstance(value, Real):
        return float(value)
    if isinstance(value, str):
        key = _normalize_key(value)
        try:
            return ELEVATION_PRESETS[key]
        except KeyError:
            valid = ", ".join(ELEVATION_PRESETS)
            raise KeyError(f"unknown elevation preset: {value!r} (valid: {valid})") from None
    raise TypeError(f"unsupported elevation: {value!r}")


@dataclass(frozen=True)
class ElevationStates:
    """Elevation per interaction state of a control.

    ``active`` (pressed) wins over ``hover``; ``disabled`` wins over both
    when it is configured.
    """

    base: ElevationInput = 0.3
    hover: ElevationInput = 0.5
    active: ElevationInput = 0.15
    disabled: Optional[ElevationInput] = None

    def resolve(self, hovered: bool = False, active: bool = False, disabled: bool = False) -> float:
        if disabled and self.disabled is not None:
            return resolve_elevation(self.disabled)
        if active:
            return resolve_elevation(self.active)
        if hovered:
            return resolve_elevation(self.hover)
        return resolve_elevation(self.base)


__all__ = ["ELEVATION_PRESETS", "ElevationInput", "ElevationStates", "resolve_elevation"]
