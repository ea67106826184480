from __future__ import annotations

"""Shared configuration values and their merge into shadow options.

A :class:`LiftedConfig` carries the defaults an application wants applied
to every shadow (elevation, light source, color scheme and an optional
custom background-to-shadow color mapping). :func:`apply_config` folds a
config into one :class:`ShadowOptions`; values set explicitly on the
options always win. Distributing the config to components is up to the
caller.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .types import LightSourceInput, ShadowOptions

ColorMapping = Callable[[str, bool], str]


class ColorScheme(Enum):
    """How dark mode is decided."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"

    @classmethod
    def from_value(cls, value: "ColorScheme | str") -> "ColorScheme":
        if isinstance(value, ColorScheme):
            return value
        for scheme in cls:
            if scheme.value == str(value).strip().lower():
                return scheme
        raise ValueError(f"Unknown color scheme: {value}")


@dataclass(frozen=True)
class LiftedConfig:
    """Application-wide shadow defaults."""

    default_elevation: Optional[float] = None
    default_light_source: LightSourceInput = None
    color_scheme: ColorScheme | str = ColorScheme.AUTO
    custom_color_mapping: Optional[ColorMapping] = None


def resolve_dark_mode(scheme: ColorScheme | str, system_dark: bool = False) -> bool:
    """Dark mode for a scheme; ``auto`` follows the platform preference."""
    resolved = ColorScheme.from_value(scheme)
    if resolved is ColorScheme.AUTO:
        return bool(system_dark)
    return resolved is ColorScheme.DARK


def apply_config(
    options: ShadowOptions, config: Optional[LiftedConfig], system_dark: bool = False
) -> ShadowOptions:
    """Merge ``config`` defaults into ``options``.

    - ``elevation`` / ``light_source`` fall back to the config defaults.
    - ``is_dark_mode`` falls back to the color scheme.
    - ``custom_color_mapping`` fills ``shadow_color`` from ``background``
      when no explicit shadow color is given.
    """
    if config is None:
        return options

    elevation = options.elevation
    if elevation is None:
        elevation = config.default_elevation
    light_source = options.light_source
    if light_source is None:
        light_source = config.default_light_source
    is_dark_mode = options.is_dark_mode
    if is_dark_mode is None:
        is_dark_mode = resolve_dark_mode(config.color_scheme, system_dark)

    shadow_color = options.shadow_color
    if not shadow_color and config.custom_color_mapping is not None and options.background:
        shadow_color = config.custom_color_mapping(options.background, is_dark_mode)

    return options.merged(
        elevation=elevation,
        light_source=light_source,
        is_dark_mode=is_dark_mode,
        shadow_color=shadow_color,
    )


__all__ = ["ColorScheme", "ColorMapping", "LiftedConfig", "resolve_dark_mode", "apply_config"]
