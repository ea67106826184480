from __future__ import annotations

"""High-level public API for generating layered shadows.

This module provides :func:`generate_shadow`, which coordinates light
resolution, layer synthesis, shadow color selection and serialization to
produce a :class:`lifted.types.ShadowResult`. Every call is independent:
nothing is cached and no state survives between calls.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from common import settings

from .color import (
    DARK_FALLBACK_COLOR,
    LIGHT_FALLBACK_COLOR,
    calculate_shadow_color,
    generate_layer_color,
)
from .css import generate_css_variables, layers_to_css
from .layers import calculate_shadow_layers
from .light import is_ambient, normalize_light_source, resolve_light_angle
from .presets import resolve_elevation
from .types import (
    DEFAULT_LIGHT_ANGLE,
    Bounds,
    LightSource,
    Position,
    ShadowLayer,
    ShadowLayerWithColor,
    ShadowOptions,
    ShadowResult,
    StaticLight,
)

logger = logging.getLogger(__name__)

OptionsInput = Union[ShadowOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsInput) -> ShadowOptions:
    if options is None:
        return ShadowOptions()
    if isinstance(options, ShadowOptions):
        return options
    return ShadowOptions(**dict(options))


def _elevation_or_flat(value: Union[float, str]) -> float:
    # unknown preset names and non-numeric values draw no shadow
    try:
        return resolve_elevation(value)
    except (KeyError, TypeError) as exc:
        logger.debug("unusable elevation %r (%s); drawing no shadow", value, exc)
        return 0.0


def _light_or_default(source: Any) -> LightSource:
    try:
        return normalize_light_source(source)
    except (ValueError, TypeError) as exc:
        logger.debug("unusable light source %r (%s); using static %s", source, exc, DEFAULT_LIGHT_ANGLE)
        return StaticLight(angle=DEFAULT_LIGHT_ANGLE)


def resolve_shadow_color(
    *,
    shadow_color: Optional[str] = None,
    shadow_color_dark: Optional[str] = None,
    background: Optional[str] = None,
    is_dark_mode: bool = False,
) -> str:
    """Pick the shadow base color.

    Priority: ``shadow_color``; then ``shadow_color_dark`` in dark mode;
    then a color derived from ``background``; then the fixed fallback.
    Empty strings count as not given.
    """
    if shadow_color:
        return shadow_color
    if is_dark_mode and shadow_color_dark:
        return shadow_color_dark
    if background:
        return calculate_shadow_color(background, is_dark_mode)
    return DARK_FALLBACK_COLOR if is_dark_mode else LIGHT_FALLBACK_COLOR


def apply_color_to_layers(
    layers: Sequence[ShadowLayer], shadow_color: str
) -> List[ShadowLayerWithColor]:
    return [layer.with_color(generate_layer_color(shadow_color, layer.opacity)) for layer in layers]


def generate_shadow(
    options: OptionsInput = None,
    bounds: Optional[Bounds] = None,
    position: Optional[Position] = None,
) -> ShadowResult:
    """Generate layered shadow data for one element state.

    Parameters
    ----------
    options:
        :class:`ShadowOptions` (or a mapping of its field names). Missing
        ``elevation`` uses ``LFT_DEFAULT_ELEVATION`` (0.3); ``elevation``
        may also be a preset name. Unknown preset names draw no shadow and
        unknown light sources fall back to the default static light.
    bounds, position:
        Element bounds and pointer position, only used by mouse light.

    Returns
    -------
    ShadowResult
        Colored layers, the ``box-shadow`` string and custom properties.
    """
    opts = _coerce_options(options)
    cfg = settings.get()

    elevation = cfg.DEFAULT_ELEVATION if opts.elevation is None else _elevation_or_flat(opts.elevation)
    intensity = 1.0 if opts.intensity is None else opts.intensity
    scale = 1.0 if opts.scale is None else opts.scale
    is_dark_mode = bool(opts.is_dark_mode)

    light = _light_or_default(opts.light_source)
    ambient = is_ambient(light)
    light_angle = resolve_light_angle(light, bounds, position)
    base_layers = calculate_shadow_layers(elevation, light_angle, intensity, scale, ambient)

    shadow_color = resolve_shadow_color(
        shadow_color=opts.shadow_color,
        shadow_color_dark=opts.shadow_color_dark,
        background=opts.background,
        is_dark_mode=is_dark_mode,
    )
    layers = apply_color_to_layers(base_layers, shadow_color)
    box_shadow = layers_to_css(layers)
    css_variables = generate_css_variables(layers, elevation, light_angle)

    if cfg.DEBUG_SHADOW:
        logger.debug(
            "shadow elevation=%s angle=%s layers=%d color=%s",
            elevation,
            light_angle,
            len(layers),
            shadow_color,
        )
    return ShadowResult(layers=tuple(layers), box_shadow=box_shadow, css_variables=css_variables)


def generate_box_shadow(elevation: Union[float, str], **options: Any) -> str:
    """Shortcut returning only the ``box-shadow`` value."""
    return generate_shadow(ShadowOptions(elevation=elevation, **options)).box_shadow


def generate_style(
    options: OptionsInput = None,
    bounds: Optional[Bounds] = None,
    position: Optional[Position] = None,
) -> Dict[str, str]:
    """CSS declarations for an element (``box-shadow``, ``background-color``)."""
    opts = _coerce_options(options)
    result = generate_shadow(opts, bounds, position)
    style = {"box-shadow": result.box_shadow}
    if opts.background:
        style["background-color"] = opts.background
    return style


__all__ = [
    "generate_shadow",
    "generate_box_shadow",
    "generate_style",
    "resolve_shadow_color",
    "apply_color_to_layers",
]
