"""Public entrypoint for the lifted shadow library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``lifted`` instead of individual
submodules.
"""

from .types import (
    AMBIENT,
    BASE_OPACITY,
    DEFAULT_LIGHT_ANGLE,
    DEFAULT_MAX_MOUSE_ANGLE,
    MAX_LAYERS,
    MOUSE,
    AmbientLight,
    Bounds,
    CustomLight,
    LightSource,
    LightSourceInput,
    MouseLight,
    Position,
    ShadowLayer,
    ShadowLayerWithColor,
    ShadowOptions,
    ShadowResult,
    StaticLight,
)
from .light import angle_to_offset_ratios, normalize_light_source, resolve_light_angle
from .layers import calculate_shadow_layers
from .color import (
    HSL,
    calculate_shadow_color,
    generate_layer_color,
    hex_to_hsl,
    is_light_color,
    parse_color,
    rgb_to_hsl,
)
from .css import DEFAULT_SHADOW_TRANSITION, generate_transition, layers_to_css
from .presets import ELEVATION_PRESETS, ElevationStates, resolve_elevation
from .api import generate_box_shadow, generate_shadow, generate_style
from .config import ColorScheme, LiftedConfig, apply_config

__all__ = [
    "AMBIENT",
    "BASE_OPACITY",
    "DEFAULT_LIGHT_ANGLE",
    "DEFAULT_MAX_MOUSE_ANGLE",
    "MAX_LAYERS",
    "MOUSE",
    "AmbientLight",
    "Bounds",
    "CustomLight",
    "LightSource",
    "LightSourceInput",
    "MouseLight",
    "Position",
    "ShadowLayer",
    "ShadowLayerWithColor",
    "ShadowOptions",
    "ShadowResult",
    "StaticLight",
    "angle_to_offset_ratios",
    "normalize_light_source",
    "resolve_light_angle",
    "calculate_shadow_layers",
    "HSL",
    "calculate_shadow_color",
    "generate_layer_color",
    "hex_to_hsl",
    "is_light_color",
    "parse_color",
    "rgb_to_hsl",
    "DEFAULT_SHADOW_TRANSITION",
    "generate_transition",
    "layers_to_css",
    "ELEVATION_PRESETS",
    "ElevationStates",
    "resolve_elevation",
    "generate_box_shadow",
    "generate_shadow",
    "generate_style",
    "ColorScheme",
    "LiftedConfig",
    "apply_config",
]
