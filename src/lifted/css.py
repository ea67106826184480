from __future__ import annotations

"""Serialization of colored layers into CSS text.

Layers are written in synthesis order as
``[inset ]<x> <y> <blur> [<spread> ]<color>`` and joined with a comma and
an indented line break. Lengths are rounded half-up to two decimals; an
exact zero is written without a unit and a zero spread is omitted.
"""

from typing import Dict, Sequence

from common.param_utils import fmt_number, round_half_up

from .types import ShadowLayerWithColor

NO_SHADOW = "none"
LAYER_SEPARATOR = ",\n    "
TRANSITION_EASING = "cubic-bezier(0.2, 0.6, 0.3, 1)"


def format_px(value: float) -> str:
    if value == 0:
        return "0"
    return f"{fmt_number(round_half_up(value, 2))}px"


def layer_to_css(layer: ShadowLayerWithColor) -> str:
    parts = []
    if layer.inset:
        parts.append("inset")
    parts.extend((format_px(layer.offset_x), format_px(layer.offset_y), format_px(layer.blur)))
    if layer.spread != 0:
        parts.append(format_px(layer.spread))
    parts.append(layer.color)
    return " ".join(parts)


def layers_to_css(layers: Sequence[ShadowLayerWithColor]) -> str:
    """Serialize layers to a ``box-shadow`` value (``"none"`` when empty)."""
    if not layers:
        return NO_SHADOW
    return LAYER_SEPARATOR.join(layer_to_css(layer) for layer in layers)


def generate_css_variables(
    layers: Sequence[ShadowLayerWithColor],
    elevation: float,
    light_angle: float,
) -> Dict[str, str]:
    """Custom properties mirroring one generation result."""
    return {
        "--lifted-elevation": fmt_number(elevation),
        "--lifted-light-angle": f"{fmt_number(light_angle)}deg",
        "--lifted-layers": str(len(layers)),
        "--lifted-shadow": layers_to_css(layers),
    }


def generate_transition(duration_ms: float = 150, include_transform: bool = False) -> str:
    """CSS ``transition`` value for animating shadow (and transform) changes."""
    duration = fmt_number(duration_ms)
    transitions = [f"box-shadow {duration}ms {TRANSITION_EASING}"]
    if include_transform:
        transitions.append(f"transform {duration}ms {TRANSITION_EASING}")
    return ", ".join(transitions)


DEFAULT_SHADOW_TRANSITION = generate_transition()


__all__ = [
    "NO_SHADOW",
    "LAYER_SEPARATOR",
    "DEFAULT_SHADOW_TRANSITION",
    "format_px",
    "layer_to_css",
    "layers_to_css",
    "generate_css_variables",
    "generate_transition",
]
