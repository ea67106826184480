from __future__ import annotations

"""Powers-of-two shadow layer synthesis.

Elevation in [-1, 1] is mapped onto up to :data:`MAX_LAYERS` passes whose
offset and blur double from one layer to the next (1, 2, 4, 8, 16 times
``scale``). ``|elevation| * MAX_LAYERS`` layers are active; the last one
may be fractional, in which case its offset, blur and opacity are scaled
by the fractional part so that the shadow grows continuously.
"""

import math
from typing import List

import numpy as np

from common.param_utils import clamp

from .light import angle_to_offset_ratios
from .types import BASE_OPACITY, DEFAULT_LIGHT_ANGLE, MAX_LAYERS, ShadowLayer

_LAYER_INDEX = np.arange(MAX_LAYERS, dtype=np.float64)
_BASE_MAGNITUDES = np.power(2.0, _LAYER_INDEX)


def layer_factors(elevation: float) -> np.ndarray:
    """Per-layer activation factors for a (clamped) elevation.

    Entry ``i`` is 1 for a fully active layer, the fractional remainder in
    (0, 1) for the boundary layer and <= 0 for layers that are omitted.
    NaN elevation gives all zeros.
    """
    elevation = float(elevation)
    if math.isnan(elevation):
        return np.zeros(MAX_LAYERS)
    active = abs(clamp(elevation, -1.0, 1.0)) * MAX_LAYERS
    return np.minimum(active - _LAYER_INDEX, 1.0)


def calculate_shadow_layers(
    elevation: float,
    light_angle: float = DEFAULT_LIGHT_ANGLE,
    intensity: float = 1.0,
    scale: float = 1.0,
    is_ambient: bool = False,
) -> List[ShadowLayer]:
    """Synthesize the ordered shadow layers for an elevation.

    Parameters
    ----------
    elevation:
        Any real number; clamped to [-1, 1] here. Negative values produce
        inset layers with flipped offsets, 0 produces no layers. NaN
        also produces no layers.
    light_angle:
        Light angle in degrees (see :func:`lifted.light.resolve_light_angle`).
    intensity:
        Opacity multiplier.
    scale:
        Size multiplier applied to offsets and blur.
    is_ambient:
        Zero all offsets regardless of ``light_angle``.

    Returns
    -------
    list of ShadowLayer
        Smallest layer first.
    """
    elevation = float(elevation)
    if math.isnan(elevation):
        return []
    clamped = clamp(elevation, -1.0, 1.0)
    if clamped == 0.0:
        return []

    is_inset = clamped < 0.0
    direction = -1.0 if is_inset else 1.0
    if is_ambient:
        ratio_x, ratio_y = 0.0, 0.0
    else:
        ratio_x, ratio_y = angle_to_offset_ratios(light_angle)

    factors = layer_factors(clamped)
    included = factors > 0.0
    factors = factors[included]

    magnitudes = _BASE_MAGNITUDES[included] * scale * factors
    offsets_x = magnitudes * ratio_x * direction
    offsets_y = magnitudes * ratio_y * direction
    opacities = BASE_OPACITY * factors * intensity

    return [
        ShadowLayer(
            offset_x=float(x),
            offset_y=float(y),
            blur=float(b),
            spread=0.0,
            opacity=float(o),
            inset=is_inset,
        )
        for x, y, b, o in zip(offsets_x, offsets_y, magnitudes, opacities)
    ]


__all__ = ["calculate_shadow_layers", "layer_factors"]
