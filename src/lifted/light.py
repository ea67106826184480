from __future__ import annotations

"""Light-source normalization and angle resolution.

A light source may be given as a shorthand (``None``, a bare angle, the
``"mouse"`` or ``"ambient"`` marker) or as a full record. Everything is
first normalized into one of the record types from :mod:`lifted.types`;
angle resolution then only ever sees the canonical shape.
"""

import logging
import math
from numbers import Real
from typing import Optional, Tuple

from .types import (
    AMBIENT,
    DEFAULT_LIGHT_ANGLE,
    DEFAULT_MAX_MOUSE_ANGLE,
    DEFAULT_SMOOTHING,
    MOUSE,
    AmbientLight,
    Bounds,
    CustomLight,
    LightSource,
    LightSourceInput,
    MouseLight,
    Position,
    StaticLight,
)

logger = logging.getLogger(__name__)

_LIGHT_TYPES = (StaticLight, MouseLight, CustomLight, AmbientLight)


def normalize_light_source(source: LightSourceInput = None) -> LightSource:
    """Return the canonical light-source record for a shorthand.

    Parameters
    ----------
    source:
        ``None`` (top-left static light), a number (static angle in
        degrees), ``"mouse"``, ``"ambient"`` or a full record. Records are
        returned unchanged.

    Raises
    ------
    TypeError
        For values that are none of the above (including ``bool``).
    ValueError
        For strings other than the two markers.
    """
    if source is None:
        return StaticLight(angle=DEFAULT_LIGHT_ANGLE)
    if isinstance(source, _LIGHT_TYPES):
        return source
    if isinstance(source, bool):
        raise TypeError("light source must not be a bool")
    if isinstance(source, Real):
        return StaticLight(angle=float(source))
    if isinstance(source, str):
        marker = source.strip().lower()
        if marker == MOUSE:
            return MouseLight(
                smoothing=DEFAULT_SMOOTHING,
                max_angle=DEFAULT_MAX_MOUSE_ANGLE,
                fallback_angle=DEFAULT_LIGHT_ANGLE,
            )
        if marker == AMBIENT:
            return AmbientLight()
        raise ValueError(f"unknown light source marker: {source!r} (expected 'mouse' or 'ambient')")
    raise TypeError(f"unsupported light source: {source!r}")


def is_ambient(light: LightSource) -> bool:
    return isinstance(light, AmbientLight)


def _wrap_degrees(delta: float) -> float:
    """Wrap an angle difference into (-180, 180]."""
    return 180.0 - ((180.0 - delta) % 360.0)


def resolve_light_angle(
    light: LightSource,
    bounds: Optional[Bounds] = None,
    position: Optional[Position] = None,
) -> float:
    """Resolve the effective light angle in degrees.

    Static and custom lights return their angle. Ambient light returns 0
    (the synthesizer ignores the angle for offsets). Mouse light points the
    shadow away from the pointer, limited to ``max_angle`` degrees either
    side of ``fallback_angle``; without both ``bounds`` and ``position`` it
    returns ``fallback_angle``.
    """
    if isinstance(light, (StaticLight, CustomLight)):
        return light.angle
    if isinstance(light, AmbientLight):
        return 0.0
    if not isinstance(light, MouseLight):
        raise TypeError(f"unsupported light source: {light!r}")

    mouse = light.resolved()
    fallback = float(mouse.fallback_angle)
    if bounds is None or position is None:
        logger.debug("mouse light without bounds/position; using fallback %s", fallback)
        return fallback

    center = bounds.center
    dx = position.x - center.x
    dy = position.y - center.y
    # +180: the light sits at the pointer, the shadow falls on the far side
    raw = math.degrees(math.atan2(dy, dx)) + 180.0

    max_angle = float(mouse.max_angle)
    diff = _wrap_degrees(raw - fallback)
    diff = max(-max_angle, min(max_angle, diff))
    return fallback + diff


def angle_to_offset_ratios(angle_deg: float) -> Tuple[float, float]:
    """Project an angle onto unit (x, y) offset ratios.

    Non-finite angles give NaN ratios instead of raising.
    """
    if not math.isfinite(angle_deg):
        return math.nan, math.nan
    rad = math.radians(angle_deg)
    return math.cos(rad), math.sin(rad)


__all__ = [
    "normalize_light_source",
    "resolve_light_angle",
    "angle_to_offset_ratios",
    "is_ambient",
]
