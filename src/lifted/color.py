from __future__ import annotations

"""CSS color parsing and shadow color derivation.

Shadow colors are derived from the surface color instead of flat black:
in light mode a darker, desaturated variant of the background, in dark
mode a lighter one. Colors are handled as HSL with ``h`` in degrees and
``s``/``l`` in percent, and emitted in the space-separated ``hsl()``
notation so that a per-layer alpha can be appended.

Parsing accepts ``#rgb`` / ``#rrggbb`` (longer hex forms are accepted but
only the first six digits are read, so any alpha digits are ignored),
``hsl(...)`` and ``rgb(...)``. Component values are not range checked.
"""

import logging
import math
import re
from typing import NamedTuple, Optional

from common.param_utils import fmt_number

logger = logging.getLogger(__name__)

LIGHT_FALLBACK_COLOR = "hsl(220 3% 15%)"
DARK_FALLBACK_COLOR = "hsl(0 0% 100% / 0.1)"

_FLAGS = re.IGNORECASE | re.ASCII
_HEX_RE = re.compile(r"^#([0-9a-f]{3,8})\Z", _FLAGS)
_HSL_RE = re.compile(r"^hsl\(\s*([\d.]+)\s*,?\s*([\d.]+)%?\s*,?\s*([\d.]+)%?\s*\)", _FLAGS)
_RGB_RE = re.compile(r"^rgb\(\s*([\d.]+)\s*,?\s*([\d.]+)\s*,?\s*([\d.]+)\s*\)", _FLAGS)
_NUMBER_PREFIX_RE = re.compile(r"\d*(?:\.\d*)?", re.ASCII)


class HSL(NamedTuple):
    """Hue in degrees, saturation and lightness in percent."""

    h: float
    s: float
    l: float  # noqa: E741


def _leading_float(text: str) -> float:
    # "1.2.3" -> 1.2; "." -> NaN
    m = _NUMBER_PREFIX_RE.match(text)
    token = m.group(0) if m else ""
    if token in ("", "."):
        return float("nan")
    return float(token)


def _round(x: float) -> int:
    return int(math.floor(x + 0.5))


def _div(a: float, b: float) -> float:
    # out-of-range components can make the saturation denominator 0
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert 0-255 RGB to HSL rounded to whole degrees/percent."""
    r /= 255.0
    g /= 255.0
    b /= 255.0

    hi = max(r, g, b)
    lo = min(r, g, b)
    h = 0.0
    s = 0.0
    light = (hi + lo) / 2.0

    if hi != lo:
        d = hi - lo
        s = _div(d, 2.0 - hi - lo) if light > 0.5 else _div(d, hi + lo)
        if hi == r:
            h = ((g - b) / d + (6.0 if g < b else 0.0)) / 6.0
        elif hi == g:
            h = ((b - r) / d + 2.0) / 6.0
        else:
            h = ((r - g) / d + 4.0) / 6.0

    scaled = (h * 360.0, s * 100.0, light * 100.0)
    if not all(math.isfinite(v) for v in scaled):
        # non-finite components propagate unrounded
        return HSL(*scaled)
    return HSL(*(_round(v) for v in scaled))


def hex_to_hsl(hex_str: str) -> HSL:
    """Convert ``#rgb`` or ``#rrggbb[..]`` to HSL.

    Other lengths read as black.
    """
    r = g = b = 0
    if len(hex_str) == 4:
        r = int(hex_str[1] * 2, 16)
        g = int(hex_str[2] * 2, 16)
        b = int(hex_str[3] * 2, 16)
    elif len(hex_str) >= 7:
        r = int(hex_str[1:3], 16)
        g = int(hex_str[3:5], 16)
        b = int(hex_str[5:7], 16)
    return rgb_to_hsl(r, g, b)


def parse_color(color: str) -> Optional[HSL]:
    """Parse CSS color text into HSL, or ``None`` if no form matches."""
    if not isinstance(color, str):
        return None
    if _HEX_RE.match(color):
        return hex_to_hsl(color)

    m = _HSL_RE.match(color)
    if m:
        return HSL(*(_leading_float(m.group(i)) for i in (1, 2, 3)))

    m = _RGB_RE.match(color)
    if m:
        return rgb_to_hsl(*(_leading_float(m.group(i)) for i in (1, 2, 3)))

    return None


def format_hsl(hsl: HSL, alpha: Optional[float] = None) -> str:
    """Format as ``hsl(h s% l%)`` or ``hsl(h s% l% / a)``."""
    body = f"{fmt_number(hsl.h)} {fmt_number(hsl.s)}% {fmt_number(hsl.l)}%"
    if alpha is None:
        return f"hsl({body})"
    return f"hsl({body} / {fmt_number(alpha)})"


def calculate_shadow_color(background: str, is_dark_mode: bool = False) -> str:
    """Derive the shadow base color for a background.

    Light mode: saturation * 0.6, lightness halved (floor 10).
    Dark mode: saturation - 20 (floor 0), lightness + 30 (ceiling 100).
    Unparseable backgrounds get a fixed fallback.
    """
    hsl = parse_color(background)
    if hsl is None:
        logger.debug("unparseable background %r; using fallback shadow color", background)
        return DARK_FALLBACK_COLOR if is_dark_mode else LIGHT_FALLBACK_COLOR

    if is_dark_mode:
        shadow = HSL(hsl.h, max(0, hsl.s - 20), min(100, hsl.l + 30))
    else:
        shadow = HSL(hsl.h, max(0, hsl.s * 0.6), max(10, hsl.l * 0.5))
    return format_hsl(shadow)


def generate_layer_color(base_color: str, opacity: float) -> str:
    """Re-emit ``base_color`` with the layer's own opacity.

    Unparseable colors fall back to the light-mode neutral.
    """
    hsl = parse_color(base_color)
    if hsl is None:
        return format_hsl(HSL(220, 3, 15), opacity)
    return format_hsl(hsl, opacity)


def is_light_color(color: str) -> bool:
    """True when lightness > 50; unparseable colors count as light."""
    hsl = parse_color(color)
    return hsl.l > 50 if hsl is not None else True


__all__ = [
    "HSL",
    "LIGHT_FALLBACK_COLOR",
    "DARK_FALLBACK_COLOR",
    "parse_color",
    "hex_to_hsl",
    "rgb_to_hsl",
    "format_hsl",
    "calculate_shadow_color",
    "generate_layer_color",
    "is_light_color",
]
