from __future__ import annotations

"""Value types used by the lifted shadow engine.

Every value defined here is an immutable snapshot: layers are created fresh
on every synthesis call, light sources are plain tagged records, and the
geometry types are supplied by the caller on each invocation. Nothing in
the engine holds on to any of them between calls.
"""

from dataclasses import dataclass, field, replace
from typing import ClassVar, Dict, Optional, Tuple, Union


MAX_LAYERS = 5
BASE_OPACITY = 0.075
DEFAULT_LIGHT_ANGLE = -45.0
DEFAULT_MAX_MOUSE_ANGLE = 30.0
DEFAULT_SMOOTHING = 0.1

# Shorthand markers accepted wherever a light source is expected.
MOUSE = "mouse"
AMBIENT = "ambient"


@dataclass(frozen=True)
class ShadowLayer:
    """One shadow pass before color is attached.

    Attributes
    ----------
    offset_x, offset_y:
        Offsets in pixels.
    blur:
        Blur radius in pixels.
    spread:
        Spread radius in pixels. Always 0 from this engine.
    opacity:
        Alpha of this pass in [0, 1] (before intensity > 1 overshoot).
    inset:
        Whether this is an inner (pressed) shadow.
    """

    offset_x: float
    offset_y: float
    blur: float
    spread: float = 0.0
    opacity: float = 0.0
    inset: bool = False

    def with_color(self, color: str) -> "ShadowLayerWithColor":
        """Return a colored copy of this layer."""
        return ShadowLayerWithColor(
            offset_x=self.offset_x,
            offset_y=self.offset_y,
            blur=self.blur,
            spread=self.spread,
            opacity=self.opacity,
            inset=self.inset,
            color=color,
        )


@dataclass(frozen=True)
class ShadowLayerWithColor(ShadowLayer):
    """A layer carrying an already formatted CSS color (opacity folded in)."""

    color: str = ""


# --- light sources ---------------------------------------------------------


@dataclass(frozen=True)
class StaticLight:
    """Light at a fixed angle in degrees (-45 is top-left)."""

    angle: float = DEFAULT_LIGHT_ANGLE
    kind: ClassVar[str] = "static"


@dataclass(frozen=True)
class CustomLight:
    """Light whose angle is driven by the caller's own tracked state."""

    angle: float = DEFAULT_LIGHT_ANGLE
    kind: ClassVar[str] = "custom"


@dataclass(frozen=True)
class MouseLight:
    """Light that follows the pointer.

    Fields left as ``None`` are filled with the module defaults by
    :meth:`resolved`, so a partially specified record behaves the same as
    the ``"mouse"`` shorthand for everything it does not override.
    """

    smoothing: Optional[float] = None
    max_angle: Optional[float] = None
    fallback_angle: Optional[float] = None
    kind: ClassVar[str] = "mouse"

    def resolved(self) -> "MouseLight":
        return replace(
            self,
            smoothing=DEFAULT_SMOOTHING if self.smoothing is None else self.smoothing,
            max_angle=DEFAULT_MAX_MOUSE_ANGLE if self.max_angle is None else self.max_angle,
            fallback_angle=(
                DEFAULT_LIGHT_ANGLE if self.fallback_angle is None else self.fallback_angle
            ),
        )


@dataclass(frozen=True)
class AmbientLight:
    """Non-directional light: zero offsets, blur/opacity still follow elevation."""

    kind: ClassVar[str] = "ambient"


LightSource = Union[StaticLight, MouseLight, CustomLight, AmbientLight]
LightSourceInput = Union[None, float, int, str, LightSource]


# --- geometry ---------------------------------------------------------------


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Position:
        return Position(self.x + self.width / 2, self.y + self.height / 2)


# --- options / result ---------------------------------------------------------


@dataclass(frozen=True)
class ShadowOptions:
    """Input configuration for :func:`lifted.api.generate_shadow`.

    ``None`` means "not given" for every field; defaults are applied by the
    orchestrator (elevation from settings, intensity/scale 1, light mode).
    """

    elevation: Optional[Union[float, str]] = None
    light_source: LightSourceInput = None
    background: Optional[str] = None
    shadow_color: Optional[str] = None
    shadow_color_dark: Optional[str] = None
    intensity: Optional[float] = None
    scale: Optional[float] = None
    is_dark_mode: Optional[bool] = None

    def merged(self, **changes) -> "ShadowOptions":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class ShadowResult:
    """Layers, serialized ``box-shadow`` value and derived custom properties."""

    layers: Tuple[ShadowLayerWithColor, ...]
    box_shadow: str
    css_variables: Dict[str, str] = field(default_factory=dict)


__all__ = [
    "MAX_LAYERS",
    "BASE_OPACITY",
    "DEFAULT_LIGHT_ANGLE",
    "DEFAULT_MAX_MOUSE_ANGLE",
    "DEFAULT_SMOOTHING",
    "MOUSE",
    "AMBIENT",
    "ShadowLayer",
    "ShadowLayerWithColor",
    "StaticLight",
    "CustomLight",
    "MouseLight",
    "AmbientLight",
    "LightSource",
    "LightSourceInput",
    "Position",
    "Bounds",
    "ShadowOptions",
    "ShadowResult",
]
