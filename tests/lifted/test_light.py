from __future__ import annotations

import math

import pytest

from lifted.light import (
    angle_to_offset_ratios,
    is_ambient,
    normalize_light_source,
    resolve_light_angle,
)
from lifted.types import (
    AmbientLight,
    Bounds,
    CustomLight,
    MouseLight,
    Position,
    StaticLight,
)


def test_normalize_shorthands():
    assert normalize_light_source(None) == StaticLight(angle=-45.0)
    assert normalize_light_source() == StaticLight(angle=-45.0)
    assert normalize_light_source(30) == StaticLight(angle=30.0)
    assert normalize_light_source(-135.5) == StaticLight(angle=-135.5)
    assert normalize_light_source("mouse") == MouseLight(
        smoothing=0.1, max_angle=30.0, fallback_angle=-45.0
    )
    assert normalize_light_source("ambient") == AmbientLight()
    # 大文字小文字/前後空白は吸収
    assert normalize_light_source(" Mouse ") == normalize_light_source("mouse")


def test_normalize_returns_records_unchanged():
    for rec in (
        StaticLight(angle=12.0),
        CustomLight(angle=99.0),
        MouseLight(max_angle=10.0),
        AmbientLight(),
    ):
        assert normalize_light_source(rec) is rec


def test_normalize_rejects_unsupported():
    with pytest.raises(TypeError):
        normalize_light_source(True)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        normalize_light_source([1, 2])  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        normalize_light_source("sun")


def test_mouse_partial_record_is_defaulted():
    partial = MouseLight(max_angle=60.0)
    full = partial.resolved()
    assert full == MouseLight(smoothing=0.1, max_angle=60.0, fallback_angle=-45.0)
    # 明示値は優先
    assert MouseLight(fallback_angle=10.0).resolved().fallback_angle == 10.0


def test_static_and_custom_ignore_geometry(centered_bounds, pointer_right):
    assert resolve_light_angle(StaticLight(angle=20.0)) == 20.0
    assert resolve_light_angle(StaticLight(angle=20.0), centered_bounds, pointer_right) == 20.0
    assert resolve_light_angle(CustomLight(angle=-170.0), centered_bounds, pointer_right) == -170.0


def test_ambient_resolves_to_zero(centered_bounds, pointer_right):
    light = normalize_light_source("ambient")
    assert is_ambient(light)
    assert not is_ambient(StaticLight())
    assert resolve_light_angle(light) == 0.0
    assert resolve_light_angle(light, centered_bounds, pointer_right) == 0.0


def test_mouse_without_geometry_returns_fallback(centered_bounds, pointer_right):
    light = normalize_light_source("mouse")
    assert resolve_light_angle(light) == -45.0
    assert resolve_light_angle(light, bounds=centered_bounds) == -45.0
    assert resolve_light_angle(light, position=pointer_right) == -45.0
    assert resolve_light_angle(MouseLight(fallback_angle=15.0)) == 15.0


def test_mouse_pointer_right_is_clamped(centered_bounds, pointer_right):
    # raw = atan2(0, 100) + 180 = 180; 180 - (-45) = 225 -> -135 -> clamp -60
    light = MouseLight(max_angle=60.0, fallback_angle=-45.0)
    assert resolve_light_angle(light, centered_bounds, pointer_right) == pytest.approx(-105.0)


def test_mouse_pointer_at_center_is_degenerate(centered_bounds):
    # atan2(0, 0) == 0 -> raw 180 -> diff -135 -> clamp to -max_angle
    light = normalize_light_source("mouse")
    angle = resolve_light_angle(light, centered_bounds, Position(0.0, 0.0))
    assert angle == pytest.approx(-75.0)


def test_mouse_within_range_is_not_clamped(centered_bounds):
    light = MouseLight(max_angle=60.0, fallback_angle=-45.0)
    # ポインタが真下 -> 影は真上 (-90°)
    assert resolve_light_angle(light, centered_bounds, Position(0.0, 100.0)) == pytest.approx(-90.0)
    # ポインタが左下 135° 方向 -> raw 315 ≡ -45
    p = Position(100 * math.cos(math.radians(135)), 100 * math.sin(math.radians(135)))
    assert resolve_light_angle(light, centered_bounds, p) == pytest.approx(-45.0)


def test_mouse_uses_element_center_not_origin():
    light = MouseLight(max_angle=180.0, fallback_angle=0.0)
    bounds = Bounds(x=200.0, y=100.0, width=40.0, height=20.0)  # center (220, 110)
    # ポインタが中心の真上 -> 影は真下 (+90°)
    assert resolve_light_angle(light, bounds, Position(220.0, 10.0)) == pytest.approx(90.0)


def test_angle_to_offset_ratios():
    assert angle_to_offset_ratios(0.0) == pytest.approx((1.0, 0.0))
    assert angle_to_offset_ratios(90.0) == pytest.approx((0.0, 1.0), abs=1e-12)
    h = math.sqrt(0.5)
    assert angle_to_offset_ratios(-45.0) == pytest.approx((h, -h))
    rx, ry = angle_to_offset_ratios(float("inf"))
    assert math.isnan(rx) and math.isnan(ry)
