from __future__ import annotations

import pytest

from lifted.api import generate_shadow
from lifted.config import ColorScheme, LiftedConfig, apply_config, resolve_dark_mode
from lifted.types import ShadowOptions, StaticLight


def test_color_scheme_parsing():
    assert ColorScheme.from_value("dark") is ColorScheme.DARK
    assert ColorScheme.from_value(" Light ") is ColorScheme.LIGHT
    assert ColorScheme.from_value(ColorScheme.AUTO) is ColorScheme.AUTO
    with pytest.raises(ValueError):
        ColorScheme.from_value("sepia")


def test_resolve_dark_mode():
    assert resolve_dark_mode("dark") is True
    assert resolve_dark_mode("light", system_dark=True) is False
    assert resolve_dark_mode("auto", system_dark=True) is True
    assert resolve_dark_mode(ColorScheme.AUTO) is False


def test_apply_config_none_is_identity():
    opts = ShadowOptions(elevation=0.4)
    assert apply_config(opts, None) is opts


def test_config_fills_missing_values():
    cfg = LiftedConfig(default_elevation=0.8, default_light_source=30, color_scheme="dark")
    merged = apply_config(ShadowOptions(), cfg)
    assert merged.elevation == 0.8
    assert merged.light_source == 30
    assert merged.is_dark_mode is True


def test_explicit_options_win():
    cfg = LiftedConfig(default_elevation=0.8, default_light_source=30, color_scheme="dark")
    opts = ShadowOptions(elevation=0.1, light_source=StaticLight(angle=5.0), is_dark_mode=False)
    merged = apply_config(opts, cfg, system_dark=True)
    assert merged.elevation == 0.1
    assert merged.light_source == StaticLight(angle=5.0)
    assert merged.is_dark_mode is False


def test_custom_color_mapping():
    calls = []

    def mapping(background: str, is_dark: bool) -> str:
        calls.append((background, is_dark))
        return "hsl(120 50% 25%)"

    cfg = LiftedConfig(color_scheme="auto", custom_color_mapping=mapping)
    merged = apply_config(ShadowOptions(background="#fff"), cfg, system_dark=True)
    assert merged.shadow_color == "hsl(120 50% 25%)"
    assert calls == [("#fff", True)]

    # 明示 shadow_color があれば呼ばない / 背景なしでも呼ばない
    apply_config(ShadowOptions(background="#fff", shadow_color="#000"), cfg)
    apply_config(ShadowOptions(), cfg)
    assert len(calls) == 1

    result = generate_shadow(apply_config(ShadowOptions(elevation=0.2, background="#fff"), cfg))
    assert result.layers[0].color == "hsl(120 50% 25% / 0.075)"
