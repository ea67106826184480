"""
どこで: `api` 入口（高レベル公開 API）。
何を: 影ファクトリ `S` と、影生成/直列化の主要関数・型を再輸出。
なぜ: 利用者が単一名前空間から光源指定→影生成→CSS 文字列取得まで完結できるようにするため。

Usage:
    from api import S, generate_shadow, ShadowOptions

    S.medium(background="#fdfdfd").box_shadow
    generate_shadow(ShadowOptions(elevation=-0.3, light_source="ambient"))
"""

from lifted import (
    Bounds,
    LiftedConfig,
    Position,
    ShadowOptions,
    ShadowResult,
    apply_config,
    generate_box_shadow,
    generate_shadow,
    generate_style,
    generate_transition,
    resolve_elevation,
)

from .shadows import S, ShadowsAPI

__all__ = [
    # メインAPI
    "S",  # 影ファクトリ（プリセット名で呼び出し）
    "generate_shadow",
    "generate_box_shadow",
    "generate_style",
    "generate_transition",
    "resolve_elevation",
    "apply_config",
    # 型
    "ShadowsAPI",
    "ShadowOptions",
    "ShadowResult",
    "Bounds",
    "Position",
    "LiftedConfig",
]

# バージョン情報
__version__ = "2026.10"
