"""
どこで: `api.shadows`（影生成の高レベル API）。
何を: プリセット名や elevation 値から `ShadowResult` を返す薄いファサード `S` を提供。
なぜ: `S.medium(background="#fff")` / `S(0.4, light_source="mouse")` の形で
      プリセット解決→影生成までを単一入口で扱えるようにするため。

Notes
-----
- 実体は `lifted.api.generate_shadow`。本モジュールは名前解決と引数の受け渡しのみ。
- プリセット名は `lifted.presets.ELEVATION_PRESETS` のキー（キャメルケース可）。
- 例外方針: 未知のプリセット名は `AttributeError`（属性アクセス時）。

Examples
--------
    from api import S

    S.subtle().box_shadow
    S(0.4, light_source="mouse", background="#fdfdfd").css_variables
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from lifted.api import generate_shadow
from lifted.presets import ELEVATION_PRESETS, resolve_elevation
from lifted.types import Bounds, Position, ShadowOptions, ShadowResult


class ShadowsAPI:
    """プリセット名を属性として解決する影ファクトリ（`S` の実体）。

    使い方:
        from api import S
        r1 = S.large(is_dark_mode=True)
        r2 = S("deepInset", background="#336699")
    """

    __slots__ = ()

    def __call__(
        self,
        elevation: float | str,
        *,
        bounds: Optional[Bounds] = None,
        position: Optional[Position] = None,
        **options: Any,
    ) -> ShadowResult:
        opts = ShadowOptions(elevation=resolve_elevation(elevation), **options)
        return generate_shadow(opts, bounds, position)

    def __getattr__(self, name: str) -> Callable[..., ShadowResult]:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            elevation = resolve_elevation(name)
        except KeyError:
            raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'") from None

        def _preset(
            *,
            bounds: Optional[Bounds] = None,
            position: Optional[Position] = None,
            **options: Any,
        ) -> ShadowResult:
            return self(elevation, bounds=bounds, position=position, **options)

        _preset.__name__ = name
        return _preset

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(ELEVATION_PRESETS))

    def presets(self) -> dict[str, float]:
        """プリセット名→elevation の辞書（コピー）。"""
        return dict(ELEVATION_PRESETS)


# 公開インスタンス
S = ShadowsAPI()


__all__ = ["S", "ShadowsAPI"]
