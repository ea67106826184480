"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float


@dataclass
class _Settings:
    # generate_shadow で elevation 未指定時に使う値
    DEFAULT_ELEVATION: float = 0.3

    # Misc
    DEBUG_SHADOW: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 既定 elevation は [-1, 1] へ丸める。
    - 不正値は既定値へフォールバック（例外は出さない）。
    """
    _settings.DEFAULT_ELEVATION = env_float("LFT_DEFAULT_ELEVATION", 0.3, min_value=-1.0, max_value=1.0)
    _settings.DEBUG_SHADOW = env_bool("LFT_DEBUG_SHADOW", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
