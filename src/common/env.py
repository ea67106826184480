"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパを提供。
なぜ: `os.getenv` + 例外/境界ガードを設定層の一箇所へ集約するため。
"""

from __future__ import annotations

import os
from typing import Optional


def env_float(
    name: str,
    default: Optional[float] = None,
    *,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> Optional[float]:
    """浮動小数の環境変数を取得（存在しない/不正値は既定値）。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[float]
        既定値（`None` を渡すと `None` を許容）。
    min_value, max_value : Optional[float]
        範囲（指定時、結果を範囲内へ丸める）。

    Returns
    -------
    Optional[float]
        取得した値。未設定/不正時は `default` を返す。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = float(raw.strip())
    except ValueError:
        return default
    if val != val:  # NaN
        return default
    if min_value is not None and val < min_value:
        val = min_value
    if max_value is not None and val > max_value:
        val = max_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（0/1, true/false を許容）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        # 数値優先
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)


__all__ = ["env_float", "env_bool"]
