"""
どこで: `common.param_utils`
何を: 数値パラメータの共通変換ユーティリティ（clamp/lerp/平滑化/数値の文字列化）。
なぜ: 影レイヤ計算と CSS 直列化で同じ丸め・書式規約を共有するため。
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - 型のみ
    from lifted.types import Position


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def smooth_position(current: "Position", target: "Position", smoothing: float) -> "Position":
    """`current` から `target` へ `smoothing` の割合だけ近づけた位置を返す。

    呼び出し側（ポインタ追従など）が連続呼び出し間で使う指数平滑化。
    """
    return type(current)(
        x=lerp(current.x, target.x, smoothing),
        y=lerp(current.y, target.y, smoothing),
    )


def round_half_up(x: float, ndigits: int = 0) -> float:
    """小数第 `ndigits` 位で四捨五入（.5 は +∞ 方向）。

    組込み `round` の偶数丸めではなく、CSS 出力で期待される丸めに揃える。
    非有限値はそのまま返す。
    """
    if not math.isfinite(x):
        return x
    factor = 10.0**ndigits
    return math.floor(x * factor + 0.5) / factor


def fmt_number(value: float) -> str:
    """数値を最短表現の文字列へ（整数値は小数点なし、-0 は "0"）。

    例: 1.0 -> "1", -45.0 -> "-45", 0.075 -> "0.075"
    """
    v = float(value)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v == int(v) and abs(v) < 1e21:
        return str(int(v))
    return repr(v)


__all__ = [
    "clamp",
    "lerp",
    "smooth_position",
    "round_half_up",
    "fmt_number",
]
