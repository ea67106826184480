"""共通フィクスチャ。

- 設定（環境変数）の隔離
- 代表的な要素 bounds / ポインタ位置
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from lifted.types import Bounds, Position


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """LFT_* 環境変数を外した既定設定でテストを実行する。"""
    monkeypatch.delenv("LFT_DEFAULT_ELEVATION", raising=False)
    monkeypatch.delenv("LFT_DEBUG_SHADOW", raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def centered_bounds() -> Bounds:
    """中心が原点 (0, 0) の 100x100 要素。"""
    return Bounds(x=-50.0, y=-50.0, width=100.0, height=100.0)


@pytest.fixture()
def pointer_right() -> Position:
    return Position(x=100.0, y=0.0)
