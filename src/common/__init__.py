"""
どこで: `common` パッケージ。
何を: 設定（環境変数）・ロギング・数値ユーティリティなど lifted/api で使う軽量基盤。
なぜ: 影エンジン本体から環境依存の処理を分離し、依存の向きを単純化するため。
"""

from . import settings

__all__ = ["settings"]
