#!/usr/bin/env python3
"""
プリセット一覧: 各 elevation プリセットの box-shadow を HTML ギャラリーとして書き出す。
"""

import argparse
import html
import logging
import os
import sys
from pathlib import Path

# src を import path の先頭に追加
SRC_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, "src"))
sys.path.insert(0, SRC_ROOT)

from api import S, generate_transition  # noqa: E402
from common.logging import setup_default_logging  # noqa: E402
from lifted.presets import ELEVATION_PRESETS  # noqa: E402

logger = logging.getLogger(__name__)


def build_page(background: str, dark: bool, light_source: str | float) -> str:
    cards = []
    for name in ELEVATION_PRESETS:
        result = getattr(S, name)(background=background, is_dark_mode=dark, light_source=light_source)
        style = (
            f"box-shadow: {result.box_shadow}; background: {background}; "
            f"transition: {generate_transition()}"
        )
        cards.append(
            f'<div class="card" style="{html.escape(style)}">'
            f"<b>{name}</b><br>{result.css_variables['--lifted-layers']} layers</div>"
        )
        logger.info("%-10s %s", name, result.box_shadow.replace("\n", " "))
    page_bg = "#1b1d22" if dark else background
    return (
        "<!doctype html><meta charset='utf-8'><style>"
        f"body{{background:{page_bg};display:flex;flex-wrap:wrap;gap:48px;padding:48px;"
        "font-family:sans-serif}"
        ".card{width:140px;height:100px;border-radius:12px;padding:16px}"
        "</style>" + "".join(cards)
    )


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--background", default="#fdfdfd")
    parser.add_argument("--dark", action="store_true")
    parser.add_argument("--ambient", action="store_true", help="非指向性の光源を使う")
    parser.add_argument("--out", type=Path, default=Path("preset_gallery.html"))
    args = parser.parse_args()

    setup_default_logging()
    light = "ambient" if args.ambient else -45.0
    args.out.write_text(build_page(args.background, args.dark, light), encoding="utf-8")
    logger.info("wrote %s", args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
