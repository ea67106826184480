"""
Lightweight logging utilities for the project.

Default behavior: modules import logging and obtain a logger via
`logging.getLogger(__name__)`. The shadow engine only logs at DEBUG level
(fallbacks taken, results when `LFT_DEBUG_SHADOW` is set); this helper
ensures a sane default configuration for scripts that want to see them.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """Setup a minimal logging configuration once.

    - No-op if root logger already has handlers
    - Intended to be called from top-level scripts/demos
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
