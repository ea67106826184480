from __future__ import annotations

import logging

from common import settings
from common.env import env_bool, env_float
from common.logging import setup_default_logging


def test_env_float(monkeypatch):
    monkeypatch.delenv("LFT_TEST_FLOAT", raising=False)
    assert env_float("LFT_TEST_FLOAT", 0.5) == 0.5
    monkeypatch.setenv("LFT_TEST_FLOAT", " 0.25 ")
    assert env_float("LFT_TEST_FLOAT", 0.5) == 0.25
    monkeypatch.setenv("LFT_TEST_FLOAT", "abc")
    assert env_float("LFT_TEST_FLOAT", 0.5) == 0.5
    monkeypatch.setenv("LFT_TEST_FLOAT", "nan")
    assert env_float("LFT_TEST_FLOAT", 0.5) == 0.5
    monkeypatch.setenv("LFT_TEST_FLOAT", "7")
    assert env_float("LFT_TEST_FLOAT", 0.5, min_value=-1.0, max_value=1.0) == 1.0


def test_env_bool(monkeypatch):
    monkeypatch.setenv("LFT_TEST_BOOL", "yes")
    assert env_bool("LFT_TEST_BOOL") is True
    monkeypatch.setenv("LFT_TEST_BOOL", "0")
    assert env_bool("LFT_TEST_BOOL", True) is False
    monkeypatch.setenv("LFT_TEST_BOOL", "maybe")
    assert env_bool("LFT_TEST_BOOL", True) is True


def test_settings_defaults_and_reload(monkeypatch):
    cfg = settings.get()
    assert cfg.DEFAULT_ELEVATION == 0.3
    assert cfg.DEBUG_SHADOW is False

    monkeypatch.setenv("LFT_DEFAULT_ELEVATION", "-3")
    monkeypatch.setenv("LFT_DEBUG_SHADOW", "1")
    settings.reload_from_env()
    assert settings.get().DEFAULT_ELEVATION == -1.0
    assert settings.get().DEBUG_SHADOW is True

    monkeypatch.setenv("LFT_DEFAULT_ELEVATION", "0")
    settings.reload_from_env()
    assert settings.get().DEFAULT_ELEVATION == 0.0


def test_debug_shadow_logs_result(monkeypatch, caplog):
    from lifted.api import generate_shadow

    monkeypatch.setenv("LFT_DEBUG_SHADOW", "true")
    settings.reload_from_env()
    with caplog.at_level(logging.DEBUG, logger="lifted.api"):
        generate_shadow({"elevation": 0.5})
    assert any("layers=3" in r.getMessage() for r in caplog.records)


def test_setup_default_logging_is_noop_when_configured():
    root = logging.getLogger()
    before = list(root.handlers)
    if not before:
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            setup_default_logging("DEBUG")
            assert root.handlers == [handler]
        finally:
            root.removeHandler(handler)
    else:
        setup_default_logging("DEBUG")
        assert root.handlers == before
