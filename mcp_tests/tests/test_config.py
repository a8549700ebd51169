import logging
import sys

import config
from core.logging import configure_logging


def test_env_int(monkeypatch):
    monkeypatch.delenv("CACHE_TTL", raising=False)
    assert config._env_int("CACHE_TTL", 16) == 16

    monkeypatch.setenv("CACHE_TTL", " 8 ")
    assert config._env_int("CACHE_TTL", 16) == 8

    monkeypatch.setenv("CACHE_TTL", "eight")
    assert config._env_int("CACHE_TTL", 16) == 16


def test_env_str(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "  debug ")
    assert config._env_str("LOG_LEVEL", "WARNING") == "debug"

    monkeypatch.setenv("LOG_LEVEL", "   ")
    assert config._env_str("LOG_LEVEL", "WARNING") == "WARNING"


def test_configure_logging_uses_single_stderr_handler():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr

        configure_logging("nonsense")
        assert root.level == logging.WARNING
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
