"""
Unit tests for configuration loading.
"""
import importlib

from generationgap import config


def _reloaded_key(monkeypatch, **env):
    try:
        with monkeypatch.context() as m:
            for name in ("OPENROUTER_API_KEY", "LLM_API_KEY"):
                m.delenv(name, raising=False)
            for name, value in env.items():
                m.setenv(name, value)
            importlib.reload(config)
            return config.LLM_API_KEY
    finally:
        importlib.reload(config)


def test_openrouter_key_takes_precedence(monkeypatch):
    assert _reloaded_key(monkeypatch, OPENROUTER_API_KEY="or-key", LLM_API_KEY="other") == "or-key"


def test_empty_openrouter_key_falls_back(monkeypatch):
    assert _reloaded_key(monkeypatch, OPENROUTER_API_KEY="", LLM_API_KEY="fallback") == "fallback"


def test_missing_keys_default_to_empty(monkeypatch):
    assert _reloaded_key(monkeypatch) == ""
