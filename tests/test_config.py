import importlib

from viewership import config


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("VIEWERSHIP_BACKEND_URL", "http://localhost:8000/")
    monkeypatch.setenv("VIEWERSHIP_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("VIEWERSHIP_LOG_LEVEL", "debug")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.BACKEND_URL == "http://localhost:8000"
        assert reloaded.REQUEST_TIMEOUT == 2.5
        assert reloaded.LOG_LEVEL == "DEBUG"
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_defaults_point_at_production(monkeypatch):
    monkeypatch.delenv("VIEWERSHIP_BACKEND_URL", raising=False)
    try:
        assert importlib.reload(config).BACKEND_URL == config.DEFAULT_BACKEND_URL
    finally:
        importlib.reload(config)
