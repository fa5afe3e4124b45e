from task_tracker.settings import get_settings


def test_defaults(monkeypatch):
    for name in ("CORS_ALLOW_ORIGINS", "LOG_LEVEL", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.cors_allow_origins == ["*"]
    assert s.log_level == "INFO"
    assert s.host == "127.0.0.1"
    assert s.port == 8000


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9001")
    s = get_settings()
    assert s.cors_allow_origins == ["http://a.test", "http://b.test"]
    assert s.log_level == "DEBUG"
    assert s.host == "0.0.0.0"
    assert s.port == 9001


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    monkeypatch.setenv("PORT", "eighty")
    s = get_settings()
    assert s.log_level == "INFO"
    assert s.port == 8000
