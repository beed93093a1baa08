import pytest

from core.config import ConfigurationError, DEFAULT_API_URL, env, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("VOLKERN_API_URL", "VOLKERN_API_KEY", "VOLKERN_TIMEOUT", "SERVICE_NAME", "VERSION", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    yield


def test_missing_api_key_is_fatal():
    with pytest.raises(ConfigurationError, match="VOLKERN_API_KEY"):
        load_settings()


def test_blank_api_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("VOLKERN_API_KEY", "   ")
    with pytest.raises(ConfigurationError):
        load_settings()


def test_defaults(monkeypatch):
    monkeypatch.setenv("VOLKERN_API_KEY", " abc ")
    s = load_settings()
    assert s.api_key == "abc"
    assert s.api_url == DEFAULT_API_URL
    assert s.timeout == 30.0
    assert s.service_name == "volkern-mcp-server"
    assert s.version == "1.0.0"


def test_overrides_and_trailing_slash(monkeypatch):
    monkeypatch.setenv("VOLKERN_API_KEY", "abc")
    monkeypatch.setenv("VOLKERN_API_URL", "http://localhost:3000/api/")
    monkeypatch.setenv("VOLKERN_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = load_settings()
    assert s.api_url == "http://localhost:3000/api"
    assert s.timeout == 2.5
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["soon", "0", "-1", "nan", "inf", "-inf"])
def test_bad_timeout(monkeypatch, value):
    monkeypatch.setenv("VOLKERN_API_KEY", "abc")
    monkeypatch.setenv("VOLKERN_TIMEOUT", value)
    with pytest.raises(ConfigurationError):
        load_settings()


def test_settings_repr_hides_key(monkeypatch):
    monkeypatch.setenv("VOLKERN_API_KEY", "very-secret")
    assert "very-secret" not in repr(load_settings())


def test_env_helper(monkeypatch):
    monkeypatch.setenv("SOME_KEY", "  ")
    assert env("SOME_KEY", "fallback") == "fallback"
    monkeypatch.setenv("SOME_KEY", " x ")
    assert env("SOME_KEY") == "x"
