import pytest

from token_uri.settings import ConfigError, DecoderSettings, load_settings


def test_defaults():
    settings = load_settings({})
    assert settings == DecoderSettings(strict=False, log_level="WARNING")


@pytest.mark.parametrize("raw", ["1", "true", "yes", "on", " TRUE "])
def test_strict_truthy_values(raw):
    assert load_settings({"TOKEN_URI_STRICT": raw}).strict is True


@pytest.mark.parametrize("raw", ["0", "false", "no", "off"])
def test_strict_falsy_values(raw):
    assert load_settings({"TOKEN_URI_STRICT": raw}).strict is False


def test_log_level_is_normalized():
    assert load_settings({"LOG_LEVEL": " debug"}).log_level == "DEBUG"


@pytest.mark.parametrize(
    "environ",
    [{"TOKEN_URI_STRICT": "maybe"}, {"LOG_LEVEL": "loud"}],
)
def test_invalid_values_raise_config_error(environ):
    with pytest.raises(ConfigError):
        load_settings(environ)


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("TOKEN_URI_STRICT", "1")
    monkeypatch.setenv("LOG_LEVEL", "error")
    settings = load_settings()
    assert settings.strict is True
    assert settings.log_level == "ERROR"
