import pytest

from app.config import ConfigError, load_settings


def test_missing_credentials_are_fatal():
    with pytest.raises(ConfigError):
        load_settings({"PAYGATE_ID": "M1"})
    with pytest.raises(ConfigError):
        load_settings({"PAYGATE_KEY": "S"})


def test_defaults_and_trailing_slash():
    settings = load_settings({"PAYGATE_ID": "M1", "PAYGATE_KEY": "S", "BASE_URL": "https://pay.example.com/"})
    assert settings.base_url == "https://pay.example.com"
    assert settings.return_url == "https://pay.example.com/pay/return"
    assert settings.notify_url == "https://pay.example.com/pay/notify"
    assert settings.port == 3000
    assert settings.gateway_timeout == 30.0


def test_invalid_port_is_config_error():
    with pytest.raises(ConfigError):
        load_settings({"PAYGATE_ID": "M1", "PAYGATE_KEY": "S", "PORT": "eighty"})


def test_settings_are_frozen():
    settings = load_settings({"PAYGATE_ID": "M1", "PAYGATE_KEY": "S"})
    with pytest.raises(Exception):
        settings.paygate_key = "other"
