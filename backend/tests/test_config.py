"""Tests for environment-driven settings."""
import pytest
from pydantic import ValidationError

from urbansprout.config import DEFAULT_CATALOG_PATH, Settings

STRONG_TOKEN = "x" * 40


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.plant_catalog_path == DEFAULT_CATALOG_PATH
    assert settings.session_max_turns == 20
    assert settings.mistral_model == "mistral-small-latest"
    assert not settings.mistral_configured


def test_cors_origins_from_comma_list():
    settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_short_admin_token_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, admin_token="short")


def test_dev_token_rejected_in_production():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, environment="production")
    assert Settings(_env_file=None, environment="production", admin_token=STRONG_TOKEN).admin_token == STRONG_TOKEN


def test_mistral_configured_with_key():
    assert Settings(_env_file=None, mistral_api_key="abc").mistral_configured


@pytest.mark.parametrize("max_turns", [0, 7, 21])
def test_session_window_must_hold_whole_exchanges(max_turns):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, session_max_turns=max_turns)
