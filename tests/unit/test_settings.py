"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from src.config.settings import Settings


def test_defaults():
    settings = Settings(_env_file=None, openrouter_api_key=None)
    assert settings.diagnosis_timeout == 30.0
    assert settings.chat_timeout == 25.0
    assert settings.diagnosis_models[0] == "meta-llama/llama-3.1-70b-instruct"
    assert len(settings.chat_models) == 3


def test_log_level_is_normalised():
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="loud")


def test_timeouts_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, chat_timeout=0)


def test_model_list_cleaned():
    settings = Settings(_env_file=None, diagnosis_models=[" a ", "", "b"])
    assert settings.diagnosis_models == ["a", "b"]


def test_empty_model_list_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, chat_models=[])


def test_key_read_from_environment(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-env")
    assert Settings(_env_file=None).openrouter_api_key == "sk-or-env"
