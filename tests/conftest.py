"""Pytest configuration and fixtures."""

import pytest

from src.config.settings import Settings
from tests.fakes import CHAT_MODELS, DIAGNOSIS_MODELS


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return Settings(
        _env_file=None,
        openrouter_api_key="test-key",
        diagnosis_models=DIAGNOSIS_MODELS,
        chat_models=CHAT_MODELS,
    )


@pytest.fixture
def unconfigured_settings():
    """Settings without an API key."""
    return Settings(
        _env_file=None,
        openrouter_api_key=None,
        diagnosis_models=DIAGNOSIS_MODELS,
        chat_models=CHAT_MODELS,
    )
