"""Unit tests for runtime settings."""

import dataclasses

import pytest

from creator_studio.config.settings import SETTINGS, update_from_kwargs


def test_settings_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SETTINGS.llm_provider = "openrouter"  # type: ignore[misc]


def test_update_from_kwargs_overrides_only_given_fields():
    updated = update_from_kwargs(gemini_api_key="abc", default_region="Japan")

    assert updated.gemini_api_key == "abc"
    assert updated.default_region == "Japan"
    assert updated.gemini_text_model == SETTINGS.gemini_text_model
    assert updated is not SETTINGS


def test_api_key_for():
    settings = update_from_kwargs(gemini_api_key="g", openrouter_api_key="o")

    assert settings.api_key_for("Gemini") == "g"
    assert settings.api_key_for("openrouter") == "o"
    with pytest.raises(ValueError):
        settings.api_key_for("groq")
