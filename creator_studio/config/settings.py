"""Runtime configuration for the studio apps.

Values come from the environment (a local ``.env`` is loaded first), so
models and providers can be switched without touching code.
• LLM_PROVIDER        – 'gemini' (default) or 'openrouter' for text/JSON calls.
• GEMINI_TEXT_MODEL   – model used for market reports and style analysis.
• GEMINI_IMAGE_MODEL  – model used for storybook illustrations.
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass

from dotenv import load_dotenv  # type: ignore

# Load variables from .env if present
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class StudioSettings:
    """Immutable container for runtime parameters."""

    # --- Provider selection ----------------------------------------------
    llm_provider: str = os.getenv("LLM_PROVIDER", "gemini")

    # --- Provider keys ----------------------------------------------------
    gemini_api_key: str | None = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
    openrouter_api_key: str | None = os.getenv("OPENROUTER_API_KEY")

    # --- Models -----------------------------------------------------------
    gemini_text_model: str = os.getenv("GEMINI_TEXT_MODEL", "gemini-3-flash-preview")
    gemini_image_model: str = os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image")
    openrouter_chat_model: str = os.getenv(
        "OPENROUTER_CHAT_MODEL", "google/gemini-2.5-flash"
    )
    image_aspect_ratio: str = os.getenv("IMAGE_ASPECT_RATIO", "4:3")

    # --- Topic Insights defaults -------------------------------------------
    default_region: str = os.getenv("DEFAULT_REGION", "South Korea")
    default_topic: str = os.getenv("DEFAULT_TOPIC", "교육")
    auto_analyze_on_start: bool = _env_flag("AUTO_ANALYZE_ON_START", "true")

    # --- Activity sidebar ----------------------------------------------------
    activity_log_size: int = int(os.getenv("ACTIVITY_LOG_SIZE", "20"))

    def api_key_for(self, provider: str) -> str | None:
        """Return the configured key for *provider* (case-insensitive)."""
        provider = provider.lower().strip()
        if provider == "gemini":
            return self.gemini_api_key
        if provider == "openrouter":
            return self.openrouter_api_key
        raise ValueError(f"Unknown LLM provider: {provider}")


# Singleton used by most callers
SETTINGS = StudioSettings()


def update_from_kwargs(**overrides) -> StudioSettings:
    """Return a new StudioSettings with supplied overrides."""

    return dataclasses.replace(SETTINGS, **overrides)
