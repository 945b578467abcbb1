from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence


@dataclass(frozen=True)
class ImageData:
    """Raw image bytes plus their MIME type, as sent to or returned by a model."""

    data: bytes
    mime_type: str = "image/png"

    @property
    def data_url(self) -> str:
        """Return the image as a ``data:`` URL (OpenAI-style ``image_url`` content)."""
        return f"data:{self.mime_type};base64,{base64.b64encode(self.data).decode()}"

    @classmethod
    def from_data_url(cls, url: str) -> "ImageData":
        """Parse a ``data:<mime>;base64,<payload>`` URL."""
        if not url.startswith("data:") or "," not in url:
            raise ValueError("Not a base64 data URL")
        header, payload = url.split(",", 1)
        mime_type = header[len("data:"):].split(";")[0] or "image/png"
        return cls(data=base64.b64decode(payload), mime_type=mime_type)


class LLMClient(ABC):
    """Abstract interface for generative model providers."""

    @abstractmethod
    def chat(self, messages: List[Dict[str, Any]], **kwargs: Any) -> str:  # noqa: D401
        """Send chat messages and return the assistant reply text."""

    @abstractmethod
    def generate_json(
        self, prompt: str, schema: Dict[str, Any], **kwargs: Any
    ) -> str:  # noqa: D401
        """Return raw JSON text constrained by *schema* (OpenAPI-style dict)."""

    # Optional API: only image-capable providers implement this.
    def generate_image(
        self, prompt: str, references: Sequence[ImageData] = (), **kwargs: Any
    ) -> ImageData:  # noqa: D401
        """Return one generated image for *prompt* or raise if unsupported."""
        raise NotImplementedError("Image generation not implemented for this client.")


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------

def get_client(provider: str, api_key: str | None = None) -> "LLMClient":
    """Return an LLMClient for *provider* ('gemini' or 'openrouter')."""

    provider = provider.lower().strip()
    if provider == "gemini":
        from .gemini import GeminiClient  # local import to avoid heavy deps

        return GeminiClient(api_key=api_key)
    if provider == "openrouter":
        from .openrouter import OpenRouterClient

        return OpenRouterClient(api_key=api_key)

    raise ValueError(f"Unknown LLM provider: {provider}")


def get_default_client(provider: str | None = None) -> "LLMClient":
    """Build the client configured by ``LLM_PROVIDER`` (or *provider*)."""
    from creator_studio.config.settings import SETTINGS

    provider = provider or SETTINGS.llm_provider
    return get_client(provider, api_key=SETTINGS.api_key_for(provider))


def get_image_client() -> "LLMClient":
    """Image generation is only served by Gemini, whatever the text provider."""
    from creator_studio.config.settings import SETTINGS

    return get_client("gemini", api_key=SETTINGS.gemini_api_key)
