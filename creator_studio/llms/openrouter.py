from __future__ import annotations

import json
from typing import Any, Dict

from openai import OpenAI

from .base import LLMClient
from creator_studio.config.settings import SETTINGS


class OpenRouterClient(LLMClient):
    """Wrapper around the OpenRouter API compatible with the OpenAI SDK."""

    BASE_URL = "https://openrouter.ai/api/v1"

    def __init__(self, api_key: str | None):
        if not api_key:
            raise ValueError("OpenRouter API key must be provided.")

        # The OpenAI Python library v1.0+ supports custom hosts via *base_url*.
        # We initialise a dedicated client instance to avoid global side-effects.
        self._client = OpenAI(
            api_key=api_key,
            base_url=self.BASE_URL,
            default_headers={"X-Title": "Creator Studio"},
        )

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------

    def chat(self, messages: Any, model: str | None = None, **kwargs: Any) -> str:  # type: ignore[override]
        """Return the assistant reply for *messages* using *model*."""
        if model is None:
            model = SETTINGS.openrouter_chat_model

        completion = self._client.chat.completions.create(  # type: ignore[arg-type]
            model=model,
            messages=messages,
            **kwargs,
        )
        return completion.choices[0].message.content or ""

    def generate_json(
        self, prompt: str, schema: Dict[str, Any], model: str | None = None, **kwargs: Any
    ) -> str:  # type: ignore[override]
        """JSON mode plus the schema spelled out in the system message.

        OpenRouter routes do not all honour strict schemas, so the caller still
        validates the shape of what comes back.
        """
        messages = [
            {
                "role": "system",
                "content": (
                    "Respond with a single JSON object only. It must match this "
                    f"schema:\n{json.dumps(schema, ensure_ascii=False)}"
                ),
            },
            {"role": "user", "content": prompt},
        ]
        return self.chat(
            messages,
            model=model,
            response_format={"type": "json_object"},
            **kwargs,
        )
