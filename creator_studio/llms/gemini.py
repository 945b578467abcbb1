"""Google Gemini client using the official ``google-genai`` SDK.

Provides chat completions, schema-constrained JSON output and image
generation (``response_modalities`` IMAGE) through the Gemini API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from .base import ImageData, LLMClient
from creator_studio.config.settings import SETTINGS

logger = logging.getLogger(__name__)


class GeminiClient(LLMClient):
    """Wrapper for Google Gemini models via the google-genai SDK."""

    def __init__(self, api_key: str | None):
        if not api_key:
            raise ValueError("Gemini API key must be provided.")

        try:
            from google import genai  # type: ignore
            from google.genai import types  # type: ignore
        except ImportError as exc:
            raise RuntimeError(
                "google-genai package not installed. "
                "Install with: pip install google-genai"
            ) from exc

        self._client = genai.Client(api_key=api_key)
        self._types = types

    def chat(self, messages: Any, model: str | None = None, **kwargs: Any) -> str:  # type: ignore[override]
        """Send chat messages and return the assistant reply text."""
        if model is None:
            model = SETTINGS.gemini_text_model

        try:
            system_instruction, contents = self._convert_messages(messages)

            generation_config: Dict[str, Any] = {}
            if system_instruction:
                generation_config["system_instruction"] = system_instruction
            if "temperature" in kwargs:
                generation_config["temperature"] = kwargs["temperature"]
            if "max_tokens" in kwargs:
                generation_config["max_output_tokens"] = kwargs["max_tokens"]

            response = self._client.models.generate_content(
                model=model,
                contents=contents,
                config=self._types.GenerateContentConfig(**generation_config),
            )
            return response.text or ""

        except Exception as e:
            # Re-raise with provider context for better error handling
            error_msg = f"Gemini API error: {e}"
            logger.error(error_msg)
            raise Exception(error_msg) from e

    def generate_json(
        self, prompt: str, schema: Dict[str, Any], model: str | None = None, **kwargs: Any
    ) -> str:  # type: ignore[override]
        """Return the JSON text produced under *schema*."""
        if model is None:
            model = SETTINGS.gemini_text_model

        try:
            response = self._client.models.generate_content(
                model=model,
                contents=prompt,
                config=self._types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=schema,
                ),
            )
            return response.text or ""
        except Exception as e:
            error_msg = f"Gemini API error: {e}"
            logger.error(error_msg)
            raise Exception(error_msg) from e

    def generate_image(
        self,
        prompt: str,
        references: Sequence[ImageData] = (),
        model: str | None = None,
        aspect_ratio: str | None = None,
        **kwargs: Any,
    ) -> ImageData:  # type: ignore[override]
        """Generate one image; *references* are sent ahead of the prompt as inline images."""
        types = self._types
        if model is None:
            model = SETTINGS.gemini_image_model
        if aspect_ratio is None:
            aspect_ratio = SETTINGS.image_aspect_ratio

        contents: List[Any] = [
            types.Part.from_bytes(data=ref.data, mime_type=ref.mime_type)
            for ref in references
        ]
        contents.append(prompt)

        try:
            response = self._client.models.generate_content(
                model=model,
                contents=contents,
                config=types.GenerateContentConfig(
                    response_modalities=[types.Modality.TEXT, types.Modality.IMAGE],
                    image_config=types.ImageConfig(aspect_ratio=aspect_ratio),
                ),
            )
        except Exception as e:
            error_msg = f"Gemini API error: {e}"
            logger.error(error_msg)
            raise Exception(error_msg) from e

        for candidate in response.candidates or []:
            if candidate.content is None:
                continue
            for part in candidate.content.parts or []:
                if part.inline_data and part.inline_data.data:
                    return ImageData(
                        data=part.inline_data.data,
                        mime_type=part.inline_data.mime_type or "image/png",
                    )

        raise RuntimeError("Gemini did not return an image")

    def _convert_messages(self, messages: List[Dict[str, Any]]):
        """Convert OpenAI-style messages to (system_instruction, Gemini contents)."""
        types = self._types
        system_parts: List[str] = []
        contents = []

        for msg in messages:
            role = msg.get("role", "user")
            content = msg.get("content", "")

            parts = []
            # Handle multimodal content (list of content items)
            if isinstance(content, list):
                for item in content:
                    if item.get("type") == "text":
                        parts.append(types.Part.from_text(text=item["text"]))
                    elif item.get("type") == "image_url":
                        image_url = item["image_url"]["url"]
                        if image_url.startswith("data:image/"):
                            image = ImageData.from_data_url(image_url)
                            parts.append(
                                types.Part.from_bytes(data=image.data, mime_type=image.mime_type)
                            )
            else:
                parts.append(types.Part.from_text(text=content))

            if role == "system":
                # Gemini takes system text as a separate instruction
                system_parts.extend(p.text for p in parts if p.text)
            elif role == "assistant":
                contents.append(types.Content(role="model", parts=parts))
            else:
                contents.append(types.Content(role="user", parts=parts))

        return "\n".join(system_parts) or None, contents
