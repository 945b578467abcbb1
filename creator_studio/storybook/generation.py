"""Style analysis and illustration generation for storybook pages.

generate_images_ab() builds both composition prompts and issues the two
image requests at the same time, waiting for both before returning.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Sequence

from creator_studio.llms import ImageData, LLMClient, get_default_client, get_image_client
from creator_studio.prompts.storybook import DEFAULT_STYLE_PROMPT, get_style_analysis_prompt
from creator_studio.storybook.models import Character, StyleProfile
from creator_studio.storybook.prompting import build_prompt, selected_characters

logger = logging.getLogger(__name__)


class ImageGenerationError(RuntimeError):
    """An illustration could not be produced."""


@dataclass(frozen=True)
class ABResult:
    prompt_a: str
    prompt_b: str
    image_a: ImageData
    image_b: ImageData


def default_style_profile(reference_image: ImageData) -> StyleProfile:
    """Profile with the stock watercolor picture-book style."""
    return StyleProfile(style_prompt=DEFAULT_STYLE_PROMPT, reference_image=reference_image)


def analyze_style(
    character_images: Sequence[ImageData],
    *,
    client: LLMClient | None = None,
) -> StyleProfile:
    """Derive a style prompt from the character images; the first one becomes the reference."""
    if not character_images:
        raise ValueError("At least one character image is required for style analysis.")

    content = [{"type": "text", "text": get_style_analysis_prompt(len(character_images))}]
    for image in character_images:
        content.append({"type": "image_url", "image_url": {"url": image.data_url}})

    client = client or get_default_client()
    reply = client.chat([{"role": "user", "content": content}], temperature=0.2)
    style_prompt = " ".join(reply.split()).strip().rstrip(".")
    if not style_prompt:
        raise ImageGenerationError("Style analysis returned an empty description")

    logger.info("Style profile derived from %d image(s): %s", len(character_images), style_prompt)
    return StyleProfile(style_prompt=style_prompt, reference_image=character_images[0])


def generate_image(
    full_prompt: str,
    style_reference: ImageData,
    character_references: Sequence[ImageData],
    *,
    client: LLMClient | None = None,
) -> ImageData:
    """Generate one illustration, passing the style and character references along."""
    logger.debug("Generating image with prompt: %s", full_prompt)
    logger.debug("References: 1 style + %d character image(s)", len(character_references))
    try:
        client = client or get_image_client()
        return client.generate_image(full_prompt, [style_reference, *character_references])
    except Exception as exc:
        logger.error("Image generation failed: %s", exc)
        raise ImageGenerationError("Failed to generate image") from exc


def generate_images_ab(
    style_profile: StyleProfile,
    characters: Sequence[Character],
    selected_ids: Sequence[str],
    scenario: str,
    exaggeration_level: int,
    user_prompt: str | None = None,
    *,
    client: LLMClient | None = None,
) -> ABResult:
    """Build prompts A and B and generate both images in parallel."""
    prompt_a = build_prompt(
        style_profile, characters, selected_ids, scenario, exaggeration_level, "A", user_prompt
    )
    prompt_b = build_prompt(
        style_profile, characters, selected_ids, scenario, exaggeration_level, "B", user_prompt
    )
    references = [
        c.image for c in selected_characters(characters, selected_ids) if c.image is not None
    ]

    with ThreadPoolExecutor(max_workers=2) as pool:
        future_a = pool.submit(
            generate_image, prompt_a, style_profile.reference_image, references, client=client
        )
        future_b = pool.submit(
            generate_image, prompt_b, style_profile.reference_image, references, client=client
        )
        image_a = future_a.result()
        image_b = future_b.result()

    return ABResult(prompt_a=prompt_a, prompt_b=prompt_b, image_a=image_a, image_b=image_b)


__all__ = [
    "ABResult",
    "ImageGenerationError",
    "analyze_style",
    "default_style_profile",
    "generate_image",
    "generate_images_ab",
]
