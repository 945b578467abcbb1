"""Prompt assembly for storybook illustrations.

Order is fixed: style, characters, scene, expression focus, exaggeration,
composition. Variant A and B differ only in the composition sentence.
"""

from __future__ import annotations

from typing import Sequence

from creator_studio.prompts.storybook import COMPOSITION_PHRASES, EXAGGERATION_PHRASES
from creator_studio.storybook.models import Character, StyleProfile


def selected_characters(
    characters: Sequence[Character], selected_ids: Sequence[str]
) -> list[Character]:
    """Selected, non-empty characters in slot order."""
    wanted = set(selected_ids)
    return [c for c in characters if c.id in wanted and not c.is_empty]


def build_prompt(
    style_profile: StyleProfile,
    characters: Sequence[Character],
    selected_ids: Sequence[str],
    scenario: str,
    exaggeration_level: int,
    prompt_type: str,
    user_prompt: str | None = None,
) -> str:
    if exaggeration_level not in EXAGGERATION_PHRASES:
        raise ValueError(f"Unsupported exaggeration level: {exaggeration_level}")
    if prompt_type not in COMPOSITION_PHRASES:
        raise ValueError(f"Unsupported prompt type: {prompt_type!r}")

    prompt = f"Style: {style_profile.style_prompt}. "

    chars = selected_characters(characters, selected_ids)
    if chars:
        descriptions = ", ".join(
            f"CHARACTER_{idx}: {char.name}" + (f", {char.description}" if char.description else "")
            for idx, char in enumerate(chars, 1)
        )
        prompt += f"Characters: {descriptions}. "

    prompt += f"Scene: {user_prompt or scenario}. "
    prompt += "Focus on facial expressions and body language. "
    prompt += f"Emotion intensity: {EXAGGERATION_PHRASES[exaggeration_level]}. "
    prompt += COMPOSITION_PHRASES[prompt_type]
    return prompt
