"""In-memory storybook project state.

A project always holds ``MAX_CHARACTERS`` character slots and ``PAGE_COUNT``
pages; slots are filled or cleared in place, never added or removed.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from creator_studio.llms import ImageData

MAX_CHARACTERS = 5
PAGE_COUNT = 30
EXAGGERATION_LEVELS = (40, 60, 80)
DEFAULT_EXAGGERATION = 60
PROMPT_TYPES = ("A", "B")


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Character:
    id: str = field(default_factory=_new_id)
    name: str = ""
    description: str = ""
    image: Optional[ImageData] = None

    @property
    def is_empty(self) -> bool:
        return self.image is None

    @property
    def label(self) -> str:
        return self.name or "이름 없음"


@dataclass
class StyleProfile:
    style_prompt: str
    reference_image: ImageData
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class ImageVariant:
    prompt_type: str
    prompt: str
    image: ImageData
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class StoryPage:
    number: int
    scenario: str = ""
    user_prompt: str = ""
    variants: List[ImageVariant] = field(default_factory=list)

    @property
    def scene_text(self) -> str:
        """The text that will be illustrated: the override if set, else the scenario."""
        return self.user_prompt.strip() or self.scenario.strip()

    def remove_variant(self, variant_id: str) -> bool:
        before = len(self.variants)
        self.variants = [v for v in self.variants if v.id != variant_id]
        return len(self.variants) != before


@dataclass
class StorybookProject:
    characters: List[Character] = field(
        default_factory=lambda: [Character() for _ in range(MAX_CHARACTERS)]
    )
    pages: List[StoryPage] = field(
        default_factory=lambda: [StoryPage(number=n) for n in range(1, PAGE_COUNT + 1)]
    )
    style_profile: Optional[StyleProfile] = None
    exaggeration_level: int = DEFAULT_EXAGGERATION

    def __post_init__(self):
        if len(self.characters) != MAX_CHARACTERS:
            raise ValueError(f"A project has exactly {MAX_CHARACTERS} character slots")
        if len(self.pages) != PAGE_COUNT:
            raise ValueError(f"A project has exactly {PAGE_COUNT} pages")
        if self.exaggeration_level not in EXAGGERATION_LEVELS:
            raise ValueError(f"Unsupported exaggeration level: {self.exaggeration_level}")

    # --- Characters -------------------------------------------------------

    def slot(self, index: int) -> Character:
        if not 0 <= index < MAX_CHARACTERS:
            raise ValueError(f"Character slot out of range: {index}")
        return self.characters[index]

    def set_character(
        self,
        index: int,
        *,
        name: str | None = None,
        description: str | None = None,
        image: ImageData | None = None,
    ) -> Character:
        """Update the fields given for slot *index*; the slot keeps its id."""
        character = self.slot(index)
        if name is not None:
            character.name = name.strip()
        if description is not None:
            character.description = description.strip()
        if image is not None:
            character.image = image
        return character

    def clear_character(self, index: int) -> None:
        self.characters[index] = Character(id=self.slot(index).id)

    @property
    def filled_characters(self) -> List[Character]:
        return [c for c in self.characters if not c.is_empty]

    def character_images(self) -> List[ImageData]:
        return [c.image for c in self.filled_characters if c.image is not None]

    # --- Pages ------------------------------------------------------------

    def page(self, number: int) -> StoryPage:
        if not 1 <= number <= PAGE_COUNT:
            raise ValueError(f"Page number out of range: {number}")
        return self.pages[number - 1]

    def set_exaggeration(self, level: int) -> None:
        if level not in EXAGGERATION_LEVELS:
            raise ValueError(f"Unsupported exaggeration level: {level}")
        self.exaggeration_level = level

    @property
    def illustrated_page_count(self) -> int:
        return sum(1 for p in self.pages if p.variants)
