"""Business-logic helpers for the Storybook Studio.

Image uploads are normalised with Pillow before they are used as model
references, and page generation narrates into the shared activity log.
"""
from __future__ import annotations

import io
import logging
import re
from typing import List, Sequence

from PIL import Image, UnidentifiedImageError

from creator_studio.helpers.activity_log import ActivityLog
from creator_studio.llms import ImageData, LLMClient
from creator_studio.storybook.generation import analyze_style, default_style_profile, generate_images_ab
from creator_studio.storybook.models import ImageVariant, StorybookProject, StyleProfile

logger = logging.getLogger(__name__)

MAX_REFERENCE_SIZE = 1024
STUDIO_AGENT = "일러스트 에이전트"


def load_character_image(raw: bytes, filename: str = "upload") -> ImageData:
    """Decode an uploaded image, cap its longest side and re-encode as PNG."""
    try:
        img = Image.open(io.BytesIO(raw))
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError(f"{filename}: 이미지 파일을 읽을 수 없습니다.") from exc

    if img.mode not in ("RGB", "RGBA"):
        img = img.convert("RGBA")
    img.thumbnail((MAX_REFERENCE_SIZE, MAX_REFERENCE_SIZE))

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    logger.info("Loaded character image %s (%dx%d)", filename, *img.size)
    return ImageData(data=buf.getvalue(), mime_type="image/png")


def build_style_profile(
    project: StorybookProject,
    log: ActivityLog,
    *,
    analyze: bool = True,
    client: LLMClient | None = None,
) -> StyleProfile | None:
    """Fix the project's style profile from its character images."""
    images = project.character_images()
    if not images:
        log.add("스타일 분석을 위해 캐릭터 이미지를 먼저 등록하세요.", STUDIO_AGENT, "warning")
        return None

    if not analyze:
        project.style_profile = default_style_profile(images[0])
        log.add("기본 수채화 스타일 프로필을 적용했습니다.", STUDIO_AGENT, "success")
        return project.style_profile

    log.add(f"캐릭터 이미지 {len(images)}장에서 스타일 분석 중...", "스타일 분석가", "ai")
    try:
        project.style_profile = analyze_style(images, client=client)
    except Exception as exc:
        logger.warning("Style analysis failed: %s", exc)
        log.add("스타일 분석 중 오류가 발생했습니다.", "시스템", "warning")
        return None

    log.add("스타일 프로필이 고정되었습니다.", "스타일 분석가", "success")
    return project.style_profile


def generate_page_variants(
    project: StorybookProject,
    page_number: int,
    selected_ids: Sequence[str],
    log: ActivityLog,
    *,
    client: LLMClient | None = None,
) -> List[ImageVariant]:
    """Generate the A/B pair for a page and append it to the page's variants."""
    page = project.page(page_number)

    if project.style_profile is None:
        log.add("스타일 프로필을 먼저 생성하세요.", STUDIO_AGENT, "warning")
        return []
    if not page.scene_text:
        log.add(f"{page_number}페이지의 장면 설명을 입력하세요.", STUDIO_AGENT, "warning")
        return []

    log.add(f"{page_number}페이지 A/B 일러스트 생성 중...", STUDIO_AGENT, "ai")
    try:
        result = generate_images_ab(
            project.style_profile,
            project.characters,
            selected_ids,
            page.scenario.strip(),
            project.exaggeration_level,
            page.user_prompt.strip() or None,
            client=client,
        )
    except Exception as exc:
        logger.warning("Illustration generation failed for page %d: %s", page_number, exc)
        log.add("이미지 생성 중 오류가 발생했습니다.", "시스템", "warning")
        return []

    variants = [
        ImageVariant(prompt_type="A", prompt=result.prompt_a, image=result.image_a),
        ImageVariant(prompt_type="B", prompt=result.prompt_b, image=result.image_b),
    ]
    page.variants.extend(variants)
    log.add(f"{page_number}페이지 일러스트 2장이 생성되었습니다.", STUDIO_AGENT, "success")
    return variants


def variant_filename(page_number: int, variant: ImageVariant) -> str:
    """Download name such as ``page-07-A-1a2b3c4d.png``."""
    subtype = variant.image.mime_type.split("/")[-1]
    ext = re.sub(r"[^a-z0-9]", "", subtype.lower()) or "png"
    if ext == "jpeg":
        ext = "jpg"
    return f"page-{page_number:02d}-{variant.prompt_type}-{variant.id[:8]}.{ext}"


__all__ = [
    "load_character_image",
    "build_style_profile",
    "generate_page_variants",
    "variant_filename",
]
