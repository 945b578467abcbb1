"""Unit tests for style analysis and A/B illustration generation."""

import threading

import pytest

from creator_studio.llms import ImageData
from creator_studio.prompts.storybook import DEFAULT_STYLE_PROMPT
from creator_studio.storybook.generation import (
    ImageGenerationError,
    analyze_style,
    default_style_profile,
    generate_image,
    generate_images_ab,
)
from creator_studio.storybook.models import Character, StyleProfile


@pytest.fixture
def style_ref():
    return ImageData(data=b"style", mime_type="image/png")


@pytest.fixture
def style(style_ref):
    return StyleProfile(style_prompt="Crayon texture", reference_image=style_ref)


class TestAnalyzeStyle:
    """Test analyze_style."""

    def test_sends_all_images_and_uses_first_as_reference(self, fake_client_cls, image_data, style_ref):
        client = fake_client_cls(chat_reply="  Gouache,\n bold outlines, warm palette. ")

        profile = analyze_style([image_data, style_ref], client=client)

        assert profile.style_prompt == "Gouache, bold outlines, warm palette"
        assert profile.reference_image is image_data
        messages, kwargs = client.chat_calls[0]
        content = messages[0]["content"]
        assert content[0]["type"] == "text"
        assert [c["type"] for c in content[1:]] == ["image_url", "image_url"]
        assert content[1]["image_url"]["url"].startswith("data:image/png;base64,")

    def test_requires_an_image(self, fake_client_cls):
        with pytest.raises(ValueError):
            analyze_style([], client=fake_client_cls())

    def test_empty_reply_raises(self, fake_client_cls, image_data):
        with pytest.raises(ImageGenerationError):
            analyze_style([image_data], client=fake_client_cls(chat_reply="   "))


def test_default_style_profile(image_data):
    profile = default_style_profile(image_data)

    assert profile.style_prompt == DEFAULT_STYLE_PROMPT
    assert profile.reference_image is image_data
    assert profile.id


class TestGenerateImage:
    """Test generate_image."""

    def test_passes_style_reference_first(self, fake_client_cls, style_ref, image_data):
        client = fake_client_cls()

        result = generate_image("a prompt", style_ref, [image_data], client=client)

        assert result.data == b"a prompt"
        prompt, refs = client.image_calls[0]
        assert refs == [style_ref, image_data]

    def test_wraps_provider_errors(self, fake_client_cls, style_ref):
        client = fake_client_cls(image_error=RuntimeError("quota"))

        with pytest.raises(ImageGenerationError, match="Failed to generate image") as exc_info:
            generate_image("p", style_ref, [], client=client)

        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestGenerateImagesAB:
    """Test generate_images_ab."""

    def test_builds_both_prompts_and_images(self, fake_client_cls, style, image_data, style_ref):
        client = fake_client_cls()
        characters = [
            Character(id="c1", name="토리", image=image_data),
            Character(id="c2", name="빈칸"),
        ]

        result = generate_images_ab(style, characters, ["c1", "c2"], "소풍", 80, client=client)

        assert result.prompt_a.endswith("Medium shot, centered, balanced framing.")
        assert result.prompt_b.endswith("Wide shot, dynamic angle, environmental context.")
        assert result.image_a.data == result.prompt_a.encode("utf-8")
        assert result.image_b.data == result.prompt_b.encode("utf-8")
        assert len(client.image_calls) == 2
        for _, refs in client.image_calls:
            assert refs == [style_ref, image_data]

    def test_requests_run_concurrently(self, fake_client_cls, style):
        barrier = threading.Barrier(2, timeout=5)

        class BarrierClient(fake_client_cls):
            def generate_image(self, prompt, references=(), **kwargs):
                # Both calls must be in flight at once or the barrier times out.
                barrier.wait()
                return super().generate_image(prompt, references, **kwargs)

        result = generate_images_ab(style, [], [], "장면", 60, client=BarrierClient())

        assert result.prompt_a != result.prompt_b

    def test_one_failure_fails_the_pair(self, fake_client_cls, style):
        client = fake_client_cls(image_error=RuntimeError("boom"))

        with pytest.raises(ImageGenerationError):
            generate_images_ab(style, [], [], "장면", 60, client=client)

    def test_user_prompt_is_used(self, fake_client_cls, style):
        client = fake_client_cls()

        result = generate_images_ab(style, [], [], "시나리오", 60, "직접 장면", client=client)

        assert "Scene: 직접 장면. " in result.prompt_a
        assert "Scene: 직접 장면. " in result.prompt_b
