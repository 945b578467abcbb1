"""Storybook illustration prompts."""

DEFAULT_STYLE_PROMPT = (
    "Digital illustration, soft watercolor style, pastel colors, children's book "
    "aesthetic, gentle lighting, warm tones"
)

EXAGGERATION_PHRASES = {
    40: "Natural and subtle emotions",
    60: "Expressive fairy-tale style reactions",
    80: "Highly dramatic and comedic expressions",
}

COMPOSITION_PHRASES = {
    "A": "Composition: Medium shot, centered, balanced framing.",
    "B": "Composition: Wide shot, dynamic angle, environmental context.",
}


def get_style_analysis_prompt(image_count: int) -> str:
    """Prompt asking a vision model to name the shared art style of *image_count* images."""
    subject = "this character illustration" if image_count == 1 else f"these {image_count} character illustrations"
    return f"""You are an art director for children's picture books. Study {subject} and describe the shared visual style so another illustrator could match it exactly.

Return ONE line of comma-separated style keywords in English, covering:
- medium and rendering technique (e.g. watercolor, gouache, flat vector)
- color palette and saturation
- line quality and texture
- lighting and overall mood

Do not describe the characters themselves, their names, poses or the scene. Output only the style line."""
