"""Market-analysis prompts and response schemas for YouTube topic reports."""

_COMPETITION_HINT = "낮음, 보통, 높음"

STRATEGY_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "type": {"type": "STRING", "description": "general or niche"},
        "title": {"type": "STRING"},
        "description": {"type": "STRING"},
        "competition": {"type": "STRING", "description": _COMPETITION_HINT},
        "difficulty": {"type": "NUMBER"},
        "estimatedCpm": {"type": "STRING"},
        "ideas": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": [
        "type",
        "title",
        "description",
        "competition",
        "difficulty",
        "estimatedCpm",
        "ideas",
    ],
}

NICHE_STRATEGY_SCHEMA = {
    **STRATEGY_SCHEMA,
    "properties": {
        **STRATEGY_SCHEMA["properties"],
        "type": {"type": "STRING", "enum": ["niche"]},
        "competition": {"type": "STRING"},
    },
}

ANALYSIS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "region": {"type": "STRING"},
        "category": {"type": "STRING"},
        "cpmRange": {"type": "STRING"},
        "stats": {
            "type": "OBJECT",
            "properties": {
                "relatedChannels": {"type": "STRING"},
                "relatedVideos": {"type": "STRING"},
                "avgSubscribers": {"type": "STRING"},
                "competitionIntensity": {"type": "STRING", "description": _COMPETITION_HINT},
            },
            "required": [
                "relatedChannels",
                "relatedVideos",
                "avgSubscribers",
                "competitionIntensity",
            ],
        },
        "topChannels": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "name": {"type": "STRING"},
                    "subscribers": {"type": "STRING"},
                    "url": {"type": "STRING"},
                },
                "required": ["name", "subscribers", "url"],
            },
        },
        "insights": {"type": "ARRAY", "items": {"type": "STRING"}},
        "strategies": {"type": "ARRAY", "items": STRATEGY_SCHEMA},
    },
    "required": [
        "region",
        "category",
        "cpmRange",
        "stats",
        "topChannels",
        "insights",
        "strategies",
    ],
}


def get_topic_analysis_prompt(topic: str, region: str) -> str:
    """Generate prompt for the full market report of *topic* in *region*.

    Args:
        topic: YouTube topic or niche entered by the user
        region: Target market (e.g. "South Korea", "Global")

    Returns:
        Formatted prompt string for schema-constrained generation
    """
    return f"""Analyze the YouTube topic/niche: "{topic}" in region: "{region}".
Provide a detailed breakdown of market statistics, top competitor examples, key insights, and comparative strategies (General vs Niche).

CRITICAL RULES:
1. All text fields in the JSON response MUST be in Korean (한국어).
2. For every strategy, especially 'niche' type, you MUST provide EXACTLY 5 high-quality, creative content ideas.
3. Ensure the CPM range reflects current market data for {region}."""


def get_niche_refresh_prompt(topic: str, region: str) -> str:
    """Generate prompt for one replacement niche strategy."""
    return f"""Based on the YouTube topic "{topic}" in "{region}", generate a NEW and highly specific 'niche' strategy.
The strategy should target a very specific segment of the audience to minimize competition.
Provide EXACTLY 5 unique and actionable content ideas.
All response text must be in Korean (한국어)."""
