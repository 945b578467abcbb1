"""Market report records built from the model's JSON reply.

The wire shape is camelCase (``cpmRange``, ``topChannels`` ...); the Python
side uses snake_case and converts on the way in and out.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List

STRATEGY_TYPES = ("general", "niche")
HIGH_COMPETITION = {"높음", "High"}
MAX_DISPLAY_IDEAS = 5
MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5


def is_high_competition(value: str) -> bool:
    return value.strip() in HIGH_COMPETITION


def _clamp_difficulty(value: Any) -> int:
    try:
        level = int(round(float(value)))
    except (TypeError, ValueError):
        level = MIN_DIFFICULTY
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, level))


@dataclass
class Channel:
    name: str
    subscribers: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "subscribers": self.subscribers, "url": self.url}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Channel":
        return cls(
            name=str(data["name"]),
            subscribers=str(data["subscribers"]),
            url=str(data["url"]),
        )


@dataclass
class MarketStats:
    related_channels: str
    related_videos: str
    avg_subscribers: str
    competition_intensity: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "relatedChannels": self.related_channels,
            "relatedVideos": self.related_videos,
            "avgSubscribers": self.avg_subscribers,
            "competitionIntensity": self.competition_intensity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MarketStats":
        return cls(
            related_channels=str(data["relatedChannels"]),
            related_videos=str(data["relatedVideos"]),
            avg_subscribers=str(data["avgSubscribers"]),
            competition_intensity=str(data["competitionIntensity"]),
        )


@dataclass
class Strategy:
    """A content-targeting strategy; ``type`` is 'general' or 'niche'."""

    type: str
    title: str
    description: str
    competition: str
    difficulty: int
    estimated_cpm: str
    ideas: List[str] = field(default_factory=list)

    @property
    def is_niche(self) -> bool:
        return self.type == "niche"

    @property
    def display_ideas(self) -> List[str]:
        return self.ideas[:MAX_DISPLAY_IDEAS]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "competition": self.competition,
            "difficulty": self.difficulty,
            "estimatedCpm": self.estimated_cpm,
            "ideas": list(self.ideas),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Strategy":
        # Anything other than "niche" is shown as a general strategy.
        strategy_type = str(data["type"]).strip().lower()
        if strategy_type not in STRATEGY_TYPES:
            strategy_type = "general"
        ideas = data["ideas"]
        if not isinstance(ideas, list):
            raise ValueError("Strategy ideas must be a list")
        return cls(
            type=strategy_type,
            title=str(data["title"]),
            description=str(data["description"]),
            competition=str(data["competition"]),
            difficulty=_clamp_difficulty(data["difficulty"]),
            estimated_cpm=str(data["estimatedCpm"]),
            ideas=[str(idea) for idea in ideas],
        )


@dataclass
class AnalysisReport:
    region: str
    category: str
    cpm_range: str
    stats: MarketStats
    top_channels: List[Channel] = field(default_factory=list)
    insights: List[str] = field(default_factory=list)
    strategies: List[Strategy] = field(default_factory=list)

    def replace_strategy(self, index: int, strategy: Strategy) -> "AnalysisReport":
        """Return a copy of the report with ``strategies[index]`` swapped out."""
        if not 0 <= index < len(self.strategies):
            raise IndexError(f"Strategy index out of range: {index}")
        strategies = list(self.strategies)
        strategies[index] = strategy
        return replace(self, strategies=strategies)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "region": self.region,
            "category": self.category,
            "cpmRange": self.cpm_range,
            "stats": self.stats.to_dict(),
            "topChannels": [c.to_dict() for c in self.top_channels],
            "insights": list(self.insights),
            "strategies": [s.to_dict() for s in self.strategies],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisReport":
        return cls(
            region=str(data["region"]),
            category=str(data["category"]),
            cpm_range=str(data["cpmRange"]),
            stats=MarketStats.from_dict(data["stats"]),
            top_channels=[Channel.from_dict(c) for c in data["topChannels"]],
            insights=[str(i) for i in data["insights"]],
            strategies=[Strategy.from_dict(s) for s in data["strategies"]],
        )
