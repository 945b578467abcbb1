"""YouTube topic market analysis.

Public API
==========
analyze_topic()           – full market report for a topic/region
refresh_niche_strategy()  – one fresh 'niche' strategy for the same topic/region

Both calls go through the generic :pymod:`creator_studio.llms` layer, so the
provider and model are controlled by ``config.settings``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from creator_studio.analysis.report_models import AnalysisReport, Strategy
from creator_studio.config.settings import SETTINGS
from creator_studio.llms import LLMClient, get_default_client
from creator_studio.prompts.topic_analysis import (
    ANALYSIS_SCHEMA,
    NICHE_STRATEGY_SCHEMA,
    get_niche_refresh_prompt,
    get_topic_analysis_prompt,
)

logger = logging.getLogger(__name__)

# Region values sent to the model, with their Korean labels for the UI.
REGIONS = {
    "South Korea": "한국 (KR)",
    "United States": "미국 (US)",
    "Japan": "일본 (JP)",
    "Global": "글로벌 (Global)",
}


class AnalysisError(RuntimeError):
    """The model replied, but not with a usable report."""


def _load_json(text: str) -> Dict[str, Any]:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object")
    return data


def parse_report(text: str) -> AnalysisReport:
    """Build an :class:`AnalysisReport` from the raw model reply."""
    try:
        return AnalysisReport.from_dict(_load_json(text))
    except (ValueError, KeyError, TypeError) as exc:
        logger.error("Failed to parse analysis response: %s", exc)
        raise AnalysisError("Invalid analysis data returned from AI") from exc


def parse_niche_strategy(text: str) -> Strategy:
    """Build a niche :class:`Strategy` from the raw model reply."""
    try:
        data = _load_json(text)
        # The schema pins the type, but OpenRouter routes may drop it.
        data.setdefault("type", "niche")
        strategy = Strategy.from_dict(data)
    except (ValueError, KeyError, TypeError) as exc:
        logger.error("Failed to parse refresh response: %s", exc)
        raise AnalysisError("Failed to generate niche refresh") from exc
    if not strategy.is_niche:
        raise AnalysisError("Failed to generate niche refresh")
    return strategy


def analyze_topic(
    topic: str,
    region: str | None = None,
    *,
    client: LLMClient | None = None,
) -> AnalysisReport:
    """Return the market report for *topic* in *region* (default: settings)."""
    region = region or SETTINGS.default_region
    client = client or get_default_client()

    logger.info("Analyzing topic %r in %s", topic, region)
    text = client.generate_json(get_topic_analysis_prompt(topic, region), ANALYSIS_SCHEMA)
    report = parse_report(text)
    logger.info(
        "Report ready: %d channels, %d insights, %d strategies",
        len(report.top_channels),
        len(report.insights),
        len(report.strategies),
    )
    return report


def refresh_niche_strategy(
    topic: str,
    region: str,
    *,
    client: LLMClient | None = None,
) -> Strategy:
    """Return a new niche strategy for *topic* in *region*."""
    client = client or get_default_client()

    logger.info("Refreshing niche strategy for %r in %s", topic, region)
    text = client.generate_json(get_niche_refresh_prompt(topic, region), NICHE_STRATEGY_SCHEMA)
    return parse_niche_strategy(text)


__all__ = [
    "REGIONS",
    "AnalysisError",
    "analyze_topic",
    "refresh_niche_strategy",
    "parse_report",
    "parse_niche_strategy",
]
