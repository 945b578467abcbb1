"""Unit tests for topic analysis calls and reply parsing."""

import json

import pytest

from creator_studio.analysis.topic_insights import (
    AnalysisError,
    analyze_topic,
    parse_niche_strategy,
    parse_report,
    refresh_niche_strategy,
)
from creator_studio.prompts.topic_analysis import ANALYSIS_SCHEMA, NICHE_STRATEGY_SCHEMA


class TestAnalyzeTopic:
    """Test analyze_topic."""

    def test_returns_parsed_report(self, fake_client_cls, report_json):
        client = fake_client_cls(json_replies=[report_json])

        report = analyze_topic("캠핑", "Japan", client=client)

        assert report.category == "여행 & 아웃도어"
        assert len(report.strategies) == 2

    def test_prompt_and_schema(self, fake_client_cls, report_json):
        client = fake_client_cls(json_replies=[report_json])

        analyze_topic("캠핑", "Japan", client=client)

        prompt, schema = client.json_calls[0]
        assert 'YouTube topic/niche: "캠핑" in region: "Japan"' in prompt
        assert "MUST be in Korean" in prompt
        assert "EXACTLY 5" in prompt
        assert "current market data for Japan" in prompt
        assert schema is ANALYSIS_SCHEMA

    def test_region_defaults_to_south_korea(self, fake_client_cls, report_json):
        client = fake_client_cls(json_replies=[report_json])

        analyze_topic("캠핑", client=client)

        assert 'region: "South Korea"' in client.json_calls[0][0]

    def test_invalid_json_raises_analysis_error(self, fake_client_cls):
        client = fake_client_cls(json_replies=["not json"])

        with pytest.raises(AnalysisError, match="Invalid analysis data returned from AI"):
            analyze_topic("캠핑", "Japan", client=client)

    def test_provider_error_propagates(self, fake_client_cls):
        client = fake_client_cls(json_replies=[Exception("Gemini API error: 503")])

        with pytest.raises(Exception, match="503"):
            analyze_topic("캠핑", "Japan", client=client)


class TestParseReport:
    """Test parse_report shape checks."""

    def test_missing_section_is_invalid(self, report_dict):
        del report_dict["stats"]

        with pytest.raises(AnalysisError):
            parse_report(json.dumps(report_dict))

    def test_array_root_is_invalid(self):
        with pytest.raises(AnalysisError):
            parse_report("[]")


class TestRefreshNicheStrategy:
    """Test refresh_niche_strategy."""

    def test_returns_niche_strategy(self, fake_client_cls, niche_dict):
        client = fake_client_cls(json_replies=[json.dumps(niche_dict, ensure_ascii=False)])

        strategy = refresh_niche_strategy("캠핑", "South Korea", client=client)

        assert strategy.is_niche
        prompt, schema = client.json_calls[0]
        assert 'topic "캠핑" in "South Korea"' in prompt
        assert "NEW and highly specific 'niche' strategy" in prompt
        assert schema is NICHE_STRATEGY_SCHEMA

    def test_missing_type_defaults_to_niche(self, niche_dict):
        del niche_dict["type"]

        assert parse_niche_strategy(json.dumps(niche_dict)).type == "niche"

    def test_general_reply_is_rejected(self, niche_dict):
        niche_dict["type"] = "general"

        with pytest.raises(AnalysisError, match="Failed to generate niche refresh"):
            parse_niche_strategy(json.dumps(niche_dict))

    def test_garbage_reply_is_rejected(self):
        with pytest.raises(AnalysisError, match="Failed to generate niche refresh"):
            parse_niche_strategy("{")


def test_niche_schema_pins_type_enum():
    assert NICHE_STRATEGY_SCHEMA["properties"]["type"] == {"type": "STRING", "enum": ["niche"]}
    assert ANALYSIS_SCHEMA["properties"]["strategies"]["items"]["properties"]["type"]["type"] == "STRING"
    assert "difficulty" in NICHE_STRATEGY_SCHEMA["required"]
