"""Business-logic helpers for the Topic Insights dashboard.

Wraps the analysis calls with the agent activity messages the UI shows and
turns failures into warning entries instead of exceptions.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from creator_studio.analysis.report_models import AnalysisReport, is_high_competition
from creator_studio.analysis.topic_insights import analyze_topic, refresh_niche_strategy
from creator_studio.helpers.activity_log import ActivityLog
from creator_studio.llms import LLMClient

logger = logging.getLogger(__name__)

QUICK_TOPICS = ["캠핑", "코딩 교육", "희귀 식물", "빈티지 게임"]

FLAG_URL = "https://flagcdn.com/w40/{code}.png"


# ---------------------------------------------------------------------------
# Flows
# ---------------------------------------------------------------------------

def run_analysis(
    topic: str,
    region: str,
    log: ActivityLog,
    *,
    client: LLMClient | None = None,
) -> Optional[AnalysisReport]:
    """Run a full analysis, narrating progress into *log*. Blank topics are ignored."""
    if not topic.strip():
        return None

    log.clear()
    log.add(f"분석 엔진 가동: {topic} ({region})...", "총괄 에이전트")
    try:
        log.add("시장 트렌드 및 CPM 데이터 분석 중...", "CPM 분석가")
        log.add("경쟁 채널 환경 스캔 및 니치 탐색 중...", "경쟁 분석가")

        report = analyze_topic(topic, region, client=client)

        log.add("분석 보고서 생성 완료.", "전략 전문가", "success")
        return report
    except Exception as exc:
        logger.warning("Topic analysis failed: %s", exc)
        log.add("데이터를 불러오는 중 오류가 발생했습니다.", "시스템", "warning")
        return None


def refresh_niche(
    report: AnalysisReport,
    index: int,
    topic: str,
    region: str,
    log: ActivityLog,
    *,
    client: LLMClient | None = None,
) -> AnalysisReport:
    """Swap strategy *index* for a freshly generated niche strategy.

    Returns the original report unchanged when the refresh fails.
    """
    if not topic.strip():
        return report

    log.add(f"니치 전략 #{index + 1} 새로고침 요청됨...", "니치 전문가")
    try:
        strategy = refresh_niche_strategy(topic, region, client=client)
        updated = report.replace_strategy(index, strategy)
    except Exception as exc:
        logger.warning("Niche refresh failed: %s", exc)
        log.add("니치 전략 업데이트 중 문제가 발생했습니다.", "시스템", "warning")
        return report

    log.add(f"니치 전략 #{index + 1}이 새롭게 업데이트되었습니다.", "니치 전문가", "success")
    return updated


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

def region_flag_code(region: str) -> str:
    """Two-letter flagcdn code for *region*; 'un' for anything unrecognised."""
    lowered = region.lower()
    if "korea" in lowered:
        return "kr"
    if "united states" in lowered:
        return "us"
    if "japan" in lowered:
        return "jp"
    return "un"


def region_flag_url(region: str) -> str:
    return FLAG_URL.format(code=region_flag_code(region))


def difficulty_dots(level: int, total: int = 5) -> str:
    level = max(0, min(total, level))
    return "●" * level + "○" * (total - level)


def report_to_markdown(report: AnalysisReport, topic: str) -> str:
    """Printable Markdown version of the report."""
    stats = report.stats
    lines: List[str] = [
        f"# {topic} 분석 리포트",
        "",
        f"- **지역:** {report.region}",
        f"- **카테고리:** {report.category}",
        f"- **CPM 범위:** {report.cpm_range}",
        "",
        "## 시장 통계",
        "",
        "| 항목 | 값 |",
        "| --- | --- |",
        f"| 유사 채널 수 | {stats.related_channels} |",
        f"| 최근 게시 비디오 | {stats.related_videos} |",
        f"| 채널 평균 구독자 | {stats.avg_subscribers} |",
        f"| 시장 경쟁 강도 | {stats.competition_intensity} |",
        "",
        "## 주요 마켓 리더 및 경쟁자",
        "",
    ]
    lines += [f"- [{c.name}]({c.url}) ({c.subscribers} 구독자)" for c in report.top_channels]
    lines += ["", "## AI 데이터 기반 전략적 인사이트", ""]
    lines += [f"{i}. {insight}" for i, insight in enumerate(report.insights, 1)]
    lines += ["", "## 맞춤형 콘텐츠 로드맵 제안", ""]

    for strategy in report.strategies:
        badge = "NICHE" if strategy.is_niche else "GENERAL"
        competition = strategy.competition
        if is_high_competition(competition):
            competition = f"**{competition}**"
        lines += [
            f"### [{badge}] {strategy.title}",
            "",
            strategy.description,
            "",
            f"- 경쟁도: {competition}",
            f"- 난이도: {difficulty_dots(strategy.difficulty)} ({strategy.difficulty}/5)",
            f"- 예상 CPM: {strategy.estimated_cpm}",
            "",
            f"**콘텐츠 아이디어 ({len(strategy.display_ideas)})**",
            "",
        ]
        lines += [f"- {idea}" for idea in strategy.display_ideas]
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


__all__ = [
    "QUICK_TOPICS",
    "run_analysis",
    "refresh_niche",
    "region_flag_code",
    "region_flag_url",
    "difficulty_dots",
    "report_to_markdown",
]
