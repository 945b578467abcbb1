"""Streamlit UI for the YouTube topic insights dashboard."""
from __future__ import annotations

import pandas as pd
import streamlit as st

from creator_studio.analysis.report_models import AnalysisReport, Strategy, is_high_competition
from creator_studio.analysis.topic_insights import REGIONS
from creator_studio.config.settings import SETTINGS
from creator_studio.helpers import topic_insights as ti
from creator_studio.helpers.activity_log import ActivityLog

_LOG_COLORS = {"success": "green", "warning": "orange", "ai": "violet", "info": "blue"}


def _init_state() -> None:
    if "ti_log" not in st.session_state:
        st.session_state.ti_log = ActivityLog(SETTINGS.activity_log_size)
    if "ti_topic" not in st.session_state:
        st.session_state.ti_topic = SETTINGS.default_topic
    if "ti_region" not in st.session_state:
        st.session_state.ti_region = SETTINGS.default_region
    st.session_state.setdefault("ti_report", None)
    st.session_state.setdefault("ti_report_topic", "")
    st.session_state.setdefault("ti_report_region", SETTINGS.default_region)


def _pick_quick_topic(tag: str) -> None:
    # Runs as a widget callback, before the text input is rebuilt.
    st.session_state.ti_topic = tag
    st.session_state.ti_pending_run = True


def _run_analysis() -> None:
    topic = st.session_state.ti_topic.strip()
    if not topic:
        return
    st.session_state.ti_report = None
    with st.spinner("데이터 마이닝 및 전략 수립 중... 최신 시장 트렌드와 수익성을 분석하고 있습니다."):
        st.session_state.ti_report = ti.run_analysis(
            topic, st.session_state.ti_region, st.session_state.ti_log
        )
    st.session_state.ti_report_topic = topic
    st.session_state.ti_report_region = st.session_state.ti_region


def _refresh_strategy(index: int) -> None:
    # Refresh against the market the report was built for, not the current selectbox.
    with st.spinner("니치 전략을 다시 생성하는 중..."):
        st.session_state.ti_report = ti.refresh_niche(
            st.session_state.ti_report,
            index,
            st.session_state.ti_report_topic,
            st.session_state.ti_report_region,
            st.session_state.ti_log,
        )


def _render_search_bar() -> bool:
    col_topic, col_region, col_run = st.columns([4, 2, 1])
    with col_topic:
        st.text_input(
            "주제",
            key="ti_topic",
            placeholder="주제를 입력하세요...",
            label_visibility="collapsed",
        )
    with col_region:
        st.selectbox(
            "지역",
            list(REGIONS.keys()),
            key="ti_region",
            format_func=REGIONS.get,
            label_visibility="collapsed",
        )
    with col_run:
        return st.button("⚡ 분석 실행", key="ti_run", type="primary", use_container_width=True)


def _render_strategy(strategy: Strategy, index: int) -> None:
    with st.container(border=True):
        badge = ":green-background[니치]" if strategy.is_niche else ":red-background[대중적]"
        st.markdown(f"#### {strategy.title}  {badge}")
        st.write(strategy.description)

        col_comp, col_diff, col_cpm = st.columns(3)
        competition = strategy.competition
        color = "red" if is_high_competition(competition) else "green"
        col_comp.markdown(f"경쟁도  \n:{color}[**{competition}**]")
        col_diff.markdown(f"난이도  \n{ti.difficulty_dots(strategy.difficulty)}")
        col_cpm.markdown(f"예상 CPM  \n:violet[**{strategy.estimated_cpm}**]")

        st.caption(f"콘텐츠 아이디어 ({len(strategy.display_ideas)})")
        for idea in strategy.display_ideas:
            st.markdown(f"• {idea}")

        if strategy.is_niche and st.button("🔄 새로고침", key=f"ti_refresh_{index}", help="니치 전략 새로고침"):
            _refresh_strategy(index)
            st.rerun()


def _render_report(report: AnalysisReport, topic: str) -> None:
    log: ActivityLog = st.session_state.ti_log

    col_title, col_actions = st.columns([3, 2])
    with col_title:
        col_flag, col_name = st.columns([1, 12])
        col_flag.image(ti.region_flag_url(report.region), width=40)
        col_name.markdown(f"## :violet[{topic}] 분석 리포트")
        st.markdown(f"`{report.category}` &nbsp; :green[**$ CPM 범위: {report.cpm_range}**]")

    with col_actions:
        col_json, col_md = st.columns(2)
        if col_json.download_button(
            "🧾 JSON 데이터 저장",
            report.to_json().encode("utf-8"),
            file_name=f"{topic}_analysis.json",
            mime="application/json",
            key="ti_json_download",
        ):
            log.add("데이터를 JSON 형식으로 저장했습니다.", "시스템", "success")
        if col_md.download_button(
            "📄 리포트 저장",
            ti.report_to_markdown(report, topic).encode("utf-8"),
            file_name=f"{topic}_report.md",
            mime="text/markdown",
            key="ti_md_download",
        ):
            log.add("분석 결과 리포트 출력을 시작합니다.", "시스템")
        with st.expander("JSON 데이터 복사"):
            st.code(report.to_json(), language="json")

    st.markdown("---")

    # Stats grid
    stats = report.stats
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("유사 채널 수", stats.related_channels)
    col2.metric("최근 게시 비디오", stats.related_videos)
    col3.metric("채널 평균 구독자", stats.avg_subscribers)
    intensity = stats.competition_intensity
    col4.metric("시장 경쟁 강도", f"🔥 {intensity}" if is_high_competition(intensity) else intensity)

    # Top channels
    st.markdown("### 🏆 주요 마켓 리더 및 경쟁자")
    if report.top_channels:
        df = pd.DataFrame([c.to_dict() for c in report.top_channels])
        st.dataframe(
            df,
            hide_index=True,
            use_container_width=True,
            column_config={
                "name": "채널",
                "subscribers": "구독자",
                "url": st.column_config.LinkColumn("링크"),
            },
        )
    else:
        st.info("경쟁 채널 정보가 없습니다.")

    # Insights
    st.markdown("### ⚡ AI 데이터 기반 전략적 인사이트")
    insight_cols = st.columns(2)
    for i, insight in enumerate(report.insights):
        insight_cols[i % 2].markdown(f"**{i + 1}.** {insight}")

    # Strategies
    st.markdown("### ♞ 맞춤형 콘텐츠 로드맵 제안")
    st.caption(":red[■] 대중적 (수요 위주) &nbsp;&nbsp; :green[■] 니치 (블루오션)")
    strategy_cols = st.columns(2)
    for i, strategy in enumerate(report.strategies):
        with strategy_cols[i % 2]:
            _render_strategy(strategy, i)


def _render_empty_state() -> None:
    st.markdown("## 데이터 분석을 시작하세요")
    st.markdown(
        "유튜브에서 공략하고 싶은 **주제(니치)**를 입력하세요.  \n"
        "AI가 실시간으로 트렌드와 수익성을 분석해 드립니다."
    )
    cols = st.columns(len(ti.QUICK_TOPICS))
    for col, tag in zip(cols, ti.QUICK_TOPICS):
        col.button(f"#{tag}", key=f"ti_tag_{tag}", on_click=_pick_quick_topic, args=(tag,))


def _render_activity(log: ActivityLog) -> None:
    st.markdown("#### 🖥️ AI AGENT ACTIVITY")
    if not len(log):
        st.caption("시스템 대기 중...")
        return
    for entry in log.entries:
        color = _LOG_COLORS.get(entry.type, "blue")
        st.markdown(f":{color}[**{entry.agent}**] · `{entry.time_label}`")
        st.caption(entry.message)


def render_topic_insights() -> None:
    """Render the topic market-analysis dashboard."""
    _init_state()
    st.header("▶️ 유튜브 토픽 인사이트 AI")

    clicked = _render_search_bar()
    first_visit = SETTINGS.auto_analyze_on_start and not st.session_state.get("ti_autorun_done")
    pending = st.session_state.pop("ti_pending_run", False)

    col_main, col_activity = st.columns([3, 1])
    with col_main:
        if clicked or pending or first_visit:
            st.session_state.ti_autorun_done = True
            _run_analysis()

        report = st.session_state.ti_report
        if report is not None:
            _render_report(report, st.session_state.ti_report_topic)
        else:
            _render_empty_state()

    with col_activity:
        _render_activity(st.session_state.ti_log)
