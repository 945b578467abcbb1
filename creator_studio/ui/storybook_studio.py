"""Streamlit UI for the storybook illustration studio.

Character uploads and page generation are delegated to
`helpers.storybook`; this module only lays out widgets and session state.
"""
from __future__ import annotations

import streamlit as st

from creator_studio.config.settings import SETTINGS
from creator_studio.helpers import storybook as hs
from creator_studio.helpers.activity_log import ActivityLog
from creator_studio.storybook.models import (
    EXAGGERATION_LEVELS,
    MAX_CHARACTERS,
    PAGE_COUNT,
    StorybookProject,
)

_EXAGGERATION_LABELS = {40: "40 · 자연스럽게", 60: "60 · 동화풍", 80: "80 · 과장되게"}


def _init_state() -> None:
    if "sb_project" not in st.session_state:
        st.session_state.sb_project = StorybookProject()
    if "sb_log" not in st.session_state:
        st.session_state.sb_log = ActivityLog(SETTINGS.activity_log_size)


def _render_character_slots(project: StorybookProject, log: ActivityLog) -> None:
    st.subheader(f"👧 캐릭터 ({len(project.filled_characters)}/{MAX_CHARACTERS})")
    cols = st.columns(MAX_CHARACTERS)
    for index, col in enumerate(cols):
        character = project.slot(index)
        with col, st.container(border=True):
            if character.is_empty:
                st.caption(f"슬롯 {index + 1} · 비어 있음")
            else:
                st.image(character.image.data, use_container_width=True)

            upload = st.file_uploader(
                "이미지",
                type=["png", "jpg", "jpeg", "webp"],
                key=f"sb_upload_{character.id}",
                label_visibility="collapsed",
            )
            name = st.text_input("이름", value=character.name, key=f"sb_name_{character.id}")
            description = st.text_area(
                "설명", value=character.description, key=f"sb_desc_{character.id}", height=80
            )

            if st.button("저장", key=f"sb_save_{character.id}", use_container_width=True):
                image = None
                if upload is not None:
                    try:
                        image = hs.load_character_image(upload.getvalue(), upload.name)
                    except ValueError as e:
                        st.error(str(e))
                        continue
                project.set_character(index, name=name, description=description, image=image)
                log.add(f"캐릭터 슬롯 {index + 1} 저장: {project.slot(index).label}", hs.STUDIO_AGENT)
                st.rerun()

            if not character.is_empty and st.button(
                "비우기", key=f"sb_clear_{character.id}", use_container_width=True
            ):
                project.clear_character(index)
                for prefix in ("sb_upload_", "sb_name_", "sb_desc_"):
                    st.session_state.pop(f"{prefix}{character.id}", None)
                log.add(f"캐릭터 슬롯 {index + 1}을 비웠습니다.", hs.STUDIO_AGENT)
                st.rerun()


def _render_style_profile(project: StorybookProject, log: ActivityLog) -> None:
    st.subheader("🎨 스타일 프로필")
    profile = project.style_profile
    if profile is not None:
        col_img, col_text = st.columns([1, 4])
        col_img.image(profile.reference_image.data, use_container_width=True)
        col_text.markdown(f"**Style:** {profile.style_prompt}")
        col_text.caption(f"생성 시각: {profile.created_at:%Y-%m-%d %H:%M:%S}")
    else:
        st.info("캐릭터 이미지를 등록한 뒤 스타일 프로필을 만들어 주세요.")

    col_analyze, col_default, _ = st.columns([1, 1, 2])
    if col_analyze.button("🔍 스타일 분석", key="sb_analyze_style"):
        with st.spinner("캐릭터 이미지에서 스타일을 분석하는 중..."):
            hs.build_style_profile(project, log, analyze=True)
        st.rerun()
    if col_default.button("기본 스타일 사용", key="sb_default_style"):
        hs.build_style_profile(project, log, analyze=False)
        st.rerun()


def _render_page_editor(project: StorybookProject, log: ActivityLog) -> None:
    st.subheader("📖 페이지")
    page_number = st.number_input("페이지 번호", min_value=1, max_value=PAGE_COUNT, value=1, step=1)
    page = project.page(int(page_number))
    st.caption(f"일러스트가 있는 페이지: {project.illustrated_page_count}/{PAGE_COUNT}")

    page.scenario = st.text_area(
        "장면 시나리오", value=page.scenario, key=f"sb_scenario_{page.number}", height=100
    )
    page.user_prompt = st.text_input(
        "직접 프롬프트 (선택 · 입력 시 시나리오 대신 사용)",
        value=page.user_prompt,
        key=f"sb_user_prompt_{page.number}",
    )

    options = {c.id: c.label for c in project.filled_characters}
    selected_ids = st.multiselect(
        "등장 캐릭터",
        list(options.keys()),
        default=list(options.keys()),
        format_func=options.get,
        key=f"sb_selected_{page.number}",
    )

    level = st.radio(
        "과장도",
        EXAGGERATION_LEVELS,
        index=EXAGGERATION_LEVELS.index(project.exaggeration_level),
        format_func=_EXAGGERATION_LABELS.get,
        horizontal=True,
        key="sb_exaggeration",
    )
    project.set_exaggeration(level)

    if st.button("✨ A/B 일러스트 생성", key="sb_generate", type="primary"):
        with st.spinner(f"{page.number}페이지 일러스트 2장을 생성하는 중..."):
            hs.generate_page_variants(project, page.number, selected_ids, log)
        st.rerun()

    _render_variants(page, log)


def _render_variants(page, log: ActivityLog) -> None:
    if not page.variants:
        st.caption("아직 생성된 이미지가 없습니다.")
        return

    cols = st.columns(2)
    for i, variant in enumerate(reversed(page.variants)):
        with cols[i % 2], st.container(border=True):
            st.image(variant.image.data, use_container_width=True)
            st.markdown(f"**{variant.prompt_type}안** · {variant.created_at:%H:%M:%S}")
            with st.expander("프롬프트"):
                st.code(variant.prompt, language=None)
            col_dl, col_rm = st.columns(2)
            col_dl.download_button(
                "⬇️ 다운로드",
                variant.image.data,
                file_name=hs.variant_filename(page.number, variant),
                mime=variant.image.mime_type,
                key=f"sb_dl_{variant.id}",
            )
            if col_rm.button("🗑️ 삭제", key=f"sb_rm_{variant.id}"):
                page.remove_variant(variant.id)
                log.add(f"{page.number}페이지 {variant.prompt_type}안을 삭제했습니다.", hs.STUDIO_AGENT)
                st.rerun()


def _render_activity(log: ActivityLog) -> None:
    with st.expander(f"🖥️ 작업 로그 ({len(log)})"):
        for entry in log.entries:
            icon = {"success": "✅", "warning": "⚠️", "ai": "🤖"}.get(entry.type, "ℹ️")
            st.markdown(f"{icon} `{entry.time_label}` **{entry.agent}** · {entry.message}")


def render_storybook_studio() -> None:
    """Render the storybook illustration studio."""
    _init_state()
    project: StorybookProject = st.session_state.sb_project
    log: ActivityLog = st.session_state.sb_log

    st.header("📚 동화 일러스트 스튜디오")
    st.markdown("캐릭터와 스타일을 고정하고, 30페이지 각 장면을 A/B 구도로 생성합니다.")

    _render_activity(log)
    _render_character_slots(project, log)
    st.markdown("---")
    _render_style_profile(project, log)
    st.markdown("---")
    _render_page_editor(project, log)
