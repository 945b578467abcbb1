import streamlit as st

# UI modules
from creator_studio.ui.topic_insights import render_topic_insights
from creator_studio.ui.storybook_studio import render_storybook_studio


def main():
    st.set_page_config(
        page_title="Creator Studio",
        page_icon="🎬",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    # Clean header styling
    st.markdown("""
    <style>
    .sidebar-section {
        background: #f8f9fa;
        padding: 1rem;
        border-radius: 8px;
        margin-bottom: 1rem;
        border-left: 4px solid #667eea;
    }
    @media print {
        header, section[data-testid="stSidebar"], button, .stDownloadButton { display: none !important; }
    }
    </style>
    """, unsafe_allow_html=True)

    # Clean sidebar
    with st.sidebar:
        st.markdown("""
        <div class="sidebar-section">
            <h3 style="margin-top: 0; color: #333;">Creator Studio</h3>
            <p style="margin-bottom: 0; color: #666; font-size: 0.9rem;">작업할 앱을 선택하세요</p>
        </div>
        """, unsafe_allow_html=True)

        section = st.selectbox(
            "앱 선택",
            (
                "유튜브 토픽 인사이트",
                "동화 일러스트 스튜디오",
            ),
            help="Choose app"
        )

    # Route to appropriate section
    if section == "유튜브 토픽 인사이트":
        render_topic_insights()
    elif section == "동화 일러스트 스튜디오":
        render_storybook_studio()


if __name__ == "__main__":
    main()
