"""Unit tests for the Topic Insights dashboard state handling."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from creator_studio.analysis.report_models import AnalysisReport
from creator_studio.helpers.activity_log import ActivityLog
from creator_studio.ui import topic_insights as ui

MODULE = "creator_studio.ui.topic_insights"


class TestRefreshStrategy:
    """Test the niche refresh button handler."""

    def test_uses_region_of_the_report(self, report_dict):
        report = AnalysisReport.from_dict(report_dict)
        refreshed = MagicMock(name="refreshed")
        state = SimpleNamespace(
            ti_report=report,
            ti_report_topic="캠핑",
            ti_report_region="South Korea",
            ti_region="Japan",
            ti_log=ActivityLog(),
        )
        fake_st = MagicMock(session_state=state)

        with patch(f"{MODULE}.st", fake_st), patch(
            "creator_studio.helpers.topic_insights.refresh_niche", return_value=refreshed
        ) as refresh:
            ui._refresh_strategy(1)

        refresh.assert_called_once_with(report, 1, "캠핑", "South Korea", state.ti_log)
        assert state.ti_report is refreshed
