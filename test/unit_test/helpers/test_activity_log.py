"""Unit tests for the agent activity log."""

import logging

import pytest

from creator_studio.helpers.activity_log import DEFAULT_AGENT, ActivityLog


class TestActivityLog:
    """Test ordering, capping and mirroring."""

    def test_newest_entry_first(self):
        log = ActivityLog()
        log.add("first")
        log.add("second", "CPM 분석가", "success")

        entries = log.entries
        assert [e.message for e in entries] == ["second", "first"]
        assert entries[0].agent == "CPM 분석가"
        assert entries[0].type == "success"
        assert entries[1].agent == DEFAULT_AGENT == "시스템 AI"

    def test_keeps_only_newest_twenty(self):
        log = ActivityLog()
        for i in range(25):
            log.add(f"msg {i}")

        assert len(log) == 20
        assert log.entries[0].message == "msg 24"
        assert log.entries[-1].message == "msg 5"

    def test_custom_size(self):
        log = ActivityLog(max_entries=2)
        for i in range(3):
            log.add(str(i))

        assert [e.message for e in log.entries] == ["2", "1"]

    def test_entries_have_unique_ids(self):
        log = ActivityLog()
        a = log.add("a")
        b = log.add("b")

        assert a.id != b.id
        assert len(a.time_label) == 8

    def test_clear(self):
        log = ActivityLog()
        log.add("a")
        log.clear()

        assert log.entries == []

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError):
            ActivityLog().add("x", type="error")

    def test_warning_is_mirrored_to_logger(self, caplog):
        with caplog.at_level(logging.INFO, logger="creator_studio.helpers.activity_log"):
            ActivityLog().add("문제 발생", "시스템", "warning")

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert "문제 발생" in record.getMessage()
