"""Agent activity feed shown in the sidebar.

Newest entries come first and only the last ``max_entries`` are kept. Every
entry is mirrored to the module logger so the terminal shows the same trail.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

logger = logging.getLogger(__name__)

LOG_TYPES = ("info", "success", "warning", "ai")
DEFAULT_AGENT = "시스템 AI"


@dataclass(frozen=True)
class LogEntry:
    agent: str
    message: str
    type: str = "info"
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def time_label(self) -> str:
        return self.timestamp.strftime("%H:%M:%S")


class ActivityLog:
    def __init__(self, max_entries: int = 20):
        if max_entries < 1:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self._entries: List[LogEntry] = []

    def add(self, message: str, agent: str = DEFAULT_AGENT, type: str = "info") -> LogEntry:
        if type not in LOG_TYPES:
            raise ValueError(f"Unknown log type: {type}")
        entry = LogEntry(agent=agent, message=message, type=type)
        self._entries = [entry, *self._entries[: self.max_entries - 1]]

        level = logging.WARNING if type == "warning" else logging.INFO
        logger.log(level, "[%s] %s", agent, message)
        return entry

    def clear(self) -> None:
        self._entries = []

    @property
    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
