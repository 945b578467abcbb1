from __future__ import annotations

import copy
import io
import json
import threading
from typing import Any, Dict, List, Sequence

import pytest
from PIL import Image

from creator_studio.llms import ImageData, LLMClient


class FakeLLMClient(LLMClient):
    """In-memory stand-in for a provider client; records every call."""

    def __init__(
        self,
        json_replies: Sequence[Any] = (),
        chat_reply: str = "",
        image_error: Exception | None = None,
    ):
        self.json_replies: List[Any] = list(json_replies)
        self.chat_reply = chat_reply
        self.image_error = image_error
        self.json_calls: List[tuple] = []
        self.chat_calls: List[tuple] = []
        self.image_calls: List[tuple] = []
        self._lock = threading.Lock()

    def chat(self, messages, **kwargs):
        self.chat_calls.append((messages, kwargs))
        return self.chat_reply

    def generate_json(self, prompt, schema, **kwargs):
        self.json_calls.append((prompt, schema))
        reply = self.json_replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def generate_image(self, prompt, references=(), **kwargs):
        with self._lock:
            self.image_calls.append((prompt, list(references)))
        if self.image_error is not None:
            raise self.image_error
        return ImageData(data=prompt.encode("utf-8"), mime_type="image/png")


SAMPLE_STRATEGY_GENERAL: Dict[str, Any] = {
    "type": "general",
    "title": "초보 캠퍼 입문 가이드",
    "description": "넓은 시청층을 겨냥한 기초 캠핑 콘텐츠",
    "competition": "높음",
    "difficulty": 2,
    "estimatedCpm": "$3-5",
    "ideas": ["텐트 치는 법", "캠핑 장비 추천", "캠핑 요리", "캠핑장 리뷰", "우중 캠핑 팁"],
}

SAMPLE_STRATEGY_NICHE: Dict[str, Any] = {
    "type": "niche",
    "title": "1인 차박 미니멀 캠핑",
    "description": "혼자 떠나는 직장인을 위한 차박 콘텐츠",
    "competition": "낮음",
    "difficulty": 3,
    "estimatedCpm": "$6-9",
    "ideas": ["경차 차박 세팅", "퇴근 후 차박", "차박 전기 해결", "겨울 차박", "차박 요리", "차박 명소"],
}

SAMPLE_REPORT: Dict[str, Any] = {
    "region": "South Korea",
    "category": "여행 & 아웃도어",
    "cpmRange": "$4 - $8",
    "stats": {
        "relatedChannels": "1,200+",
        "relatedVideos": "35,000",
        "avgSubscribers": "8.5만",
        "competitionIntensity": "높음",
    },
    "topChannels": [
        {"name": "캠핑하는 곰", "subscribers": "52만", "url": "https://youtube.com/@bear"},
        {"name": "Outdoor K", "subscribers": "31만", "url": "https://youtube.com/@outdoork"},
    ],
    "insights": ["주말 업로드가 조회수에 유리합니다.", "차박 수요가 증가하고 있습니다."],
    "strategies": [SAMPLE_STRATEGY_GENERAL, SAMPLE_STRATEGY_NICHE],
}


@pytest.fixture
def fake_client_cls():
    return FakeLLMClient


@pytest.fixture
def report_dict() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_REPORT)


@pytest.fixture
def report_json(report_dict) -> str:
    return json.dumps(report_dict, ensure_ascii=False)


@pytest.fixture
def niche_dict() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_STRATEGY_NICHE)


def _png_bytes(size=(8, 6), color=(200, 120, 40)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return _png_bytes()


@pytest.fixture
def large_png_bytes() -> bytes:
    return _png_bytes(size=(2048, 1024))


@pytest.fixture
def image_data(png_bytes) -> ImageData:
    return ImageData(data=png_bytes, mime_type="image/png")
