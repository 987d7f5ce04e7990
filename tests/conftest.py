import json
from collections.abc import Generator
from typing import Any

import pytest

from imagescan.config import get_settings
from imagescan.infra.storage import set_storage
from imagescan.schemas.detection import BoundingBox, DetectionResponse
from imagescan.services.detection import set_detection

CAR_PAYLOAD: dict[str, Any] = {"car": [{"x": 1, "y": 2, "w": 3, "h": 4, "score": 0.9}]}


def make_payload(data: dict[str, Any] | None = None) -> str:
    """Inference API 응답 JSON 문자열 생성"""
    return json.dumps(CAR_PAYLOAD if data is None else data)


def make_response(*labels: str) -> DetectionResponse:
    """라벨마다 box 하나씩 가진 DetectionResponse 생성"""
    return DetectionResponse(
        boxes=tuple(
            BoundingBox(label=label, x=0, y=0, width=10, height=10, score=0.5)
            for label in labels
        )
    )


class StubDetector:
    """storage_uri별 응답/예외를 돌려주는 테스트용 detector"""

    def __init__(self, responses: dict[str, str | Exception] | None = None, default: str = "{}"):
        self.responses = responses or {}
        self.default = default
        self.calls: list[str] = []

    def detect_objects(self, storage_uri: str) -> str:
        self.calls.append(storage_uri)
        result = self.responses.get(storage_uri, self.default)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture(autouse=True)
def reset_factories() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    set_detection(None)
    set_storage(None)
    get_settings.cache_clear()
