"""Inference API 응답 파서

응답 형식: {"<label>": [{"x": .., "y": .., "w": .., "h": .., "score": ..}, ...], ...}
잘못된 레코드는 건너뛰지 않고 응답 전체를 ParseError로 처리.
"""

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from imagescan.schemas.detection import BoundingBox, DetectionResponse
from imagescan.services.detection.base import ParseError


class _DetectionRecord(BaseModel):
    # 문자열 숫자("12") 거부, JSON 정수는 허용
    model_config = ConfigDict(strict=True)

    x: float
    y: float
    w: float
    h: float
    score: float


_PAYLOAD_ADAPTER = TypeAdapter(dict[str, list[_DetectionRecord]])


def parse_detection_response(raw: str | bytes) -> DetectionResponse:
    """원본 JSON → DetectionResponse

    Raises:
        ParseError: JSON이 아니거나 레코드 필드가 없거나 숫자가 아닐 때
    """
    try:
        payload = _PAYLOAD_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise ParseError(f"Inference 응답 파싱 실패: {e.error_count()}개 오류") from e

    boxes = [
        BoundingBox(
            label=label,
            x=record.x,
            y=record.y,
            width=record.w,
            height=record.h,
            score=record.score,
        )
        for label, records in payload.items()
        for record in records
    ]
    return DetectionResponse(boxes=tuple(boxes))
