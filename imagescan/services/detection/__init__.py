"""Detection 모듈

사용법:
    from imagescan.services.detection import get_detection, parse_detection_response

    detector = get_detection()
    response = parse_detection_response(detector.detect_objects("gs://bucket/image.jpg"))

백엔드 선택 (.env DETECTION_PROVIDER):
    - "http_api": Inference VM REST API (기본값)
"""

from imagescan.config import get_settings
from imagescan.services.detection.base import (
    Detector,
    InferenceError,
    InvalidInputError,
    NetworkError,
    ParseError,
    UpstreamError,
)
from imagescan.services.detection.http_api import HTTPInferenceDetection
from imagescan.services.detection.parser import parse_detection_response

__all__ = [
    "Detector",
    "InferenceError",
    "InvalidInputError",
    "NetworkError",
    "ParseError",
    "UpstreamError",
    "get_detection",
    "parse_detection_response",
    "set_detection",
]

_detector: Detector | None = None


def get_detection() -> Detector:
    """설정에 따라 detection 백엔드 반환"""
    global _detector
    if _detector is None:
        settings = get_settings()
        if settings.detection_provider == "http_api":
            _detector = HTTPInferenceDetection(
                api_url=settings.inference_api_url,
                user_name=settings.inference_user_name,
                password=settings.inference_password,
                timeout=settings.inference_timeout,
            )
        else:
            raise ValueError(f"Unknown detection provider: {settings.detection_provider!r}")
    return _detector


def set_detection(detector: Detector | None) -> None:
    """detection 백엔드 설정 (테스트용)"""
    global _detector
    _detector = detector
