"""파일 단위 처리

Inference 호출 → 응답 파싱 → 라벨 매칭.
Inference 실패는 파일 단위로 기록하고 빈 탐지 결과로 대체 (스캔은 계속).
"""

import logging

from imagescan.config import get_settings
from imagescan.constants import StorageURI
from imagescan.schemas.detection import DetectionResponse, ErrorKind, FileResult
from imagescan.services.detection import (
    Detector,
    InferenceError,
    get_detection,
    parse_detection_response,
)
from imagescan.services.matching import match_labels

logger = logging.getLogger(__name__)


def build_storage_uri(bucket_name: str, file_name: str) -> str:
    return f"{StorageURI.SCHEME}{bucket_name}/{file_name}"


def process_one_file(
    bucket_name: str,
    file_name: str,
    labels: list[str] | None = None,
    detector: Detector | None = None,
) -> FileResult:
    """이미지 한 장 처리

    Args:
        bucket_name: 버킷 이름
        file_name: 버킷 내 객체 이름
        labels: 검색할 라벨 (기본값: 설정의 all_object_labels)
        detector: detection 백엔드 (기본값: get_detection())

    Returns:
        FileResult: 탐지 결과와 라벨별 매칭 여부. 실패 시 error 설정
    """
    if labels is None:
        labels = get_settings().all_object_labels
    if detector is None:
        detector = get_detection()

    storage_uri = build_storage_uri(bucket_name, file_name)
    logger.info(f"파일 처리 시작: {storage_uri}")

    error: ErrorKind | None = None
    error_message: str | None = None
    try:
        raw = detector.detect_objects(storage_uri)
        response = parse_detection_response(raw)
    except InferenceError as e:
        logger.warning(f"Inference 실패 ({e.kind}): {storage_uri} - {e}")
        response = DetectionResponse()
        error = e.kind
        error_message = str(e)

    logger.info(f"탐지 결과: {storage_uri} - {len(response.boxes)}개 {response.labels}")

    matches = match_labels(labels, response)
    for label, found in matches.items():
        logger.info(f'"{label}" 검색 결과: {found}')

    return FileResult(
        file_name=file_name,
        storage_uri=storage_uri,
        response=response,
        matches=matches,
        error=error,
        error_message=error_message,
    )
