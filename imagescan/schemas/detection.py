"""Detection 데이터 모델

Inference API 응답 → BoundingBox/DetectionResponse → 파일별 FileResult → ScanSummary
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

ErrorKind = Literal["invalid_input", "network", "upstream", "parse"]


class BoundingBox(BaseModel):
    """탐지된 객체 하나의 영역

    좌표 단위는 Inference 서비스가 정의 (px 또는 정규화 좌표).
    값은 변환/검증 없이 그대로 보관.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    x: float
    y: float
    width: float
    height: float
    score: float


class DetectionResponse(BaseModel):
    """이미지 한 장의 탐지 결과

    boxes 순서는 파싱 순서 (라벨 키 순서 → 라벨 내 순서).
    비어 있어도 유효한 값 (탐지 없음 또는 API 실패).
    """

    model_config = ConfigDict(frozen=True)

    boxes: tuple[BoundingBox, ...] = ()

    @property
    def labels(self) -> list[str]:
        return [box.label for box in self.boxes]


class FileResult(BaseModel):
    """파일 단위 처리 결과

    실패한 파일도 빈 response와 전부 False인 matches를 가짐.
    "탐지 없음"과 "호출 실패"는 error로 구분.
    """

    file_name: str
    storage_uri: str
    response: DetectionResponse = DetectionResponse()
    matches: dict[str, bool] = {}
    error: ErrorKind | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ScanSummary(BaseModel):
    """버킷 스캔 전체 결과"""

    bucket_name: str
    total_files: int
    processed: int
    skipped: int
    failed: int
    results: list[FileResult]  # 목록 조회 순서 유지
    label_counts: dict[str, int]  # 라벨별 매칭된 파일 수
