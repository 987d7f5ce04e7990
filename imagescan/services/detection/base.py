"""Detection Protocol

교체 가능한 객체 탐지 구현을 위한 인터페이스와 에러 정의.
"""

from typing import Protocol

from imagescan.schemas.detection import ErrorKind


class InferenceError(Exception):
    """Inference 호출/응답 처리 실패 (파일 단위, 치명적이지 않음)"""

    kind: ErrorKind


class InvalidInputError(InferenceError):
    kind: ErrorKind = "invalid_input"


class NetworkError(InferenceError):
    kind: ErrorKind = "network"


class UpstreamError(InferenceError):
    kind: ErrorKind = "upstream"

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Inference API 응답 코드 {status_code}")


class ParseError(InferenceError):
    kind: ErrorKind = "parse"


class Detector(Protocol):
    """객체 탐지 인터페이스

    구현체:
    - HTTPInferenceDetection: 원격 Inference VM REST API
    """

    def detect_objects(self, storage_uri: str) -> str:
        """스토리지 URI의 이미지에서 객체 탐지

        Args:
            storage_uri: gs://<bucket>/<file> 형태의 URI

        Returns:
            Inference API 원본 응답 (JSON 문자열, 파싱 전)

        Raises:
            InvalidInputError: URI가 비었거나 gs:// 로 시작하지 않을 때 (네트워크 호출 없음)
            NetworkError: 전송 계층 실패 시
            UpstreamError: 200 이외 응답 시
        """
        ...
