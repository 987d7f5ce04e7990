"""Inference VM REST API 구현체"""

import logging
import time

import httpx

from imagescan.constants import InferenceAPI, StorageURI
from imagescan.services.detection.base import (
    InvalidInputError,
    NetworkError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


class HTTPInferenceDetection:
    """원격 Inference VM에 GET 요청으로 객체 탐지

    요청 예: http://10.0.0.1:8082/v1/objectInference?gcs_uri=gs%3A%2F%2Fbucket%2Fimage1.jpg
    재시도 없음. 타임아웃은 httpx 클라이언트에서 처리.
    """

    def __init__(
        self,
        api_url: str,
        user_name: str = "",
        password: str = "",
        timeout: int = 60,
    ) -> None:
        self._api_url = api_url
        self._auth = (user_name, password)
        self._timeout = timeout

    def detect_objects(self, storage_uri: str) -> str:
        self._validate_uri(storage_uri)

        start = time.perf_counter()
        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.get(
                    self._api_url,
                    params={InferenceAPI.QUERY_PARAM: storage_uri},
                    auth=self._auth,
                )
        except httpx.RequestError as e:
            logger.error(
                f"Inference API 호출 실패: {e} "
                "(Inference VM 실행 여부와 방화벽 HTTP 포트를 확인하세요)"
            )
            raise NetworkError(f"Inference API 연결 실패: {e}") from e

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"Inference API 호출 {elapsed_ms:.0f}ms: {storage_uri}")

        if resp.status_code != InferenceAPI.SUCCESS_STATUS:
            raise UpstreamError(resp.status_code)

        return resp.text

    def _validate_uri(self, storage_uri: str) -> None:
        if not storage_uri:
            raise InvalidInputError("스토리지 URI가 비어 있음")
        if not storage_uri.startswith(StorageURI.SCHEME):
            raise InvalidInputError(
                f"스토리지 URI는 {StorageURI.SCHEME} 로 시작해야 함: {storage_uri}"
            )
