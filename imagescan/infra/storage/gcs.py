from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import storage

from imagescan.infra.storage.base import StorageError


class GCSStorage:
    """Google Cloud Storage 구현체. 클라이언트는 첫 호출 시 생성."""

    def __init__(self, project: str | None = None, client: storage.Client | None = None):
        self.project = project
        self._client = client

    def list_files(self, bucket_name: str) -> list[str]:
        """버킷의 모든 객체 이름 (GCS 목록 순서)

        Raises:
            StorageError: 인증 실패 또는 API 오류 시
        """
        try:
            blobs = self._get_client().list_blobs(bucket_name)
            return [blob.name for blob in blobs]
        except (GoogleAPIError, GoogleAuthError) as e:
            raise StorageError(f"버킷 목록 조회 실패: {bucket_name} - {e}") from e

    def _get_client(self) -> storage.Client:
        if self._client is None:
            self._client = storage.Client(project=self.project)
        return self._client
