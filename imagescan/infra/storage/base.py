from typing import Protocol


class StorageError(Exception):
    """버킷 목록 조회 실패. 스캔 전체를 중단."""


class BucketStorage(Protocol):
    """버킷 저장소 인터페이스. GCSStorage 등 구현체로 교체 가능."""

    def list_files(self, bucket_name: str) -> list[str]: ...
