"""버킷 스캔

버킷 목록 조회 후 앞에서부터 max_files개를 스레드 풀에서 처리.
모든 파일 처리가 끝난 뒤 요약을 만들며, 결과는 목록 순서를 유지.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial

from imagescan.config import get_settings
from imagescan.infra.storage import BucketStorage, get_storage
from imagescan.schemas.detection import FileResult, ScanSummary
from imagescan.services.detection import Detector, get_detection
from imagescan.services.processing import process_one_file

logger = logging.getLogger(__name__)


def scan_bucket(
    bucket_name: str,
    storage: BucketStorage | None = None,
    detector: Detector | None = None,
    labels: list[str] | None = None,
    max_files: int | None = None,
    max_workers: int | None = None,
) -> ScanSummary:
    """버킷의 이미지를 처리하고 요약 반환

    None인 인자는 설정값/팩토리 기본값 사용 (max_files 설정도 None이면 전체 처리).

    Raises:
        StorageError: 버킷 목록 조회 실패 시 (스캔 중단)
        ValueError: max_files < 0 또는 max_workers < 1
    """
    settings = get_settings()
    storage = storage or get_storage()
    detector = detector or get_detection()
    labels = settings.all_object_labels if labels is None else labels
    max_files = settings.max_files if max_files is None else max_files
    max_workers = settings.max_workers if max_workers is None else max_workers

    if max_files is not None and max_files < 0:
        raise ValueError(f"max_files는 0 이상이어야 함: {max_files}")
    if max_workers < 1:
        raise ValueError(f"max_workers는 1 이상이어야 함: {max_workers}")

    file_names = storage.list_files(bucket_name)
    selected = file_names if max_files is None else file_names[:max_files]
    skipped = len(file_names) - len(selected)
    logger.info(
        f"버킷 스캔 시작: {bucket_name} - 전체 {len(file_names)}개, "
        f"처리 {len(selected)}개, 건너뜀 {skipped}개"
    )

    process = partial(process_one_file, bucket_name, labels=labels, detector=detector)
    results: list[FileResult] = []
    if selected:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(process, selected))

    summary = ScanSummary(
        bucket_name=bucket_name,
        total_files=len(file_names),
        processed=len(results),
        skipped=skipped,
        failed=sum(1 for r in results if not r.ok),
        results=results,
        label_counts={
            label: sum(1 for r in results if r.matches.get(label)) for label in labels
        },
    )
    logger.info(
        f"버킷 스캔 완료: {summary.processed}/{summary.total_files}개 처리, "
        f"실패 {summary.failed}개, 라벨별 {summary.label_counts}"
    )
    return summary
