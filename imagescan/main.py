"""버킷 이미지 스캔 실행

환경 변수(.env)로 설정한 버킷 하나를 1회 스캔.
종료 코드: 0 = 스캔 완료 (파일 단위 실패 포함), 1 = 설정 누락 또는 버킷 목록 조회 실패
"""

import logging
import sys

from imagescan.config import get_settings
from imagescan.infra.storage import StorageError
from imagescan.services.scanner import scan_bucket

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def main() -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

    if not settings.cloud_bucket:
        logger.error("CLOUD_BUCKET이 설정되지 않음")
        return 1

    logger.info("이미지 처리 시작")
    try:
        summary = scan_bucket(settings.cloud_bucket)
    except StorageError as e:
        logger.error(f"스캔 중단: {e}")
        return 1

    logger.info(
        f"이미지 처리 완료: {summary.processed}개 처리, {summary.skipped}개 건너뜀, "
        f"{summary.failed}개 실패"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
