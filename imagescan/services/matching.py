"""라벨 매칭

탐지 결과에 특정 라벨이 있는지만 판단 (대소문자 무시 부분 문자열 매칭).
같은 라벨 객체는 크기가 같다고 가정하며, 관찰자에게 가장 가까운 객체를
고르는 순위 판단은 하지 않음.
"""

from imagescan.schemas.detection import DetectionResponse


def find_object(target_label: str, response: DetectionResponse) -> bool:
    """target_label이 포함된 라벨의 box가 하나라도 있으면 True

    예: "car" → "Car", "car_2" 매칭, "Tractor"는 "tractor"만 매칭
    """
    target = target_label.lower()
    return any(target in box.label.lower() for box in response.boxes)


def match_labels(labels: list[str], response: DetectionResponse) -> dict[str, bool]:
    """라벨별 매칭 결과 (labels 순서 유지, 중복 라벨은 한 번만)"""
    return {label: find_object(label, response) for label in labels}
