from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Inference API
    inference_ip: str = "localhost"
    http_port: int = 8082
    inference_url: str = "/v1/objectInference"
    inference_user_name: str = ""
    inference_password: str = ""
    inference_timeout: int = 60

    # Detection
    detection_provider: str = "http_api"  # "http_api"

    # Storage
    cloud_bucket: str = ""
    project: str | None = None

    # Scan
    all_object_labels: Annotated[list[str], NoDecode] = []
    max_files: int | None = Field(default=None, ge=0)  # None = 전체 처리
    max_workers: int = Field(default=4, ge=1)

    # Logging
    log_level: str = "INFO"

    @field_validator("all_object_labels", mode="before")
    @classmethod
    def split_labels(cls, v: object) -> object:
        """공백 구분 문자열 → 라벨 리스트 ("car person car" → ["car", "person"])

        중복 라벨은 첫 위치만 남김 (매칭 결과는 라벨별 dict)
        """
        if isinstance(v, str):
            v = v.split()
        if isinstance(v, list):
            return list(dict.fromkeys(v))
        return v

    @property
    def inference_api_url(self) -> str:
        """Inference API 전체 URL (예: http://10.0.0.1:8082/v1/objectInference)"""
        host = self.inference_ip
        if "://" not in host:
            host = f"http://{host}"
        return f"{host}:{self.http_port}{self.inference_url}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
