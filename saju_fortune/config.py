"""
대운/세운 엔진 설정
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
- 평가 연도 기본값용 타임존
- 세운 조회 기간
- 결과 캐시 (TTL)
- 로그 레벨
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
"""
from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional
import logging


class Settings(BaseSettings):
    # 평가 연도 기본값 (현재 연도) 계산 기준
    timezone: str = "Asia/Seoul"

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # 세운 설정
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    seun_forecast_years: int = Field(5, ge=0)  # 평가 연도 이후 몇 년까지

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # Cache (동일 입력 = 동일 결과)
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    cache_ttl_seconds: int = 86400
    cache_max_size: int = 10000

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "SAJU_FORTUNE_"
        extra = "ignore"


_settings: Optional[Settings] = None

def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """호스트 프로세스에서 호출 (엔진 자체는 로깅 설정을 건드리지 않음)"""
    settings = settings or get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
