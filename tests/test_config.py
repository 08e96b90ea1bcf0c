"""
설정 / 서비스 패키지 테스트
"""
import logging

import pytest
from pydantic import ValidationError

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from saju_fortune import config
from saju_fortune.config import Settings, configure_logging, get_settings
from saju_fortune.models.schemas import FourPillars, PillarInput
from saju_fortune.services import get_cache_service, get_fortune_engine
from saju_fortune.services.cache import CacheService
from saju_fortune.services.fortune_engine import FortuneEngine


class TestSettings:
    """환경변수 기반 설정"""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.timezone == "Asia/Seoul"
        assert settings.seun_forecast_years == 5
        assert settings.cache_ttl_seconds == 86400
        assert settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("SAJU_FORTUNE_SEUN_FORECAST_YEARS", "3")
        monkeypatch.setenv("SAJU_FORTUNE_LOG_LEVEL", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.seun_forecast_years == 3
        assert settings.log_level == "DEBUG"

    def test_negative_forecast_years_rejected(self):
        """음수 세운 기간 → 설정 단계에서 거부 (빈 세운 목록 방지)"""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, seun_forecast_years=-1)
        assert Settings(_env_file=None, seun_forecast_years=0).seun_forecast_years == 0

    def test_singleton(self, monkeypatch):
        monkeypatch.setattr(config, "_settings", None)
        assert get_settings() is get_settings()

    def test_forecast_years_applied(self):
        engine = FortuneEngine(settings=Settings(_env_file=None, seun_forecast_years=2))
        pillars = FourPillars(
            year_pillar=PillarInput(gan="무", ji="오"),
            month_pillar=PillarInput(gan="정", ji="사"),
            day_pillar=PillarInput(gan="무", ji="인"),
        )
        profile = engine.calculate(pillars, "1978-05-16", "male", evaluation_year=2026)
        assert [s.year for s in profile.seun_list] == [2026, 2027, 2028]

    def test_configure_logging(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(Settings(_env_file=None, log_level="debug"))
        assert calls == [{"level": logging.DEBUG}]


class TestServiceGetters:
    """지연 생성 싱글톤"""

    def test_getters(self):
        engine = get_fortune_engine()
        assert isinstance(engine, FortuneEngine)
        assert get_fortune_engine() is engine
        assert engine.provider is None

        cache = get_cache_service()
        assert isinstance(cache, CacheService)
        assert get_cache_service() is cache
