"""
캐시 서비스
- 동일 입력(사주 원국, 생년월일, 성별, 평가 연도)에 대한 FortuneProfile 캐싱
- 계산이 결정적이므로 TTL은 메모리 관리 목적
"""
from typing import Optional
from cachetools import TTLCache
import hashlib
import json
import logging
import threading

from saju_fortune.config import get_settings
from saju_fortune.models.schemas import FortuneProfile, FourPillars

logger = logging.getLogger(__name__)


class CacheService:
    """FortuneProfile 캐시 (TTLCache + lock)"""

    def __init__(self, maxsize: Optional[int] = None, ttl: Optional[int] = None):
        settings = get_settings()

        self.profile_cache = TTLCache(
            maxsize=maxsize or settings.cache_max_size,
            ttl=ttl or settings.cache_ttl_seconds
        )
        self._lock = threading.Lock()

        # 통계
        self._hits = 0
        self._misses = 0

    def _make_key(self, *args) -> str:
        """캐시 키 생성"""
        key_str = json.dumps(args, sort_keys=True, ensure_ascii=False)
        return hashlib.md5(key_str.encode()).hexdigest()

    def profile_key(
        self,
        four_pillars: FourPillars,
        birth_date: str,
        gender: str,
        year: int,
        seun_forecast_years: int
    ) -> str:
        """세운 조회 기간도 결과를 바꾸므로 키에 포함"""
        return self._make_key(
            "profile", four_pillars.model_dump(), birth_date, gender, year, seun_forecast_years
        )

    def get_profile(self, key: str) -> Optional[FortuneProfile]:
        """FortuneProfile 캐시 조회"""
        with self._lock:
            result = self.profile_cache.get(key)
            if result is not None:
                self._hits += 1
            else:
                self._misses += 1
        return result

    def set_profile(self, key: str, profile: FortuneProfile):
        """FortuneProfile 캐시 저장 (불변 객체라 그대로 공유)"""
        with self._lock:
            self.profile_cache[key] = profile

    # ========== 통계 ==========

    def get_stats(self) -> dict:
        """캐시 통계 조회"""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0

            return {
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": f"{hit_rate:.1f}%",
                "profile_cache_size": len(self.profile_cache)
            }

    def clear(self):
        """캐시 초기화"""
        with self._lock:
            self.profile_cache.clear()
            self._hits = 0
            self._misses = 0
        logger.info("[Cache] cleared")


# 싱글톤 인스턴스
cache_service = CacheService()
