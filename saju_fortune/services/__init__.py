# services package - lazy imports (엔진/캐시는 실제 사용할 때 생성)
from saju_fortune.services.errors import CalculationError, InvalidInputError, TenGodTableError

_fortune_engine = None
_cache_service = None

def get_fortune_engine():
    global _fortune_engine
    if _fortune_engine is None:
        from saju_fortune.services.fortune_engine import fortune_engine as _engine
        _fortune_engine = _engine
    return _fortune_engine

def get_cache_service():
    global _cache_service
    if _cache_service is None:
        from saju_fortune.services.cache import cache_service as _cache
        _cache_service = _cache
    return _cache_service
