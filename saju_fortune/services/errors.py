"""
대운/세운 엔진 오류 정의
- CalculationError: 엔진 오류 공통 부모
- InvalidInputError: 입력 오류 (기본값 대체 금지, 즉시 실패)
- TenGodTableError: 십신 판정 누락 = 테이블 결함 (프로그래밍 오류)
"""


class CalculationError(Exception):
    """계산 오류"""
    pass


class InvalidInputError(CalculationError, ValueError):
    """입력 오류 (생년월일 파싱 실패, 없는 천간/지지, 잘못된 간지 조합, 성별 등)"""
    pass


class TenGodTableError(AssertionError):
    """오행 관계표 불일치 - 십신 분류가 어떤 범주에도 해당하지 않음"""
    pass
