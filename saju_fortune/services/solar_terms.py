"""
절기 기반 대운 시작 나이 계산
- 12절(입절) 고정 절입일표 사용 (근사값)
- 실제 절입 시각은 해마다 ±1~2일 차이가 있음 → 천문 계산은 하지 않음
- 3일 = 1년 환산, 1~10세로 제한
"""
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType
from typing import Tuple, Union

from saju_fortune.models.schemas import DaeunInfo, Direction
from saju_fortune.services.errors import InvalidInputError

logger = logging.getLogger(__name__)

DAYS_PER_YEAR_OF_AGE = 3
MIN_START_AGE = 1
MAX_START_AGE = 10

# 절입일 ±이 범위 안이면 경계 출생으로 표시
BOUNDARY_DAYS = 2


@dataclass(frozen=True)
class SolarTermInfo:
    """절기 정보"""
    name: str           # 절기 이름
    month_index: int    # 월지 인덱스 (0=인월, 1=묘월, ..., 11=축월)
    approx_month: int   # 대략적인 양력 월
    approx_day: int     # 대략적인 양력 일


# 12절 (입절) - 양력 월마다 하나씩 시작
SOLAR_TERMS_ENTRY: Tuple[SolarTermInfo, ...] = (
    # (절기명, 월지인덱스, 대략적 양력월, 대략적 양력일)
    SolarTermInfo("입춘", 0, 2, 4),    # 인월 시작
    SolarTermInfo("경칩", 1, 3, 6),    # 묘월 시작
    SolarTermInfo("청명", 2, 4, 5),    # 진월 시작
    SolarTermInfo("입하", 3, 5, 6),    # 사월 시작
    SolarTermInfo("망종", 4, 6, 6),    # 오월 시작
    SolarTermInfo("소서", 5, 7, 7),    # 미월 시작
    SolarTermInfo("입추", 6, 8, 8),    # 신월 시작
    SolarTermInfo("백로", 7, 9, 8),    # 유월 시작
    SolarTermInfo("한로", 8, 10, 8),   # 술월 시작
    SolarTermInfo("입동", 9, 11, 7),   # 해월 시작
    SolarTermInfo("대설", 10, 12, 7),  # 자월 시작
    SolarTermInfo("소한", 11, 1, 6),   # 축월 시작
)

_TERM_BY_MONTH = MappingProxyType({t.approx_month: t for t in SOLAR_TERMS_ENTRY})


def parse_birth_date(value: Union[date, datetime, str]) -> date:
    """
    생년월일 파싱

    Args:
        value: date / datetime / "YYYY-MM-DD"

    Raises:
        InvalidInputError: 파싱 불가
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidInputError(f"생년월일 형식 오류: {value!r}") from e
    raise InvalidInputError(f"생년월일 형식 오류: {value!r}")


def term_date(year: int, month: int) -> date:
    """
    해당 양력 월의 (근사) 절입일

    Raises:
        InvalidInputError: 앞뒤 절입일이 date 범위(1~9999년)를 벗어남
    """
    try:
        return date(year, month, _TERM_BY_MONTH[month].approx_day)
    except ValueError as e:
        raise InvalidInputError(f"절입일 계산 범위 초과: {year}년 {month}월") from e


def next_term_date(birth: date) -> date:
    """출생일 다음 절입일 (출생일 당일 제외, 12월이면 다음해 1월로 넘어감)"""
    this_term = term_date(birth.year, birth.month)
    if birth < this_term:
        return this_term
    if birth.month == 12:
        return term_date(birth.year + 1, 1)
    return term_date(birth.year, birth.month + 1)


def previous_term_date(birth: date) -> date:
    """출생일 이전 절입일 (출생일 당일 포함, 1월이면 전년 12월로 넘어감)"""
    this_term = term_date(birth.year, birth.month)
    if birth >= this_term:
        return this_term
    if birth.month == 1:
        return term_date(birth.year - 1, 12)
    return term_date(birth.year, birth.month - 1)


def days_to_start_age(days: int) -> int:
    """3일 = 1세, 반올림 후 1~10세로 제한"""
    age = math.floor(days / DAYS_PER_YEAR_OF_AGE + 0.5)
    return max(MIN_START_AGE, min(age, MAX_START_AGE))


def is_near_solar_term(birth: date, threshold_days: int = BOUNDARY_DAYS) -> bool:
    """앞뒤 절입일 중 하나라도 threshold_days 이내인지"""
    before = (birth - previous_term_date(birth)).days
    after = (next_term_date(birth) - birth).days
    return min(before, after) <= threshold_days


def calculate_daeun_start_age(
    birth_date: Union[date, datetime, str],
    direction: Direction
) -> DaeunInfo:
    """
    대운 시작 나이 계산

    순행: 다음 절입일까지 일수
    역행: 직전 절입일부터 일수

    Returns:
        DaeunInfo(direction, start_age, days_to_term, near_term_boundary)
    """
    birth = parse_birth_date(birth_date)
    direction = Direction(direction)

    if direction == Direction.FORWARD:
        days_to_term = (next_term_date(birth) - birth).days
    else:
        days_to_term = (birth - previous_term_date(birth)).days

    start_age = days_to_start_age(days_to_term)
    near_boundary = is_near_solar_term(birth)

    logger.debug(
        f"[SolarTerms] birth={birth.isoformat()} | direction={direction.value} "
        f"| days_to_term={days_to_term} | start_age={start_age} | near_boundary={near_boundary}"
    )

    return DaeunInfo(
        direction=direction,
        start_age=start_age,
        days_to_term=days_to_term,
        near_term_boundary=near_boundary,
    )
