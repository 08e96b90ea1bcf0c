"""
대운/세운 종합 엔진
- 사주 원국(Four Pillars Provider 결과) → FortuneProfile
- 일간 추출 → 대운 방향 → 대운 시작 나이 → 대운 10개 → 현재 대운 → 세운(올해 + 향후 5년)
- 사주 원국 계산은 외부 Provider 담당 (주입)
"""
import logging
from datetime import date, datetime, time
from typing import Optional, Protocol, Union
from zoneinfo import ZoneInfo

from saju_fortune.config import Settings, get_settings
from saju_fortune.models.schemas import (
    AccuracyInfo,
    AnnualCycle,
    DayMasterInfo,
    Element,
    FortuneProfile,
    FourPillars,
    Gender,
    MajorCycle,
    PillarInput,
)
from saju_fortune.services.cache import CacheService
from saju_fortune.services.daeun import (
    find_current_daeun,
    generate_daeun_list,
    get_daeun_direction,
    normalize_gender,
)
from saju_fortune.services.elements import ELEMENT_HANJA
from saju_fortune.services.errors import InvalidInputError
from saju_fortune.services.ganji import DAY_MASTER_DESC, GanjiPillar, Stem
from saju_fortune.services.seun import MONTHLY_FORMULA, calculate_seun_list
from saju_fortune.services.solar_terms import calculate_daeun_start_age, parse_birth_date

logger = logging.getLogger(__name__)


# 오행 표기 허용 (한글 / 한자 / 영문)
_ELEMENT_ALIASES = {e.value: e for e in Element}
_ELEMENT_ALIASES.update({hanja: e for e, hanja in ELEMENT_HANJA.items()})
_ELEMENT_ALIASES.update({e.name.lower(): e for e in Element})

ACCURACY_NOTES = (
    "대운 시작 나이는 고정 절입일표(근사) 기준이며 실제 절입일은 해마다 ±1~2일 차이가 있습니다.",
    "월운 천간은 간이 공식으로 계산되며 만세력 대조 검증이 필요합니다.",
)
BOUNDARY_NOTE = "절입일 경계 출생: 대운 시작 나이가 ±1세 달라질 수 있습니다."


class FourPillarsProvider(Protocol):
    """사주 원국 계산기 (외부 모듈) 인터페이스"""

    def get_four_pillars(
        self,
        birth_date: date,
        birth_time: Optional[time],
        gender: Gender
    ) -> FourPillars:
        ...


def _parse_element(value: str, field: str) -> Element:
    element = _ELEMENT_ALIASES.get(str(value).strip().lower())
    if element is None:
        raise InvalidInputError(f"{field}: 알 수 없는 오행 {value!r}")
    return element


def resolve_pillar(pillar_input: PillarInput, position: str) -> GanjiPillar:
    """
    입력 기둥 → GanjiPillar

    기호가 없는 천간/지지이거나, 오행 태그가 기호와 맞지 않거나,
    60갑자에 없는 조합이면 InvalidInputError
    """
    try:
        pillar = GanjiPillar.from_symbols(pillar_input.gan, pillar_input.ji)
    except InvalidInputError as e:
        raise InvalidInputError(f"{position}: {e}") from e

    if pillar_input.gan_element is not None:
        tagged = _parse_element(pillar_input.gan_element, f"{position}.gan_element")
        if tagged != pillar.stem.element:
            raise InvalidInputError(
                f"{position}: 천간 {pillar.stem.name}의 오행은 {pillar.stem.element.value} (입력: {pillar_input.gan_element})"
            )
    if pillar_input.ji_element is not None:
        tagged = _parse_element(pillar_input.ji_element, f"{position}.ji_element")
        if tagged != pillar.branch.element:
            raise InvalidInputError(
                f"{position}: 지지 {pillar.branch.name}의 오행은 {pillar.branch.element.value} (입력: {pillar_input.ji_element})"
            )
    return pillar


def build_day_master_info(stem: Stem) -> DayMasterInfo:
    return DayMasterInfo(
        stem=stem.name,
        stem_hanja=stem.hanja,
        element=stem.element,
        element_hanja=ELEMENT_HANJA[stem.element],
        polarity=stem.polarity,
        description=DAY_MASTER_DESC[stem.name],
    )


def generate_fortune_summary(
    current_daeun: Optional[MajorCycle],
    current_seun: AnnualCycle,
    daeun_list,
    current_age: int
) -> str:
    """종합 운세 요약 (템플릿)"""
    seun_part = (
        f"올해는 {', '.join(current_seun.keywords)}의 기운이 강합니다."
    )

    if current_daeun is not None:
        return (
            f"현재 {current_daeun.pillar.korean} 대운({current_daeun.ten_god.combined})과 "
            f"{current_seun.year}년 {current_seun.pillar.korean}년({current_seun.ten_god.combined})이 교차하는 시기입니다. "
            f"{current_daeun.interpretation.overall} {seun_part}"
        )

    first, last = daeun_list[0], daeun_list[-1]
    if current_age < first.age_start:
        daeun_part = f"첫 대운 {first.pillar.korean}({first.ten_god.combined})은 {first.age_start}세부터 시작합니다."
    else:
        daeun_part = f"{last.age_end}세 이후로 대운 범위({first.age_start}-{last.age_end}세)를 벗어났습니다."

    return (
        f"{daeun_part} "
        f"{current_seun.year}년은 {current_seun.pillar.korean}년({current_seun.ten_god.combined})입니다. {seun_part}"
    )


class FortuneEngine:
    """
    대운/세운 엔진

    순수 계산만 수행 (I/O 없음). cache를 주면 동일 입력 결과를 재사용한다.
    """

    def __init__(
        self,
        provider: Optional[FourPillarsProvider] = None,
        cache: Optional[CacheService] = None,
        settings: Optional[Settings] = None
    ):
        self.provider = provider
        self.cache = cache
        self.settings = settings or get_settings()

    def current_year(self) -> int:
        return datetime.now(ZoneInfo(self.settings.timezone)).year

    def calculate(
        self,
        four_pillars: FourPillars,
        birth_date: Union[date, datetime, str],
        gender: Union[Gender, str],
        evaluation_year: Optional[int] = None
    ) -> FortuneProfile:
        """
        종합 대운/세운 계산 (메인)

        Args:
            four_pillars: 사주 원국
            birth_date: 생년월일 (date 또는 YYYY-MM-DD)
            gender: 성별
            evaluation_year: 평가 연도 (None이면 현재 연도)

        Raises:
            InvalidInputError: 입력 오류
        """
        birth = parse_birth_date(birth_date)
        gender = normalize_gender(gender)
        if evaluation_year is None:
            evaluation_year = self.current_year()
        elif isinstance(evaluation_year, bool) or not isinstance(evaluation_year, int):
            raise InvalidInputError(f"평가 연도 오류: {evaluation_year!r}")

        cache_key = None
        if self.cache is not None:
            cache_key = self.cache.profile_key(
                four_pillars, birth.isoformat(), gender.value, evaluation_year,
                self.settings.seun_forecast_years
            )
            cached = self.cache.get_profile(cache_key)
            if cached is not None:
                return cached

        profile = self._build_profile(four_pillars, birth, gender, evaluation_year)

        if self.cache is not None:
            self.cache.set_profile(cache_key, profile)
        return profile

    def calculate_for_birth(
        self,
        birth_date: Union[date, datetime, str],
        gender: Union[Gender, str],
        birth_time: Optional[time] = None,
        evaluation_year: Optional[int] = None
    ) -> FortuneProfile:
        """Provider로 사주 원국을 받아 계산"""
        if self.provider is None:
            raise RuntimeError("FourPillarsProvider가 설정되지 않았습니다.")

        birth = parse_birth_date(birth_date)
        gender = normalize_gender(gender)
        four_pillars = self.provider.get_four_pillars(birth, birth_time, gender)
        return self.calculate(four_pillars, birth, gender, evaluation_year)

    def _build_profile(
        self,
        four_pillars: FourPillars,
        birth: date,
        gender: Gender,
        evaluation_year: int
    ) -> FortuneProfile:
        year_pillar = resolve_pillar(four_pillars.year_pillar, "year_pillar")
        month_pillar = resolve_pillar(four_pillars.month_pillar, "month_pillar")
        day_pillar = resolve_pillar(four_pillars.day_pillar, "day_pillar")
        day_master = day_pillar.stem
        # 시주는 대운/세운 계산에 쓰지 않지만 입력 오류는 동일하게 거부
        if four_pillars.hour_pillar is not None:
            resolve_pillar(four_pillars.hour_pillar, "hour_pillar")

        # 1) 대운 방향 (년간 음양 + 성별)
        direction = get_daeun_direction(year_pillar.stem.polarity, gender)

        # 2) 대운 시작 나이 (절입일 근사)
        daeun_info = calculate_daeun_start_age(birth, direction)

        # 3) 월주 기준 대운 10개
        daeun_list = generate_daeun_list(month_pillar, direction, daeun_info.start_age, day_master)

        # 4) 한국 나이 + 현재 대운
        current_age = evaluation_year - birth.year + 1
        current_daeun = find_current_daeun(daeun_list, current_age)
        if current_daeun is None:
            logger.warning(
                f"[FortuneEngine] 현재 대운 없음 | current_age={current_age} "
                f"| range={daeun_list[0].age_start}-{daeun_list[-1].age_end}"
            )

        # 5) 세운 (평가 연도 + 향후 N년)
        seun_list = calculate_seun_list(evaluation_year, day_master, self.settings.seun_forecast_years)
        current_seun = seun_list[0]

        notes = ACCURACY_NOTES + ((BOUNDARY_NOTE,) if daeun_info.near_term_boundary else ())

        profile = FortuneProfile(
            day_master=build_day_master_info(day_master),
            daeun_info=daeun_info,
            evaluation_year=evaluation_year,
            current_age=current_age,
            daeun_list=daeun_list,
            current_daeun=current_daeun,
            seun_list=seun_list,
            current_seun=current_seun,
            summary=generate_fortune_summary(current_daeun, current_seun, daeun_list, current_age),
            accuracy=AccuracyInfo(
                solar_term_method="nominal_day_table",
                monthly_formula=MONTHLY_FORMULA,
                near_term_boundary=daeun_info.near_term_boundary,
                notes=notes,
            ),
        )

        logger.info(
            f"[FortuneEngine] day_master={day_master.name} | direction={daeun_info.direction} "
            f"| start_age={daeun_info.start_age} | current_age={current_age} "
            f"| current_daeun={current_daeun.pillar.korean if current_daeun else None} "
            f"| current_seun={current_seun.pillar.korean}"
        )
        return profile


# 싱글톤 인스턴스 (Provider 없음, 캐시 없음)
fortune_engine = FortuneEngine()
