"""
대운(大運) 계산 모듈
- 양남음녀 순행, 음남양녀 역행
- 월주 다음/이전 간지부터 10개 대운 (각 10년)
- 대운별 십신 + 키워드 + 오행 관계 + 종합 등급
"""
import logging
from typing import Optional, Tuple

from saju_fortune.models.schemas import (
    CycleGrade,
    DaeunInterpretation,
    Direction,
    ElementAnalysis,
    Gender,
    MajorCycle,
    Polarity,
    TenGod,
    TenGodPair,
)
from saju_fortune.rules.fortune_rules import (
    get_daeun_description,
    get_daeun_keyword,
    is_positive,
)
from saju_fortune.services.elements import relation_to
from saju_fortune.services.errors import InvalidInputError
from saju_fortune.services.ganji import GanjiPillar, Stem, mod
from saju_fortune.services.ten_gods import branch_ten_god, stem_ten_god

logger = logging.getLogger(__name__)

DAEUN_COUNT = 10
DAEUN_SPAN_YEARS = 10

_MALE_ALIASES = frozenset({"male", "m", "남", "남성", "남자"})
_FEMALE_ALIASES = frozenset({"female", "f", "여", "여성", "여자"})


def normalize_gender(gender) -> Gender:
    """성별 정규화 (male/female 및 한글 표기 허용)"""
    if isinstance(gender, Gender):
        return gender
    key = str(gender).strip().lower() if gender is not None else ""
    if key in _MALE_ALIASES:
        return Gender.MALE
    if key in _FEMALE_ALIASES:
        return Gender.FEMALE
    raise InvalidInputError(f"성별 입력 오류: {gender!r}")


def get_daeun_direction(year_stem_polarity: Polarity, gender) -> Direction:
    """
    대운 방향 결정

    남자 + 양간 = 순행, 남자 + 음간 = 역행
    여자 + 양간 = 역행, 여자 + 음간 = 순행
    """
    is_male = normalize_gender(gender) == Gender.MALE
    is_yang = Polarity(year_stem_polarity) == Polarity.YANG

    if is_male == is_yang:
        return Direction.FORWARD
    return Direction.BACKWARD


def step_pillar(base: GanjiPillar, direction: Direction, step: int) -> GanjiPillar:
    """
    월주에서 step칸 이동한 간지 (step=1 → 바로 다음/이전)

    천간과 지지가 같은 부호의 같은 칸수만큼 움직이므로 홀짝이 유지된다.
    """
    offset = step if Direction(direction) == Direction.FORWARD else -step
    return GanjiPillar.from_indices(
        mod(base.stem.index + offset, 10),
        mod(base.branch.index + offset, 12),
    )


def grade_cycle(stem_god: TenGod, branch_god: TenGod) -> CycleGrade:
    """정관/정인/정재/식신 포함 여부로 대운 등급 판정"""
    stem_positive = is_positive(stem_god)
    branch_positive = is_positive(branch_god)

    if stem_positive and branch_positive:
        return CycleGrade.FAVORABLE
    if stem_positive or branch_positive:
        return CycleGrade.MIXED
    return CycleGrade.CHALLENGING


_GRADE_SUMMARY = {
    CycleGrade.FAVORABLE: "길운(吉運): {ganji} 대운은 천간과 지지 모두 좋은 기운. 안정과 성취의 시기.",
    CycleGrade.MIXED: "반길반흉(半吉半凶): {ganji} 대운은 좋은 면과 어려운 면이 공존. 선택적 행동 필요.",
    CycleGrade.CHALLENGING: "도전운(挑戰運): {ganji} 대운은 시련과 변화가 있으나, 극복 시 큰 성장 가능.",
}


def build_daeun_interpretation(
    pillar: GanjiPillar,
    stem_god: TenGod,
    branch_god: TenGod,
    day_master: Stem
) -> DaeunInterpretation:
    """대운 해석 재료 생성 (키워드/설명/오행 관계/등급)"""
    grade = grade_cycle(stem_god, branch_god)
    return DaeunInterpretation(
        keywords=(get_daeun_keyword(stem_god), get_daeun_keyword(branch_god)),
        stem_description=get_daeun_description(stem_god),
        branch_description=get_daeun_description(branch_god),
        element_analysis=ElementAnalysis(
            stem_relation=relation_to(day_master.element, pillar.stem.element),
            branch_relation=relation_to(day_master.element, pillar.branch.element),
        ),
        grade=grade,
        overall=_GRADE_SUMMARY[grade].format(ganji=pillar.korean),
    )


def generate_daeun_list(
    month_pillar: GanjiPillar,
    direction: Direction,
    start_age: int,
    day_master: Stem
) -> Tuple[MajorCycle, ...]:
    """
    대운 목록 생성 (10개 대운, 각 10년)

    Args:
        month_pillar: 월주
        direction: 순행/역행
        start_age: 대운 시작 나이
        day_master: 일간 (십신 계산용)
    """
    daeun_list = []

    for i in range(DAEUN_COUNT):
        pillar = step_pillar(month_pillar, direction, i + 1)
        age_start = start_age + i * DAEUN_SPAN_YEARS
        age_end = age_start + DAEUN_SPAN_YEARS - 1

        stem_god = stem_ten_god(day_master, pillar.stem)
        branch_god = branch_ten_god(day_master, pillar.branch)

        daeun_list.append(MajorCycle(
            order=i + 1,
            age_start=age_start,
            age_end=age_end,
            age_range=f"{age_start}-{age_end}세",
            pillar=pillar.to_info(),
            ten_god=TenGodPair(
                stem=stem_god,
                branch=branch_god,
                combined=f"{stem_god.value}/{branch_god.value}",
            ),
            tag=get_daeun_keyword(stem_god),
            interpretation=build_daeun_interpretation(pillar, stem_god, branch_god, day_master),
        ))

    logger.info(
        f"[Daeun] month_pillar={month_pillar.korean} | direction={Direction(direction).value} "
        f"| start_age={start_age} | list[:3]={[d.pillar.korean for d in daeun_list[:3]]}"
    )
    return tuple(daeun_list)


def find_current_daeun(daeun_list: Tuple[MajorCycle, ...], current_age: int) -> Optional[MajorCycle]:
    """현재 나이가 속한 대운 (첫 대운 시작 전이거나 마지막 대운 이후면 None)"""
    for daeun in daeun_list:
        if daeun.age_start <= current_age <= daeun.age_end:
            return daeun
    return None
