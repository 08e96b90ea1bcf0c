"""
십신(十神) 계산 모듈
- 일간(오행, 음양) 기준 대상 천간/지지의 관계를 10가지로 분류
- 5 오행 × 2 음양 × 5 오행 × 2 음양 = 100 조합 전부 정의됨 ("미상" 없음)
"""
from types import MappingProxyType

from saju_fortune.models.schemas import Element, ElementRelation, Polarity, TenGod
from saju_fortune.services.elements import relation_to
from saju_fortune.services.ganji import Branch, Stem

# (오행 관계, 음양 동일 여부) → 십신
TEN_GOD_TABLE = MappingProxyType({
    (ElementRelation.SAME, True): TenGod.RIVAL,
    (ElementRelation.SAME, False): TenGod.CHALLENGER,
    (ElementRelation.I_GENERATE, True): TenGod.OUTPUT_PEER,
    (ElementRelation.I_GENERATE, False): TenGod.OUTPUT_REBEL,
    (ElementRelation.I_CONTROL, True): TenGod.WEALTH_INDIRECT,
    (ElementRelation.I_CONTROL, False): TenGod.WEALTH_DIRECT,
    (ElementRelation.CONTROLS_ME, True): TenGod.AUTHORITY_INDIRECT,
    (ElementRelation.CONTROLS_ME, False): TenGod.AUTHORITY_DIRECT,
    (ElementRelation.GENERATES_ME, True): TenGod.SUPPORT_INDIRECT,
    (ElementRelation.GENERATES_ME, False): TenGod.SUPPORT_DIRECT,
})


def calculate_ten_god(
    day_master_element: Element,
    day_master_polarity: Polarity,
    target_element: Element,
    target_polarity: Polarity
) -> TenGod:
    """
    십신 계산

    Args:
        day_master_element: 일간 오행
        day_master_polarity: 일간 음양
        target_element: 대상 오행
        target_polarity: 대상 음양

    Returns:
        TenGod (비견 ~ 정인)

    Raises:
        TenGodTableError: 오행 관계표가 깨진 경우 (정상 입력으로는 발생 불가)
    """
    relation = relation_to(day_master_element, target_element)
    same_polarity = Polarity(day_master_polarity) == Polarity(target_polarity)
    return TEN_GOD_TABLE[(relation, same_polarity)]


def stem_ten_god(day_master: Stem, target: Stem) -> TenGod:
    return calculate_ten_god(day_master.element, day_master.polarity, target.element, target.polarity)


def branch_ten_god(day_master: Stem, target: Branch) -> TenGod:
    return calculate_ten_god(day_master.element, day_master.polarity, target.element, target.polarity)
