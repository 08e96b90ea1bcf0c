"""
오행 상생상극 모듈
- 상생: 목 → 화 → 토 → 금 → 수 → 목
- 상극: 목 → 토 → 수 → 화 → 금 → 목
"""
from types import MappingProxyType

from saju_fortune.models.schemas import Element, ElementRelation
from saju_fortune.services.errors import TenGodTableError


# 상생 (내가 생하는 오행)
GENERATES = MappingProxyType({
    Element.WOOD: Element.FIRE,
    Element.FIRE: Element.EARTH,
    Element.EARTH: Element.METAL,
    Element.METAL: Element.WATER,
    Element.WATER: Element.WOOD,
})

# 상극 (내가 극하는 오행)
CONTROLS = MappingProxyType({
    Element.WOOD: Element.EARTH,
    Element.EARTH: Element.WATER,
    Element.WATER: Element.FIRE,
    Element.FIRE: Element.METAL,
    Element.METAL: Element.WOOD,
})

# 역방향 (나를 생하는 / 나를 극하는 오행)
GENERATED_BY = MappingProxyType({v: k for k, v in GENERATES.items()})
CONTROLLED_BY = MappingProxyType({v: k for k, v in CONTROLS.items()})

ELEMENT_HANJA = MappingProxyType({
    Element.WOOD: "木",
    Element.FIRE: "火",
    Element.EARTH: "土",
    Element.METAL: "金",
    Element.WATER: "水",
})


def generates(element: Element) -> Element:
    return GENERATES[Element(element)]


def is_generated_by(element: Element) -> Element:
    return GENERATED_BY[Element(element)]


def controls(element: Element) -> Element:
    return CONTROLS[Element(element)]


def is_controlled_by(element: Element) -> Element:
    return CONTROLLED_BY[Element(element)]


def relation_to(day_master_element: Element, target_element: Element) -> ElementRelation:
    """
    일간 오행 기준 대상 오행의 관계

    다섯 관계는 상호 배타적이며 모든 조합을 덮는다.
    어느 관계에도 해당하지 않으면 상생/상극 테이블 자체의 결함이다.
    """
    me = Element(day_master_element)
    target = Element(target_element)

    if target == me:
        return ElementRelation.SAME
    if GENERATES[me] == target:
        return ElementRelation.I_GENERATE
    if CONTROLS[me] == target:
        return ElementRelation.I_CONTROL
    if CONTROLLED_BY[me] == target:
        return ElementRelation.CONTROLS_ME
    if GENERATED_BY[me] == target:
        return ElementRelation.GENERATES_ME

    raise TenGodTableError(f"오행 관계표 불일치: {me.value} → {target.value}")
