"""
60갑자 모듈
- 천간(10개) × 지지(12개) 중 음양이 같은 60개 조합 = 60갑자
- 천간/지지 기호 조회 (한글/한자)
- 음수 안전 mod
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from saju_fortune.models.schemas import Element, Polarity, PillarInfo
from saju_fortune.services.errors import InvalidInputError

# 천간 (10개)
CHEONGAN = ("갑", "을", "병", "정", "무", "기", "경", "신", "임", "계")
CHEONGAN_HANJA = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")

# 지지 (12개)
JIJI = ("자", "축", "인", "묘", "진", "사", "오", "미", "신", "유", "술", "해")
JIJI_HANJA = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")
JIJI_ANIMALS = ("쥐", "소", "호랑이", "토끼", "용", "뱀", "말", "양", "원숭이", "닭", "개", "돼지")

CHEONGAN_ELEMENTS = (
    Element.WOOD, Element.WOOD,
    Element.FIRE, Element.FIRE,
    Element.EARTH, Element.EARTH,
    Element.METAL, Element.METAL,
    Element.WATER, Element.WATER,
)

JIJI_ELEMENTS = (
    Element.WATER, Element.EARTH, Element.WOOD, Element.WOOD,
    Element.EARTH, Element.FIRE, Element.FIRE, Element.EARTH,
    Element.METAL, Element.METAL, Element.EARTH, Element.WATER,
)

# 일간 설명
DAY_MASTER_DESC = MappingProxyType({
    "갑": "갑목(甲木) - 큰 나무, 리더십, 진취적, 고집",
    "을": "을목(乙木) - 풀/꽃, 유연함, 적응력, 예술성",
    "병": "병화(丙火) - 태양, 열정적, 밝음, 리더",
    "정": "정화(丁火) - 촛불/별, 섬세함, 따뜻함, 지혜",
    "무": "무토(戊土) - 산/대지, 신뢰, 안정, 중재",
    "기": "기토(己土) - 논밭, 실용적, 포용력, 신중",
    "경": "경금(庚金) - 철/도검, 결단력, 의리, 강직",
    "신": "신금(辛金) - 보석/귀금속, 섬세함, 예민, 완벽주의",
    "임": "임수(壬水) - 바다/강, 지혜, 포용력, 유동적",
    "계": "계수(癸水) - 비/이슬, 직관, 침착, 내성적",
})


def mod(n: int, m: int) -> int:
    """항상 0 이상을 반환하는 나머지 (역행 계산용)"""
    return ((n % m) + m) % m


def polarity_of(index: int) -> Polarity:
    """짝수 인덱스 = 양, 홀수 = 음 (천간/지지 공통)"""
    return Polarity.YANG if index % 2 == 0 else Polarity.YIN


@dataclass(frozen=True)
class Stem:
    """천간"""
    index: int
    name: str
    hanja: str
    element: Element
    polarity: Polarity


@dataclass(frozen=True)
class Branch:
    """지지"""
    index: int
    name: str
    hanja: str
    element: Element
    polarity: Polarity
    animal: str


STEMS: Tuple[Stem, ...] = tuple(
    Stem(i, CHEONGAN[i], CHEONGAN_HANJA[i], CHEONGAN_ELEMENTS[i], polarity_of(i))
    for i in range(10)
)

BRANCHES: Tuple[Branch, ...] = tuple(
    Branch(i, JIJI[i], JIJI_HANJA[i], JIJI_ELEMENTS[i], polarity_of(i), JIJI_ANIMALS[i])
    for i in range(12)
)

_STEM_LOOKUP = MappingProxyType(
    {s.name: s for s in STEMS} | {s.hanja: s for s in STEMS}
)
_BRANCH_LOOKUP = MappingProxyType(
    {b.name: b for b in BRANCHES} | {b.hanja: b for b in BRANCHES}
)


def get_stem(symbol: str) -> Stem:
    """천간 조회 (한글 또는 한자)"""
    key = str(symbol).strip() if symbol is not None else ""
    stem = _STEM_LOOKUP.get(key)
    if stem is None:
        raise InvalidInputError(f"알 수 없는 천간: {symbol!r}")
    return stem


def get_branch(symbol: str) -> Branch:
    """지지 조회 (한글 또는 한자)"""
    key = str(symbol).strip() if symbol is not None else ""
    branch = _BRANCH_LOOKUP.get(key)
    if branch is None:
        raise InvalidInputError(f"알 수 없는 지지: {symbol!r}")
    return branch


@dataclass(frozen=True)
class GanjiPillar:
    """
    간지 기둥 (천간 + 지지)

    천간 인덱스와 지지 인덱스의 홀짝이 같아야 유효 (60갑자).
    """
    stem: Stem
    branch: Branch

    def __post_init__(self):
        if self.stem.index % 2 != self.branch.index % 2:
            raise InvalidInputError(
                f"60갑자에 없는 조합: {self.stem.name}{self.branch.name}"
            )

    @classmethod
    def from_indices(cls, stem_idx: int, branch_idx: int) -> "GanjiPillar":
        return cls(STEMS[mod(stem_idx, 10)], BRANCHES[mod(branch_idx, 12)])

    @classmethod
    def from_symbols(cls, gan: str, ji: str) -> "GanjiPillar":
        return cls(get_stem(gan), get_branch(ji))

    @property
    def korean(self) -> str:
        return f"{self.stem.name}{self.branch.name}"

    @property
    def hanja(self) -> str:
        return f"{self.stem.hanja}{self.branch.hanja}"

    @property
    def full(self) -> str:
        return f"{self.korean}({self.hanja})"

    @property
    def sexagenary_index(self) -> int:
        """60갑자 순번 (갑자=0 ... 계해=59)"""
        return mod(6 * self.stem.index - 5 * self.branch.index, 60)

    def to_info(self) -> PillarInfo:
        return PillarInfo(
            korean=self.korean,
            hanja=self.hanja,
            full=self.full,
            gan=self.stem.name,
            ji=self.branch.name,
            gan_index=self.stem.index,
            ji_index=self.branch.index,
            gan_element=self.stem.element,
            ji_element=self.branch.element,
            polarity=self.stem.polarity,
            animal=self.branch.animal,
        )


def get_sixty_ganji_list() -> Tuple[str, ...]:
    """60갑자 표준 순서 (갑자부터 1칸씩 증가)"""
    return tuple(f"{CHEONGAN[i % 10]}{JIJI[i % 12]}" for i in range(60))


SIXTY_GANJI = get_sixty_ganji_list()
