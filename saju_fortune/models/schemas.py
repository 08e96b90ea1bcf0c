"""
Pydantic 스키마 정의
대운/세운 엔진 입력(사주 원국) / 출력(FortuneProfile) 계약
- 출력은 원시 타입(문자열, 정수)만 포함 → 그대로 JSON 직렬화 가능
- 생성 후 불변 (frozen)
"""
from pydantic import BaseModel, Field
from typing import Optional, Tuple, Dict
from enum import Enum


# ============ 열거형 ============

class Element(str, Enum):
    """오행"""
    WOOD = "목"
    FIRE = "화"
    EARTH = "토"
    METAL = "금"
    WATER = "수"


class Polarity(str, Enum):
    """음양"""
    YANG = "양"
    YIN = "음"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Direction(str, Enum):
    """대운 방향"""
    FORWARD = "forward"     # 순행
    BACKWARD = "backward"   # 역행


class TenGod(str, Enum):
    """십신 (일간 기준 10가지 관계)"""
    RIVAL = "비견"               # 比肩
    CHALLENGER = "겁재"          # 劫財
    OUTPUT_PEER = "식신"         # 食神
    OUTPUT_REBEL = "상관"        # 傷官
    WEALTH_INDIRECT = "편재"     # 偏財
    WEALTH_DIRECT = "정재"       # 正財
    AUTHORITY_INDIRECT = "편관"  # 偏官 (七殺)
    AUTHORITY_DIRECT = "정관"    # 正官
    SUPPORT_INDIRECT = "편인"    # 偏印
    SUPPORT_DIRECT = "정인"      # 正印


class ElementRelation(str, Enum):
    """일간 기준 오행 관계"""
    SAME = "same"                   # 비겁
    I_GENERATE = "i_generate"       # 식상
    I_CONTROL = "i_control"         # 재성
    CONTROLS_ME = "controls_me"     # 관성
    GENERATES_ME = "generates_me"   # 인성


class CycleGrade(str, Enum):
    """대운 종합 등급"""
    FAVORABLE = "길운"
    MIXED = "반길반흉"
    CHALLENGING = "도전운"


class _Frozen(BaseModel):
    class Config:
        frozen = True
        use_enum_values = True


# ============ 입력: 사주 원국 (Four Pillars Provider 결과) ============

class PillarInput(_Frozen):
    """사주 기둥 입력"""
    gan: str = Field(..., description="천간 (한글 또는 한자)")
    ji: str = Field(..., description="지지 (한글 또는 한자)")
    gan_element: Optional[str] = Field(None, description="천간 오행 (검증용)")
    ji_element: Optional[str] = Field(None, description="지지 오행 (검증용)")


class FourPillars(_Frozen):
    """사주 원국 (4개 기둥)"""
    year_pillar: PillarInput = Field(..., description="년주")
    month_pillar: PillarInput = Field(..., description="월주")
    day_pillar: PillarInput = Field(..., description="일주 (일간=나)")
    hour_pillar: Optional[PillarInput] = Field(None, description="시주 (시간 미입력시 None)")
    element_counts: Dict[str, int] = Field(default_factory=dict, description="오행 개수 요약")

    class Config:
        json_schema_extra = {
            "example": {
                "year_pillar": {"gan": "무", "ji": "오"},
                "month_pillar": {"gan": "정", "ji": "사"},
                "day_pillar": {"gan": "무", "ji": "인"},
                "hour_pillar": {"gan": "정", "ji": "사"},
                "element_counts": {"목": 1, "화": 4, "토": 3, "금": 0, "수": 0}
            }
        }


# ============ 출력 ============

class PillarInfo(_Frozen):
    """간지 정보"""
    korean: str = Field(..., description="간지 (예: 갑자)")
    hanja: str = Field(..., description="한자 간지 (예: 甲子)")
    full: str = Field(..., description="표기 (예: 갑자(甲子))")
    gan: str
    ji: str
    gan_index: int = Field(..., ge=0, le=9)
    ji_index: int = Field(..., ge=0, le=11)
    gan_element: Element
    ji_element: Element
    polarity: Polarity = Field(..., description="천간 음양 (= 지지 음양)")
    animal: str = Field(..., description="띠 (표시용)")


class TenGodPair(_Frozen):
    """천간/지지 십신"""
    stem: TenGod
    branch: TenGod
    combined: str = Field(..., description="예: 비견/겁재")


class DayMasterInfo(_Frozen):
    """일간 정보"""
    stem: str
    stem_hanja: str
    element: Element
    element_hanja: str
    polarity: Polarity
    description: str


class DaeunInfo(_Frozen):
    """대운 시작 정보"""
    direction: Direction = Field(..., description="대운 방향 (순행/역행)")
    start_age: int = Field(..., ge=1, le=10, description="대운 시작 나이")
    days_to_term: int = Field(..., ge=0, description="절입일까지 일수")
    near_term_boundary: bool = Field(False, description="절입일 ±2일 이내 출생")


class ElementAnalysis(_Frozen):
    """일간 대비 오행 관계"""
    stem_relation: ElementRelation
    branch_relation: ElementRelation


class DaeunInterpretation(_Frozen):
    """대운 해석 재료 (서술은 Narrative Renderer 담당)"""
    keywords: Tuple[str, ...]
    stem_description: str
    branch_description: str
    element_analysis: ElementAnalysis
    grade: CycleGrade
    overall: str


class MajorCycle(_Frozen):
    """대운 1개 (10년)"""
    order: int = Field(..., ge=1, le=10)
    age_start: int
    age_end: int
    age_range: str = Field(..., description="예: 3-12세")
    pillar: PillarInfo
    ten_god: TenGodPair
    tag: str = Field(..., description="천간 십신 키워드")
    interpretation: DaeunInterpretation


class MonthlyFortune(_Frozen):
    """월운"""
    month: int = Field(..., ge=1, le=12)
    month_name: str
    pillar: PillarInfo
    ten_god: TenGod
    brief: str


class AnnualCycle(_Frozen):
    """세운 (1년)"""
    year: int
    pillar: PillarInfo
    ten_god: TenGodPair
    year_summary: str
    keywords: Tuple[str, ...]
    advice: Tuple[str, ...]
    monthly_fortunes: Tuple[MonthlyFortune, ...] = ()
    monthly_formula: str = Field("heuristic", description="월운 간지 공식 (검증 필요한 근사식)")


class AccuracyInfo(_Frozen):
    """계산 정확도 정보 (근사 한계 명시)"""
    solar_term_method: str = Field("nominal_day_table", description="절입일 고정표 근사")
    monthly_formula: str = Field("heuristic", description="월운 공식 근사")
    near_term_boundary: bool = False
    notes: Tuple[str, ...] = ()


class FortuneProfile(_Frozen):
    """대운/세운 종합 프로필"""
    day_master: DayMasterInfo
    daeun_info: DaeunInfo
    evaluation_year: int
    current_age: int = Field(..., description="한국 나이 (평가연도 - 출생연도 + 1)")
    daeun_list: Tuple[MajorCycle, ...]
    current_daeun: Optional[MajorCycle] = Field(None, description="현재 대운 (첫 대운 전이면 None)")
    seun_list: Tuple[AnnualCycle, ...]
    current_seun: AnnualCycle
    summary: str
    accuracy: AccuracyInfo
