"""
십신별 대운/세운/월운 키워드 테이블
- 모든 테이블은 십신 10개를 전부 포함 (누락 = 테이블 결함)
- 서술형 해석은 Narrative Renderer 담당, 여기는 고정 키워드만
"""
from types import MappingProxyType

from saju_fortune.models.schemas import TenGod


# 대운 키워드/설명
DAEUN_RULES = MappingProxyType({
    TenGod.RIVAL: ("경쟁/협력", "동료, 경쟁자가 많아지는 시기. 독립, 창업에 유리하나 재물 다툼 주의."),
    TenGod.CHALLENGER: ("도전/손재", "과감한 도전 시기. 투자나 도박 조심, 형제/친구 관계 변화."),
    TenGod.OUTPUT_PEER: ("표현/안정", "재능 발휘, 안정적 수입. 먹고 사는 것이 편안해지는 시기."),
    TenGod.OUTPUT_REBEL: ("창의/반항", "예술적 표현력 상승, 권위에 도전. 직장인은 이직 가능성."),
    TenGod.WEALTH_INDIRECT: ("투기/유동", "큰 돈이 오가는 시기. 사업 확장, 부동산, 투자 기회."),
    TenGod.WEALTH_DIRECT: ("안정/축적", "꾸준한 재물 축적. 월급, 저축으로 자산 증가."),
    TenGod.AUTHORITY_INDIRECT: ("변화/압박", "직장, 환경 변화. 스트레스 있으나 성장의 기회."),
    TenGod.AUTHORITY_DIRECT: ("명예/승진", "사회적 지위 상승. 승진, 합격, 명예 획득."),
    TenGod.SUPPORT_INDIRECT: ("학문/고독", "공부, 자격증 취득에 유리. 정신적 성장 시기."),
    TenGod.SUPPORT_DIRECT: ("지원/보호", "귀인의 도움. 부모, 상사의 지원으로 성공."),
})

# 세운 키워드
SEUN_KEYWORDS = MappingProxyType({
    TenGod.RIVAL: "경쟁, 독립, 동료",
    TenGod.CHALLENGER: "도전, 변화, 손재",
    TenGod.OUTPUT_PEER: "안정, 수입, 건강",
    TenGod.OUTPUT_REBEL: "창의, 표현, 변동",
    TenGod.WEALTH_INDIRECT: "투자, 확장, 유동",
    TenGod.WEALTH_DIRECT: "저축, 안정, 수입",
    TenGod.AUTHORITY_INDIRECT: "변화, 스트레스, 성장",
    TenGod.AUTHORITY_DIRECT: "승진, 명예, 직장",
    TenGod.SUPPORT_INDIRECT: "학문, 자격, 사고",
    TenGod.SUPPORT_DIRECT: "지원, 귀인, 보호",
})

# 세운 조언
SEUN_ADVICE = MappingProxyType({
    TenGod.RIVAL: "협력과 경쟁 사이에서 균형을 찾으세요.",
    TenGod.CHALLENGER: "무리한 투자나 보증은 삼가세요.",
    TenGod.OUTPUT_PEER: "건강 관리와 자기 개발에 집중하세요.",
    TenGod.OUTPUT_REBEL: "감정 표현을 절제하고 창작 활동에 에너지를 쏟으세요.",
    TenGod.WEALTH_INDIRECT: "기회를 잡되 리스크 관리를 철저히 하세요.",
    TenGod.WEALTH_DIRECT: "꾸준한 저축과 안정적인 투자를 추천합니다.",
    TenGod.AUTHORITY_INDIRECT: "변화에 유연하게 대처하고 건강을 챙기세요.",
    TenGod.AUTHORITY_DIRECT: "책임감 있는 행동으로 신뢰를 쌓으세요.",
    TenGod.SUPPORT_INDIRECT: "새로운 공부나 자격증 취득에 도전하세요.",
    TenGod.SUPPORT_DIRECT: "주변의 도움에 감사하고 관계를 소중히 하세요.",
})

# 월운 간략 설명
MONTH_BRIEFS = MappingProxyType({
    TenGod.RIVAL: "경쟁 활발, 지출 주의",
    TenGod.CHALLENGER: "변수 발생, 신중히",
    TenGod.OUTPUT_PEER: "안정적, 건강 좋음",
    TenGod.OUTPUT_REBEL: "창의력 up, 말조심",
    TenGod.WEALTH_INDIRECT: "수입 증가 가능",
    TenGod.WEALTH_DIRECT: "재정 안정",
    TenGod.AUTHORITY_INDIRECT: "바쁨, 스트레스",
    TenGod.AUTHORITY_DIRECT: "인정받는 달",
    TenGod.SUPPORT_INDIRECT: "공부/사색 시기",
    TenGod.SUPPORT_DIRECT: "귀인 만남",
})

# 길신 (대운 등급 판정용)
POSITIVE_GODS = frozenset({
    TenGod.AUTHORITY_DIRECT,
    TenGod.SUPPORT_DIRECT,
    TenGod.WEALTH_DIRECT,
    TenGod.OUTPUT_PEER,
})


def get_daeun_keyword(ten_god: TenGod) -> str:
    return DAEUN_RULES[TenGod(ten_god)][0]


def get_daeun_description(ten_god: TenGod) -> str:
    return DAEUN_RULES[TenGod(ten_god)][1]


def get_seun_keyword(ten_god: TenGod) -> str:
    return SEUN_KEYWORDS[TenGod(ten_god)]


def get_seun_advice(ten_god: TenGod) -> str:
    return SEUN_ADVICE[TenGod(ten_god)]


def get_month_brief(ten_god: TenGod) -> str:
    return MONTH_BRIEFS[TenGod(ten_god)]


def is_positive(ten_god: TenGod) -> bool:
    return TenGod(ten_god) in POSITIVE_GODS
