"""
세운(歲運) / 월운 계산 모듈
- 1984년 = 갑자년 기준, 60년 주기
- 월운은 간이 공식 (calc_month_pillar 참고)
"""
import logging
from typing import Tuple

from saju_fortune.models.schemas import AnnualCycle, MonthlyFortune, TenGodPair
from saju_fortune.rules.fortune_rules import get_month_brief, get_seun_advice, get_seun_keyword
from saju_fortune.services.ganji import GanjiPillar, Stem, mod
from saju_fortune.services.ten_gods import branch_ten_god, stem_ten_god

logger = logging.getLogger(__name__)

# 기준 연도: 1984년 = 갑자(甲子)년
SEUN_EPOCH_YEAR = 1984

MONTHLY_FORMULA = "heuristic"


def calc_year_pillar(year: int) -> GanjiPillar:
    """연도 → 세운 간지 (입춘 보정 없음, 양력 연도 기준)"""
    diff = year - SEUN_EPOCH_YEAR
    return GanjiPillar.from_indices(mod(diff, 10), mod(diff, 12))


def calc_month_pillar(year: int, month: int) -> GanjiPillar:
    """
    월운 간지 (간이 공식)

    지지: 1월 = 인(寅)부터 순서대로
    천간: (year * 12 + month + 3) mod 10

    천간식은 연두법(年頭法)과 일치하지 않는 근사식이다.
    기존 결과와의 호환을 위해 유지하며, 권위 있는 만세력과 대조 검증이 필요하다.
    """
    branch_idx = mod(month + 1, 12)
    stem_idx = mod(year * 12 + month + 3, 10)
    return GanjiPillar.from_indices(stem_idx, branch_idx)


def calculate_monthly_fortunes(year: int, day_master: Stem) -> Tuple[MonthlyFortune, ...]:
    """12개월 월운"""
    months = []
    for month in range(1, 13):
        pillar = calc_month_pillar(year, month)
        ten_god = stem_ten_god(day_master, pillar.stem)
        months.append(MonthlyFortune(
            month=month,
            month_name=f"{month}월",
            pillar=pillar.to_info(),
            ten_god=ten_god,
            brief=get_month_brief(ten_god),
        ))
    return tuple(months)


def calculate_seun(year: int, day_master: Stem, include_monthly: bool = True) -> AnnualCycle:
    """
    세운 (연운) 계산

    Args:
        year: 연도
        day_master: 일간
        include_monthly: 월운 포함 여부
    """
    pillar = calc_year_pillar(year)
    stem_god = stem_ten_god(day_master, pillar.stem)
    branch_god = branch_ten_god(day_master, pillar.branch)
    combined = f"{stem_god.value}/{branch_god.value}"

    monthly = calculate_monthly_fortunes(year, day_master) if include_monthly else ()

    return AnnualCycle(
        year=year,
        pillar=pillar.to_info(),
        ten_god=TenGodPair(stem=stem_god, branch=branch_god, combined=combined),
        year_summary=f"{year}년 {pillar.full}년 - {combined} 운",
        keywords=(get_seun_keyword(stem_god), get_seun_keyword(branch_god)),
        advice=(get_seun_advice(stem_god), get_seun_advice(branch_god)),
        monthly_fortunes=monthly,
        monthly_formula=MONTHLY_FORMULA,
    )


def calculate_seun_list(start_year: int, day_master: Stem, years_ahead: int = 5) -> Tuple[AnnualCycle, ...]:
    """start_year 포함 향후 years_ahead년까지 세운 목록"""
    seun_list = tuple(
        calculate_seun(year, day_master)
        for year in range(start_year, start_year + years_ahead + 1)
    )
    logger.debug(f"[Seun] {start_year}~{start_year + years_ahead} | {[s.pillar.korean for s in seun_list]}")
    return seun_list
