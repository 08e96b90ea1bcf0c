"""
세운 / 월운 테스트
"""
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from saju_fortune.models.schemas import TenGod
from saju_fortune.services.ganji import get_stem
from saju_fortune.services.seun import (
    SEUN_EPOCH_YEAR,
    calc_month_pillar,
    calc_year_pillar,
    calculate_monthly_fortunes,
    calculate_seun,
    calculate_seun_list,
)


class TestYearPillar:
    """연도 → 세운 간지"""

    def test_epoch_anchor(self):
        """1984년 = 갑자 (목 천간 + 수 지지)"""
        assert SEUN_EPOCH_YEAR == 1984
        pillar = calc_year_pillar(1984)
        assert pillar.korean == "갑자"
        assert pillar.stem.element == "목"
        assert pillar.branch.element == "수"
        assert calc_year_pillar(1984 + 60) == pillar

    @pytest.mark.parametrize("year,expected", [
        (1983, "계해"),
        (1978, "무오"),
        (1990, "경오"),
        (2024, "갑진"),
        (2025, "을사"),
        (2026, "병오"),
        (1900, "경자"),
    ])
    def test_known_years(self, year, expected):
        assert calc_year_pillar(year).korean == expected

    def test_periodicity(self):
        """pillar(Y) == pillar(Y + 60)"""
        for year in range(1600, 2400, 7):
            assert calc_year_pillar(year) == calc_year_pillar(year + 60), f"{year}"
            assert calc_year_pillar(year) == calc_year_pillar(year - 60), f"{year}"

    def test_parity(self):
        for year in range(1900, 2100):
            pillar = calc_year_pillar(year)
            assert pillar.stem.index % 2 == pillar.branch.index % 2


class TestSeun:
    """세운 십신/키워드"""

    def test_2026_for_gap_day_master(self):
        """갑목 일간, 2026 병오년 → 식신/식신"""
        seun = calculate_seun(2026, get_stem("갑"))

        assert seun.year == 2026
        assert seun.pillar.korean == "병오"
        assert seun.ten_god.stem == TenGod.OUTPUT_PEER
        assert seun.ten_god.branch == TenGod.OUTPUT_PEER
        assert seun.ten_god.combined == "식신/식신"
        assert seun.year_summary == "2026년 병오(丙午)년 - 식신/식신 운"
        assert seun.keywords == ("안정, 수입, 건강", "안정, 수입, 건강")
        assert seun.advice[0] == "건강 관리와 자기 개발에 집중하세요."

    def test_seun_list(self):
        seun_list = calculate_seun_list(2026, get_stem("무"), 5)
        assert [s.year for s in seun_list] == [2026, 2027, 2028, 2029, 2030, 2031]
        assert [s.pillar.korean for s in seun_list] == ["병오", "정미", "무신", "기유", "경술", "신해"]

    def test_without_monthly(self):
        assert calculate_seun(2026, get_stem("갑"), include_monthly=False).monthly_fortunes == ()


class TestMonthly:
    """월운 (간이 공식)"""

    def test_twelve_months(self):
        months = calculate_monthly_fortunes(2026, get_stem("갑"))
        assert [m.month for m in months] == list(range(1, 13))
        assert months[0].month_name == "1월"
        assert months[0].pillar.ji == "인"
        assert months[11].pillar.ji == "축"

    def test_formula(self):
        """천간 = (year*12 + month + 3) mod 10, 지지 = (month + 1) mod 12"""
        pillar = calc_month_pillar(2026, 1)
        assert pillar.korean == "경인"
        assert calc_month_pillar(2026, 2).korean == "신묘"

    def test_parity_every_year(self):
        for year in range(1900, 2100):
            for month in range(1, 13):
                pillar = calc_month_pillar(year, month)
                assert pillar.stem.index % 2 == pillar.branch.index % 2

    def test_brief_matches_ten_god(self):
        months = calculate_monthly_fortunes(2026, get_stem("갑"))
        # 1월 경인: 경 = 양금 → 갑목 기준 편관
        assert months[0].ten_god == TenGod.AUTHORITY_INDIRECT
        assert months[0].brief == "바쁨, 스트레스"

    def test_marked_as_heuristic(self):
        assert calculate_seun(2026, get_stem("갑")).monthly_formula == "heuristic"
