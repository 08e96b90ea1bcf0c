"""
대운 방향 / 대운 목록 테스트
"""
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from saju_fortune.models.schemas import CycleGrade, Direction, Gender, Polarity, TenGod
from saju_fortune.services.daeun import (
    find_current_daeun,
    generate_daeun_list,
    get_daeun_direction,
    grade_cycle,
    normalize_gender,
)
from saju_fortune.services.errors import InvalidInputError
from saju_fortune.services.ganji import SIXTY_GANJI, GanjiPillar, get_stem


class TestDirection:
    """양남음녀 순행, 음남양녀 역행"""

    @pytest.mark.parametrize("gender,polarity,expected", [
        ("male", Polarity.YANG, Direction.FORWARD),
        ("male", Polarity.YIN, Direction.BACKWARD),
        ("female", Polarity.YANG, Direction.BACKWARD),
        ("female", Polarity.YIN, Direction.FORWARD),
    ])
    def test_truth_table(self, gender, polarity, expected):
        assert get_daeun_direction(polarity, gender) == expected

    @pytest.mark.parametrize("alias,expected", [
        ("남", Gender.MALE), ("남성", Gender.MALE), ("M", Gender.MALE),
        ("여", Gender.FEMALE), ("Female", Gender.FEMALE), (Gender.FEMALE, Gender.FEMALE),
    ])
    def test_gender_aliases(self, alias, expected):
        assert normalize_gender(alias) == expected

    @pytest.mark.parametrize("gender", ["other", "", None, "x"])
    def test_invalid_gender(self, gender):
        with pytest.raises(InvalidInputError):
            get_daeun_direction(Polarity.YANG, gender)


class TestDaeunList:
    """월주 기준 대운 10개"""

    def test_gapja_forward_scenario(self):
        """
        일간 갑목(양), 월주 갑자, 순행, 시작 3세
        → 1대운 을축 3-12세 (을 = 음목 → 겁재), 10대운 갑술 93-102세
        """
        day_master = get_stem("갑")
        month_pillar = GanjiPillar.from_symbols("갑", "자")
        daeun_list = generate_daeun_list(month_pillar, Direction.FORWARD, 3, day_master)

        first = daeun_list[0]
        assert first.order == 1
        assert (first.age_start, first.age_end) == (3, 12)
        assert first.age_range == "3-12세"
        assert first.pillar.korean == "을축"
        assert first.ten_god.stem == TenGod.CHALLENGER
        assert first.ten_god.branch == TenGod.WEALTH_DIRECT   # 축 = 음토, 목극토
        assert first.ten_god.combined == "겁재/정재"
        assert first.tag == "도전/손재"

        last = daeun_list[-1]
        assert last.order == 10
        assert (last.age_start, last.age_end) == (93, 102)
        assert last.pillar.korean == "갑술"
        assert last.ten_god.stem == TenGod.RIVAL

    def test_backward_wraps_below_zero(self):
        """역행: 갑자 → 계해, 임술, ... (음수 인덱스 없이)"""
        day_master = get_stem("갑")
        month_pillar = GanjiPillar.from_symbols("갑", "자")
        daeun_list = generate_daeun_list(month_pillar, Direction.BACKWARD, 5, day_master)

        assert [d.pillar.korean for d in daeun_list[:3]] == ["계해", "임술", "신유"]
        assert daeun_list[-1].pillar.korean == "갑인"
        assert daeun_list[0].age_start == 5

    @pytest.mark.parametrize("direction", [Direction.FORWARD, Direction.BACKWARD])
    def test_invariants_for_every_month_pillar(self, direction):
        """모든 월주 × 방향: 10개, 나이 연속, 60갑자 유효, 60갑자 순서 한 칸씩 이동"""
        day_master = get_stem("무")
        step = 1 if direction == Direction.FORWARD else -1

        for idx, ganji in enumerate(SIXTY_GANJI):
            month_pillar = GanjiPillar.from_symbols(ganji[0], ganji[1])
            daeun_list = generate_daeun_list(month_pillar, direction, 7, day_master)

            assert len(daeun_list) == 10
            for i, daeun in enumerate(daeun_list):
                assert daeun.pillar.gan_index % 2 == daeun.pillar.ji_index % 2
                assert daeun.pillar.korean == SIXTY_GANJI[(idx + step * (i + 1)) % 60]
                assert daeun.age_end == daeun.age_start + 9
            for prev, nxt in zip(daeun_list, daeun_list[1:]):
                assert prev.age_end + 1 == nxt.age_start
            assert daeun_list[0].age_start == 7
            assert daeun_list[-1].age_end == 7 + 99

    def test_interpretation(self):
        day_master = get_stem("갑")
        month_pillar = GanjiPillar.from_symbols("갑", "자")
        first = generate_daeun_list(month_pillar, Direction.FORWARD, 3, day_master)[0]

        interp = first.interpretation
        assert interp.keywords == ("도전/손재", "안정/축적")
        assert interp.element_analysis.stem_relation == "same"
        assert interp.element_analysis.branch_relation == "i_control"
        assert interp.grade == CycleGrade.MIXED
        assert interp.overall.startswith("반길반흉")
        assert "을축" in interp.overall


class TestGrade:
    """대운 등급"""

    @pytest.mark.parametrize("stem,branch,expected", [
        (TenGod.AUTHORITY_DIRECT, TenGod.SUPPORT_DIRECT, CycleGrade.FAVORABLE),
        (TenGod.OUTPUT_PEER, TenGod.RIVAL, CycleGrade.MIXED),
        (TenGod.CHALLENGER, TenGod.WEALTH_DIRECT, CycleGrade.MIXED),
        (TenGod.AUTHORITY_INDIRECT, TenGod.OUTPUT_REBEL, CycleGrade.CHALLENGING),
    ])
    def test_grade(self, stem, branch, expected):
        assert grade_cycle(stem, branch) == expected


class TestCurrentDaeun:
    """현재 대운 선택"""

    @pytest.fixture
    def daeun_list(self):
        return generate_daeun_list(
            GanjiPillar.from_symbols("갑", "자"), Direction.FORWARD, 3, get_stem("갑")
        )

    @pytest.mark.parametrize("age,order", [(3, 1), (12, 1), (13, 2), (50, 5), (102, 10)])
    def test_found(self, daeun_list, age, order):
        assert find_current_daeun(daeun_list, age).order == order

    @pytest.mark.parametrize("age", [0, 1, 2, 103])
    def test_out_of_range(self, daeun_list, age):
        """첫 대운 전/마지막 대운 후는 None (오류 아님)"""
        assert find_current_daeun(daeun_list, age) is None
