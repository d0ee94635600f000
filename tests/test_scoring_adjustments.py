"""Tests for base tables, additive adjustments and eligibility caps."""

from datetime import date

import pytest

from exposure_engine.core.schemas_profile import Gender
from exposure_engine.core.scoring.adjustments import (
    ABILITY_ADJUSTMENTS,
    ACADEMIC_ADJUSTMENTS,
    age_in_years,
    apply_ability_adjustments,
    apply_academic_adjustments,
    apply_experience_bonus,
    apply_minutes_bonus,
    compute_base_scores,
)
from exposure_engine.core.scoring.caps import apply_eligibility_caps
from exposure_engine.core.scoring.types import (
    AbilityBand,
    AcademicBand,
    LeagueTier,
    ScoreVector,
    TargetTier,
)
from tests.fixtures_profiles import AS_OF, OLDER_DOB, make_profile, season


def vec(d1, d2, d3, naia, juco) -> ScoreVector:
    return ScoreVector(d1=d1, d2=d2, d3=d3, naia=naia, juco=juco)


# =============================================================================
# Base tables
# =============================================================================


class TestBaseScores:
    def test_male_elite(self):
        assert compute_base_scores(LeagueTier.ELITE, Gender.MALE) == vec(70, 60, 40, 30, 20)

    def test_female_elite_has_higher_d1(self):
        female = compute_base_scores(LeagueTier.ELITE, Gender.FEMALE)
        male = compute_base_scores(LeagueTier.ELITE, Gender.MALE)
        assert female == vec(80, 65, 45, 30, 20)
        assert female.d1 > male.d1

    def test_low_tier_peaks_at_juco(self):
        assert compute_base_scores(LeagueTier.LOW, Gender.MALE) == vec(5, 20, 40, 45, 50)

    def test_returns_a_copy(self):
        first = compute_base_scores(LeagueTier.MID, Gender.MALE)
        mutated = first.replace(d1=99)
        assert compute_base_scores(LeagueTier.MID, Gender.MALE).d1 == 15
        assert mutated.d1 == 99


# =============================================================================
# Ability and academic deltas
# =============================================================================


class TestDeltas:
    def test_high_ability_shifts_peak_to_d1(self):
        result = apply_ability_adjustments(vec(50, 50, 50, 50, 50), AbilityBand.HIGH)
        assert result == vec(65, 55, 40, 35, 30)

    def test_low_ability_shifts_peak_to_juco(self):
        result = apply_ability_adjustments(vec(50, 50, 50, 50, 50), AbilityBand.LOW)
        assert result == vec(10, 25, 60, 70, 75)

    def test_ability_policy_is_monotone_on_extremes(self):
        high = ABILITY_ADJUSTMENTS[AbilityBand.HIGH]
        low = ABILITY_ADJUSTMENTS[AbilityBand.LOW]
        assert high.d1 > low.d1
        assert high.juco < low.juco

    def test_high_academics_boost_d3_most(self):
        delta = ACADEMIC_ADJUSTMENTS[AcademicBand.HIGH]
        assert delta.d3 == max(delta.get(t) for t in TargetTier)
        assert delta.juco < 0

    def test_problem_academics_boost_juco(self):
        result = apply_academic_adjustments(vec(50, 50, 50, 50, 50), AcademicBand.PROBLEM)
        assert result == vec(25, 30, 35, 60, 75)


# =============================================================================
# Eligibility caps
# =============================================================================


class TestEligibilityCaps:
    def test_no_caps_at_or_above_2_3(self):
        scores = vec(80, 70, 60, 50, 40)
        result, caps = apply_eligibility_caps(scores, 2.3)
        assert result == scores
        assert caps == []

    def test_below_2_3_caps_d1_and_lifts_juco(self):
        result, caps = apply_eligibility_caps(vec(80, 70, 60, 50, 30), 2.25)
        assert result == vec(15, 70, 60, 50, 60)
        assert [c.cap_id for c in caps] == ["d1_core_gpa", "juco_fallback"]

    def test_juco_floor_adds_at_least_twenty(self):
        result, _ = apply_eligibility_caps(vec(80, 70, 60, 50, 50), 2.25)
        assert result.juco == 70

    def test_juco_floor_can_exceed_100_before_clamp(self):
        result, _ = apply_eligibility_caps(vec(0, 0, 0, 0, 100), 2.0)
        assert result.juco == 120

    def test_d1_already_below_cap_is_unchanged(self):
        result, caps = apply_eligibility_caps(vec(-60, 70, 60, 50, 30), 2.25)
        assert result.d1 == -60
        assert caps[0].tier == TargetTier.D1

    def test_below_2_2_also_caps_d2(self):
        result, caps = apply_eligibility_caps(vec(80, 70, 60, 50, 30), 2.1)
        assert result.d2 == 20
        assert result.d3 == 60
        assert {c.cap_id for c in caps} == {"d1_core_gpa", "juco_fallback", "d2_core_gpa"}

    def test_below_2_0_caps_d3_but_never_naia(self):
        result, caps = apply_eligibility_caps(vec(80, 70, 60, 90, 30), 1.8)
        assert result == vec(15, 20, 25, 90, 60)
        assert len(caps) == 4

    def test_missing_gpa_triggers_nothing(self):
        scores = vec(80, 70, 60, 50, 40)
        result, caps = apply_eligibility_caps(scores, None)
        assert result == scores
        assert caps == []

    def test_cap_records_kind_and_limit(self):
        _, caps = apply_eligibility_caps(vec(80, 70, 60, 50, 30), 2.25)
        floor = caps[1]
        assert floor.kind == "floor"
        assert floor.limit == 60
        assert floor.tier == TargetTier.JUCO


# =============================================================================
# Minutes bonus
# =============================================================================


class TestMinutesBonus:
    BASE = vec(50, 50, 50, 50, 50)

    def test_key_starter_80_minutes(self):
        profile = make_profile(seasons=[season(role="Key_Starter", minutes=80)])
        assert apply_minutes_bonus(self.BASE, profile) == vec(55, 55, 50, 50, 50)

    def test_key_starter_79_minutes_no_bonus(self):
        profile = make_profile(seasons=[season(role="Key_Starter", minutes=79)])
        assert apply_minutes_bonus(self.BASE, profile) == self.BASE

    def test_bench_20_minutes_penalty(self):
        profile = make_profile(seasons=[season(role="Bench", minutes=20)])
        assert apply_minutes_bonus(self.BASE, profile) == vec(40, 45, 45, 50, 50)

    def test_bench_21_minutes_no_penalty(self):
        profile = make_profile(seasons=[season(role="Bench", minutes=21)])
        assert apply_minutes_bonus(self.BASE, profile) == self.BASE

    def test_rotation_low_minutes_no_penalty(self):
        profile = make_profile(seasons=[season(role="Rotation", minutes=5)])
        assert apply_minutes_bonus(self.BASE, profile) == self.BASE

    def test_no_seasons(self):
        assert apply_minutes_bonus(self.BASE, make_profile(seasons=[])) == self.BASE


# =============================================================================
# Experience and age bonus
# =============================================================================


class TestExperienceBonus:
    BASE = vec(50, 50, 50, 50, 50)

    def test_age_in_years(self):
        assert age_in_years(date(2000, 1, 1), date(2018, 7, 2)) == pytest.approx(18.5, abs=0.01)

    def test_over_18_5_gets_maturity_bonus(self):
        profile = make_profile(date_of_birth=OLDER_DOB.isoformat())
        assert apply_experience_bonus(self.BASE, profile, AS_OF) == vec(55, 55, 50, 55, 50)

    def test_exactly_18_is_no_bonus(self):
        profile = make_profile(date_of_birth=date(2007, 9, 1).isoformat())
        assert apply_experience_bonus(self.BASE, profile, AS_OF) == self.BASE

    def test_missing_dob_is_no_bonus(self):
        profile = make_profile(date_of_birth=None)
        assert apply_experience_bonus(self.BASE, profile, AS_OF) == self.BASE

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("Semi_Pro_UPSL_NPSL_WPSL", vec(65, 65, 50, 60, 50)),
            ("Pro_Academy_Reserve", vec(65, 65, 50, 60, 50)),
            ("International_Academy_U19", vec(60, 60, 50, 55, 50)),
            ("Adult_Amateur_League", vec(50, 55, 50, 55, 50)),
            ("Youth_Club_Only", vec(50, 50, 50, 50, 50)),
            ("High_School_Varsity", vec(50, 50, 50, 50, 50)),
        ],
    )
    def test_experience_levels(self, level, expected):
        profile = make_profile(experience_level=level)
        assert apply_experience_bonus(self.BASE, profile, AS_OF) == expected

    def test_age_and_experience_stack(self):
        profile = make_profile(
            date_of_birth=OLDER_DOB.isoformat(),
            experience_level="Semi_Pro_UPSL_NPSL_WPSL",
        )
        assert apply_experience_bonus(self.BASE, profile, AS_OF) == vec(70, 70, 50, 65, 50)
