"""Tests for on-paper fit, final visibility and best-fit selection."""

from decimal import Decimal

import pytest

from exposure_engine.core.scoring.multipliers import round_half_up
from exposure_engine.core.scoring.types import (
    TIER_ORDER,
    AbilityBand,
    AcademicBand,
    LeagueTier,
    OutreachTag,
    TargetTier,
    VisibilityScore,
)
from exposure_engine.core.scoring.visibility import (
    compute_visibility_scores,
    select_best_fit,
)
from tests.fixtures_profiles import (
    AS_OF,
    ELITE_ATHLETIC,
    MEDIUM_ATHLETIC,
    OLDER_DOB,
    WEAK_ATHLETIC,
    make_profile,
    make_scenario_one,
    season,
)


def finals(result) -> list[int]:
    return [s.visibility_percent for s in result.scores]


# =============================================================================
# Worked scenarios
# =============================================================================


class TestScenarios:
    def test_elite_key_starter_with_video(self):
        result = compute_visibility_scores(make_scenario_one(), as_of=AS_OF)

        assert result.league_tier == LeagueTier.ELITE
        assert result.ability_band == AbilityBand.HIGH
        assert result.academic_band == AcademicBand.HIGH
        assert result.caps_applied == []
        assert result.video_multiplier == 1.0
        assert result.outreach_multiplier == 1.0
        assert result.outreach_tag is None
        assert [result.on_paper_fit.get(t) for t in TIER_ORDER] == [90, 70, 50, 15, 0]
        assert finals(result) == [90, 70, 50, 15, 0]

    def test_same_profile_without_video(self):
        result = compute_visibility_scores(
            make_scenario_one(market={"has_video": False}), as_of=AS_OF
        )

        assert result.video_multiplier == 0.6
        assert finals(result) == [54, 42, 30, 9, 0]

    def test_low_gpa_low_league_low_ability(self):
        profile = make_profile(academics={"gpa": 2.1}, seasons=[], athletic_profile=None)
        result = compute_visibility_scores(profile, as_of=AS_OF)

        assert result.league_tier == LeagueTier.LOW
        assert result.ability_band == AbilityBand.LOW
        assert [c.cap_id for c in result.caps_applied] == [
            "d1_core_gpa",
            "juco_fallback",
            "d2_core_gpa",
        ]
        assert result.on_paper_fit.d1 <= 15
        assert result.on_paper_fit.d2 <= 20
        assert result.on_paper_fit.juco >= 60
        assert [result.on_paper_fit.get(t) for t in TIER_ORDER] == [0, 0, 35, 75, 100]
        # No video (0.6) and no outreach (0.7)
        assert finals(result) == [0, 0, 15, 32, 42]

    def test_no_contacts_is_invisible_regardless_of_profile(self):
        result = compute_visibility_scores(
            make_scenario_one(market={"coaches_contacted": 0}), as_of=AS_OF
        )
        assert result.outreach_multiplier == 0.7
        assert result.outreach_tag == OutreachTag.INVISIBLE
        assert finals(result) == [63, 49, 35, 11, 0]

    def test_spamming_outreach(self):
        result = compute_visibility_scores(
            make_scenario_one(market={"coaches_contacted": 25, "responses_received": 1}),
            as_of=AS_OF,
        )
        assert result.outreach_tag == OutreachTag.SPAMMING
        assert result.outreach_multiplier == 0.8

    def test_talent_gap_outreach(self):
        result = compute_visibility_scores(
            make_scenario_one(
                market={"coaches_contacted": 10, "responses_received": 6, "offers_received": 0}
            ),
            as_of=AS_OF,
        )
        assert result.outreach_tag == OutreachTag.TALENT_GAP
        assert result.outreach_multiplier == 0.9


# =============================================================================
# Invariants
# =============================================================================


PROFILES = [
    make_scenario_one(),
    make_profile(),
    make_profile(academics={"gpa": None}),
    make_profile(academics={"gpa": 1.2}, athletic_profile=WEAK_ATHLETIC),
    make_profile(
        gender="Female",
        date_of_birth=OLDER_DOB.isoformat(),
        experience_level="Pro_Academy_Reserve",
        seasons=[season(2025, ["Girls_Academy"], role="Key_Starter", minutes=95)],
        athletic_profile=ELITE_ATHLETIC,
        academics={"gpa": 4.0},
        market={"has_video": True, "coaches_contacted": 8, "responses_received": 4},
    ),
    make_profile(
        seasons=[season(2025, ["NPL"], role="Bench", minutes=5)],
        athletic_profile=MEDIUM_ATHLETIC,
        market={"coaches_contacted": 40, "responses_received": 0},
    ),
]


class TestInvariants:
    @pytest.mark.parametrize("profile", PROFILES)
    def test_final_scores_are_integers_in_range(self, profile):
        result = compute_visibility_scores(profile, as_of=AS_OF)
        assert [s.level for s in result.scores] == list(TIER_ORDER)
        for score in result.scores:
            assert isinstance(score.visibility_percent, int)
            assert 0 <= score.visibility_percent <= 100
            assert 0 <= score.on_paper_fit <= 100

    @pytest.mark.parametrize("profile", PROFILES)
    def test_no_video_scales_every_tier_by_0_6(self, profile):
        with_video = profile.model_copy(
            update={"market": profile.market.model_copy(update={"has_video": True})}
        )
        without_video = profile.model_copy(
            update={"market": profile.market.model_copy(update={"has_video": False})}
        )
        a = compute_visibility_scores(with_video, as_of=AS_OF)
        b = compute_visibility_scores(without_video, as_of=AS_OF)

        assert a.on_paper_fit == b.on_paper_fit
        for tier_score in b.scores:
            expected = round_half_up(
                Decimal(str(tier_score.on_paper_fit))
                * Decimal("0.6")
                * Decimal(str(b.outreach_multiplier))
            )
            assert tier_score.visibility_percent == expected

    def test_ability_monotonic_on_extreme_tiers(self):
        common = {"seasons": [season(2025, ["NPL"])], "academics": {"gpa": 3.2}}
        low = compute_visibility_scores(make_profile(athletic_profile=None, **common), as_of=AS_OF)
        high = compute_visibility_scores(
            make_profile(athletic_profile=ELITE_ATHLETIC, **common), as_of=AS_OF
        )

        assert low.ability_band == AbilityBand.LOW
        assert high.ability_band == AbilityBand.HIGH
        assert high.on_paper_fit.d1 > low.on_paper_fit.d1
        assert high.on_paper_fit.juco < low.on_paper_fit.juco

    def test_notes_show_base_and_multipliers(self):
        result = compute_visibility_scores(make_scenario_one(), as_of=AS_OF)
        assert result.scores[0].notes == "Base: 90, Video: 1x, Outreach: 1x"

    def test_gpa_2_3_is_not_capped(self):
        result = compute_visibility_scores(make_scenario_one(academics={"gpa": 2.3}), as_of=AS_OF)
        assert result.caps_applied == []
        assert result.academic_band == AcademicBand.PROBLEM


# =============================================================================
# Best fit
# =============================================================================


def _scores(*values: int) -> list[VisibilityScore]:
    return [
        VisibilityScore(level=tier, visibility_percent=v, on_paper_fit=v)
        for tier, v in zip(TIER_ORDER, values)
    ]


class TestBestFit:
    def test_highest_score_wins(self):
        assert select_best_fit(_scores(10, 20, 60, 40, 30)) == TargetTier.D3

    def test_tie_goes_to_more_competitive_tier(self):
        assert select_best_fit(_scores(10, 50, 50, 50, 30)) == TargetTier.D2

    def test_all_zero_is_d1(self):
        assert select_best_fit(_scores(0, 0, 0, 0, 0)) == TargetTier.D1
