"""Base score tables and the additive adjustment pipeline.

Order of application (see visibility.compute_visibility_scores):
base table -> ability deltas -> academic deltas -> eligibility caps ->
minutes bonus -> experience/age bonus -> clamp.

Ability deltas shift where the peak fit sits rather than rewarding or
punishing: a Low ability player's best fit moves toward JUCO/NAIA.
Academic deltas lean hardest on D3 (no athletic aid, academic money
dominates) and on JUCO in the opposite direction.
"""

from datetime import date

from exposure_engine.core.schemas_profile import (
    ExperienceLevel,
    Gender,
    PlayerProfile,
    SeasonRole,
)
from exposure_engine.core.scoring.classifiers import latest_season
from exposure_engine.core.scoring.types import (
    AbilityBand,
    AcademicBand,
    LeagueTier,
    ScoreVector,
)


def _vec(d1: int, d2: int, d3: int, naia: int, juco: int) -> ScoreVector:
    return ScoreVector(d1=d1, d2=d2, d3=d3, naia=naia, juco=juco)


# =============================================================================
# Base tables
# =============================================================================

BASE_SCORES: dict[Gender, dict[LeagueTier, ScoreVector]] = {
    Gender.MALE: {
        LeagueTier.ELITE: _vec(70, 60, 40, 30, 20),
        LeagueTier.HIGH: _vec(30, 50, 60, 40, 30),
        LeagueTier.MID: _vec(15, 35, 55, 45, 35),
        LeagueTier.LOW: _vec(5, 20, 40, 45, 50),
    },
    # Larger D1 pool on the women's side
    Gender.FEMALE: {
        LeagueTier.ELITE: _vec(80, 65, 45, 30, 20),
        LeagueTier.HIGH: _vec(35, 55, 60, 40, 30),
        LeagueTier.MID: _vec(15, 35, 60, 45, 35),
        LeagueTier.LOW: _vec(5, 20, 45, 45, 50),
    },
}

ABILITY_ADJUSTMENTS: dict[AbilityBand, ScoreVector] = {
    AbilityBand.HIGH: _vec(15, 5, -10, -15, -20),
    AbilityBand.MEDIUM: _vec(-20, 10, 15, 5, 0),
    AbilityBand.LOW: _vec(-40, -25, 10, 20, 25),
}

ACADEMIC_ADJUSTMENTS: dict[AcademicBand, ScoreVector] = {
    AcademicBand.HIGH: _vec(5, 5, 20, 0, -10),
    AcademicBand.SOLID: _vec(0, 5, 10, 0, -5),
    AcademicBand.RISKY: _vec(-10, -5, -5, 5, 10),
    AcademicBand.PROBLEM: _vec(-25, -20, -15, 10, 25),
}

# =============================================================================
# Minutes and experience bonuses
# =============================================================================

HEAVY_MINUTES_THRESHOLD = 80
LOW_MINUTES_THRESHOLD = 20

HEAVY_MINUTES_BONUS = _vec(5, 5, 0, 0, 0)
LOW_MINUTES_PENALTY = _vec(-10, -5, -5, 0, 0)

MATURITY_AGE_YEARS = 18.5
MATURITY_BONUS = _vec(5, 5, 0, 5, 0)

EXPERIENCE_BONUSES: dict[ExperienceLevel, ScoreVector] = {
    ExperienceLevel.SEMI_PRO: _vec(15, 15, 0, 10, 0),
    ExperienceLevel.PRO_ACADEMY_RESERVE: _vec(15, 15, 0, 10, 0),
    ExperienceLevel.INTERNATIONAL_ACADEMY_U19: _vec(10, 10, 0, 5, 0),
    ExperienceLevel.ADULT_AMATEUR_LEAGUE: _vec(0, 5, 0, 5, 0),
}


def compute_base_scores(tier: LeagueTier, gender: Gender) -> ScoreVector:
    """Initial vector for a league tier and gender cohort."""
    return BASE_SCORES[gender][tier].model_copy()


def apply_ability_adjustments(scores: ScoreVector, ability_band: AbilityBand) -> ScoreVector:
    return scores.plus(ABILITY_ADJUSTMENTS[ability_band])


def apply_academic_adjustments(scores: ScoreVector, academic_band: AcademicBand) -> ScoreVector:
    return scores.plus(ACADEMIC_ADJUSTMENTS[academic_band])


def apply_minutes_bonus(scores: ScoreVector, profile: PlayerProfile) -> ScoreVector:
    """
    Reward heavy minutes and penalise deep-bench seasons.

    Stricter thresholds than the ability band nudge (80% / 20% instead of
    70% / 30%), and applied on top of it.
    """
    season = latest_season(profile.seasons)
    if season is None:
        return scores

    minutes = season.minutes_played_percent
    if season.main_role == SeasonRole.KEY_STARTER and minutes >= HEAVY_MINUTES_THRESHOLD:
        scores = scores.plus(HEAVY_MINUTES_BONUS)
    if season.main_role == SeasonRole.BENCH and minutes <= LOW_MINUTES_THRESHOLD:
        scores = scores.plus(LOW_MINUTES_PENALTY)
    return scores


def age_in_years(date_of_birth: date, as_of: date) -> float:
    """Fractional age using a 365.25-day year."""
    return (as_of - date_of_birth).days / 365.25


def apply_experience_bonus(
    scores: ScoreVector,
    profile: PlayerProfile,
    as_of: date,
) -> ScoreVector:
    """
    Add the maturity bonus and at most one experience-level bonus.

    Args:
        scores: Vector after minutes bonus
        profile: Player profile (date of birth, experience level)
        as_of: Date the age is measured at

    Returns:
        Adjusted vector
    """
    if profile.date_of_birth is not None:
        if age_in_years(profile.date_of_birth, as_of) > MATURITY_AGE_YEARS:
            scores = scores.plus(MATURITY_BONUS)

    bonus = EXPERIENCE_BONUSES.get(profile.experience_level)
    if bonus is not None:
        scores = scores.plus(bonus)

    return scores
