"""Readiness across athletic, technical, tactical, academic and market dimensions.

Readiness answers "how prepared is this player to be recruited", which is a
different question from visibility. It reuses the ability and academic bands
but not the score vector.
"""

from exposure_engine.core.schemas_profile import (
    AthleticRating,
    ExperienceLevel,
    MarketProfile,
    PlayerProfile,
)
from exposure_engine.core.scoring.multipliers import round_half_up
from exposure_engine.core.scoring.types import AbilityBand, AcademicBand, ReadinessScore

ATHLETIC_READINESS: dict[AbilityBand, int] = {
    AbilityBand.HIGH: 95,
    AbilityBand.MEDIUM: 75,
    AbilityBand.LOW: 40,
}

ACADEMIC_READINESS: dict[AcademicBand, int] = {
    AcademicBand.HIGH: 95,
    AcademicBand.SOLID: 80,
    AcademicBand.RISKY: 65,
    AcademicBand.PROBLEM: 40,
}

RATING_VALUES: dict[AthleticRating, int] = {
    AthleticRating.BELOW_AVERAGE: 30,
    AthleticRating.AVERAGE: 50,
    AthleticRating.ABOVE_AVERAGE: 70,
    AthleticRating.TOP_10_PERCENT: 85,
    AthleticRating.ELITE: 95,
}

NEUTRAL_RATING = 50
TACTICAL_EXPERIENCE_BONUS = 10
TACTICAL_BONUS_LEVELS = frozenset(
    {ExperienceLevel.SEMI_PRO, ExperienceLevel.PRO_ACADEMY_RESERVE}
)


def rating_to_number(rating: AthleticRating | None) -> int:
    """Convert a rating to 0-100; unrated axes sit at the neutral midpoint."""
    if rating is None:
        return NEUTRAL_RATING
    return RATING_VALUES[rating]


def _score_market(market: MarketProfile) -> int:
    """Video presence plus outreach health."""
    score = 50 if market.has_video else 10

    contacted = market.coaches_contacted
    responses = market.responses_received

    if contacted == 0:
        score += 10
    elif contacted < 10:
        score += 25
    elif responses > 0:
        score += 50 if responses / contacted > 0.1 else 35
    else:
        score += 30

    return score


def compute_readiness_score(
    profile: PlayerProfile,
    ability_band: AbilityBand,
    academic_band: AcademicBand,
) -> ReadinessScore:
    """
    Compute the five readiness dimensions and their rounded mean.

    Args:
        profile: Player profile
        ability_band: Output of classify_ability_band
        academic_band: Output of classify_academic_band

    Returns:
        ReadinessScore
    """
    athletic = ATHLETIC_READINESS[ability_band]
    academic = ACADEMIC_READINESS[academic_band]

    technical = NEUTRAL_RATING
    tactical = NEUTRAL_RATING
    athletic_profile = profile.athletic_profile
    if athletic_profile is not None:
        technical = rating_to_number(athletic_profile.technical)
        tactical = rating_to_number(athletic_profile.tactical)

        if athletic_profile.tactical is not None and profile.experience_level in TACTICAL_BONUS_LEVELS:
            tactical = min(100, tactical + TACTICAL_EXPERIENCE_BONUS)

    market = _score_market(profile.market)

    dimensions = [athletic, technical, tactical, academic, market]
    overall = round_half_up(sum(dimensions) / len(dimensions))

    return ReadinessScore(
        athletic=athletic,
        technical=technical,
        tactical=tactical,
        academic=academic,
        market=market,
        overall=overall,
    )
