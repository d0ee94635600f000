"""Axis classifiers: League Tier, Ability Band, Academic Band.

Each classifier is a pure function of the profile. None of them raise:
missing data falls through to the weakest band for that axis.
"""

from exposure_engine.core.schemas_profile import (
    AthleticRating,
    ExperienceLevel,
    Gender,
    PlayerProfile,
    SeasonRecord,
    SeasonRole,
    YouthLeague,
)
from exposure_engine.core.scoring.types import AbilityBand, AcademicBand, LeagueTier

# =============================================================================
# League lists
# =============================================================================

_SHARED_HIGH_LEAGUES = frozenset(
    {
        YouthLeague.ECNL_RL,
        YouthLeague.USYS_NATIONAL_LEAGUE,
        YouthLeague.USYS_NATIONAL,
        YouthLeague.USL_ACADEMY,
    }
)

LEAGUE_TIERS: dict[Gender, dict[LeagueTier, frozenset[YouthLeague]]] = {
    Gender.MALE: {
        LeagueTier.ELITE: frozenset({YouthLeague.MLS_NEXT, YouthLeague.ECNL}),
        LeagueTier.HIGH: _SHARED_HIGH_LEAGUES,
        LeagueTier.MID: frozenset({YouthLeague.NPL}),
    },
    Gender.FEMALE: {
        LeagueTier.ELITE: frozenset({YouthLeague.ECNL, YouthLeague.GIRLS_ACADEMY}),
        LeagueTier.HIGH: _SHARED_HIGH_LEAGUES,
        LeagueTier.MID: frozenset({YouthLeague.NPL}),
    },
}

ELITE_OVERRIDE_LEVELS = frozenset(
    {ExperienceLevel.PRO_ACADEMY_RESERVE, ExperienceLevel.INTERNATIONAL_ACADEMY_U19}
)

ELITE_RATINGS = frozenset({AthleticRating.ELITE, AthleticRating.TOP_10_PERCENT})

_ABILITY_STEPS = [AbilityBand.LOW, AbilityBand.MEDIUM, AbilityBand.HIGH]


def latest_season(seasons: list[SeasonRecord]) -> SeasonRecord | None:
    """
    Most recent season by year.

    When several seasons share the max year, the one appearing last in
    input order wins.
    """
    latest: SeasonRecord | None = None
    for season in seasons:
        if latest is None or season.year >= latest.year:
            latest = season
    return latest


def _tier_for_leagues(leagues: list[YouthLeague], gender: Gender) -> LeagueTier:
    """Best tier among a season's league memberships."""
    tiers = LEAGUE_TIERS[gender]
    for tier in (LeagueTier.ELITE, LeagueTier.HIGH, LeagueTier.MID):
        if any(league in tiers[tier] for league in leagues):
            return tier
    return LeagueTier.LOW


# =============================================================================
# League Tier
# =============================================================================


def classify_league_tier(profile: PlayerProfile) -> LeagueTier:
    """
    Classify the competitive level of the player's most relevant season.

    Experience level overrides come first: pro and international academies
    are always Elite, semi-pro players are Elite only with a tier-1 league
    in their latest season.
    """
    if profile.experience_level in ELITE_OVERRIDE_LEVELS:
        return LeagueTier.ELITE

    season = latest_season(profile.seasons)

    if profile.experience_level == ExperienceLevel.SEMI_PRO:
        if season is not None and _tier_for_leagues(season.leagues, profile.gender) == LeagueTier.ELITE:
            return LeagueTier.ELITE
        return LeagueTier.HIGH

    if season is None:
        return LeagueTier.LOW

    return _tier_for_leagues(season.leagues, profile.gender)


# =============================================================================
# Ability Band
# =============================================================================


def _step(band: AbilityBand, delta: int) -> AbilityBand:
    index = _ABILITY_STEPS.index(band) + delta
    return _ABILITY_STEPS[max(0, min(len(_ABILITY_STEPS) - 1, index))]


def classify_ability_band(profile: PlayerProfile) -> AbilityBand:
    """
    Classify ability from the six-axis self assessment, then nudge it by
    latest-season role and minutes.

    The down rule runs after the up rule, so contradictory data (a key
    starter with <= 30% minutes) can cancel a promotion.
    """
    if profile.athletic_profile is None:
        return AbilityBand.LOW

    ratings = profile.athletic_profile.ratings()
    elite_count = sum(1 for r in ratings if r in ELITE_RATINGS)
    weak_count = sum(1 for r in ratings if r == AthleticRating.BELOW_AVERAGE)

    if elite_count >= 4:
        band = AbilityBand.HIGH
    elif elite_count >= 2 and weak_count <= 1:
        band = AbilityBand.MEDIUM
    else:
        band = AbilityBand.LOW

    season = latest_season(profile.seasons)
    if season is not None:
        minutes = season.minutes_played_percent

        if season.main_role == SeasonRole.KEY_STARTER and minutes >= 70:
            band = _step(band, +1)

        if season.main_role == SeasonRole.BENCH or minutes <= 30:
            band = _step(band, -1)

    return band


# =============================================================================
# Academic Band
# =============================================================================


def classify_academic_band(gpa: float | None) -> AcademicBand:
    """GPA thresholds; exact boundary values belong to the higher band."""
    if gpa is None:
        # No GPA on file is treated like a failing GPA
        return AcademicBand.PROBLEM
    if gpa >= 3.7:
        return AcademicBand.HIGH
    if gpa >= 3.0:
        return AcademicBand.SOLID
    if gpa >= 2.5:
        return AcademicBand.RISKY
    return AcademicBand.PROBLEM
