"""Benchmark the player's bands against D1 and D3 reference averages."""

from dataclasses import dataclass

from exposure_engine.core.scoring.types import (
    AbilityBand,
    AcademicBand,
    BenchmarkMetric,
    LeagueTier,
)


@dataclass
class BenchmarkReference:
    category: str
    d1_average: int
    d3_average: int


EXPOSURE_SCORES: dict[LeagueTier, int] = {
    LeagueTier.ELITE: 95,
    LeagueTier.HIGH: 75,
    LeagueTier.MID: 55,
    LeagueTier.LOW: 35,
}

COMPETITION_SCORES: dict[AbilityBand, int] = {
    AbilityBand.HIGH: 95,
    AbilityBand.MEDIUM: 70,
    AbilityBand.LOW: 50,
}

ACADEMICS_SCORES: dict[AcademicBand, int] = {
    AcademicBand.HIGH: 95,
    AcademicBand.SOLID: 80,
    AcademicBand.RISKY: 60,
    AcademicBand.PROBLEM: 40,
}

EXPOSURE_REFERENCE = BenchmarkReference("Exposure", d1_average=90, d3_average=65)
COMPETITION_REFERENCE = BenchmarkReference("Competition", d1_average=85, d3_average=65)
ACADEMICS_REFERENCE = BenchmarkReference("Academics", d1_average=85, d3_average=75)


def _build_metric(reference: BenchmarkReference, user_score: int) -> BenchmarkMetric:
    if user_score >= reference.d1_average:
        level = "at_or_above_d1"
        feedback = f"{reference.category} level at or above D1 average"
    elif user_score >= reference.d3_average:
        level = "between"
        feedback = f"{reference.category} level between D1 and D3 average"
    else:
        level = "below_d3"
        feedback = f"{reference.category} level below D3 average"

    return BenchmarkMetric(
        category=reference.category,
        user_score=user_score,
        d1_average=reference.d1_average,
        d3_average=reference.d3_average,
        gap_to_d1=user_score - reference.d1_average,
        feedback_level=level,
        feedback=feedback,
    )


def compute_benchmark_analysis(
    league_tier: LeagueTier,
    ability_band: AbilityBand,
    academic_band: AcademicBand,
) -> list[BenchmarkMetric]:
    """Exposure, Competition and Academics metrics, in that order."""
    return [
        _build_metric(EXPOSURE_REFERENCE, EXPOSURE_SCORES[league_tier]),
        _build_metric(COMPETITION_REFERENCE, COMPETITION_SCORES[ability_band]),
        _build_metric(ACADEMICS_REFERENCE, ACADEMICS_SCORES[academic_band]),
    ]
