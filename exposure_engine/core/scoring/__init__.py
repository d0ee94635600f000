"""Deterministic fit scoring engine.

Turns a player profile into fit scores across five college tiers:
- Visibility (D1, D2, D3, NAIA, JUCO): on-paper fit x video x outreach
- Readiness: athletic, technical, tactical, academic, market
- Benchmarks: exposure, competition, academics vs D1/D3 averages
- Funnel: where the coach outreach process stands

Fit is a ranking of where the player belongs, not a probability of being
recruited.

Usage:
    from exposure_engine.core.scoring import compute_all_scores

    scores = compute_all_scores(profile)
    print(f"Best fit: {scores.best_fit.value}")
"""

from exposure_engine.core.scoring.classifiers import (
    classify_ability_band,
    classify_academic_band,
    classify_league_tier,
)
from exposure_engine.core.scoring.benchmark import compute_benchmark_analysis
from exposure_engine.core.scoring.funnel import compute_funnel_analysis
from exposure_engine.core.scoring.readiness import compute_readiness_score
from exposure_engine.core.scoring.score import compute_all_scores
from exposure_engine.core.scoring.types import (
    AbilityBand,
    AcademicBand,
    BenchmarkMetric,
    CapApplied,
    ComputedScores,
    FunnelAnalysis,
    FunnelStage,
    LeagueTier,
    OutreachTag,
    ReadinessScore,
    ScoreVector,
    TargetTier,
    VisibilityScore,
)
from exposure_engine.core.scoring.visibility import compute_visibility_scores

__all__ = [
    "compute_all_scores",
    "compute_visibility_scores",
    "compute_readiness_score",
    "compute_benchmark_analysis",
    "compute_funnel_analysis",
    "classify_league_tier",
    "classify_ability_band",
    "classify_academic_band",
    "ComputedScores",
    "ScoreVector",
    "VisibilityScore",
    "ReadinessScore",
    "BenchmarkMetric",
    "FunnelAnalysis",
    "FunnelStage",
    "CapApplied",
    "LeagueTier",
    "AbilityBand",
    "AcademicBand",
    "TargetTier",
    "OutreachTag",
]
