"""Main fit score computation.

This module orchestrates the scoring engine by:
1. Classifying the profile and computing visibility per tier
2. Computing readiness from the same bands
3. Benchmarking the bands against reference averages
4. Classifying the outreach funnel

Everything is computed fresh from the profile; nothing is cached or stored.
"""

from datetime import date

from exposure_engine.core.logging import get_logger
from exposure_engine.core.schemas_profile import PlayerProfile
from exposure_engine.core.scoring.benchmark import compute_benchmark_analysis
from exposure_engine.core.scoring.funnel import compute_funnel_analysis
from exposure_engine.core.scoring.readiness import compute_readiness_score
from exposure_engine.core.scoring.types import ComputedScores
from exposure_engine.core.scoring.visibility import (
    compute_visibility_scores,
    select_best_fit,
)

logger = get_logger(__name__)


def compute_all_scores(profile: PlayerProfile, as_of: date | None = None) -> ComputedScores:
    """
    Compute every deterministic score for a profile.

    Args:
        profile: Player profile (not modified)
        as_of: Reference date for age-based bonuses; defaults to today.
            Pass a fixed date to get reproducible results.

    Returns:
        ComputedScores with bands, visibility, readiness, benchmarks and funnel
    """
    visibility = compute_visibility_scores(profile, as_of=as_of)

    readiness = compute_readiness_score(
        profile,
        visibility.ability_band,
        visibility.academic_band,
    )

    benchmarks = compute_benchmark_analysis(
        visibility.league_tier,
        visibility.ability_band,
        visibility.academic_band,
    )

    market = profile.market
    funnel = compute_funnel_analysis(
        market.coaches_contacted,
        market.responses_received,
        market.offers_received,
    )

    best_fit = select_best_fit(visibility.scores)

    logger.debug(
        f"Bands: league={visibility.league_tier.value}, "
        f"ability={visibility.ability_band.value}, "
        f"academic={visibility.academic_band.value}, "
        f"caps={[c.cap_id for c in visibility.caps_applied]}"
    )
    logger.info(
        f"Computed fit scores: best_fit={best_fit.value}, "
        f"video={visibility.video_multiplier}x, outreach={visibility.outreach_multiplier}x, "
        f"funnel={funnel.stage.value}"
    )

    return ComputedScores(
        league_tier=visibility.league_tier,
        ability_band=visibility.ability_band,
        academic_band=visibility.academic_band,
        visibility_scores=visibility.scores,
        on_paper_fit=visibility.on_paper_fit,
        eligibility_caps=visibility.caps_applied,
        best_fit=best_fit,
        readiness_score=readiness,
        benchmark_analysis=benchmarks,
        funnel_analysis=funnel,
        video_multiplier=visibility.video_multiplier,
        outreach_multiplier=visibility.outreach_multiplier,
        outreach_tag=visibility.outreach_tag,
    )
