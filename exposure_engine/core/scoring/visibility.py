"""On-paper fit and final visibility computation."""

from dataclasses import dataclass, field
from datetime import date

from exposure_engine.core.schemas_profile import PlayerProfile
from exposure_engine.core.scoring.adjustments import (
    apply_ability_adjustments,
    apply_academic_adjustments,
    apply_experience_bonus,
    apply_minutes_bonus,
    compute_base_scores,
)
from exposure_engine.core.scoring.caps import apply_eligibility_caps
from exposure_engine.core.scoring.classifiers import (
    classify_ability_band,
    classify_academic_band,
    classify_league_tier,
)
from exposure_engine.core.scoring.multipliers import (
    apply_multipliers,
    compute_outreach_multiplier,
    compute_video_multiplier,
)
from exposure_engine.core.scoring.types import (
    TIER_ORDER,
    AbilityBand,
    AcademicBand,
    CapApplied,
    LeagueTier,
    OutreachTag,
    ScoreVector,
    TargetTier,
    VisibilityScore,
)


@dataclass
class VisibilityResult:
    """Intermediate result of the visibility pipeline."""

    league_tier: LeagueTier
    ability_band: AbilityBand
    academic_band: AcademicBand
    on_paper_fit: ScoreVector
    scores: list[VisibilityScore]
    video_multiplier: float
    outreach_multiplier: float
    outreach_tag: OutreachTag | None
    caps_applied: list[CapApplied] = field(default_factory=list)


def _format_number(value: float) -> str:
    """Render 90.0 as '90' and 0.6 as '0.6'."""
    return f"{value:g}"


def compute_on_paper_fit(
    profile: PlayerProfile,
    league_tier: LeagueTier,
    ability_band: AbilityBand,
    academic_band: AcademicBand,
    as_of: date,
) -> tuple[ScoreVector, list[CapApplied]]:
    """
    Run the additive pipeline and clamp.

    This is the fit assuming coaches could see the player perfectly.
    """
    scores = compute_base_scores(league_tier, profile.gender)
    scores = apply_ability_adjustments(scores, ability_band)
    scores = apply_academic_adjustments(scores, academic_band)
    scores, caps_applied = apply_eligibility_caps(scores, profile.academics.gpa)
    scores = apply_minutes_bonus(scores, profile)
    scores = apply_experience_bonus(scores, profile, as_of)
    return scores.clamped(0, 100), caps_applied


def compute_visibility_scores(profile: PlayerProfile, as_of: date | None = None) -> VisibilityResult:
    """
    Classify the profile and compute final visibility per target tier.

    Args:
        profile: Player profile (not modified)
        as_of: Date used for the age bonus; defaults to today

    Returns:
        VisibilityResult with bands, on-paper fit, multipliers and final scores
    """
    as_of = as_of or date.today()

    league_tier = classify_league_tier(profile)
    ability_band = classify_ability_band(profile)
    academic_band = classify_academic_band(profile.academics.gpa)

    on_paper_fit, caps_applied = compute_on_paper_fit(
        profile, league_tier, ability_band, academic_band, as_of
    )

    market = profile.market
    video_multiplier = compute_video_multiplier(market.has_video)
    outreach_multiplier, outreach_tag = compute_outreach_multiplier(
        market.coaches_contacted,
        market.responses_received,
        market.offers_received,
    )

    scores: list[VisibilityScore] = []
    for tier in TIER_ORDER:
        on_paper = on_paper_fit.get(tier)
        scores.append(
            VisibilityScore(
                level=tier,
                visibility_percent=apply_multipliers(on_paper, video_multiplier, outreach_multiplier),
                on_paper_fit=on_paper,
                notes=(
                    f"Base: {_format_number(on_paper)}, "
                    f"Video: {_format_number(video_multiplier)}x, "
                    f"Outreach: {_format_number(outreach_multiplier)}x"
                ),
            )
        )

    return VisibilityResult(
        league_tier=league_tier,
        ability_band=ability_band,
        academic_band=academic_band,
        on_paper_fit=on_paper_fit,
        scores=scores,
        video_multiplier=video_multiplier,
        outreach_multiplier=outreach_multiplier,
        outreach_tag=outreach_tag,
        caps_applied=caps_applied,
    )


def select_best_fit(scores: list[VisibilityScore]) -> TargetTier:
    """Tier with the highest final score; ties go to the more competitive tier."""
    best = scores[0]
    for score in scores[1:]:
        if score.visibility_percent > best.visibility_percent:
            best = score
    return best.level
