"""Recruiting funnel stage from raw outreach counters."""

from decimal import Decimal

from exposure_engine.core.scoring.multipliers import round_half_up_tenths
from exposure_engine.core.scoring.types import FunnelAnalysis, FunnelStage

CLOSING_MIN_OFFERS = 3

# stage -> (bottleneck, advice)
STAGE_GUIDANCE: dict[FunnelStage, tuple[str, str]] = {
    FunnelStage.INVISIBLE: (
        "No outreach started",
        "Begin contacting coaches - even 10 quality emails can generate responses",
    ),
    FunnelStage.OUTREACH: (
        "No responses yet",
        "Review email content, subject lines, and video quality. "
        "Consider targeting fit-appropriate programs",
    ),
    FunnelStage.CONVERSATION: (
        "Conversations not converting to offers",
        "Focus on building relationships with interested coaches. Attend their camps/events",
    ),
    FunnelStage.EVALUATION: (
        "Limited offer options",
        "Continue conversations while evaluating current offers. Request official visits",
    ),
    FunnelStage.CLOSING: (
        "Decision time",
        "Compare offers, visit campuses, and make your commitment decision",
    ),
}


def classify_funnel_stage(
    coaches_contacted: int,
    responses_received: int,
    offers_received: int,
) -> FunnelStage:
    if coaches_contacted == 0:
        return FunnelStage.INVISIBLE
    if responses_received == 0:
        return FunnelStage.OUTREACH
    if offers_received == 0:
        return FunnelStage.CONVERSATION
    if offers_received >= CLOSING_MIN_OFFERS:
        return FunnelStage.CLOSING
    return FunnelStage.EVALUATION


def compute_funnel_analysis(
    coaches_contacted: int,
    responses_received: int,
    offers_received: int,
) -> FunnelAnalysis:
    """
    Classify the funnel stage and attach its reply rate and guidance.

    Args:
        coaches_contacted: Coaches emailed or messaged
        responses_received: Coaches who replied
        offers_received: Offers (verbal or written)

    Returns:
        FunnelAnalysis
    """
    stage = classify_funnel_stage(coaches_contacted, responses_received, offers_received)

    if coaches_contacted > 0:
        rate = round_half_up_tenths(Decimal(responses_received) * 100 / Decimal(coaches_contacted))
        response_rate = float(rate)
        rate_text = str(rate)
    else:
        response_rate = 0.0
        rate_text = "0"

    bottleneck, advice = STAGE_GUIDANCE[stage]

    return FunnelAnalysis(
        stage=stage,
        conversion_rate=f"{rate_text}% Reply Rate",
        response_rate=response_rate,
        bottleneck=bottleneck,
        advice=advice,
    )
