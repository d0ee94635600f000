"""Video and outreach multipliers applied to on-paper fit."""

from decimal import ROUND_HALF_UP, Decimal

from exposure_engine.core.scoring.types import OutreachTag

VIDEO_PRESENT_MULTIPLIER = 1.0
NO_VIDEO_MULTIPLIER = 0.6

INVISIBLE_MULTIPLIER = 0.7
SPAMMING_MULTIPLIER = 0.8
TALENT_GAP_MULTIPLIER = 0.9

SPAMMING_MIN_CONTACTS = 20
SPAMMING_MAX_RESPONSE_RATE = 0.05
TALENT_GAP_MIN_RESPONSES = 5


def compute_video_multiplier(has_video: bool) -> float:
    """No highlight video is the largest single penalty in the model."""
    return VIDEO_PRESENT_MULTIPLIER if has_video else NO_VIDEO_MULTIPLIER


def compute_outreach_multiplier(
    coaches_contacted: int,
    responses_received: int,
    offers_received: int,
) -> tuple[float, OutreachTag | None]:
    """
    Outreach multiplier and tag. First matching rule wins.

    Returns:
        Tuple of (multiplier, tag or None)
    """
    if coaches_contacted == 0:
        return INVISIBLE_MULTIPLIER, OutreachTag.INVISIBLE

    response_rate = responses_received / coaches_contacted
    if coaches_contacted >= SPAMMING_MIN_CONTACTS and response_rate < SPAMMING_MAX_RESPONSE_RATE:
        return SPAMMING_MULTIPLIER, OutreachTag.SPAMMING

    if responses_received >= TALENT_GAP_MIN_RESPONSES and offers_received == 0:
        return TALENT_GAP_MULTIPLIER, OutreachTag.TALENT_GAP

    return 1.0, None


def round_half_up(value: float | Decimal) -> int:
    """Round .5 away from zero instead of Python's banker's rounding."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def apply_multipliers(on_paper: float, video_multiplier: float, outreach_multiplier: float) -> int:
    """
    Final visibility for one tier, clamped to [0, 100].

    The product is computed in decimal so 15 x 0.7 lands on 10.5 and rounds
    to 11 rather than to whatever the float product happens to be.
    """
    product = (
        Decimal(str(on_paper))
        * Decimal(str(video_multiplier))
        * Decimal(str(outreach_multiplier))
    )
    return max(0, min(100, round_half_up(product)))


def round_half_up_tenths(value: Decimal) -> Decimal:
    """Round to one decimal place, .x5 away from zero."""
    return value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
