"""Hard eligibility caps.

Caps run after the additive deltas and before the minutes/experience
bonuses. They are GPA floors from NCAA initial eligibility:

- D1 requires a 2.3 core GPA, D2 a 2.2, D3 is school-set (2.0 used here).
- NAIA's "2 of 3" rule can be met through test scores or class rank,
  so it is never capped.
- JUCO is the fallback path and gets raised when D1 is out of reach.

Rules are one-directional and evaluated once each, in list order.
"""

from dataclasses import dataclass
from typing import Literal

from exposure_engine.core.scoring.types import CapApplied, ScoreVector, TargetTier


@dataclass
class EligibilityRule:
    """Definition of a GPA-triggered ceiling or floor on one tier."""

    id: str
    gpa_below: float
    tier: TargetTier
    kind: Literal["ceiling", "floor"]
    limit: int
    reason: str
    floor_bump: int = 0  # floor rules: also raise by at least this much


ELIGIBILITY_RULES = [
    EligibilityRule(
        id="d1_core_gpa",
        gpa_below=2.3,
        tier=TargetTier.D1,
        kind="ceiling",
        limit=15,
        reason="Below the 2.3 NCAA D1 core GPA minimum",
    ),
    EligibilityRule(
        id="juco_fallback",
        gpa_below=2.3,
        tier=TargetTier.JUCO,
        kind="floor",
        limit=60,
        floor_bump=20,
        reason="JUCO is the primary pathway while D1 eligibility is out of reach",
    ),
    EligibilityRule(
        id="d2_core_gpa",
        gpa_below=2.2,
        tier=TargetTier.D2,
        kind="ceiling",
        limit=20,
        reason="Below the 2.2 NCAA D2 core GPA minimum",
    ),
    EligibilityRule(
        id="d3_gpa_floor",
        gpa_below=2.0,
        tier=TargetTier.D3,
        kind="ceiling",
        limit=25,
        reason="Below a 2.0 GPA most D3 admissions offices require",
    ),
]


def apply_eligibility_caps(
    scores: ScoreVector,
    gpa: float | None,
) -> tuple[ScoreVector, list[CapApplied]]:
    """
    Apply GPA eligibility rules to an adjusted score vector.

    A missing GPA triggers no rule; the academic band already penalises it.

    Args:
        scores: Vector after ability and academic deltas
        gpa: Player GPA, or None when not provided

    Returns:
        Tuple of (capped vector, list of rules that fired)
    """
    caps_applied: list[CapApplied] = []
    if gpa is None:
        return scores, caps_applied

    for rule in ELIGIBILITY_RULES:
        if not gpa < rule.gpa_below:
            continue

        current = scores.get(rule.tier)
        if rule.kind == "ceiling":
            updated = min(current, rule.limit)
        else:
            updated = max(current, rule.limit, current + rule.floor_bump)

        scores = scores.replace(**{rule.tier.field: updated})
        caps_applied.append(
            CapApplied(
                cap_id=rule.id,
                tier=rule.tier,
                kind=rule.kind,
                limit=rule.limit,
                reason=rule.reason,
            )
        )

    return scores, caps_applied
