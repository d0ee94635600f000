"""Pydantic models and enums for the fit scoring engine."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


# =============================================================================
# Bands
# =============================================================================


class LeagueTier(str, Enum):
    """Competitive level of the most relevant season."""

    ELITE = "Elite"
    HIGH = "High"
    MID = "Mid"
    LOW = "Low"


class AbilityBand(str, Enum):
    """Self-assessed ability, adjusted for playing time. Ordered low to high."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class AcademicBand(str, Enum):
    """GPA band."""

    HIGH = "High"
    SOLID = "Solid"
    RISKY = "Risky"
    PROBLEM = "Problem"


# =============================================================================
# Target tiers and score vectors
# =============================================================================


class TargetTier(str, Enum):
    """College levels scored against, most to least competitive."""

    D1 = "D1"
    D2 = "D2"
    D3 = "D3"
    NAIA = "NAIA"
    JUCO = "JUCO"

    @property
    def field(self) -> str:
        """Attribute name on ScoreVector."""
        return self.value.lower()


TIER_ORDER: tuple[TargetTier, ...] = tuple(TargetTier)


class ScoreVector(BaseModel):
    """One score per target tier."""

    d1: float = 0
    d2: float = 0
    d3: float = 0
    naia: float = 0
    juco: float = 0

    def get(self, tier: TargetTier) -> float:
        return getattr(self, tier.field)

    def replace(self, **updates: float) -> "ScoreVector":
        """Return a copy with some tiers replaced."""
        return self.model_copy(update=updates)

    def plus(self, delta: "ScoreVector") -> "ScoreVector":
        """Elementwise sum."""
        return ScoreVector(
            **{tier.field: self.get(tier) + delta.get(tier) for tier in TIER_ORDER}
        )

    def clamped(self, low: float = 0, high: float = 100) -> "ScoreVector":
        return ScoreVector(
            **{tier.field: max(low, min(high, self.get(tier))) for tier in TIER_ORDER}
        )


# =============================================================================
# Result components
# =============================================================================


class OutreachTag(str, Enum):
    """Outreach behaviour flag attached to the outreach multiplier."""

    INVISIBLE = "Invisible"
    SPAMMING = "Spamming"
    TALENT_GAP = "Talent Gap"


class CapApplied(BaseModel):
    """An eligibility rule that fired for this profile."""

    cap_id: str = Field(..., description="Rule identifier")
    tier: TargetTier = Field(..., description="Tier the rule constrains")
    kind: Literal["ceiling", "floor"] = Field(..., description="Cap or floor")
    limit: int = Field(..., description="Ceiling or minimum floor value")
    reason: str = Field(..., description="Why this rule applies")


class VisibilityScore(BaseModel):
    """Final visibility for one tier."""

    level: TargetTier
    visibility_percent: int = Field(..., ge=0, le=100)
    on_paper_fit: float = Field(..., ge=0, le=100)
    notes: str = ""


class ReadinessScore(BaseModel):
    """Readiness across five dimensions, independent of visibility."""

    athletic: int = Field(..., ge=0, le=100)
    technical: int = Field(..., ge=0, le=100)
    tactical: int = Field(..., ge=0, le=100)
    academic: int = Field(..., ge=0, le=100)
    market: int = Field(..., ge=0, le=100)
    overall: int = Field(..., ge=0, le=100, description="Rounded mean of the five")


class BenchmarkMetric(BaseModel):
    """One category compared against D1 and D3 reference averages."""

    category: Literal["Exposure", "Competition", "Academics"]
    user_score: int
    d1_average: int
    d3_average: int
    gap_to_d1: int = Field(..., description="user_score - d1_average")
    feedback_level: Literal["at_or_above_d1", "between", "below_d3"]
    feedback: str


class FunnelStage(str, Enum):
    INVISIBLE = "Invisible"
    OUTREACH = "Outreach"
    CONVERSATION = "Conversation"
    EVALUATION = "Evaluation"
    CLOSING = "Closing"


class FunnelAnalysis(BaseModel):
    stage: FunnelStage
    conversion_rate: str = Field(..., description="e.g. '12.5% Reply Rate'")
    response_rate: float = Field(..., ge=0, description="Responses per contact, in percent")
    bottleneck: str
    advice: str


class ComputedScores(BaseModel):
    """Everything the engine computes for one profile."""

    league_tier: LeagueTier
    ability_band: AbilityBand
    academic_band: AcademicBand

    visibility_scores: list[VisibilityScore]
    on_paper_fit: ScoreVector
    eligibility_caps: list[CapApplied] = Field(default_factory=list)
    best_fit: TargetTier

    readiness_score: ReadinessScore
    benchmark_analysis: list[BenchmarkMetric]
    funnel_analysis: FunnelAnalysis

    video_multiplier: float
    outreach_multiplier: float
    outreach_tag: OutreachTag | None = None

    def visibility_for(self, tier: TargetTier) -> int:
        for score in self.visibility_scores:
            if score.level == tier:
                return score.visibility_percent
        raise KeyError(tier)
