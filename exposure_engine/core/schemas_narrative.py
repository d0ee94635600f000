"""Pydantic models for the narrative layer of an analysis.

Numbers never come from here: the narrative service receives the engine's
ComputedScores and only writes text around them.
"""

from pydantic import BaseModel, Field, field_validator

from exposure_engine.core.scoring.types import ComputedScores, TargetTier


class RiskItem(BaseModel):
    risk: str
    mitigation: str = "Address this concern to improve visibility"


class ActionPlan(BaseModel):
    """Next steps grouped by horizon (30 days / 90 days / 12 months)."""

    immediate: list[str] = Field(default_factory=list)
    short_term: list[str] = Field(default_factory=list)
    long_term: list[str] = Field(default_factory=list)


class PositionAnalysis(BaseModel):
    position_fit: str
    strengths_for_position: list[str] = Field(default_factory=list)
    areas_to_improve: list[str] = Field(default_factory=list)
    college_position_prediction: str = ""


class CampRecommendation(BaseModel):
    name: str
    type: str
    location: str | None = None
    cost: str | None = None
    timing: str | None = None
    reasoning: str = ""


class BestFitDivision(BaseModel):
    level: TargetTier
    reasoning: str = ""


class NarrativeResult(BaseModel):
    """Free-text fields written by the narrative model."""

    plain_language_summary: str = Field(..., min_length=1)
    coach_short_evaluation: str | None = None
    key_strengths: list[str] = Field(default_factory=list)
    key_risks: list[RiskItem] = Field(default_factory=list)
    action_plan: ActionPlan = Field(default_factory=ActionPlan)
    position_analysis: PositionAnalysis | None = None
    camp_recommendations: list[CampRecommendation] = Field(default_factory=list)
    email_template_suggestion: str | None = None
    best_fit_division: BestFitDivision | None = None

    @field_validator("key_strengths", mode="before")
    @classmethod
    def coerce_string_to_list(cls, v):
        """Models sometimes return a single string instead of a list."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


class AnalysisResult(BaseModel):
    """Scores plus narrative, as returned by /v1/analyze."""

    scores: ComputedScores
    narrative: NarrativeResult
