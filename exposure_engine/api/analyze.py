"""API endpoints for profile scoring and narrative analysis."""

import logging

from anthropic import APIError
from fastapi import APIRouter, Depends, HTTPException, Request

from exposure_engine.core.config import get_settings
from exposure_engine.core.logging import get_logger, log_with_context
from exposure_engine.core.schemas_narrative import AnalysisResult
from exposure_engine.core.schemas_profile import PlayerProfile
from exposure_engine.core.scoring import compute_all_scores
from exposure_engine.services.narrative import NarrativeGenerationError, NarrativeService

logger = get_logger(__name__)

router = APIRouter()


def get_narrative_service(request: Request) -> NarrativeService | None:
    """
    Build a narrative service around the app-scoped Anthropic client.

    Returns None when the app started without an Anthropic key so /scores
    keeps working without one. Tests override this dependency.
    """
    client = getattr(request.app.state, "anthropic_client", None)
    if client is None:
        return None
    return NarrativeService.from_settings(get_settings(), client=client)


@router.post("/scores")
async def score_profile(profile: PlayerProfile) -> dict:
    """
    Compute deterministic fit scores for a profile.

    Args:
        profile: Player intake profile

    Returns:
        {"success": True, "scores": ComputedScores}
    """
    scores = compute_all_scores(profile)
    log_with_context(
        logger,
        logging.INFO,
        "Scored profile",
        grad_year=profile.grad_year,
        league_tier=scores.league_tier.value,
        best_fit=scores.best_fit.value,
    )
    return {"success": True, "scores": scores.model_dump(mode="json")}


@router.post("/analyze")
async def analyze_profile(
    profile: PlayerProfile,
    narrative_service: NarrativeService | None = Depends(get_narrative_service),  # noqa: B008
) -> dict:
    """
    Compute scores and generate the recruiting narrative.

    Args:
        profile: Player intake profile
        narrative_service: Injected narrative service

    Returns:
        {"success": True, "result": AnalysisResult}

    Raises:
        HTTPException 503: If narrative generation is not configured
        HTTPException 502: If the narrative model fails
    """
    if narrative_service is None:
        raise HTTPException(
            status_code=503,
            detail="Narrative generation is not configured",
        )

    scores = compute_all_scores(profile)

    try:
        narrative = await narrative_service.generate(profile, scores)
    except (NarrativeGenerationError, APIError) as e:
        logger.exception(f"Narrative generation failed (best_fit={scores.best_fit.value})")
        raise HTTPException(status_code=502, detail="Narrative generation failed") from e

    result = AnalysisResult(scores=scores, narrative=narrative)
    return {"success": True, "result": result.model_dump(mode="json")}
