"""Narrative generation for a scored profile.

The service is built around an injected Anthropic client so callers (the
API dependency, tests, batch scripts) decide its lifetime. Nothing here
computes scores: the engine's ComputedScores are passed in and the
best-fit division in the narrative is pinned to the engine's best_fit.

Usage:
    service = NarrativeService(client=AsyncAnthropic(api_key=...))
    narrative = await service.generate(profile, scores)
"""

import json

from anthropic import AsyncAnthropic
from pydantic import ValidationError

from exposure_engine.core.config import Settings
from exposure_engine.core.llm import extract_message_text, parse_llm_json_dict
from exposure_engine.core.logging import get_logger
from exposure_engine.core.schemas_narrative import NarrativeResult
from exposure_engine.core.schemas_profile import PlayerProfile
from exposure_engine.core.scoring.types import ComputedScores
from exposure_engine.services.narrative_prompts import (
    build_narrative_prompt,
    build_system_prompt,
)

logger = get_logger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class NarrativeGenerationError(RuntimeError):
    """The narrative model returned nothing usable."""


class NarrativeService:
    """Writes summary, risks and action plan text for a scored profile."""

    def __init__(
        self,
        client: AsyncAnthropic,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 4096,
        temperature: float = 0.7,
        prompt_version: str = "narrative_v1",
    ):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.prompt_version = prompt_version

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: AsyncAnthropic | None = None,
    ) -> "NarrativeService":
        """
        Build a service from settings.

        Args:
            settings: Model, token and temperature configuration
            client: Shared client to reuse; a new one is created when omitted

        Raises:
            ValueError: If no client is given and ANTHROPIC_API_KEY is not configured
        """
        if client is None:
            if not settings.ANTHROPIC_API_KEY:
                raise ValueError("ANTHROPIC_API_KEY not configured")
            client = AsyncAnthropic(api_key=settings.ANTHROPIC_API_KEY)
        return cls(
            client=client,
            model=settings.NARRATIVE_MODEL,
            max_tokens=settings.NARRATIVE_MAX_TOKENS,
            temperature=settings.NARRATIVE_TEMPERATURE,
            prompt_version=settings.NARRATIVE_PROMPT_VERSION,
        )

    async def generate(self, profile: PlayerProfile, scores: ComputedScores) -> NarrativeResult:
        """
        Generate the narrative for a profile and its computed scores.

        Args:
            profile: Player profile
            scores: Output of compute_all_scores for the same profile

        Returns:
            NarrativeResult whose best_fit_division.level equals scores.best_fit

        Raises:
            NarrativeGenerationError: If the response is empty or malformed
        """
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=build_system_prompt(profile),
            messages=[{"role": "user", "content": build_narrative_prompt(profile, scores)}],
        )

        text = extract_message_text(response)
        if not text.strip():
            raise NarrativeGenerationError("Empty response from narrative model")

        if response.usage:
            logger.info(
                f"Narrative generated: model={self.model}, prompt={self.prompt_version}, "
                f"tokens_in={response.usage.input_tokens}, tokens_out={response.usage.output_tokens}"
            )

        try:
            data = parse_llm_json_dict(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Narrative response was not JSON: {e}")
            raise NarrativeGenerationError(f"Invalid narrative response format: {e}") from e

        if not isinstance(data, dict):
            raise NarrativeGenerationError("Narrative response must be a JSON object")

        data["best_fit_division"] = _pinned_best_fit(data.get("best_fit_division"), scores)

        try:
            return NarrativeResult.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Narrative response failed validation: {e}")
            raise NarrativeGenerationError(f"Invalid narrative response format: {e}") from e


def _pinned_best_fit(raw: object, scores: ComputedScores) -> dict:
    """
    Best-fit division that agrees with the engine.

    The model's reasoning is kept only when it argued for the same tier.
    """
    best_fit = scores.best_fit.value
    if isinstance(raw, dict) and raw.get("level") == best_fit and raw.get("reasoning"):
        return {"level": best_fit, "reasoning": raw["reasoning"]}

    if isinstance(raw, dict) and raw.get("level") is not None:
        logger.warning(
            f"Narrative best fit {raw.get('level')} disagrees with engine best fit {best_fit}; overriding"
        )

    return {
        "level": best_fit,
        "reasoning": f"Highest computed visibility: {scores.visibility_for(scores.best_fit)}%",
    }
