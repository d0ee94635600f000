"""Prompts for the recruiting narrative model.

The scoring engine owns every number. These prompts hand the model the
computed scores and ask only for text around them.
"""

import json
from datetime import date

from exposure_engine.core.schemas_profile import Gender, PlayerProfile, Position
from exposure_engine.core.scoring.types import ComputedScores

# =============================================================================
# System Prompt
# =============================================================================

NARRATIVE_SYSTEM_PROMPT = """You are an expert college soccer recruiting analyst with deep knowledge of the US youth-to-college soccer pathway. You write honest, specific assessments for players and parents.

# WHAT YOU RECEIVE

1. The player's intake profile.
2. A COMPUTED SCORES block produced by a deterministic scoring engine:
   - visibility per division (D1, D2, D3, NAIA, JUCO) after video and outreach penalties
   - on-paper fit (visibility assuming perfect marketing)
   - readiness (athletic, technical, tactical, academic, market)
   - benchmarks vs D1/D3 averages, funnel stage, eligibility caps
   - best_fit: the division with the highest visibility

# RULES

1. **Never invent or change numbers.** Quote computed scores exactly when you use them.
2. **Best fit is fixed.** Your bestFitDivision.level MUST equal best_fit from the computed scores.
3. **Fit is not probability.** Never say a player "will" be recruited. Use "strong candidate for", "visible to", "competitive for".
4. **Be honest, not nice.** Sugar-coating hurts the family's planning.
5. **Video matters most.** No video is modeled as a 40% visibility cut across every level; say so plainly when it applies.
6. **Timeline awareness.** Juniors are in the peak window; seniors need realistic D2/D3/NAIA/JUCO options now.

# KNOWLEDGE BASE

- D1: 2.3 minimum core GPA, 16 core courses. D2: 2.2. D3/NAIA/JUCO vary by institution.
- June 15 after 10th grade: D1/D2 coaches may contact directly; most verbal commits happen in 11th grade.
- Highlight video: 3-6 minutes, best 5 plays first, coaches often stop at 2 minutes.
- Outreach: 0 emails = invisible; <10 is not a serious effort; 20+ emails under 5% reply means targeting or materials are off.
"""

MALE_CONTEXT = """CONTEXT FOR MALE PLAYER:
- 37% of D1 men's rosters are international players
- US male odds for D1 are roughly 108:1 (women's are 41:1)
- 90% of D1 men's recruits come from MLS NEXT, ECNL or abroad
- Treat D2/D3 as strong, realistic options, not fallbacks"""

FEMALE_CONTEXT = """CONTEXT FOR FEMALE PLAYER:
- 11% of D1 women's rosters are international
- US female odds for D1 are roughly 41:1 (men's are 108:1)
- ECNL is the premier pathway; Girls Academy is a strong, growing alternative
- High school play carries more weight than on the men's side"""

POSITION_REQUIREMENTS: dict[Position, str] = {
    Position.GK: "Height (6'0\"+), reflexes, commanding presence, distribution, communication",
    Position.CB: "Aerial ability, 1v1 defending, composure on the ball, reading of the game",
    Position.LB: "Pace, crossing, defensive recovery, stamina, attacking runs",
    Position.RB: "Pace, crossing, defensive recovery, stamina, attacking runs",
    Position.CDM: "Defensive positioning, passing range, stamina, tackling",
    Position.CM: "Two-way stamina, technical ability, passing, vision",
    Position.CAM: "Creativity, final third passing, shooting, movement",
    Position.LM: "Pace, stamina, crossing, defensive work rate",
    Position.RM: "Pace, stamina, crossing, defensive work rate",
    Position.LW: "Pace, dribbling, crossing or cutting inside, tracking back",
    Position.RW: "Pace, dribbling, crossing or cutting inside, tracking back",
    Position.ST: "Finishing, movement, hold-up play, pressing, aerial ability",
    Position.CF: "Finishing, movement, link-up play, positioning",
}

OUTPUT_FORMAT = """Return a JSON object with this exact structure:

{
  "plain_language_summary": "<2-3 paragraph honest assessment for parents/players>",
  "coach_short_evaluation": "<2-3 sentences a college coach would write>",
  "key_strengths": ["<3-5 strengths>"],
  "key_risks": [{"risk": "<specific risk>", "mitigation": "<how to address it>"}],
  "action_plan": {
    "immediate": ["<next 30 days>"],
    "short_term": ["<next 90 days>"],
    "long_term": ["<next 12 months>"]
  },
  "position_analysis": {
    "position_fit": "<assessment>",
    "strengths_for_position": ["..."],
    "areas_to_improve": ["..."],
    "college_position_prediction": "<position>"
  },
  "camp_recommendations": [
    {"name": "<camp>", "type": "<ID Camp|Showcase|ODP>", "cost": "<$|$$|$$$>", "timing": "<when>", "reasoning": "<why>"}
  ],
  "email_template_suggestion": "<personalized opener for coach emails>",
  "best_fit_division": {"level": "<must equal best_fit>", "reasoning": "<why>"}
}

Return only JSON."""


def get_gender_context(gender: Gender) -> str:
    return MALE_CONTEXT if gender == Gender.MALE else FEMALE_CONTEXT


def build_system_prompt(profile: PlayerProfile) -> str:
    return f"{NARRATIVE_SYSTEM_PROMPT}\n\n{get_gender_context(profile.gender)}"


def get_grade_level(years_until_college: int) -> str:
    if years_until_college <= 0:
        return "Graduated/Gap Year"
    if years_until_college == 1:
        return "Senior (12th)"
    if years_until_college == 2:
        return "Junior (11th) - PEAK RECRUITING WINDOW"
    if years_until_college == 3:
        return "Sophomore (10th)"
    if years_until_college == 4:
        return "Freshman (9th)"
    return f"{years_until_college} years until college"


def _label(value: str) -> str:
    return value.replace("_", " ")


def _format_seasons(profile: PlayerProfile) -> str:
    if not profile.seasons:
        return "No seasons recorded"
    lines = []
    for s in profile.seasons:
        leagues = ", ".join(_label(league.value) for league in s.leagues)
        lines.append(
            f"- {s.year}: {s.team_name or 'Unknown team'} ({leagues}) - "
            f"{_label(s.main_role.value)}, {s.minutes_played_percent:g}% minutes, "
            f"{s.goals}G/{s.assists}A"
            + (f", honors: {s.honors}" if s.honors else "")
        )
    return "\n".join(lines)


def _format_events(profile: PlayerProfile) -> str:
    if not profile.events:
        return "No events recorded"
    return "\n".join(
        f"- {e.name} ({_label(e.type)})"
        + (f" - colleges noted: {e.colleges_noted}" if e.colleges_noted else "")
        for e in profile.events
    )


def _format_athletic(profile: PlayerProfile) -> str:
    athletic = profile.athletic_profile
    if athletic is None:
        return "Not provided"
    parts = []
    for axis in ("speed", "strength", "endurance", "work_rate", "technical", "tactical"):
        rating = getattr(athletic, axis)
        if rating is not None:
            parts.append(f"{_label(axis)}: {_label(rating.value)}")
    if athletic.forty_yard_dash:
        parts.append(f"40-yard dash: {athletic.forty_yard_dash}")
    if athletic.mile_time:
        parts.append(f"mile time: {athletic.mile_time}")
    if athletic.beep_test_level is not None:
        parts.append(f"beep test level: {athletic.beep_test_level:g}")
    return ", ".join(parts) or "Not provided"


def build_narrative_prompt(
    profile: PlayerProfile,
    scores: ComputedScores,
    as_of: date | None = None,
) -> str:
    """
    Build the user prompt for a narrative request.

    Args:
        profile: Player profile
        scores: Deterministic engine output for the same profile
        as_of: Date used for the grade level; defaults to today

    Returns:
        Prompt text
    """
    as_of = as_of or date.today()
    years_until_college = profile.grad_year - as_of.year
    market = profile.market

    if profile.position is not None:
        position_text = (
            f"- Primary: {profile.position.value} "
            f"(college coaches look for: {POSITION_REQUIREMENTS[profile.position]})"
        )
    else:
        position_text = "- Primary: Not specified"
    secondary = ", ".join(p.value for p in profile.secondary_positions) or "None"

    computed = json.dumps(scores.model_dump(mode="json"), indent=2)

    return f"""Write the recruiting narrative for this player.

## PLAYER PROFILE

**Basic Info:**
- Name: {profile.first_name} {profile.last_name}
- Gender: {profile.gender.value}
- Graduation Year: {profile.grad_year} ({get_grade_level(years_until_college)})
- State: {profile.state or "Not specified"}
- Citizenship: {profile.citizenship or "US"}
- Height: {profile.height or "Not specified"}
- Dominant Foot: {profile.dominant_foot.value if profile.dominant_foot else "Not specified"}

**Position:**
{position_text}
- Secondary: {secondary}

**Experience Level:** {_label(profile.experience_level.value)}

**Season History:**
{_format_seasons(profile)}

**Exposure Events:**
{_format_events(profile)}

**Academics:**
- GPA: {profile.academics.gpa if profile.academics.gpa is not None else "Not provided"}
- Test Score: {profile.academics.test_score or "Not provided"}

**Athletic Self-Assessment:**
{_format_athletic(profile)}

**Marketing Status:**
- Has Highlight Video: {"Yes" if market.has_video else "NO (CRITICAL GAP)"}
- Coaches Contacted: {market.coaches_contacted}
- Responses Received: {market.responses_received}
- Offers Received: {market.offers_received}

## COMPUTED SCORES (authoritative, do not change)

best_fit: {scores.best_fit.value}

```json
{computed}
```

---

{OUTPUT_FORMAT}"""
