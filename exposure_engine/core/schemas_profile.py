"""Pydantic models for the athlete intake profile.

The profile is owned by the caller. The scoring engine only reads it.
Categorical fields are closed enums; unknown league and experience values
are coerced to a catch-all member here so the engine never sees raw strings.
"""

from datetime import date
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Enums
# =============================================================================


class Gender(str, Enum):
    """Player gender, which selects the league lists and base score table."""

    MALE = "Male"
    FEMALE = "Female"


class YouthLeague(str, Enum):
    """Youth leagues a season can be played in."""

    MLS_NEXT = "MLS_NEXT"
    ECNL = "ECNL"
    GIRLS_ACADEMY = "Girls_Academy"
    USL_ACADEMY = "USL_Academy"
    USYS_NATIONAL = "USYS_National"
    USYS_NATIONAL_LEAGUE = "USYS_National_League"
    ECNL_RL = "ECNL_RL"
    NPL = "NPL"
    HIGH_SCHOOL = "High_School"
    ELITE_LOCAL = "Elite_Local"
    CLUB_LOCAL = "Club_Local"
    REC = "Rec"
    OTHER = "Other"


class ExperienceLevel(str, Enum):
    """Highest level of competitive experience."""

    YOUTH_CLUB_ONLY = "Youth_Club_Only"
    HIGH_SCHOOL_VARSITY = "High_School_Varsity"
    ADULT_AMATEUR_LEAGUE = "Adult_Amateur_League"
    SEMI_PRO = "Semi_Pro_UPSL_NPSL_WPSL"
    INTERNATIONAL_ACADEMY_U19 = "International_Academy_U19"
    PRO_ACADEMY_RESERVE = "Pro_Academy_Reserve"
    # Legacy coarse tags from the first intake form
    ELITE = "elite"
    HIGH = "high"
    MODERATE = "moderate"
    DEVELOPING = "developing"
    UNSPECIFIED = "Unspecified"


class AthleticRating(str, Enum):
    """Self-assessed rating, ordered worst to best."""

    BELOW_AVERAGE = "Below_Average"
    AVERAGE = "Average"
    ABOVE_AVERAGE = "Above_Average"
    TOP_10_PERCENT = "Top_10_Percent"
    ELITE = "Elite"


class SeasonRole(str, Enum):
    """Main role held during a season."""

    KEY_STARTER = "Key_Starter"
    ROTATION = "Rotation"
    BENCH = "Bench"
    INJURED = "Injured"


class Position(str, Enum):
    GK = "GK"
    CB = "CB"
    LB = "LB"
    RB = "RB"
    CDM = "CDM"
    CM = "CM"
    CAM = "CAM"
    LM = "LM"
    RM = "RM"
    LW = "LW"
    RW = "RW"
    ST = "ST"
    CF = "CF"


class DominantFoot(str, Enum):
    RIGHT = "Right"
    LEFT = "Left"
    BOTH = "Both"


def _coerce_enum(enum_cls: type[Enum], value: Any, default: Enum) -> Any:
    """Map an unknown string to ``default``; leave everything else to pydantic."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            return default
    return value


# =============================================================================
# Profile sections
# =============================================================================


class SeasonRecord(BaseModel):
    """One season of club/school play."""

    year: int = Field(..., description="Season year (e.g., 2024)")
    team_name: str = Field(default="", description="Team name")
    leagues: list[YouthLeague] = Field(
        ..., min_length=1, description="League memberships for this season"
    )
    main_role: SeasonRole = Field(..., description="Main role")
    minutes_played_percent: float = Field(
        ..., ge=0, le=100, description="Share of available minutes played"
    )
    goals: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    honors: str = Field(default="", description="Awards or selections")

    @field_validator("leagues", mode="before")
    @classmethod
    def coerce_leagues(cls, v: Any) -> Any:
        """Accept a single league string and map unknown leagues to Other."""
        if isinstance(v, (str, YouthLeague)):
            v = [v]
        if isinstance(v, list):
            return [_coerce_enum(YouthLeague, item, YouthLeague.OTHER) for item in v]
        return v


class AthleticProfile(BaseModel):
    """Six-axis self assessment plus optional raw measures."""

    speed: AthleticRating | None = None
    strength: AthleticRating | None = None
    endurance: AthleticRating | None = None
    work_rate: AthleticRating | None = None
    technical: AthleticRating | None = None
    tactical: AthleticRating | None = None

    forty_yard_dash: str | None = Field(None, description="40-yard dash time")
    mile_time: str | None = Field(None, description="1 mile time")
    beep_test_level: float | None = Field(None, ge=0, description="Beep test level")

    def ratings(self) -> list[AthleticRating | None]:
        """The six rated axes in a fixed order."""
        return [
            self.speed,
            self.strength,
            self.endurance,
            self.work_rate,
            self.technical,
            self.tactical,
        ]


class AcademicProfile(BaseModel):
    gpa: float | None = Field(None, ge=0, le=5.0, description="Unweighted or core GPA")
    test_score: str | None = Field(None, description="SAT/ACT score as entered")


class MarketProfile(BaseModel):
    """Video presence and coach outreach counters."""

    has_video: bool = Field(default=False, description="Highlight video available")
    video_age: Literal["current", "6_months", "12_months", "older"] | None = None
    video_quality: Literal["professional", "good", "poor"] | None = None
    coaches_contacted: int = Field(default=0, ge=0)
    responses_received: int = Field(default=0, ge=0)
    offers_received: int = Field(default=0, ge=0)


class ExposureEvent(BaseModel):
    name: str
    type: Literal["Showcase", "ID_Camp", "ODP", "HS_Playoffs", "Other"] = "Other"
    colleges_noted: str = ""


# =============================================================================
# Profile
# =============================================================================


class PlayerProfile(BaseModel):
    """Complete intake profile for one player."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str | None = None
    gender: Gender
    date_of_birth: date | None = None
    citizenship: str | None = None
    state: str | None = Field(None, description="US state code")
    grad_year: int = Field(..., description="High school graduation year")

    position: Position | None = None
    secondary_positions: list[Position] = Field(default_factory=list)
    dominant_foot: DominantFoot | None = None
    height: str | None = None

    experience_level: ExperienceLevel = ExperienceLevel.UNSPECIFIED
    seasons: list[SeasonRecord] = Field(default_factory=list)
    events: list[ExposureEvent] = Field(default_factory=list)

    academics: AcademicProfile = Field(default_factory=AcademicProfile)
    athletic_profile: AthleticProfile | None = None
    market: MarketProfile = Field(default_factory=MarketProfile)

    @field_validator("experience_level", mode="before")
    @classmethod
    def coerce_experience_level(cls, v: Any) -> Any:
        """Unknown experience tags carry no overrides or bonuses."""
        if v is None:
            return ExperienceLevel.UNSPECIFIED
        return _coerce_enum(ExperienceLevel, v, ExperienceLevel.UNSPECIFIED)
