from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CandidateItem(BaseModel):
    """A before/after photo or a suggestion card offered to the client."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = ""
    treatments: tuple[str, ...] = ()
    general_treatments: tuple[str, ...] = ()
    area_names: tuple[str, ...] = ()
    surgical: str | None = None
    photo_url: str = ""
    thumbnail_url: str = ""
    caption: str | None = None
    story_title: str | None = None
    story_detailed: str | None = None
    longevity: str | None = None
    downtime: str | None = None
    price_range: str | None = None
    age: str | None = None
    skin_tone: str | None = None
    ethnic_background: str | None = None
    skin_type: str | None = None

    @property
    def all_treatment_tags(self) -> tuple[str, ...]:
        """General treatments first, then specific treatments."""
        return self.general_treatments + self.treatments


class SelectionCriteria(BaseModel):
    """What the practitioner has picked so far. ``None`` or blank means no restriction."""

    model_config = ConfigDict(frozen=True)

    interest: str | None = None
    issue: str | None = None
    region: str | None = None
    treatment: str | None = None


class MatchType(str, Enum):
    exact = "exact"
    close = "close"


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    candidate: CandidateItem
    match_type: MatchType | None = None
    score: int = 0
    reason: str = ""
    relevance: tuple[str, ...] = ()
    title: str = ""


class ClientProfile(BaseModel):
    """Client attributes compared against a photo's demographics."""

    skin_type: str | None = None
    skin_tone: str | None = None


class PlanItem(BaseModel):
    """An entry already on the client's treatment plan."""

    treatment: str | None = None
    region: str | None = None
    interest: str | None = None
    findings: list[str] | None = None
    product: str | None = None
    quantity: str | None = None
    timeline: str | None = None


# ── HTTP request / response bodies ───────────────────────────────────────


class PhotoMatchRequest(BaseModel):
    interest: str | None = None
    issue: str | None = None
    region: str | None = None
    treatment: str | None = None
    candidates: list[CandidateItem] | None = Field(
        default=None,
        description="Candidate photos; the configured photo export is used when omitted",
    )
    client: ClientProfile | None = None
    plan_items: list[PlanItem] = Field(default_factory=list)
    limit: int = Field(default=200, ge=1, le=2000)


class SuggestionMatchRequest(BaseModel):
    interest: str | None = None
    issue: str | None = None
    region: str | None = None
    treatment: str | None = None
    suggestions: list[str] | None = Field(
        default=None, description="Suggestion names; every known interest when omitted"
    )
    region_filters: list[str] = Field(default_factory=list)
    findings: list[str] = Field(default_factory=list)
    general_concerns: list[str] = Field(default_factory=list)


class MatchResponse(BaseModel):
    exact: list[MatchResult]
    close: list[MatchResult]
    treatment_options: list[str]
    region_options: list[str]
    total_candidates: int
    in_plan: list[str] = Field(default_factory=list)
