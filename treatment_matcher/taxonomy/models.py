from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Area(str, Enum):
    forehead = "Forehead"
    eyes = "Eyes"
    cheeks = "Cheeks"
    nose = "Nose"
    lips = "Lips"
    jawline = "Jawline"
    skin = "Skin"
    neck = "Neck"
    chin = "Chin"
    full_face = "Full Face"
    other = "Other"


class GeneralCategory(str, Enum):
    skin_health = "Skin Health"
    volume_loss = "Volume Loss"
    proportions = "Proportions"
    skin_laxity = "Skin Laxity"
    excess_fat = "Excess Fat"


class Concern(BaseModel):
    model_config = ConfigDict(frozen=True)

    concern_id: str
    name: str
    general_category: GeneralCategory
    areas: tuple[Area, ...] = Field(..., min_length=1)


class IssueConcernMapping(BaseModel):
    model_config = ConfigDict(frozen=True)

    issue_slug: str
    concerns: tuple[Concern, ...]
    areas: tuple[Area, ...]

    @property
    def general_category(self) -> GeneralCategory:
        return self.concerns[0].general_category


class TreatmentMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    longevity: str | None = None
    downtime: str | None = None
    price_range: str | None = None


class FindingRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    goal: str
    region: str
    treatments: tuple[str, ...]


class ContextProducts(BaseModel):
    model_config = ConfigDict(frozen=True)

    treatment: str
    products: tuple[str, ...]


class BreakdownRow(BaseModel):
    label: str
    issues: list[str]
