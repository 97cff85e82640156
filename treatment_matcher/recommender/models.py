from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SuggestedTreatment(BaseModel):
    model_config = ConfigDict(frozen=True)

    treatment: str
    goal: str
    region: str
    example_finding: str


class GoalsAndRegions(BaseModel):
    goals: list[str]
    regions: list[str]


class AreaFindings(BaseModel):
    area: str
    findings: list[str]


class QuantityContext(BaseModel):
    unit_label: str
    options: list[str]


class ProductRecommendationRequest(BaseModel):
    context: str = ""


class ProductRecommendationResponse(BaseModel):
    treatment: str
    recommended: list[str]
    allowed: list[str]
