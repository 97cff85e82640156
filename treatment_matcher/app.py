from __future__ import annotations

from fastapi import FastAPI, HTTPException

from .matching.cache import get_cache_stats
from .matching.criteria import build_criteria, resolve_allowed_products
from .matching.models import MatchResponse, PhotoMatchRequest, SuggestionMatchRequest
from .matching.prefill import PlanPrefill, PlanPrefillRequest, build_plan_prefill
from .matching.service import match_photos, match_suggestions
from .recommender import goals_and_regions_for_treatment, recommended_products
from .recommender.findings import findings_by_area_for_treatment, goal_region_treatments_for_finding
from .recommender.models import ProductRecommendationRequest, ProductRecommendationResponse
from .recommender.plan import quantity_context
from .records.data_store import RecordStoreError
from .taxonomy import DEFAULT_REGISTRY
from .taxonomy.catalogues import (
    ALL_INTEREST_OPTIONS,
    ASSESSMENT_FINDINGS,
    ASSESSMENT_FINDINGS_BY_AREA,
    GENERAL_CONCERNS_OPTIONS,
    HERE_FOR_OPTIONS,
    REGION_CANONICAL,
    REGION_FILTER_OPTIONS,
    REGION_OPTIONS,
    TIMELINE_OPTIONS,
)
from .taxonomy.models import FindingRecommendation
from .taxonomy.suggestions import ALL_TREATMENT_INTERESTS
from .taxonomy.treatments import ALL_TREATMENTS

app = FastAPI(title="Treatment Matching API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "interests": list(ALL_TREATMENT_INTERESTS),
        "interest_options": list(ALL_INTEREST_OPTIONS),
        "regions": list(REGION_OPTIONS),
        "photo_regions": list(REGION_CANONICAL),
        "region_filters": list(REGION_FILTER_OPTIONS),
        "treatments": list(ALL_TREATMENTS),
        "findings": list(ASSESSMENT_FINDINGS),
        "findings_by_area": [{"area": area, "findings": list(f)} for area, f in ASSESSMENT_FINDINGS_BY_AREA],
        "general_concerns": list(GENERAL_CONCERNS_OPTIONS),
        "here_for": list(HERE_FOR_OPTIONS),
        "timelines": list(TIMELINE_OPTIONS),
    }


# ── Matching endpoints ───────────────────────────────────────────────────


@app.post("/photos/match", response_model=MatchResponse)
def photos_match(body: PhotoMatchRequest) -> MatchResponse:
    try:
        return match_photos(body)
    except RecordStoreError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc


@app.post("/suggestions/match", response_model=MatchResponse)
def suggestions_match(body: SuggestionMatchRequest) -> MatchResponse:
    return match_suggestions(body)


# ── Recommender endpoints ────────────────────────────────────────────────


@app.get("/findings/{finding}/recommendation", response_model=FindingRecommendation)
def finding_recommendation(finding: str) -> FindingRecommendation:
    recommendation = goal_region_treatments_for_finding(finding)
    if recommendation is None:
        raise HTTPException(status_code=404, detail=f"No recommendation for finding '{finding}'")
    return recommendation


@app.get("/treatments/{treatment}/goals")
def treatment_goals(treatment: str) -> dict:
    goals = goals_and_regions_for_treatment(treatment)
    return {
        "treatment": treatment,
        "goals": goals.goals,
        "regions": goals.regions,
        "findings_by_area": [g.model_dump() for g in findings_by_area_for_treatment(treatment)],
    }


@app.post("/treatments/{treatment}/products", response_model=ProductRecommendationResponse)
def treatment_products(treatment: str, body: ProductRecommendationRequest) -> ProductRecommendationResponse:
    return ProductRecommendationResponse(
        treatment=treatment,
        recommended=recommended_products(treatment, body.context),
        allowed=resolve_allowed_products(treatment, body.context),
    )


@app.get("/treatments/{treatment}/meta")
def treatment_meta(treatment: str) -> dict:
    quantity = quantity_context(treatment)
    return {
        "treatment": treatment,
        **DEFAULT_REGISTRY.meta_for_treatment(treatment).model_dump(),
        "products": DEFAULT_REGISTRY.products_for_treatment(treatment),
        "quantity_unit": quantity.unit_label,
        "quantity_options": quantity.options,
    }


# ── Plan endpoints ───────────────────────────────────────────────────────


@app.post("/plan/prefill", response_model=PlanPrefill)
def plan_prefill(body: PlanPrefillRequest) -> PlanPrefill:
    criteria = build_criteria(interest=body.interest, issue=body.issue, region=body.region)
    return build_plan_prefill(body.candidate, criteria, body.form)


# ── Operational endpoints ────────────────────────────────────────────────


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
