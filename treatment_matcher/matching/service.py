from __future__ import annotations

import logging
import time

from ..recommender.findings import findings_from_concerns
from ..records.data_store import get_candidates
from ..taxonomy import DEFAULT_REGISTRY, TaxonomyRegistry
from ..taxonomy.suggestions import ALL_TREATMENT_INTERESTS
from .cache import cache_get, cache_set
from .criteria import build_criteria, treatment_options_for
from .filters import (
    filter_suggestions_by_findings,
    filter_suggestions_by_region,
    run_pipeline,
    suggestion_candidate,
)
from .models import (
    CandidateItem,
    ClientProfile,
    MatchResponse,
    PhotoMatchRequest,
    SelectionCriteria,
    SuggestionMatchRequest,
)
from .normalizer import region_options
from .prefill import is_in_plan
from .scorer import criteria_terms, partition, to_result

logger = logging.getLogger(__name__)


def _respond(
    candidates: list[CandidateItem],
    criteria: SelectionCriteria,
    registry: TaxonomyRegistry,
    client: ClientProfile | None = None,
    limit: int | None = None,
) -> tuple[MatchResponse, list[CandidateItem]]:
    filtered = run_pipeline(candidates, criteria, registry)
    exact, close = partition(filtered.visible, criteria_terms(criteria))
    if limit is not None:
        exact = exact[:limit]
        close = close[: max(0, limit - len(exact))]
    response = MatchResponse(
        exact=[to_result(c, criteria, client) for c in exact],
        close=[to_result(c, criteria, client) for c in close],
        treatment_options=treatment_options_for(filtered.before_treatment, criteria, registry),
        region_options=region_options(),
        total_candidates=len(filtered.visible),
    )
    return response, exact + close


def match_photos(
    request: PhotoMatchRequest,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> MatchResponse:
    """Filter, score and partition example photos for the request's selection."""
    start_time = time.time()

    request_dict = request.model_dump()
    cached = cache_get("photos", request_dict)
    if cached is not None:
        logger.info("Photo match cache hit (%d results)", len(cached.exact) + len(cached.close))
        return cached.model_copy(deep=True)

    candidates = request.candidates if request.candidates is not None else get_candidates()
    criteria = build_criteria(
        interest=request.interest,
        issue=request.issue,
        region=request.region,
        treatment=request.treatment,
        registry=registry,
    )
    response, shown = _respond(candidates, criteria, registry, request.client, request.limit)
    if request.plan_items:
        response.in_plan = [c.id for c in shown if is_in_plan(c, criteria, request.plan_items)]

    cache_set("photos", request_dict, response.model_copy(deep=True))

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.info(
        "Photo match: %d candidates, %d exact, %d close in %sms",
        len(candidates),
        len(response.exact),
        len(response.close),
        elapsed_ms,
    )
    return response


def match_suggestions(
    request: SuggestionMatchRequest,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> MatchResponse:
    """Run suggestion cards through the recommender filters and the photo pipeline."""
    request_dict = request.model_dump()
    cached = cache_get("suggestions", request_dict)
    if cached is not None:
        logger.info("Suggestion match cache hit")
        return cached.model_copy(deep=True)

    names = request.suggestions if request.suggestions is not None else list(ALL_TREATMENT_INTERESTS)
    names = filter_suggestions_by_region(names, request.region_filters, registry)
    findings = list(request.findings)
    for finding in findings_from_concerns(request.general_concerns):
        if finding not in findings:
            findings.append(finding)
    names = filter_suggestions_by_findings(names, findings, registry)

    criteria = SelectionCriteria(
        interest=request.interest,
        issue=request.issue,
        region=request.region,
        treatment=request.treatment,
    )
    candidates = [suggestion_candidate(name, registry) for name in names]
    response, _ = _respond(candidates, criteria, registry)

    cache_set("suggestions", request_dict, response.model_copy(deep=True))
    logger.info("Suggestion match: %d cards, %d shown", len(candidates), response.total_candidates)
    return response
