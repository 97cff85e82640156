from __future__ import annotations

import logging
from collections.abc import Iterable

from ..recommender.products import recommended_products
from ..taxonomy import DEFAULT_REGISTRY, TaxonomyRegistry
from ..taxonomy.treatments import OTHER_LABEL, OTHER_PRODUCT_LABEL
from .models import CandidateItem, SelectionCriteria
from .normalizer import get_treatment_options

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str:
    return (value or "").strip()


def treatments_for_interest(interest: str | None, registry: TaxonomyRegistry = DEFAULT_REGISTRY) -> list[str]:
    """Treatments for an interest; the full non-surgical list when blank, "Other" or unmatched."""
    name = _clean(interest)
    if not name or name == OTHER_LABEL:
        return list(registry.all_treatments)
    return registry.treatments_for_interest(name) or list(registry.all_treatments)


def resolve_allowed_treatments(
    criteria: SelectionCriteria,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> frozenset[str]:
    """
    Treatments allowed by the interest and issue axes.

    Both axes set: their intersection. One axis set: that axis. An empty result
    means the interest/issue stage does not restrict anything.
    """
    from_interest: list[str] = []
    if _clean(criteria.interest):
        from_interest = treatments_for_interest(criteria.interest, registry)

    from_issue: list[str] = []
    if _clean(criteria.issue):
        from_issue = registry.treatments_for_issue(_clean(criteria.issue))

    if from_interest and from_issue:
        issue_lower = {t.lower() for t in from_issue}
        allowed = [t for t in from_interest if t.lower() in issue_lower]
    else:
        allowed = from_interest or from_issue

    logger.debug(
        "Allowed treatments for interest=%r issue=%r: %s",
        criteria.interest,
        criteria.issue,
        allowed or "no restriction",
    )
    return frozenset(allowed)


def resolve_region_for_interest(name: str | None, registry: TaxonomyRegistry = DEFAULT_REGISTRY) -> str | None:
    area = registry.area_for_suggestion(_clean(name))
    return area.value if area else None


def resolve_region_for_issue(name: str | None, registry: TaxonomyRegistry = DEFAULT_REGISTRY) -> str | None:
    areas = registry.areas_for_issue(_clean(name))
    return areas[0].value if areas else None


def build_criteria(
    interest: str | None = None,
    issue: str | None = None,
    region: str | None = None,
    treatment: str | None = None,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> SelectionCriteria:
    """Criteria for opening the photo browser from an interest, an issue or both."""
    interest = _clean(interest)
    issue = _clean(issue)

    resolved_interest = interest or (registry.suggestion_for_issue(issue) if issue else None) or None
    resolved_region = (
        _clean(region)
        or (resolve_region_for_interest(interest, registry) if interest else None)
        or (resolve_region_for_issue(issue, registry) if issue else None)
        or None
    )
    return SelectionCriteria(
        interest=resolved_interest,
        issue=issue or None,
        region=resolved_region,
        treatment=_clean(treatment) or None,
    )


def resolve_allowed_products(
    treatment: str,
    context: str = "",
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> list[str]:
    """Product choices for a treatment, narrowed to keyword recommendations when the context yields any."""
    catalogue = [p for p in registry.products_for_treatment(treatment) if p != OTHER_PRODUCT_LABEL]
    recommended = recommended_products(treatment, context, registry)
    return recommended or catalogue


def treatment_options_for(
    candidates: Iterable[CandidateItem],
    criteria: SelectionCriteria,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> list[str]:
    """Treatment chips for the interest/issue/region-filtered candidates."""
    options = get_treatment_options(candidates)
    if not _clean(criteria.interest):
        return options
    for_interest = {t.lower() for t in treatments_for_interest(criteria.interest, registry)}
    return [t for t in options if t.lower() in for_interest]
