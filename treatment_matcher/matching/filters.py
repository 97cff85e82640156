"""Cascading filter stages over candidate items and suggestion names.

Each stage only narrows its input: interest/issue treatments, then region, then
the explicitly selected treatment.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from ..taxonomy import DEFAULT_REGISTRY, TaxonomyRegistry
from ..taxonomy.catalogues import REGION_FILTER_TO_AREAS
from ..taxonomy.rules import MatchDirection, matches_any
from .criteria import resolve_allowed_treatments, treatments_for_interest
from .models import CandidateItem, SelectionCriteria
from .normalizer import normalized_tags, region_matches

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class FilterResult:
    before_treatment: list[CandidateItem]
    visible: list[CandidateItem]


def _matches_allowed(candidate: CandidateItem, allowed_lower: frozenset[str]) -> bool:
    return any(tag.lower() in allowed_lower for tag in normalized_tags(candidate))


def _matches_treatment(candidate: CandidateItem, treatment: str) -> bool:
    wanted = treatment.strip().lower()
    return any(tag.lower() == wanted for tag in normalized_tags(candidate))


def run_pipeline(
    candidates: Sequence[CandidateItem],
    criteria: SelectionCriteria,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> FilterResult:
    allowed = resolve_allowed_treatments(criteria, registry)
    if allowed:
        allowed_lower = frozenset(t.lower() for t in allowed)
        stage = [c for c in candidates if _matches_allowed(c, allowed_lower)]
    else:
        stage = list(candidates)

    before_treatment = [c for c in stage if region_matches(c.area_names, criteria.region)]

    treatment = (criteria.treatment or "").strip()
    if treatment:
        visible = [c for c in before_treatment if _matches_treatment(c, treatment)]
    else:
        visible = list(before_treatment)

    logger.debug(
        "Filter pipeline: %d candidates -> %d after interest/issue -> %d after region -> %d visible",
        len(candidates),
        len(stage),
        len(before_treatment),
        len(visible),
    )
    return FilterResult(before_treatment=before_treatment, visible=visible)


def filter_candidates(
    candidates: Sequence[CandidateItem],
    criteria: SelectionCriteria,
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> list[CandidateItem]:
    return run_pipeline(candidates, criteria, registry).visible


# ── Suggestion cards ─────────────────────────────────────────────────────


def suggestion_candidate(name: str, registry: TaxonomyRegistry = DEFAULT_REGISTRY) -> CandidateItem:
    """A suggestion card as a candidate: its interest treatments and its single area."""
    area = registry.area_for_suggestion(name)
    return CandidateItem(
        id=name,
        name=name,
        general_treatments=tuple(treatments_for_interest(name, registry)),
        area_names=(area.value,) if area else (),
    )


def filter_suggestions_by_region(
    suggestion_names: Iterable[str],
    selected_regions: Sequence[str],
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
    region_to_areas: Mapping[str, Sequence[str]] = REGION_FILTER_TO_AREAS,
) -> list[str]:
    """Keep suggestions whose area is covered by a selected region filter; unmapped ones stay."""
    names = list(suggestion_names)
    if not selected_regions:
        return names
    areas: set[str] = set()
    for region in selected_regions:
        areas.update(region_to_areas.get(region, ()))
    kept: list[str] = []
    for name in names:
        area = registry.area_for_suggestion(name)
        if area is None or area.value in areas:
            kept.append(name)
    return kept


def _normalize_for_match(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text.strip().lower())


def filter_suggestions_by_findings(
    suggestion_names: Iterable[str],
    selected_findings: Sequence[str],
    registry: TaxonomyRegistry = DEFAULT_REGISTRY,
) -> list[str]:
    """
    Keep suggestions with at least one issue related to a selected finding.

    An issue and a finding are related when either contains the other, so
    "Crow's feet" matches "Crow's Feet Wrinkles". Suggestions without issues stay.
    """
    names = list(suggestion_names)
    if not selected_findings:
        return names
    findings = [_normalize_for_match(f) for f in selected_findings]
    kept: list[str] = []
    for name in names:
        issues = registry.issues_for_suggestion(name)
        if not issues or any(
            matches_any(_normalize_for_match(issue), findings, MatchDirection.either) for issue in issues
        ):
            kept.append(name)
    return kept
