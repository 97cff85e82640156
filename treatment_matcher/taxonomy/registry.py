from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from . import catalogues, issues, keyword_tables, suggestions, treatments
from .models import (
    Area,
    BreakdownRow,
    Concern,
    ContextProducts,
    FindingRecommendation,
    GeneralCategory,
    IssueConcernMapping,
    TreatmentMeta,
)
from .rules import Rule, all_matches, first_match


@dataclass(frozen=True)
class TaxonomyRegistry:
    """
    Read-only view over the mapping tables.

    Every lookup is total: an unknown key yields ``None`` or an empty list.
    """

    suggestion_to_area: Mapping[str, Area] = field(default_factory=lambda: suggestions.SUGGESTION_TO_AREA)
    suggestion_to_issues: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: suggestions.SUGGESTION_TO_ISSUES
    )
    issue_to_suggestion: Mapping[str, str] = field(default_factory=lambda: suggestions.ISSUE_TO_SUGGESTION)
    issue_mappings: Mapping[str, IssueConcernMapping] = field(default_factory=lambda: issues.SLUG_TO_MAPPING)
    interest_rules: Sequence[Rule[tuple[str, ...]]] = field(
        default_factory=lambda: keyword_tables.INTEREST_TO_TREATMENTS
    )
    issue_rules: Sequence[Rule[tuple[str, ...]]] = field(
        default_factory=lambda: keyword_tables.ISSUE_TO_TREATMENTS
    )
    finding_rules: Sequence[Rule[FindingRecommendation]] = field(
        default_factory=lambda: keyword_tables.FINDING_TO_GOAL_REGION_TREATMENTS
    )
    goal_region_rules: Sequence[Rule[tuple[str, ...]]] = field(
        default_factory=lambda: keyword_tables.GOAL_TO_REGIONS
    )
    context_product_rules: Sequence[Rule[ContextProducts]] = field(
        default_factory=lambda: keyword_tables.RECOMMENDED_PRODUCTS_BY_CONTEXT
    )
    product_options: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: treatments.TREATMENT_PRODUCT_OPTIONS
    )
    treatment_meta: Mapping[str, TreatmentMeta] = field(default_factory=lambda: treatments.TREATMENT_META)
    all_treatments: tuple[str, ...] = treatments.ALL_TREATMENTS
    interest_options: tuple[str, ...] = catalogues.ALL_INTEREST_OPTIONS
    region_options: tuple[str, ...] = catalogues.REGION_OPTIONS

    # ── Suggestions ─────────────────────────────────────────────────────

    def area_for_suggestion(self, name: str) -> Area | None:
        return self.suggestion_to_area.get((name or "").strip())

    def issues_for_suggestion(self, name: str) -> list[str]:
        return list(self.suggestion_to_issues.get((name or "").strip(), ()))

    def suggestion_for_issue(self, issue: str) -> str | None:
        return self.issue_to_suggestion.get((issue or "").strip())

    # ── Issues / concerns ───────────────────────────────────────────────

    def concern_mapping(self, issue: str) -> IssueConcernMapping | None:
        return self.issue_mappings.get(issues.issue_slug(issue))

    def concerns_for_issue(self, issue: str) -> list[Concern]:
        mapping = self.concern_mapping(issue)
        return list(mapping.concerns) if mapping else []

    def areas_for_issue(self, issue: str) -> list[Area]:
        mapping = self.concern_mapping(issue)
        return list(mapping.areas) if mapping else []

    def general_category_for_issue(self, issue: str) -> GeneralCategory | None:
        mapping = self.concern_mapping(issue)
        return mapping.general_category if mapping else None

    def concern_name_for_issue(self, issue: str) -> str | None:
        mapping = self.concern_mapping(issue)
        return mapping.concerns[0].name if mapping else None

    def group_issues_by_category(self, names: Iterable[str]) -> list[BreakdownRow]:
        """Feature breakdown by general category, in category order, unmapped last."""
        by_category: dict[GeneralCategory, list[str]] = {}
        other: list[str] = []
        for name in names:
            trimmed = (name or "").strip()
            if not trimmed:
                continue
            category = self.general_category_for_issue(trimmed)
            bucket = by_category.setdefault(category, []) if category else other
            if trimmed not in bucket:
                bucket.append(trimmed)
        rows = [
            BreakdownRow(label=category.value, issues=by_category[category])
            for category in GeneralCategory
            if by_category.get(category)
        ]
        if other:
            rows.append(BreakdownRow(label="Other", issues=other))
        return rows

    def group_issues_by_concern(self, names: Iterable[str]) -> list[BreakdownRow]:
        """Feature breakdown by concern name, alphabetical, unmapped last."""
        by_concern: dict[str, list[str]] = {}
        other: list[str] = []
        for name in names:
            trimmed = (name or "").strip()
            if not trimmed:
                continue
            concern = self.concern_name_for_issue(trimmed)
            bucket = by_concern.setdefault(concern, []) if concern else other
            if trimmed not in bucket:
                bucket.append(trimmed)
        rows = [
            BreakdownRow(label=label, issues=by_concern[label])
            for label in sorted(by_concern, key=str.casefold)
        ]
        if other:
            rows.append(BreakdownRow(label="Other", issues=other))
        return rows

    # ── Treatments ──────────────────────────────────────────────────────

    def treatments_for_interest(self, interest: str) -> list[str]:
        """Union of every Interest→Treatment row matching ``interest``; may be empty."""
        matched: list[str] = []
        for row in all_matches(interest, self.interest_rules):
            for treatment in row:
                if treatment not in matched:
                    matched.append(treatment)
        return matched

    def treatments_for_issue(self, issue: str) -> list[str]:
        """Treatments of the first Issue→Treatment row matching ``issue``; may be empty."""
        return list(first_match(issue, self.issue_rules) or ())

    def products_for_treatment(self, treatment: str) -> list[str]:
        return list(self.product_options.get((treatment or "").strip(), ()))

    def meta_for_treatment(self, treatment: str) -> TreatmentMeta:
        return self.treatment_meta.get((treatment or "").strip(), TreatmentMeta())

    # ── Findings / goals ────────────────────────────────────────────────

    def finding_recommendation(self, finding: str) -> FindingRecommendation | None:
        return first_match(finding, self.finding_rules)

    def context_products(self, treatment: str, context: str) -> list[ContextProducts]:
        scoped = [rule for rule in self.context_product_rules if rule.result.treatment == treatment]
        return all_matches(context, scoped)


DEFAULT_REGISTRY = TaxonomyRegistry()
