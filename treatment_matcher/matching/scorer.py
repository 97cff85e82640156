from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Sequence

from .models import CandidateItem, ClientProfile, MatchResult, MatchType, SelectionCriteria
from .normalizer import display_area_names, region_matches

DEFAULT_TITLE = "Treatment example"


def strip_accents(text: str) -> str:
    normalized = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in normalized if not unicodedata.combining(ch))


def criteria_terms(criteria: SelectionCriteria) -> list[str]:
    """Stripped, non-empty interest then issue."""
    terms: list[str] = []
    for value in (criteria.interest, criteria.issue):
        if value and value.strip():
            terms.append(value.strip())
    return terms


def score(candidate: CandidateItem, terms: Sequence[str]) -> int:
    """Number of terms found in the candidate's display name."""
    name = (candidate.name or "").lower()
    return sum(1 for term in terms if term.lower() in name)


def classify(candidate: CandidateItem, terms: Sequence[str]) -> MatchType | None:
    if not terms:
        return None
    return MatchType.exact if score(candidate, terms) >= len(terms) else MatchType.close


def name_sort_key(name: str) -> tuple[str, str]:
    """Accent- and case-folded name, then the raw name so folded ties still order."""
    name = name or ""
    return strip_accents(name).casefold(), name


def sort_candidates(candidates: Iterable[CandidateItem], terms: Sequence[str]) -> list[CandidateItem]:
    """Score descending, then display name ascending; stable for ties."""
    return sorted(candidates, key=lambda c: (-score(c, terms), name_sort_key(c.name)))


def partition(
    candidates: Iterable[CandidateItem],
    terms: Sequence[str],
) -> tuple[list[CandidateItem], list[CandidateItem]]:
    """Sorted (exact, close) buckets; without terms everything lands in the first bucket."""
    ordered = sort_candidates(candidates, terms)
    if not terms:
        return ordered, []
    exact: list[CandidateItem] = []
    close: list[CandidateItem] = []
    for candidate in ordered:
        (exact if classify(candidate, terms) is MatchType.exact else close).append(candidate)
    return exact, close


def match_reason(candidate: CandidateItem, criteria: SelectionCriteria) -> str:
    terms = criteria_terms(criteria)
    match_type = classify(candidate, terms)
    if match_type is None:
        return ""
    if match_type is MatchType.exact:
        return "Exact match"
    name = (candidate.name or "").lower()
    issue = (criteria.issue or "").strip()
    if issue and issue.lower() in name:
        return f"Matches Issue: {issue}"
    interest = (criteria.interest or "").strip()
    if interest and interest.lower() in name:
        return f"Matches Interest: {interest}"
    region = (criteria.region or "").strip()
    if region and region_matches(candidate.area_names, region):
        return f"Matches Area: {region}"
    return "Close match"


def relevance_matches(candidate: CandidateItem, client: ClientProfile | None) -> list[str]:
    """Why a photo resembles the client: skin type and skin tone."""
    if client is None:
        return []
    matches: list[str] = []
    if candidate.skin_type and client.skin_type:
        photo_skin = candidate.skin_type.lower()
        client_skin = client.skin_type.lower()
        if client_skin in photo_skin or photo_skin in client_skin:
            matches.append("Similar skin type")
    if candidate.skin_tone and client.skin_tone:
        photo_tone = candidate.skin_tone.lower()
        client_tone = client.skin_tone.lower()
        if photo_tone == client_tone or client_tone in photo_tone:
            matches.append("Similar skin tone")
    return matches


def display_title(candidate: CandidateItem) -> str:
    if candidate.name and candidate.name.strip():
        return candidate.name.strip()
    treatments = ", ".join(candidate.general_treatments)
    areas = ", ".join(display_area_names(candidate.area_names))
    if treatments and areas:
        return f"{treatments} – {areas}"
    return treatments or areas or DEFAULT_TITLE


def to_result(
    candidate: CandidateItem,
    criteria: SelectionCriteria,
    client: ClientProfile | None = None,
) -> MatchResult:
    terms = criteria_terms(criteria)
    return MatchResult(
        candidate=candidate,
        match_type=classify(candidate, terms),
        score=score(candidate, terms),
        reason=match_reason(candidate, criteria),
        relevance=tuple(relevance_matches(candidate, client)),
        title=display_title(candidate),
    )
