"""
Matching engine for treatment example photos and suggestion cards.

Responsibilities:
- Canonicalise free-text treatment names and drop surgical ones.
- Resolve the allowed treatment set, region and products from a partial selection.
- Narrow a candidate list through the interest/issue, region and treatment stages.
- Score, classify and order the survivors into exact and close matches.
"""
from __future__ import annotations

from .models import CandidateItem, MatchResult, MatchType, SelectionCriteria

__all__ = ["CandidateItem", "MatchResult", "MatchType", "SelectionCriteria"]
