from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class MatchDirection(str, Enum):
    """Which side of a keyword comparison must contain the other."""

    text_contains_keyword = "text_contains_keyword"
    keyword_contains_text = "keyword_contains_text"
    either = "either"


@dataclass(frozen=True)
class Rule(Generic[T]):
    keywords: tuple[str, ...]
    result: T


def matches_any(
    text: str,
    keywords: Iterable[str],
    direction: MatchDirection = MatchDirection.text_contains_keyword,
) -> bool:
    """Case-insensitive substring test of ``text`` against any keyword."""
    lower = (text or "").lower()
    if not lower:
        return False
    for keyword in keywords:
        k = keyword.lower()
        if not k:
            continue
        if direction is MatchDirection.text_contains_keyword and k in lower:
            return True
        if direction is MatchDirection.keyword_contains_text and lower in k:
            return True
        if direction is MatchDirection.either and (k in lower or lower in k):
            return True
    return False


def first_match(
    text: str,
    rules: Iterable[Rule[T]],
    direction: MatchDirection = MatchDirection.text_contains_keyword,
) -> T | None:
    """Return the result of the first rule row whose keywords match ``text``."""
    for rule in rules:
        if matches_any(text, rule.keywords, direction):
            return rule.result
    return None


def all_matches(
    text: str,
    rules: Iterable[Rule[T]],
    direction: MatchDirection = MatchDirection.text_contains_keyword,
) -> list[T]:
    """Return the results of every matching rule row, in table order."""
    return [rule.result for rule in rules if matches_any(text, rule.keywords, direction)]
