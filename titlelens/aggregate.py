"""Frequency aggregation across a corpus of titles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Sequence

from .matcher import build_term_pattern


class KeywordCount(NamedTuple):
    word: str
    count: int


@dataclass(slots=True)
class FoldedEntry:
    """Case-insensitive bucket: a title total plus per-surface counts."""

    total: int = 0
    variants: dict[str, int] = field(default_factory=dict)

    def add(self, surface: str) -> None:
        self.total += 1
        self.variants[surface] = self.variants.get(surface, 0) + 1

    @property
    def best_surface(self) -> str:
        # max() keeps the first of equal counts; dicts iterate in insertion order.
        return max(self.variants.items(), key=lambda item: item[1])[0]


def _ranked(pairs: Iterable[tuple[str, int]]) -> list[KeywordCount]:
    return sorted(
        (KeywordCount(word, count) for word, count in pairs),
        key=lambda entry: entry.count,
        reverse=True,
    )


def fold_variants(candidate_sets: Iterable[Iterable[str]]) -> dict[str, FoldedEntry]:
    """Group candidates by lowercase key, counting each key once per title."""

    table: dict[str, FoldedEntry] = {}
    for candidates in candidate_sets:
        seen: set[str] = set()
        for word in candidates:
            key = word.lower()
            if key in seen:
                continue
            seen.add(key)
            entry = table.get(key)
            if entry is None:
                entry = table[key] = FoldedEntry()
            entry.add(word)
    return table


def aggregate(
    candidate_sets: Iterable[Iterable[str]],
    case_sensitive: bool = False,
) -> list[KeywordCount]:
    """Return keywords ordered by the number of titles containing them.

    Ties keep first-seen order. In case-insensitive mode the displayed word is
    the most frequent surface form of its lowercase key.
    """

    if case_sensitive:
        counts: dict[str, int] = {}
        for candidates in candidate_sets:
            for word in dict.fromkeys(candidates):
                counts[word] = counts.get(word, 0) + 1
        return _ranked(counts.items())

    table = fold_variants(candidate_sets)
    return _ranked((entry.best_surface, entry.total) for entry in table.values())


def phrase_statistics(
    titles: Iterable[str],
    phrases: Sequence[str],
    case_sensitive: bool = False,
) -> list[KeywordCount]:
    """Count, per configured phrase, how many titles contain it."""

    if not phrases:
        return []
    patterns = [
        (phrase.lower(), build_term_pattern(phrase, case_sensitive))
        for phrase in phrases
        if phrase
    ]
    table: dict[str, FoldedEntry] = {}
    for title in titles:
        counted: set[str] = set()
        for key, pattern in patterns:
            if key in counted:
                continue
            match = pattern.search(title)
            if match is None:
                continue
            counted.add(key)
            entry = table.get(key)
            if entry is None:
                entry = table[key] = FoldedEntry()
            entry.add(match.group(0))
    return _ranked((entry.best_surface, entry.total) for entry in table.values())
