"""Dictionary term matching with word-boundary aware regular expressions."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

# ASCII-only word characters; CJK neighbours count as a boundary ("AI绘画").
_WORD_BEFORE = r"(?<![A-Za-z0-9_])"
_WORD_AFTER = r"(?![A-Za-z0-9_])"
_PLAIN_ASCII_RE = re.compile(r"[A-Za-z0-9]+")


def is_plain_ascii_term(term: str) -> bool:
    """Return True when *term* consists solely of ASCII letters and digits."""
    return bool(_PLAIN_ASCII_RE.fullmatch(term))


def term_pattern_source(term: str) -> str:
    """Return the escaped regex source for *term* with its boundary policy."""
    escaped = re.escape(term)
    if is_plain_ascii_term(term):
        return f"{_WORD_BEFORE}{escaped}{_WORD_AFTER}"
    return escaped


def build_term_pattern(term: str, case_sensitive: bool = False) -> re.Pattern[str]:
    """Compile a matcher for a single *term*."""
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(term_pattern_source(term), flags)


def normalize_terms(terms: Iterable[str] | None) -> tuple[str, ...]:
    """Deduplicate *terms*, drop empties and sort longest first (stable)."""

    if not terms:
        return ()
    seen: set[str] = set()
    unique: list[str] = []
    for term in terms:
        if not term or term in seen:
            continue
        seen.add(term)
        unique.append(term)
    return tuple(sorted(unique, key=len, reverse=True))


class DictionaryMatcher:
    """A single alternation pattern over user dictionary terms.

    Terms are ordered longest first so that at any position the longest
    eligible term wins ("Vue3" before "Vue"). Case sensitivity is chosen per
    query and each variant of the pattern is compiled once.
    """

    __slots__ = ("terms", "_source", "_patterns")

    def __init__(self, terms: Iterable[str] | None) -> None:
        self.terms = normalize_terms(terms)
        self._source = "|".join(term_pattern_source(term) for term in self.terms)
        self._patterns: dict[bool, re.Pattern[str]] = {}

    def __bool__(self) -> bool:
        return bool(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __repr__(self) -> str:
        return f"DictionaryMatcher(terms={list(self.terms)!r})"

    def pattern(self, case_sensitive: bool = False) -> re.Pattern[str] | None:
        """Return the compiled pattern for the requested case mode."""
        if not self.terms:
            return None
        compiled = self._patterns.get(case_sensitive)
        if compiled is None:
            flags = 0 if case_sensitive else re.IGNORECASE
            compiled = re.compile(self._source, flags)
            self._patterns[case_sensitive] = compiled
        return compiled

    def finditer(self, text: str, *, case_sensitive: bool = False) -> Iterator[re.Match[str]]:
        """Yield non-overlapping matches in *text*, left to right."""
        compiled = self.pattern(case_sensitive)
        if compiled is None or not text:
            return iter(())
        return compiled.finditer(text)

    def spans(self, text: str, *, case_sensitive: bool = False) -> list[tuple[int, int]]:
        return [match.span() for match in self.finditer(text, case_sensitive=case_sensitive)]

    def findall(self, text: str, *, case_sensitive: bool = False) -> list[str]:
        return [match.group(0) for match in self.finditer(text, case_sensitive=case_sensitive)]

    def search(self, text: str, *, case_sensitive: bool = False) -> re.Match[str] | None:
        compiled = self.pattern(case_sensitive)
        if compiled is None:
            return None
        return compiled.search(text)

    def sub(self, replacement: str, text: str, *, case_sensitive: bool = False) -> str:
        compiled = self.pattern(case_sensitive)
        if compiled is None:
            return text
        return compiled.sub(lambda _match: replacement, text)


def compile_terms(terms: Iterable[str] | None) -> DictionaryMatcher:
    """Compile *terms* into a reusable :class:`DictionaryMatcher`."""
    return DictionaryMatcher(terms)
