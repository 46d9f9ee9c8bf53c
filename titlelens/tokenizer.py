"""Title tokenization honoring user-defined atomic terms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .matcher import DictionaryMatcher
from .segmenter import Segmenter, default_segmenter


@dataclass(frozen=True, slots=True)
class TokenizedTitle:
    """Ordered surface tokens and their lowercase counterparts."""

    raw_tokens: tuple[str, ...]
    lower_tokens: tuple[str, ...]

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "TokenizedTitle":
        raw = tuple(tokens)
        return cls(raw_tokens=raw, lower_tokens=tuple(token.lower() for token in raw))

    def __len__(self) -> int:
        return len(self.raw_tokens)


class Tokenizer:
    """Split titles into tokens, keeping dictionary terms whole.

    Dictionary hits are found case-insensitively and emitted with the casing
    they have in the title; the text between hits goes through the segmenter.
    """

    def __init__(self, segmenter: Segmenter | None = None) -> None:
        self._segmenter = segmenter

    @property
    def segmenter(self) -> Segmenter:
        if self._segmenter is None:
            self._segmenter = default_segmenter()
        return self._segmenter

    def tokenize(
        self,
        title: str,
        atomic_terms: DictionaryMatcher | Iterable[str] | None = None,
    ) -> TokenizedTitle:
        matcher = (
            atomic_terms
            if isinstance(atomic_terms, DictionaryMatcher)
            else DictionaryMatcher(atomic_terms)
        )
        segmenter = self.segmenter
        if not matcher:
            return TokenizedTitle.from_tokens(segmenter.segment(title))

        tokens: list[str] = []
        last = 0
        for match in matcher.finditer(title, case_sensitive=False):
            start, end = match.span()
            if start > last:
                tokens.extend(segmenter.segment(title[last:start]))
            tokens.append(match.group(0))
            last = end
        if last < len(title):
            tokens.extend(segmenter.segment(title[last:]))
        return TokenizedTitle.from_tokens(tokens)


def tokenize(
    title: str,
    atomic_terms: DictionaryMatcher | Iterable[str] | None = None,
    *,
    segmenter: Segmenter | None = None,
) -> TokenizedTitle:
    """Tokenize *title* with a one-off :class:`Tokenizer`."""
    return Tokenizer(segmenter).tokenize(title, atomic_terms)
