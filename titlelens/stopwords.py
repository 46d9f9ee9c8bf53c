"""Stop-word sets and the comma/newline blob format they are loaded from."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

MAX_TERMS_PER_LINE = 15

BUILT_IN_STOP_WORDS: frozenset[str] = frozenset(
    ["[", "]", "(", ")", ",", ".", "!", "?", "/", ":", ";", '"', "'", " ", "\t", "\n"]
)


@dataclass(frozen=True, slots=True)
class StopWordSet:
    """Built-in punctuation plus terms loaded from a stop-word blob."""

    loaded: frozenset[str] = frozenset()
    built_in: frozenset[str] = BUILT_IN_STOP_WORDS
    truncated_lines: tuple[int, ...] = field(default=())

    def __contains__(self, word: object) -> bool:
        return word in self.built_in or word in self.loaded

    def __len__(self) -> int:
        return len(self.loaded)

    @classmethod
    def from_blob(cls, text: str | None) -> "StopWordSet":
        words, truncated = parse_stop_words(text)
        return cls(loaded=frozenset(words), truncated_lines=truncated)


def parse_stop_words(text: str | None) -> tuple[list[str], tuple[int, ...]]:
    """Parse a stop-word blob into an ordered, unique word list.

    Each line holds comma-separated terms; only the first fifteen terms of a
    line are kept. Returns the words and the 1-based numbers of truncated lines.
    """

    if not text:
        return [], ()
    words: list[str] = []
    seen: set[str] = set()
    truncated: list[int] = []
    for line_no, line in enumerate(text.split("\n"), start=1):
        terms = [term.strip() for term in line.split(",")]
        terms = [term for term in terms if term]
        if len(terms) > MAX_TERMS_PER_LINE:
            logger.warning(
                "Stop-word line %d has %d terms; keeping the first %d.",
                line_no,
                len(terms),
                MAX_TERMS_PER_LINE,
            )
            truncated.append(line_no)
            terms = terms[:MAX_TERMS_PER_LINE]
        for term in terms:
            if term not in seen:
                seen.add(term)
                words.append(term)
    return words, tuple(truncated)


def format_stop_words(words: list[str] | tuple[str, ...], per_line: int = MAX_TERMS_PER_LINE) -> str:
    """Serialize *words* back into the blob format."""
    if per_line <= 0 or per_line > MAX_TERMS_PER_LINE:
        per_line = MAX_TERMS_PER_LINE
    lines = [
        ",".join(words[idx : idx + per_line]) for idx in range(0, len(words), per_line)
    ]
    return "\n".join(lines) + ("\n" if lines else "")
