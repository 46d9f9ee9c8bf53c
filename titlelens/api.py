"""Public Python API for TitleLens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from .aggregate import KeywordCount, aggregate, phrase_statistics
from .config import Config
from .filters import collect_title_candidates
from .matcher import DictionaryMatcher
from .stopwords import StopWordSet
from .tokenizer import TokenizedTitle, Tokenizer
from .utils import clean_word_list
from .videos import VideoInput, VideoRecord, ingest_videos, match_videos


class TitleLensError(ValueError):
    """Raised when the TitleLens public API input is invalid."""


@dataclass(frozen=True, slots=True)
class ConfigSnapshot:
    """Immutable view of the user word lists used for one analysis call."""

    blocked_words: tuple[str, ...] = ()
    user_phrases: tuple[str, ...] = ()
    user_defined_words: tuple[str, ...] = ()
    case_sensitive: bool = False

    @classmethod
    def from_config(cls, config: Config, *, case_sensitive: bool | None = None) -> "ConfigSnapshot":
        return cls.create(
            blocked_words=config.blocked_words,
            user_phrases=config.user_phrases,
            user_defined_words=config.user_defined_words,
            case_sensitive=config.case_sensitive if case_sensitive is None else case_sensitive,
        )

    @classmethod
    def create(
        cls,
        *,
        blocked_words: Iterable[str] | None = None,
        user_phrases: Iterable[str] | None = None,
        user_defined_words: Iterable[str] | None = None,
        case_sensitive: bool = False,
    ) -> "ConfigSnapshot":
        return cls(
            blocked_words=clean_word_list(blocked_words),
            user_phrases=clean_word_list(user_phrases),
            user_defined_words=clean_word_list(user_defined_words),
            case_sensitive=bool(case_sensitive),
        )

    def with_case_sensitive(self, value: bool) -> "ConfigSnapshot":
        return ConfigSnapshot(
            blocked_words=self.blocked_words,
            user_phrases=self.user_phrases,
            user_defined_words=self.user_defined_words,
            case_sensitive=bool(value),
        )

    @property
    def blocked_set(self) -> frozenset[str]:
        return frozenset(self.blocked_words)

    @property
    def phrase_set(self) -> frozenset[str]:
        return frozenset(self.user_phrases)


@dataclass(slots=True)
class AnalysisResult:
    """Ranked keywords and phrase statistics for one corpus."""

    keywords: list[KeywordCount] = field(default_factory=list)
    phrases: list[KeywordCount] = field(default_factory=list)
    title_count: int = 0
    case_sensitive: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.keywords and not self.phrases

    @property
    def max_count(self) -> int:
        return self.keywords[0].count if self.keywords else 1


def analyze_titles(
    titles: Sequence[str],
    snapshot: ConfigSnapshot | None = None,
    stop_words: StopWordSet | None = None,
    *,
    tokenizer: Tokenizer | None = None,
) -> AnalysisResult:
    """Rank keywords across *titles* using *snapshot* and *stop_words*.

    Every call rebuilds its candidate and frequency tables, so toggling case
    sensitivity and calling again never sees state from a previous run.
    """

    snapshot = snapshot or ConfigSnapshot()
    stop_words = stop_words or StopWordSet()
    tokenizer = tokenizer or Tokenizer()
    if not titles:
        return AnalysisResult(case_sensitive=snapshot.case_sensitive)

    matcher = DictionaryMatcher(snapshot.user_defined_words)
    candidate_sets = [
        collect_title_candidates(title, snapshot, stop_words, tokenizer, matcher=matcher)
        for title in titles
    ]
    return AnalysisResult(
        keywords=aggregate(candidate_sets, snapshot.case_sensitive),
        phrases=phrase_statistics(titles, snapshot.user_phrases, snapshot.case_sensitive),
        title_count=len(titles),
        case_sensitive=snapshot.case_sensitive,
    )


def analyze_videos(
    videos: Sequence[VideoRecord],
    snapshot: ConfigSnapshot | None = None,
    stop_words: StopWordSet | None = None,
    *,
    tokenizer: Tokenizer | None = None,
) -> AnalysisResult:
    """Rank keywords across the titles of ingested *videos*."""
    return analyze_titles(
        [video.title for video in videos],
        snapshot,
        stop_words,
        tokenizer=tokenizer,
    )


def load_videos(
    items: Iterable[VideoInput | Mapping[str, object] | str],
    snapshot: ConfigSnapshot | None = None,
    *,
    tokenizer: Tokenizer | None = None,
) -> list[VideoRecord]:
    """Ingest raw items into :class:`VideoRecord` objects."""
    return ingest_videos(items, snapshot or ConfigSnapshot(), tokenizer)


def tokenize_title(
    title: str,
    snapshot: ConfigSnapshot | None = None,
    *,
    tokenizer: Tokenizer | None = None,
) -> TokenizedTitle:
    """Tokenize *title* with the snapshot's user-defined words kept whole."""
    snapshot = snapshot or ConfigSnapshot()
    return (tokenizer or Tokenizer()).tokenize(title, snapshot.user_defined_words)


def filter_videos(
    keyword: str,
    videos: Sequence[VideoRecord],
    *,
    case_sensitive: bool = False,
) -> list[VideoRecord]:
    """Return the videos matching *keyword*."""
    clean = keyword.strip()
    if not clean:
        raise TitleLensError("Keyword must not be empty.")
    return match_videos(clean, videos, case_sensitive)
