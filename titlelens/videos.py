"""Video records and keyword-to-video membership lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Sequence, TYPE_CHECKING

from .matcher import DictionaryMatcher, build_term_pattern
from .tokenizer import Tokenizer

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .api import ConfigSnapshot


@dataclass(frozen=True, slots=True)
class VideoRecord:
    """A title with the tokens computed when it was ingested."""

    title: str
    id: str | None = None
    raw_tokens: tuple[str, ...] = ()
    lower_tokens: tuple[str, ...] = ()
    viewed_at: int | None = None
    tokenized_with: tuple[str, ...] = ()

    def is_current(self, snapshot: "ConfigSnapshot") -> bool:
        """Return True if the tokens were built with *snapshot*'s atomic terms."""
        return self.tokenized_with == DictionaryMatcher(snapshot.user_defined_words).terms


@dataclass(frozen=True, slots=True)
class VideoInput:
    title: str
    id: str | None = None
    viewed_at: int | None = None


def _coerce_input(item: VideoInput | Mapping[str, object] | str) -> VideoInput:
    if isinstance(item, VideoInput):
        return item
    if isinstance(item, str):
        return VideoInput(title=item)
    title = str(item.get("title") or "")
    raw_id = item.get("id", item.get("bvid"))
    raw_viewed = item.get("viewed_at", item.get("view_at"))
    viewed_at: int | None
    try:
        viewed_at = int(raw_viewed) if raw_viewed not in (None, "") else None
    except (TypeError, ValueError):
        viewed_at = None
    return VideoInput(
        title=title,
        id=str(raw_id) if raw_id not in (None, "") else None,
        viewed_at=viewed_at or None,
    )


def unique_inputs(
    items: Iterable[VideoInput | Mapping[str, object] | str],
) -> Iterator[VideoInput]:
    """Yield trimmed inputs, skipping empty titles and ids seen before."""
    seen_ids: set[str] = set()
    for raw in items:
        item = _coerce_input(raw)
        title = item.title.strip()
        if not title:
            continue
        if item.id is not None:
            if item.id in seen_ids:
                continue
            seen_ids.add(item.id)
        yield VideoInput(title=title, id=item.id, viewed_at=item.viewed_at)


def ingest_videos(
    items: Iterable[VideoInput | Mapping[str, object] | str],
    snapshot: "ConfigSnapshot",
    tokenizer: Tokenizer | None = None,
) -> list[VideoRecord]:
    """Tokenize each item once, dropping empty titles and repeated ids."""

    tokenizer = tokenizer or Tokenizer()
    matcher = DictionaryMatcher(snapshot.user_defined_words)
    records: list[VideoRecord] = []
    for item in unique_inputs(items):
        tokens = tokenizer.tokenize(item.title, matcher)
        records.append(
            VideoRecord(
                title=item.title,
                id=item.id,
                raw_tokens=tokens.raw_tokens,
                lower_tokens=tokens.lower_tokens,
                viewed_at=item.viewed_at,
                tokenized_with=matcher.terms,
            )
        )
    return records


def match_videos(
    keyword: str,
    corpus: Sequence[VideoRecord],
    case_sensitive: bool = False,
) -> list[VideoRecord]:
    """Return records whose title contains *keyword*.

    Titles are scanned with the keyword's boundary-aware pattern first. When
    nothing matches, records holding the keyword as an exact token are used.
    """

    if not keyword or not corpus:
        return []
    pattern = build_term_pattern(keyword, case_sensitive)
    matched = [video for video in corpus if pattern.search(video.title)]
    if matched:
        return matched
    lower = keyword.lower()
    return [video for video in corpus if lower in video.lower_tokens]


@dataclass(frozen=True, slots=True)
class FilterState:
    """Keyword filter currently applied to a video list."""

    active_keyword: str | None = None

    @property
    def active(self) -> bool:
        return self.active_keyword is not None

    def toggle(
        self,
        keyword: str,
        corpus: Sequence[VideoRecord],
        case_sensitive: bool = False,
    ) -> tuple["FilterState", list[VideoRecord]]:
        """Apply *keyword*, or clear the filter if it is already active."""
        if self.active_keyword == keyword:
            return FilterState(), list(corpus)
        return FilterState(keyword), match_videos(keyword, corpus, case_sensitive)

    def apply(
        self,
        corpus: Sequence[VideoRecord],
        case_sensitive: bool = False,
    ) -> list[VideoRecord]:
        if self.active_keyword is None:
            return list(corpus)
        return match_videos(self.active_keyword, corpus, case_sensitive)
