"""Keyword candidate filtering and per-title phrase extraction."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING

from .matcher import DictionaryMatcher, build_term_pattern
from .stopwords import StopWordSet
from .tokenizer import Tokenizer

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .api import ConfigSnapshot

PHRASE_SEPARATOR = " "

_WHITELIST_RE = re.compile(r"[\u4e00-\u9fa5a-zA-Z0-9]+")


def _is_punct_or_symbol(char: str) -> bool:
    return unicodedata.category(char)[0] in ("P", "S")


def _all_punct_or_symbol(token: str) -> bool:
    return all(_is_punct_or_symbol(char) for char in token)


def _all_digit_punct_or_symbol(token: str) -> bool:
    return all(
        unicodedata.category(char) == "Nd" or _is_punct_or_symbol(char) for char in token
    )


def is_candidate(
    token: str,
    stop_words: StopWordSet,
    blocked_words: Collection[str] = (),
    phrases: Collection[str] = (),
) -> bool:
    """Return True when *token* should count as a keyword candidate."""

    if len(token) <= 1:
        return False
    if token in stop_words.built_in or token in stop_words.loaded:
        return False
    if token in blocked_words or token in phrases:
        return False
    if not _WHITELIST_RE.fullmatch(token):
        return False
    if token.isdigit():
        return False
    if _all_punct_or_symbol(token) or _all_digit_punct_or_symbol(token):
        return False
    return True


def extract_phrases(
    title: str,
    phrases: Iterable[str],
    case_sensitive: bool = False,
) -> tuple[list[str], str]:
    """Find configured *phrases* in *title* and blank them out.

    Phrases are tried in configuration order against the progressively
    blanked text, so an earlier phrase claims overlapping text first. Each
    found phrase is reported once, using its configured spelling.
    """

    found: list[str] = []
    text = title
    for phrase in phrases:
        if not phrase:
            continue
        pattern = build_term_pattern(phrase, case_sensitive)
        if pattern.search(text) is None:
            continue
        if phrase not in found:
            found.append(phrase)
        text = pattern.sub(PHRASE_SEPARATOR, text)
    return found, text


def collect_title_candidates(
    title: str,
    snapshot: "ConfigSnapshot",
    stop_words: StopWordSet,
    tokenizer: Tokenizer,
    *,
    matcher: DictionaryMatcher | None = None,
) -> list[str]:
    """Return the ordered, unique candidate words of one title."""

    candidates: dict[str, None] = {}
    phrase_set = snapshot.phrase_set
    processed = title
    if snapshot.user_phrases:
        found, processed = extract_phrases(
            title, snapshot.user_phrases, snapshot.case_sensitive
        )
        candidates.update(dict.fromkeys(found))

    atomic = matcher if matcher is not None else DictionaryMatcher(snapshot.user_defined_words)
    tokenized = tokenizer.tokenize(processed, atomic)
    blocked = snapshot.blocked_set
    for word in tokenized.raw_tokens:
        if word in candidates:
            continue
        if is_candidate(word, stop_words, blocked, phrase_set):
            candidates[word] = None
    return list(candidates)
