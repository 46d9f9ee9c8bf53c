"""Load and persist the cached stop-word blob."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from ..config import stopwords_cache_path
from ..stopwords import StopWordSet, format_stop_words, parse_stop_words
from ..text import Messages

logger = logging.getLogger(__name__)

BUNDLED_PACKAGE = "titlelens.data"
BUNDLED_FILENAME = "stopwords.txt"


def read_bundled_stop_words() -> str:
    """Return the stop-word list shipped with the package."""
    return (
        resources.files(BUNDLED_PACKAGE)
        .joinpath(BUNDLED_FILENAME)
        .read_text(encoding="utf-8")
    )


def load_stop_words_blob() -> str:
    """Return the cached blob, seeding the cache from the bundled list.

    Any failure is logged and yields an empty blob so analysis can continue
    with only the built-in punctuation set.
    """

    cache = stopwords_cache_path()
    try:
        if cache.is_file():
            text = cache.read_text(encoding="utf-8")
            if text.strip():
                return text
        text = read_bundled_stop_words()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(Messages.WARNING_STOPWORDS_UNAVAILABLE.format(reason=exc))
        return ""
    try:
        _write_cache(cache, text)
    except OSError as exc:
        logger.debug("Unable to write stop-word cache %s: %s", cache, exc)
    return text


def load_stop_word_set() -> StopWordSet:
    return StopWordSet.from_blob(load_stop_words_blob())


def save_stop_words_blob(text: str) -> Path:
    """Persist *text* as the cached stop-word blob."""
    cache = stopwords_cache_path()
    _write_cache(cache, text or "")
    return cache


def add_stop_words(words: list[str] | tuple[str, ...]) -> list[str]:
    """Append *words* to the cached list, returning the ones that were new."""
    existing, _ = parse_stop_words(load_stop_words_blob())
    added = [word for word in dict.fromkeys(words) if word and word not in existing]
    if added:
        save_stop_words_blob(format_stop_words(existing + added))
    return added


def reset_stop_words_blob() -> str:
    """Replace the cache with the bundled list and return it."""
    text = read_bundled_stop_words()
    save_stop_words_blob(text)
    return text


def _write_cache(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
