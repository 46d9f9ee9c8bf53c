"""Chinese-aware word segmentation backed by jieba."""

from __future__ import annotations

import logging
import re

import jieba

logger = logging.getLogger(__name__)

# jieba prints dictionary build timings at INFO/DEBUG.
jieba.setLogLevel(logging.WARNING)

# Han runs go to jieba; any other run of Unicode word characters is one span.
_HAN = r"\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff"
_RUN_RE = re.compile(rf"([{_HAN}]+)|([^\W{_HAN}]+)")


class Segmenter:
    """Split text into word-like spans.

    Chinese runs are cut with jieba's precise mode. Other scripts are split at
    Unicode word boundaries, so "Pokémon" or "Vue3" stays a single span.
    Punctuation and whitespace are dropped.
    """

    def __init__(self, *, hmm: bool = True, dictionary: str | None = None) -> None:
        self.hmm = hmm
        self._tokenizer = jieba.Tokenizer() if dictionary is None else jieba.Tokenizer(dictionary)

    def segment(self, text: str) -> list[str]:
        """Return trimmed, non-empty spans for *text*."""
        if not text or text.isspace():
            return []
        spans: list[str] = []
        for match in _RUN_RE.finditer(text):
            han, other = match.groups()
            if other is not None:
                spans.append(other)
                continue
            for piece in self._tokenizer.cut(han, HMM=self.hmm):
                word = piece.strip()
                if word:
                    spans.append(word)
        return spans


_DEFAULT_SEGMENTER: Segmenter | None = None


def default_segmenter() -> Segmenter:
    """Return the shared process-wide segmenter, creating it on first use."""
    global _DEFAULT_SEGMENTER
    if _DEFAULT_SEGMENTER is None:
        logger.debug("Initialising jieba segmenter")
        _DEFAULT_SEGMENTER = Segmenter()
    return _DEFAULT_SEGMENTER
