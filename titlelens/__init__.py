"""TitleLens package initialization."""

from __future__ import annotations

from .aggregate import KeywordCount, aggregate, phrase_statistics
from .api import (
    AnalysisResult,
    ConfigSnapshot,
    TitleLensError,
    analyze_titles,
    analyze_videos,
    filter_videos,
    load_videos,
    tokenize_title,
)
from .matcher import DictionaryMatcher, compile_terms
from .stopwords import StopWordSet
from .videos import FilterState, VideoRecord, match_videos

__all__ = [
    "__version__",
    "AnalysisResult",
    "ConfigSnapshot",
    "DictionaryMatcher",
    "FilterState",
    "KeywordCount",
    "StopWordSet",
    "TitleLensError",
    "VideoRecord",
    "aggregate",
    "analyze_titles",
    "analyze_videos",
    "compile_terms",
    "filter_videos",
    "get_version",
    "load_videos",
    "match_videos",
    "phrase_statistics",
    "tokenize_title",
]

__version__ = "0.3.0"


def get_version() -> str:
    """Return the current package version."""
    return __version__
