"""Helpers for formatting CLI output safely across terminals."""

from __future__ import annotations

import sys
from datetime import datetime

from rich.console import Console

BAR_WIDTH = 20


def _encoding_supports(text: str, encoding: str | None) -> bool:
    if not encoding:
        return False
    try:
        text.encode(encoding)
    except (LookupError, UnicodeEncodeError):
        return False
    return True


def supports_unicode_output(console: Console | None = None) -> bool:
    sample = "█▏"
    if console is not None and _encoding_supports(sample, console.encoding):
        return True
    return _encoding_supports(sample, sys.stdout.encoding)


def format_count_bar(
    count: int,
    max_count: int,
    console: Console | None = None,
    width: int = BAR_WIDTH,
) -> str:
    """Render *count* relative to *max_count* as a fixed-width bar."""
    if max_count <= 0 or count <= 0 or width <= 0:
        return ""
    filled = max(1, round(width * min(count, max_count) / max_count))
    char = "█" if supports_unicode_output(console) else "#"
    return char * filled


def format_viewed_at(value: int | None) -> str:
    if not value:
        return "-"
    return datetime.fromtimestamp(value).strftime("%m-%d %H:%M")
