"""Small normalization helpers shared by config, API and CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


def clean_word_list(values: Iterable[str | None] | None) -> tuple[str, ...]:
    """Return trimmed, deduplicated words in their original order."""
    if not values:
        return ()
    words = (str(raw).strip() for raw in values if raw is not None)
    return tuple(dict.fromkeys(word for word in words if word))


def normalize_word_list(values: Iterable[str | None] | None) -> tuple[str, ...]:
    """Like :func:`clean_word_list`, but each value may hold several
    comma-separated words, as typed on the command line.
    """
    if not values:
        return ()
    return clean_word_list(
        part for raw in values if raw is not None for part in str(raw).split(",")
    )


def resolve_file(path: Path | str) -> Path:
    """Resolve and validate a user supplied file path."""
    file_path = Path(path).expanduser().resolve()
    if not file_path.exists():
        raise FileNotFoundError(f"File does not exist: {file_path}")
    if file_path.is_dir():
        raise IsADirectoryError(f"Path is a directory: {file_path}")
    return file_path


def ensure_positive(value: int, name: str) -> int:
    """Validate that *value* is positive."""
    if value <= 0:
        raise ValueError(f"{name} must be greater than 0")
    return value
