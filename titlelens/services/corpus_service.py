"""Read video titles from local export files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..api import TitleLensError
from ..text import Messages
from ..utils import resolve_file
from ..videos import VideoInput

JSON_SUFFIXES = frozenset({".json"})
JSONL_SUFFIXES = frozenset({".jsonl", ".ndjson"})


def load_corpus(path: Path | str) -> list[VideoInput]:
    """Return the titles stored in *path*.

    ``.json`` files hold a list (or an object with a ``list``/``videos`` key)
    of title strings or objects; ``.jsonl`` files hold one entry per line; any
    other file is read as one title per line.
    """

    try:
        file_path = resolve_file(path)
        text = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise TitleLensError(Messages.ERROR_CORPUS_READ.format(path=path, reason=exc)) from exc

    suffix = file_path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise TitleLensError(
                Messages.ERROR_CORPUS_READ.format(path=path, reason=exc.msg)
            ) from exc
        entries = _unwrap_container(payload)
        return [_coerce_entry(entry, f"{file_path.name}[{idx}]") for idx, entry in enumerate(entries)]
    if suffix in JSONL_SUFFIXES:
        return list(_iter_jsonl(text, file_path.name))
    return [VideoInput(title=line.strip()) for line in text.splitlines() if line.strip()]


def _unwrap_container(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        # Bilibili API responses nest the list under data.list.
        data = payload.get("data")
        if isinstance(data, dict) and isinstance(data.get("list"), list):
            return data["list"]
        for key in ("list", "videos", "items"):
            if isinstance(payload.get(key), list):
                return payload[key]
    raise TitleLensError(Messages.ERROR_CORPUS_FORMAT.format(location="root"))


def _iter_jsonl(text: str, name: str) -> Iterable[VideoInput]:
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        location = f"{name}:{line_no}"
        try:
            entry = json.loads(line)
        except json.JSONDecodeError as exc:
            raise TitleLensError(Messages.ERROR_CORPUS_FORMAT.format(location=location)) from exc
        yield _coerce_entry(entry, location)


def _coerce_entry(entry: Any, location: str) -> VideoInput:
    if isinstance(entry, str):
        return VideoInput(title=entry)
    if not isinstance(entry, dict) or not isinstance(entry.get("title"), str):
        raise TitleLensError(Messages.ERROR_CORPUS_FORMAT.format(location=location))
    raw_id = entry.get("id", entry.get("bvid"))
    raw_viewed = entry.get("viewed_at", entry.get("view_at"))
    viewed_at = raw_viewed if isinstance(raw_viewed, int) and not isinstance(raw_viewed, bool) else None
    return VideoInput(
        title=entry["title"],
        id=str(raw_id) if raw_id not in (None, "") else None,
        viewed_at=viewed_at or None,
    )
