"""Persisted user dictionaries and display defaults for TitleLens."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable

from .text import Messages
from .utils import clean_word_list, normalize_word_list

DEFAULT_CONFIG_DIR = Path(os.path.expanduser("~")) / ".titlelens"
CONFIG_DIR = DEFAULT_CONFIG_DIR
CONFIG_FILE = CONFIG_DIR / "config.json"
STOPWORDS_FILENAME = "stopwords.txt"
DEFAULT_CASE_SENSITIVE = False
DEFAULT_DISPLAY_LIMIT = 30
WORD_LIST_FIELDS: tuple[str, ...] = ("blocked_words", "user_phrases", "user_defined_words")

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


@dataclass
class Config:
    blocked_words: list[str] = field(default_factory=list)
    user_phrases: list[str] = field(default_factory=list)
    user_defined_words: list[str] = field(default_factory=list)
    case_sensitive: bool = DEFAULT_CASE_SENSITIVE
    display_limit: int = DEFAULT_DISPLAY_LIMIT

    def to_json(self) -> dict[str, object]:
        payload: dict[str, object] = {
            name: list(clean_word_list(getattr(self, name))) for name in WORD_LIST_FIELDS
        }
        payload["case_sensitive"] = bool(self.case_sensitive)
        payload["display_limit"] = self.display_limit
        return payload


def config_file_path() -> Path:
    return CONFIG_FILE


def stopwords_cache_path() -> Path:
    return CONFIG_DIR / STOPWORDS_FILENAME


def load_config() -> Config:
    """Read the stored config; a missing file means defaults."""
    if not CONFIG_FILE.exists():
        return Config()
    return config_from_json(json.loads(CONFIG_FILE.read_text(encoding="utf-8")))


def save_config(config: Config) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(
        json.dumps(config.to_json(), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )


def config_from_json(
    payload: str | Mapping[str, object], *, base: Config | None = None
) -> Config:
    """Build a Config from JSON text or a mapping, layered over *base*.

    Stored words are kept as written apart from trimming; commas inside a
    stored phrase are part of the phrase.
    """

    data = _decode(payload)
    config = Config() if base is None else replace(base)
    for name in WORD_LIST_FIELDS:
        if name in data:
            setattr(config, name, _word_list(data[name], name))
    if "case_sensitive" in data:
        config.case_sensitive = _flag(data["case_sensitive"], "case_sensitive")
    if "display_limit" in data:
        config.display_limit = _display_limit(data["display_limit"])
    return config


def update_config_from_json(
    payload: str | Mapping[str, object], *, replace: bool = False
) -> Config:
    """Merge *payload* into the stored config (or replace it) and save."""
    config = config_from_json(payload, base=None if replace else load_config())
    save_config(config)
    return config


def add_words(field_name: str, values: Iterable[str]) -> list[str]:
    """Append comma-separated *values* to a word list; return the new words."""
    config = load_config()
    current = _word_field(config, field_name)
    added = [word for word in normalize_word_list(values) if word not in current]
    if added:
        setattr(config, field_name, current + added)
        save_config(config)
    return added


def remove_words(field_name: str, values: Iterable[str]) -> list[str]:
    """Drop comma-separated *values* from a word list; return what was removed."""
    config = load_config()
    current = _word_field(config, field_name)
    targets = set(normalize_word_list(values))
    removed = [word for word in current if word in targets]
    if removed:
        setattr(config, field_name, [word for word in current if word not in targets])
        save_config(config)
    return removed


def set_case_sensitive(value: bool) -> None:
    config = load_config()
    config.case_sensitive = bool(value)
    save_config(config)


def set_display_limit(value: int) -> None:
    config = load_config()
    config.display_limit = _display_limit(value)
    save_config(config)


def _invalid(field_name: str) -> ValueError:
    return ValueError(Messages.ERROR_CONFIG_VALUE_INVALID.format(field=field_name))


def _word_field(config: Config, field_name: str) -> list[str]:
    if field_name not in WORD_LIST_FIELDS:
        raise _invalid(field_name)
    return list(getattr(config, field_name))


def _decode(payload: str | Mapping[str, object]) -> Mapping[str, object]:
    data: object = payload
    if isinstance(payload, str):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValueError(Messages.ERROR_CONFIG_JSON_INVALID) from exc
    if not isinstance(data, Mapping):
        raise ValueError(Messages.ERROR_CONFIG_JSON_INVALID)
    return data


def _word_list(value: object, field_name: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise _invalid(field_name)
    return list(clean_word_list(value))


def _flag(value: object, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _TRUE_WORDS:
            return True
        if token in _FALSE_WORDS:
            return False
    raise _invalid(field_name)


def _display_limit(value: object) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        return DEFAULT_DISPLAY_LIMIT
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError as exc:
            raise _invalid("display_limit") from exc
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise _invalid("display_limit")
    return value
