"""Logic helpers for the `titlelens config` command."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..api import ConfigSnapshot
from ..config import (
    Config,
    add_words,
    load_config,
    remove_words,
    save_config,
    set_case_sensitive,
    set_display_limit,
    update_config_from_json,
)
from ..text import Messages

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ConfigUpdateResult:
    words_added: list[str] = field(default_factory=list)
    words_removed: list[str] = field(default_factory=list)
    phrases_added: list[str] = field(default_factory=list)
    phrases_removed: list[str] = field(default_factory=list)
    blocked_added: list[str] = field(default_factory=list)
    blocked_removed: list[str] = field(default_factory=list)
    case_sensitive_set: bool = False
    display_limit_set: bool = False
    json_applied: bool = False
    cleared: bool = False

    @property
    def changed(self) -> bool:
        return any(
            (
                self.words_added,
                self.words_removed,
                self.phrases_added,
                self.phrases_removed,
                self.blocked_added,
                self.blocked_removed,
                self.case_sensitive_set,
                self.display_limit_set,
                self.json_applied,
                self.cleared,
            )
        )


def apply_config_updates(
    *,
    add_word: Sequence[str] | None = None,
    remove_word: Sequence[str] | None = None,
    add_phrase: Sequence[str] | None = None,
    remove_phrase: Sequence[str] | None = None,
    add_blocked: Sequence[str] | None = None,
    remove_blocked: Sequence[str] | None = None,
    case_sensitive: bool | None = None,
    display_limit: int | None = None,
    config_json: str | None = None,
    clear: bool = False,
) -> ConfigUpdateResult:
    """Apply config mutations and report which fields were updated."""

    result = ConfigUpdateResult()
    if clear:
        save_config(Config())
        result.cleared = True
    if config_json is not None:
        update_config_from_json(config_json)
        result.json_applied = True
    if add_word:
        result.words_added = add_words("user_defined_words", add_word)
    if remove_word:
        result.words_removed = remove_words("user_defined_words", remove_word)
    if add_phrase:
        result.phrases_added = add_words("user_phrases", add_phrase)
    if remove_phrase:
        result.phrases_removed = remove_words("user_phrases", remove_phrase)
    if add_blocked:
        result.blocked_added = add_words("blocked_words", add_blocked)
    if remove_blocked:
        result.blocked_removed = remove_words("blocked_words", remove_blocked)
    if case_sensitive is not None:
        set_case_sensitive(case_sensitive)
        result.case_sensitive_set = True
    if display_limit is not None:
        set_display_limit(display_limit)
        result.display_limit_set = True
    return result


def load_config_safe() -> Config:
    """Load the stored config, falling back to defaults when it is unreadable."""

    try:
        return load_config()
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError.
        reason = exc.msg if isinstance(exc, json.JSONDecodeError) else str(exc)
        logger.warning(Messages.WARNING_CONFIG_UNAVAILABLE.format(reason=reason))
        return Config()


def get_config_snapshot(*, case_sensitive: bool | None = None) -> ConfigSnapshot:
    """Return an immutable snapshot of the current configuration."""

    return ConfigSnapshot.from_config(load_config_safe(), case_sensitive=case_sensitive)
