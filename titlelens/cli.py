"""Command line interface for TitleLens."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import NoReturn, Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .aggregate import KeywordCount
from .api import AnalysisResult, ConfigSnapshot, TitleLensError, analyze_titles, tokenize_title
from .config import config_file_path
from .output import format_count_bar, format_viewed_at
from .services.config_service import apply_config_updates, get_config_snapshot, load_config_safe
from .services.corpus_service import load_corpus
from .services.stopword_service import (
    add_stop_words,
    load_stop_word_set,
    load_stop_words_blob,
    reset_stop_words_blob,
    save_stop_words_blob,
)
from .stopwords import parse_stop_words
from .text import Messages, Styles
from .utils import ensure_positive, normalize_word_list, resolve_file
from .videos import VideoInput, VideoRecord, ingest_videos, match_videos, unique_inputs

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    help=Messages.APP_HELP,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


class OutputFormat(str, Enum):
    rich = "rich"
    porcelain = "porcelain"
    json = "json"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"TitleLens v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    root = logging.getLogger()
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        root.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False)
        )
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _parse_boolean(value: str) -> bool:
    token = value.strip().lower()
    if token in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if token in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(Messages.ERROR_BOOLEAN_INVALID.format(value=value))


def _styled(text: str, style: str) -> str:
    return f"[{style}]{escape(text)}[/{style}]"


def _fail(message: str, output_format: OutputFormat = OutputFormat.rich) -> NoReturn:
    if output_format == OutputFormat.rich:
        console.print(_styled(message, Styles.ERROR))
    else:
        typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _notice(message: str, output_format: OutputFormat, style: str = Styles.WARNING) -> None:
    if output_format == OutputFormat.rich:
        console.print(_styled(message, style))
    else:
        typer.echo(message, err=True)


def _load_inputs(path: Path, output_format: OutputFormat) -> list[VideoInput]:
    try:
        return list(unique_inputs(load_corpus(path)))
    except TitleLensError as exc:
        _fail(str(exc), output_format)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help=Messages.HELP_VERBOSE),
) -> None:
    """Global Typer callback for shared options."""
    _configure_logging(verbose)


@app.command()
def analyze(
    path: Path = typer.Argument(..., help=Messages.HELP_CORPUS_PATH),
    top: int | None = typer.Option(None, "--top", "-k", help=Messages.HELP_TOP),
    case_sensitive: bool | None = typer.Option(
        None,
        "--case-sensitive/--ignore-case",
        "-c/-C",
        help=Messages.HELP_CASE_SENSITIVE,
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.rich,
        "--format",
        help=Messages.HELP_FORMAT,
    ),
) -> None:
    """Rank the keywords of every title in PATH."""
    limit = top if top is not None else load_config_safe().display_limit
    try:
        ensure_positive(limit, "top")
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    snapshot = get_config_snapshot(case_sensitive=case_sensitive)
    titles = [item.title for item in _load_inputs(path, output_format)]
    if not titles:
        _notice(Messages.INFO_NO_TITLES.format(path=path), output_format)
        raise typer.Exit(code=0)

    result = analyze_titles(titles, snapshot, load_stop_word_set())
    if output_format == OutputFormat.json:
        _render_analysis_json(result, limit)
        return
    if output_format == OutputFormat.porcelain:
        _render_analysis_porcelain(result, limit)
        return
    _render_analysis(result, limit)


@app.command("filter")
def filter_command(
    keyword: str = typer.Argument(..., help=Messages.HELP_KEYWORD),
    path: Path = typer.Argument(..., help=Messages.HELP_CORPUS_PATH),
    case_sensitive: bool | None = typer.Option(
        None,
        "--case-sensitive/--ignore-case",
        "-c/-C",
        help=Messages.HELP_CASE_SENSITIVE,
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.rich,
        "--format",
        help=Messages.HELP_FORMAT,
    ),
) -> None:
    """List the videos in PATH that contain KEYWORD."""
    clean_keyword = keyword.strip()
    if not clean_keyword:
        _fail(Messages.ERROR_EMPTY_KEYWORD, output_format)
    snapshot = get_config_snapshot(case_sensitive=case_sensitive)
    videos = ingest_videos(_load_inputs(path, output_format), snapshot)
    matched = match_videos(clean_keyword, videos, snapshot.case_sensitive)

    if output_format == OutputFormat.json:
        typer.echo(
            json.dumps(
                [
                    {"title": video.title, "id": video.id, "viewed_at": video.viewed_at}
                    for video in matched
                ],
                ensure_ascii=False,
                indent=2,
            )
        )
        return
    if not matched:
        _notice(Messages.INFO_NO_VIDEOS.format(keyword=clean_keyword), output_format)
        raise typer.Exit(code=0)
    if output_format == OutputFormat.porcelain:
        for video in matched:
            typer.echo(f"{video.id or '-'}\t{_escape_porcelain_field(video.title)}")
        return
    _render_videos(clean_keyword, matched)


@app.command()
def tokens(
    title: str = typer.Argument(..., help=Messages.HELP_TITLE),
) -> None:
    """Show how TITLE is split with the configured user-defined words."""
    snapshot = get_config_snapshot()
    tokenized = tokenize_title(title, snapshot)
    if not tokenized.raw_tokens:
        console.print(_styled(Messages.INFO_NO_TOKENS, Styles.WARNING))
        raise typer.Exit(code=0)
    table = Table(title=Messages.TABLE_TITLE_TOKENS, show_header=True, header_style=Styles.TABLE_HEADER)
    table.add_column(Messages.TABLE_HEADER_INDEX, justify="right")
    table.add_column(Messages.TABLE_HEADER_TOKEN)
    table.add_column(Messages.TABLE_HEADER_LOWER)
    for idx, (raw, lower) in enumerate(zip(tokenized.raw_tokens, tokenized.lower_tokens), start=1):
        table.add_row(str(idx), escape(raw), escape(lower))
    console.print(table)


@app.command()
def config(
    show: bool = typer.Option(False, "--show", help=Messages.HELP_SHOW_CONFIG),
    add_word: list[str] | None = typer.Option(None, "--add-word", help=Messages.HELP_ADD_WORD),
    remove_word: list[str] | None = typer.Option(None, "--remove-word", help=Messages.HELP_REMOVE_WORD),
    add_phrase: list[str] | None = typer.Option(None, "--add-phrase", help=Messages.HELP_ADD_PHRASE),
    remove_phrase: list[str] | None = typer.Option(
        None, "--remove-phrase", help=Messages.HELP_REMOVE_PHRASE
    ),
    add_blocked: list[str] | None = typer.Option(None, "--add-blocked", help=Messages.HELP_ADD_BLOCKED),
    remove_blocked: list[str] | None = typer.Option(
        None, "--remove-blocked", help=Messages.HELP_REMOVE_BLOCKED
    ),
    set_case_sensitive_option: str | None = typer.Option(
        None,
        "--set-case-sensitive",
        help=Messages.HELP_SET_CASE_SENSITIVE,
    ),
    set_display_limit_option: int | None = typer.Option(
        None,
        "--set-display-limit",
        help=Messages.HELP_SET_DISPLAY_LIMIT,
    ),
    set_json_option: str | None = typer.Option(
        None,
        "--set-json",
        help=Messages.HELP_SET_CONFIG_JSON,
    ),
    clear: bool = typer.Option(False, "--clear", help=Messages.HELP_CLEAR_CONFIG),
) -> None:
    """Manage user dictionaries and defaults."""
    case_value: bool | None = None
    if set_case_sensitive_option is not None:
        try:
            case_value = _parse_boolean(set_case_sensitive_option)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
    if set_display_limit_option is not None:
        try:
            ensure_positive(set_display_limit_option, "display limit")
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc

    try:
        result = apply_config_updates(
            add_word=add_word,
            remove_word=remove_word,
            add_phrase=add_phrase,
            remove_phrase=remove_phrase,
            add_blocked=add_blocked,
            remove_blocked=remove_blocked,
            case_sensitive=case_value,
            display_limit=set_display_limit_option,
            config_json=set_json_option,
            clear=clear,
        )
    except ValueError as exc:
        _fail(str(exc))

    if result.cleared:
        console.print(_styled(Messages.INFO_CONFIG_CLEARED, Styles.SUCCESS))
    _report_word_changes(Messages.LABEL_WORDS, result.words_added, result.words_removed, add_word, remove_word)
    _report_word_changes(
        Messages.LABEL_PHRASES, result.phrases_added, result.phrases_removed, add_phrase, remove_phrase
    )
    _report_word_changes(
        Messages.LABEL_BLOCKED, result.blocked_added, result.blocked_removed, add_blocked, remove_blocked
    )
    if result.case_sensitive_set or result.display_limit_set or result.json_applied:
        console.print(_styled(Messages.INFO_CONFIG_UPDATED, Styles.SUCCESS))

    if show or not result.changed:
        _render_config_summary()


@app.command()
def stopwords(
    show: bool = typer.Option(False, "--show", help=Messages.HELP_STOPWORDS_SHOW),
    set_file: Path | None = typer.Option(None, "--set-file", help=Messages.HELP_STOPWORDS_SET_FILE),
    add: list[str] | None = typer.Option(None, "--add", help=Messages.HELP_STOPWORDS_ADD),
    reset: bool = typer.Option(False, "--reset", help=Messages.HELP_STOPWORDS_RESET),
) -> None:
    """Inspect or edit the stop-word list (15 comma-separated words per line)."""
    if reset:
        text = reset_stop_words_blob()
        words, _ = parse_stop_words(text)
        console.print(_styled(Messages.INFO_STOPWORDS_RESET.format(count=len(words)), Styles.SUCCESS))
    if set_file is not None:
        try:
            source = resolve_file(set_file)
            text = source.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            _fail(Messages.ERROR_CORPUS_READ.format(path=set_file, reason=exc))
        words, truncated = parse_stop_words(text)
        target = save_stop_words_blob(text)
        console.print(
            _styled(
                Messages.INFO_STOPWORDS_SAVED.format(path=target, count=len(words)),
                Styles.SUCCESS,
            )
        )
        _warn_truncated(truncated)
    if add:
        added = add_stop_words(list(normalize_word_list(add)))
        if added:
            console.print(
                _styled(
                    Messages.INFO_WORDS_ADDED.format(label="stop words", words=", ".join(added)),
                    Styles.SUCCESS,
                )
            )
        else:
            console.print(_styled(Messages.INFO_WORDS_UNCHANGED.format(label="stop words"), Styles.INFO))
    if show or not (reset or set_file is not None or add):
        text = load_stop_words_blob()
        if not text.strip():
            console.print(_styled(Messages.INFO_STOPWORDS_EMPTY, Styles.WARNING))
            return
        typer.echo(text.rstrip("\n"))


def _warn_truncated(lines: Sequence[int]) -> None:
    if lines:
        console.print(
            _styled(
                Messages.WARNING_STOPWORDS_TRUNCATED.format(
                    lines=", ".join(str(line) for line in lines)
                ),
                Styles.WARNING,
            )
        )


def _report_word_changes(
    label: str,
    added: Sequence[str],
    removed: Sequence[str],
    requested_add: Sequence[str] | None,
    requested_remove: Sequence[str] | None,
) -> None:
    if added:
        console.print(_styled(Messages.INFO_WORDS_ADDED.format(label=label, words=", ".join(added)), Styles.SUCCESS))
    if removed:
        console.print(
            _styled(Messages.INFO_WORDS_REMOVED.format(label=label, words=", ".join(removed)), Styles.SUCCESS)
        )
    if (requested_add or requested_remove) and not added and not removed:
        console.print(_styled(Messages.INFO_WORDS_UNCHANGED.format(label=label), Styles.INFO))


def _format_word_list(words: Sequence[str]) -> str:
    return ", ".join(words) if words else Messages.LABEL_NONE


def _render_config_summary() -> None:
    stored = load_config_safe()
    snapshot_config = ConfigSnapshot.from_config(stored)
    limit = stored.display_limit
    console.print(
        _styled(
            Messages.INFO_CONFIG_SUMMARY.format(
                path=config_file_path(),
                words=_format_word_list(snapshot_config.user_defined_words),
                phrases=_format_word_list(snapshot_config.user_phrases),
                blocked=_format_word_list(snapshot_config.blocked_words),
                case="yes" if snapshot_config.case_sensitive else "no",
                limit=limit,
            ),
            Styles.INFO,
        )
    )


def _keyword_table(title: str, entries: Sequence[KeywordCount], max_count: int) -> Table:
    table = Table(title=title, show_header=True, header_style=Styles.TABLE_HEADER)
    table.add_column(Messages.TABLE_HEADER_INDEX, justify="right")
    table.add_column(Messages.TABLE_HEADER_KEYWORD, overflow="fold")
    table.add_column(Messages.TABLE_HEADER_COUNT, justify="right")
    table.add_column(Messages.TABLE_HEADER_BAR)
    for idx, entry in enumerate(entries, start=1):
        table.add_row(
            str(idx),
            escape(entry.word),
            str(entry.count),
            format_count_bar(entry.count, max_count, console),
        )
    return table


def _render_analysis(result: AnalysisResult, limit: int) -> None:
    plural = "" if result.title_count == 1 else "s"
    mode = Messages.MODE_CASE_SENSITIVE if result.case_sensitive else Messages.MODE_CASE_INSENSITIVE
    console.print(_styled(Messages.INFO_ANALYZED.format(count=result.title_count, plural=plural), Styles.INFO))
    console.print(_styled(f"{Messages.TABLE_MODE_PREFIX}{mode}", Styles.INFO))
    if not result.keywords:
        console.print(_styled(Messages.INFO_NO_KEYWORDS, Styles.WARNING))
    else:
        console.print(_keyword_table(Messages.TABLE_TITLE_KEYWORDS, result.keywords[:limit], result.max_count))
    if result.phrases:
        console.print(_keyword_table(Messages.TABLE_TITLE_PHRASES, result.phrases, result.max_count))


def _escape_porcelain_field(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace("\t", "\\t")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def _render_analysis_porcelain(result: AnalysisResult, limit: int) -> None:
    for idx, entry in enumerate(result.keywords[:limit], start=1):
        typer.echo(f"keyword\t{idx}\t{_escape_porcelain_field(entry.word)}\t{entry.count}")
    for idx, entry in enumerate(result.phrases, start=1):
        typer.echo(f"phrase\t{idx}\t{_escape_porcelain_field(entry.word)}\t{entry.count}")


def _render_analysis_json(result: AnalysisResult, limit: int) -> None:
    payload = {
        "titles": result.title_count,
        "case_sensitive": result.case_sensitive,
        "keywords": [{"word": entry.word, "count": entry.count} for entry in result.keywords[:limit]],
        "phrases": [{"word": entry.word, "count": entry.count} for entry in result.phrases],
    }
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _render_videos(keyword: str, videos: Sequence[VideoRecord]) -> None:
    table = Table(
        title=Messages.TABLE_TITLE_VIDEOS.format(keyword=escape(keyword), count=len(videos)),
        show_header=True,
        header_style=Styles.TABLE_HEADER,
    )
    table.add_column(Messages.TABLE_HEADER_INDEX, justify="right")
    table.add_column(Messages.TABLE_HEADER_TITLE, overflow="fold")
    table.add_column(Messages.TABLE_HEADER_ID)
    table.add_column(Messages.TABLE_HEADER_VIEWED)
    for idx, video in enumerate(videos, start=1):
        table.add_row(
            str(idx),
            escape(video.title),
            escape(video.id or "-"),
            format_viewed_at(video.viewed_at),
        )
    console.print(table)


def run(argv: list[str] | None = None) -> None:
    """Entry point wrapper allowing optional argument override."""
    if argv is None:
        app()
    else:
        app(args=list(argv))
