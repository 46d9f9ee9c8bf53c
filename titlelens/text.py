"""Centralized user-facing text for TitleLens CLI."""

from __future__ import annotations


class Styles:
    ERROR = "red"
    WARNING = "yellow"
    SUCCESS = "green"
    INFO = "dim"
    TITLE = "bold cyan"
    TABLE_HEADER = "bold magenta"


class Messages:
    APP_HELP = "TitleLens - keyword frequency analysis for mixed Chinese/English video titles."
    HELP_CORPUS_PATH = "File with titles: .json, .jsonl or plain text (one title per line)."
    HELP_TOP = "Number of keywords to display (defaults to the configured display limit)."
    HELP_CASE_SENSITIVE = "Count keywords case-sensitively (overrides the configured default)."
    HELP_FORMAT = "Output format: rich table, tab-separated porcelain, or json."
    HELP_KEYWORD = "Keyword whose videos should be listed."
    HELP_TITLE = "Title to tokenize with the current dictionary."
    HELP_VERBOSE = "Show debug logging."
    HELP_SHOW_CONFIG = "Show current configuration."
    HELP_ADD_WORD = "Add user-defined words that must never be split (comma-separated allowed)."
    HELP_REMOVE_WORD = "Remove user-defined words."
    HELP_ADD_PHRASE = "Add phrases counted as a whole, once per title."
    HELP_REMOVE_PHRASE = "Remove phrases."
    HELP_ADD_BLOCKED = "Add blocked words that never appear as keywords."
    HELP_REMOVE_BLOCKED = "Remove blocked words."
    HELP_SET_CASE_SENSITIVE = "Set the default case sensitivity (true/false)."
    HELP_SET_DISPLAY_LIMIT = "Set how many keywords are shown by default."
    HELP_SET_CONFIG_JSON = "Merge a JSON object into the stored configuration."
    HELP_CLEAR_CONFIG = "Reset the configuration to defaults."
    HELP_STOPWORDS_SHOW = "Print the stop-word file contents."
    HELP_STOPWORDS_SET_FILE = "Replace the cached stop-word list with the contents of a file."
    HELP_STOPWORDS_ADD = "Append stop words (comma-separated allowed)."
    HELP_STOPWORDS_RESET = "Restore the bundled stop-word list."

    ERROR_CONFIG_JSON_INVALID = "Config JSON must be an object."
    ERROR_CONFIG_VALUE_INVALID = "Config value for {field} is invalid."
    ERROR_BOOLEAN_INVALID = "Invalid boolean value '{value}'. Use true/false."
    ERROR_EMPTY_KEYWORD = "Keyword must not be empty."
    ERROR_CORPUS_READ = "Unable to read titles from {path}: {reason}"
    ERROR_CORPUS_FORMAT = "Unsupported entry at {location}; expected a title string or an object with a title."

    WARNING_CONFIG_UNAVAILABLE = "Configuration could not be loaded ({reason}); using empty word lists."
    WARNING_STOPWORDS_UNAVAILABLE = "Stop-word list could not be loaded ({reason}); using built-in punctuation only."
    WARNING_STOPWORDS_TRUNCATED = "Stop-word lines {lines} exceed 15 terms; extra terms were ignored."

    INFO_NO_TITLES = "No titles found in {path}."
    INFO_NO_KEYWORDS = "No keywords found."
    INFO_NO_VIDEOS = "No videos contain '{keyword}'."
    INFO_NO_TOKENS = "No tokens produced."
    INFO_CONFIG_UPDATED = "Configuration updated."
    INFO_CONFIG_CLEARED = "Configuration reset to defaults."
    INFO_CONFIG_SUMMARY = (
        "Config file: {path}\n"
        "User-defined words: {words}\n"
        "Phrases: {phrases}\n"
        "Blocked words: {blocked}\n"
        "Case sensitive: {case}\n"
        "Display limit: {limit}"
    )
    INFO_WORDS_ADDED = "Added {label}: {words}"
    INFO_WORDS_REMOVED = "Removed {label}: {words}"
    INFO_WORDS_UNCHANGED = "No {label} changed."
    INFO_STOPWORDS_SAVED = "Stop-word list saved to {path} ({count} words)."
    INFO_STOPWORDS_RESET = "Stop-word list restored from the bundled defaults ({count} words)."
    INFO_STOPWORDS_EMPTY = "Stop-word list is empty."
    INFO_ANALYZED = "Analyzed {count} title{plural}."

    LABEL_WORDS = "user-defined words"
    LABEL_PHRASES = "phrases"
    LABEL_BLOCKED = "blocked words"
    LABEL_NONE = "(none)"

    TABLE_TITLE_KEYWORDS = "Top keywords"
    TABLE_TITLE_PHRASES = "User phrases"
    TABLE_TITLE_VIDEOS = "Videos containing '{keyword}' ({count})"
    TABLE_TITLE_TOKENS = "Tokens"
    TABLE_HEADER_INDEX = "#"
    TABLE_HEADER_KEYWORD = "Keyword"
    TABLE_HEADER_COUNT = "Videos"
    TABLE_HEADER_BAR = "Share"
    TABLE_HEADER_TITLE = "Title"
    TABLE_HEADER_ID = "ID"
    TABLE_HEADER_VIEWED = "Viewed"
    TABLE_HEADER_TOKEN = "Token"
    TABLE_HEADER_LOWER = "Lowercase"
    TABLE_MODE_PREFIX = "Mode: "
    MODE_CASE_SENSITIVE = "case-sensitive"
    MODE_CASE_INSENSITIVE = "case-insensitive"
