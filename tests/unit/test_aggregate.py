from __future__ import annotations

from titlelens.aggregate import (
    FoldedEntry,
    KeywordCount,
    aggregate,
    fold_variants,
    phrase_statistics,
)


def test_case_sensitive_counts_each_surface_separately():
    result = aggregate([["Vue3", "教程"], ["vue3", "教程"]], case_sensitive=True)

    assert result == [
        KeywordCount("教程", 2),
        KeywordCount("Vue3", 1),
        KeywordCount("vue3", 1),
    ]


def test_case_insensitive_folds_and_prefers_first_seen_on_ties():
    result = aggregate([["Vue3", "教程"], ["vue3", "教程"]], case_sensitive=False)

    assert result == [KeywordCount("Vue3", 2), KeywordCount("教程", 2)]


def test_case_insensitive_picks_most_frequent_variant():
    result = aggregate([["vue3"], ["Vue3"], ["Vue3"]])

    assert result == [KeywordCount("Vue3", 3)]


def test_variants_within_one_title_count_once():
    sets = [["Vue3", "vue3", "VUE3"], ["vue3"]]

    table = fold_variants(sets)

    assert table["vue3"].total == 2
    assert table["vue3"].variants == {"Vue3": 1, "vue3": 1}
    assert aggregate(sets) == [KeywordCount("Vue3", 2)]


def test_duplicate_words_in_one_set_count_once_case_sensitive():
    assert aggregate([["AI", "AI"]], case_sensitive=True) == [KeywordCount("AI", 1)]


def test_results_sorted_by_count_with_stable_ties():
    sets = [["b", "a"], ["c"], ["c", "a"]]

    result = aggregate(sets, case_sensitive=True)

    assert [entry.word for entry in result] == ["a", "c", "b"]
    assert [entry.count for entry in result] == [2, 2, 1]


def test_aggregate_is_idempotent():
    sets = [["Vue3", "React", "教程"], ["vue3", "教程"], ["REACT", "react"]]

    for flag in (True, False):
        assert aggregate(sets, flag) == aggregate(sets, flag)


def test_folded_totals_match_variants_and_never_exceed_titles():
    sets = [["AI", "ai"], ["Ai"], ["AI", "GPT"], ["gpt", "Gpt"]]

    table = fold_variants(sets)

    for entry in table.values():
        assert sum(entry.variants.values()) == entry.total
        assert entry.total <= len(sets)


def test_aggregate_accepts_generators_and_empty_input():
    assert aggregate([]) == []
    assert aggregate(iter([iter(["x1"]), iter(["X1"])])) == [KeywordCount("x1", 2)]


def test_folded_entry_best_surface():
    entry = FoldedEntry()
    entry.add("abc")
    entry.add("ABC")
    entry.add("ABC")

    assert entry.best_surface == "ABC"
    assert entry.total == 3


def test_phrase_statistics_counts_once_per_title():
    titles = ["原神新版本上线 原神攻略", "原神", "崩坏星穹铁道"]

    assert phrase_statistics(titles, ["原神", "崩坏3"]) == [KeywordCount("原神", 2)]


def test_phrase_statistics_case_modes():
    titles = ["ChatGPT news", "chatgpt tips", "CHATGPT"]

    assert phrase_statistics(titles, ["ChatGPT"]) == [KeywordCount("ChatGPT", 3)]
    assert phrase_statistics(titles, ["ChatGPT"], case_sensitive=True) == [
        KeywordCount("ChatGPT", 1)
    ]


def test_phrase_statistics_reports_most_common_surface():
    titles = ["openai news", "OpenAI tips", "OpenAI"]

    assert phrase_statistics(titles, ["openai"]) == [KeywordCount("OpenAI", 3)]


def test_phrase_statistics_merges_case_duplicates_once_per_title():
    assert phrase_statistics(["AI news"], ["AI", "ai"]) == [KeywordCount("AI", 1)]


def test_phrase_statistics_empty():
    assert phrase_statistics(["x"], []) == []
    assert phrase_statistics([], ["x"]) == []
