import json
import re

import pytest
from typer.testing import CliRunner

from titlelens import __version__
from titlelens.cli import app
from titlelens.config import load_config


ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


@pytest.fixture(autouse=True)
def temp_config_home(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr("titlelens.config.CONFIG_DIR", config_dir)
    monkeypatch.setattr("titlelens.config.CONFIG_FILE", config_file)
    return config_file


@pytest.fixture
def corpus(tmp_path):
    path = tmp_path / "videos.json"
    path.write_text(
        json.dumps(
            [
                {"title": "Vue3从入门到精通", "bvid": "BV1", "view_at": 1700000000},
                {"title": "vue3实战项目", "bvid": "BV2"},
                {"title": "AI绘画入门", "bvid": "BV3"},
                {"title": "MAIN STREET 街拍", "bvid": "BV4"},
            ],
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    return path


def test_version_flag():
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"TitleLens v{__version__}" in result.stdout


def test_analyze_json_merges_user_words(corpus):
    runner = CliRunner()
    assert runner.invoke(app, ["config", "--add-word", "Vue3"]).exit_code == 0

    result = runner.invoke(app, ["analyze", str(corpus), "--format", "json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["titles"] == 4
    assert payload["case_sensitive"] is False
    assert payload["keywords"][0] == {"word": "Vue3", "count": 2}
    assert [entry["word"].lower() for entry in payload["keywords"]].count("vue3") == 1


def test_analyze_case_sensitive_flag_splits_variants(corpus):
    runner = CliRunner()
    runner.invoke(app, ["config", "--add-word", "Vue3"])

    result = runner.invoke(app, ["analyze", str(corpus), "--format", "json", "--case-sensitive"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    words = {entry["word"]: entry["count"] for entry in payload["keywords"]}
    assert words["Vue3"] == 1
    assert words["vue3"] == 1


def test_analyze_porcelain_reports_phrases(corpus):
    runner = CliRunner()
    runner.invoke(app, ["config", "--add-phrase", "AI绘画"])

    result = runner.invoke(app, ["analyze", str(corpus), "--format", "porcelain", "--top", "50"])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert "phrase\t1\tAI绘画\t1" in lines
    assert any(line.startswith("keyword\t") and "\tAI绘画\t1" in line for line in lines)


def test_analyze_does_not_ingest_videos(corpus, monkeypatch):
    def fail_ingest(*_args, **_kwargs):
        raise AssertionError("analyze should only read titles")

    monkeypatch.setattr("titlelens.cli.ingest_videos", fail_ingest)

    result = CliRunner().invoke(app, ["analyze", str(corpus), "--format", "json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["titles"] == 4


def test_analyze_rich_table(corpus):
    result = CliRunner().invoke(app, ["analyze", str(corpus), "--top", "5"])

    assert result.exit_code == 0
    output = strip_ansi(result.stdout)
    assert "Analyzed 4 titles." in output
    assert "case-insensitive" in output.lower()


def test_analyze_rejects_non_positive_top(corpus):
    result = CliRunner().invoke(app, ["analyze", str(corpus), "--top", "0"])

    assert result.exit_code != 0


def test_analyze_empty_corpus(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["analyze", str(path)])

    assert result.exit_code == 0
    assert "No titles found" in strip_ansi(result.stdout)


def test_analyze_reports_unreadable_corpus(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{oops", encoding="utf-8")

    result = CliRunner().invoke(app, ["analyze", str(path)])

    assert result.exit_code == 1
    assert "Unable to read titles" in strip_ansi(result.stdout)


def test_filter_uses_word_boundaries(corpus):
    result = CliRunner().invoke(app, ["filter", "ai", str(corpus), "--format", "porcelain"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["BV3\tAI绘画入门"]


def test_filter_json_includes_metadata(corpus):
    result = CliRunner().invoke(app, ["filter", "Vue3", str(corpus), "--format", "json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["id"] for item in payload] == ["BV1", "BV2"]
    assert payload[0]["viewed_at"] == 1700000000


def test_filter_rejects_blank_keyword(corpus):
    result = CliRunner().invoke(app, ["filter", "  ", str(corpus)])

    assert result.exit_code == 1
    assert "Keyword must not be empty." in strip_ansi(result.stdout)


def test_filter_reports_no_matches(corpus):
    result = CliRunner().invoke(app, ["filter", "React", str(corpus)])

    assert result.exit_code == 0
    assert "No videos contain 'React'." in strip_ansi(result.stdout)


def test_tokens_keeps_user_words_whole():
    runner = CliRunner()
    runner.invoke(app, ["config", "--add-word", "Vue3"])

    result = runner.invoke(app, ["tokens", "学VUE3"])

    assert result.exit_code == 0
    output = strip_ansi(result.stdout)
    assert "VUE3" in output
    assert "vue3" in output


def test_config_updates_and_show(temp_config_home):
    runner = CliRunner()

    result = runner.invoke(
        app,
        [
            "config",
            "--add-word",
            "DeepSeek",
            "--add-blocked",
            "我们",
            "--set-case-sensitive",
            "yes",
            "--set-display-limit",
            "12",
        ],
    )
    assert result.exit_code == 0
    output = strip_ansi(result.stdout)
    assert "Added user-defined words: DeepSeek" in output
    assert "Configuration updated." in output

    cfg = load_config()
    assert cfg.user_defined_words == ["DeepSeek"]
    assert cfg.blocked_words == ["我们"]
    assert cfg.case_sensitive is True
    assert cfg.display_limit == 12

    shown = runner.invoke(app, ["config", "--show"])
    assert shown.exit_code == 0
    assert "DeepSeek" in strip_ansi(shown.stdout)


def test_config_rejects_invalid_boolean():
    result = CliRunner().invoke(app, ["config", "--set-case-sensitive", "maybe"])

    assert result.exit_code != 0


def test_config_rejects_invalid_json():
    result = CliRunner().invoke(app, ["config", "--set-json", "[1, 2]"])

    assert result.exit_code == 1


def test_stopwords_set_file_warns_on_long_lines(tmp_path, temp_config_home):
    source = tmp_path / "stop.txt"
    long_line = ",".join(f"w{i}" for i in range(16))
    source.write_text(f"{long_line}\n我们\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["stopwords", "--set-file", str(source)])

    assert result.exit_code == 0
    output = strip_ansi(result.stdout)
    assert "exceed 15 terms" in output
    assert (temp_config_home.parent / "stopwords.txt").read_text(encoding="utf-8").startswith("w0,")


def test_stopwords_add_and_show():
    runner = CliRunner()

    added = runner.invoke(app, ["stopwords", "--add", "自定义词"])
    assert added.exit_code == 0
    assert "自定义词" in strip_ansi(added.stdout)

    shown = runner.invoke(app, ["stopwords"])
    assert shown.exit_code == 0
    assert "自定义词" in shown.stdout


def test_config_json_phrase_keeps_commas(tmp_path):
    runner = CliRunner()
    path = tmp_path / "titles.txt"
    path.write_text("Hello, World 现场版\n", encoding="utf-8")

    assert runner.invoke(app, ["config", "--set-json", '{"user_phrases": ["Hello, World"]}']).exit_code == 0
    assert runner.invoke(app, ["config", "--add-phrase", "原神,明日方舟"]).exit_code == 0
    assert load_config().user_phrases == ["Hello, World", "原神", "明日方舟"]

    result = runner.invoke(app, ["analyze", str(path), "--format", "json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["phrases"] == [{"word": "Hello, World", "count": 1}]
