from __future__ import annotations

import json

import pytest

from titlelens.api import TitleLensError
from titlelens.services.corpus_service import load_corpus
from titlelens.videos import VideoInput


def test_load_plain_text(tmp_path):
    path = tmp_path / "titles.txt"
    path.write_text("Vue3从入门到精通\n\n  vue3实战教程  \n", encoding="utf-8")

    assert load_corpus(path) == [
        VideoInput(title="Vue3从入门到精通"),
        VideoInput(title="vue3实战教程"),
    ]


def test_load_json_list_of_objects(tmp_path):
    path = tmp_path / "videos.json"
    path.write_text(
        json.dumps(
            [
                {"title": "原神攻略", "bvid": "BV1xx", "view_at": 1700000000},
                {"title": "AI绘画", "id": 42},
                "纯标题",
            ],
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )

    assert load_corpus(path) == [
        VideoInput(title="原神攻略", id="BV1xx", viewed_at=1700000000),
        VideoInput(title="AI绘画", id="42"),
        VideoInput(title="纯标题"),
    ]


def test_load_json_api_response(tmp_path):
    path = tmp_path / "toview.json"
    payload = {"code": 0, "data": {"list": [{"title": "稍后再看", "bvid": "BV9"}]}}
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")

    assert load_corpus(path) == [VideoInput(title="稍后再看", id="BV9")]


def test_load_jsonl(tmp_path):
    path = tmp_path / "videos.jsonl"
    path.write_text('{"title": "one"}\n\n"two"\n', encoding="utf-8")

    assert [item.title for item in load_corpus(path)] == ["one", "two"]


@pytest.mark.parametrize(
    ("name", "content"),
    [
        ("bad.json", "{not json"),
        ("bad.json", '{"unexpected": true}'),
        ("bad.json", '[{"name": "no title"}]'),
        ("bad.jsonl", '{"title": "ok"}\n[1]\n'),
        ("bad.jsonl", "{broken\n"),
    ],
)
def test_invalid_corpus_raises(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(TitleLensError):
        load_corpus(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(TitleLensError):
        load_corpus(tmp_path / "missing.txt")
