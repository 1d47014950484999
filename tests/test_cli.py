from __future__ import annotations

import json

import pytest

from glossary_search.cli import main


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "terms.json"
    data = [
        {"id": 1, "title": {"ko": "인공지능", "en": "Artificial Intelligence"}, "tags": [{"name": "AI"}]},
        {"id": 2, "description": {"full": "인공지능 기술을 사용"}},
        {"id": 3, "title": {"ko": "데이터", "en": "Data"}},
    ]
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def test_json_output(corpus_file, capsys):
    assert main(["--corpus", str(corpus_file), "--query", "인공지능"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["total"] == 2
    assert [r["id"] for r in payload["results"]] == [1, 2]
    assert payload["results"][0]["title"] == {"ko": "인공지능", "en": "Artificial Intelligence"}
    assert payload["results"][0]["score"] == 10


def test_titles_output_and_paging(corpus_file, capsys):
    assert main([
        "--corpus", str(corpus_file),
        "--query", "인공지능",
        "--per-page", "1",
        "--page", "2",
        "--output", "titles",
    ]) == 0

    assert capsys.readouterr().out.splitlines() == ["#2"]


def test_no_matches(corpus_file, capsys):
    assert main(["--corpus", str(corpus_file), "--query", "zzz", "--output", "titles"]) == 0

    assert capsys.readouterr().out.strip() == "(no matches)"


def test_missing_corpus_exits_with_error(tmp_path, capsys):
    assert main(["--corpus", str(tmp_path / "nope.json"), "--query", "x"]) == 1

    assert "Corpus file not found" in capsys.readouterr().err


@pytest.mark.parametrize("per_page", ["0", "-3"])
def test_invalid_per_page_exits_with_error(corpus_file, capsys, per_page):
    assert main(["--corpus", str(corpus_file), "--query", "인공지능", "--per-page", per_page]) == 1

    assert "per_page must be >= 1" in capsys.readouterr().err
