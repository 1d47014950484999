from __future__ import annotations

import pytest

from glossary_search.index import Posting, SearchIndex, build_index


def test_build_index_postings(sample_corpus):
    index = build_index(sample_corpus)

    assert index.size == 3
    assert "data" in index
    assert "Data" not in index  # tokens are lowercased

    fields = {p.field for p in index.postings("engineering") if p.handle == 0}
    assert fields == {"title_en", "description_full", "reference_tutorials", "reference_books"}
    assert Posting(0, "title_en", 10) in index.postings("engineering")
    assert index.postings("nonexistent") == ()


def test_postings_are_read_only(sample_corpus):
    index = SearchIndex(sample_corpus)

    postings = index.postings("data")
    assert isinstance(postings, tuple)
    with pytest.raises(TypeError):
        index._postings["data"] = ()


def test_prefix_and_suffix_scans(sample_corpus):
    index = SearchIndex(sample_corpus)

    assert index.prefix_tokens("engin") == ["engineering"]
    assert index.prefix_tokens("") == []

    suffixed = index.suffix_tokens("ing")
    assert "engineering" in suffixed
    assert "learning" in suffixed
    assert "processing" in suffixed
    assert all(t.endswith("ing") for t in suffixed)


def test_fuzzy_scan_allows_one_edit(sample_corpus):
    index = SearchIndex(sample_corpus)

    assert index.fuzzy_tokens("enginering", 1) == ["engineering"]
    assert index.fuzzy_tokens("enginnering", 1) == ["engineering"]
    assert index.fuzzy_tokens("engneerin", 1) == []
    assert "data" in index.fuzzy_tokens("data", 0)

    with pytest.raises(ValueError):
        index.fuzzy_tokens("data", -1)


def test_covering_handles_finds_matches_inside_tokens(sample_corpus):
    index = SearchIndex(sample_corpus)

    # "earn" sits inside "learning" (handle 1) and "deep-learning" (handle 2)
    assert index.covering_handles("earn") == {1, 2}
    assert index.covering_handles("data engineering") == {0}
    assert index.covering_handles("zzz") == set()
    assert index.covering_handles("!!! ...") is None


def test_empty_corpus():
    index = build_index([])

    assert index.size == 0
    assert len(index) == 0
    assert index.prefix_tokens("a") == []
