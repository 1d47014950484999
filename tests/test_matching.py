from __future__ import annotations

from conftest import make_term
from glossary_search.matching import fallback_search, score_record, validate


def test_validate_is_case_insensitive_on_every_field(sample_corpus, ai_corpus):
    assert validate(ai_corpus[0], "ai")
    assert validate(sample_corpus[0], "etl")
    assert validate(sample_corpus[0], "apache air")
    assert validate(sample_corpus[0], "retail")
    assert validate(sample_corpus[2], "all you need")


def test_validate_rejects_non_matches(sample_corpus):
    assert not validate(sample_corpus[1], "engineering")
    assert not validate(sample_corpus[0], "")
    # "finance retail" only exists once the industries are joined
    assert not validate(sample_corpus[0], "finance retail")


def test_score_record_weights_fields(ai_corpus):
    assert score_record(ai_corpus[0], "인공지능") == 10
    assert score_record(ai_corpus[1], "인공지능") == 1
    assert score_record(ai_corpus[0], "ai") == 7  # tag only, not in the titles
    assert score_record(ai_corpus[0], "zzz") == 0


def test_score_record_counts_without_overlap():
    record = make_term(1, title={"en": "aaaa"}, description={"short": "aaa"})

    assert score_record(record, "aa") == 2 * 10 + 1 * 3


def test_fallback_search_orders_by_score(ai_corpus):
    results = fallback_search(ai_corpus, "인공지능")

    assert [r.record.id for r in results] == [1, 2]
    assert [r.score for r in results] == [10, 1]


def test_fallback_search_ties_keep_corpus_order():
    corpus = [
        make_term(3, description={"full": "uses graph"}),
        make_term(1, description={"full": "a graph"}),
        make_term(2, title={"en": "Graph"}),
        make_term(4, description={"full": "no match"}),
    ]

    results = fallback_search(corpus, "graph")

    assert [r.record.id for r in results] == [2, 3, 1]
