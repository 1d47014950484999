"""Literal substring matching and weighted-frequency scoring.

``validate`` is the ground truth for whether a record matches a query: the
index only discovers candidates cheaply, and every candidate has to pass the
same check the fallback scan applies to the whole corpus.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Sequence

from .fields import FIELDS, searchable_texts
from .models import ScoredResult, TermRecord

logger = logging.getLogger(__name__)


def normalize(text: str) -> str:
    """NFC-normalize and lowercase *text* for substring comparison."""
    return unicodedata.normalize("NFC", text).lower()


def validate(record: TermRecord, query_lower: str) -> bool:
    """Return True if *query_lower* occurs literally in any searchable string."""
    needle = normalize(query_lower)
    if not needle:
        return False
    return any(needle in normalize(text) for text in searchable_texts(record))


def score_record(record: TermRecord, query_lower: str) -> float:
    """Sum of ``weight * occurrences`` of *query_lower* over every field.

    Occurrences are counted without overlap, so ``"aa"`` appears twice in
    ``"aaaa"`` and once in ``"aaa"``.
    """
    needle = normalize(query_lower)
    if not needle:
        return 0.0
    score = 0.0
    for spec in FIELDS:
        text = spec.text(record)
        if text:
            score += normalize(text).count(needle) * spec.weight
    return score


def rank(
    records: Sequence[TermRecord],
    query_lower: str,
) -> list[ScoredResult]:
    """Score *records* and sort by descending score, keeping input order on ties."""
    scored = [ScoredResult(record, score_record(record, query_lower)) for record in records]
    scored.sort(key=lambda r: r.score, reverse=True)
    return scored


def fallback_search(
    corpus: Sequence[TermRecord],
    query_lower: str,
) -> list[ScoredResult]:
    """Linear scan of the whole corpus with the substring validator.

    Slower than the indexed path but finds any substring match in any field,
    whatever the tokenizer made of it.
    """
    matched = [record for record in corpus if validate(record, query_lower)]
    logger.debug("Fallback scan matched %d of %d records", len(matched), len(corpus))
    return rank(matched, query_lower)
