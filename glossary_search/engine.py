"""Top-level search over a glossary corpus.

Flow:
  1. Expand the query into exact / prefix / suffix / fuzzy variants
  2. Run every variant against the inverted index, merge by max score, and
     add the documents an infix scan of the vocabulary cannot rule out
  3. Keep only candidates that contain the query as a literal substring
  4. If nothing survives (or the index path failed), scan the whole corpus
  5. Score by weighted field frequency and sort, ties in corpus order
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Sequence

from .executor import merge_candidates, run_variants
from .index import SearchIndex, build_index
from .matching import fallback_search, normalize, rank, validate
from .models import ScoredResult, TermRecord
from .query import expand_query
from .settings import SearchConfig

logger = logging.getLogger(__name__)


class _Snapshot(NamedTuple):
    corpus: tuple[TermRecord, ...]
    index: Optional[SearchIndex]


def _build_snapshot(corpus: Sequence[TermRecord]) -> _Snapshot:
    records = tuple(corpus)
    try:
        index = build_index(records)
    except Exception:
        logger.exception("Index build failed; queries will use the fallback scan")
        index = None
    return _Snapshot(records, index)


class SearchEngine:
    """Glossary search bound to one corpus snapshot and its index.

    The index is built once and shared read-only by every query. ``reload``
    builds a complete new snapshot before swapping it in, so queries already
    running keep using the old one undisturbed.
    """

    def __init__(
        self,
        corpus: Sequence[TermRecord],
        config: Optional[SearchConfig] = None,
    ):
        self.config = config or SearchConfig()
        self._lock = threading.Lock()
        self._snapshot = _build_snapshot(corpus)

    @property
    def corpus(self) -> tuple[TermRecord, ...]:
        return self._snapshot.corpus

    def reload(self, corpus: Sequence[TermRecord]) -> None:
        """Replace the corpus, rebuilding the index from scratch."""
        snapshot = _build_snapshot(corpus)
        with self._lock:
            self._snapshot = snapshot
        logger.info("Search corpus reloaded: %d records", len(snapshot.corpus))

    # ──────────────────────────────────────────────
    # Public API
    # ──────────────────────────────────────────────

    def search(self, query: str) -> list[TermRecord]:
        """Return the records matching *query*, most relevant first."""
        return [result.record for result in self.search_scored(query)]

    def search_scored(self, query: str) -> list[ScoredResult]:
        """Like :meth:`search` but keeps the relevance score of each record."""
        if not query or not query.strip():
            return []

        snapshot = self._snapshot
        query_lower = query.lower()

        matched: list[TermRecord] = []
        if snapshot.index is not None:
            try:
                matched = self._indexed_candidates(snapshot, query)
            except Exception:
                logger.exception("Indexed search failed for %r; falling back to a full scan", query)
                matched = []

        if not matched:
            logger.debug("No indexed matches for %r; scanning %d records", query, len(snapshot.corpus))
            return fallback_search(snapshot.corpus, query_lower)

        return rank(matched, query_lower)

    def search_page(self, query: str, page: int = 1) -> "Page":
        """Search and return one page of results using the configured page size."""
        return paginate(
            self.search_scored(query),
            page=page,
            per_page=self.config.per_page,
            pages_per_group=self.config.pages_per_group,
        )

    # ──────────────────────────────────────────────
    # Internal
    # ──────────────────────────────────────────────

    def _indexed_candidates(self, snapshot: _Snapshot, query: str) -> list[TermRecord]:
        cfg = self.config
        variants = expand_query(
            query,
            fuzzy_distance=cfg.fuzzy_distance,
            min_word_length=cfg.min_word_length,
        )
        candidate_lists = run_variants(snapshot.index, variants, cfg.strategy_boosts)
        merged = merge_candidates(candidate_lists)

        # Variants miss matches that sit inside a token ("earn" in "deep-learning");
        # the infix cover adds them so the result set equals the full scan's.
        query_lower = query.lower()
        handles = {c.handle for c in merged}
        covered = snapshot.index.covering_handles(normalize(query_lower))
        if covered:
            handles |= covered
        logger.debug(
            "Query %r: %d variants, %d variant candidates, %d after infix cover",
            query, len(variants), len(merged), len(handles),
        )

        records = [snapshot.corpus[handle] for handle in sorted(handles)]
        return [record for record in records if validate(record, query_lower)]


def search(
    query: str,
    corpus: Sequence[TermRecord],
    config: Optional[SearchConfig] = None,
) -> list[TermRecord]:
    """One-shot search: index *corpus*, run *query*, return ordered records.

    Never raises; a query that matches nothing returns an empty list. Reuse a
    :class:`SearchEngine` to avoid rebuilding the index on every call.
    """
    if not query or not query.strip():
        return []
    return SearchEngine(corpus, config).search(query)


# ──────────────────────────────────────────────
# Paging
# ──────────────────────────────────────────────


@dataclass
class Page:
    items: list = field(default_factory=list)
    page: int = 1
    per_page: int = 12
    total: int = 0
    total_pages: int = 0
    page_numbers: list[int] = field(default_factory=list)


def paginate(
    results: Sequence,
    page: int = 1,
    per_page: int = 12,
    pages_per_group: int = 5,
) -> Page:
    """Slice *results* into one page plus the page links of its group.

    Page links come in groups of *pages_per_group*: page 7 of 20 with groups
    of 5 shows links 6-10. A page outside ``1..total_pages`` has no items.
    """
    if per_page < 1:
        raise ValueError(f"per_page must be >= 1, got {per_page}")
    if pages_per_group < 1:
        raise ValueError(f"pages_per_group must be >= 1, got {pages_per_group}")

    total = len(results)
    total_pages = math.ceil(total / per_page)

    items: list = []
    if 1 <= page <= total_pages:
        start = (page - 1) * per_page
        items = list(results[start : start + per_page])

    group = math.ceil(max(page, 1) / pages_per_group)
    first = (group - 1) * pages_per_group + 1
    last = min(first + pages_per_group - 1, total_pages)
    page_numbers = list(range(first, last + 1))

    return Page(
        items=items,
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
        page_numbers=page_numbers,
    )
