"""In-memory inverted index over the weighted glossary fields.

The index is built once from a corpus snapshot and never mutated afterwards,
so any number of threads can query the same instance without locking. A
corpus change means building a new index (see ``SearchEngine.reload``).
"""

from __future__ import annotations

import bisect
import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Sequence

from rapidfuzz.distance import Levenshtein

from .fields import FIELDS
from .models import TermRecord
from .tokenizer import strip_token, tokenize

logger = logging.getLogger(__name__)


class Posting(NamedTuple):
    """One occurrence of a token in a field of a document."""

    handle: int
    field: str
    weight: float


class SearchIndex:
    """Queryable token → postings map built from a list of term records.

    Documents are addressed by *handle*, their position in the corpus that
    was indexed. Handles stay inside the engine; callers only ever see the
    records themselves.
    """

    def __init__(self, corpus: Sequence[TermRecord]):
        postings: dict[str, list[Posting]] = defaultdict(list)
        for handle, record in enumerate(corpus):
            for spec in FIELDS:
                for token in tokenize(spec.text(record).lower()):
                    postings[token].append(Posting(handle, spec.name, spec.weight))

        self._size = len(corpus)
        self._postings: Mapping[str, tuple[Posting, ...]] = MappingProxyType(
            {token: tuple(entries) for token, entries in postings.items()}
        )
        self._vocabulary: tuple[str, ...] = tuple(sorted(self._postings))
        self._reversed: tuple[str, ...] = tuple(sorted(t[::-1] for t in self._vocabulary))

        by_length: dict[int, list[str]] = defaultdict(list)
        for token in self._vocabulary:
            by_length[len(token)].append(token)
        self._by_length: Mapping[int, tuple[str, ...]] = MappingProxyType(
            {length: tuple(tokens) for length, tokens in by_length.items()}
        )

    # ──────────────────────────────────────────────
    # Basic lookups
    # ──────────────────────────────────────────────

    @property
    def size(self) -> int:
        """Number of documents in the indexed corpus."""
        return self._size

    @property
    def vocabulary(self) -> tuple[str, ...]:
        return self._vocabulary

    def __len__(self) -> int:
        return len(self._vocabulary)

    def __contains__(self, token: object) -> bool:
        return token in self._postings

    def postings(self, token: str) -> tuple[Posting, ...]:
        """Postings for an exact token, or an empty tuple."""
        return self._postings.get(token, ())

    # ──────────────────────────────────────────────
    # Token-space scans
    # ──────────────────────────────────────────────

    def prefix_tokens(self, prefix: str) -> list[str]:
        """All indexed tokens starting with *prefix* (inclusive of equality)."""
        return _range_scan(self._vocabulary, prefix)

    def suffix_tokens(self, suffix: str) -> list[str]:
        """All indexed tokens ending with *suffix*."""
        return [t[::-1] for t in _range_scan(self._reversed, suffix[::-1])]

    def fuzzy_tokens(self, token: str, max_edits: int) -> list[str]:
        """All indexed tokens within *max_edits* Levenshtein edits of *token*."""
        if max_edits < 0:
            raise ValueError(f"max_edits must be >= 0, got {max_edits}")
        matches = []
        for length in range(len(token) - max_edits, len(token) + max_edits + 1):
            for candidate in self._by_length.get(length, ()):
                if Levenshtein.distance(token, candidate, score_cutoff=max_edits) <= max_edits:
                    matches.append(candidate)
        return matches

    def infix_tokens(self, fragment: str) -> list[str]:
        """All indexed tokens containing *fragment* anywhere."""
        if not fragment:
            return []
        return [t for t in self._vocabulary if fragment in t]

    def covering_handles(self, query_lower: str) -> Optional[set[int]]:
        """Every document that could contain *query_lower* as a substring.

        Each whitespace-separated word of the query, trimmed like a token,
        must appear inside some token of a matching document, so the
        intersection over words is a superset of the true matches. Returns
        ``None`` when no word survives trimming and nothing can be ruled out.
        """
        fragments = [strip_token(w) for w in query_lower.split()]
        fragments = [f for f in fragments if f]
        if not fragments:
            return None

        handles: Optional[set[int]] = None
        for fragment in fragments:
            found = {
                posting.handle
                for token in self.infix_tokens(fragment)
                for posting in self._postings[token]
            }
            handles = found if handles is None else handles & found
            if not handles:
                break
        return handles


def _range_scan(sorted_tokens: Sequence[str], prefix: str) -> list[str]:
    if not prefix:
        return []
    start = bisect.bisect_left(sorted_tokens, prefix)
    matches = []
    for token in sorted_tokens[start:]:
        if not token.startswith(prefix):
            break
        matches.append(token)
    return matches


def build_index(corpus: Sequence[TermRecord]) -> SearchIndex:
    """Build a :class:`SearchIndex` for *corpus* and log its dimensions."""
    index = SearchIndex(corpus)
    logger.info("Built search index: %d documents, %d tokens", index.size, len(index))
    return index
