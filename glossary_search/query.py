"""Query expansion: one raw query becomes several index lookups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Strategy(str, Enum):
    EXACT = "exact"
    PREFIX = "prefix"
    SUFFIX = "suffix"
    FUZZY = "fuzzy"


@dataclass(frozen=True)
class QueryVariant:
    """One reformulation of the user's query, executed on its own."""

    text: str
    strategy: Strategy
    max_edits: int = 0

    def __str__(self) -> str:
        if self.strategy is Strategy.PREFIX:
            return f"{self.text}*"
        if self.strategy is Strategy.SUFFIX:
            return f"*{self.text}"
        if self.strategy is Strategy.FUZZY:
            return f"{self.text}~{self.max_edits}"
        return f'"{self.text}"'


def expand_query(
    query: str,
    *,
    fuzzy_distance: int = 1,
    min_word_length: int = 2,
) -> list[QueryVariant]:
    """Expand *query* into exact, prefix, suffix and fuzzy variants.

    Multi-word queries additionally get an exact and a prefix variant per
    word; words shorter than *min_word_length* are skipped since they match
    almost everything. A blank query expands to nothing.
    """
    text = query.strip()
    if not text:
        return []

    variants = [
        QueryVariant(text, Strategy.EXACT),
        QueryVariant(text, Strategy.PREFIX),
        QueryVariant(text, Strategy.SUFFIX),
        QueryVariant(text, Strategy.FUZZY, max_edits=fuzzy_distance),
    ]

    words = text.lower().split()
    if len(words) > 1:
        for word in words:
            if len(word) >= min_word_length:
                variants.append(QueryVariant(word, Strategy.EXACT))
                variants.append(QueryVariant(word, Strategy.PREFIX))

    return variants
