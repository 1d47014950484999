"""Run query variants against a SearchIndex and merge their candidates."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Mapping, NamedTuple, Optional, Sequence

from .exceptions import QueryVariantError
from .index import SearchIndex
from .query import QueryVariant, Strategy
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

DEFAULT_BOOSTS: Mapping[str, float] = {
    Strategy.EXACT.value: 1.0,
    Strategy.PREFIX.value: 0.5,
    Strategy.SUFFIX.value: 0.5,
    Strategy.FUZZY.value: 0.25,
}


class ScoredCandidate(NamedTuple):
    handle: int
    score: float


def _expand_token(index: SearchIndex, token: str, variant: QueryVariant) -> list[str]:
    if variant.strategy is Strategy.PREFIX:
        return index.prefix_tokens(token)
    if variant.strategy is Strategy.SUFFIX:
        return index.suffix_tokens(token)
    if variant.strategy is Strategy.FUZZY:
        return index.fuzzy_tokens(token, variant.max_edits)
    return [token] if token in index else []


def execute_variant(
    index: SearchIndex,
    variant: QueryVariant,
    boosts: Optional[Mapping[str, float]] = None,
) -> list[ScoredCandidate]:
    """Look up one variant and return a candidate per matching document.

    The wildcard or fuzzy operator applies to a single token, the last one
    for prefix and fuzzy variants and the first one for suffix variants;
    other tokens are looked up exactly. Each matching posting adds
    ``field weight * strategy boost`` to its document's score.

    Raises:
        QueryVariantError: the variant has no usable tokens or an invalid
            edit budget.
    """
    boosts = boosts or DEFAULT_BOOSTS
    tokens = tokenize(variant.text.lower())
    if not tokens:
        raise QueryVariantError(f"Variant {variant} has no indexable tokens")
    if variant.strategy is Strategy.FUZZY and variant.max_edits < 0:
        raise QueryVariantError(f"Variant {variant} has a negative edit budget")

    operator_at = 0 if variant.strategy is Strategy.SUFFIX else len(tokens) - 1
    scores: dict[int, float] = defaultdict(float)
    for position, token in enumerate(tokens):
        if position == operator_at:
            matched = _expand_token(index, token, variant)
            boost = boosts[variant.strategy.value]
        else:
            matched = [token] if token in index else []
            boost = boosts[Strategy.EXACT.value]
        for match in matched:
            for posting in index.postings(match):
                scores[posting.handle] += posting.weight * boost

    return [ScoredCandidate(handle, score) for handle, score in sorted(scores.items())]


def run_variants(
    index: SearchIndex,
    variants: Iterable[QueryVariant],
    boosts: Optional[Mapping[str, float]] = None,
) -> list[list[ScoredCandidate]]:
    """Execute every variant; a failing variant contributes no candidates."""
    results = []
    for variant in variants:
        try:
            results.append(execute_variant(index, variant, boosts))
        except Exception as e:
            logger.debug("Skipping query variant %s: %s", variant, e)
            results.append([])
    return results


def merge_candidates(
    candidate_lists: Iterable[Sequence[ScoredCandidate]],
) -> list[ScoredCandidate]:
    """Deduplicate by handle, keeping the maximum score seen for each document.

    Scores from different variants are never summed.
    """
    best: dict[int, float] = {}
    for candidates in candidate_lists:
        for candidate in candidates:
            current = best.get(candidate.handle)
            if current is None or candidate.score > current:
                best[candidate.handle] = candidate.score
    return [ScoredCandidate(handle, score) for handle, score in sorted(best.items())]
