"""Weighted text fields extracted from a glossary term.

``FIELDS`` is the single source of truth for which parts of a record are
searchable and how much each one counts. The indexer, the scorer and the
substring validator all read from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from .models import TermRecord


@dataclass(frozen=True)
class FieldSpec:
    name: str
    weight: float
    values: Callable[[TermRecord], list[str]]

    def text(self, record: TermRecord) -> str:
        """Field text as indexed and scored: the values joined by a space."""
        return " ".join(v for v in self.values(record) if v)


FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("title_en", 10, lambda r: [r.title.en]),
    FieldSpec("title_ko", 10, lambda r: [r.title.ko]),
    FieldSpec("tags", 7, lambda r: [t.name for t in r.tags]),
    FieldSpec("description_short", 3, lambda r: [r.description.short]),
    FieldSpec("description_full", 1, lambda r: [r.description.full]),
    FieldSpec("related_term_desc", 1, lambda r: [t.description for t in r.related_terms]),
    FieldSpec("related_term_name", 1, lambda r: [t.term for t in r.related_terms]),
    FieldSpec("usecase_example", 1, lambda r: [r.use_case.example]),
    FieldSpec("usecase_description", 1, lambda r: [r.use_case.description]),
    FieldSpec("usecase_industries", 1, lambda r: list(r.use_case.industries)),
    FieldSpec("reference_tutorials", 1, lambda r: [t.title for t in r.references.tutorials]),
    FieldSpec("reference_books", 1, lambda r: [b.title for b in r.references.books]),
    FieldSpec("reference_academic", 1, lambda r: [a.title for a in r.references.academic]),
    FieldSpec("reference_opensource", 1, lambda r: [o.name for o in r.references.opensource]),
)

FIELD_WEIGHTS: dict[str, float] = {f.name: f.weight for f in FIELDS}


def extract_fields(record: TermRecord) -> dict[str, tuple[str, float]]:
    """Return ``{field_name: (text, weight)}`` for every field in ``FIELDS``.

    Missing parts of the record come back as empty strings.
    """
    return {f.name: (f.text(record), f.weight) for f in FIELDS}


def searchable_texts(record: TermRecord) -> Iterator[str]:
    """Yield each individual non-empty string that a query may match.

    Unlike :func:`extract_fields`, list values (tags, industries, reference
    titles) are yielded one by one, so a match never spans two tags.
    """
    for spec in FIELDS:
        for value in spec.values(record):
            if value:
                yield value
