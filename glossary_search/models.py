"""Glossary term data model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class _Lenient(BaseModel):
    """Base model that treats explicit ``null`` values as missing."""

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Title(_Lenient):
    ko: str = ""
    en: str = ""


class Description(_Lenient):
    short: str = ""
    full: str = ""


class Tag(_Lenient):
    name: str = ""


class RelatedTerm(_Lenient):
    term: str = ""
    description: str = ""


class UseCase(_Lenient):
    description: str = ""
    example: str = ""
    industries: list[str] = Field(default_factory=list)

    @field_validator("industries", mode="before")
    @classmethod
    def skip_null_industries(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [v for v in value if v is not None]
        return value


class TitledReference(_Lenient):
    title: str = ""


class NamedReference(_Lenient):
    name: str = ""


class References(_Lenient):
    tutorials: list[TitledReference] = Field(default_factory=list)
    books: list[TitledReference] = Field(default_factory=list)
    academic: list[TitledReference] = Field(default_factory=list)
    opensource: list[NamedReference] = Field(default_factory=list)

    @field_validator("tutorials", "books", "academic", "opensource", mode="before")
    @classmethod
    def skip_null_items(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [v for v in value if v is not None]
        return value


class TermRecord(_Lenient):
    """One glossary entry.

    Only ``id`` is required. Every other part may be missing or ``null`` and
    is then treated as empty text. Keys the search engine does not use
    (``difficulty``, ``relevance``, ``metadata``, ...) are kept as extras.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: int
    title: Title = Field(default_factory=Title)
    description: Description = Field(default_factory=Description)
    tags: list[Tag] = Field(default_factory=list)
    related_terms: list[RelatedTerm] = Field(
        default_factory=list,
        validation_alias=AliasChoices("terms", "relatedTerms", "related_terms"),
    )
    use_case: UseCase = Field(
        default_factory=UseCase,
        validation_alias=AliasChoices("usecase", "useCase", "use_case"),
    )
    references: References = Field(default_factory=References)

    @field_validator("tags", "related_terms", mode="before")
    @classmethod
    def skip_null_items(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [v for v in value if v is not None]
        return value


@dataclass(frozen=True)
class ScoredResult:
    """A matching record together with its final relevance score."""

    record: TermRecord
    score: float
