from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make package importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from glossary_search.models import TermRecord  # noqa: E402


def make_term(term_id: int, **data) -> TermRecord:
    return TermRecord.model_validate({"id": term_id, **data})


@pytest.fixture
def ai_corpus() -> list[TermRecord]:
    return [
        make_term(1, title={"ko": "인공지능", "en": "Artificial Intelligence"}, tags=[{"name": "AI"}]),
        make_term(2, description={"full": "대규모 데이터로 인공지능 기술을 사용하는 사례"}),
    ]


@pytest.fixture
def sample_corpus() -> list[TermRecord]:
    return [
        make_term(
            10,
            title={"ko": "데이터 엔지니어링", "en": "Data Engineering"},
            description={
                "short": "데이터 파이프라인을 설계하고 운영하는 분야",
                "full": "Data engineering covers ingestion, storage and processing.",
            },
            tags=[{"name": "data"}, {"name": "pipeline"}],
            terms=[{"term": "ETL", "description": "Extract, transform, load"}],
            usecase={
                "description": "Batch pipelines for analytics",
                "example": "Nightly Spark jobs",
                "industries": ["Finance", "Retail"],
            },
            references={
                "tutorials": [{"title": "Data Engineering Zoomcamp"}],
                "books": [{"title": "Fundamentals of Data Engineering"}],
                "academic": [],
                "opensource": [{"name": "Apache Airflow"}],
            },
        ),
        make_term(
            11,
            title={"ko": "머신러닝", "en": "Machine Learning"},
            description={"short": "데이터로부터 학습하는 알고리즘", "full": "Models learn patterns from data."},
            tags=[{"name": "ML"}],
        ),
        make_term(
            12,
            title={"ko": "트랜스포머", "en": "Transformer"},
            description={"short": "Attention 기반 신경망 구조", "full": "Self-attention, state-of-the-art."},
            tags=[{"name": "deep-learning"}],
            references={"academic": [{"title": "Attention Is All You Need"}]},
        ),
    ]
