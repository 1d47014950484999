"""Read glossary corpus snapshots from JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from .exceptions import CorpusError
from .models import TermRecord

logger = logging.getLogger(__name__)


def parse_corpus(data: Any) -> list[TermRecord]:
    """Validate decoded JSON into term records.

    Accepts a list of entries or an object with a ``terms`` list.

    Raises:
        CorpusError: the payload has the wrong shape or an entry is invalid.
            ``position`` is the index of the offending entry.
    """
    if isinstance(data, dict):
        data = data.get("terms")
    if not isinstance(data, list):
        raise CorpusError("Corpus must be a JSON array of terms or an object with a 'terms' array")

    records = []
    for i, entry in enumerate(data):
        try:
            records.append(TermRecord.model_validate(entry))
        except ValidationError as e:
            raise CorpusError(
                f"Invalid term at position {i}: {e.error_count()} error(s), "
                f"first: {e.errors()[0]['loc']} {e.errors()[0]['msg']}",
                position=i,
            ) from e
    return records


def load_corpus(path: Union[str, Path]) -> list[TermRecord]:
    """Read a UTF-8 JSON corpus file and return its term records."""
    path = Path(path)
    if not path.is_file():
        raise CorpusError(f"Corpus file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CorpusError(f"Corpus file {path} is not valid JSON: {e}") from e

    records = parse_corpus(data)
    logger.info("Loaded %d terms from %s", len(records), path)
    return records
