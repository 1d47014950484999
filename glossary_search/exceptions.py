"""Exceptions raised by the glossary search package."""


class GlossarySearchError(Exception):
    """Base class for all glossary search errors."""


class QueryVariantError(GlossarySearchError):
    """A query variant cannot be run against the index (e.g. no tokens)."""


class CorpusError(GlossarySearchError):
    """A corpus snapshot could not be read or validated."""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position
