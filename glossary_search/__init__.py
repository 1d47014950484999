"""In-memory search and ranking for glossary terms."""

from .corpus import load_corpus, parse_corpus
from .engine import Page, SearchEngine, paginate, search
from .exceptions import CorpusError, GlossarySearchError, QueryVariantError
from .executor import ScoredCandidate, execute_variant, merge_candidates, run_variants
from .fields import FIELDS, FieldSpec, extract_fields, searchable_texts
from .index import Posting, SearchIndex, build_index
from .matching import fallback_search, score_record, validate
from .models import ScoredResult, TermRecord
from .query import QueryVariant, Strategy, expand_query
from .settings import SearchConfig, load_config
from .tokenizer import tokenize

__all__ = [
    # entry points
    "search",
    "SearchEngine",
    "paginate",
    "Page",
    # corpus
    "TermRecord",
    "ScoredResult",
    "load_corpus",
    "parse_corpus",
    # config
    "SearchConfig",
    "load_config",
    # pipeline stages
    "tokenize",
    "FIELDS",
    "FieldSpec",
    "extract_fields",
    "searchable_texts",
    "SearchIndex",
    "Posting",
    "build_index",
    "Strategy",
    "QueryVariant",
    "expand_query",
    "ScoredCandidate",
    "execute_variant",
    "run_variants",
    "merge_candidates",
    "validate",
    "score_record",
    "fallback_search",
    # errors
    "GlossarySearchError",
    "QueryVariantError",
    "CorpusError",
]
