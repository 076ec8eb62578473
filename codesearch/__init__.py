"""In-memory boolean TF-IDF search over a project folder."""

from .tokenizer import normalize_term, iter_terms, tokenize
from .posting import Posting, InvertedIndex
from .documents import Document, DocumentStore
from .index_builder import Indexer, IndexStats, build_index_from_paths, build_index_from_directory
from .query_parser import QueryMode, ParsedQuery, parse_query
from .query_engine import QueryEngine, Result
