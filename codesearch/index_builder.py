"""
Index builder: constructs the in-memory inverted index from files.

The Indexer owns the document store and the inverted index for one session.
Documents are ingested one at a time, in the order their paths are given;
files whose content cannot be extracted are skipped without consuming an id.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from .documents import DocumentStore
from .extractors import extract_text
from .posting import InvertedIndex
from .scanner import list_files_recursive

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexStats:
    num_documents: int
    num_terms: int
    total_terms: int


class Indexer:
    """
    Owns the inverted index and document store built in one ingestion pass.
    `extract` turns a path into raw text, or None when the file is unusable.
    """

    def __init__(self, extract: Callable[[str | Path], str | None] = extract_text) -> None:
        self._extract = extract
        self.index = InvertedIndex()
        self.documents = DocumentStore(self.index)

    def add_text(self, path: str | Path, text: str | None) -> int | None:
        return self.documents.add_document(str(path), text)

    def add_file(self, path: str | Path) -> int | None:
        """Extract and index one file. Returns its doc_id, or None if skipped."""
        doc_id = self.add_text(path, self._extract(path))
        if doc_id is None:
            logger.info(f"Skipped {path}")
        return doc_id

    def stats(self) -> IndexStats:
        return IndexStats(
            num_documents=len(self.documents),
            num_terms=len(self.index),
            total_terms=sum(doc.total_terms for doc in self.documents),
        )


def build_index_from_paths(
    paths: Iterable[str | Path],
    *,
    extract: Callable[[str | Path], str | None] = extract_text,
) -> Indexer:
    """
    Build an index from an ordered sequence of file paths.
    """
    indexer = Indexer(extract=extract)
    for path in paths:
        indexer.add_file(path)
    stats = indexer.stats()
    logger.info(f"Indexed {stats.num_documents} documents, {stats.num_terms} unique terms")
    return indexer


def build_index_from_directory(data_dir: str | Path) -> Indexer:
    """
    Build an index from all supported files in a directory (recursive).
    """
    return build_index_from_paths(list_files_recursive(data_dir))
