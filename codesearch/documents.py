"""
Document records and the document store.

The store assigns sequential integer ids (0, 1, 2, ...) in ingestion order and
feeds every normalized term into the inverted index as it goes, so that a
document's total_terms always equals the sum of its counts in the index.
"""

import logging
from dataclasses import dataclass
from typing import Iterator

from .posting import InvertedIndex
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    doc_id: int
    path: str
    terms: tuple[str, ...]
    total_terms: int


class DocumentStore:
    """Holds per-document metadata; doc_id is the position in the store."""

    def __init__(self, index: InvertedIndex) -> None:
        self._index = index
        self._documents: list[Document] = []

    def add_document(self, path: str, raw_text: str | None) -> int | None:
        """
        Normalize raw_text, record its terms in the index and store the document.
        raw_text=None means the content could not be extracted: nothing is
        added, no id is consumed, and None is returned.
        """
        if raw_text is None:
            logger.debug(f"Skipping {path}: no content")
            return None

        doc_id = len(self._documents)
        terms = tuple(tokenize(raw_text))

        self._index.register_document(doc_id)
        for term in terms:
            self._index.record(term, doc_id)

        self._documents.append(
            Document(doc_id=doc_id, path=str(path), terms=terms, total_terms=len(terms))
        )
        logger.debug(f"Indexed {path} as doc {doc_id} ({len(terms)} terms)")
        return doc_id

    def get(self, doc_id: int) -> Document:
        return self._documents[doc_id]

    def path_of(self, doc_id: int) -> str:
        """Resolve a document id to the path it was ingested from."""
        return self._documents[doc_id].path

    def total_terms(self, doc_id: int) -> int:
        return self._documents[doc_id].total_terms

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)
