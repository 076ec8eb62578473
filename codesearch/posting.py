"""
Posting and inverted index data structures.

A posting list maps document id -> occurrence count of a term in that document.
Counts are always >= 1; a term missing from a document has no entry.
The index only grows: one ingestion pass, no deletions, no merges.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping


@dataclass(frozen=True)
class Posting:
    """
    Represents a term's occurrence in a document.
    - doc_id: document identifier (ingestion order)
    - tf: raw occurrence count of the term in the document
    """

    doc_id: int
    tf: int


_EMPTY: Mapping[int, int] = MappingProxyType({})


class InvertedIndex:
    """
    Inverted index: map from term -> {doc_id: occurrence count}.
    Dict-of-dicts so that a term's posting list and any single count are O(1).
    """

    def __init__(self) -> None:
        self._index: dict[str, dict[int, int]] = {}
        self._doc_ids: set[int] = set()

    def register_document(self, doc_id: int) -> None:
        """Count a document toward N even if it contributes no terms."""
        self._doc_ids.add(doc_id)

    def record(self, term: str, doc_id: int) -> None:
        """Increment the occurrence count of term in doc_id."""
        postings = self._index.get(term)
        if postings is None:
            postings = self._index[term] = {}
        postings[doc_id] = postings.get(doc_id, 0) + 1
        self._doc_ids.add(doc_id)

    def get_posting_list(self, term: str) -> Mapping[int, int]:
        """Return {doc_id: count} for a term, or an empty mapping."""
        return self._index.get(term, _EMPTY)

    def get_postings(self, term: str) -> list[Posting]:
        """Return the postings for a term sorted by doc_id, or empty list."""
        return [
            Posting(doc_id=doc_id, tf=tf)
            for doc_id, tf in sorted(self.get_posting_list(term).items())
        ]

    def doc_ids(self, term: str) -> set[int]:
        return set(self.get_posting_list(term))

    def document_frequency(self, term: str) -> int:
        return len(self.get_posting_list(term))

    def occurrence_count(self, term: str, doc_id: int) -> int:
        return self.get_posting_list(term).get(doc_id, 0)

    @property
    def num_documents(self) -> int:
        """N: number of documents indexed."""
        return len(self._doc_ids)

    def tokens(self) -> Iterator[str]:
        """Iterate over all terms in the index."""
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, term: str) -> bool:
        return term in self._index
