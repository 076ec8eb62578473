"""
Query evaluation: boolean candidate selection and TF-IDF ranking.

    score(d) = sum_{t in query terms} (count(t, d) / total_terms(d)) * ln(N / df(t))

where N is the number of indexed documents and df(t) the number of documents
containing t. Terms with df(t) == 0 and empty documents contribute 0.
Repeated query terms are summed once per occurrence in the query.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Set

from .query_parser import ParsedQuery, QueryMode, parse_query

if TYPE_CHECKING:
    from .index_builder import Indexer


@dataclass(frozen=True)
class Result:
    doc_id: int
    frequency: int
    score: float


class QueryEngine:
    """
    Answers queries against an Indexer. Reads the index, never mutates it.
    """

    def __init__(self, indexer: Indexer) -> None:
        self.indexer = indexer

    def search(self, raw_query: str) -> List[Result]:
        """
        Parse and evaluate a raw query. Returns every matching document,
        highest score first; equal scores are ordered by doc_id.
        """
        return self.evaluate(parse_query(raw_query))

    def evaluate(self, query: ParsedQuery) -> List[Result]:
        results = [
            Result(
                doc_id=doc_id,
                frequency=self.frequency(query.terms, doc_id),
                score=self.score(query.terms, doc_id),
            )
            for doc_id in sorted(self.candidate_documents(query))
        ]
        # sorted() is stable, so ties keep ascending doc_id order.
        return sorted(results, key=lambda r: r.score, reverse=True)

    def candidate_documents(self, query: ParsedQuery) -> Set[int]:
        index = self.indexer.index
        if not query.terms:
            return set()

        if query.mode is QueryMode.AND:
            candidates = index.doc_ids(query.terms[0])
            for term in query.terms[1:]:
                if not candidates:
                    break
                candidates &= index.doc_ids(term)
            return candidates

        union: Set[int] = set()
        for term in query.terms:
            union |= index.doc_ids(term)
        return union

    def frequency(self, terms: List[str], doc_id: int) -> int:
        """Sum of raw occurrence counts of the query terms in a document."""
        index = self.indexer.index
        return sum(index.occurrence_count(term, doc_id) for term in terms)

    def score(self, terms: List[str], doc_id: int) -> float:
        index = self.indexer.index
        total_terms = self.indexer.documents.total_terms(doc_id)
        n_docs = index.num_documents
        if total_terms == 0 or n_docs == 0:
            return 0.0

        score = 0.0
        for term in terms:
            df = index.document_frequency(term)
            if df == 0:
                continue
            tf = index.occurrence_count(term, doc_id)
            score += (tf / total_terms) * math.log(n_docs / df)
        return score
