"""
Query parsing: splits a raw query into a boolean mode and search terms.

The query goes through the same normalization as documents, then the literal
terms "and"/"or" are pulled out as operators. AND wins once it has been seen;
with no operator the query is an OR query. Repeated terms are kept.
"""

from enum import Enum
from typing import NamedTuple

from .tokenizer import iter_terms

AND_OPERATOR = "and"
OR_OPERATOR = "or"


class QueryMode(Enum):
    AND = "and"
    OR = "or"


class ParsedQuery(NamedTuple):
    mode: QueryMode
    terms: list[str]


def parse_query(raw_query: str) -> ParsedQuery:
    is_and = False
    terms: list[str] = []
    for token in iter_terms(raw_query):
        if token == AND_OPERATOR:
            is_and = True
        elif token == OR_OPERATOR:
            continue
        else:
            terms.append(token)
    return ParsedQuery(QueryMode.AND if is_and else QueryMode.OR, terms)
