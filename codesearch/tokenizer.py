"""
Tokenizer shared by indexing and querying.
Splits text on whitespace and normalizes each token to a search term.
No stemming and no stop-word removal: "and"/"or" stay in documents as terms.
"""

import re
from typing import Iterator

from nltk.tokenize import WhitespaceTokenizer

_SPLITTER = WhitespaceTokenizer()

# Anything that is not a lowercase ASCII letter, digit or underscore.
_NON_TERM_CHARS = re.compile(r"[^a-z0-9_]")


def normalize_term(word: str) -> str:
    """
    Lowercase a word and strip every character that is not alphanumeric or
    underscore. Returns "" for pure punctuation. Idempotent.
    """
    return _NON_TERM_CHARS.sub("", word.lower())


def iter_terms(text: str) -> Iterator[str]:
    """
    Lazily yield normalized terms from text, in order.
    Tokens that normalize to nothing are dropped. Calling again restarts.
    """
    if not text:
        return
    for start, end in _SPLITTER.span_tokenize(text):
        term = normalize_term(text[start:end])
        if term:
            yield term


def tokenize(text: str) -> list[str]:
    """Return the normalized terms of text as a list."""
    return list(iter_terms(text))
