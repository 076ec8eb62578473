"""Shared fixtures for codesearch tests"""

import logging

import pytest

from codesearch.index_builder import Indexer
from codesearch.query_engine import QueryEngine


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put the originals back after each test"""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def fox_indexer():
    """Two documents: 'the quick fox' (doc 0) and 'the slow fox fox' (doc 1)"""
    indexer = Indexer()
    indexer.add_text("doc0.txt", "the quick fox")
    indexer.add_text("doc1.txt", "the slow fox fox")
    return indexer


@pytest.fixture
def fox_engine(fox_indexer):
    return QueryEngine(fox_indexer)


@pytest.fixture
def three_doc_indexer():
    """fox_indexer plus a third document 'lazy dog' (doc 2)"""
    indexer = Indexer()
    indexer.add_text("doc0.txt", "the quick fox")
    indexer.add_text("doc1.txt", "the slow fox fox")
    indexer.add_text("doc2.txt", "lazy dog")
    return indexer


@pytest.fixture
def project_tree(tmp_path):
    """Small project folder with supported and unsupported files"""
    (tmp_path / "sub" / "deep").mkdir(parents=True)
    (tmp_path / "README.txt").write_text("Quick start: run the indexer.", encoding="utf-8")
    (tmp_path / "sub" / "main.py").write_text(
        "# quick fox demo\ndef main():\n    pass\n", encoding="utf-8"
    )
    (tmp_path / "sub" / "deep" / "Fox.java").write_text(
        "class Fox { void jump() { } }", encoding="utf-8"
    )
    (tmp_path / "notes.pdf").write_bytes(b"%PDF-1.4 fox")
    (tmp_path / "image.png").write_bytes(b"\x89PNG fox")
    return tmp_path
