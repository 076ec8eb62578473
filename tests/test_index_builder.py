"""
Unit tests for the Indexer and the build helpers.
"""

from codesearch.index_builder import (
    Indexer,
    IndexStats,
    build_index_from_directory,
    build_index_from_paths,
)


class TestIndexer:

    def test_add_text(self):
        indexer = Indexer()
        assert indexer.add_text("a.txt", "alpha beta") == 0
        assert indexer.index.occurrence_count("alpha", 0) == 1
        assert indexer.documents.path_of(0) == "a.txt"

    def test_add_file_uses_injected_extractor(self):
        contents = {"a.txt": "alpha", "c.txt": "gamma"}
        indexer = Indexer(extract=contents.get)
        assert indexer.add_file("a.txt") == 0
        assert indexer.add_file("b.txt") is None
        assert indexer.add_file("c.txt") == 1

    def test_separate_indexers_do_not_share_state(self):
        first = Indexer()
        second = Indexer()
        first.add_text("a.txt", "alpha")
        assert len(second.documents) == 0
        assert "alpha" not in second.index

    def test_stats(self, fox_indexer):
        assert fox_indexer.stats() == IndexStats(num_documents=2, num_terms=4, total_terms=7)


class TestBuildIndex:

    def test_from_paths_preserves_order_and_skips_failures(self):
        contents = {"z.txt": "last", "a.txt": "first"}
        indexer = build_index_from_paths(["z.txt", "broken.txt", "a.txt"], extract=contents.get)
        assert [doc.path for doc in indexer.documents] == ["z.txt", "a.txt"]
        assert [doc.doc_id for doc in indexer.documents] == [0, 1]

    def test_from_paths_reads_files(self, tmp_path):
        good = tmp_path / "good.txt"
        good.write_text("readable content", encoding="utf-8")
        indexer = build_index_from_paths([tmp_path / "missing.txt", good])
        assert len(indexer.documents) == 1
        assert indexer.documents.path_of(0) == str(good)

    def test_from_directory(self, project_tree):
        indexer = build_index_from_directory(project_tree)
        assert len(indexer.documents) == 3
        paths = [doc.path for doc in indexer.documents]
        assert paths == sorted(paths)
        assert indexer.index.document_frequency("quick") == 2
        assert indexer.index.document_frequency("fox") == 2
        assert "pdf" not in indexer.index
