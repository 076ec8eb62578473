"""
Interactive command-line search over a folder of source and text files.

The folder is indexed in memory at startup (nothing is written to disk), then
queries are read one per line until the user types "exit".

Query syntax:
- terms separated by spaces are OR-ed together
- "and" anywhere in the query switches to AND semantics
- "or" is accepted and ignored (OR is the default)

Usage:
    codesearch path/to/project
    python -m codesearch.search_cli path/to/project --stats
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Iterable, List

from .index_builder import Indexer, build_index_from_paths
from .logging_config import setup_logging
from .query_engine import QueryEngine, Result
from .scanner import list_files_recursive

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
ROOT_PROMPT = "Enter root folder path of your project: "
QUERY_PROMPT = "\nEnter search query (supports AND, OR) or type 'exit': "


def format_results(indexer: Indexer, results: List[Result]) -> List[str]:
    """Render ranked results as display lines."""
    if not results:
        return ["No results found."]
    lines = ["Results (ranked by TF-IDF):"]
    for res in results:
        path = indexer.documents.path_of(res.doc_id)
        lines.append(f"{path} | frequency: {res.frequency} | TF-IDF: {res.score:.4f}")
    return lines


def format_stats(indexer: Indexer) -> List[str]:
    stats = indexer.stats()
    return [
        "",
        "| Metric                      | Value |",
        "|-----------------------------|-------|",
        f"| Number of indexed documents | {stats.num_documents} |",
        f"| Number of unique terms      | {stats.num_terms} |",
        f"| Total number of terms       | {stats.total_terms} |",
        "",
    ]


def run_search_loop(
    indexer: Indexer,
    input_fn: Callable[[str], str] | None = None,
    output: Callable[[str], None] | None = None,
) -> None:
    """
    Interactive command-line search loop.
    Stops on the exact line "exit", on EOF or on Ctrl+C.
    """
    input_fn = input_fn or input
    output = output or print
    engine = QueryEngine(indexer)
    while True:
        try:
            raw_query = input_fn(QUERY_PROMPT)
        except (EOFError, KeyboardInterrupt):
            output("")
            break
        if raw_query == EXIT_COMMAND:
            break

        results = engine.search(raw_query)
        logger.debug(f"Query {raw_query!r}: {len(results)} results")
        for line in format_results(indexer, results):
            output(line)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search a project folder with boolean TF-IDF queries.")
    parser.add_argument(
        "root",
        type=Path,
        nargs="?",
        default=None,
        help="Root folder to index (prompted for when omitted).",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print index analytics after indexing.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write detailed logs to this file.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    setup_logging(console_level=getattr(logging, args.log_level), log_file=args.log_file)

    root = args.root
    if root is None:
        try:
            root = Path(input(ROOT_PROMPT).strip())
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

    print("Indexing files...")
    try:
        files = list_files_recursive(root)
    except OSError as e:
        print(f"Error: {e}")
        return 1

    if not files:
        print("No supported files found.")
        return 0

    indexer = build_index_from_paths(files)
    print(f"Indexed {len(indexer.documents)} files.")
    if args.stats:
        for line in format_stats(indexer):
            print(line)

    run_search_loop(indexer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
