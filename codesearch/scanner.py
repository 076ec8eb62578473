"""
Recursive folder scanner: finds the files that have a registered extractor.
"""

import logging
from pathlib import Path

from .extractors import is_supported

logger = logging.getLogger(__name__)


def list_files_recursive(root: str | Path) -> list[Path]:
    """
    Return every supported file below root, sorted by path so that document
    ids are stable between runs. Raises FileNotFoundError or
    NotADirectoryError if root cannot be scanned.
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Folder not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a folder: {root}")

    files = sorted(
        (p for p in root.rglob("*") if p.is_file() and is_supported(p)),
        key=lambda p: str(p),
    )
    logger.info(f"Found {len(files)} supported files under {root}")
    return files
