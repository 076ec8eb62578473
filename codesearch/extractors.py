"""
Content extraction per file type.

Each supported extension maps to a stateless extractor strategy that turns a
file into raw text. Reading is best-effort: extract_text() returns None for
unsupported, unreadable or undecodable files instead of raising, so one bad
file never aborts an indexing run.
"""

import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, XMLParsedAsHTMLWarning

warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

logger = logging.getLogger(__name__)

# Tried in order when decoding a file.
TEXT_ENCODINGS = ("utf-8", "latin-1", "cp1252")

TEXT_EXTENSIONS = frozenset({".txt"})
CODE_EXTENSIONS = frozenset({".cpp", ".h", ".py", ".js", ".java", ".cs"})
HTML_EXTENSIONS = frozenset({".html", ".htm"})


def read_text_file(filepath: Path) -> str:
    """
    Read file content, handling common encodings.
    """
    for encoding in TEXT_ENCODINGS:
        try:
            return Path(filepath).read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_html_file(filepath: Path) -> str:
    return extract_text_from_html(read_text_file(filepath))


@dataclass(frozen=True)
class Extractor:
    """A content extraction strategy for a set of file extensions."""

    name: str
    extensions: frozenset[str]
    extract: Callable[[Path], str]

    def identify(self, path: str | Path) -> bool:
        return Path(path).suffix.lower() in self.extensions


TEXT_EXTRACTOR = Extractor("text", TEXT_EXTENSIONS, read_text_file)
# Source files share the plain-text normalization.
CODE_EXTRACTOR = Extractor("code", CODE_EXTENSIONS, read_text_file)
HTML_EXTRACTOR = Extractor("html", HTML_EXTENSIONS, read_html_file)

EXTRACTORS = (TEXT_EXTRACTOR, CODE_EXTRACTOR, HTML_EXTRACTOR)

_REGISTRY: dict[str, Extractor] = {
    ext: extractor for extractor in EXTRACTORS for ext in extractor.extensions
}


def get_extractor(path: str | Path) -> Extractor | None:
    """Return the extractor registered for the file's extension, if any."""
    return _REGISTRY.get(Path(path).suffix.lower())


def is_supported(path: str | Path) -> bool:
    return get_extractor(path) is not None


def supported_extensions() -> list[str]:
    return sorted(_REGISTRY)


def extract_text(path: str | Path) -> str | None:
    """
    Return the raw text of a file, or None if it is unsupported or cannot be read.
    """
    extractor = get_extractor(path)
    if extractor is None:
        logger.debug(f"No extractor for {path}")
        return None
    try:
        return extractor.extract(Path(path))
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return None
