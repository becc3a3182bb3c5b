"""Parse source code with tree-sitter and build its outline."""

import logging
from pathlib import Path
from typing import Optional, Union

from tree_sitter_language_pack import get_parser

from .builder import build_outline
from .languages import SUPPORTED_LANGUAGES, language_for_path
from .outline import OutlineNode

logger = logging.getLogger(__name__)


class UnsupportedLanguageError(ValueError):
    """Raised for languages or file extensions without a grammar."""


def parse_source(
    content: str,
    language: str,
    max_depth: Optional[int] = None,
    named_only: bool = True,
) -> OutlineNode:
    """Parse source code and build its outline.

    Args:
        content: Raw source code
        language: tree-sitter language name ("javascript", "typescript", "tsx")
        max_depth: Outline depth limit; None for unbounded
        named_only: Keep only named nodes and their ancestors

    Returns:
        Root OutlineNode for the file
    """
    if language not in SUPPORTED_LANGUAGES:
        raise UnsupportedLanguageError(f"Unsupported language: {language}")

    source_bytes = content.encode("utf-8")

    # Parsers are not shared between threads; get a fresh one per call
    parser = get_parser(language)
    tree = parser.parse(source_bytes)

    return build_outline(tree.root_node, source_bytes, max_depth=max_depth, named_only=named_only)


def parse_file(
    path: Union[str, Path],
    max_depth: Optional[int] = None,
    named_only: bool = True,
) -> OutlineNode:
    """Read a file from disk and build its outline."""
    language = language_for_path(path)
    if language is None:
        raise UnsupportedLanguageError(f"Unsupported file type: {path}")

    content = Path(path).read_text(encoding="utf-8", errors="replace")
    logger.debug("Parsing %s as %s", path, language)
    return parse_source(content, language, max_depth=max_depth, named_only=named_only)
