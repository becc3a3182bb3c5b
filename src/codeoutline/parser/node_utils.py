"""Stateless helpers operating on a single tree-sitter node."""

from typing import Iterable, Optional

DEFAULT_IDENTIFIER_TYPES = ("identifier",)

_QUOTES = ('"', "'", "`")


def get_node_text(node, source: bytes) -> str:
    """Return the exact source text covered by a node's span."""
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def extract_identifier(
    node,
    source: bytes,
    candidate_types: Iterable[str] = DEFAULT_IDENTIFIER_TYPES,
) -> Optional[str]:
    """Return the text of the first direct child whose type is a candidate.

    Only direct children are scanned, in source order. Returns None when
    no child matches.
    """
    candidates = set(candidate_types)
    for child in node.children:
        if child.type in candidates:
            return get_node_text(child, source)
    return None


def clean_string(text: str) -> str:
    """Strip one matching pair of surrounding quotes (", ' or backtick)."""
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        return text[1:-1]
    return text
