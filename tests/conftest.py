"""Shared fixtures and a minimal stand-in for tree-sitter nodes."""

import pytest
from tree_sitter_language_pack import get_parser


class FakeNode:
    """Just enough of the tree-sitter Node interface for the builder."""

    def __init__(self, type, start_byte, end_byte, children=(), is_named=True):
        self.type = type
        self.is_named = is_named
        self.start_byte = start_byte
        self.end_byte = end_byte
        self.start_point = (0, start_byte)
        self.end_point = (0, end_byte)
        self.children = list(children)
        self.parent = None
        for child in self.children:
            child.parent = self


def node(type, start, end, *children):
    return FakeNode(type, start, end, children)


@pytest.fixture
def parse_tree():
    """Parse source with tree-sitter; returns (root_node, source_bytes)."""
    def _parse(content: str, language: str = "javascript"):
        source = content.encode("utf-8")
        tree = get_parser(language).parse(source)
        return tree.root_node, source
    return _parse


def find_first(root, node_type):
    """Pre-order search for the first node of a type."""
    if root.type == node_type:
        return root
    for child in root.children:
        found = find_first(child, node_type)
        if found is not None:
            return found
    return None


def find_all(root, node_type):
    found = [root] if root.type == node_type else []
    for child in root.children:
        found.extend(find_all(child, node_type))
    return found
