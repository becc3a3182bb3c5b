"""Registry mapping node types to the extractor that names them."""

import logging
from types import MappingProxyType
from typing import Iterable, Optional

from .extractors import ALL_EXTRACTORS, BaseExtractor

logger = logging.getLogger(__name__)


class ExtractorConflictError(ValueError):
    """Raised when two extractors claim the same node type."""


class ExtractorRegistry:
    """Immutable lookup table from node type to extractor.

    Built once; lookups are plain reads, so a single instance can be
    shared by concurrent parsing tasks.
    """

    def __init__(self, extractors: Optional[Iterable[BaseExtractor]] = None):
        if extractors is None:
            extractors = [cls() for cls in ALL_EXTRACTORS]

        table: dict[str, BaseExtractor] = {}
        for extractor in extractors:
            for node_type in extractor.get_supported_types():
                owner = table.get(node_type)
                if owner is not None:
                    raise ExtractorConflictError(
                        f"Node type {node_type!r} claimed by both {owner!r} and {extractor!r}"
                    )
                table[node_type] = extractor

        self._table = MappingProxyType(table)
        logger.debug("Extractor registry built with %d node types", len(table))

    @property
    def categories(self) -> frozenset[str]:
        """All node types claimed by some extractor."""
        return frozenset(self._table)

    def lookup(self, node_type: str) -> Optional[BaseExtractor]:
        """Return the extractor responsible for a node type, or None."""
        return self._table.get(node_type)

    def extract_name(self, node, source: bytes) -> Optional[str]:
        """Name a node via its extractor; None when no extractor claims it."""
        extractor = self._table.get(node.type)
        if extractor is None:
            return None
        return extractor.extract_name(node, source)

    def __contains__(self, node_type: str) -> bool:
        return node_type in self._table

    def __len__(self) -> int:
        return len(self._table)


DEFAULT_REGISTRY = ExtractorRegistry()
