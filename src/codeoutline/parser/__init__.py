"""Parser package for building code outlines from tree-sitter trees."""

from .outline import OutlineNode, Position
from .node_utils import get_node_text, extract_identifier, clean_string
from .extractors import (
    BaseExtractor,
    FunctionExtractor,
    ClassExtractor,
    VariableExtractor,
    InterfaceExtractor,
    ImportExtractor,
    NamespaceExtractor,
)
from .registry import ExtractorRegistry, ExtractorConflictError, DEFAULT_REGISTRY
from .languages import LANGUAGE_EXTENSIONS, STRUCTURAL_KINDS, language_for_path
from .builder import OutlineBuilder, build_outline
from .parse import parse_source, parse_file, UnsupportedLanguageError

__all__ = [
    "OutlineNode",
    "Position",
    "get_node_text",
    "extract_identifier",
    "clean_string",
    "BaseExtractor",
    "FunctionExtractor",
    "ClassExtractor",
    "VariableExtractor",
    "InterfaceExtractor",
    "ImportExtractor",
    "NamespaceExtractor",
    "ExtractorRegistry",
    "ExtractorConflictError",
    "DEFAULT_REGISTRY",
    "LANGUAGE_EXTENSIONS",
    "STRUCTURAL_KINDS",
    "language_for_path",
    "OutlineBuilder",
    "build_outline",
    "parse_source",
    "parse_file",
    "UnsupportedLanguageError",
]
