"""Language table and structural categories for outline extraction."""

from pathlib import Path
from typing import Optional, Union


# File extension to tree-sitter language mapping
LANGUAGE_EXTENSIONS = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

SUPPORTED_LANGUAGES = frozenset(LANGUAGE_EXTENSIONS.values())


ROOT_KIND = "program"

# Node types that are outline-worthy, whether or not a name can be extracted.
# Maps node_type -> outline kind
STRUCTURAL_KINDS = {
    # Functions
    "function_declaration": "function",
    "function_expression": "function",
    "function": "function",
    "generator_function_declaration": "function",
    "generator_function": "function",
    "async_function_declaration": "function",
    "arrow_function": "function",
    # Methods
    "method_definition": "method",
    "method_signature": "method",
    "abstract_method_signature": "method",
    "constructor": "constructor",
    # Classes
    "class_declaration": "class",
    "class": "class",
    "abstract_class_declaration": "class",
    # Types
    "interface_declaration": "interface",
    "type_alias_declaration": "type",
    "enum_declaration": "enum",
    # Bindings and fields
    "variable_declarator": "variable",
    "public_field_definition": "property",
    "field_definition": "property",
    "property_signature": "property",
    # Modules
    "import_statement": "import",
    "internal_module": "namespace",
    "module": "namespace",
}


def language_for_path(path: Union[str, Path]) -> Optional[str]:
    """Return the tree-sitter language for a file path, or None."""
    return LANGUAGE_EXTENSIONS.get(Path(path).suffix.lower())
