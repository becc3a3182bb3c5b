"""Per-construct name extractors.

Each extractor owns a fixed set of tree-sitter node types and knows how to
find a human-readable name for nodes of those types. Extractors never raise
on unexpected shapes; they return None and the node stays unnamed.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .node_utils import clean_string, extract_identifier, get_node_text


# Upper bound on ancestors visited when naming an anonymous construct
MAX_PARENT_HOPS = 3

# Expression wrappers that sit between an anonymous function and the
# construct that names it, e.g. `const f = (() => {})` or `[a, b] = [...]`.
# Arrays only count when the binding they reach is an array pattern.
WRAPPER_TYPES = frozenset({
    "parenthesized_expression",
    "array",
    "as_expression",
    "satisfies_expression",
    "non_null_expression",
    "type_assertion",
})

BINDING_PATTERN_TYPES = ("identifier", "object_pattern", "array_pattern")

KEY_TYPES = (
    "property_identifier",
    "identifier",
    "private_property_identifier",
    "string",
)

ASSIGNMENT_TARGET_TYPES = (
    "identifier",
    "member_expression",
    "subscript_expression",
    "object_pattern",
    "array_pattern",
)

FIELD_TYPES = ("public_field_definition", "field_definition")


class BaseExtractor(ABC):
    """Base class for construct-family name extractors."""

    @abstractmethod
    def get_supported_types(self) -> tuple[str, ...]:
        """Node types this extractor is responsible for."""

    @abstractmethod
    def extract_name(self, node, source: bytes) -> Optional[str]:
        """Extract a name for a node of a supported type, or None."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _binding_name(declarator, source: bytes) -> Optional[str]:
    """Left-hand binding of a variable declarator, verbatim."""
    if not declarator.children:
        return None
    pattern = declarator.children[0]
    if pattern.type in BINDING_PATTERN_TYPES:
        return get_node_text(pattern, source)
    return None


def _key_name(node, source: bytes) -> Optional[str]:
    """Property key of a pair, field or signature, with quotes removed."""
    key = extract_identifier(node, source, KEY_TYPES)
    if key is None:
        return None
    return clean_string(key)


def _context_parent(node):
    """Walk up through wrapper expressions, at most MAX_PARENT_HOPS steps.

    Returns (parent, through_array); through_array is set when an array
    literal was crossed on the way up.
    """
    parent = node.parent
    hops = 1
    through_array = False
    while parent is not None and parent.type in WRAPPER_TYPES and hops < MAX_PARENT_HOPS:
        through_array = through_array or parent.type == "array"
        parent = parent.parent
        hops += 1
    return parent, through_array


def _bound_pattern(parent):
    """Left-hand side of a declarator or assignment, if any."""
    if parent.type in ("variable_declarator", "assignment_expression") and parent.children:
        return parent.children[0]
    return None


def name_from_parent_context(node, source: bytes) -> Optional[str]:
    """Infer a name for an anonymous construct from where it is bound."""
    parent, through_array = _context_parent(node)
    if parent is None:
        return None

    # Array elements are named only by a destructuring pattern: `[a, b] = [...]`
    if through_array:
        pattern = _bound_pattern(parent)
        if pattern is None or pattern.type != "array_pattern":
            return None

    # const foo = () => {} / const { a, b } = ...
    if parent.type == "variable_declarator":
        return _binding_name(parent, source)

    # { bar: () => {} } / class A { handler = () => {} }
    if parent.type == "pair":
        key = parent.children[0] if parent.children else None
        if key is not None and key.type in KEY_TYPES:
            return clean_string(get_node_text(key, source))
        return None
    if parent.type in FIELD_TYPES:
        return _key_name(parent, source)

    # module.exports.run = () => {} / [fn1, fn2] = [...]
    if parent.type == "assignment_expression":
        target = parent.children[0] if parent.children else None
        if target is not None and target.type in ASSIGNMENT_TARGET_TYPES:
            return get_node_text(target, source)

    return None


class FunctionExtractor(BaseExtractor):
    """Functions, methods, arrow functions and constructors."""

    FUNCTION_TYPES = (
        "function_declaration",
        "function_expression",
        "function",
        "generator_function_declaration",
        "generator_function",
        "async_function_declaration",
    )
    METHOD_TYPES = (
        "method_definition",
        "method_signature",
        "abstract_method_signature",
    )

    def get_supported_types(self) -> tuple[str, ...]:
        return self.FUNCTION_TYPES + self.METHOD_TYPES + ("arrow_function", "constructor")

    def extract_name(self, node, source: bytes) -> Optional[str]:
        if node.type == "constructor":
            return "constructor"
        if node.type == "arrow_function":
            return name_from_parent_context(node, source)
        if node.type in self.METHOD_TYPES:
            return _key_name(node, source)
        if node.type in self.FUNCTION_TYPES:
            name = extract_identifier(node, source)
            if name is None:
                name = name_from_parent_context(node, source)
            return name
        return None


class ClassExtractor(BaseExtractor):
    """Class declarations and class expressions."""

    def get_supported_types(self) -> tuple[str, ...]:
        return ("class_declaration", "class", "abstract_class_declaration")

    def extract_name(self, node, source: bytes) -> Optional[str]:
        name = extract_identifier(node, source, ("type_identifier", "identifier"))
        if name is None and node.type == "class":
            name = name_from_parent_context(node, source)
        return name


class VariableExtractor(BaseExtractor):
    """Variable bindings and class/interface fields."""

    def get_supported_types(self) -> tuple[str, ...]:
        return ("variable_declarator",) + FIELD_TYPES + ("property_signature",)

    def extract_name(self, node, source: bytes) -> Optional[str]:
        if node.type == "variable_declarator":
            return _binding_name(node, source)
        return _key_name(node, source)


class InterfaceExtractor(BaseExtractor):
    """Interfaces, type aliases and enums."""

    def get_supported_types(self) -> tuple[str, ...]:
        return ("interface_declaration", "type_alias_declaration", "enum_declaration")

    def extract_name(self, node, source: bytes) -> Optional[str]:
        return extract_identifier(node, source, ("type_identifier", "identifier"))


class ImportExtractor(BaseExtractor):
    """Import statements, named by their module specifier."""

    def get_supported_types(self) -> tuple[str, ...]:
        return ("import_statement",)

    def extract_name(self, node, source: bytes) -> Optional[str]:
        specifier = extract_identifier(node, source, ("string",))
        if specifier is None:
            return None
        return clean_string(specifier)


class NamespaceExtractor(BaseExtractor):
    """TypeScript namespaces and ambient module declarations."""

    def get_supported_types(self) -> tuple[str, ...]:
        return ("internal_module", "module")

    def extract_name(self, node, source: bytes) -> Optional[str]:
        name = extract_identifier(node, source, ("identifier", "nested_identifier", "string"))
        if name is None:
            return None
        return clean_string(name)


ALL_EXTRACTORS = (
    FunctionExtractor,
    ClassExtractor,
    VariableExtractor,
    InterfaceExtractor,
    ImportExtractor,
    NamespaceExtractor,
)
