"""Tests for construct-family name extractors."""

import pytest
from codeoutline.parser import (
    FunctionExtractor,
    ClassExtractor,
    VariableExtractor,
    InterfaceExtractor,
    ImportExtractor,
    NamespaceExtractor,
)
from codeoutline.parser.extractors import ALL_EXTRACTORS, name_from_parent_context

from conftest import find_all, find_first, node


def _arrow_names(parse_tree, content, language="javascript"):
    root, source = parse_tree(content, language)
    extractor = FunctionExtractor()
    return [extractor.extract_name(n, source) for n in find_all(root, "arrow_function")]


def test_arrow_function_variable(parse_tree):
    """Test arrow assigned to a const takes the variable name."""
    assert _arrow_names(parse_tree, "const foo = () => {};") == ["foo"]


def test_arrow_function_object_property(parse_tree):
    """Test arrow as object literal value takes the key."""
    assert _arrow_names(parse_tree, "const obj = { bar: () => {} };") == ["bar"]


def test_arrow_function_quoted_key(parse_tree):
    """Test quoted keys are cleaned."""
    assert _arrow_names(parse_tree, "const obj = { 'on-click': () => 1 };") == ["on-click"]


def test_arrow_function_destructuring_assignment(parse_tree):
    """Test destructuring pattern text is used verbatim."""
    names = _arrow_names(parse_tree, "[fn1, fn2] = [() => {}, () => {}];")
    assert names == ["[fn1, fn2]", "[fn1, fn2]"]


def test_arrow_function_destructuring_declaration(parse_tree):
    """Test destructuring declarator pattern is not decomposed."""
    names = _arrow_names(parse_tree, "const [fn1, fn2] = [() => {}, () => {}];")
    assert names == ["[fn1, fn2]", "[fn1, fn2]"]


def test_arrow_function_array_element(parse_tree):
    """Test arrows stored in an array literal stay anonymous."""
    assert _arrow_names(parse_tree, "const routes = [() => {}, () => {}];") == [None, None]
    assert _arrow_names(parse_tree, "handlers = [() => 1];") == [None]
    assert _arrow_names(parse_tree, "const obj = { hooks: [() => 1] };") == [None]


def test_arrow_function_bare_argument(parse_tree):
    """Test arrow passed to a call has no name."""
    assert _arrow_names(parse_tree, "setTimeout(() => {}, 10);") == [None]


def test_arrow_function_parenthesized(parse_tree):
    """Test parentheses around an arrow are looked through."""
    assert _arrow_names(parse_tree, "const wrapped = (() => 1);") == ["wrapped"]


def test_arrow_function_member_assignment(parse_tree):
    """Test assignment to a member expression uses its text."""
    assert _arrow_names(parse_tree, "module.exports.run = () => {};") == ["module.exports.run"]


def test_arrow_function_class_field(parse_tree):
    """Test class field arrows take the field name."""
    source = "class A { handler = () => {}; }"
    assert _arrow_names(parse_tree, source, "typescript") == ["handler"]


def test_arrow_function_hop_limit():
    """Test the upward walk stops after a bounded number of wrappers."""
    source = b"x = (((() => 1)))"
    arrow = node("arrow_function", 7, 14)
    nested = arrow
    for _ in range(4):
        nested = node("parenthesized_expression", 4, 16, nested)
    node("assignment_expression", 0, 17, node("identifier", 0, 1), nested)
    assert name_from_parent_context(arrow, source) is None


def test_function_declaration(parse_tree):
    """Test function declarations use their identifier."""
    root, source = parse_tree("function greet(name) { return name; }")
    fn = find_first(root, "function_declaration")
    assert FunctionExtractor().extract_name(fn, source) == "greet"


def test_generator_function(parse_tree):
    """Test generator declarations."""
    root, source = parse_tree("function* ids() { yield 1; }")
    fn = find_first(root, "generator_function_declaration")
    assert FunctionExtractor().extract_name(fn, source) == "ids"


def test_anonymous_function_expression_uses_binding(parse_tree):
    """Test anonymous function expressions fall back to the binding."""
    root, source = parse_tree("const handler = function () {};")
    declarator = find_first(root, "variable_declarator")
    fn = declarator.children[-1]
    assert FunctionExtractor().extract_name(fn, source) == "handler"


def test_method_definition(parse_tree):
    """Test method names, including quoted ones."""
    root, source = parse_tree("class C { run() {} 'quoted name'() {} #secret() {} }")
    methods = find_all(root, "method_definition")
    names = [FunctionExtractor().extract_name(m, source) for m in methods]
    assert names == ["run", "quoted name", "#secret"]


def test_constructor_literal_name():
    """Test constructor nodes are always named constructor."""
    ctor = node("constructor", 0, 10)
    assert FunctionExtractor().extract_name(ctor, b"x" * 10) == "constructor"


def test_class_names(parse_tree):
    """Test class declarations in JS and TS."""
    root, source = parse_tree("class Calculator {}")
    assert ClassExtractor().extract_name(find_first(root, "class_declaration"), source) == "Calculator"

    root, source = parse_tree("abstract class Shape {}", "typescript")
    cls = find_first(root, "abstract_class_declaration")
    assert ClassExtractor().extract_name(cls, source) == "Shape"


def test_class_expression_uses_binding(parse_tree):
    """Test anonymous class expressions fall back to the binding."""
    root, source = parse_tree("const Widget = class {};")
    cls = find_first(root, "class")
    assert ClassExtractor().extract_name(cls, source) == "Widget"


def test_variable_declarator(parse_tree):
    """Test declarators report their binding verbatim."""
    root, source = parse_tree("let a = 1, { b, c } = obj;")
    names = [VariableExtractor().extract_name(d, source) for d in find_all(root, "variable_declarator")]
    assert names == ["a", "{ b, c }"]


def test_field_definitions(parse_tree):
    """Test TS fields and interface properties."""
    root, source = parse_tree(
        "class S { private users: string[] = []; }\ninterface U { 'full-name': string; }",
        "typescript",
    )
    extractor = VariableExtractor()
    field = find_first(root, "public_field_definition")
    prop = find_first(root, "property_signature")
    assert extractor.extract_name(field, source) == "users"
    assert extractor.extract_name(prop, source) == "full-name"


def test_interface_type_enum(parse_tree):
    """Test interface, type alias and enum names."""
    root, source = parse_tree(
        "interface User { id: number }\ntype ID = string | number;\nenum Color { Red }",
        "typescript",
    )
    extractor = InterfaceExtractor()
    assert extractor.extract_name(find_first(root, "interface_declaration"), source) == "User"
    assert extractor.extract_name(find_first(root, "type_alias_declaration"), source) == "ID"
    assert extractor.extract_name(find_first(root, "enum_declaration"), source) == "Color"


def test_import_statement(parse_tree):
    """Test imports are named by their module specifier."""
    root, source = parse_tree('import { readFile } from "node:fs";\nimport "./side-effect";')
    names = [ImportExtractor().extract_name(n, source) for n in find_all(root, "import_statement")]
    assert names == ["node:fs", "./side-effect"]


def test_namespace(parse_tree):
    """Test TS namespaces."""
    root, source = parse_tree("namespace Utils { export const x = 1; }", "typescript")
    ns = find_first(root, "internal_module")
    assert NamespaceExtractor().extract_name(ns, source) == "Utils"


@pytest.mark.parametrize("extractor_cls", ALL_EXTRACTORS)
def test_unexpected_shapes_return_none(extractor_cls):
    """Test extractors degrade to None instead of raising."""
    extractor = extractor_cls()
    for node_type in extractor.get_supported_types():
        bare = node(node_type, 0, 0)
        name = extractor.extract_name(bare, b"")
        assert name is None or node_type == "constructor"


def test_supported_types_do_not_overlap():
    """Test each node type is owned by exactly one extractor."""
    seen = set()
    for extractor_cls in ALL_EXTRACTORS:
        types = set(extractor_cls().get_supported_types())
        assert not (types & seen)
        seen |= types
