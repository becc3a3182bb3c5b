"""Render outline results as ASCII tree, JSON, YAML or LLM text."""

import json
from enum import Enum
from typing import Iterable

import yaml

from ..parser import OutlineNode


ANONYMOUS = "<anonymous>"

LLMTEXT_PREAMBLE = (
    "Code outline. One line per declaration: <kind> <name> L<start>-<end>.\n"
    "Line numbers are 1-based and inclusive; indentation shows nesting."
)


class OutputFormat(str, Enum):
    ASCII = "ascii"
    JSON = "json"
    YAML = "yaml"
    LLMTEXT = "llmtext"


def _label(node: OutlineNode) -> str:
    name = node.name if node.name is not None else ANONYMOUS
    return f"{node.kind} {name}"


def _line_range(node: OutlineNode) -> str:
    return f"L{node.start.row + 1}-{node.end.row + 1}"


def format_ascii(results: Iterable) -> str:
    """Box-drawing tree per file."""
    blocks = []
    for result in results:
        lines = [result.file]
        if result.outline is None:
            lines.append(f"└── (error: {result.error or 'unknown error'})")
        elif not result.outline.children:
            lines.append("└── (empty)")
        else:
            _ascii_children(result.outline.children, "", lines)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def _ascii_children(children: list[OutlineNode], prefix: str, lines: list[str]) -> None:
    for i, child in enumerate(children):
        is_last = i == len(children) - 1
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_label(child)} [{_line_range(child)}]")
        child_prefix = prefix + ("    " if is_last else "│   ")
        _ascii_children(child.children, child_prefix, lines)


def format_json(results: Iterable) -> str:
    return json.dumps([r.to_dict() for r in results], indent=2)


def format_yaml(results: Iterable) -> str:
    return yaml.safe_dump(
        [r.to_dict() for r in results],
        sort_keys=False,
        allow_unicode=True,
    )


def format_llmtext(results: Iterable) -> str:
    """Compact indented text meant to be pasted into an LLM prompt."""
    lines = [LLMTEXT_PREAMBLE]
    for result in results:
        lines.append("")
        lines.append(f"# {result.file}")
        if result.outline is None:
            lines.append(f"! error: {result.error or 'unknown error'}")
            continue
        for node, depth in result.outline.walk():
            if depth == 0:
                continue
            indent = "  " * (depth - 1)
            lines.append(f"{indent}{_label(node)} {_line_range(node)}")
    return "\n".join(lines)


_FORMATTERS = {
    OutputFormat.ASCII: format_ascii,
    OutputFormat.JSON: format_json,
    OutputFormat.YAML: format_yaml,
    OutputFormat.LLMTEXT: format_llmtext,
}


class Formatter:
    """Formats a batch of ProcessedFile results in one output format."""

    def __init__(self, fmt: OutputFormat = OutputFormat.ASCII):
        self.format_type = OutputFormat(fmt)

    def format(self, results: list) -> str:
        return _FORMATTERS[self.format_type](results)


def validate_format(value: str) -> OutputFormat:
    """Parse an output format name.

    Raises:
        ValueError: for unknown formats
    """
    try:
        return OutputFormat(value.lower())
    except ValueError:
        choices = ", ".join(f.value for f in OutputFormat)
        raise ValueError(f"Invalid format '{value}'. Choose one of: {choices}") from None
