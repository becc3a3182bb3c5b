"""Outline node dataclass."""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional


class Position(NamedTuple):
    """Zero-based (row, column) position in a source file."""
    row: int
    column: int

    def to_dict(self) -> dict:
        return {"row": self.row, "column": self.column}


@dataclass
class OutlineNode:
    """One structural element of a file outline."""
    kind: str                       # "program" | "function" | "method" | "class" | ...
    start: Position                 # Span start, copied from the syntax node
    end: Position                   # Span end, copied from the syntax node
    name: Optional[str] = None      # None for anonymous constructs
    children: list["OutlineNode"] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dict, omitting empty fields."""
        result = {"kind": self.kind}
        if self.name is not None:
            result["name"] = self.name
        result["start"] = self.start.to_dict()
        result["end"] = self.end.to_dict()
        if self.children:
            result["children"] = [c.to_dict() for c in self.children]
        return result

    def walk(self, depth: int = 0):
        """Yield (node, depth) pairs in pre-order."""
        yield self, depth
        for child in self.children:
            yield from child.walk(depth + 1)
