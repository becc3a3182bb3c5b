"""Build a filtered, depth-bounded outline tree from a tree-sitter tree."""

from typing import Optional

from .languages import ROOT_KIND, STRUCTURAL_KINDS
from .outline import OutlineNode, Position
from .registry import DEFAULT_REGISTRY, ExtractorRegistry


class _Frame:
    """One pending syntax node on the walk stack.

    `sink` receives structural descendants; `outline` is set only for
    structural nodes and is attached to `parent_sink` once its subtree is done.
    """

    __slots__ = ("children", "depth", "sink", "outline", "parent_sink")

    def __init__(self, node, depth, sink, outline=None, parent_sink=None):
        self.children = iter(node.children)
        self.depth = depth
        self.sink = sink
        self.outline = outline
        self.parent_sink = parent_sink


class OutlineBuilder:
    """Walks a syntax tree and materializes structural nodes.

    The walk keeps an explicit stack, so arbitrarily deep expression nesting
    (long `a + b + c ...` chains) never exhausts the interpreter stack.

    Args:
        registry: Extractor registry used to name nodes
        structural_kinds: Maps outline-worthy node types to outline kinds
    """

    def __init__(
        self,
        registry: ExtractorRegistry = DEFAULT_REGISTRY,
        structural_kinds: Optional[dict[str, str]] = None,
    ):
        self.registry = registry
        self.structural_kinds = STRUCTURAL_KINDS if structural_kinds is None else structural_kinds

    def build(
        self,
        root,
        source: bytes,
        max_depth: Optional[int] = None,
        named_only: bool = True,
    ) -> OutlineNode:
        """Build the outline for a whole file.

        Args:
            root: Root syntax node (tree.root_node)
            source: Bytes the tree was parsed from
            max_depth: Deepest outline level whose children are kept
                (root is level 0); None for unbounded
            named_only: Drop unnamed nodes that have no named descendant

        Returns:
            Root OutlineNode with kind "program" spanning the whole file;
            never pruned
        """
        outline = OutlineNode(
            kind=ROOT_KIND,
            start=Position(0, 0),
            end=_end_of(source),
        )
        if max_depth is None or max_depth > 0:
            self._collect(root, source, max_depth, named_only, outline.children)
        return outline

    def _collect(
        self,
        root,
        source: bytes,
        max_depth: Optional[int],
        named_only: bool,
        sink: list,
    ) -> None:
        """Collect structural descendants of root into sink, flattening wrappers."""
        stack = [_Frame(root, 1, sink)]
        while stack:
            frame = stack[-1]
            child = next(frame.children, None)

            if child is None:
                stack.pop()
                if frame.outline is not None:
                    self._attach(frame.outline, frame.parent_sink, named_only)
                continue

            # Keyword tokens such as `class` or `function` are anonymous nodes
            if not (child.is_named and child.type in self.structural_kinds):
                stack.append(_Frame(child, frame.depth, frame.sink))
                continue

            outline = self._materialize(child, source)
            if max_depth is None or frame.depth < max_depth:
                stack.append(_Frame(
                    child, frame.depth + 1, outline.children,
                    outline=outline, parent_sink=frame.sink,
                ))
            else:
                self._attach(outline, frame.sink, named_only)

    def _attach(self, outline: OutlineNode, sink: list, named_only: bool) -> None:
        # Post-order prune: children are already filtered at this point
        if named_only and outline.name is None and not outline.children:
            return
        sink.append(outline)

    def _materialize(self, node, source: bytes) -> OutlineNode:
        """Create a childless OutlineNode for a structural syntax node."""
        name = self.registry.extract_name(node, source)
        kind = self.structural_kinds[node.type]
        if node.type == "method_definition" and name == "constructor":
            kind = "constructor"

        return OutlineNode(
            kind=kind,
            name=name,
            start=_position(node.start_point),
            end=_position(node.end_point),
        )


def _position(point) -> Position:
    return Position(point[0], point[1])


def _end_of(source: bytes) -> Position:
    """Position just past the last byte of source."""
    last_line_start = source.rfind(b"\n") + 1
    return Position(source.count(b"\n"), len(source) - last_line_start)


def build_outline(
    root,
    source: bytes,
    max_depth: Optional[int] = None,
    named_only: bool = True,
) -> OutlineNode:
    """Build an outline with the default registry."""
    return OutlineBuilder().build(root, source, max_depth=max_depth, named_only=named_only)
