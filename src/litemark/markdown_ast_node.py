"""
Markdown AST nodes and the visitor used to traverse them.

A node is a `MarkdownNodeKind` plus an ordered list of children.  Every node is owned by
exactly one parent and nodes hold no reference back to their parent, so a tree never
contains cycles.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List

from litemark.markdown_node_type import MarkdownNodeKind, MarkdownNodeType


@dataclass(eq=True)
class MarkdownASTNode:
    """A node in the markdown AST."""
    kind: MarkdownNodeKind
    children: List["MarkdownASTNode"] = field(default_factory=list)

    @classmethod
    def document(cls) -> "MarkdownASTNode":
        """Create an empty document root."""
        return cls(MarkdownNodeKind.document())

    @property
    def type(self) -> MarkdownNodeType:
        """The type tag of this node's kind."""
        return self.kind.type

    @property
    def child(self) -> "MarkdownASTNode | None":
        """The first child, if any."""
        return self.children[0] if self.children else None

    def add_child(self, child: "MarkdownASTNode") -> "MarkdownASTNode":
        """
        Add a child node to this node.

        Args:
            child: The child node to add

        Returns:
            The added child node for method chaining
        """
        self.children.append(child)
        return child

    def add_children(self, children: List["MarkdownASTNode"]) -> None:
        """Append several children, preserving their order."""
        self.children.extend(children)

    def walk(self) -> Iterator["MarkdownASTNode"]:
        """
        Iterate over this node and its descendants depth first.

        Yields:
            This node, then every node of each child's subtree in child order
        """
        yield self
        for child in self.children:
            yield from child.walk()

    def accept(self, visitor: "MarkdownASTVisitor") -> Any:
        """Dispatch this node to a visitor."""
        return visitor.visit(self)

    def reduced_text(self) -> "MarkdownASTNode":
        """
        Build a copy of this subtree in which adjacent text children are merged.

        Merging is applied at every level.  Applying it to an already reduced tree
        gives an equal tree.

        Returns:
            A new node; this node is left unchanged
        """
        reduced: List[MarkdownASTNode] = []
        pending: List[str] = []
        for child in self.children:
            if child.kind.is_text:
                pending.append(child.kind.value)
                continue

            if pending:
                reduced.append(MarkdownASTNode(MarkdownNodeKind.text("".join(pending))))
                pending = []

            reduced.append(child.reduced_text())

        if pending:
            reduced.append(MarkdownASTNode(MarkdownNodeKind.text("".join(pending))))

        return MarkdownASTNode(self.kind, reduced)

    def debug_description(self) -> str:
        """Indented, one line per node, rendering of this subtree."""
        # Imported here as the printer is itself a visitor over this module's nodes
        from litemark.markdown_ast_printer import MarkdownASTPrinter  # pylint: disable=import-outside-toplevel
        return MarkdownASTPrinter().format(self)

    def __repr__(self) -> str:
        if not self.children:
            return f"MarkdownASTNode({self.kind!r})"

        return f"MarkdownASTNode({self.kind!r}, {self.children!r})"


class MarkdownASTVisitor:
    """
    Base visitor class for markdown AST traversal.

    `visit` dispatches to a method named after the node's type tag, for example
    `visit_strong` or `visit_listItem`, and falls back to `generic_visit`.
    """

    def visit(self, node: MarkdownASTNode) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.kind.type.value}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: MarkdownASTNode) -> List[Any]:
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit

        Returns:
            A list of results from visiting each child
        """
        results = []
        for child in node.children:
            results.append(self.visit(child))

        return results
