"""
Visitor class to print markdown AST structures for debugging
"""
from typing import Any, List

from litemark.markdown_ast_node import MarkdownASTNode, MarkdownASTVisitor


class MarkdownASTPrinter(MarkdownASTVisitor):
    """Visitor that renders the AST structure for debugging."""
    def __init__(self) -> None:
        """Initialize the AST printer with zero indentation."""
        super().__init__()
        self.indent_level = 0
        self._lines: List[str] = []

    def _indent(self) -> str:
        """
        Get the current indentation string.

        Returns:
            A string of spaces for the current indentation level
        """
        return "  " * self.indent_level

    def format(self, node: MarkdownASTNode) -> str:
        """
        Render a subtree, one line per node.

        Args:
            node: The root of the subtree to render

        Returns:
            The rendered tree; not a stable serialization format
        """
        self.indent_level = 0
        self._lines = []
        self.visit(node)
        return "\n".join(self._lines)

    def print(self, node: MarkdownASTNode) -> None:
        """Write the rendered subtree to stdout."""
        print(self.format(node))

    def generic_visit(self, node: MarkdownASTNode) -> List[Any]:
        """
        Default visit method that records the node kind.

        Args:
            node: The node to visit

        Returns:
            The results of visiting the children
        """
        self._lines.append(f"{self._indent()}↳ {node.kind!r}")
        self.indent_level += 1
        results = super().generic_visit(node)
        self.indent_level -= 1
        return results

    def visit_text(self, node: MarkdownASTNode) -> str:
        """
        Visit a text node and record its content with newlines escaped.

        Args:
            node: The text node to visit

        Returns:
            The text content
        """
        content = node.kind.content
        escaped = content.replace("\\", "\\\\").replace("\n", "\\n")
        self._lines.append(f"{self._indent()}↳ text '{escaped}'")
        return content

    def visit_link(self, node: MarkdownASTNode) -> str:
        """
        Visit a link node and record its title and target.

        Args:
            node: The link node to visit

        Returns:
            The link target
        """
        self._lines.append(f"{self._indent()}↳ link: title='{node.kind.title}', target='{node.kind.target}'")
        return node.kind.target

    def visit_image(self, node: MarkdownASTNode) -> str:
        """
        Visit an image node and record its name and url.

        Args:
            node: The image node to visit

        Returns:
            The image url
        """
        self._lines.append(f"{self._indent()}↳ image: name='{node.kind.title}', url='{node.kind.target}'")
        return node.kind.target
