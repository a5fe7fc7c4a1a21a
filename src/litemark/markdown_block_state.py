"""
Block container state for a single parse.

Tracks the document root and the block quote, list and code block that may be open at
the current line.  A fresh instance is created for every parse, so nothing here is
shared between parses.
"""

import logging
from typing import List

from litemark.markdown_ast_node import MarkdownASTNode
from litemark.markdown_node_type import MarkdownNodeKind, as_text, reduce_text_kinds


class MarkdownBlockState:
    """
    Open block containers and the transitions between them.

    At most one quote, one list and one code block are open at a time.  New top level
    content goes to the open code block, else the open quote, else the document.  A list
    is only attached to its enclosing quote or document when it closes, and it always
    closes before the container around it does.
    """

    def __init__(self) -> None:
        """Initialize with an empty document and no open containers."""
        self.document = MarkdownASTNode.document()
        self.quote: MarkdownASTNode | None = None
        self.list: MarkdownASTNode | None = None
        self.code_block: MarkdownASTNode | None = None

        # Whether the previous line was blank, for collapsing runs of blank lines
        self.was_blank = False

        self._logger = logging.getLogger("MarkdownBlockState")

    def _enclosing_container(self) -> MarkdownASTNode:
        """The quote if one is open, otherwise the document."""
        return self.quote if self.quote is not None else self.document

    def current_container(self) -> MarkdownASTNode:
        """
        Get the container that receives new top level nodes.

        Returns:
            The open code block, else the open quote, else the document
        """
        if self.code_block is not None:
            return self.code_block

        return self._enclosing_container()

    def append(self, nodes: List[MarkdownASTNode]) -> None:
        """Append nodes to the current container."""
        self.current_container().add_children(nodes)

    def open_list(self, ordered: bool) -> None:
        """
        Make sure a list of the given kind is open.

        An open list of the other kind is closed first.

        Args:
            ordered: True for an ordered list
        """
        if self.list is not None and self.list.kind.ordered != ordered:
            self.close_list()

        if self.list is None:
            self.list = MarkdownASTNode(MarkdownNodeKind.list(ordered))

    def close_list(self) -> None:
        """Attach the open list, if any, to its enclosing quote or document."""
        if self.list is None:
            return

        self._enclosing_container().add_child(self.list)
        self.list = None

    def add_list_item(self, item: MarkdownASTNode) -> None:
        """
        Add an item to the open list.

        Args:
            item: The list item node
        """
        assert self.list is not None, "List item with no list open"
        self.list.add_child(item)

    def open_quote(self, level: int) -> None:
        """
        Make sure a quote of the given level is open.

        A quote at another level is closed first.  Opening a quote closes any list that
        was open outside it.

        Args:
            level: The number of `>` in the line's prefix
        """
        if self.quote is not None and self.quote.kind.level != level:
            self.close_quote()

        if self.quote is None:
            self.close_list()
            self.quote = MarkdownASTNode(MarkdownNodeKind.block_quote(level))

    def close_quote(self) -> None:
        """Close any list inside the open quote, then attach the quote to the document."""
        if self.quote is None:
            return

        self.close_list()
        self.document.add_child(self.quote)
        self.quote = None

    def open_code_block(self) -> None:
        """Start a code block; any open list ends here."""
        self.close_list()
        self.code_block = MarkdownASTNode(MarkdownNodeKind.code_block())
        self._logger.debug("Opened code block")

    def add_code_line(self, line: str, newline: bool) -> None:
        """
        Add one verbatim source line to the open code block.

        Args:
            line: The line exactly as it appeared in the source
            newline: Whether the line was followed by a line break
        """
        assert self.code_block is not None, "Code line with no code block open"
        self.code_block.add_child(MarkdownASTNode(MarkdownNodeKind.text(line)))
        if newline:
            self.code_block.add_child(MarkdownASTNode(MarkdownNodeKind.text("\n")))

    def close_code_block(self) -> None:
        """Flatten the open code block's lines into plain text and attach it to the enclosing container."""
        if self.code_block is None:
            return

        block = self.code_block
        literals = [text for text in (as_text(child.kind) for child in block.children) if text is not None]
        block.children = [MarkdownASTNode(kind) for kind in reduce_text_kinds(literals)]
        self.code_block = None

        self._enclosing_container().add_child(block)
        self._logger.debug("Closed code block with %d text node(s)", len(block.children))

    def close_all(self) -> None:
        """Close every open container, innermost first."""
        self.close_code_block()
        self.close_list()
        self.close_quote()
