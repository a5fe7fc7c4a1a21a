"""
Resolver that turns one line's flat token stack into nested AST nodes.
"""

import logging
from typing import List

from litemark.markdown_ast_node import MarkdownASTNode
from litemark.markdown_block_state import MarkdownBlockState
from litemark.markdown_node_type import MarkdownNodeKind, MarkdownNodeType, as_text, reduce_text_kinds


class MarkdownTreeResolver:
    """
    Matches opening and closing marks in a token stack by recursive descent.

    The resolver walks the stack with a single cursor.  A paired mark looks forward for
    an identical token before the current end bound; if it finds one the tokens in
    between become its children.  Marks that cannot be paired fall back to their
    literal text.

    Marks nested more than `MAX_NESTING` deep are also kept as literal text, so the
    depth of the resulting tree is bounded whatever the input.
    """

    _LEAF_TYPES = frozenset({
        MarkdownNodeType.TEXT,
        MarkdownNodeType.HORIZONTAL_RULE,
        MarkdownNodeType.LINK,
        MarkdownNodeType.IMAGE,
    })

    # Paired marks nested deeper than this are kept as literal text
    MAX_NESTING = 64

    # Paired kinds whose content is taken as literal text with no inline styling
    _VERBATIM_TYPES = frozenset({
        MarkdownNodeType.INLINE_CODE,
        MarkdownNodeType.CODE_BLOCK,
    })

    def __init__(self, stack: List[MarkdownNodeKind], block_state: MarkdownBlockState) -> None:
        """
        Initialize the resolver.

        Args:
            stack: Tokens for one line, with adjacent text already merged
            block_state: Block containers for the current parse; list items are added
                to its open list
        """
        self._stack = stack
        self._block_state = block_state
        self._cursor = 0
        self._depth = 0
        self._logger = logging.getLogger("MarkdownTreeResolver")

    def resolve(self) -> List[MarkdownASTNode]:
        """
        Resolve the whole stack.

        Returns:
            Nodes to append to the current block container, in line order
        """
        self._cursor = 0
        self._depth = 0
        return self._nodes(len(self._stack))

    def _next_index_of(self, kind: MarkdownNodeKind, end: int) -> int | None:
        """
        Find the next token equal to `kind` at or after the cursor and before `end`.

        Args:
            kind: The token to look for
            end: Exclusive upper bound of the search

        Returns:
            The index of the token, or None if there is none
        """
        for index in range(self._cursor, end):
            if self._stack[index] == kind:
                return index

        return None

    def _verbatim_children(self, end: int) -> List[MarkdownASTNode]:
        """Take the tokens up to `end` as plain text and move the cursor there."""
        literals = []
        for kind in self._stack[self._cursor:end]:
            text = as_text(kind)
            if text is not None:
                literals.append(text)

        self._cursor = end
        return [MarkdownASTNode(kind) for kind in reduce_text_kinds(literals)]

    def _pair(self, kind: MarkdownNodeKind, close: int) -> MarkdownASTNode:
        """Build a node for `kind` whose children run up to the closing token at `close`."""
        if kind.type in self._VERBATIM_TYPES:
            children = self._verbatim_children(close)

        else:
            self._depth += 1
            children = self._nodes(close)
            self._depth -= 1

        # Skip the closing token
        self._cursor += 1
        return MarkdownASTNode(kind, children)

    def _literal(self, kind: MarkdownNodeKind, result: List[MarkdownASTNode]) -> None:
        """Fall back to the literal text of a mark that could not be paired."""
        text = as_text(kind)
        if text is None:
            self._logger.debug("Dropping unmatched %r with no literal form", kind)
            return

        self._logger.debug("Unable to find matching closing mark: %r", kind)
        result.append(MarkdownASTNode(text))

    def _resolve_strong(self, kind: MarkdownNodeKind, end: int, result: List[MarkdownASTNode]) -> None:
        """
        Pair a strong mark.  If there is no identical closer, a single-character
        emphasis closer of the same delimiter is accepted; the spare delimiter
        becomes literal text in front of the emphasis.
        """
        close = self._next_index_of(kind, end)
        if close is not None:
            result.append(self._pair(kind, close))
            return

        char = kind.marker[0]
        emphasis = MarkdownNodeKind.emphasis(char)
        close = self._next_index_of(emphasis, end)
        if close is not None:
            result.append(MarkdownASTNode(MarkdownNodeKind.text(char)))
            result.append(self._pair(emphasis, close))
            return

        self._literal(kind, result)

    def _resolve_emphasis(self, kind: MarkdownNodeKind, end: int, result: List[MarkdownASTNode]) -> None:
        """
        Pair an emphasis mark.  If there is no identical closer, a double-character
        strong closer of the same delimiter is accepted; the spare delimiter becomes
        literal text after the emphasis.
        """
        close = self._next_index_of(kind, end)
        if close is not None:
            result.append(self._pair(kind, close))
            return

        char = kind.marker[0]
        close = self._next_index_of(MarkdownNodeKind.strong(char * 2), end)
        if close is not None:
            result.append(self._pair(MarkdownNodeKind.emphasis(char), close))
            result.append(MarkdownASTNode(MarkdownNodeKind.text(char)))
            return

        self._literal(kind, result)

    def _nodes(self, end: int) -> List[MarkdownASTNode]:
        """
        Resolve tokens from the cursor up to `end`.

        Args:
            end: Exclusive bound; nested calls never move the cursor beyond it

        Returns:
            The resolved nodes
        """
        result: List[MarkdownASTNode] = []

        while self._cursor < end:
            current = self._stack[self._cursor]
            self._cursor += 1
            node_type = current.type

            if node_type in self._LEAF_TYPES:
                result.append(MarkdownASTNode(current))
                continue

            if node_type is MarkdownNodeType.HEADING:
                # Headings run to the end of the line
                result.append(MarkdownASTNode(current, self._nodes(end)))
                continue

            if node_type is MarkdownNodeType.LIST_ITEM:
                item = MarkdownASTNode(current, self._nodes(end))
                self._block_state.add_list_item(item)
                continue

            if current.is_paired and node_type not in self._VERBATIM_TYPES and self._depth >= self.MAX_NESTING:
                self._logger.debug("Nesting limit reached, keeping %r as text", current)
                self._literal(current, result)
                continue

            if node_type is MarkdownNodeType.STRONG:
                self._resolve_strong(current, end, result)
                continue

            if node_type is MarkdownNodeType.EMPHASIS:
                self._resolve_emphasis(current, end, result)
                continue

            if current.is_paired:
                close = self._next_index_of(current, end)
                if close is not None:
                    result.append(self._pair(current, close))

                else:
                    self._literal(current, result)

                continue

            self._logger.warning("Unexpected %r in inline token stream", current)

        return result
