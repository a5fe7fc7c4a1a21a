"""
Parser to construct an AST from Markdown.
"""

import logging
from typing import List

from litemark.markdown_ast_node import MarkdownASTNode
from litemark.markdown_block_state import MarkdownBlockState
from litemark.markdown_feature import MarkdownFeature, MarkdownFeatureSet
from litemark.markdown_inline_tokenizer import MarkdownInlineTokenizer
from litemark.markdown_line_scanner import MarkdownLineScanner
from litemark.markdown_node_type import MarkdownNodeKind, MarkdownNodeType, reduce_text_kinds
from litemark.markdown_parser_settings import MarkdownParserSettings
from litemark.markdown_tree_resolver import MarkdownTreeResolver


LINE_BREAK = MarkdownNodeKind.text("\n")


class MarkdownASTBuilder:
    """
    Builder class for constructing an AST from markdown text.

    Parsing is line oriented: each line first updates the open block containers
    (quote, list, code block), then its remaining content is tokenized and resolved
    into nodes that are appended to the current container.
    """

    def __init__(self, settings: MarkdownParserSettings | None = None) -> None:
        """
        Initialize the AST builder.

        Args:
            settings: Parser settings; the standard features and default fence if None
        """
        self._settings = settings if settings is not None else MarkdownParserSettings.create_default()
        self._features = self._settings.features
        self._tokenizer = MarkdownInlineTokenizer(self._features)

        self._logger = logging.getLogger("MarkdownASTBuilder")

        # Most recently built document
        self._document = MarkdownASTNode.document()

    @property
    def settings(self) -> MarkdownParserSettings:
        return self._settings

    def document(self) -> MarkdownASTNode:
        """
        Get the most recently built document node.

        Returns:
            The document node
        """
        return self._document

    def _scan_block_prefix(
        self,
        scanner: MarkdownLineScanner,
        state: MarkdownBlockState,
        stack: List[MarkdownNodeKind]
    ) -> None:
        """
        Consume the block level prefix of a non-blank line and update the open containers.

        Args:
            scanner: Scanner at the start of the trimmed line
            state: Block state for this parse
            stack: Token stack for the line; heading, rule and list item tokens are pushed here
        """
        features = self._features

        level = scanner.scan_quote_prefix() if features.contains(MarkdownFeature.BLOCK_QUOTE) else None
        if level is not None:
            state.open_quote(level)

        elif state.quote is not None:
            state.close_quote()

        if features.contains(MarkdownFeature.HEADINGS):
            heading_level = scanner.scan_heading()
            if heading_level is not None:
                stack.append(MarkdownNodeKind.heading(heading_level))

        if not stack and features.contains(MarkdownFeature.HORIZONTAL_RULE):
            if scanner.scan_horizontal_rule() is not None:
                stack.append(MarkdownNodeKind.horizontal_rule())

        if not stack and features.contains(MarkdownFeature.UNORDERED_LIST):
            if scanner.scan_unordered_list() is not None:
                stack.append(MarkdownNodeKind.list_item())
                state.open_list(ordered=False)

        if not stack and features.contains(MarkdownFeature.ORDERED_LIST):
            if scanner.scan_ordered_list() is not None:
                stack.append(MarkdownNodeKind.list_item())
                state.open_list(ordered=True)

        if not stack or stack[-1].type is not MarkdownNodeType.LIST_ITEM:
            state.close_list()

    def _parse_line(self, raw_line: str, is_last_line: bool, state: MarkdownBlockState) -> None:
        """
        Parse a single line and add the resulting nodes to the AST.

        Args:
            raw_line: The line as it appeared in the source, without its terminator
            is_last_line: True for the final line, which gets no trailing line break
            state: Block state for this parse
        """
        if self._features.contains(MarkdownFeature.CODE_BLOCK) and raw_line == self._settings.fence:
            if state.code_block is None:
                state.open_code_block()

            else:
                state.close_code_block()

            state.was_blank = False
            return

        # Inside a code block every line is content, taken verbatim
        if state.code_block is not None:
            state.add_code_line(raw_line, newline=not is_last_line)
            state.was_blank = False
            return

        line = raw_line.strip()
        if not line:
            state.close_list()
            state.close_quote()
            if not state.was_blank or self._features.contains(MarkdownFeature.ALLOW_MULTIPLE_LINE_BREAKS):
                state.append([MarkdownASTNode(LINE_BREAK)])

            state.was_blank = True
            return

        state.was_blank = False

        scanner = MarkdownLineScanner(line)
        stack: List[MarkdownNodeKind] = []
        self._scan_block_prefix(scanner, state, stack)
        stack.extend(self._tokenizer.tokenize(scanner))

        if not is_last_line:
            stack.append(LINE_BREAK)

        resolver = MarkdownTreeResolver(reduce_text_kinds(stack), state)
        state.append(resolver.resolve())

    def build_ast(self, text: str) -> MarkdownASTNode:
        """
        Build a complete AST from the given text.

        Args:
            text: The markdown text to parse

        Returns:
            The document root node
        """
        state = MarkdownBlockState()

        lines = [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]
        last_index = len(lines) - 1
        for i, line in enumerate(lines):
            self._parse_line(line, i == last_index, state)

        state.close_all()

        document = state.document
        if document.children and document.children[-1].kind == LINE_BREAK:
            document.children.pop()

        self._document = document.reduced_text()
        return self._document


def parse(text: str, features: MarkdownFeatureSet | None = None) -> MarkdownASTNode:
    """
    Parse markdown text into a document AST.

    Args:
        text: The markdown source
        features: Syntaxes to recognise; the standard preset if None

    Returns:
        The document root node
    """
    settings = MarkdownParserSettings.create_default()
    if features is not None:
        settings = settings.with_features(features)

    return MarkdownASTBuilder(settings).build_ast(text)
