"""
Tokenizer for the inline content of a markdown line.

The tokenizer produces a flat list of node kinds: text runs, delimiter marks, link and
image leaves and inline code sentinels.  Pairing marks into nested nodes is left to the
tree resolver.
"""

import logging
from typing import List

from litemark.markdown_feature import MarkdownFeature, MarkdownFeatureSet
from litemark.markdown_line_scanner import MarkdownLineScanner
from litemark.markdown_node_type import MarkdownNodeKind, node_kind_for_mark


class MarkdownInlineTokenizer:
    """Splits the inline part of a line into text runs and mark tokens."""

    # `*` and `_` runs are cut into marks no longer than this
    MAX_EMPHASIS_MARK = 2

    def __init__(self, features: MarkdownFeatureSet) -> None:
        """
        Initialize the tokenizer.

        Args:
            features: Enabled features; inline code is only recognised when enabled
        """
        self._inline_code = features.contains(MarkdownFeature.INLINE_CODE)
        delimiters = set("*_~[!\\")
        if self._inline_code:
            delimiters.add("`")

        self._delimiters = frozenset(delimiters)
        self._logger = logging.getLogger("MarkdownInlineTokenizer")

    def tokenize(self, scanner: MarkdownLineScanner) -> List[MarkdownNodeKind]:
        """
        Tokenize everything from the scanner's cursor to the end of its line.

        Args:
            scanner: Scanner positioned after any block prefix

        Returns:
            The inline tokens in line order
        """
        tokens: List[MarkdownNodeKind] = []

        while not scanner.at_end():
            text = scanner.scan_up_to_characters(self._delimiters)
            if text is not None:
                tokens.append(MarkdownNodeKind.text(text))
                continue

            ch = scanner.peek()
            if ch == "\\":
                self._scan_escape(scanner, tokens)
                continue

            if ch == "!":
                self._scan_image(scanner, tokens)
                continue

            if ch == "[":
                self._scan_link(scanner, tokens)
                continue

            if ch == "`":
                self._scan_inline_code(scanner, tokens)
                continue

            self._scan_marks(scanner, tokens)

        return tokens

    def _scan_escape(self, scanner: MarkdownLineScanner, tokens: List[MarkdownNodeKind]) -> None:
        """A backslash makes the next character literal; a trailing backslash is itself literal."""
        scanner.advance()
        if scanner.at_end():
            tokens.append(MarkdownNodeKind.text("\\"))
            return

        tokens.append(MarkdownNodeKind.text(scanner.advance()))

    def _scan_link(self, scanner: MarkdownLineScanner, tokens: List[MarkdownNodeKind]) -> None:
        start = scanner.position
        reference = scanner.scan_bracketed_reference("[")
        if reference is None:
            self._logger.debug("No link at column %d, treating '[' as text", start)
            scanner.position = start + 1
            tokens.append(MarkdownNodeKind.text("["))
            return

        title, target = reference
        tokens.append(MarkdownNodeKind.link(title, target))

    def _scan_image(self, scanner: MarkdownLineScanner, tokens: List[MarkdownNodeKind]) -> None:
        """
        Scan `![name](url)`.  If that fails only the `!` is consumed, so a following `[`
        can still start a link.
        """
        start = scanner.position
        reference = scanner.scan_bracketed_reference("![")
        if reference is None:
            scanner.position = start + 1
            tokens.append(MarkdownNodeKind.text("!"))
            return

        name, url = reference
        tokens.append(MarkdownNodeKind.image(name, url))

    def _scan_inline_code(self, scanner: MarkdownLineScanner, tokens: List[MarkdownNodeKind]) -> None:
        code = scanner.scan_inline_code()
        if code is None:
            tokens.append(MarkdownNodeKind.text(scanner.advance()))
            return

        # Content is verbatim; the surrounding sentinels pair up in the resolver
        tokens.append(MarkdownNodeKind.inline_code())
        tokens.append(MarkdownNodeKind.text(code))
        tokens.append(MarkdownNodeKind.inline_code())

    def _scan_marks(self, scanner: MarkdownLineScanner, tokens: List[MarkdownNodeKind]) -> None:
        """
        Scan a run of one delimiter character and classify it.

        `*` and `_` runs are split greedily into marks of two with any odd character left
        as a final single mark, so `****` gives two strong marks and `***` a strong mark
        followed by an emphasis mark.  `~` runs are kept whole.
        """
        run = scanner.scan_run()
        if run[0] not in "*_":
            tokens.append(node_kind_for_mark(run))
            return

        for i in range(0, len(run), self.MAX_EMPHASIS_MARK):
            tokens.append(node_kind_for_mark(run[i:i + self.MAX_EMPHASIS_MARK]))
