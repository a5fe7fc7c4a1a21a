"""
Cursor based scanner over a single markdown line.

All speculative scans save the cursor before they start and restore it if the
construct they look for is not present, so a failed scan never consumes input.
"""

from typing import Tuple


class MarkdownLineScanner:
    """Scans markdown constructs from one line of text."""

    _DIGIT_CHARS = frozenset("0123456789")
    _UNORDERED_LIST_MARKERS = ("- ", "* ")

    def __init__(self, line: str) -> None:
        """
        Initialize the scanner at the start of a line.

        Args:
            line: The line to scan, without its line terminator
        """
        self._line = line
        self._line_len = len(line)
        self._position = 0

    @property
    def position(self) -> int:
        """The cursor; assign a saved value to roll back a speculative scan."""
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        assert 0 <= value <= self._line_len, f"Scanner position {value} out of range"
        self._position = value

    def at_end(self) -> bool:
        return self._position >= self._line_len

    def peek(self, offset: int = 0) -> str:
        """
        Look at a character without consuming it.

        Args:
            offset: Distance ahead of the cursor

        Returns:
            The character, or an empty string past the end of the line
        """
        index = self._position + offset
        if index >= self._line_len:
            return ""

        return self._line[index]

    def advance(self, count: int = 1) -> str:
        """Consume and return up to `count` characters."""
        start = self._position
        self._position = min(self._line_len, self._position + count)
        return self._line[start:self._position]

    def scan_string(self, expected: str) -> str | None:
        """Consume `expected` if the line continues with it."""
        if not self._line.startswith(expected, self._position):
            return None

        self._position += len(expected)
        return expected

    def scan_characters(self, chars: frozenset[str] | str) -> str | None:
        """
        Consume the longest run of characters drawn from `chars`.

        Returns:
            The run, or None if the next character is not in `chars`
        """
        start = self._position
        while self._position < self._line_len and self._line[self._position] in chars:
            self._position += 1

        if self._position == start:
            return None

        return self._line[start:self._position]

    def scan_up_to_characters(self, chars: frozenset[str] | str) -> str | None:
        """
        Consume the longest run of characters not in `chars`.

        Returns:
            The run, or None if the next character is in `chars` or the line has ended
        """
        start = self._position
        while self._position < self._line_len and self._line[self._position] not in chars:
            self._position += 1

        if self._position == start:
            return None

        return self._line[start:self._position]

    def scan_run(self) -> str:
        """Consume the run of characters identical to the next one."""
        if self.at_end():
            return ""

        ch = self._line[self._position]
        start = self._position
        while self._position < self._line_len and self._line[self._position] == ch:
            self._position += 1

        return self._line[start:self._position]

    def scan_whitespace(self) -> str | None:
        start = self._position
        while self._position < self._line_len and self._line[self._position].isspace():
            self._position += 1

        if self._position == start:
            return None

        return self._line[start:self._position]

    def scan_quote_prefix(self) -> int | None:
        """
        Consume a block quote prefix: a run of `>` and spaces starting with `>`.

        Returns:
            The quote level (the number of `>` consumed), or None if there is no prefix
        """
        if self.peek() != ">":
            return None

        prefix = self.scan_characters("> ")
        assert prefix is not None
        return prefix.count(">")

    def scan_heading(self) -> int | None:
        """
        Consume a heading prefix: a run of `#` followed by whitespace.

        Returns:
            The heading level, or None if there is no heading prefix
        """
        start = self._position
        marks = self.scan_characters("#")
        if marks is None:
            return None

        if self.scan_whitespace() is None:
            self._position = start
            return None

        return len(marks)

    def scan_horizontal_rule(self) -> str | None:
        """
        Consume a horizontal rule: three or more `-` and nothing but whitespace after.

        Returns:
            The rule's dashes, or None if the line is not a rule
        """
        start = self._position
        marks = self.scan_characters("-")
        if marks is None:
            return None

        self.scan_whitespace()
        if len(marks) >= 3 and self.at_end():
            return marks

        self._position = start
        return None

    def scan_unordered_list(self) -> str | None:
        """Consume an unordered list marker ("- " or "* ")."""
        start = self._position
        self.scan_whitespace()
        for marker in self._UNORDERED_LIST_MARKERS:
            if self.scan_string(marker) is not None:
                return marker

        self._position = start
        return None

    def scan_ordered_list(self) -> str | None:
        """
        Consume an ordered list marker: digits followed by ". ".

        Returns:
            The digits, or None if there is no marker
        """
        start = self._position
        digits = self.scan_characters(self._DIGIT_CHARS)
        if digits is None:
            return None

        if self.scan_string(". ") is None:
            self._position = start
            return None

        return digits

    def scan_bracketed_reference(self, opener: str) -> Tuple[str, str] | None:
        """
        Consume a `[title](target)` style reference introduced by `opener`.

        Args:
            opener: "[" for links, "![" for images

        Returns:
            (title, target), or None if the reference is incomplete or its title is empty
        """
        start = self._position
        if self.scan_string(opener) is None:
            return None

        title_end = self._line.find("](", self._position)
        if title_end <= self._position:
            self._position = start
            return None

        target_start = title_end + 2
        target_end = self._line.find(")", target_start)
        if target_end == -1:
            self._position = start
            return None

        title = self._line[self._position:title_end]
        target = self._line[target_start:target_end]
        self._position = target_end + 1
        return title, target

    def scan_inline_code(self) -> str | None:
        """
        Consume a backtick delimited code span.

        Returns:
            The span's content, taken verbatim, or None if there is no closing backtick
            or the span is empty
        """
        if self.peek() != "`":
            return None

        close = self._line.find("`", self._position + 1)
        if close <= self._position + 1:
            return None

        content = self._line[self._position + 1:close]
        self._position = close + 1
        return content
