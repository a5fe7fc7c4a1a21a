"""
Node kinds for the markdown AST.

Every node carries a `MarkdownNodeKind`: a type tag plus the payload that type needs
(heading level, list ordering, delimiter marker, link title and target and so on).
Kinds are immutable values and compare by content, which the tree resolver relies on
when it searches for a closing mark identical to an opening one.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List


class MarkdownNodeType(Enum):
    """Type tags for markdown AST nodes."""
    DOCUMENT = "document"
    TEXT = "text"
    HEADING = "heading"
    BLOCK_QUOTE = "blockQuote"
    LIST = "list"
    LIST_ITEM = "listItem"
    INLINE_CODE = "inlineCode"
    HORIZONTAL_RULE = "horizontalRule"
    CODE_BLOCK = "codeBlock"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRIKE = "strike"
    LINK = "link"
    IMAGE = "image"


# Kinds whose opening token must be matched by an identical closing token
PAIRED_TYPES = frozenset({
    MarkdownNodeType.EMPHASIS,
    MarkdownNodeType.STRONG,
    MarkdownNodeType.STRIKE,
    MarkdownNodeType.INLINE_CODE,
    MarkdownNodeType.CODE_BLOCK,
})


@dataclass(frozen=True)
class MarkdownNodeKind:
    """
    A node type together with its payload.

    Attributes:
        type: The type tag
        value: The payload; a string for text and marker kinds, an int for headings
            and block quotes, a bool for lists, a (title, target) tuple for links and
            a (name, url) tuple for images, None otherwise
    """
    type: MarkdownNodeType
    value: Any = None

    @classmethod
    def document(cls) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.DOCUMENT)

    @classmethod
    def text(cls, content: str) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.TEXT, content)

    @classmethod
    def heading(cls, level: int) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.HEADING, level)

    @classmethod
    def block_quote(cls, level: int) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.BLOCK_QUOTE, level)

    @classmethod
    def list(cls, ordered: bool) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.LIST, ordered)

    @classmethod
    def list_item(cls) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.LIST_ITEM)

    @classmethod
    def inline_code(cls) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.INLINE_CODE)

    @classmethod
    def horizontal_rule(cls) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.HORIZONTAL_RULE)

    @classmethod
    def code_block(cls) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.CODE_BLOCK)

    @classmethod
    def emphasis(cls, marker: str) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.EMPHASIS, marker)

    @classmethod
    def strong(cls, marker: str) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.STRONG, marker)

    @classmethod
    def strike(cls, marker: str) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.STRIKE, marker)

    @classmethod
    def link(cls, title: str, target: str) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.LINK, (title, target))

    @classmethod
    def image(cls, name: str, url: str) -> "MarkdownNodeKind":
        return cls(MarkdownNodeType.IMAGE, (name, url))

    @property
    def is_text(self) -> bool:
        return self.type is MarkdownNodeType.TEXT

    @property
    def is_paired(self) -> bool:
        """True for kinds that need a matching closing token."""
        return self.type in PAIRED_TYPES

    @property
    def content(self) -> str:
        """The string held by a text node."""
        assert self.type is MarkdownNodeType.TEXT, f"{self.type.value} has no text content"
        return self.value

    @property
    def level(self) -> int:
        """The level of a heading or block quote."""
        assert self.type in (MarkdownNodeType.HEADING, MarkdownNodeType.BLOCK_QUOTE), \
            f"{self.type.value} has no level"
        return self.value

    @property
    def ordered(self) -> bool:
        """Whether a list is ordered."""
        assert self.type is MarkdownNodeType.LIST, f"{self.type.value} has no ordering"
        return self.value

    @property
    def marker(self) -> str:
        """The delimiter run of an emphasis, strong or strike node."""
        assert self.type in (MarkdownNodeType.EMPHASIS, MarkdownNodeType.STRONG, MarkdownNodeType.STRIKE), \
            f"{self.type.value} has no marker"
        return self.value

    @property
    def title(self) -> str:
        """The title of a link, or the name of an image."""
        assert self.type in (MarkdownNodeType.LINK, MarkdownNodeType.IMAGE), f"{self.type.value} has no title"
        return self.value[0]

    @property
    def target(self) -> str:
        """The target of a link, or the url of an image."""
        assert self.type in (MarkdownNodeType.LINK, MarkdownNodeType.IMAGE), f"{self.type.value} has no target"
        return self.value[1]

    def __repr__(self) -> str:
        if self.value is None:
            return self.type.value

        if isinstance(self.value, tuple):
            return f"{self.type.value}({', '.join(repr(v) for v in self.value)})"

        return f"{self.type.value}({self.value!r})"


def as_text(kind: MarkdownNodeKind) -> MarkdownNodeKind | None:
    """
    Get the literal text a kind degrades to when it cannot be used structurally.

    Args:
        kind: The kind to convert

    Returns:
        A text kind, or None for kinds that have no literal form
    """
    node_type = kind.type
    if node_type is MarkdownNodeType.TEXT:
        return kind

    if node_type is MarkdownNodeType.HEADING:
        return MarkdownNodeKind.text("#" * kind.value)

    if node_type in (MarkdownNodeType.EMPHASIS, MarkdownNodeType.STRONG, MarkdownNodeType.STRIKE):
        return MarkdownNodeKind.text(kind.value)

    # Everything else (document, containers, inline code, rules, links, images) has no literal form
    return None


def _is_repeated_character(mark: str) -> bool:
    return bool(mark) and mark.count(mark[0]) == len(mark)


def node_kind_for_mark(mark: str) -> MarkdownNodeKind:
    """
    Classify a delimiter run.

    Args:
        mark: A run of delimiter characters

    Returns:
        emphasis for a single `*` or `_`, strong for longer repeats of either, strike for
        two or more `~`, inline code for a single backtick and literal text otherwise
    """
    if not mark:
        return MarkdownNodeKind.text(mark)

    first = mark[0]
    if first in "*_":
        if len(mark) == 1:
            return MarkdownNodeKind.emphasis(mark)

        if _is_repeated_character(mark):
            return MarkdownNodeKind.strong(mark)

    elif first == "~":
        if len(mark) > 1 and _is_repeated_character(mark):
            return MarkdownNodeKind.strike(mark)

    elif first == "`":
        if len(mark) == 1:
            return MarkdownNodeKind.inline_code()

    return MarkdownNodeKind.text(mark)


def reduce_text_kinds(kinds: Iterable[MarkdownNodeKind]) -> List[MarkdownNodeKind]:
    """
    Merge runs of adjacent text kinds into single text kinds.

    Args:
        kinds: The kinds to merge

    Returns:
        A new list in which no two neighbouring kinds are both text
    """
    reduced: List[MarkdownNodeKind] = []
    pending: List[str] = []
    for kind in kinds:
        if kind.is_text:
            pending.append(kind.value)
            continue

        if pending:
            reduced.append(MarkdownNodeKind.text("".join(pending)))
            pending = []

        reduced.append(kind)

    if pending:
        reduced.append(MarkdownNodeKind.text("".join(pending)))

    return reduced
