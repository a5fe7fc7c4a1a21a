"""Optional markdown syntaxes that a parse can be asked to recognise."""

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import ClassVar, FrozenSet, Iterable, Iterator, List


class MarkdownFeature(Enum):
    """Syntax classes that can be switched on or off for a parse."""
    BLOCK_QUOTE = "blockQuote"
    INLINE_CODE = "inlineCode"
    CODE_BLOCK = "codeBlock"
    HEADINGS = "headings"
    ORDERED_LIST = "orderedList"
    UNORDERED_LIST = "unorderedList"
    HORIZONTAL_RULE = "horizontalRule"
    ALLOW_MULTIPLE_LINE_BREAKS = "allowMultipleLineBreaks"


@dataclass(frozen=True)
class MarkdownFeatureSet:
    """
    Immutable set of enabled markdown features.

    A feature that is not a member has its syntax treated as literal text.  Instances
    are never modified after construction so they can be shared between parses.
    """
    features: FrozenSet[MarkdownFeature] = field(default_factory=frozenset)

    _logger: ClassVar[logging.Logger] = logging.getLogger("MarkdownFeatureSet")

    PRESETS: ClassVar[tuple[str, ...]] = ("standard", "all")

    @classmethod
    def of(cls, *features: MarkdownFeature) -> "MarkdownFeatureSet":
        """
        Create a feature set from explicit features.

        Args:
            features: The features to enable

        Returns:
            A feature set holding exactly the given features
        """
        return cls(frozenset(features))

    @classmethod
    def standard(cls) -> "MarkdownFeatureSet":
        """Every feature except permissive blank-line handling."""
        return cls(frozenset(f for f in MarkdownFeature if f is not MarkdownFeature.ALLOW_MULTIPLE_LINE_BREAKS))

    @classmethod
    def all(cls) -> "MarkdownFeatureSet":
        """Every feature."""
        return cls(frozenset(MarkdownFeature))

    @classmethod
    def preset(cls, name: str) -> "MarkdownFeatureSet":
        """
        Look up a named preset.

        Args:
            name: "standard" or "all"

        Returns:
            The preset feature set

        Raises:
            KeyError: If the name is not a known preset
        """
        if name == "standard":
            return cls.standard()

        if name == "all":
            return cls.all()

        raise KeyError(name)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "MarkdownFeatureSet":
        """
        Create a feature set from option names such as "blockQuote" or "headings".

        Unknown names are not members; they are logged and skipped.

        Args:
            names: Option names to enable

        Returns:
            A feature set holding the recognised features
        """
        features = set()
        for name in names:
            try:
                features.add(MarkdownFeature(name))

            except ValueError:
                cls._logger.warning("Ignoring unknown markdown feature: %r", name)

        return cls(frozenset(features))

    def contains(self, feature: object) -> bool:
        """
        Check whether a feature is enabled.

        Args:
            feature: The feature to test

        Returns:
            True if the feature is a member of this set
        """
        return feature in self.features

    def __contains__(self, feature: object) -> bool:
        return self.contains(feature)

    def __iter__(self) -> Iterator[MarkdownFeature]:
        return (f for f in MarkdownFeature if f in self.features)

    def __len__(self) -> int:
        return len(self.features)

    def union(self, other: "MarkdownFeatureSet") -> "MarkdownFeatureSet":
        """Return a feature set holding the members of both sets."""
        return MarkdownFeatureSet(self.features | other.features)

    def __or__(self, other: "MarkdownFeatureSet") -> "MarkdownFeatureSet":
        return self.union(other)

    def without(self, *features: MarkdownFeature) -> "MarkdownFeatureSet":
        """Return a copy of this set with the given features removed."""
        return MarkdownFeatureSet(self.features - frozenset(features))

    def names(self) -> List[str]:
        """Option names of the enabled features, in declaration order."""
        return [f.value for f in self]
