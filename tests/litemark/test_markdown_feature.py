"""
Tests for markdown feature sets
"""
import dataclasses
import logging

import pytest

from litemark import MarkdownFeature, MarkdownFeatureSet


def test_standard_excludes_multiple_line_breaks():
    """Test the standard preset."""
    standard = MarkdownFeatureSet.standard()
    assert MarkdownFeature.ALLOW_MULTIPLE_LINE_BREAKS not in standard
    assert len(standard) == len(MarkdownFeature) - 1
    for feature in MarkdownFeature:
        if feature is not MarkdownFeature.ALLOW_MULTIPLE_LINE_BREAKS:
            assert standard.contains(feature)


def test_all_contains_everything():
    """Test the all preset."""
    assert list(MarkdownFeatureSet.all()) == list(MarkdownFeature)


def test_empty_set():
    """Test that a default constructed set has no members."""
    empty = MarkdownFeatureSet()
    assert len(empty) == 0
    assert not empty.contains(MarkdownFeature.HEADINGS)
    assert list(empty) == []


def test_of_and_membership():
    """Test building a set from explicit features."""
    features = MarkdownFeatureSet.of(MarkdownFeature.HEADINGS, MarkdownFeature.BLOCK_QUOTE)
    assert MarkdownFeature.HEADINGS in features
    assert MarkdownFeature.BLOCK_QUOTE in features
    assert MarkdownFeature.CODE_BLOCK not in features
    assert "headings" not in features


def test_iteration_uses_declaration_order():
    """Test that iteration order does not depend on construction order."""
    features = MarkdownFeatureSet.of(MarkdownFeature.HORIZONTAL_RULE, MarkdownFeature.BLOCK_QUOTE)
    assert list(features) == [MarkdownFeature.BLOCK_QUOTE, MarkdownFeature.HORIZONTAL_RULE]
    assert features.names() == ["blockQuote", "horizontalRule"]


def test_union_and_without():
    """Test set algebra returns new sets."""
    headings = MarkdownFeatureSet.of(MarkdownFeature.HEADINGS)
    quotes = MarkdownFeatureSet.of(MarkdownFeature.BLOCK_QUOTE)

    both = headings | quotes
    assert both == headings.union(quotes)
    assert set(both) == {MarkdownFeature.HEADINGS, MarkdownFeature.BLOCK_QUOTE}

    assert both.without(MarkdownFeature.HEADINGS) == quotes
    assert both.without(MarkdownFeature.HEADINGS, MarkdownFeature.BLOCK_QUOTE) == MarkdownFeatureSet()
    assert len(headings) == 1


def test_sets_are_immutable():
    """Test that a feature set cannot be modified."""
    standard = MarkdownFeatureSet.standard()
    with pytest.raises(dataclasses.FrozenInstanceError):
        standard.features = frozenset()


@pytest.mark.parametrize("name", MarkdownFeatureSet.PRESETS)
def test_preset(name):
    """Test looking up presets by name."""
    assert MarkdownFeatureSet.preset(name) == getattr(MarkdownFeatureSet, name)()


def test_unknown_preset():
    """Test that an unknown preset name raises KeyError."""
    with pytest.raises(KeyError):
        MarkdownFeatureSet.preset("everything")


def test_from_names():
    """Test building a set from option names."""
    features = MarkdownFeatureSet.from_names(["codeBlock", "inlineCode", "allowMultipleLineBreaks"])
    assert features == MarkdownFeatureSet.of(
        MarkdownFeature.CODE_BLOCK,
        MarkdownFeature.INLINE_CODE,
        MarkdownFeature.ALLOW_MULTIPLE_LINE_BREAKS
    )


def test_from_names_skips_unknown(caplog):
    """Test that unknown names are logged and ignored."""
    with caplog.at_level(logging.WARNING, logger="MarkdownFeatureSet"):
        features = MarkdownFeatureSet.from_names(["headings", "tables"])

    assert features == MarkdownFeatureSet.of(MarkdownFeature.HEADINGS)
    assert "tables" in caplog.text


def test_names_round_trip():
    """Test that names() feeds back into from_names()."""
    standard = MarkdownFeatureSet.standard()
    assert MarkdownFeatureSet.from_names(standard.names()) == standard
