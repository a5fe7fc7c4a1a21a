"""Shared fixtures for litemark tests."""

from typing import Callable, List

import pytest

from litemark import (
    MarkdownASTBuilder,
    MarkdownASTNode,
    MarkdownFeatureSet,
    MarkdownNodeKind,
    MarkdownParserSettings,
)


@pytest.fixture
def ast_builder():
    """Fixture providing a builder with the standard features."""
    return MarkdownASTBuilder()


@pytest.fixture
def ast_builder_all():
    """Fixture providing a builder with every feature enabled."""
    return MarkdownASTBuilder(MarkdownParserSettings(features=MarkdownFeatureSet.all()))


@pytest.fixture
def builder_with():
    """Factory for builders with a custom feature set."""
    def _create(features: MarkdownFeatureSet) -> MarkdownASTBuilder:
        return MarkdownASTBuilder(MarkdownParserSettings(features=features))

    return _create


def kinds(nodes: List[MarkdownASTNode]) -> List[MarkdownNodeKind]:
    """Kinds of a list of nodes, for compact assertions."""
    return [node.kind for node in nodes]


@pytest.fixture
def child_kinds() -> Callable[[MarkdownASTNode], List[MarkdownNodeKind]]:
    """Provide a helper returning the kinds of a node's children."""
    return lambda node: kinds(node.children)
