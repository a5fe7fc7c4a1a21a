"""A parser for a constrained subset of Markdown."""

from litemark.markdown_ast_builder import MarkdownASTBuilder, parse
from litemark.markdown_ast_node import MarkdownASTNode, MarkdownASTVisitor
from litemark.markdown_ast_printer import MarkdownASTPrinter
from litemark.markdown_error import MarkdownSettingsError
from litemark.markdown_feature import MarkdownFeature, MarkdownFeatureSet
from litemark.markdown_node_type import (
    MarkdownNodeKind,
    MarkdownNodeType,
    as_text,
    node_kind_for_mark,
    reduce_text_kinds
)
from litemark.markdown_parser_settings import DEFAULT_FENCE, MarkdownParserSettings


__all__ = [
    "DEFAULT_FENCE",
    "MarkdownASTBuilder",
    "MarkdownASTNode",
    "MarkdownASTPrinter",
    "MarkdownASTVisitor",
    "MarkdownFeature",
    "MarkdownFeatureSet",
    "MarkdownNodeKind",
    "MarkdownNodeType",
    "MarkdownParserSettings",
    "MarkdownSettingsError",
    "as_text",
    "node_kind_for_mark",
    "parse",
    "reduce_text_kinds"
]
