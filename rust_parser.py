import os

import tree_sitter
import tree_sitter_rust

from ast_walker import walk_ast


STATUS_OK = "ok"
STATUS_EMPTY = "empty"
STATUS_UNPARSABLE = "unparsable"

_parser = None


class ParseRustError(RuntimeError):
    pass


def _rust_parser():
    global _parser
    if _parser is None:
        try:
            language = tree_sitter.Language(tree_sitter_rust.language())
        except (TypeError, ValueError) as exc:
            raise ParseRustError(
                "Could not load the tree-sitter Rust grammar. "
                "Check that tree-sitter and tree-sitter-rust versions are compatible."
            ) from exc
        _parser = tree_sitter.Parser(language)
    return _parser


class ParsedSource:
    """
    One snapshot of a file: its raw text plus the flattened syntax tree.

    An unparsable snapshot keeps its text but exposes no nodes, so the
    syntax-based strategies compare it as an empty file while the caller
    can still tell the two situations apart through ``status``.
    """

    def __init__(self, text, tree=None, status=STATUS_EMPTY, nodes=None):
        self.text = text
        self.tree = tree
        self.status = status
        self.nodes = nodes if nodes is not None else []


def read_source(path):
    """Returns the file's text, or an empty string when it cannot be read."""
    if path is None or not os.path.isfile(path):
        return ""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError):
        return ""


def parse_rust_source(text):
    if not text.strip():
        return ParsedSource(text, status=STATUS_EMPTY)

    tree = _rust_parser().parse(text.encode("utf-8"))
    if tree.root_node.has_error:
        return ParsedSource(text, tree=tree, status=STATUS_UNPARSABLE)

    nodes = []
    walk_ast(tree.root_node, nodes)
    return ParsedSource(text, tree=tree, status=STATUS_OK, nodes=nodes)
