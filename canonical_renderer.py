_COMMENT_KINDS = {"line_comment", "block_comment"}
_ATOMIC_KINDS = {"string_literal", "raw_string_literal", "char_literal"}
_OUTER_PREFIX_KINDS = {"attribute_item"} | _COMMENT_KINDS
_CLOSING_TOKENS = {")", "]", "}", ">"}
_TUPLE_KINDS = {"tuple_expression", "tuple_type", "tuple_pattern"}


def node_text(ts_node):
    return ts_node.text.decode("utf-8") if ts_node is not None and ts_node.text else ""


def _is_inner_doc(text):
    return text.startswith("//!") or text.startswith("/*!")


def _doc_comment(ts_node, *, outer_only=False):
    """Returns normalized doc comment text, or None for an ordinary comment."""
    text = node_text(ts_node)
    if _is_inner_doc(text):
        return None if outer_only else " ".join(text.split())
    if ts_node.type == "line_comment":
        if text.startswith("///") and not text.startswith("////"):
            return " ".join(text.split())
        return None
    if text.startswith("/**") and not text.startswith("/***") and text != "/**/":
        return " ".join(text.split())
    return None


def _keeps_trailing_comma(ts_node):
    # `(x,)` is a one-element tuple, not `(x)`; macro input is kept verbatim.
    if ts_node.type == "token_tree":
        return True
    if ts_node.type in _TUPLE_KINDS:
        elements = [
            c for c in ts_node.named_children
            if c.type not in _COMMENT_KINDS and c.type != "attribute_item"
        ]
        return len(elements) == 1
    return False


def _next_significant(children, index):
    for child in children[index + 1:]:
        if child.type not in _COMMENT_KINDS:
            return child
    return None


def _collect_tokens(ts_node, tokens):
    kind = ts_node.type
    if kind in _COMMENT_KINDS:
        doc = _doc_comment(ts_node)
        if doc:
            tokens.append(doc)
        return
    if kind in _ATOMIC_KINDS or ts_node.child_count == 0:
        text = node_text(ts_node)
        if text:
            tokens.append(text)
        return

    children = ts_node.children
    keep_commas = _keeps_trailing_comma(ts_node)
    for index, child in enumerate(children):
        if child.type == "," and not keep_commas:
            following = _next_significant(children, index)
            # Trailing commas come and go with line wrapping.
            if following is not None and following.type in _CLOSING_TOKENS:
                continue
        _collect_tokens(child, tokens)


def outer_prefix(ts_node):
    """
    Attribute items and outer doc comments written directly above an item.

    tree-sitter keeps these as preceding siblings instead of children, so
    they are gathered by walking backwards until another item shows up.
    Inner doc comments (`//!`, `/*!`) belong to the enclosing module.
    """
    prefix = []
    sibling = ts_node.prev_sibling
    while sibling is not None and sibling.type in _OUTER_PREFIX_KINDS:
        if sibling.type == "attribute_item" or _doc_comment(sibling, outer_only=True):
            prefix.append(sibling)
        sibling = sibling.prev_sibling
    prefix.reverse()
    return prefix


def render_tokens(ts_node):
    tokens = []
    _collect_tokens(ts_node, tokens)
    return " ".join(tokens)


def render_function(ts_node):
    """
    Canonical text of a function or method: its own attributes and doc
    comments followed by the signature and body, one space between tokens.

    Two definitions that differ only in spacing, line breaks, trailing
    commas or ordinary comments render identically.
    """
    parts = [render_tokens(attr) for attr in outer_prefix(ts_node)]
    parts.append(render_tokens(ts_node))
    return "\n".join(parts)
