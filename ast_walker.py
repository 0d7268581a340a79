_NAMED_KINDS = {
    "function_item",
    "function_signature_item",
    "trait_item",
    "impl_item",
    "mod_item",
    "struct_item",
    "enum_item",
}


def _node_name(ts_node):
    if ts_node.type not in _NAMED_KINDS:
        return None
    name_node = ts_node.child_by_field_name("name")
    if name_node is None or not name_node.text:
        return None
    return name_node.text.decode("utf-8")


def walk_ast(ts_node, nodes, *, parent=None):
    """
    Recursively walks a tree-sitter syntax node and collects all named
    nodes into a flat list for the catalog builders.

    Each node also keeps its children and parent for builders that need
    structure.
    """

    node = {
        "kind": ts_node.type,
        "name": _node_name(ts_node),
        "line": ts_node.start_point[0] + 1,
        "children": [],
        "ts_node": ts_node,
        "parent": parent,
    }

    nodes.append(node)

    for child in ts_node.named_children:
        child_node = walk_ast(child, nodes, parent=node)
        node["children"].append(child_node)

    return node


def ancestors(node):
    cur = node.get("parent")
    while cur is not None:
        yield cur
        cur = cur.get("parent")
