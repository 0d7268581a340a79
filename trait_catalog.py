_METHOD_KINDS = {"function_item", "function_signature_item"}


def build_trait_catalog(parsed):
    """Maps each trait name to its walker node; a later declaration wins."""
    traits = {}
    for node in parsed.nodes:
        if node["kind"] == "trait_item" and node.get("name"):
            traits[node["name"]] = node
    return traits


def trait_method_names(trait_node):
    """
    Method names declared by a trait, in declaration order.

    Associated types and constants are not members for diffing purposes.
    """
    names = {}
    for child in trait_node.get("children", []):
        if child["kind"] != "declaration_list":
            continue
        for item in child.get("children", []):
            if item["kind"] in _METHOD_KINDS and item.get("name"):
                names[item["name"]] = None
    return list(names)
