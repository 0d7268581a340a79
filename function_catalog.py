from ast_walker import ancestors
from canonical_renderer import node_text, render_function

_METHOD_CONTAINERS = {"impl_item", "trait_item"}


def impl_type_name(impl_node):
    """
    Bare name of the type an impl block is for: ``Stack`` for
    ``impl<T> Stack<T>`` and ``Circle`` for ``impl Shape for shapes::Circle``.
    """
    type_node = impl_node["ts_node"].child_by_field_name("type")
    while type_node is not None and type_node.type in {"generic_type", "reference_type"}:
        type_node = type_node.child_by_field_name("type")
    if type_node is None:
        return None
    if type_node.type == "scoped_type_identifier":
        return node_text(type_node.child_by_field_name("name")) or None
    if type_node.type == "type_identifier":
        return node_text(type_node)
    return None


class FunctionCatalogBuilder:
    """
    Collects every free function and every impl method of one tree,
    mapped to its canonical rendering.

    Methods are stored under both ``name`` and ``Type::name``. When two
    definitions share a key, the one visited last wins. Functions nested in
    a free function's body are not visited; functions nested in impl or
    trait method bodies are.
    """

    def __init__(self):
        self.functions = {}

    def _container(self, node):
        parent = node.get("parent")
        if parent is None or parent["kind"] != "declaration_list":
            return None
        return parent.get("parent")

    def _is_method(self, node):
        container = self._container(node)
        return container is not None and container["kind"] in _METHOD_CONTAINERS

    def matches(self, node):
        if node["kind"] != "function_item" or not node.get("name"):
            return False
        for ancestor in ancestors(node):
            if ancestor["kind"] == "function_item" and not self._is_method(ancestor):
                return False
        container = self._container(node)
        if container is not None and container["kind"] == "trait_item":
            return False
        return True

    def apply(self, node):
        rendered = render_function(node["ts_node"])
        name = node["name"]
        self.functions[name] = rendered

        container = self._container(node)
        if container is not None and container["kind"] == "impl_item":
            type_name = impl_type_name(container)
            if type_name:
                self.functions[f"{type_name}::{name}"] = rendered

    def build(self, nodes):
        for node in nodes:
            if self.matches(node):
                self.apply(node)
        return self.functions


def build_function_catalog(parsed):
    return FunctionCatalogBuilder().build(parsed.nodes)
