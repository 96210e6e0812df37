"""Helpers for inspecting Dash component trees in tests."""

from dash.development.base_component import Component


def walk(node):
    """Yield every component in a tree, depth first, in markup order."""
    if isinstance(node, (list, tuple)):
        for child in node:
            yield from walk(child)
        return
    if not isinstance(node, Component):
        return
    yield node
    yield from walk(getattr(node, "children", None))


def find_by_id(node, component_id):
    for component in walk(node):
        if getattr(component, "id", None) == component_id:
            return component
    return None


def find_all_by_type(node, id_type):
    return [
        component for component in walk(node)
        if isinstance(getattr(component, "id", None), dict)
        and component.id.get("type") == id_type
    ]


def classes(component):
    return set((getattr(component, "className", None) or "").split())
