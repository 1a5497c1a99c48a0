"""Cascading selection rule.

In leaf mode a group's flag is derived: it is selected exactly when every
one of its descendants is selected. In independent mode nodes never affect
each other.
"""

from __future__ import annotations

from .tree import ItemNode, ItemTree, SelectionMode


def refresh_ancestors(node: ItemNode) -> None:
    """Recompute the flag of every ancestor of ``node`` from its descendants."""
    for parent in node.ancestors():
        parent.is_selected = all(item.is_selected for item in parent.traverse())


def set_selected(node: ItemNode, selected: bool, mode: SelectionMode) -> None:
    """Set the selection of ``node`` applying the cascade for ``mode``."""
    if mode is SelectionMode.LEAF:
        for item in node.traverse(include_self=True):
            item.is_selected = selected
        refresh_ancestors(node)
    else:
        node.is_selected = selected


def toggle(node: ItemNode, mode: SelectionMode) -> bool:
    """Invert the selection of ``node``; returns the new state."""
    selected = not node.is_selected
    set_selected(node, selected, mode)
    return selected


def is_consistent(tree: ItemTree) -> bool:
    """True when every group's flag matches the leaf-mode derivation."""
    return all(
        node.is_selected == all(item.is_selected for item in node.traverse())
        for node in tree.traverse()
        if node.is_group
    )
