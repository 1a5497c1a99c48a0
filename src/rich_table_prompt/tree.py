"""Selectable item tree.

Nodes own their children; parent links are weak references and only used
for navigation. A node is a group exactly when it has children.
"""

from __future__ import annotations

import operator
import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Iterator

from .exceptions import DetachedNodeError, DuplicateItemError, ItemNotFoundError

Comparer = Callable[[Any, Any], bool]


class SelectionMode(str, Enum):
    """Selection granularity."""

    LEAF = "leaf"
    INDEPENDENT = "independent"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class ItemNode:
    """One user-visible row: a leaf choice or a group header.

    Attributes:
        value: Payload returned to the caller.
        is_selected: Current selection state.
        children: Child nodes in insertion order.
        depth: Distance from the tree root (top-level nodes are 0).
    """

    value: Any
    is_selected: bool = False
    children: list[ItemNode] = field(default_factory=list, repr=False)
    depth: int = 0
    _parent_ref: weakref.ref | None = field(default=None, repr=False)
    _tree_ref: weakref.ref | None = field(default=None, repr=False)

    @property
    def parent(self) -> ItemNode | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_group(self) -> bool:
        return len(self.children) > 0

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def _tree(self) -> ItemTree:
        tree = self._tree_ref() if self._tree_ref is not None else None
        if tree is None:
            raise DetachedNodeError("Node is not attached to a tree")
        return tree

    def add_child(self, value: Any) -> ItemNode:
        """Add a child choice under this node and return it."""
        return self._tree().add(value, parent=self)

    def add_children(self, *values: Any) -> ItemNode:
        """Add several children; returns this node for chaining.

        Nothing is added when any value is a duplicate.
        """
        tree = self._tree()
        tree.check_new(values)
        for value in values:
            tree.add(value, parent=self)
        return self

    def select(self) -> ItemNode:
        """Mark this node selected without cascading."""
        self.is_selected = True
        return self

    def traverse(self, include_self: bool = False) -> Iterator[ItemNode]:
        """Yield nodes of this subtree in depth-first pre-order."""
        if include_self:
            yield self
        for child in self.children:
            yield from child.traverse(include_self=True)

    def ancestors(self) -> Iterator[ItemNode]:
        """Yield ancestors from the nearest parent up to the top level."""
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent


class ItemTree:
    """Ordered tree of selectable items with a synthetic invisible root.

    Args:
        comparer: Equality used for lookups and duplicate detection.
            Defaults to ``==``.
    """

    def __init__(self, comparer: Comparer | None = None):
        self.comparer: Comparer = comparer or operator.eq
        self._roots: list[ItemNode] = []

    @property
    def roots(self) -> list[ItemNode]:
        """Top-level nodes."""
        return self._roots

    def add(self, value: Any, parent: ItemNode | None = None) -> ItemNode:
        """Add a node holding ``value`` at the top level or under ``parent``.

        Raises:
            DuplicateItemError: A node with an equal value already exists.
        """
        if self.find(value) is not None:
            raise DuplicateItemError(value)

        node = ItemNode(value=value, _tree_ref=weakref.ref(self))
        if parent is None:
            self._roots.append(node)
        else:
            node.depth = parent.depth + 1
            node._parent_ref = weakref.ref(parent)
            parent.children.append(node)
        return node

    def check_new(self, values: Iterable[Any]) -> None:
        """Raise ``DuplicateItemError`` unless every value in ``values`` could be added.

        Values are checked against the tree and against each other.
        """
        pending: list[Any] = []
        for value in values:
            if self.find(value) is not None or any(
                self.comparer(other, value) for other in pending
            ):
                raise DuplicateItemError(value)
            pending.append(value)

    def traverse(self) -> Iterator[ItemNode]:
        """Yield every node in depth-first pre-order."""
        for root in self._roots:
            yield from root.traverse(include_self=True)

    def __iter__(self) -> Iterator[ItemNode]:
        return self.traverse()

    def __len__(self) -> int:
        return sum(1 for _ in self.traverse())

    def find(self, value: Any) -> ItemNode | None:
        """Return the first node (pre-order) whose value equals ``value``."""
        for node in self.traverse():
            if self.comparer(node.value, value):
                return node
        return None

    def get(self, value: Any) -> ItemNode:
        """Like ``find`` but raises ``ItemNotFoundError`` when absent."""
        node = self.find(value)
        if node is None:
            raise ItemNotFoundError(value)
        return node

    def selected(self) -> list[ItemNode]:
        return [node for node in self.traverse() if node.is_selected]

    def parents_of(self, value: Any) -> list[Any]:
        """Return the values of every ancestor of ``value``, top-level first."""
        node = self.get(value)
        return [parent.value for parent in reversed(list(node.ancestors()))]
