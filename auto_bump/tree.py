"""Composition root for job nodes.

Nodes such as AutoBump register themselves with a Scope under a unique id.
The scope only tracks membership; it knows nothing about what a node does.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Scope:
    """An ordered, id-keyed collection of child nodes."""

    def __init__(self, node_id: str = "root") -> None:
        self.node_id = node_id
        self._children: dict[str, Any] = {}

    def add(self, node_id: str, child: Any) -> None:
        """Register ``child`` under ``node_id``.

        Raises:
            ValueError: If the id is empty or already taken in this scope.
        """
        if not node_id:
            raise ValueError("Node id must not be empty")
        if node_id in self._children:
            raise ValueError(
                f"There is already a node with id {node_id!r} in scope {self.node_id!r}"
            )
        self._children[node_id] = child

    def get(self, node_id: str) -> Any | None:
        return self._children.get(node_id)

    @property
    def children(self) -> dict[str, Any]:
        return dict(self._children)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._children.values())

    def __len__(self) -> int:
        return len(self._children)
