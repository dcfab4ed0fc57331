"""Element arena and processor result variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Union

ROOT_PARENT = "0"


@dataclass
class ElementNode:
    """One builder element, linked to its relatives by id."""

    id: str
    name: str
    parent: str = ROOT_PARENT
    children: list[str] = field(default_factory=list)
    settings: dict[str, Any] = field(default_factory=dict)
    label: str | None = None

    @property
    def is_root(self) -> bool:
        return self.parent == ROOT_PARENT

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "parent": self.parent,
            "children": list(self.children),
            "settings": self.settings,
        }
        if self.label:
            data["label"] = self.label
        return data


class ElementArena:
    """Flat, insertion-ordered store of every node emitted in one run."""

    def __init__(self) -> None:
        self._nodes: dict[str, ElementNode] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ElementNode]:
        return iter(self._nodes.values())

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def add(self, node: ElementNode, parent: str = ROOT_PARENT) -> ElementNode:
        """Store *node* under *parent*, linking both directions."""
        if node.id in self._nodes:
            raise ValueError(f"Duplicate node id: {node.id}")
        node.parent = parent
        if parent != ROOT_PARENT:
            owner = self._nodes[parent]
            if node.id not in owner.children:
                owner.children.append(node.id)
        self._nodes[node.id] = node
        return node

    def get(self, node_id: str) -> ElementNode | None:
        return self._nodes.get(node_id)

    def roots(self) -> list[ElementNode]:
        return [n for n in self._nodes.values() if n.is_root]

    def to_list(self) -> list[dict[str, Any]]:
        return [n.to_dict() for n in self._nodes.values()]


# ---------------------------------------------------------------------------
# Processor results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Leaf:
    """A node that owns its DOM subtree; the walker does not descend."""

    node: ElementNode


@dataclass(frozen=True)
class Container:
    """A node whose DOM children are walked and attached beneath it."""

    node: ElementNode


@dataclass(frozen=True)
class Composite:
    """Several pre-linked nodes; the first is the subtree root.

    Children are referenced by id in ``node.children``; every other node's
    ``parent`` is already set.
    """

    nodes: tuple[ElementNode, ...]

    @property
    def root(self) -> ElementNode:
        return self.nodes[0]


@dataclass(frozen=True)
class Skip:
    """Nothing is emitted for the element or its subtree."""


ProcessorResult = Union[Leaf, Container, Composite, Skip]
