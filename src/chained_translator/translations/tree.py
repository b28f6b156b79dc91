"""Tagged tree variant for translation groups.

A translation tree is a ``Branch`` whose children are either ``Leaf`` values
or further ``Branch`` nodes. Plain ``dict`` trees are converted at the I/O
boundary with :meth:`Branch.from_mapping` and :meth:`Branch.to_mapping`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

Scalar = Any


@dataclass(frozen=True)
class Leaf:
    """A single translation value."""

    value: Scalar


@dataclass(frozen=True)
class Branch:
    """A named group of child nodes."""

    children: dict[str, Node] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[Any, Any] | None) -> Branch:
        children: dict[str, Node] = {}
        for key, value in (data or {}).items():
            if isinstance(value, Mapping):
                children[str(key)] = cls.from_mapping(value)
            else:
                children[str(key)] = Leaf(value)
        return cls(children)

    def to_mapping(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, node in self.children.items():
            if isinstance(node, Branch):
                result[key] = node.to_mapping()
            else:
                result[key] = node.value
        return result

    def is_empty(self) -> bool:
        return not self.children

    def __len__(self) -> int:
        return len(self.children)


Node = Leaf | Branch

TreeLike = Branch | Mapping[str, Any]


def as_branch(tree: TreeLike | None) -> Branch:
    """Return *tree* as a ``Branch``, converting plain mappings."""
    if isinstance(tree, Branch):
        return tree
    return Branch.from_mapping(tree)
