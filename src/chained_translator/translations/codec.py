"""Conversion between nested translation trees and dotted keys."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from chained_translator.translations.tree import Branch, Leaf, Scalar, TreeLike, as_branch

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "."


def flatten(tree: TreeLike) -> dict[str, Scalar]:
    """Flatten a tree into ``{"dotted.key": value}`` pairs.

    Every leaf yields exactly one entry; branches yield none, so an empty
    nested group disappears.
    """
    flat: dict[str, Scalar] = {}
    _flatten_into(as_branch(tree), (), flat)
    return flat


def _flatten_into(branch: Branch, prefix: tuple[str, ...], flat: dict[str, Scalar]) -> None:
    for segment, node in branch.children.items():
        path = (*prefix, segment)
        if isinstance(node, Branch):
            _flatten_into(node, path, flat)
        else:
            flat[KEY_SEPARATOR.join(path)] = node.value


def unflatten(flat: Mapping[str, Scalar]) -> Branch:
    """Rebuild a tree from dotted keys.

    Keys are processed in sorted order. When two keys disagree about whether
    a segment is a value or a group (``a`` and ``a.b``), the key processed
    last wins and a warning is logged.
    """
    root = Branch()
    for key in sorted(flat):
        segments = key.split(KEY_SEPARATOR)
        node = root
        for depth, segment in enumerate(segments[:-1]):
            child = node.children.get(segment)
            if not isinstance(child, Branch):
                if child is not None:
                    logger.warning(
                        "Translation key %r replaces value at %r with a nested group",
                        key,
                        KEY_SEPARATOR.join(segments[: depth + 1]),
                    )
                child = Branch()
                node.children[segment] = child
            node = child

        last = segments[-1]
        if isinstance(node.children.get(last), Branch):
            logger.warning("Translation key %r replaces a nested group with a value", key)
        node.children[last] = Leaf(flat[key])
    return root


def sort_tree(tree: TreeLike) -> Branch:
    """Return a copy of *tree* with every level ordered by key."""
    branch = as_branch(tree)
    children = {}
    for key in sorted(branch.children):
        node = branch.children[key]
        children[key] = sort_tree(node) if isinstance(node, Branch) else node
    return Branch(children)
