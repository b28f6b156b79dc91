"""Non-destructive deep merge of translation trees."""

from __future__ import annotations

from chained_translator.translations.tree import Branch, Node, TreeLike, as_branch


def merge_recursive(base: TreeLike, overlay: TreeLike) -> Branch:
    """Merge *overlay* into *base*, returning a new tree.

    Groups present on both sides are merged key by key. Anywhere else the
    overlay node replaces the base node whole, so a value never partially
    merges with a group. Keys only in *base* are kept unchanged.
    """
    base_branch = as_branch(base)
    merged: dict[str, Node] = dict(base_branch.children)
    for key, node in as_branch(overlay).children.items():
        current = merged.get(key)
        if isinstance(current, Branch) and isinstance(node, Branch):
            merged[key] = merge_recursive(current, node)
        else:
            merged[key] = node
    return Branch(merged)
