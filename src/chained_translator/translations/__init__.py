"""Layered translation storage.

Provides the tree codec and merger, path resolution, group discovery, the
canonical translation index, and the manager that ties them together.
"""

from chained_translator.translations.base_index import BaseTranslationIndex
from chained_translator.translations.catalog import GroupCatalog
from chained_translator.translations.codec import flatten, sort_tree, unflatten
from chained_translator.translations.loader import ChainLoader
from chained_translator.translations.manager import (
    ChainedTranslationManager,
    create_translation_manager,
)
from chained_translator.translations.merge import merge_recursive
from chained_translator.translations.paths import PathResolver
from chained_translator.translations.tree import Branch, Leaf

__all__ = [
    "BaseTranslationIndex",
    "Branch",
    "ChainLoader",
    "ChainedTranslationManager",
    "GroupCatalog",
    "Leaf",
    "PathResolver",
    "create_translation_manager",
    "flatten",
    "merge_recursive",
    "sort_tree",
    "unflatten",
]
