"""Orchestrates edits to the override tree and their promotion into base."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from chained_translator.core.config import TranslatorConfig
from chained_translator.core.types import SINGLE_GROUP, WILDCARD, GroupRef
from chained_translator.storage.formats import render_group_document
from chained_translator.storage.local import LocalFilesystem
from chained_translator.storage.protocols import Filesystem, TranslationLoader
from chained_translator.translations.base_index import BaseTranslationIndex
from chained_translator.translations.catalog import GroupCatalog
from chained_translator.translations.codec import flatten, sort_tree, unflatten
from chained_translator.translations.loader import ChainLoader
from chained_translator.translations.merge import merge_recursive
from chained_translator.translations.paths import PathResolver

logger = logging.getLogger(__name__)


class ChainedTranslationManager:
    """Saves, reads and promotes translations kept in an override tree.

    Every write is merged over the canonical translations of the same
    locale and group, so editing one key never drops the keys nobody
    touched. Nothing is cached between calls: the filesystem is the only
    state.

    Args:
        filesystem: Directory and file primitives.
        loader: Runtime translation loader used for reads.
        config: Roots and conventions. Defaults to ``TranslatorConfig()``,
            which reads from environment variables.
    """

    def __init__(
        self,
        filesystem: Filesystem,
        loader: TranslationLoader,
        config: TranslatorConfig | None = None,
    ) -> None:
        self._config = config or TranslatorConfig()
        self._files = filesystem
        self._loader = loader
        self._paths = PathResolver(filesystem, self._config)
        self._catalog = GroupCatalog(filesystem, self._config)
        self._base_index = BaseTranslationIndex(filesystem, self._config)

    @property
    def paths(self) -> PathResolver:
        return self._paths

    def save(self, locale: str, group: str, key: str, translation: str) -> None:
        """Store one translation in the override tree."""
        self._paths.ensure_locale_directory(locale)

        translations = self.get_group_translations(locale, group)
        translations[key] = translation

        self._save_group_translations(locale, group, translations)

    def get_translation_groups(self) -> list[str]:
        """List the groups found in the canonical language root."""
        return self._catalog.discover_groups(Path(self._config.lang_path))

    def get_translations_for_group(self, locale: str, group: str) -> dict[str, Any]:
        """Return the loader's view of a group as dotted keys."""
        ref = GroupRef.parse(group)
        if ref.name == SINGLE_GROUP:
            tree = self._loader.load(locale, WILDCARD, WILDCARD)
        else:
            tree = self._loader.load(locale, ref.name, ref.namespace)
        return flatten(tree or {})

    def merge_chained_translations_into_default_translations(self, locale: str) -> None:
        """Write every non-empty override group of *locale* into the canonical root."""
        self._paths.ensure_locale_directory(locale)

        default_root = Path(self._config.lang_path)
        for group in self.get_translation_groups():
            translations = self.get_group_translations(locale, group)
            if translations:
                self._save_group_translations(locale, group, translations, default_root)

    def get_group_translations(
        self, locale: str, group: str, root: Path | None = None
    ) -> dict[str, Any]:
        """Return the stored override tree of a group as dotted keys.

        A group without a file is empty.
        """
        path = self._paths.resolve_group_path(locale, group, root)
        tree = self._files.read_tree_file(path)
        if tree is None:
            return {}
        return flatten(tree)

    def _save_group_translations(
        self,
        locale: str,
        group: str,
        translations: Mapping[str, Any],
        root: Path | None = None,
    ) -> None:
        edited = unflatten(translations)

        path = self._paths.resolve_group_path(locale, group, root)
        self._paths.ensure_group_directory(locale, group, root)

        # Merge over the canonical group so keys missing from the edit survive
        base = self._base_index.snapshot(locale, group)
        merged = sort_tree(merge_recursive(base, edited))

        self._files.write_text_file(path, render_group_document(merged.to_mapping()))
        logger.info("Saved translations for %s/%s to %s", locale, group, path)


def create_translation_manager(
    config: TranslatorConfig | None = None,
    filesystem: Filesystem | None = None,
    loader: TranslationLoader | None = None,
) -> ChainedTranslationManager:
    """Factory function to build a manager wired to the local disk.

    Args:
        config: Translator configuration. Defaults to ``TranslatorConfig()``.
        filesystem: Optional pre-built filesystem. Defaults to
            ``LocalFilesystem()``.
        loader: Optional pre-built loader. Defaults to a ``ChainLoader`` over
            the canonical and override roots.

    Returns:
        A ready-to-use ChainedTranslationManager.
    """
    config = config or TranslatorConfig()
    if filesystem is None:
        filesystem = LocalFilesystem()
    if loader is None:
        loader = ChainLoader(filesystem, config)
    return ChainedTranslationManager(filesystem, loader, config)
