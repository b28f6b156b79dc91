"""Read-only snapshot of the canonical translations, used as merge baseline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from chained_translator.core.config import TranslatorConfig
from chained_translator.core.types import NAMESPACE_SEPARATOR, VENDOR_DIR
from chained_translator.storage.protocols import Filesystem
from chained_translator.translations.tree import Branch

logger = logging.getLogger(__name__)

GroupTrees = dict[str, dict[str, Any]]


class BaseTranslationIndex:
    """Builds ``{locale: {group: tree}}`` from the canonical language root.

    Locale directories provide plain groups; ``vendor/<namespace>/<locale>``
    directories provide ``namespace/group`` entries. A locale known only
    through vendor files borrows the fallback locale's plain groups. The
    index is rebuilt on every call so it always reflects what is on disk.
    """

    def __init__(self, filesystem: Filesystem, config: TranslatorConfig) -> None:
        self._files = filesystem
        self._config = config

    @property
    def root(self) -> Path:
        return Path(self._config.lang_path)

    def load_base_translations(self) -> dict[str, GroupTrees]:
        translations = self._load_locale_groups()
        package_translations = self._load_vendor_groups()
        fallback = translations.get(self._config.fallback_locale, {})

        index: dict[str, GroupTrees] = {}
        for locale in [*translations, *package_translations]:
            if locale in index:
                continue
            if locale in translations:
                groups = {**translations[locale], **package_translations.get(locale, {})}
            else:
                groups = {**package_translations[locale], **fallback}
            index[locale] = groups
        return index

    def snapshot(self, locale: str, group: str) -> Branch:
        """Return the canonical tree of *group* for *locale*.

        A locale missing from the index uses the fallback locale's entry; a
        group missing from the chosen entry is an empty tree.
        """
        index = self.load_base_translations()
        groups = index.get(locale)
        if groups is None:
            fallback = self._config.fallback_locale
            groups = index.get(fallback)
            if groups is None:
                logger.warning(
                    "No base translations for locale %r or fallback locale %r", locale, fallback
                )
                return Branch()
            logger.debug("Locale %r has no base translations, using %r", locale, fallback)
        return Branch.from_mapping(groups.get(group))

    def _load_locale_groups(self) -> dict[str, GroupTrees]:
        translations: dict[str, GroupTrees] = {}
        for directory in self._files.list_directories(self.root):
            if directory.name == VENDOR_DIR:
                continue
            translations[directory.name] = self._load_directory(directory)
        return translations

    def _load_vendor_groups(self) -> dict[str, GroupTrees]:
        translations: dict[str, GroupTrees] = {}
        for namespace_dir in self._files.list_directories(self.root / VENDOR_DIR):
            for locale_dir in self._files.list_directories(namespace_dir):
                groups = translations.setdefault(locale_dir.name, {})
                for name, tree in self._load_directory(locale_dir).items():
                    groups[f"{namespace_dir.name}{NAMESPACE_SEPARATOR}{name}"] = tree
        return translations

    def _load_directory(self, directory: Path) -> GroupTrees:
        """Read the group files directly inside *directory*; empty files are ``{}``."""
        groups: GroupTrees = {}
        extension = self._config.group_extension
        for file in self._files.list_files(directory):
            if file.relative_path.parent != Path(".") or file.extension != extension:
                continue
            groups[file.stem] = self._files.read_tree_file(file.path) or {}
        return groups
