"""On-disk locations of translation groups."""

from __future__ import annotations

from pathlib import Path

from chained_translator.core.config import TranslatorConfig
from chained_translator.core.types import VENDOR_DIR, GroupRef
from chained_translator.storage.protocols import Filesystem


class PathResolver:
    """Maps (locale, group) pairs to files below a language root.

    Plain groups live at ``<root>/<locale>/<group>.<ext>``; namespaced groups
    at ``<root>/vendor/<namespace>/<locale>/<group>.<ext>``. The root defaults
    to the override tree.
    """

    def __init__(self, filesystem: Filesystem, config: TranslatorConfig) -> None:
        self._files = filesystem
        self._config = config

    @property
    def override_root(self) -> Path:
        return Path(self._config.override_path)

    def group_directory(self, locale: str, group: str | GroupRef, root: Path | None = None) -> Path:
        ref = group if isinstance(group, GroupRef) else GroupRef.parse(group)
        base = Path(root) if root is not None else self.override_root
        if ref.namespace is not None:
            return base / VENDOR_DIR / ref.namespace / locale
        return base / locale

    def resolve_group_path(self, locale: str, group: str | GroupRef, root: Path | None = None) -> Path:
        ref = group if isinstance(group, GroupRef) else GroupRef.parse(group)
        directory = self.group_directory(locale, ref, root)
        return directory / f"{ref.name}.{self._config.group_extension}"

    def ensure_group_directory(
        self, locale: str, group: str | GroupRef, root: Path | None = None
    ) -> Path:
        """Create the directory holding the group file if it is missing."""
        return self._ensure_directory(self.group_directory(locale, group, root))

    def ensure_locale_directory(self, locale: str) -> Path:
        return self._ensure_directory(self.override_root / locale)

    def _ensure_directory(self, path: Path) -> Path:
        if not self._files.exists(path):
            self._files.make_directory(path, self._config.directory_mode, True)
        return path
