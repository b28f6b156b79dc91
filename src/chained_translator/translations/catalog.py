"""Discovery of the translation groups present under a language root."""

from __future__ import annotations

from pathlib import Path

from chained_translator.core.config import TranslatorConfig
from chained_translator.core.types import (
    NAMESPACE_SEPARATOR,
    SINGLE_GROUP,
    VENDOR_DIR,
    FileFormat,
    FileInfo,
)
from chained_translator.storage.protocols import Filesystem


class GroupCatalog:
    """Lists group identifiers from the files found below a language root.

    Group files (``en/messages.yml``) yield their file name, prefixed with the
    vendor namespace when they live under ``vendor/<namespace>/<locale>/``.
    Per-locale catalogs (``en.json``) yield the namespace when vendored, and
    the ``single`` group otherwise.
    """

    def __init__(self, filesystem: Filesystem, config: TranslatorConfig) -> None:
        self._files = filesystem
        self._config = config

    def file_format(self, file: FileInfo) -> FileFormat | None:
        if file.extension == self._config.group_extension:
            return FileFormat.GROUP
        if file.extension == self._config.locale_extension:
            return FileFormat.LOCALE
        return None

    def discover_groups(self, lang_root: Path) -> list[str]:
        groups: dict[str, str] = {}
        for file in self._files.list_files(Path(lang_root)):
            group = self.group_for_file(file)
            if group is not None:
                groups.setdefault(group, group)
        return list(groups.values())

    def group_for_file(self, file: FileInfo) -> str | None:
        """Return the group identifier a file contributes, if any."""
        file_format = self.file_format(file)
        if file_format is None:
            return None

        namespace = _vendor_namespace(file.relative_path)
        if file_format is FileFormat.GROUP:
            if namespace is None:
                return file.stem
            return f"{namespace}{NAMESPACE_SEPARATOR}{file.stem}"

        return namespace if namespace is not None else SINGLE_GROUP


def _vendor_namespace(relative_path: Path) -> str | None:
    """Return the segment following ``vendor`` in the file's directory path."""
    directories = relative_path.parent.parts
    if VENDOR_DIR not in directories:
        return None
    index = directories.index(VENDOR_DIR)
    if index + 1 >= len(directories):
        return None
    return directories[index + 1]
