"""Filesystem implementation backed by the local disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from chained_translator.core.types import FileInfo
from chained_translator.storage.formats import parse_document

logger = logging.getLogger(__name__)


class LocalFilesystem:
    """Reads and writes translation files with ``pathlib``.

    Group files are YAML, per-locale catalogs are JSON; the format is picked
    from the file extension.
    """

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def make_directory(self, path: Path, mode: int = 0o755, recursive: bool = True) -> bool:
        path = Path(path)
        if path.is_dir():
            return False
        path.mkdir(mode=mode, parents=recursive, exist_ok=True)
        logger.debug("Created directory %s", path)
        return True

    def list_files(self, path: Path) -> list[FileInfo]:
        """List every file below *path*, recursively, in a stable order."""
        root = Path(path)
        if not root.is_dir():
            return []
        return [
            FileInfo(path=file_path, relative_path=file_path.relative_to(root))
            for file_path in sorted(root.rglob("*"))
            if file_path.is_file()
        ]

    def list_directories(self, path: Path) -> list[Path]:
        root = Path(path)
        if not root.is_dir():
            return []
        return sorted(child for child in root.iterdir() if child.is_dir())

    def read_tree_file(self, path: Path) -> dict[str, Any] | None:
        """Read a translation file; ``None`` when it does not exist."""
        path = Path(path)
        if not path.is_file():
            return None
        text = path.read_text(encoding="utf-8")
        return parse_document(text, path.suffix.lstrip("."), source=str(path))

    def write_text_file(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8")
