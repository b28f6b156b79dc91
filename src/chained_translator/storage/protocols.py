"""Protocol definitions for the collaborators the translation manager consumes.

The manager never touches the disk or the runtime loader directly; it is
handed objects satisfying these protocols so both the local implementations
and test doubles plug in the same way.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from chained_translator.core.types import FileInfo


@runtime_checkable
class Filesystem(Protocol):
    """Protocol for the directory and file primitives of the host."""

    def exists(self, path: Path) -> bool: ...

    def make_directory(self, path: Path, mode: int = 0o755, recursive: bool = True) -> bool: ...

    def list_files(self, path: Path) -> list[FileInfo]: ...

    def list_directories(self, path: Path) -> list[Path]: ...

    def read_tree_file(self, path: Path) -> dict[str, Any] | None: ...

    def write_text_file(self, path: Path, content: str) -> None: ...


@runtime_checkable
class TranslationLoader(Protocol):
    """Protocol for the facility serving translations at runtime."""

    def load(self, locale: str, group: str, namespace: str | None = None) -> dict[str, Any]: ...
