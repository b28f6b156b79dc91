"""Core type definitions shared across the chained translator modules."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel

# Group identifier used for the per-locale flat catalog (``<locale>.json``).
SINGLE_GROUP = "single"

# Loader argument selecting the per-locale flat catalog.
WILDCARD = "*"

NAMESPACE_SEPARATOR = "/"

VENDOR_DIR = "vendor"


class FileFormat(StrEnum):
    """On-disk layouts a translation file can follow."""

    GROUP = "group"
    LOCALE = "locale"


class GroupRef(BaseModel):
    """A parsed group identifier: ``messages`` or ``acme/messages``."""

    model_config = {"frozen": True}

    name: str
    namespace: str | None = None

    @classmethod
    def parse(cls, group: str) -> GroupRef:
        """Split a group identifier on its first ``/``.

        Raises:
            ValueError: If the identifier, or either side of the separator,
                is empty.
        """
        if not group:
            raise ValueError("Group identifier must not be empty")
        if NAMESPACE_SEPARATOR not in group:
            return cls(name=group)
        namespace, name = group.split(NAMESPACE_SEPARATOR, 1)
        if not namespace or not name:
            raise ValueError(f"Malformed namespaced group {group!r}")
        return cls(name=name, namespace=namespace)

    @property
    def is_namespaced(self) -> bool:
        return self.namespace is not None

    @property
    def identifier(self) -> str:
        if self.namespace is None:
            return self.name
        return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.name}"

    def __str__(self) -> str:
        return self.identifier


class FileInfo(BaseModel):
    """A file found while walking a language root."""

    model_config = {"frozen": True}

    path: Path
    relative_path: Path

    @property
    def extension(self) -> str:
        return self.path.suffix.lstrip(".").lower()

    @property
    def basename(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        """File name without its extension."""
        return self.path.stem
