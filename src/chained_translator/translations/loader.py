"""Chained translation loader: canonical translations with overrides on top."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from chained_translator.core.config import TranslatorConfig
from chained_translator.core.types import VENDOR_DIR, WILDCARD
from chained_translator.storage.protocols import Filesystem
from chained_translator.translations.merge import merge_recursive
from chained_translator.translations.tree import Branch


class ChainLoader:
    """Loads a group from a chain of language roots.

    The chain starts with the canonical root followed by the override root;
    roots added later win. Missing files contribute nothing.
    """

    def __init__(self, filesystem: Filesystem, config: TranslatorConfig | None = None) -> None:
        self._config = config or TranslatorConfig()
        self._files = filesystem
        self._roots: list[Path] = [Path(self._config.lang_path), Path(self._config.override_path)]

    @property
    def roots(self) -> list[Path]:
        return list(self._roots)

    def add_path(self, path: str | Path) -> None:
        """Append a root to the chain."""
        self._roots.append(Path(path))

    def load(self, locale: str, group: str, namespace: str | None = None) -> dict[str, Any]:
        """Load *group* for *locale*.

        ``group`` and ``namespace`` both ``"*"`` select the per-locale flat
        catalog (``<locale>.json``).
        """
        merged = Branch()
        for root in self._roots:
            tree = self._files.read_tree_file(self._path(root, locale, group, namespace))
            if tree:
                merged = merge_recursive(merged, tree)
        return merged.to_mapping()

    def _path(self, root: Path, locale: str, group: str, namespace: str | None) -> Path:
        if group == WILDCARD and namespace == WILDCARD:
            return root / f"{locale}.{self._config.locale_extension}"
        filename = f"{group}.{self._config.group_extension}"
        if namespace and namespace != WILDCARD:
            return root / VENDOR_DIR / namespace / locale / filename
        return root / locale / filename
