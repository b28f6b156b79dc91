"""Shared test fixtures and helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from chained_translator.core.config import TranslatorConfig


def write_yaml(path: Path, data: Any) -> Path:
    """Write *data* as YAML, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, allow_unicode=True))
    return path


def read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


@pytest.fixture()
def config(tmp_path: Path) -> TranslatorConfig:
    return TranslatorConfig(
        lang_path=tmp_path / "lang",
        override_path=tmp_path / "lang-custom",
        fallback_locale="en",
    )


@pytest.fixture()
def lang_root(config: TranslatorConfig) -> Path:
    return Path(config.lang_path)


@pytest.fixture()
def override_root(config: TranslatorConfig) -> Path:
    return Path(config.override_path)
