"""Parsing and rendering of translation documents."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import yaml

_JSON_EXTENSIONS = frozenset({"json"})


def parse_document(text: str, extension: str, source: str = "<string>") -> dict[str, Any]:
    """Parse a YAML or JSON document whose top level must be a mapping.

    YAML scalars stay strings (``yes``, ``off``, ``1.0``); nothing is
    resolved to booleans or numbers. An empty document parses to an empty
    mapping.

    Raises:
        ValueError: If the top level is not a mapping.
    """
    if extension.lower() in _JSON_EXTENSIONS:
        data = json.loads(text) if text.strip() else None
    else:
        data = yaml.load(text, Loader=yaml.BaseLoader)

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(
            f"Translation file {source} must contain a mapping, got {type(data).__name__}"
        )
    return dict(data)


def render_group_document(tree: Mapping[str, Any]) -> str:
    """Render a group tree as block-style YAML, keeping the tree's key order."""
    if not tree:
        return "{}\n"
    return yaml.safe_dump(
        dict(tree),
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )
