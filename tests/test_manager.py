"""Tests for the chained translation manager."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from chained_translator.core.config import TranslatorConfig
from chained_translator.storage.local import LocalFilesystem
from chained_translator.translations.loader import ChainLoader
from chained_translator.translations.manager import (
    ChainedTranslationManager,
    create_translation_manager,
)
from tests.conftest import read_yaml, write_yaml


@pytest.fixture()
def loader() -> MagicMock:
    return MagicMock()


@pytest.fixture()
def manager(config: TranslatorConfig, loader: MagicMock) -> ChainedTranslationManager:
    return ChainedTranslationManager(LocalFilesystem(), loader, config)


@pytest.fixture()
def base_messages(lang_root: Path) -> Path:
    return write_yaml(lang_root / "en" / "messages.yml", {"greeting": "Hi", "farewell": "Bye"})


# ---------------------------------------------------------------------------
# save
# ---------------------------------------------------------------------------


class TestSave:
    def test_preserves_sibling_keys(
        self, manager: ChainedTranslationManager, base_messages: Path, override_root: Path
    ) -> None:
        write_yaml(override_root / "en" / "messages.yml", {"greeting": "Hi"})

        manager.save("en", "messages", "farewell", "See ya")

        path = override_root / "en" / "messages.yml"
        assert path.read_text(encoding="utf-8") == "farewell: See ya\ngreeting: Hi\n"

    def test_creates_locale_directory_and_file(
        self, manager: ChainedTranslationManager, base_messages: Path, override_root: Path
    ) -> None:
        manager.save("en", "messages", "greeting", "Hello")
        assert read_yaml(override_root / "en" / "messages.yml") == {
            "farewell": "Bye",
            "greeting": "Hello",
        }

    def test_nested_key(
        self, manager: ChainedTranslationManager, lang_root: Path, override_root: Path
    ) -> None:
        write_yaml(lang_root / "en" / "user.yml", {"profile": {"title": "Profile", "edit": "Edit"}})

        manager.save("en", "user", "profile.title", "Your profile")

        assert read_yaml(override_root / "en" / "user.yml") == {
            "profile": {"edit": "Edit", "title": "Your profile"}
        }

    def test_keeps_earlier_edits(
        self, manager: ChainedTranslationManager, base_messages: Path, override_root: Path
    ) -> None:
        manager.save("en", "messages", "greeting", "Hello")
        manager.save("en", "messages", "farewell", "Later")
        assert read_yaml(override_root / "en" / "messages.yml") == {
            "farewell": "Later",
            "greeting": "Hello",
        }

    def test_keys_sorted_at_every_level(
        self, manager: ChainedTranslationManager, lang_root: Path, override_root: Path
    ) -> None:
        write_yaml(lang_root / "en" / "user.yml", {"z": {"b": "1", "a": "2"}, "m": "3"})

        manager.save("en", "user", "c", "4")

        text = (override_root / "en" / "user.yml").read_text(encoding="utf-8")
        assert text == "c: '4'\nm: '3'\nz:\n  a: '2'\n  b: '1'\n"

    def test_namespaced_group(
        self, manager: ChainedTranslationManager, lang_root: Path, override_root: Path
    ) -> None:
        write_yaml(
            lang_root / "vendor" / "acme" / "en" / "messages.yml",
            {"title": "Acme", "body": "Body"},
        )

        manager.save("en", "acme/messages", "title", "ACME")

        assert read_yaml(override_root / "vendor" / "acme" / "en" / "messages.yml") == {
            "body": "Body",
            "title": "ACME",
        }

    def test_locale_without_base_uses_fallback(
        self, manager: ChainedTranslationManager, base_messages: Path, override_root: Path
    ) -> None:
        manager.save("fr", "messages", "greeting", "Salut")
        assert read_yaml(override_root / "fr" / "messages.yml") == {
            "farewell": "Bye",
            "greeting": "Salut",
        }

    def test_unicode_written_as_is(
        self, manager: ChainedTranslationManager, override_root: Path
    ) -> None:
        manager.save("ja", "messages", "greeting", "こんにちは")
        text = (override_root / "ja" / "messages.yml").read_text(encoding="utf-8")
        assert "こんにちは" in text

    def test_yes_no_keys_and_values_stay_strings(
        self, manager: ChainedTranslationManager, lang_root: Path, override_root: Path
    ) -> None:
        (lang_root / "en").mkdir(parents=True)
        (lang_root / "en" / "common.yml").write_text("yes: Yes\nno: No\non: On\ntitle: Title\n")

        manager.save("en", "common", "title", "Heading")

        text = (override_root / "en" / "common.yml").read_text(encoding="utf-8")
        assert "True" not in text
        assert "yes" in text
        assert read_yaml(override_root / "en" / "common.yml") == {
            "no": "No",
            "on": "On",
            "title": "Heading",
            "yes": "Yes",
        }

    def test_logs_destination(
        self,
        manager: ChainedTranslationManager,
        override_root: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="chained_translator.translations.manager"):
            manager.save("en", "messages", "greeting", "Hello")
        assert str(override_root / "en" / "messages.yml") in caplog.text

    def test_base_tree_untouched(
        self, manager: ChainedTranslationManager, base_messages: Path
    ) -> None:
        before = base_messages.read_text()
        manager.save("en", "messages", "greeting", "Hello")
        assert base_messages.read_text() == before


# ---------------------------------------------------------------------------
# reads
# ---------------------------------------------------------------------------


class TestGetGroupTranslations:
    def test_missing_file_is_empty(self, manager: ChainedTranslationManager) -> None:
        assert manager.get_group_translations("en", "messages") == {}

    def test_flattened(self, manager: ChainedTranslationManager, override_root: Path) -> None:
        write_yaml(override_root / "en" / "user.yml", {"profile": {"title": "Profile"}})
        assert manager.get_group_translations("en", "user") == {"profile.title": "Profile"}


class TestGetTranslationGroups:
    def test_lists_canonical_groups(
        self, manager: ChainedTranslationManager, lang_root: Path, override_root: Path
    ) -> None:
        write_yaml(lang_root / "en" / "messages.yml", {"a": "b"})
        write_yaml(lang_root / "vendor" / "acme" / "en" / "mail.yml", {"a": "b"})
        (lang_root / "en.json").write_text("{}")
        write_yaml(override_root / "en" / "override_only.yml", {"a": "b"})

        assert sorted(manager.get_translation_groups()) == ["acme/mail", "messages", "single"]


class TestGetTranslationsForGroup:
    def test_single_group_uses_wildcards(
        self, manager: ChainedTranslationManager, loader: MagicMock
    ) -> None:
        loader.load.return_value = {"Hello": "Hallo"}
        assert manager.get_translations_for_group("nl", "single") == {"Hello": "Hallo"}
        loader.load.assert_called_once_with("nl", "*", "*")

    def test_namespaced_group(self, manager: ChainedTranslationManager, loader: MagicMock) -> None:
        loader.load.return_value = {"mail": {"subject": "Hi"}}
        assert manager.get_translations_for_group("en", "acme/messages") == {"mail.subject": "Hi"}
        loader.load.assert_called_once_with("en", "messages", "acme")

    def test_plain_group(self, manager: ChainedTranslationManager, loader: MagicMock) -> None:
        loader.load.return_value = {}
        assert manager.get_translations_for_group("en", "messages") == {}
        loader.load.assert_called_once_with("en", "messages", None)


# ---------------------------------------------------------------------------
# promotion into the canonical tree
# ---------------------------------------------------------------------------


class TestMergeIntoDefaultTranslations:
    def test_promotes_edited_groups(
        self,
        manager: ChainedTranslationManager,
        base_messages: Path,
        lang_root: Path,
        override_root: Path,
    ) -> None:
        auth = write_yaml(lang_root / "en" / "auth.yml", {"failed": "Nope"})
        auth_before = auth.read_text()
        (lang_root / "en.json").write_text(json.dumps({"Hello": "Hello"}))
        write_yaml(override_root / "en" / "messages.yml", {"farewell": "See ya"})

        manager.merge_chained_translations_into_default_translations("en")

        assert read_yaml(base_messages) == {"farewell": "See ya", "greeting": "Hi"}
        assert auth.read_text() == auth_before
        assert not (lang_root / "en" / "single.yml").exists()

    def test_promotes_vendor_groups(
        self, manager: ChainedTranslationManager, lang_root: Path, override_root: Path
    ) -> None:
        target = write_yaml(
            lang_root / "vendor" / "acme" / "en" / "messages.yml",
            {"title": "Acme", "body": "Body"},
        )
        write_yaml(override_root / "vendor" / "acme" / "en" / "messages.yml", {"title": "ACME"})

        manager.merge_chained_translations_into_default_translations("en")

        assert read_yaml(target) == {"body": "Body", "title": "ACME"}

    def test_nothing_to_promote(
        self, manager: ChainedTranslationManager, base_messages: Path, override_root: Path
    ) -> None:
        before = base_messages.read_text()
        manager.merge_chained_translations_into_default_translations("en")
        assert base_messages.read_text() == before
        assert (override_root / "en").is_dir()


class TestCreateTranslationManager:
    def test_wires_local_disk_and_chain_loader(
        self, config: TranslatorConfig, base_messages: Path
    ) -> None:
        manager = create_translation_manager(config)

        manager.save("en", "messages", "farewell", "See ya")

        assert manager.get_translations_for_group("en", "messages") == {
            "farewell": "See ya",
            "greeting": "Hi",
        }

    def test_accepts_prebuilt_collaborators(self, config: TranslatorConfig) -> None:
        files = LocalFilesystem()
        loader = ChainLoader(files, config)
        manager = create_translation_manager(config, filesystem=files, loader=loader)
        assert isinstance(manager, ChainedTranslationManager)
