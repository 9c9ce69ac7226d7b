"""TOML-backed configuration documents: sections, groups and save modes."""

from __future__ import annotations

from pathlib import Path

import pytest
import rtoml

from config_abstractions.adapters.config.document import (
    ConfigurationSection,
    ConfigurationSectionGroup,
    TomlConfiguration,
    open_toml_document,
)
from config_abstractions.domain.enums import SaveMode

DOCUMENT_TEXT = """\
[app_settings]
Timeout = "10"
Retries = 3

[connection_strings]
reporting = "sqlite:///reports.db"

[database]
driver = "postgres"

[database.pool]
size = 5

[database.replica]
host = "replica.internal"
"""


@pytest.fixture
def toml_file(tmp_path: Path) -> Path:
    path = tmp_path / "app.toml"
    path.write_text(DOCUMENT_TEXT, encoding="utf-8")
    return path


def _mtime_and_text(path: Path) -> tuple[int, str]:
    return path.stat().st_mtime_ns, path.read_text(encoding="utf-8")


# ======================== reading ========================


@pytest.mark.os_agnostic
def test_document_reads_lazily(toml_file: Path) -> None:
    document = TomlConfiguration(toml_file)

    assert document.is_loaded is False
    assert document.app_settings["Timeout"] == "10"
    assert document.is_loaded is True


@pytest.mark.os_agnostic
def test_preload_reads_immediately(toml_file: Path) -> None:
    document = open_toml_document(toml_file, preload=True)
    toml_file.unlink()

    assert document.is_loaded is True
    assert document.app_settings["Retries"] == 3


@pytest.mark.os_agnostic
def test_file_path_and_has_file(toml_file: Path, tmp_path: Path) -> None:
    assert TomlConfiguration(toml_file).file_path == toml_file
    assert TomlConfiguration(toml_file).has_file is True
    assert TomlConfiguration(tmp_path / "absent.toml").has_file is False


@pytest.mark.os_agnostic
def test_missing_file_reads_as_empty_document(tmp_path: Path) -> None:
    document = TomlConfiguration(tmp_path / "absent.toml")

    assert dict(document.app_settings) == {}
    assert document.sections == {}


@pytest.mark.os_agnostic
def test_connection_strings_section(toml_file: Path) -> None:
    section = TomlConfiguration(toml_file).connection_strings

    assert isinstance(section, ConfigurationSection)
    assert section.name == "connection_strings"
    assert section["reporting"] == "sqlite:///reports.db"


@pytest.mark.os_agnostic
def test_sections_list_top_level_tables(toml_file: Path) -> None:
    document = TomlConfiguration(toml_file)

    assert list(document.sections) == ["app_settings", "connection_strings", "database"]
    assert list(document.section_groups) == ["database"]


@pytest.mark.os_agnostic
def test_get_section_follows_dotted_names(toml_file: Path) -> None:
    document = TomlConfiguration(toml_file)
    pool = document.get_section("database.pool")

    assert pool is not None
    assert pool.name == "database.pool"
    assert pool["size"] == 5


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", ["missing", "database.missing", "app_settings.Timeout"])
def test_get_section_returns_none_when_absent(toml_file: Path, name: str) -> None:
    assert TomlConfiguration(toml_file).get_section(name) is None


@pytest.mark.os_agnostic
def test_section_groups_expose_nested_sections(toml_file: Path) -> None:
    group = TomlConfiguration(toml_file).get_section_group("database")

    assert isinstance(group, ConfigurationSectionGroup)
    assert group.name == "database"
    assert sorted(group.sections) == ["pool", "replica"]
    assert group.sections["replica"].name == "database.replica"
    assert group.section_groups == {}


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", ["app_settings", "missing"])
def test_get_section_group_requires_nested_tables(toml_file: Path, name: str) -> None:
    assert TomlConfiguration(toml_file).get_section_group(name) is None


@pytest.mark.os_agnostic
def test_root_section_group_spans_the_document(toml_file: Path) -> None:
    root = TomlConfiguration(toml_file).root_section_group

    assert root.name == ""
    assert "database" in root.sections
    assert list(root.section_groups) == ["database"]


# ======================== change tracking and save ========================


@pytest.mark.os_agnostic
def test_reading_does_not_mark_modified(toml_file: Path) -> None:
    document = TomlConfiguration(toml_file)
    _ = document.app_settings["Timeout"]
    _ = document.get_section("unknown")
    _ = document.connection_strings.get("absent")

    assert document.modified is False


@pytest.mark.os_agnostic
@pytest.mark.parametrize("mode", [SaveMode.MODIFIED, SaveMode.MINIMAL])
def test_unchanged_document_is_not_rewritten(toml_file: Path, mode: SaveMode) -> None:
    before = _mtime_and_text(toml_file)
    document = TomlConfiguration(toml_file)
    _ = document.app_settings["Timeout"]

    document.save(mode)

    assert _mtime_and_text(toml_file) == before


@pytest.mark.os_agnostic
def test_unsaved_changes_stay_in_memory(toml_file: Path) -> None:
    document = TomlConfiguration(toml_file)
    document.app_settings["Timeout"] = "20"

    assert document.modified is True
    assert rtoml.load(toml_file)["app_settings"]["Timeout"] == "10"


@pytest.mark.os_agnostic
def test_save_writes_changes(toml_file: Path) -> None:
    document = TomlConfiguration(toml_file)
    document.app_settings["Timeout"] = "20"
    del document.app_settings["Retries"]

    document.save()

    saved = rtoml.load(toml_file)
    assert saved["app_settings"] == {"Timeout": "20"}
    assert saved["database"]["pool"]["size"] == 5
    assert document.modified is False


@pytest.mark.os_agnostic
def test_writes_through_nested_sections_are_tracked(toml_file: Path) -> None:
    document = TomlConfiguration(toml_file)
    group = document.get_section_group("database")
    assert group is not None
    group.sections["pool"]["size"] = 10

    assert document.modified is True
    document.save(SaveMode.MINIMAL)
    assert rtoml.load(toml_file)["database"]["pool"]["size"] == 10


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("mode", "force"),
    [(SaveMode.FULL, False), (SaveMode.MODIFIED, True), (SaveMode.MINIMAL, True)],
)
def test_full_or_forced_save_always_writes(tmp_path: Path, mode: SaveMode, force: bool) -> None:
    target = tmp_path / "nested" / "app.toml"
    document = TomlConfiguration(target)

    document.save(mode, force)

    assert target.is_file()
    assert rtoml.load(target) == {}


@pytest.mark.os_agnostic
def test_first_write_to_absent_section_creates_it(tmp_path: Path) -> None:
    target = tmp_path / "new.toml"
    document = TomlConfiguration(target)
    settings = document.app_settings
    settings["Timeout"] = 10
    settings["Theme"] = "dark"

    document.save()

    assert rtoml.load(target) == {"app_settings": {"Timeout": 10, "Theme": "dark"}}
    assert document.has_file is True


@pytest.mark.os_agnostic
def test_handles_on_an_absent_section_share_one_table(tmp_path: Path) -> None:
    target = tmp_path / "new.toml"
    document = TomlConfiguration(target)
    first = document.app_settings
    second = document.app_settings

    first["Timeout"] = 10
    second["Theme"] = "dark"
    del second["Theme"]
    document.save()

    assert rtoml.load(target) == {"app_settings": {"Timeout": 10}}
    assert dict(first) == dict(second) == {"Timeout": 10}


@pytest.mark.os_agnostic
def test_handles_taken_after_the_first_write_see_the_attached_section(tmp_path: Path) -> None:
    document = TomlConfiguration(tmp_path / "new.toml")
    document.app_settings["Timeout"] = 10

    later = document.app_settings
    del later["Timeout"]

    assert dict(document.app_settings) == {}
    assert document.get_section("app_settings") is not None


@pytest.mark.os_agnostic
def test_absent_section_reads_do_not_create_it(tmp_path: Path) -> None:
    document = TomlConfiguration(tmp_path / "empty.toml")
    _ = dict(document.connection_strings)

    assert document.get_section("connection_strings") is None


@pytest.mark.os_agnostic
def test_save_as_writes_a_copy_and_keeps_file_path(toml_file: Path, tmp_path: Path) -> None:
    document = TomlConfiguration(toml_file)
    document.app_settings["Timeout"] = "30"
    copy_path = tmp_path / "copies" / "copy.toml"

    document.save_as(copy_path)

    assert document.file_path == toml_file
    assert rtoml.load(copy_path)["app_settings"]["Timeout"] == "30"
    assert rtoml.load(toml_file)["app_settings"]["Timeout"] == "10"
    assert document.modified is True


@pytest.mark.os_agnostic
def test_save_as_writes_unchanged_documents(toml_file: Path, tmp_path: Path) -> None:
    copy_path = tmp_path / "copy.toml"

    TomlConfiguration(toml_file).save_as(str(copy_path), SaveMode.MINIMAL)

    assert rtoml.load(copy_path) == rtoml.load(toml_file)


@pytest.mark.os_agnostic
def test_save_as_onto_own_path_clears_modified(toml_file: Path) -> None:
    document = TomlConfiguration(toml_file)
    document.app_settings["Timeout"] = "40"

    document.save_as(toml_file)

    assert document.modified is False


@pytest.mark.os_agnostic
@pytest.mark.parametrize("mode", ["full", "modified", "minimal"])
def test_save_modes_accept_plain_strings(tmp_path: Path, mode: str) -> None:
    target = tmp_path / "app.toml"
    document = TomlConfiguration(target)

    document.save(mode)

    assert target.is_file() is (mode == "full")


@pytest.mark.os_agnostic
def test_unknown_save_mode_is_rejected(tmp_path: Path) -> None:
    document = TomlConfiguration(tmp_path / "app.toml")

    with pytest.raises(ValueError):
        document.save("partial")
