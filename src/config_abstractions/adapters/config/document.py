"""Mutable configuration documents backed by TOML files.

A document is a tree of tables. Every table is a *section*; a table that
contains further tables is also a *section group*. Sections are addressed
with dotted names (``"database.pool"``). Writes through a section mark the
document modified; nothing reaches disk until ``save``/``save_as``.

Contents:
    * :class:`ConfigurationSection` - change-tracking view over one table.
    * :class:`ConfigurationSectionGroup` - a table holding nested tables.
    * :class:`TableDocument` - shared document behaviour, storage left abstract.
    * :class:`TomlConfiguration` - document stored in a TOML file via rtoml.
    * :func:`open_toml_document` - OpenDocument adapter for TOML files.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, MutableMapping
from pathlib import Path
from typing import Any, cast

import rtoml

from config_abstractions.domain.enums import SaveMode

logger = logging.getLogger(__name__)

Table = dict[str, Any]

APP_SETTINGS_SECTION = "app_settings"
CONNECTION_STRINGS_SECTION = "connection_strings"


def _qualify(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def _child_tables(table: Table) -> Iterator[tuple[str, Table]]:
    for key, value in table.items():
        if isinstance(value, dict):
            yield key, cast(Table, value)


def _has_child_tables(table: Table) -> bool:
    return any(True for _ in _child_tables(table))


class ConfigurationSection(MutableMapping[str, Any]):
    """Change-tracking mapping over one table of a document.

    ``on_change`` runs after every write so the owning document can record
    the modification (and attach sections that did not exist before).
    """

    __slots__ = ("_name", "_on_change", "_table")

    def __init__(self, name: str, table: Table, on_change: Callable[[], None]) -> None:
        self._name = name
        self._table = table
        self._on_change = on_change

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> Any:
        return self._table[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._table[key] = value
        self._on_change()

    def __delitem__(self, key: str) -> None:
        del self._table[key]
        self._on_change()

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ConfigurationSection(name={self._name!r}, keys={list(self._table)!r})"


class ConfigurationSectionGroup:
    """A table that contains nested tables.

    The root group (empty name) spans the whole document.
    """

    __slots__ = ("_name", "_on_change", "_table")

    def __init__(self, name: str, table: Table, on_change: Callable[[], None]) -> None:
        self._name = name
        self._table = table
        self._on_change = on_change

    @property
    def name(self) -> str:
        return self._name

    @property
    def sections(self) -> dict[str, ConfigurationSection]:
        """Direct child tables keyed by their short name."""
        return {
            key: ConfigurationSection(_qualify(self._name, key), table, self._on_change)
            for key, table in _child_tables(self._table)
        }

    @property
    def section_groups(self) -> dict[str, ConfigurationSectionGroup]:
        """Direct child tables that contain tables themselves."""
        return {
            key: ConfigurationSectionGroup(_qualify(self._name, key), table, self._on_change)
            for key, table in _child_tables(self._table)
            if _has_child_tables(table)
        }

    def __repr__(self) -> str:
        return f"ConfigurationSectionGroup(name={self._name!r}, sections={list(self.sections)!r})"


class TableDocument:
    """Document behaviour shared by file-backed and in-memory documents.

    Content is read lazily on first access unless ``preload`` is set.
    Subclasses provide :meth:`_read`, :meth:`_write` and :attr:`has_file`.
    """

    def __init__(
        self,
        file_path: str | Path,
        *,
        preload: bool = False,
        app_settings_section: str = APP_SETTINGS_SECTION,
        connection_strings_section: str = CONNECTION_STRINGS_SECTION,
    ) -> None:
        self._file_path = Path(file_path)
        self._app_settings_section = app_settings_section
        self._connection_strings_section = connection_strings_section
        self._data: Table | None = None
        self._detached: dict[str, Table] = {}
        self._modified = False
        if preload:
            self.load()

    def _read(self) -> Table:
        raise NotImplementedError

    def _write(self, path: Path, data: Table) -> None:
        raise NotImplementedError

    @property
    def has_file(self) -> bool:
        raise NotImplementedError

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def is_loaded(self) -> bool:
        return self._data is not None

    @property
    def modified(self) -> bool:
        """True when the document changed since it was loaded or last saved."""
        return self._modified

    def load(self) -> None:
        """Read the document content now instead of on first access."""
        self._tables()

    def _tables(self) -> Table:
        if self._data is None:
            self._data = self._read()
            logger.debug("Loaded configuration document", extra={"path": str(self._file_path)})
        return self._data

    def _mark_modified(self) -> None:
        self._modified = True

    def _find_table(self, dotted_name: str) -> Table | None:
        node: object = self._tables()
        for part in dotted_name.split("."):
            if not isinstance(node, dict):
                return None
            node = cast(Table, node).get(part)
        return cast(Table, node) if isinstance(node, dict) else None

    def _attach(self, dotted_name: str, table: Table) -> None:
        node = self._tables()
        *parents, leaf = dotted_name.split(".")
        for part in parents:
            node = cast(Table, node.setdefault(part, {}))
        existing = cast(Table, node.setdefault(leaf, table))
        if existing is not table:
            existing.update(table)
        self._detached.pop(dotted_name, None)

    def _section_or_empty(self, dotted_name: str) -> ConfigurationSection:
        table = self._find_table(dotted_name)
        if table is not None:
            return ConfigurationSection(dotted_name, table, self._mark_modified)

        # Detached until the first write, so reading never changes the document.
        # Handles on the same absent section share one table.
        detached = self._detached.setdefault(dotted_name, {})

        def _attach_and_mark() -> None:
            self._attach(dotted_name, detached)
            self._mark_modified()

        return ConfigurationSection(dotted_name, detached, _attach_and_mark)

    @property
    def app_settings(self) -> ConfigurationSection:
        return self._section_or_empty(self._app_settings_section)

    @property
    def connection_strings(self) -> ConfigurationSection:
        return self._section_or_empty(self._connection_strings_section)

    @property
    def root_section_group(self) -> ConfigurationSectionGroup:
        return ConfigurationSectionGroup("", self._tables(), self._mark_modified)

    @property
    def sections(self) -> Mapping[str, ConfigurationSection]:
        return self.root_section_group.sections

    @property
    def section_groups(self) -> Mapping[str, ConfigurationSectionGroup]:
        return self.root_section_group.section_groups

    def get_section(self, section_name: str) -> ConfigurationSection | None:
        """Return the section at ``section_name`` or None when it does not exist."""
        table = self._find_table(section_name)
        if table is None:
            return None
        return ConfigurationSection(section_name, table, self._mark_modified)

    def get_section_group(self, group_name: str) -> ConfigurationSectionGroup | None:
        """Return the group at ``group_name`` or None when it is absent or holds no tables."""
        table = self._find_table(group_name)
        if table is None or not _has_child_tables(table):
            return None
        return ConfigurationSectionGroup(group_name, table, self._mark_modified)

    def save(self, save_mode: SaveMode | str = SaveMode.MODIFIED, force_save_all: bool = False) -> None:
        """Write the document back to :attr:`file_path`.

        ``MODIFIED`` and ``MINIMAL`` skip the write when nothing changed;
        ``FULL`` and ``force_save_all`` always rewrite the file.
        """
        save_mode = SaveMode(save_mode)
        if not (self._modified or force_save_all or save_mode is SaveMode.FULL):
            logger.debug("Configuration document unchanged, save skipped", extra={"path": str(self._file_path)})
            return
        self._write(self._file_path, self._tables())
        self._modified = False
        logger.debug(
            "Saved configuration document",
            extra={"path": str(self._file_path), "save_mode": save_mode.value, "force_save_all": force_save_all},
        )

    def save_as(
        self,
        filename: str | Path,
        save_mode: SaveMode | str = SaveMode.MODIFIED,
        force_save_all: bool = False,
    ) -> None:
        """Write the document to ``filename``; :attr:`file_path` is unchanged.

        The whole document is always written, whatever the mode.
        """
        save_mode = SaveMode(save_mode)
        target = Path(filename)
        self._write(target, self._tables())
        if target == self._file_path:
            self._modified = False
        logger.debug(
            "Saved configuration document copy",
            extra={"path": str(target), "save_mode": save_mode.value, "force_save_all": force_save_all},
        )


class TomlConfiguration(TableDocument):
    """Configuration document stored in a TOML file.

    A missing file yields an empty document; saving creates it together with
    any missing parent directories.

    Example:
        >>> import tempfile
        >>> doc = TomlConfiguration(Path(tempfile.mkdtemp()) / "app.toml")
        >>> doc.has_file
        False
        >>> doc.app_settings["Timeout"] = 10
        >>> doc.save()
        >>> doc.has_file
        True
    """

    @property
    def has_file(self) -> bool:
        return self._file_path.is_file()

    def _read(self) -> Table:
        if not self._file_path.is_file():
            return {}
        return cast(Table, rtoml.load(self._file_path))

    def _write(self, path: Path, data: Table) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(rtoml.dumps(data), encoding="utf-8")


def open_toml_document(path: Path, *, preload: bool = False) -> TomlConfiguration:
    """Open the TOML configuration document at ``path``."""
    return TomlConfiguration(path, preload=preload)


__all__ = [
    "APP_SETTINGS_SECTION",
    "CONNECTION_STRINGS_SECTION",
    "ConfigurationSection",
    "ConfigurationSectionGroup",
    "TableDocument",
    "TomlConfiguration",
    "open_toml_document",
]
