"""SQLite-backed language-item store.

Three tables hold the data, each name optionally prefixed:

``language``
    ``language_id``, ``language_code``, ``language_name``
``language_category``
    ``language_category_id``, ``language_category``
``language_item``
    ``language_item_id``, ``language_id``, ``language_item``,
    ``language_item_value``, ``language_category_id``, ``owner_id``,
    unique on ``(language_id, language_item, owner_id)``

Outside of :meth:`SqliteItemStore.transaction` every write commits
immediately.  Inside it, all writes commit together or not at all.

Usage
-----
::

    from i18nform.store.sqlite import SqliteItemStore

    with SqliteItemStore("items.sqlite") as store:
        store.create_schema()
        store.add_category("wcf.page")
        store.add_language("en", "English")
"""
from __future__ import annotations

import logging
import re
import sqlite3
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import cast

from i18nform.collaborators.languages import Language
from i18nform.errors import ConfigurationError, DuplicateItemError, UnknownCategoryError
from i18nform.store.base import LanguageItem

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(r"^[A-Za-z0-9_]*$")


class SqliteItemStore:
    """``ItemStore`` over a SQLite database file.

    Parameters
    ----------
    path:
        Database file, or ``":memory:"``.
    table_prefix:
        Prepended to every table name, e.g. ``"wcf1_"``.
    """

    def __init__(self, path: str | Path, table_prefix: str = "") -> None:
        if not _PREFIX_RE.match(table_prefix):
            raise ConfigurationError(f"Invalid table prefix {table_prefix!r}")
        self.path = str(path)
        self._language = f"{table_prefix}language"
        self._category = f"{table_prefix}language_category"
        self._item = f"{table_prefix}language_item"
        self._conn = sqlite3.connect(self.path, isolation_level=None)
        self._conn.execute("PRAGMA foreign_keys = ON")
        self._in_transaction = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def create_schema(self) -> None:
        """Create the tables if they do not exist yet."""
        self._conn.executescript(
            f"""
            CREATE TABLE IF NOT EXISTS {self._language} (
                language_id INTEGER PRIMARY KEY AUTOINCREMENT,
                language_code TEXT NOT NULL UNIQUE,
                language_name TEXT NOT NULL DEFAULT ''
            );
            CREATE TABLE IF NOT EXISTS {self._category} (
                language_category_id INTEGER PRIMARY KEY AUTOINCREMENT,
                language_category TEXT NOT NULL UNIQUE
            );
            CREATE TABLE IF NOT EXISTS {self._item} (
                language_item_id INTEGER PRIMARY KEY AUTOINCREMENT,
                language_id INTEGER NOT NULL,
                language_item TEXT NOT NULL,
                language_item_value TEXT NOT NULL,
                language_category_id INTEGER NOT NULL
                    REFERENCES {self._category} (language_category_id),
                owner_id INTEGER NOT NULL,
                UNIQUE (language_id, language_item, owner_id)
            );
            """
        )

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "SqliteItemStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def transaction(self) -> Iterator["SqliteItemStore"]:
        """Group writes so they commit together; roll back on error.

        Nested use joins the outer transaction.
        """
        if self._in_transaction:
            yield self
            return
        self._conn.execute("BEGIN")
        self._in_transaction = True
        try:
            yield self
        except BaseException:
            self._conn.execute("ROLLBACK")
            logger.debug("Rolled back transaction on %s", self.path)
            raise
        else:
            self._conn.execute("COMMIT")
        finally:
            self._in_transaction = False

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def add_category(self, name: str) -> int:
        """Create category *name* if needed and return its ID."""
        self._conn.execute(
            f"INSERT OR IGNORE INTO {self._category} (language_category) VALUES (?)",
            (name,),
        )
        category_id = self.resolve_category_id(name)
        if category_id is None:
            raise UnknownCategoryError(name)
        return category_id

    def add_language(self, code: str, name: str = "") -> int:
        """Create language *code* if needed and return its ID."""
        self._conn.execute(
            f"INSERT OR IGNORE INTO {self._language} (language_code, language_name) "
            "VALUES (?, ?)",
            (code, name),
        )
        row = self._conn.execute(
            f"SELECT language_id FROM {self._language} WHERE language_code = ?",
            (code,),
        ).fetchone()
        return int(row[0])

    def load_languages(self) -> list[Language]:
        """Return all languages, suitable as a ``LanguageCatalog`` loader."""
        rows = self._conn.execute(
            f"SELECT language_id, language_code, language_name FROM {self._language} "
            "ORDER BY language_id"
        ).fetchall()
        return [Language(language_id=row[0], code=row[1], name=row[2]) for row in rows]

    # ------------------------------------------------------------------
    # ItemStore protocol
    # ------------------------------------------------------------------

    def resolve_category_id(self, name: str) -> int | None:
        row = self._conn.execute(
            f"SELECT language_category_id FROM {self._category} WHERE language_category = ?",
            (name,),
        ).fetchone()
        return None if row is None else int(row[0])

    def find_items(
        self, language_ids: Sequence[int], item_key: str, owner_id: int
    ) -> list[tuple[int, int]]:
        if not language_ids:
            return []
        placeholders = ", ".join("?" for _ in language_ids)
        rows = self._conn.execute(
            f"SELECT language_id, language_item_id FROM {self._item} "
            f"WHERE language_id IN ({placeholders}) "
            "AND language_item = ? AND owner_id = ?",
            (*language_ids, item_key, owner_id),
        ).fetchall()
        return [(int(language_id), int(row_id)) for language_id, row_id in rows]

    def insert_item(
        self, language_id: int, item_key: str, value: str, category_id: int, owner_id: int
    ) -> int:
        try:
            cursor = self._conn.execute(
                f"INSERT INTO {self._item} (language_id, language_item, language_item_value, "
                "language_category_id, owner_id) VALUES (?, ?, ?, ?, ?)",
                (language_id, item_key, value, category_id, owner_id),
            )
        except sqlite3.IntegrityError as exc:
            if "UNIQUE" in str(exc):
                raise DuplicateItemError(language_id, item_key, owner_id) from exc
            raise
        row_id = cast(int, cursor.lastrowid)
        logger.debug("Inserted row %d for %r (language %d)", row_id, item_key, language_id)
        return row_id

    def update_item(self, row_id: int, value: str) -> None:
        cursor = self._conn.execute(
            f"UPDATE {self._item} SET language_item_value = ? WHERE language_item_id = ?",
            (value, row_id),
        )
        if cursor.rowcount == 0:
            raise KeyError(row_id)

    def delete_items(self, item_key: str, owner_id: int) -> int:
        cursor = self._conn.execute(
            f"DELETE FROM {self._item} WHERE language_item = ? AND owner_id = ?",
            (item_key, owner_id),
        )
        return cursor.rowcount

    def fetch_items(self, item_key: str, owner_id: int) -> list[tuple[int, str]]:
        rows = self._conn.execute(
            f"SELECT language_id, language_item_value FROM {self._item} "
            "WHERE language_item = ? AND owner_id = ? ORDER BY language_id",
            (item_key, owner_id),
        ).fetchall()
        return [(int(language_id), value) for language_id, value in rows]

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def items(self, item_key: str | None = None, owner_id: int | None = None) -> list[LanguageItem]:
        """Return stored rows, optionally filtered by key and owner."""
        clauses: list[str] = []
        params: list[object] = []
        if item_key is not None:
            clauses.append("language_item = ?")
            params.append(item_key)
        if owner_id is not None:
            clauses.append("owner_id = ?")
            params.append(owner_id)
        where = f"WHERE {' AND '.join(clauses)} " if clauses else ""
        rows = self._conn.execute(
            "SELECT language_item_id, language_id, language_item, language_item_value, "
            f"language_category_id, owner_id FROM {self._item} {where}"
            "ORDER BY language_item_id",
            params,
        ).fetchall()
        return [
            LanguageItem(
                row_id=row[0],
                language_id=row[1],
                item_key=row[2],
                content=row[3],
                category_id=row[4],
                owner_id=row[5],
            )
            for row in rows
        ]

    def __repr__(self) -> str:
        return f"SqliteItemStore({self.path!r})"
