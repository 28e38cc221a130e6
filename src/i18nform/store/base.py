"""The language-item store protocol and its row type."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class LanguageItem:
    """One stored, per-language string.

    At most one row exists per ``(language_id, item_key, owner_id)``.

    Parameters
    ----------
    row_id:
        Store-assigned identity of the row.
    language_id:
        Language the content is written in.
    item_key:
        Language-item key, e.g. ``"wcf.page.title"``.
    content:
        The stored text.
    category_id:
        Category the item belongs to.
    owner_id:
        Partition key of the object or package that owns the item.
    """

    row_id: int
    language_id: int
    item_key: str
    content: str
    category_id: int
    owner_id: int


@runtime_checkable
class ItemStore(Protocol):
    """Storage capability used by ``ElementRegistry`` for language items.

    Implementations
    ---------------
    - :class:`~i18nform.store.memory.InMemoryItemStore`
    - :class:`~i18nform.store.sqlite.SqliteItemStore`
    """

    def resolve_category_id(self, name: str) -> int | None:
        """Return the ID of category *name*, or ``None`` if it does not exist."""
        ...  # pragma: no cover

    def find_items(
        self, language_ids: Sequence[int], item_key: str, owner_id: int
    ) -> list[tuple[int, int]]:
        """Return ``(language_id, row_id)`` for existing rows of *item_key*."""
        ...  # pragma: no cover

    def insert_item(
        self, language_id: int, item_key: str, value: str, category_id: int, owner_id: int
    ) -> int:
        """Create a row and return its row ID."""
        ...  # pragma: no cover

    def update_item(self, row_id: int, value: str) -> None:
        """Replace the content of row *row_id*."""
        ...  # pragma: no cover

    def delete_items(self, item_key: str, owner_id: int) -> int:
        """Delete every row of *item_key* for *owner_id*; return the count."""
        ...  # pragma: no cover

    def fetch_items(self, item_key: str, owner_id: int) -> list[tuple[int, str]]:
        """Return ``(language_id, content)`` for every row of *item_key*."""
        ...  # pragma: no cover
