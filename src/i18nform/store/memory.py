"""In-memory language-item store.

Useful for tests and for callers that persist language items
elsewhere.  Every protocol method increments a counter in ``calls`` so
tests can assert which store operations an action performed.
"""
from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import replace

from i18nform.errors import DuplicateItemError
from i18nform.store.base import LanguageItem

logger = logging.getLogger(__name__)

_READ_METHODS = ("resolve_category_id", "find_items", "fetch_items")


class InMemoryItemStore:
    """Dict-backed ``ItemStore``.

    Parameters
    ----------
    categories:
        Category names to create up front.
    """

    def __init__(self, categories: Iterable[str] = ()) -> None:
        self._categories: dict[str, int] = {}
        self._rows: dict[int, LanguageItem] = {}
        self._next_row_id: int = 1
        self.calls: Counter[str] = Counter()
        for name in categories:
            self.add_category(name)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def add_category(self, name: str) -> int:
        """Create category *name* if needed and return its ID."""
        if name not in self._categories:
            self._categories[name] = len(self._categories) + 1
        return self._categories[name]

    # ------------------------------------------------------------------
    # ItemStore protocol
    # ------------------------------------------------------------------

    def resolve_category_id(self, name: str) -> int | None:
        self.calls["resolve_category_id"] += 1
        return self._categories.get(name)

    def find_items(
        self, language_ids: Sequence[int], item_key: str, owner_id: int
    ) -> list[tuple[int, int]]:
        self.calls["find_items"] += 1
        wanted = set(language_ids)
        return [
            (row.language_id, row.row_id)
            for row in self._rows.values()
            if row.language_id in wanted
            and row.item_key == item_key
            and row.owner_id == owner_id
        ]

    def insert_item(
        self, language_id: int, item_key: str, value: str, category_id: int, owner_id: int
    ) -> int:
        self.calls["insert_item"] += 1
        if any(
            row.language_id == language_id
            and row.item_key == item_key
            and row.owner_id == owner_id
            for row in self._rows.values()
        ):
            raise DuplicateItemError(language_id, item_key, owner_id)
        row_id = self._next_row_id
        self._next_row_id += 1
        self._rows[row_id] = LanguageItem(
            row_id=row_id,
            language_id=language_id,
            item_key=item_key,
            content=value,
            category_id=category_id,
            owner_id=owner_id,
        )
        logger.debug("Inserted row %d for %r (language %d)", row_id, item_key, language_id)
        return row_id

    def update_item(self, row_id: int, value: str) -> None:
        self.calls["update_item"] += 1
        row = self._rows.get(row_id)
        if row is None:
            raise KeyError(row_id)
        self._rows[row_id] = replace(row, content=value)

    def delete_items(self, item_key: str, owner_id: int) -> int:
        self.calls["delete_items"] += 1
        doomed = [
            row_id
            for row_id, row in self._rows.items()
            if row.item_key == item_key and row.owner_id == owner_id
        ]
        for row_id in doomed:
            del self._rows[row_id]
        return len(doomed)

    def fetch_items(self, item_key: str, owner_id: int) -> list[tuple[int, str]]:
        self.calls["fetch_items"] += 1
        return [
            (row.language_id, row.content)
            for row in self._rows.values()
            if row.item_key == item_key and row.owner_id == owner_id
        ]

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def items(self) -> list[LanguageItem]:
        """Return all stored rows ordered by row ID."""
        return [self._rows[row_id] for row_id in sorted(self._rows)]

    @property
    def read_count(self) -> int:
        """Number of read calls issued against the store."""
        return sum(self.calls[name] for name in _READ_METHODS)

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return (
            f"InMemoryItemStore(categories={sorted(self._categories)!r}, "
            f"rows={len(self._rows)})"
        )
