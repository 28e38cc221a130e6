"""Reconciliation of localized values against stored language items.

``plan_save`` compares the per-language values a user submitted with
the rows that already exist for the same item key and owner, and
returns a ``SavePlan`` of inserts and updates.  Languages that exist in
the store but were not submitted are left alone: removing stale items is
the job of ``ElementRegistry.remove``.

Usage
-----
::

    from i18nform.registry.reconcile import plan_save

    plan = plan_save(
        {1: "Hello", 2: "Bonjour"},
        existing={1: 17},
        item_key="wcf.page.title",
        category_id=3,
        owner_id=42,
    )
    for change in plan:
        print(change)
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ItemInsert:
    """A language item that does not exist yet and will be created."""

    language_id: int
    item_key: str
    value: str
    category_id: int
    owner_id: int

    def __str__(self) -> str:
        return f"[+] {self.item_key} ({self.language_id}): {self.value!r}"


@dataclass(frozen=True)
class ItemUpdate:
    """An existing language item whose content will be replaced."""

    row_id: int
    language_id: int
    value: str

    def __str__(self) -> str:
        return f"[~] row {self.row_id} ({self.language_id}): {self.value!r}"


ItemChange = Union[ItemInsert, ItemUpdate]


@dataclass(frozen=True)
class SavePlan:
    """Inserts and updates produced for a single ``save`` call.

    Parameters
    ----------
    inserts:
        Items to create, in submission order.
    updates:
        Items to overwrite, in submission order.
    """

    inserts: tuple[ItemInsert, ...] = ()
    updates: tuple[ItemUpdate, ...] = ()

    def __iter__(self) -> Iterator[ItemChange]:
        yield from self.inserts
        yield from self.updates

    def __len__(self) -> int:
        return len(self.inserts) + len(self.updates)

    @property
    def is_empty(self) -> bool:
        """Return True if the plan writes nothing."""
        return not self.inserts and not self.updates


def plan_save(
    values: Mapping[int, str],
    existing: Mapping[int, int],
    item_key: str,
    category_id: int,
    owner_id: int,
) -> SavePlan:
    """Partition submitted languages into inserts and updates.

    Parameters
    ----------
    values:
        Desired content per language ID.
    existing:
        Row ID of the stored item per language ID, for the languages
        that already have one.
    item_key:
        The language-item key being written.
    category_id:
        Resolved category the new items belong to.
    owner_id:
        Owner partition of the items.

    Returns
    -------
    SavePlan
        Every language in ``values`` appears exactly once, either as an
        insert or as an update.
    """
    inserts: list[ItemInsert] = []
    updates: list[ItemUpdate] = []
    for language_id, value in values.items():
        row_id = existing.get(language_id)
        if row_id is None:
            inserts.append(
                ItemInsert(
                    language_id=language_id,
                    item_key=item_key,
                    value=value,
                    category_id=category_id,
                    owner_id=owner_id,
                )
            )
        else:
            updates.append(ItemUpdate(row_id=row_id, language_id=language_id, value=value))
    return SavePlan(inserts=tuple(inserts), updates=tuple(updates))
