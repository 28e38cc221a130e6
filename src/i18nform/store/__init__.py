"""Language-item stores.

Exports the ``ItemStore`` protocol, the ``LanguageItem`` row type and
the two bundled implementations.
"""
from __future__ import annotations

from i18nform.store.base import ItemStore, LanguageItem
from i18nform.store.memory import InMemoryItemStore
from i18nform.store.sqlite import SqliteItemStore

__all__ = [
    "ItemStore",
    "LanguageItem",
    "InMemoryItemStore",
    "SqliteItemStore",
]
