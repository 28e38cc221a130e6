"""Element registry module.

Exports the ``ElementRegistry`` class, its value types and the
reconciliation plan types.
"""
from __future__ import annotations

from i18nform.registry.handler import ElementRegistry
from i18nform.registry.reconcile import ItemInsert, ItemUpdate, SavePlan, plan_save
from i18nform.registry.values import (
    Classification,
    DisplayValues,
    ElementOptions,
    Localized,
    Plain,
)

__all__ = [
    "ElementRegistry",
    "Classification",
    "DisplayValues",
    "ElementOptions",
    "Localized",
    "Plain",
    "ItemInsert",
    "ItemUpdate",
    "SavePlan",
    "plan_save",
]
