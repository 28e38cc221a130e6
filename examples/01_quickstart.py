#!/usr/bin/env python3
"""Example: i18n-form Quickstart

Registers a form field, reads a per-language submission, validates it
and stores it as language items.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install i18n-form
"""
from __future__ import annotations

import i18nform

store = i18nform.InMemoryItemStore(categories=["wcf.page"])
catalog = i18nform.LanguageCatalog.static(
    [i18nform.Language(1, "en", "English"), i18nform.Language(2, "fr", "Français")]
)


def main() -> None:
    # 1. One registry per request
    registry = i18nform.ElementRegistry(store=store, languages=catalog, cache=catalog)
    registry.register("title")

    # 2. The submitted form sends the title per language
    registry.read_values({"title_i18n": {"1": "Hello", "2": "Bonjour"}})
    print(f"Localized: {registry.has_i18n_values('title')}")
    print(f"Valid:     {registry.validate_value('title')}")

    # 3. Store as language items owned by object 42
    plan = registry.save("title", "wcf.page.title42", "wcf.page", owner_id=42)
    for change in plan:
        print(f"  {change}")

    # 4. Saving again only updates
    again = i18nform.ElementRegistry(store=store, languages=catalog, cache=catalog)
    again.register("title")
    again.read_values({"title_i18n": {"1": "Hi", "2": "Salut"}})
    plan = again.save("title", "wcf.page.title42", "wcf.page", owner_id=42)
    print(f"Second save: {len(plan.inserts)} inserted, {len(plan.updates)} updated")
    print(f"Cache invalidated {catalog.invalidation_count} time(s)")


if __name__ == "__main__":
    main()
