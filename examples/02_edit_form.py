#!/usr/bin/env python3
"""Example: Editing a stored object

Opens an edit form with stored language items, re-displays an invalid
submission exactly as sent, and finally removes the items when the
object is deleted.  Uses a SQLite store in memory.

Usage:
    python examples/02_edit_form.py

Requirements:
    pip install i18n-form
"""
from __future__ import annotations

import i18nform

PATTERN = r"wcf\.page\.title\d+"


def _registry(store: i18nform.SqliteItemStore, catalog: i18nform.LanguageCatalog) -> i18nform.ElementRegistry:
    registry = i18nform.ElementRegistry(
        store=store, languages=catalog, cache=catalog, template=i18nform.TemplateContext()
    )
    registry.register("title")
    return registry


def main() -> None:
    with i18nform.SqliteItemStore(":memory:") as store:
        store.create_schema()
        store.add_category("wcf.page")
        store.add_language("en", "English")
        store.add_language("fr", "Français")
        catalog = i18nform.LanguageCatalog(store.load_languages)

        # Create the object with a localized title
        create = _registry(store, catalog)
        create.read_values(
            i18nform.MappingRequestData.from_pairs(
                [("title_i18n[1]", "Hello"), ("title_i18n[2]", "Bonjour")]
            )
        )
        create.save("title", "wcf.page.title7", "wcf.page", owner_id=7)

        # Open the edit form: values come from the store
        edit = _registry(store, catalog)
        edit.set_options("title", owner_id=7, current_value="wcf.page.title7", pattern=PATTERN)
        display = edit.assign_variables(use_stored_data=True)
        print(f"Stored values:   {display.i18n_values['title']}")

        # A partial submission fails validation and is shown as sent
        partial = _registry(store, catalog)
        partial.read_values({"title_i18n": {"1": "Hi", "2": ""}})
        if partial.invalid_elements():
            display = partial.assign_variables(use_stored_data=False)
            print(f"Re-displayed:    {display.i18n_values['title']}")

        # Delete the object together with its language items
        removed = _registry(store, catalog).remove("wcf.page.title7", owner_id=7)
        print(f"Removed {removed} language item(s)")


if __name__ == "__main__":
    main()
