"""Unit tests for display resolution: set_options, resolve_for_display
and assign_variables.
"""
from __future__ import annotations

import re

import pytest

from i18nform import (
    ElementRegistry,
    I18nSettings,
    InMemoryItemStore,
    LanguageCatalog,
    MissingCollaboratorError,
    MissingOptionsError,
    TemplateContext,
)

_PATTERN = r"wcf\.page\.title\d+"


@pytest.fixture()
def stored(store: InMemoryItemStore) -> InMemoryItemStore:
    """Store holding ``wcf.page.title5`` in two languages for owner 42."""
    category_id = store.add_category("wcf.page")
    store.insert_item(1, "wcf.page.title5", "Hello", category_id, 42)
    store.insert_item(2, "wcf.page.title5", "Bonjour", category_id, 42)
    store.calls.clear()
    return store


class TestResolveSubmittedValues:
    def test_plain_value_is_echoed(self, registry: ElementRegistry) -> None:
        registry.register("title")
        registry.read_values({"title": "Hello"})
        display = registry.resolve_for_display(use_stored_data=False)
        assert display.values == {"title": "Hello"}
        assert display.i18n_values == {"title": {}}

    def test_localized_values_are_echoed(self, registry: ElementRegistry) -> None:
        registry.register("title")
        registry.read_values({"title_i18n": {1: "Hello", 2: ""}})
        display = registry.resolve_for_display()
        assert display.values == {"title": ""}
        assert display.i18n_values == {"title": {1: "Hello", 2: ""}}

    def test_never_reads_the_store(
        self, registry: ElementRegistry, stored: InMemoryItemStore
    ) -> None:
        registry.register("title")
        registry.register("description")
        registry.read_values({"title_i18n": {1: "Hi"}, "description": "Text"})
        registry.set_options("title", 42, "wcf.page.title5", _PATTERN)
        registry.resolve_for_display(use_stored_data=False)
        assert stored.read_count == 0
        assert sum(stored.calls.values()) == 0

    def test_works_without_options(self, registry: ElementRegistry) -> None:
        registry.register("title")
        registry.read_values({"title": "Hello"})
        assert registry.resolve_for_display().values["title"] == "Hello"

    def test_unclassified_element_is_blank(self, registry: ElementRegistry) -> None:
        registry.register("title")
        display = registry.resolve_for_display()
        assert display.values == {"title": ""}
        assert display.i18n_values == {"title": {}}

    def test_echoed_map_is_a_copy(self, registry: ElementRegistry) -> None:
        registry.register("title")
        registry.read_values({"title_i18n": {1: "Hello"}})
        registry.resolve_for_display().i18n_values["title"][1] = "Changed"
        assert registry.get_i18n_values("title") == {1: "Hello"}


class TestResolveStoredValues:
    def test_item_key_loads_languages_from_store(
        self, registry: ElementRegistry, stored: InMemoryItemStore
    ) -> None:
        registry.register("title")
        registry.set_options("title", 42, "wcf.page.title5", _PATTERN)
        display = registry.resolve_for_display(use_stored_data=True)
        assert display.i18n_values == {"title": {1: "Hello", 2: "Bonjour"}}
        assert display.values == {"title": ""}
        assert stored.calls["fetch_items"] == 1

    def test_literal_is_shown_verbatim(
        self, registry: ElementRegistry, stored: InMemoryItemStore
    ) -> None:
        registry.register("title")
        registry.set_options("title", 42, "My page", _PATTERN)
        display = registry.resolve_for_display(use_stored_data=True)
        assert display.values == {"title": "My page"}
        assert display.i18n_values == {"title": {}}
        assert stored.read_count == 0

    def test_owner_scopes_the_lookup(
        self, registry: ElementRegistry, stored: InMemoryItemStore
    ) -> None:
        registry.register("title")
        registry.set_options("title", 7, "wcf.page.title5", _PATTERN)
        display = registry.resolve_for_display(use_stored_data=True)
        assert display.i18n_values == {"title": {}}

    def test_compiled_pattern(self, registry: ElementRegistry, stored: InMemoryItemStore) -> None:
        registry.register("title")
        registry.set_options("title", 42, "wcf.page.title5", re.compile(_PATTERN))
        display = registry.resolve_for_display(use_stored_data=True)
        assert display.i18n_values["title"] == {1: "Hello", 2: "Bonjour"}

    def test_ignores_submitted_values(
        self, registry: ElementRegistry, stored: InMemoryItemStore
    ) -> None:
        registry.register("title")
        registry.read_values({"title": "Submitted"})
        registry.set_options("title", 42, "Stored", _PATTERN)
        assert registry.resolve_for_display(use_stored_data=True).values == {"title": "Stored"}

    def test_missing_options_raise(self, registry: ElementRegistry) -> None:
        registry.register("title")
        with pytest.raises(MissingOptionsError) as info:
            registry.resolve_for_display(use_stored_data=True)
        assert info.value.element_id == "title"

    def test_item_key_without_store_raises(self) -> None:
        registry = ElementRegistry()
        registry.register("title")
        registry.set_options("title", 42, "wcf.page.title5", _PATTERN)
        with pytest.raises(MissingCollaboratorError):
            registry.resolve_for_display(use_stored_data=True)


class TestAssignVariables:
    def test_assigns_three_variables(
        self, registry: ElementRegistry, template: TemplateContext, catalog: LanguageCatalog
    ) -> None:
        registry.register("title")
        registry.read_values({"title": "Hello"})
        registry.assign_variables()
        assert template["available_languages"] == catalog.available_languages()
        assert template["i18n_plain_values"] == {"title": "Hello"}
        assert template["i18n_values"] == {"title": {}}

    def test_returns_display_values(self, registry: ElementRegistry) -> None:
        registry.register("title")
        registry.read_values({"title_i18n": {1: "Hello"}})
        display = registry.assign_variables()
        assert display.i18n_values == {"title": {1: "Hello"}}

    def test_stored_data(
        self, registry: ElementRegistry, template: TemplateContext, stored: InMemoryItemStore
    ) -> None:
        registry.register("title")
        registry.set_options("title", 42, "wcf.page.title5", _PATTERN)
        registry.assign_variables(use_stored_data=True)
        assert template["i18n_values"] == {"title": {1: "Hello", 2: "Bonjour"}}

    def test_configured_variable_names(
        self, store: InMemoryItemStore, catalog: LanguageCatalog, template: TemplateContext
    ) -> None:
        settings = I18nSettings(
            languages_variable="languages",
            plain_values_variable="plain",
            i18n_values_variable="localized",
        )
        registry = ElementRegistry(
            store=store, languages=catalog, cache=catalog, template=template, settings=settings
        )
        registry.register("title")
        registry.read_values({"title": "Hello"})
        registry.assign_variables()
        assert set(template.variables) == {"languages", "plain", "localized"}

    def test_without_template_raises(self, catalog: LanguageCatalog) -> None:
        registry = ElementRegistry(languages=catalog)
        with pytest.raises(MissingCollaboratorError):
            registry.assign_variables()

    def test_without_languages_raises(self, template: TemplateContext) -> None:
        registry = ElementRegistry(template=template)
        with pytest.raises(MissingCollaboratorError):
            registry.assign_variables()
