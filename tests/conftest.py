"""Shared test fixtures for i18n-form.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from i18nform import (
    ElementRegistry,
    InMemoryItemStore,
    Language,
    LanguageCatalog,
    TemplateContext,
)

ENGLISH = Language(1, "en", "English")
FRENCH = Language(2, "fr", "Français")


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "i18nform"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def store() -> InMemoryItemStore:
    """An empty in-memory store with the ``wcf.page`` category."""
    return InMemoryItemStore(categories=["wcf.page"])


@pytest.fixture()
def catalog() -> LanguageCatalog:
    """English and French."""
    return LanguageCatalog.static([ENGLISH, FRENCH])


@pytest.fixture()
def template() -> TemplateContext:
    return TemplateContext()


@pytest.fixture()
def registry(
    store: InMemoryItemStore, catalog: LanguageCatalog, template: TemplateContext
) -> ElementRegistry:
    """A registry wired to the in-memory store, catalog and template."""
    return ElementRegistry(store=store, languages=catalog, cache=catalog, template=template)
