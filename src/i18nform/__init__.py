"""i18n-form: multi-language form input for administrative editing screens.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import i18nform

    store = i18nform.InMemoryItemStore(categories=["wcf.page"])
    catalog = i18nform.LanguageCatalog.static(
        [i18nform.Language(1, "en", "English"), i18nform.Language(2, "fr", "Français")]
    )
    registry = i18nform.ElementRegistry(store=store, languages=catalog, cache=catalog)

    # Collect the submitted form field
    registry.register("title")
    registry.read_values({"title_i18n": {"1": "Hello", "2": "Bonjour"}})

    # Validate, then persist the per-language values
    if registry.validate_value("title"):
        plan = registry.save("title", "wcf.page.title", "wcf.page", owner_id=42)

    i18nform.__version__
    '0.1.0'
"""
from __future__ import annotations

from i18nform.collaborators import (
    CacheInvalidator,
    Language,
    LanguageCatalog,
    LanguageList,
    MappingRequestData,
    RequestData,
    TemplateContext,
    TemplateSink,
)
from i18nform.config import I18nSettings, load_settings
from i18nform.errors import (
    ConfigurationError,
    DuplicateItemError,
    ElementNotLocalizedError,
    I18nFormError,
    InvalidLanguageIDError,
    MissingCollaboratorError,
    MissingOptionsError,
    MissingValueError,
    UnknownCategoryError,
    ValuesAlreadyReadError,
)
from i18nform.registry import (
    DisplayValues,
    ElementOptions,
    ElementRegistry,
    ItemInsert,
    ItemUpdate,
    Localized,
    Plain,
    SavePlan,
)
from i18nform.store import InMemoryItemStore, ItemStore, LanguageItem, SqliteItemStore

__version__: str = "0.1.0"

__all__ = [
    "__version__",
    # registry
    "ElementRegistry",
    "Plain",
    "Localized",
    "ElementOptions",
    "DisplayValues",
    "SavePlan",
    "ItemInsert",
    "ItemUpdate",
    # collaborators
    "RequestData",
    "LanguageList",
    "CacheInvalidator",
    "TemplateSink",
    "MappingRequestData",
    "Language",
    "LanguageCatalog",
    "TemplateContext",
    # stores
    "ItemStore",
    "LanguageItem",
    "InMemoryItemStore",
    "SqliteItemStore",
    # config
    "I18nSettings",
    "load_settings",
    # errors
    "I18nFormError",
    "MissingValueError",
    "InvalidLanguageIDError",
    "UnknownCategoryError",
    "ValuesAlreadyReadError",
    "ElementNotLocalizedError",
    "MissingOptionsError",
    "MissingCollaboratorError",
    "DuplicateItemError",
    "ConfigurationError",
]
