"""ElementRegistry: i18n-aware form elements for editing screens.

A form field may be submitted either as one plain value or as a set of
per-language values.  The registry tracks the fields a form wants this
handling for, classifies what was submitted, validates it, writes
localized values to the language-item store, and prepares stored values
for the next edit.

One registry serves one request.  Collaborators are passed in
explicitly; the registry holds no global state.

Usage
-----
::

    from i18nform import ElementRegistry
    from i18nform.collaborators import LanguageCatalog, TemplateContext
    from i18nform.store import InMemoryItemStore

    store = InMemoryItemStore(categories=["wcf.page"])
    catalog = LanguageCatalog.static([...])
    registry = ElementRegistry(store=store, languages=catalog, cache=catalog)

    registry.register("title")
    registry.read_values({"title_i18n": {"1": "Hello", "2": "Bonjour"}})
    if registry.validate_value("title"):
        registry.save("title", "wcf.page.title", "wcf.page", owner_id=42)
"""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from i18nform.collaborators.request import MappingRequestData
from i18nform.config import I18nSettings
from i18nform.errors import (
    ElementNotLocalizedError,
    InvalidLanguageIDError,
    MissingCollaboratorError,
    MissingOptionsError,
    MissingValueError,
    UnknownCategoryError,
    ValuesAlreadyReadError,
)
from i18nform.registry.reconcile import SavePlan, plan_save
from i18nform.registry.values import (
    Classification,
    DisplayValues,
    ElementOptions,
    Localized,
    Plain,
)

if TYPE_CHECKING:
    from i18nform.collaborators.protocols import (
        CacheInvalidator,
        LanguageList,
        RequestData,
        TemplateSink,
    )
    from i18nform.store.base import ItemStore

logger = logging.getLogger(__name__)


def _language_values(element_id: str, submitted: Mapping[Any, Any]) -> dict[int, Any]:
    """Key a submitted localized mapping by integer language ID."""
    values: dict[int, Any] = {}
    for key, value in submitted.items():
        try:
            language_id = int(key)
        except (TypeError, ValueError):
            raise InvalidLanguageIDError(element_id, key) from None
        if language_id in values:
            raise InvalidLanguageIDError(
                element_id, key, f"repeats language ID {language_id}"
            )
        values[language_id] = value
    return values


class ElementRegistry:
    """Registry of i18n-aware form elements for a single request.

    Parameters
    ----------
    store:
        Language-item store used by ``save``, ``remove`` and stored
        display resolution.
    request:
        Default request data for ``read_values``.
    languages:
        Source of available languages for ``assign_variables``.
    cache:
        Invalidated after every ``save`` and ``remove``.
    template:
        Receives the variables from ``assign_variables``.
    settings:
        Naming settings; defaults to ``I18nSettings()``.
    """

    def __init__(
        self,
        store: "ItemStore | None" = None,
        request: "RequestData | Mapping[str, Any] | None" = None,
        languages: "LanguageList | None" = None,
        cache: "CacheInvalidator | None" = None,
        template: "TemplateSink | None" = None,
        settings: I18nSettings | None = None,
    ) -> None:
        self._store = store
        self._request = request
        self._languages = languages
        self._cache = cache
        self._template = template
        self._settings = settings or I18nSettings()
        self._element_ids: list[str] = []
        self._classifications: dict[str, Classification] = {}
        self._options: dict[str, ElementOptions] = {}
        self._values_read = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, element_id: str) -> bool:
        """Register *element_id*; return ``False`` if it was already registered."""
        if element_id in self._element_ids:
            logger.warning("Element %r is already registered", element_id)
            return False
        self._element_ids.append(element_id)
        logger.debug("Registered element %r", element_id)
        return True

    @property
    def element_ids(self) -> list[str]:
        """Registered element IDs in registration order."""
        return list(self._element_ids)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._element_ids

    def __len__(self) -> int:
        return len(self._element_ids)

    # ------------------------------------------------------------------
    # Intake
    # ------------------------------------------------------------------

    def read_values(self, request: "RequestData | Mapping[str, Any] | None" = None) -> None:
        """Classify the submitted value of every registered element.

        A scalar submitted under the element ID makes the element
        ``Plain``.  Otherwise a mapping submitted under the element ID
        plus the i18n suffix makes it ``Localized``.  A plain value wins
        if both were sent.

        Parameters
        ----------
        request:
            Request data or a plain mapping.  Defaults to the request
            given at construction.

        Raises
        ------
        MissingValueError
            If an element was submitted in neither form.
        InvalidLanguageIDError
            If a localized submission has a key that is not an integer
            language ID, or two keys naming the same language.
        ValuesAlreadyReadError
            If values were already read for this registry.
        """
        if self._values_read:
            raise ValuesAlreadyReadError()
        source = self._request_source(request)
        suffix = self._settings.i18n_suffix

        classifications: dict[str, Classification] = {}
        for element_id in self._element_ids:
            plain = source.get(element_id)
            if plain is not None and not isinstance(plain, Mapping):
                classifications[element_id] = Plain(str(plain))
                logger.debug("Element %r submitted as plain value", element_id)
                continue

            i18n_key = element_id + suffix
            localized = source.get(i18n_key)
            if isinstance(localized, Mapping):
                values = _language_values(element_id, localized)
                classifications[element_id] = Localized(values)
                logger.debug(
                    "Element %r submitted in %d language(s)", element_id, len(values)
                )
                continue

            raise MissingValueError(element_id, i18n_key)

        self._classifications = classifications
        self._values_read = True

    def classification(self, element_id: str) -> Classification | None:
        """Return the classification of *element_id*, or ``None`` before intake."""
        return self._classifications.get(element_id)

    def is_plain_value(self, element_id: str) -> bool:
        """Return True if *element_id* was submitted as a plain value."""
        return isinstance(self._classifications.get(element_id), Plain)

    def has_i18n_values(self, element_id: str) -> bool:
        """Return True if *element_id* was submitted per language."""
        return isinstance(self._classifications.get(element_id), Localized)

    def get_value(self, element_id: str) -> str:
        """Return the plain value of *element_id*.

        Raises
        ------
        KeyError
            If the element has no plain value.
        """
        classification = self._classifications.get(element_id)
        if not isinstance(classification, Plain):
            raise KeyError(element_id)
        return classification.value

    def get_i18n_values(self, element_id: str) -> dict[int, str]:
        """Return a copy of the localized values of *element_id*.

        Raises
        ------
        KeyError
            If the element has no localized values.
        """
        classification = self._classifications.get(element_id)
        if not isinstance(classification, Localized):
            raise KeyError(element_id)
        return dict(classification.values)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_value(self, element_id: str) -> bool:
        """Return True if the submitted value of *element_id* is non-empty.

        A localized element is valid only when at least one language
        was submitted and every submitted language is filled in.  An
        element that was never classified is invalid.
        """
        classification = self._classifications.get(element_id)
        if classification is None:
            return False
        return classification.is_valid

    def invalid_elements(self) -> list[str]:
        """Return the registered elements failing ``validate_value``."""
        return [e for e in self._element_ids if not self.validate_value(e)]

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, element_id: str, item_key: str, category_name: str, owner_id: int) -> SavePlan:
        """Write the localized values of *element_id* as language items.

        Existing items for ``(language, item_key, owner_id)`` are
        updated, missing ones inserted.  Languages stored earlier but
        absent from this submission are kept.  The language cache is
        invalidated afterwards, even if nothing was written.

        *owner_id* must be the object or package that owns the items;
        deleting the owner cascades to its items.

        Parameters
        ----------
        element_id:
            A registered, localized element.
        item_key:
            Language-item key to store the values under.
        category_name:
            Name of the language category for new items.
        owner_id:
            Owner partition of the items.

        Returns
        -------
        SavePlan
            The inserts and updates that were issued.

        Raises
        ------
        ElementNotLocalizedError
            If the element has no localized values.
        UnknownCategoryError
            If *category_name* does not exist.
        """
        classification = self._classifications.get(element_id)
        if not isinstance(classification, Localized):
            raise ElementNotLocalizedError(element_id)
        store = self._require_store("save")
        cache = self._require_cache("save")

        category_id = store.resolve_category_id(category_name)
        if category_id is None:
            raise UnknownCategoryError(category_name)

        language_ids = classification.language_ids
        existing: dict[int, int] = {}
        if language_ids:
            for language_id, row_id in store.find_items(language_ids, item_key, owner_id):
                existing[language_id] = row_id

        plan = plan_save(
            classification.values,
            existing,
            item_key=item_key,
            category_id=category_id,
            owner_id=owner_id,
        )
        for insert in plan.inserts:
            store.insert_item(
                insert.language_id,
                insert.item_key,
                insert.value,
                insert.category_id,
                insert.owner_id,
            )
        for update in plan.updates:
            store.update_item(update.row_id, update.value)

        cache.invalidate()
        logger.info(
            "Saved %r for owner %d: %d inserted, %d updated",
            item_key,
            owner_id,
            len(plan.inserts),
            len(plan.updates),
        )
        return plan

    def remove(self, item_key: str, owner_id: int) -> int:
        """Delete every language item *item_key* of *owner_id*.

        Returns the number of deleted rows; zero is not an error.
        """
        store = self._require_store("remove")
        cache = self._require_cache("remove")
        deleted = store.delete_items(item_key, owner_id)
        cache.invalidate()
        logger.info("Removed %d item(s) %r for owner %d", deleted, item_key, owner_id)
        return deleted

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def set_options(
        self,
        element_id: str,
        owner_id: int,
        current_value: str,
        pattern: str | re.Pattern[str],
    ) -> None:
        """Record what is currently stored for *element_id*.

        Required for every element before resolving stored values.
        *current_value* is treated as a language-item key when it fully
        matches *pattern*, and as a literal otherwise.
        """
        self._options[element_id] = ElementOptions(
            owner_id=owner_id, pattern=pattern, current_value=current_value
        )

    def resolve_for_display(self, use_stored_data: bool = False) -> DisplayValues:
        """Prepare values of all registered elements for the form template.

        Parameters
        ----------
        use_stored_data:
            ``False`` echoes the values just submitted and never reads
            the store.  ``True`` shows what is stored, using the options
            from ``set_options``.

        Returns
        -------
        DisplayValues

        Raises
        ------
        MissingOptionsError
            If *use_stored_data* is set and an element has no options.
        """
        display = DisplayValues()
        for element_id in self._element_ids:
            value = ""
            i18n_values: dict[int, str] = {}

            if not use_stored_data:
                classification = self._classifications.get(element_id)
                if isinstance(classification, Plain):
                    value = classification.value
                elif isinstance(classification, Localized):
                    i18n_values = dict(classification.values)
            else:
                options = self._options.get(element_id)
                if options is None:
                    raise MissingOptionsError(element_id)
                if options.refers_to_item():
                    store = self._require_store("resolve_for_display")
                    for language_id, content in store.fetch_items(
                        options.current_value, options.owner_id
                    ):
                        i18n_values[language_id] = content
                else:
                    value = options.current_value

            display.values[element_id] = value
            display.i18n_values[element_id] = i18n_values
        return display

    def assign_variables(self, use_stored_data: bool = False) -> DisplayValues:
        """Resolve display values and assign them to the template.

        Assigns the available languages, the plain values and the
        localized values under the names configured in the settings.
        """
        if self._template is None:
            raise MissingCollaboratorError("template sink", "assign_variables")
        if self._languages is None:
            raise MissingCollaboratorError("language list", "assign_variables")
        display = self.resolve_for_display(use_stored_data)
        self._template.assign(
            {
                self._settings.languages_variable: self._languages.available_languages(),
                self._settings.plain_values_variable: display.values,
                self._settings.i18n_values_variable: display.i18n_values,
            }
        )
        return display

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _request_source(
        self, request: "RequestData | Mapping[str, Any] | None"
    ) -> "RequestData":
        source = request if request is not None else self._request
        if source is None:
            raise MissingCollaboratorError("request", "read_values")
        if isinstance(source, Mapping):
            return MappingRequestData(source)
        return source

    def _require_store(self, operation: str) -> "ItemStore":
        if self._store is None:
            raise MissingCollaboratorError("item store", operation)
        return self._store

    def _require_cache(self, operation: str) -> "CacheInvalidator":
        if self._cache is None:
            raise MissingCollaboratorError("cache invalidator", operation)
        return self._cache

    def __repr__(self) -> str:
        return f"ElementRegistry(elements={self._element_ids!r})"
