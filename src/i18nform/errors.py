"""Exception types raised by the element registry and its stores.

Every error derives from ``I18nFormError`` and from the builtin that
best describes it, so callers can catch either.  Duplicate registration
and failed validation are *not* errors: both are reported as booleans.
"""
from __future__ import annotations


class I18nFormError(Exception):
    """Base class for all i18n-form errors."""


class MissingValueError(I18nFormError, LookupError):
    """Raised when intake finds neither a plain nor a localized submission."""

    def __init__(self, element_id: str, i18n_key: str) -> None:
        self.element_id = element_id
        self.i18n_key = i18n_key
        super().__init__(
            f"Missing expected value for element id {element_id!r}: "
            f"the request carries neither {element_id!r} nor a mapping at {i18n_key!r}."
        )


class InvalidLanguageIDError(I18nFormError, ValueError):
    """Raised when a localized submission carries an unusable language key."""

    def __init__(self, element_id: str, language_key: object, reason: str = "is not an integer") -> None:
        self.element_id = element_id
        self.language_key = language_key
        super().__init__(
            f"Language key {language_key!r} submitted for element {element_id!r} {reason}."
        )


class UnknownCategoryError(I18nFormError, LookupError):
    """Raised when ``save`` cannot resolve a language category name."""

    def __init__(self, category_name: str) -> None:
        self.category_name = category_name
        super().__init__(
            f"Language category {category_name!r} does not exist in the item store."
        )


class ValuesAlreadyReadError(I18nFormError, RuntimeError):
    """Raised when ``read_values`` is called a second time on one registry."""

    def __init__(self) -> None:
        super().__init__(
            "Request values were already read for this registry. "
            "Create a new registry for each request."
        )


class ElementNotLocalizedError(I18nFormError, ValueError):
    """Raised when ``save`` is asked to persist an element without localized values."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        super().__init__(
            f"Element {element_id!r} has no localized values; "
            "only elements submitted per language can be saved as language items."
        )


class MissingOptionsError(I18nFormError, LookupError):
    """Raised when stored values are resolved for an element without options."""

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        super().__init__(
            f"No options set for element {element_id!r}; "
            "call set_options() before resolving stored values."
        )


class MissingCollaboratorError(I18nFormError, RuntimeError):
    """Raised when an operation needs a collaborator the registry was built without."""

    def __init__(self, collaborator: str, operation: str) -> None:
        self.collaborator = collaborator
        self.operation = operation
        super().__init__(
            f"{operation}() requires a {collaborator}, but none was given to the registry."
        )


class DuplicateItemError(I18nFormError, ValueError):
    """Raised by a store when an insert would create a second row for one key tuple."""

    def __init__(self, language_id: int, item_key: str, owner_id: int) -> None:
        self.language_id = language_id
        self.item_key = item_key
        self.owner_id = owner_id
        super().__init__(
            f"Language item {item_key!r} already exists for language {language_id} "
            f"and owner {owner_id}."
        )


class ConfigurationError(I18nFormError, ValueError):
    """Raised when a settings file cannot be turned into ``I18nSettings``."""
