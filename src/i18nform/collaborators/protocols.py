"""Capability protocols the element registry depends on.

The registry never reaches for global request, template or cache
objects.  Callers hand it objects satisfying these protocols at
construction time.  All protocols are :func:`runtime-checkable
<typing.runtime_checkable>`, so ``isinstance`` tests work.

The item store protocol lives in :mod:`i18nform.store.base`.

Implementations
---------------
- :class:`~i18nform.collaborators.request.MappingRequestData`
- :class:`~i18nform.collaborators.languages.LanguageCatalog`
  (both ``LanguageList`` and ``CacheInvalidator``)
- :class:`~i18nform.collaborators.template.TemplateContext`
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from i18nform.collaborators.languages import Language


@runtime_checkable
class RequestData(Protocol):
    """Read access to submitted form data."""

    def get(self, key: str) -> Any:
        """Return the scalar or mapping submitted under *key*, or ``None``."""
        ...  # pragma: no cover


@runtime_checkable
class LanguageList(Protocol):
    """Source of the languages an editor may enter values for."""

    def available_languages(self) -> Sequence["Language"]:
        """Return the currently available languages."""
        ...  # pragma: no cover


@runtime_checkable
class CacheInvalidator(Protocol):
    """Signal that stored language items changed."""

    def invalidate(self) -> None:
        """Drop whatever was cached from the language-item store."""
        ...  # pragma: no cover


@runtime_checkable
class TemplateSink(Protocol):
    """Write-only destination for template variables."""

    def assign(self, variables: Mapping[str, Any]) -> None:
        """Make *variables* available to the template."""
        ...  # pragma: no cover
