"""Collaborator protocols and reference implementations.

Exports the capability protocols the ``ElementRegistry`` consumes and
the small adapters shipped with the library.
"""
from __future__ import annotations

from i18nform.collaborators.languages import Language, LanguageCatalog
from i18nform.collaborators.protocols import (
    CacheInvalidator,
    LanguageList,
    RequestData,
    TemplateSink,
)
from i18nform.collaborators.request import MappingRequestData
from i18nform.collaborators.template import TemplateContext

__all__ = [
    "CacheInvalidator",
    "Language",
    "LanguageCatalog",
    "LanguageList",
    "MappingRequestData",
    "RequestData",
    "TemplateContext",
    "TemplateSink",
]
