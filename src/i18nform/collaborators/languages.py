"""Language records and a cached language catalog.

``LanguageCatalog`` satisfies both the ``LanguageList`` and the
``CacheInvalidator`` protocols: it loads languages lazily through a
loader callable, keeps them until ``invalidate()`` is called, and counts
invalidations so callers can observe that a save or remove happened.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Language:
    """A language editors can enter values for.

    Parameters
    ----------
    language_id:
        Store identifier, used as key of localized values.
    code:
        Short language code, e.g. ``"en"``.
    name:
        Display name, e.g. ``"English"``.
    """

    language_id: int
    code: str
    name: str = ""

    def __str__(self) -> str:
        return self.name or self.code


class LanguageCatalog:
    """Lazily loaded, invalidatable list of available languages.

    Parameters
    ----------
    loader:
        Callable returning the current languages.  Called on first
        access and again after every invalidation.

    Example
    -------
    ::

        catalog = LanguageCatalog(lambda: [Language(1, "en", "English")])
        catalog.available_languages()
        catalog.invalidate()
    """

    def __init__(self, loader: Callable[[], Iterable[Language]]) -> None:
        self._loader = loader
        self._languages: list[Language] | None = None
        self._invalidations: int = 0

    @classmethod
    def static(cls, languages: Iterable[Language]) -> "LanguageCatalog":
        """Return a catalog over a fixed list of languages."""
        frozen = tuple(languages)
        return cls(lambda: frozen)

    def available_languages(self) -> list[Language]:
        """Return the cached languages, loading them if necessary."""
        if self._languages is None:
            self._languages = sorted(self._loader(), key=lambda lang: lang.language_id)
            logger.debug("Loaded %d language(s)", len(self._languages))
        return list(self._languages)

    def get(self, language_id: int) -> Language | None:
        """Return the language with *language_id*, or ``None``."""
        for language in self.available_languages():
            if language.language_id == language_id:
                return language
        return None

    def invalidate(self) -> None:
        """Drop the cached languages; the next access reloads them."""
        self._languages = None
        self._invalidations += 1
        logger.debug("Language cache invalidated (%d so far)", self._invalidations)

    @property
    def invalidation_count(self) -> int:
        """Number of times ``invalidate`` has been called."""
        return self._invalidations

    def __repr__(self) -> str:
        state = "unloaded" if self._languages is None else f"{len(self._languages)} loaded"
        return f"LanguageCatalog({state}, invalidations={self._invalidations})"
