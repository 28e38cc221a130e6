"""Value types held by the element registry.

A registered element is classified by intake as exactly one of
``Plain`` or ``Localized``.  The two are separate frozen dataclasses
stored in a single slot per element, so an element can never be both.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

ElementID = str
LanguageID = int


@dataclass(frozen=True)
class Plain:
    """A single, language-agnostic value submitted for an element.

    Parameters
    ----------
    value:
        The submitted text, verbatim.
    """

    value: str

    @property
    def is_valid(self) -> bool:
        """Return True if the value is non-empty."""
        return self.value != ""


@dataclass(frozen=True)
class Localized:
    """Per-language values submitted for an element.

    Parameters
    ----------
    values:
        Mapping of language ID to submitted text.  Insertion order is
        the submission order; empty values are kept as submitted.
    """

    values: dict[LanguageID, str] = field(default_factory=dict)

    @property
    def language_ids(self) -> list[LanguageID]:
        """Language IDs in submission order."""
        return list(self.values)

    @property
    def is_valid(self) -> bool:
        """Return True if at least one language was sent and none is empty."""
        if not self.values:
            return False
        return all(value for value in self.values.values())


Classification = Union[Plain, Localized]


@dataclass(frozen=True)
class ElementOptions:
    """Display metadata for an element being edited.

    Parameters
    ----------
    owner_id:
        Owner partition the element's language items are stored under.
    pattern:
        Regular expression a stored language-item key must match in full.
    current_value:
        The value currently stored on the edited object: either a
        language-item key or a literal.
    """

    owner_id: int
    pattern: str | re.Pattern[str]
    current_value: str

    def refers_to_item(self) -> bool:
        """Return True if ``current_value`` is a language-item key."""
        return re.fullmatch(self.pattern, self.current_value) is not None


@dataclass
class DisplayValues:
    """Element values prepared for a form template.

    Every registered element has an entry in both maps: the plain value
    is ``""`` when localized values are shown, and the localized map is
    empty when a plain value is shown.
    """

    values: dict[ElementID, str] = field(default_factory=dict)
    i18n_values: dict[ElementID, dict[LanguageID, str]] = field(default_factory=dict)
