"""Dict-backed template sink."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class TemplateContext:
    """Collects assigned template variables.

    Later assignments replace earlier ones with the same name, matching
    how template engines treat re-assigned variables.
    """

    def __init__(self) -> None:
        self._variables: dict[str, Any] = {}

    def assign(self, variables: Mapping[str, Any]) -> None:
        """Store every name/value pair of *variables*."""
        self._variables.update(variables)

    def __getitem__(self, name: str) -> Any:
        return self._variables[name]

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    @property
    def variables(self) -> dict[str, Any]:
        """A copy of all assigned variables."""
        return dict(self._variables)

    def __repr__(self) -> str:
        return f"TemplateContext({sorted(self._variables)!r})"
