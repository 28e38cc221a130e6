"""Request data adapters.

``MappingRequestData`` wraps an already-decoded mapping of submitted
fields.  Form bodies arrive as flat ``name=value`` pairs where a
per-language field uses bracket keys::

    title_i18n[1]=Hello
    title_i18n[2]=Bonjour

:meth:`MappingRequestData.from_pairs` folds those into nested mappings
so that ``get("title_i18n")`` returns ``{"1": "Hello", "2": "Bonjour"}``.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

_BRACKET_KEY = re.compile(r"^(?P<name>[^\[\]]+)\[(?P<sub>[^\[\]]*)\]$")


class MappingRequestData:
    """``RequestData`` backed by a mapping.

    Parameters
    ----------
    data:
        Submitted fields.  Values are scalars or nested mappings.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "MappingRequestData":
        """Build request data from form-encoded ``(name, value)`` pairs.

        Keys of the form ``name[sub]`` are collected into a mapping under
        ``name``.  An empty ``sub`` appends using the next integer index.
        A later plain ``name`` replaces an earlier one.

        Parameters
        ----------
        pairs:
            Decoded pairs in submission order.

        Returns
        -------
        MappingRequestData
        """
        data: dict[str, Any] = {}
        for key, value in pairs:
            match = _BRACKET_KEY.match(key)
            if match is None:
                data[key] = value
                continue
            name, sub = match.group("name"), match.group("sub")
            nested = data.get(name)
            if not isinstance(nested, dict):
                nested = {}
                data[name] = nested
            if sub == "":
                sub = str(len(nested))
            nested[sub] = value
        return cls(data)

    def get(self, key: str) -> Any:
        """Return the value submitted under *key*, or ``None``."""
        return self._data.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"MappingRequestData(keys={sorted(self._data)!r})"
