"""Settings for the element registry and the bundled stores.

Settings are plain YAML::

    i18n_suffix: _i18n
    languages_variable: available_languages
    plain_values_variable: i18n_plain_values
    i18n_values_variable: i18n_values
    table_prefix: wcf1_

Every key is optional; omitted keys keep their defaults.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from i18nform.errors import ConfigurationError


@dataclass(frozen=True)
class I18nSettings:
    """Registry settings.

    Parameters
    ----------
    i18n_suffix:
        Appended to an element ID to find its per-language submission.
    languages_variable:
        Template variable receiving the available languages.
    plain_values_variable:
        Template variable receiving plain values per element.
    i18n_values_variable:
        Template variable receiving localized values per element.
    table_prefix:
        Table name prefix used by ``SqliteItemStore``.
    """

    i18n_suffix: str = "_i18n"
    languages_variable: str = "available_languages"
    plain_values_variable: str = "i18n_plain_values"
    i18n_values_variable: str = "i18n_values"
    table_prefix: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "I18nSettings":
        """Build settings from a mapping, rejecting unknown keys and non-strings."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown setting(s): {', '.join(unknown)}")
        for key, value in data.items():
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"Setting {key!r} must be a string, got {type(value).__name__}"
                )
        if data.get("i18n_suffix") == "":
            raise ConfigurationError("Setting 'i18n_suffix' must not be empty")
        return cls(**data)


def load_settings(path: str | Path | None = None) -> I18nSettings:
    """Load settings from a YAML file.

    Parameters
    ----------
    path:
        The settings file.  ``None`` returns the defaults.

    Returns
    -------
    I18nSettings

    Raises
    ------
    ConfigurationError
        If the file cannot be read, is not valid YAML, is not a mapping,
        or contains unknown or non-string settings.
    """
    if path is None:
        return I18nSettings()
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read settings file {str(path)!r}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {str(path)!r}: {exc}") from exc
    if data is None:
        return I18nSettings()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {str(path)!r} must contain a mapping")
    return I18nSettings.from_dict(data)
