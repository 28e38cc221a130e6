"""Unit tests for i18nform.config."""
from __future__ import annotations

from pathlib import Path

import pytest

from i18nform.config import I18nSettings, load_settings
from i18nform.errors import ConfigurationError


class TestI18nSettings:
    def test_defaults(self) -> None:
        settings = I18nSettings()
        assert settings.i18n_suffix == "_i18n"
        assert settings.languages_variable == "available_languages"
        assert settings.plain_values_variable == "i18n_plain_values"
        assert settings.i18n_values_variable == "i18n_values"
        assert settings.table_prefix == ""

    def test_from_dict_overrides(self) -> None:
        settings = I18nSettings.from_dict({"table_prefix": "wcf1_"})
        assert settings.table_prefix == "wcf1_"
        assert settings.i18n_suffix == "_i18n"

    def test_from_dict_rejects_unknown(self) -> None:
        with pytest.raises(ConfigurationError, match="colour"):
            I18nSettings.from_dict({"colour": "blue"})

    def test_from_dict_rejects_non_string(self) -> None:
        with pytest.raises(ConfigurationError):
            I18nSettings.from_dict({"i18n_suffix": 3})

    def test_from_dict_rejects_empty_suffix(self) -> None:
        with pytest.raises(ConfigurationError):
            I18nSettings.from_dict({"i18n_suffix": ""})


class TestLoadSettings:
    def test_none_gives_defaults(self) -> None:
        assert load_settings(None) == I18nSettings()

    def test_reads_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("i18n_suffix: _l10n\ntable_prefix: wcf1_\n", encoding="utf-8")
        settings = load_settings(path)
        assert settings.i18n_suffix == "_l10n"
        assert settings.table_prefix == "wcf1_"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == I18nSettings()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_settings(tmp_path / "absent.yaml")

    def test_list_document_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_settings(path)

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("a: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_settings(path)

    def test_is_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("unknown: x\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(path)
