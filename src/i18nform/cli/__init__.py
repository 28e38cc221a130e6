"""CLI package for i18n-form.

Entry point: ``i18nform.cli.main:cli``
"""
from __future__ import annotations
