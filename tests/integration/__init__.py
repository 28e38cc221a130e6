"""Integration tests.

These tests drive full edit-form request cycles against every bundled
language-item store.  They are kept in a separate directory so they can
be excluded from the fast unit-test run with ``pytest tests/unit/``.
"""
from __future__ import annotations
