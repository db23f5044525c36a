"""Shared fixtures. Plain builders live in ``tests.fakes``."""

from __future__ import annotations

import pytest

from eftgen.formats.cpa005 import profiles
from eftgen.generator import EFTGenerator
from tests.fakes import make_configuration


@pytest.fixture
def generator():
    """Generator holding the default test configuration and no transactions."""
    return EFTGenerator(make_configuration())


@pytest.fixture
def isolated_registry(monkeypatch):
    """Profile registry copy, so registrations do not leak between tests."""
    monkeypatch.setattr(profiles, "_PROFILES", dict(profiles._PROFILES))
