"""Shared fixtures for validator tests."""

from __future__ import annotations

import pytest

from flute_validation import Validator
from flute_validation.rules import build_default_registry


@pytest.fixture
def registry():
    """Default rule registry with the standard library."""
    return build_default_registry()


@pytest.fixture
def validator(registry) -> Validator:
    return Validator(registry=registry)
