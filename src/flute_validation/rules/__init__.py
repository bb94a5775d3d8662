"""
Standard rule library.

Provides the built-in :class:`~flute_validation.base.Rule` subclasses and a
factory function to create registries.

Usage::

    from flute_validation.rules import build_default_registry

    registry = build_default_registry()
    rule = registry.resolve(RuleKind.BETWEEN, (21, 65))
"""

from __future__ import annotations

from ..registry import RuleRegistry
from .comparison import (
    BetweenRule,
    ExclusiveBetweenRule,
    GreaterOrEqualRule,
    GreaterThanRule,
    LessOrEqualRule,
    LessThanRule,
    NotEqualToRule,
)
from .length import LengthRule, MaxLengthRule, MinLengthRule
from .presence import NotEmptyRule, NotNullRule, RequiredRule


def build_default_registry() -> RuleRegistry:
    """
    Create a registry with all built-in rules.

    Every call returns a fresh instance, so callers can register their own
    rules without affecting other validators.
    """
    registry = RuleRegistry()
    registry.register_all(
        # Presence
        NotNullRule,
        NotEmptyRule,
        RequiredRule,
        # Length
        MinLengthRule,
        MaxLengthRule,
        LengthRule,
        # Comparison
        NotEqualToRule,
        GreaterThanRule,
        GreaterOrEqualRule,
        LessThanRule,
        LessOrEqualRule,
        # Ranges
        ExclusiveBetweenRule,
        BetweenRule,
    )
    return registry


__all__ = [
    "BetweenRule",
    "ExclusiveBetweenRule",
    "GreaterOrEqualRule",
    "GreaterThanRule",
    "LengthRule",
    "LessOrEqualRule",
    "LessThanRule",
    "MaxLengthRule",
    "MinLengthRule",
    "NotEmptyRule",
    "NotEqualToRule",
    "NotNullRule",
    "RequiredRule",
    "build_default_registry",
]
