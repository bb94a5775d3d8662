from __future__ import annotations

from enum import Enum


class RuleKind(str, Enum):
    """Rule kinds shipped with the standard rule library."""

    # Presence
    NOT_NULL = "NotNull"
    NOT_EMPTY = "NotEmpty"
    REQUIRED = "Required"

    # Length
    MIN_LENGTH = "MinLength"
    MAX_LENGTH = "MaxLength"
    LENGTH = "Length"

    # Comparison
    NOT_EQUAL_TO = "NotEqualTo"
    GREATER_THAN = "GreaterThan"
    GREATER_OR_EQUAL = "GreaterOrEqual"
    LESS_THAN = "LessThan"
    LESS_OR_EQUAL = "LessOrEqual"

    # Ranges
    EXCLUSIVE_BETWEEN = "ExclusiveBetween"
    BETWEEN = "Between"


def kind_from_call(name: str) -> str:
    """
    Normalise a fluent method name into a registry identifier.

    ``max_length`` → ``MaxLength``, ``not_equal_to`` → ``NotEqualTo``.
    Names that are already PascalCase pass through unchanged.
    """
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)
