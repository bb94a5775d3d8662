"""Length rules: min_length, max_length, length.

A value without a length (``None``, numbers) fails every length rule.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from ..base import Rule
from ..kinds import RuleKind


class MinLengthRule(Rule):
    kind = RuleKind.MIN_LENGTH
    params = ("min_length",)

    def condition(self, value: Any) -> bool:
        if not isinstance(value, Sized):
            return False
        return bool(len(value) >= self.arg("min_length"))


class MaxLengthRule(Rule):
    kind = RuleKind.MAX_LENGTH
    params = ("max_length",)

    def condition(self, value: Any) -> bool:
        if not isinstance(value, Sized):
            return False
        return bool(len(value) <= self.arg("max_length"))


class LengthRule(Rule):
    """Inclusive length range: ``length(10, 20)``."""

    kind = RuleKind.LENGTH
    params = ("min_length", "max_length")

    def extend(self) -> list[Rule]:
        return [
            MinLengthRule(self.arg("min_length")),
            MaxLengthRule(self.arg("max_length")),
        ]
