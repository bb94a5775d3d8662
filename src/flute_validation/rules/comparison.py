"""Comparison rules: not_equal_to, greater/less than, between ranges."""

from __future__ import annotations

from typing import Any

from ..base import Rule
from ..kinds import RuleKind


class NotEqualToRule(Rule):
    """Fails when the value equals any of the call-site arguments."""

    kind = RuleKind.NOT_EQUAL_TO

    def condition(self, value: Any) -> bool:
        return value not in self.args


class GreaterThanRule(Rule):
    kind = RuleKind.GREATER_THAN
    params = ("value",)

    def condition(self, value: Any) -> bool:
        if value is None:
            return False
        return bool(value > self.arg("value"))


class GreaterOrEqualRule(Rule):
    kind = RuleKind.GREATER_OR_EQUAL
    params = ("min",)

    def condition(self, value: Any) -> bool:
        if value is None:
            return False
        return bool(value >= self.arg("min"))


class LessThanRule(Rule):
    kind = RuleKind.LESS_THAN
    params = ("value",)

    def condition(self, value: Any) -> bool:
        if value is None:
            return False
        return bool(value < self.arg("value"))


class LessOrEqualRule(Rule):
    kind = RuleKind.LESS_OR_EQUAL
    params = ("max",)

    def condition(self, value: Any) -> bool:
        if value is None:
            return False
        return bool(value <= self.arg("max"))


class ExclusiveBetweenRule(Rule):
    kind = RuleKind.EXCLUSIVE_BETWEEN
    params = ("min", "max")

    def extend(self) -> list[Rule]:
        return [GreaterThanRule(self.arg("min")), LessThanRule(self.arg("max"))]


class BetweenRule(Rule):
    """Inclusive at both bounds."""

    kind = RuleKind.BETWEEN
    params = ("min", "max")

    def extend(self) -> list[Rule]:
        return [GreaterOrEqualRule(self.arg("min")), LessOrEqualRule(self.arg("max"))]
