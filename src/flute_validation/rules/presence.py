"""Presence rules: not_null, not_empty, required."""

from __future__ import annotations

from typing import Any

from ..base import Rule
from ..kinds import RuleKind


class NotNullRule(Rule):
    kind = RuleKind.NOT_NULL

    def condition(self, value: Any) -> bool:
        return value is not None


class NotEmptyRule(Rule):
    """Rejects the empty string only; ``0``, ``False`` and ``[]`` pass."""

    kind = RuleKind.NOT_EMPTY

    def condition(self, value: Any) -> bool:
        return not (isinstance(value, str) and value == "")


class RequiredRule(Rule):
    kind = RuleKind.REQUIRED

    def extend(self) -> list[Rule]:
        return [NotNullRule(), NotEmptyRule()]
