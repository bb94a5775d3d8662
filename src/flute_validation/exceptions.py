"""
Validation exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``FluteValidationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class FluteValidationError(Exception):
    """Base exception for all validator errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class UnknownRuleKindError(FluteValidationError):
    """
    A fluent call does not map to any registered rule kind.

    Provides fuzzy-matched suggestions for likely intended kinds.
    """

    def __init__(self, kind: str, valid_kinds: list[str]) -> None:
        self.kind = kind
        self.valid_kinds = valid_kinds
        self.suggestions = get_close_matches(kind, valid_kinds, n=3, cutoff=0.6)

        message = f"Unknown rule kind: '{kind}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        if valid_kinds:
            message += f" Registered kinds: {', '.join(sorted(valid_kinds)[:10])}"
            if len(valid_kinds) > 10:
                message += ", ..."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_RULE_KIND",
            "kind": self.kind,
            "suggestions": self.suggestions,
            "valid_kinds": sorted(self.valid_kinds),
        }


class NoActivePropertyError(FluteValidationError):
    """
    A builder call needs a target that does not exist yet.

    Raised when ``and_for`` or a rule invocation comes before any
    ``rule_for``, or when ``when`` / ``with_message`` come before any rule.
    """

    def __init__(self, operation: str, reason: str | None = None) -> None:
        self.operation = operation
        self.reason = reason or "call rule_for() first"
        super().__init__(f"Cannot call {operation}(): {self.reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "NO_ACTIVE_PROPERTY",
            "operation": self.operation,
            "message": str(self),
        }


class MissingArgumentError(FluteValidationError):
    """A rule read more positional arguments than the call site supplied."""

    def __init__(self, rule: str, argument: str, position: int, supplied: int) -> None:
        self.rule = rule
        self.argument = argument
        self.position = position
        self.supplied = supplied
        super().__init__(
            f"Rule '{rule}' expects argument '{argument}' at position {position}, "
            f"but only {supplied} argument(s) were supplied"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MISSING_ARGUMENT",
            "rule": self.rule,
            "argument": self.argument,
            "position": self.position,
            "supplied": self.supplied,
        }


class PropertyResolutionError(FluteValidationError):
    """
    A bound property name cannot be resolved on the target object.

    Uses fuzzy matching to suggest similar names available on the target.

    Example error message::

        Cannot resolve property 'nmae' on 'Person'.
        Did you mean one of these?
          • name
    """

    def __init__(
        self,
        property_name: str,
        target_type: str,
        available: list[str] | None = None,
        cutoff: float = 0.6,
    ) -> None:
        self.property_name = property_name
        self.target_type = target_type
        self.available = available or []
        self.suggestions = get_close_matches(
            property_name, self.available, n=5, cutoff=cutoff
        )
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [
            f"Cannot resolve property '{self.property_name}' on '{self.target_type}'."
        ]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "PROPERTY_RESOLUTION_FAILURE",
            "property": self.property_name,
            "target": self.target_type,
            "suggestions": self.suggestions,
        }
