"""Validation result: per-property error messages."""

from __future__ import annotations

from dataclasses import dataclass, field


def default_errors_factory() -> dict[str, str]:
    return {}


@dataclass
class ValidationResult:
    """Maps each invalid property to its failure message.

    One message per property; a later error for the same property replaces
    the earlier one. ``errors`` is a plain dict and can be serialised as is.

    Usage::

        result = validator.validate(person)
        if not result.valid():
            return {"errors": result.errors}
    """

    errors: dict[str, str] = field(default_factory=default_errors_factory)

    def valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def is_valid(self) -> bool:
        return self.valid()

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: dict[str, str]) -> ValidationResult:
        return cls(errors=dict(errors))

    # ── Mutation / merging ───────────────────────────────────────

    def add_error(self, prop: str, message: str) -> None:
        """Record *message* for *prop*, replacing any earlier message."""
        self.errors[prop] = message

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result holding both error sets; *other* wins on clashes."""
        return ValidationResult(errors={**self.errors, **other.errors})

    def to_dict(self) -> dict[str, object]:
        return {"valid": self.valid(), "errors": dict(self.errors)}

    def __bool__(self) -> bool:
        return self.valid()
