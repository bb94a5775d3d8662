"""Validator configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

DEFAULT_MESSAGE = "Field is invalid"


class ValidatorConfig(BaseModel):
    """Immutable settings shared by a validator and its evaluator.

    Attributes:
        default_message: Reported for a failing rule without ``with_message``.
        record_resolution_failures: When ``True``, a property the accessor
            cannot resolve is reported as an error on that property instead
            of aborting ``validate()``.
        resolution_failure_message: Message used for such errors.
    """

    model_config = ConfigDict(frozen=True)

    default_message: str = DEFAULT_MESSAGE
    record_resolution_failures: bool = False
    resolution_failure_message: str = "Field could not be resolved"
