"""
Rule evaluation.

Walks rule bindings in declaration order and aggregates every failure into
a :class:`~flute_validation.result.ValidationResult`. Evaluation never stops
at the first failure; ``result.valid()`` gives the overall boolean.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from .accessors import AttributeAccessor
from .config import ValidatorConfig
from .exceptions import PropertyResolutionError
from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .accessors import PropertyAccessor
    from .base import Rule

logger = logging.getLogger("flute_validation.evaluator")


@dataclass(frozen=True)
class RuleBinding:
    """
    A rule together with everything the builder recorded for it.

    Attributes:
        rule: The rule instance.
        properties: Property names, in declaration order.
        condition: Optional guard evaluated against the whole object.
        message: Optional message reported when the rule fails.
    """

    rule: Rule
    properties: tuple[str, ...]
    condition: Callable[[Any], bool] | None = None
    message: str | None = None

    def guarded_by(self, condition: Callable[[Any], bool]) -> RuleBinding:
        return replace(self, condition=condition)

    def with_message(self, message: str) -> RuleBinding:
        return replace(self, message=message)

    def applies_to(self, obj: Any) -> bool:
        return self.condition is None or bool(self.condition(obj))


class RuleEvaluator:
    """Evaluates rule bindings against a target object."""

    def __init__(
        self,
        accessor: PropertyAccessor | None = None,
        config: ValidatorConfig | None = None,
    ) -> None:
        self._accessor = accessor if accessor is not None else AttributeAccessor()
        self._config = config if config is not None else ValidatorConfig()

    @property
    def accessor(self) -> PropertyAccessor:
        return self._accessor

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    def evaluate(self, bindings: Iterable[RuleBinding], obj: Any) -> ValidationResult:
        """
        Run every binding against *obj* and collect failures.

        Raises:
            PropertyResolutionError: If a bound property cannot be resolved
                and ``record_resolution_failures`` is off.
        """
        result = ValidationResult()
        for binding in bindings:
            if not binding.applies_to(obj):
                logger.debug("Skipping %s: condition not met", binding.rule.rule_name)
                continue

            for prop in binding.properties:
                try:
                    value = self._accessor(obj, prop)
                except PropertyResolutionError:
                    if not self._config.record_resolution_failures:
                        raise
                    logger.warning(
                        "Could not resolve %r on %s; recording as error",
                        prop,
                        type(obj).__name__,
                    )
                    result.add_error(prop, self._config.resolution_failure_message)
                    continue

                if not binding.rule.validate(value):
                    logger.debug("%s failed for %r", binding.rule.rule_name, prop)
                    message = binding.message
                    if message is None:
                        message = self._config.default_message
                    result.add_error(prop, message)
        return result
