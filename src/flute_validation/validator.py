"""
Fluent validator builder.

Example::

    validator = (
        Validator()
        .rule_for("name").required().max_length(50)
        .rule_for("age").between(21, 65).when(lambda p: p.employed)
        .rule_for("first_name").and_for("last_name").not_empty()
        .with_message("Names cannot be blank")
    )

    result = validator.validate(person)
    # → ValidationResult(errors={"age": "Field is invalid"})

Rule methods (``required``, ``between`` …) are not defined on the class:
any public attribute that is not a builder method is normalised to a rule
kind (``max_length`` → ``MaxLength``) and resolved through the validator's
:class:`~flute_validation.registry.RuleRegistry`. Subclasses can declare
their rules in ``__init__`` and be reused across many objects.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .evaluator import RuleBinding, RuleEvaluator
from .exceptions import NoActivePropertyError
from .kinds import kind_from_call
from .rules import build_default_registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from .accessors import PropertyAccessor
    from .base import Rule
    from .config import ValidatorConfig
    from .registry import RuleRegistry
    from .result import ValidationResult

logger = logging.getLogger("flute_validation.validator")


class Validator:
    """
    Fluent accumulator of rules bound to property names.

    Every method except :meth:`validate` only records state and returns
    ``self``; nothing is evaluated until :meth:`validate` is called.

    Any other public attribute is a rule invocation, so a misspelt builder
    method is one too: ``validator.valdate(person)`` looks up the rule kind
    ``Valdate`` and raises :class:`UnknownRuleKindError` once a property is
    targeted (or :class:`NoActivePropertyError` before :meth:`rule_for`).
    """

    def __init__(
        self,
        *,
        registry: RuleRegistry | None = None,
        accessor: PropertyAccessor | None = None,
        config: ValidatorConfig | None = None,
    ) -> None:
        self._registry = registry if registry is not None else build_default_registry()
        self._evaluator = RuleEvaluator(accessor=accessor, config=config)
        self._bindings: list[RuleBinding] = []
        self._next_props: list[str] | None = None

    # -- property targeting --------------------------------------------------

    def rule_for(self, prop: str) -> Validator:
        """Make *prop* the only target of the rules declared next."""
        self._next_props = [prop]
        return self

    def and_for(self, prop: str) -> Validator:
        """Add *prop* to the targets of the rules declared next."""
        if self._next_props is None:
            raise NoActivePropertyError("and_for")
        self._next_props.append(prop)
        return self

    # -- rule declaration ----------------------------------------------------

    def rule(self, kind: str, *args: Any) -> Validator:
        """Resolve a rule of *kind* from *args* and bind it to the current targets."""
        if self._next_props is None:
            raise NoActivePropertyError(kind_from_call(kind))
        return self.add(self._registry.resolve(kind_from_call(kind), args))

    def add(self, rule: Rule) -> Validator:
        """Bind an already-constructed rule to the current targets."""
        if self._next_props is None:
            raise NoActivePropertyError("add")
        binding = RuleBinding(rule=rule, properties=tuple(self._next_props))
        self._bindings.append(binding)
        logger.debug("Bound %s to %s", rule.rule_name, ", ".join(binding.properties))
        return self

    def when(self, condition: Callable[[Any], bool]) -> Validator:
        """Only run the last declared rule when *condition(obj)* is true."""
        last = self._last_binding("when")
        self._bindings[-1] = last.guarded_by(condition)
        return self

    def with_message(self, message: str) -> Validator:
        """Report *message* when the last declared rule fails."""
        last = self._last_binding("with_message")
        self._bindings[-1] = last.with_message(message)
        return self

    def reset(self) -> Validator:
        """Drop every declared rule and the current targets."""
        self._bindings.clear()
        self._next_props = None
        return self

    # -- evaluation ----------------------------------------------------------

    def validate(self, obj: Any) -> ValidationResult:
        """Evaluate every declared rule against *obj*."""
        return self._evaluator.evaluate(self._bindings, obj)

    # -- introspection -------------------------------------------------------

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(binding.rule for binding in self._bindings)

    @property
    def bindings(self) -> dict[str, RuleBinding]:
        """Bindings keyed by rule id, in declaration order."""
        return {binding.rule.id: binding for binding in self._bindings}

    # -- internals -----------------------------------------------------------

    def _last_binding(self, operation: str) -> RuleBinding:
        if not self._bindings:
            raise NoActivePropertyError(operation, "no rule has been declared yet")
        return self._bindings[-1]

    def __getattr__(self, name: str) -> Callable[..., Validator]:
        # Only reached for names the class does not define
        if name.startswith("_"):
            raise AttributeError(name)

        def invoke(*args: Any) -> Validator:
            return self.rule(name, *args)

        invoke.__name__ = name
        return invoke
