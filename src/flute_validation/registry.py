"""
Rule registry.

Maps a rule kind (``"MaxLength"``) to a constructor that builds a
:class:`~flute_validation.base.Rule` from call-site arguments. The
validator resolves every fluent rule invocation through a registry, so
custom rules become part of the fluent surface once registered.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from .exceptions import UnknownRuleKindError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .base import Rule

    RuleFactory = Callable[..., Rule]

logger = logging.getLogger("flute_validation.registry")


def _key(kind: str) -> str:
    # RuleKind members hash by member name, not by value
    return kind.value if isinstance(kind, Enum) else kind


class RuleRegistry:
    """
    Registry of rule constructors keyed by rule kind.

    Usage::

        registry = RuleRegistry()
        registry.register_rule(MaxLengthRule)

        rule = registry.resolve("MaxLength", (10,))
    """

    def __init__(self) -> None:
        self._factories: dict[str, RuleFactory] = {}

    # -- registration --------------------------------------------------------

    def register(self, kind: str, factory: RuleFactory) -> None:
        """Register a constructor under *kind*, replacing any previous one."""
        self._factories[_key(kind)] = factory
        logger.debug("Registered rule kind %s", kind)

    def register_rule(self, rule_cls: type[Rule]) -> None:
        """Register a rule class under :meth:`Rule.kind_name`.

        ``AlwaysValidRule`` without a ``kind`` registers as ``AlwaysValid``,
        which is what ``always_valid()`` resolves to.
        """
        self.register(rule_cls.kind_name(), rule_cls)

    def register_all(self, *rule_classes: type[Rule]) -> None:
        """Register multiple rule classes at once."""
        for rule_cls in rule_classes:
            self.register_rule(rule_cls)

    def unregister(self, kind: str) -> None:
        """Remove a kind from the registry."""
        self._factories.pop(_key(kind), None)

    # -- look-up -------------------------------------------------------------

    def get(self, kind: str) -> RuleFactory | None:
        """Return the registered constructor or ``None``."""
        return self._factories.get(_key(kind))

    def has(self, kind: str) -> bool:
        return _key(kind) in self._factories

    @property
    def supported_kinds(self) -> set[str]:
        return set(self._factories.keys())

    # -- construction --------------------------------------------------------

    def resolve(self, kind: str, args: Sequence[Any] = ()) -> Rule:
        """
        Build a new rule of *kind* from *args*.

        Raises:
            UnknownRuleKindError: If no constructor is registered for *kind*.
        """
        factory = self.get(kind)
        if factory is None:
            raise UnknownRuleKindError(_key(kind), sorted(self._factories))
        return factory(*args)
