"""
Rule base class and argument binding.

A rule is a predicate over one value. Composite rules do not subclass the
rules they build on; they return them from :meth:`Rule.extend` and the base
class ANDs every child with the rule's own :meth:`Rule.condition`.

Example::

    class Adult(Rule):
        kind = "Adult"

        def extend(self) -> list[Rule]:
            return [NotNullRule(), GreaterOrEqualRule(18)]
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from .exceptions import MissingArgumentError

if TYPE_CHECKING:
    from collections.abc import Sequence


class ArgumentCursor:
    """
    Binds call-site arguments to names in first-use order.

    The first read of a name consumes the next positional argument; any
    later read of the same name returns the value bound the first time.
    """

    def __init__(self, args: Sequence[Any], owner: str) -> None:
        self._args = tuple(args)
        self._owner = owner
        self._bound: dict[str, Any] = {}

    def take(self, name: str) -> Any:
        """Return the argument bound to *name*, consuming one if unbound."""
        if name in self._bound:
            return self._bound[name]

        position = len(self._bound)
        if position >= len(self._args):
            raise MissingArgumentError(
                rule=self._owner,
                argument=name,
                position=position,
                supplied=len(self._args),
            )
        value = self._args[position]
        self._bound[name] = value
        return value

    @property
    def position(self) -> int:
        """Index of the next unconsumed argument."""
        return len(self._bound)

    @property
    def bound(self) -> dict[str, Any]:
        return dict(self._bound)


class Rule:
    """
    Base class for all validation rules.

    Subclasses override :meth:`condition`, :meth:`extend`, or both.
    Parameters listed in ``params`` are bound from the call-site arguments
    once, at construction, and are then readable through :meth:`arg`.
    Rules taking any number of values read :attr:`args` directly.
    """

    kind: ClassVar[str] = ""
    params: ClassVar[tuple[str, ...]] = ()

    def __init__(self, *args: Any) -> None:
        self._id = str(uuid.uuid4())
        self._args = args
        self._cursor = ArgumentCursor(args, owner=self.rule_name)
        for name in self.params:
            self._cursor.take(name)
        self._children: tuple[Rule, ...] = tuple(self.extend())

    # -- identity ------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @classmethod
    def kind_name(cls) -> str:
        """Registry identifier: ``kind``, or the class name without ``Rule``."""
        kind = cls.kind
        if isinstance(kind, Enum):
            return str(kind.value)
        if kind:
            return kind
        name = cls.__name__
        if name.endswith("Rule") and name != "Rule":
            return name[: -len("Rule")]
        return name

    @property
    def rule_name(self) -> str:
        return self.kind_name()

    @property
    def args(self) -> tuple[Any, ...]:
        return self._args

    @property
    def children(self) -> tuple[Rule, ...]:
        return self._children

    # -- arguments -----------------------------------------------------------

    def arg(self, name: str) -> Any:
        """
        Read the argument bound to *name*.

        Unknown names consume the next positional argument, so a rule may
        refer to "its first argument" repeatedly without tracking indexes.
        """
        return self._cursor.take(name)

    # -- overridable hooks ---------------------------------------------------

    def extend(self) -> list[Rule]:
        """Return the rules this rule delegates to. Called once."""
        return []

    def condition(self, value: Any) -> bool:
        """Leaf predicate for this rule alone."""
        return True

    # -- evaluation ----------------------------------------------------------

    def validate(self, value: Any) -> bool:
        """True when every child rule and this rule's condition hold."""
        return all(child.validate(value) for child in self._children) and bool(
            self.condition(value)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(a) for a in self._args)})"
