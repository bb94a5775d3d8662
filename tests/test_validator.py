"""Tests for the fluent Validator builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from flute_validation import (
    MissingArgumentError,
    NoActivePropertyError,
    Rule,
    UnknownRuleKindError,
    ValidationResult,
    Validator,
)
from flute_validation.rules import NotNullRule, RequiredRule


@dataclass
class Target:
    name: Any = None
    first: Any = None
    last: Any = None
    age: Any = None


class AlwaysValidRule(Rule):
    pass


class TempRule(Rule):
    kind = "Temp"

    def extend(self) -> list[Rule]:
        return [RequiredRule()]


# -- Scenarios ----------------------------------------------------------------


def test_required(validator: Validator):
    validator.rule_for("name").required()

    assert not validator.validate(Target(name=None)).valid()
    assert not validator.validate(Target(name="")).valid()
    assert validator.validate(Target(name="Smith")).valid()


@pytest.mark.parametrize(
    ("age", "valid"), [(20, False), (21, True), (65, True), (66, False)]
)
def test_between(validator: Validator, age: int, valid: bool):
    validator.rule_for("age").between(21, 65)
    assert validator.validate(Target(age=age)).valid() is valid


def test_max_length(validator: Validator):
    validator.rule_for("name").max_length(6)

    assert validator.validate(Target(name="Valid")).valid()
    assert not validator.validate(Target(name="Too long")).valid()


def test_and_for_applies_rule_independently(validator: Validator):
    validator.rule_for("first").and_for("last").not_empty()

    result = validator.validate(Target(first="", last="X"))

    assert result.errors == {"first": "Field is invalid"}
    assert "last" not in result.errors

    assert validator.validate(Target(first="Valid name", last="X")).valid()


def test_not_equal_to(validator: Validator):
    validator.rule_for("name").not_equal_to("Foo", "Bar")

    assert not validator.validate(Target(name="Bar")).valid()
    assert validator.validate(Target(name="Baz")).valid()


# -- Targets ------------------------------------------------------------------


def test_rule_for_replaces_targets(validator: Validator):
    validator.rule_for("first").and_for("last").rule_for("name").required()

    binding = next(iter(validator.bindings.values()))
    assert binding.properties == ("name",)


def test_binding_is_a_snapshot_of_targets(validator: Validator):
    validator.rule_for("first").required().and_for("last").not_null()

    first_binding, second_binding = validator.bindings.values()
    assert first_binding.properties == ("first",)
    assert second_binding.properties == ("first", "last")


def test_full_aggregation_reports_every_property(validator: Validator):
    validator.rule_for("name").required().rule_for("age").greater_than(0)

    result = validator.validate(Target(name="", age=-1))

    assert result.errors == {"name": "Field is invalid", "age": "Field is invalid"}


def test_last_error_for_property_wins(validator: Validator):
    (
        validator.rule_for("name")
        .not_null()
        .with_message("missing")
        .min_length(3)
        .with_message("too short")
    )
    # Both rules fail for None; the later message replaces the earlier one
    assert validator.validate(Target(name=None)).errors == {"name": "too short"}
    assert validator.validate(Target(name="ab")).errors == {"name": "too short"}


# -- Conditions and messages ----------------------------------------------------


def test_when_false_never_errors(validator: Validator):
    validator.rule_for("name").required().when(lambda o: False)

    assert validator.validate(Target(name=None)).valid()


def test_when_receives_whole_object(validator: Validator):
    validator.rule_for("name").required().when(lambda o: o.age >= 18)

    assert validator.validate(Target(name=None, age=10)).valid()
    assert not validator.validate(Target(name=None, age=30)).valid()


def test_when_applies_to_last_rule_only(validator: Validator):
    validator.rule_for("name").not_null().max_length(2).when(lambda o: False)

    assert validator.validate(Target(name="long name")).valid()
    assert not validator.validate(Target(name=None)).valid()


def test_skipped_rule_does_not_read_properties(validator: Validator):
    validator.rule_for("missing").required().when(lambda o: False)

    assert validator.validate(Target()).valid()


def test_with_message(validator: Validator):
    validator.rule_for("name").required().with_message("Name is required")

    result = validator.validate(Target(name=""))

    assert result.errors == {"name": "Name is required"}


def test_message_and_condition_on_same_rule(validator: Validator):
    (
        validator.rule_for("age")
        .greater_or_equal(18)
        .when(lambda o: o.name == "adult")
        .with_message("Too young")
    )

    assert validator.validate(Target(name="child", age=5)).valid()
    assert validator.validate(Target(name="adult", age=5)).errors == {
        "age": "Too young"
    }


# -- Custom rules ---------------------------------------------------------------


def test_parameterless_custom_rule(validator: Validator):
    validator.registry.register_rule(AlwaysValidRule)
    validator.rule_for("name").always_valid()

    assert validator.validate(Target(name="Test Object")).valid()


def test_custom_rule_without_kind_is_called_by_snake_case_name(
    validator: Validator,
):
    class BlankRule(Rule):
        def condition(self, value: Any) -> bool:
            return value == ""

    validator.registry.register_rule(BlankRule)
    validator.rule_for("name").blank()

    assert validator.validate(Target(name="")).valid()
    assert validator.validate(Target(name="x")).errors == {"name": "Field is invalid"}


def test_multi_level_custom_rule(validator: Validator):
    validator.registry.register_rule(TempRule)
    validator.rule_for("age").temp()

    assert not validator.validate(Target(age=None)).valid()


def test_add_prebuilt_rule(validator: Validator):
    validator.rule_for("name").add(NotNullRule())

    assert not validator.validate(Target(name=None)).valid()


def test_explicit_rule_method(validator: Validator):
    validator.rule_for("name").rule("max_length", 3)

    assert not validator.validate(Target(name="abcd")).valid()


# -- Reuse ----------------------------------------------------------------------


class PersonValidator(Validator):
    def __init__(self) -> None:
        super().__init__()
        self.rule_for("name").required().with_message("Name is required")
        self.rule_for("age").between(21, 65)


def test_subclassed_validator_is_reusable():
    validator = PersonValidator()

    assert validator.validate(Target(name="Smith", age=30)).valid()
    assert validator.validate(Target(name="", age=70)).errors == {
        "name": "Name is required",
        "age": "Field is invalid",
    }


def test_validate_is_idempotent(validator: Validator):
    validator.rule_for("name").required().rule_for("age").between(1, 10)
    target = Target(name="", age=50)

    first = validator.validate(target)
    second = validator.validate(target)

    assert first == second
    assert first is not second
    assert isinstance(first, ValidationResult)


def test_builder_does_not_touch_object(validator: Validator):
    target = Target(name="x")
    validator.rule_for("name").required()
    assert target == Target(name="x")


def test_reset(validator: Validator):
    validator.rule_for("name").required()
    validator.reset()

    assert validator.rules == ()
    assert validator.validate(Target()).valid()
    with pytest.raises(NoActivePropertyError):
        validator.required()


def test_no_rules_is_valid(validator: Validator):
    assert validator.validate(Target()).valid()


# -- Errors -----------------------------------------------------------------------


def test_unknown_rule_kind(validator: Validator):
    with pytest.raises(UnknownRuleKindError) as exc_info:
        validator.rule_for("name").requird()
    assert "Required" in exc_info.value.suggestions


def test_and_for_before_rule_for(validator: Validator):
    with pytest.raises(NoActivePropertyError, match="and_for"):
        validator.and_for("name")


def test_rule_before_rule_for(validator: Validator):
    with pytest.raises(NoActivePropertyError):
        validator.required()


@pytest.mark.parametrize("method", ["when", "with_message"])
def test_modifier_before_any_rule(validator: Validator, method: str):
    validator.rule_for("name")
    with pytest.raises(NoActivePropertyError, match=method):
        getattr(validator, method)("x")


def test_private_names_are_not_rules(validator: Validator):
    with pytest.raises(AttributeError):
        validator._something  # noqa: B018


def test_missing_rule_argument_raises_at_call_site(validator: Validator):
    with pytest.raises(MissingArgumentError) as exc_info:
        validator.rule_for("name").max_length()
    assert exc_info.value.argument == "max_length"
    assert validator.rules == ()


def test_misspelt_builder_method_is_a_rule_lookup(validator: Validator):
    validator.rule_for("name").required()
    with pytest.raises(UnknownRuleKindError) as exc_info:
        validator.valdate(Target(name="Smith"))
    assert exc_info.value.kind == "Valdate"


def test_length_rule_on_value_without_length_records_error(validator: Validator):
    validator.rule_for("name").max_length(3).rule_for("age").greater_than(18)

    result = validator.validate(Target(name=12345, age=10))

    assert result.errors == {
        "name": "Field is invalid",
        "age": "Field is invalid",
    }
