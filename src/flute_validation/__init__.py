from .accessors import (
    AttributeAccessor,
    GetterAccessor,
    MappingAccessor,
    PropertyAccessor,
)
from .base import ArgumentCursor, Rule
from .config import DEFAULT_MESSAGE, ValidatorConfig
from .evaluator import RuleBinding, RuleEvaluator
from .exceptions import (
    FluteValidationError,
    MissingArgumentError,
    NoActivePropertyError,
    PropertyResolutionError,
    UnknownRuleKindError,
)
from .kinds import RuleKind, kind_from_call
from .registry import RuleRegistry
from .result import ValidationResult
from .rules import build_default_registry
from .validator import Validator

__all__ = [
    # Builder
    "Validator",
    # Rules
    "Rule",
    "ArgumentCursor",
    "RuleKind",
    "kind_from_call",
    "RuleRegistry",
    "build_default_registry",
    # Evaluation
    "RuleBinding",
    "RuleEvaluator",
    "ValidationResult",
    # Accessors
    "PropertyAccessor",
    "AttributeAccessor",
    "GetterAccessor",
    "MappingAccessor",
    # Configuration
    "ValidatorConfig",
    "DEFAULT_MESSAGE",
    # Exceptions
    "FluteValidationError",
    "UnknownRuleKindError",
    "NoActivePropertyError",
    "MissingArgumentError",
    "PropertyResolutionError",
]
