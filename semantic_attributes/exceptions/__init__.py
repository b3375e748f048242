"""Custom exceptions for semantic-attributes."""

from .common_exceptions import (
    AppException,
    ValidationRuleException,
    EnvInvalidException,
)
from .predicate_exceptions import (
    PredicateException,
    PredicateConfigurationException,
    UnknownOptionException,
    UnimplementedPredicateException,
    UndeterminedRangeException,
)


__all__ = [
    # common
    "AppException",
    "ValidationRuleException",
    "EnvInvalidException",
    # predicate
    "PredicateException",
    "PredicateConfigurationException",
    "UnknownOptionException",
    "UnimplementedPredicateException",
    "UndeterminedRangeException",
]
