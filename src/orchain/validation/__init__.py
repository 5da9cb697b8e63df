"""Validator lookup and adapter implementations."""

from orchain.validation.adapters import PredicateValidator, ResultValidatorAdapter
from orchain.validation.factory import ValidatorFactory, ValidatorPluginManager

__all__ = [
    "PredicateValidator",
    "ResultValidatorAdapter",
    "ValidatorFactory",
    "ValidatorPluginManager",
]
