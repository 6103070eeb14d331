"""
Validation package for knotwork.

This package provides validation utilities and rules for ensuring data integrity
and type safety throughout the library.
"""

from .base import (
    ChoiceRule,
    NonEmptyRule,
    TypeRule,
    ValidationResult,
    ValidationRule,
    check_rules,
)

__all__ = [
    "ValidationResult",
    "ValidationRule",
    "NonEmptyRule",
    "TypeRule",
    "ChoiceRule",
    "check_rules",
]
