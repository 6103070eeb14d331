"""
Base Validation Components for knotwork

This module provides the foundational validation components used by the models
and the configuration layer. It includes the ValidationResult class for reporting
validation outcomes and a small hierarchy of ValidationRule classes for
implementing different types of validation logic.

The module supports:
- Validation results with errors and context
- Non-empty value validation
- Type checking
- Membership in a fixed set of choices
"""

from dataclasses import dataclass, field
from typing import Any, Collection, Dict, List, Optional, Sequence, Tuple, Type, Union


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None


class ValidationRule:
    """
    Base class for all validation rules.

    Subclasses override validate() to implement specific validation logic.

    Attributes:
        error_message (str): Message to report when validation fails
    """

    def __init__(self, error_message: str):
        self.error_message = error_message

    def validate(self, value: Any) -> bool:
        """
        Validate a value against the rule.

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement validate()")


class NonEmptyRule(ValidationRule):
    """
    Rule for values that must not be None or empty.

    Whitespace is content: a string made only of spaces passes.
    """

    def validate(self, value: Any) -> bool:
        if value is None:
            return False
        try:
            return len(value) > 0
        except TypeError:
            return True


class TypeRule(ValidationRule):
    """
    Rule for type checking values.

    Attributes:
        expected_type: Single type or tuple of types to check against
    """

    def __init__(self, expected_type: Union[Type, Tuple[Type, ...]], error_message: str):
        super().__init__(error_message)
        self.expected_type = expected_type

    def validate(self, value: Any) -> bool:
        return isinstance(value, self.expected_type)


class ChoiceRule(ValidationRule):
    """
    Rule for values restricted to a fixed set of choices.

    Attributes:
        choices: Allowed values
    """

    def __init__(self, choices: Collection[Any], error_message: str):
        super().__init__(error_message)
        self.choices = choices

    def validate(self, value: Any) -> bool:
        return value in self.choices


def check_rules(value: Any, rules: Sequence[ValidationRule]) -> ValidationResult:
    """
    Run a value through a sequence of rules.

    Evaluation stops at the first failing rule, so later rules may assume
    that earlier ones (e.g. a TypeRule) have passed.

    Args:
        value: Value to validate
        rules: Rules to apply in order

    Returns:
        ValidationResult: Outcome with the failing rule's message, if any
    """
    for rule in rules:
        if not rule.validate(value):
            return ValidationResult(
                is_valid=False,
                errors=[rule.error_message],
                context={"value": value},
            )
    return ValidationResult(is_valid=True)
