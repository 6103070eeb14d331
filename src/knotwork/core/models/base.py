"""
Core domain models base module.

This module provides common helpers used across the node, edge and sub graph
models: name validation and the copying of user data between graphs.
"""

from copy import deepcopy
from typing import Any

from ...utils.validation import NonEmptyRule, TypeRule, check_rules
from ..exceptions import ValidationError
from ..types import UserData


def validate_name(value: Any, kind: str = "name") -> str:
    """
    Validate that a value is usable as a node or sub graph name.

    Args:
        value: Candidate name
        kind: Label used in the error message

    Returns:
        str: The validated name

    Raises:
        ValidationError: If the value is not a non-empty string
    """
    result = check_rules(
        value,
        [
            TypeRule(str, f"{kind} must be a string, got {type(value).__name__}"),
            NonEmptyRule(f"{kind} must be a non-empty string"),
        ],
    )
    if not result.is_valid:
        raise ValidationError(result.errors[0])
    return value


def copy_user_data(source: UserData, target: UserData, deep: bool = False) -> None:
    """
    Copy user data entries into another mapping.

    Existing keys in ``target`` are overwritten. With ``deep=False`` the values
    are copied by reference, so a mutable value is shared by both mappings.

    Args:
        source: Mapping to copy from
        target: Mapping to copy into
        deep: Whether to deep copy each value
    """
    for key, value in source.items():
        target[key] = deepcopy(value) if deep else value
