"""Input validation utilities for Stellar Legacy entities and settings."""

from typing import Any, List, Sequence, Tuple, Type, Union

from ..core.enums import CrewRole, ResourceType
from ..core.exceptions import (
    InvalidInputError, RangeValidationError, TypeValidationError, ConstraintViolationError
)
from ..core.constants import (
    MAX_SKILL_LEVEL, MIN_SKILL_LEVEL, MAX_MORALE, MIN_MORALE
)


class Validator:
    """Base validator class with common validation methods."""

    @staticmethod
    def validate_type(value: Any, expected_type: Union[Type, Tuple[Type, ...]],
                      field_name: str = "value") -> None:
        """Validate that value is of expected type."""
        if not isinstance(value, expected_type):
            expected_name = (
                " or ".join(t.__name__ for t in expected_type)
                if isinstance(expected_type, tuple) else expected_type.__name__
            )
            raise TypeValidationError(
                f"{field_name} must be of type {expected_name}, got {type(value).__name__}",
                error_code="TYPE_MISMATCH",
                context={"field": field_name, "expected": expected_name, "actual": type(value).__name__}
            )

    @staticmethod
    def validate_number(value: Any, field_name: str = "value") -> None:
        """Validate that value is an int or float, rejecting bools."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeValidationError(
                f"{field_name} must be a number, got {type(value).__name__}",
                error_code="TYPE_MISMATCH",
                context={"field": field_name, "actual": type(value).__name__}
            )

    @staticmethod
    def validate_integer(value: Any, field_name: str = "value") -> None:
        """Validate that value is an int, rejecting bools."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeValidationError(
                f"{field_name} must be an integer, got {type(value).__name__}",
                error_code="TYPE_MISMATCH",
                context={"field": field_name, "actual": type(value).__name__}
            )

    @staticmethod
    def validate_range(value: Union[int, float], min_val: Union[int, float],
                       max_val: Union[int, float], field_name: str = "value") -> None:
        """Validate that value is within specified range."""
        if not min_val <= value <= max_val:
            raise RangeValidationError(
                f"{field_name} must be between {min_val} and {max_val}, got {value}",
                error_code="OUT_OF_RANGE",
                context={"field": field_name, "value": value, "min": min_val, "max": max_val}
            )

    @staticmethod
    def validate_non_negative(value: Union[int, float], field_name: str = "value") -> None:
        """Validate that value is non-negative."""
        if value < 0:
            raise RangeValidationError(
                f"{field_name} must be non-negative, got {value}",
                error_code="NEGATIVE",
                context={"field": field_name, "value": value}
            )

    @staticmethod
    def validate_positive(value: Union[int, float], field_name: str = "value") -> None:
        """Validate that value is positive."""
        if value <= 0:
            raise RangeValidationError(
                f"{field_name} must be positive, got {value}",
                error_code="NOT_POSITIVE",
                context={"field": field_name, "value": value}
            )

    @staticmethod
    def validate_enum(value: Any, enum_class: Type, field_name: str = "value") -> None:
        """Validate that value is a valid enum member."""
        if not isinstance(value, enum_class):
            valid_values = [e.value for e in enum_class]
            raise InvalidInputError(
                f"{field_name} must be one of {valid_values}, got {value}",
                error_code="INVALID_ENUM",
                context={"field": field_name, "value": value, "valid_values": valid_values}
            )

    @staticmethod
    def validate_non_empty_string(value: Any, field_name: str = "value") -> None:
        """Validate that value is a string with visible content."""
        Validator.validate_type(value, str, field_name)
        if not value.strip():
            raise InvalidInputError(
                f"{field_name} must not be empty",
                error_code="EMPTY_STRING",
                context={"field": field_name}
            )

    @staticmethod
    def validate_interval(interval: Sequence[int], field_name: str = "range") -> None:
        """Validate an inclusive (low, high) pair."""
        if len(interval) != 2:
            raise InvalidInputError(
                f"{field_name} must be a (min, max) pair, got {interval}",
                error_code="INVALID_INTERVAL",
                context={"field": field_name, "value": interval}
            )
        low, high = interval
        if low > high:
            raise RangeValidationError(
                f"{field_name} minimum {low} exceeds maximum {high}",
                error_code="INVERTED_INTERVAL",
                context={"field": field_name, "min": low, "max": high}
            )

    @staticmethod
    def validate_unique_list(value: List, field_name: str = "list") -> None:
        """Validate that list contains unique items."""
        if len(value) != len(set(value)):
            raise ConstraintViolationError(
                f"{field_name} must contain unique items",
                error_code="DUPLICATE_ITEMS",
                context={"field": field_name, "length": len(value), "unique_count": len(set(value))}
            )


class GameValidator(Validator):
    """Validator for game-specific inputs."""

    @staticmethod
    def validate_skill_level(level: int, field_name: str = "skill") -> None:
        """Validate a crew skill level."""
        GameValidator.validate_integer(level, field_name)
        GameValidator.validate_range(level, MIN_SKILL_LEVEL, MAX_SKILL_LEVEL, field_name)

    @staticmethod
    def validate_morale(morale: int) -> None:
        """Validate crew morale."""
        GameValidator.validate_integer(morale, "morale")
        GameValidator.validate_range(morale, MIN_MORALE, MAX_MORALE, "morale")

    @staticmethod
    def validate_age(age: int) -> None:
        """Validate crew member age."""
        GameValidator.validate_integer(age, "age")
        GameValidator.validate_positive(age, "age")

    @staticmethod
    def validate_role(role: Any) -> None:
        """Validate crew role."""
        GameValidator.validate_enum(role, CrewRole, "role")

    @staticmethod
    def validate_resource_amount(amount: Any, resource: ResourceType) -> None:
        """Validate a stored resource quantity."""
        GameValidator.validate_number(amount, resource.value)
        GameValidator.validate_non_negative(amount, resource.value)

    @staticmethod
    def validate_stat(value: Any, field_name: str) -> None:
        """Validate a ship stat."""
        GameValidator.validate_integer(value, field_name)
        GameValidator.validate_non_negative(value, field_name)
