"""Atomic Validators

Each atomic validator checks one field value against one rule. Name, value
and parameters are fixed at construction; validate() is a pure function of
that state and never raises for bad input.

Validators are composable via operators:
- & (AND): builds a CompositeValidator
- | (OR): builds an OrCompositeValidator
"""
from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, ClassVar, Sequence

from fieldrules.config import get_settings
from fieldrules.errors import ErrorCode, ValidatorConfigurationError, invalid_configuration, invalid_pattern
from fieldrules.logging import config_logger

from .result import ErrorDetail, ValidationResult, ValidatorKind

if TYPE_CHECKING:
    from .composite import CompositeValidator, OrCompositeValidator


class Validator(ABC):
    """Base class for everything with a validate() capability."""
    
    @abstractmethod
    def validate(self) -> ValidationResult:
        """Run the check(s). Returns ValidationResult."""
    
    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Human-readable constraint name for logs."""
    
    def __call__(self) -> ValidationResult: return self.validate()
    
    def __and__(self, other: Validator | None) -> CompositeValidator:
        from .composite import CompositeValidator
        left = self.validators if isinstance(self, CompositeValidator) else (self,)
        right = other.validators if isinstance(other, CompositeValidator) else (other,)
        return CompositeValidator(*left, *right)
    
    def __or__(self, other: Validator | None) -> OrCompositeValidator:
        from .composite import OrCompositeValidator
        left = self.validators if isinstance(self, OrCompositeValidator) else (self,)
        right = other.validators if isinstance(other, OrCompositeValidator) else (other,)
        return OrCompositeValidator(*left, *right)


def reject_configuration(validator: str, parameter: str, value: Any, message: str) -> None:
    """Log and raise ValidatorConfigurationError for malformed construction parameters."""
    config_logger().warning("invalid_validator_config", validator=validator, parameter=parameter, value=value)
    raise ValidatorConfigurationError(
        invalid_configuration(message, validator=validator, parameter=parameter, value=value).unwrap_err())


def check_length_bound(validator: str, parameter: str, bound: int) -> None:
    if isinstance(bound, bool) or not isinstance(bound, int):
        reject_configuration(validator, parameter, bound, f"{parameter} must be an integer, got {type(bound).__name__}")
    if bound < 0:
        reject_configuration(validator, parameter, bound, f"{parameter} cannot be negative: {bound}")


def check_bounds_order(validator: str, lower: Any, upper: Any) -> None:
    """Reject lower > upper when strict bounds are enabled."""
    if lower is None or upper is None or not get_settings().STRICT_BOUNDS: return
    try: inverted = lower > upper
    except TypeError:
        reject_configuration(validator, "min", lower, f"bounds are not comparable: {lower!r}, {upper!r}")
    if inverted:
        reject_configuration(validator, "min", lower, f"min ({lower}) cannot be greater than max ({upper})")


def _length(value: Any) -> int | None:
    if value is None: return 0
    try: return len(value)
    except TypeError: return None


def _not_sized(name: str, kind: ValidatorKind, value: Any) -> ValidationResult:
    return ValidationResult.fail(ErrorDetail(name, kind, f"{name} must be a string",
        ErrorCode.E2004_INVALID_TYPE, expected="string", actual=type(value).__name__))


# ============================================================================
# Presence / Length
# ============================================================================

@dataclass(frozen=True, slots=True)
class NotEmptyValidator(Validator):
    """Fails when the value is None or the empty string."""
    kind: ClassVar[ValidatorKind] = ValidatorKind.NOT_EMPTY
    name: str
    value: Any
    
    @property
    def constraint_name(self) -> str:
        return "not_empty"
    
    def validate(self) -> ValidationResult:
        if self.value is None or self.value == "":
            return ValidationResult.fail(ErrorDetail(self.name, self.kind,
                f"{self.name} must not be empty", ErrorCode.E2001_REQUIRED_FIELD_MISSING,
                expected="non-empty value", actual=self.value))
        return ValidationResult.ok()


@dataclass(frozen=True, slots=True)
class MinLengthValidator(Validator):
    """Fails when len(value) < min_length. None counts as length 0."""
    kind: ClassVar[ValidatorKind] = ValidatorKind.MIN_LENGTH
    name: str
    value: Any
    min_length: int
    
    def __post_init__(self):
        check_length_bound("MinLength", "min_length", self.min_length)
    
    @property
    def constraint_name(self) -> str:
        return f"min_length[{self.min_length}]"
    
    def validate(self) -> ValidationResult:
        if (length := _length(self.value)) is None:
            return _not_sized(self.name, self.kind, self.value)
        if length < self.min_length:
            return ValidationResult.fail(ErrorDetail(self.name, self.kind,
                f"{self.name} must be at least {self.min_length} characters", ErrorCode.E2003_OUT_OF_RANGE,
                expected=f">= {self.min_length} characters", actual=f"{length} characters"))
        return ValidationResult.ok()


@dataclass(frozen=True, slots=True)
class MaxLengthValidator(Validator):
    """Fails when len(value) > max_length."""
    kind: ClassVar[ValidatorKind] = ValidatorKind.MAX_LENGTH
    name: str
    value: Any
    max_length: int
    
    def __post_init__(self):
        check_length_bound("MaxLength", "max_length", self.max_length)
    
    @property
    def constraint_name(self) -> str:
        return f"max_length[{self.max_length}]"
    
    def validate(self) -> ValidationResult:
        if (length := _length(self.value)) is None:
            return _not_sized(self.name, self.kind, self.value)
        if length > self.max_length:
            return ValidationResult.fail(ErrorDetail(self.name, self.kind,
                f"{self.name} must be at most {self.max_length} characters", ErrorCode.E2003_OUT_OF_RANGE,
                expected=f"<= {self.max_length} characters", actual=f"{length} characters"))
        return ValidationResult.ok()


# ============================================================================
# Format
# ============================================================================

@dataclass(frozen=True, slots=True)
class RegExpValidator(Validator):
    """Fails when the value is not a string that fully matches the pattern."""
    kind: ClassVar[ValidatorKind] = ValidatorKind.REG_EXP
    name: str
    value: Any
    pattern: re.Pattern
    
    def __init__(self, name: str, value: Any, pattern: str | re.Pattern):
        if isinstance(pattern, str):
            try: pattern = re.compile(pattern)
            except re.error as e:
                config_logger().warning("invalid_validator_config", validator="RegExp", parameter="pattern", value=pattern)
                raise ValidatorConfigurationError(invalid_pattern(pattern, str(e)).unwrap_err()) from e
        elif not isinstance(pattern, re.Pattern):
            reject_configuration("RegExp", "pattern", pattern,
                f"pattern must be a string or compiled regex, got {type(pattern).__name__}")
        object.__setattr__(self, "name", name); object.__setattr__(self, "value", value); object.__setattr__(self, "pattern", pattern)
    
    @property
    def constraint_name(self) -> str:
        return f"pattern[{self.pattern.pattern}]"
    
    def validate(self) -> ValidationResult:
        if not isinstance(self.value, str) or self.pattern.fullmatch(self.value) is None:
            actual = self.value[:50] + ("..." if len(self.value) > 50 else "") if isinstance(self.value, str) else self.value
            return ValidationResult.fail(ErrorDetail(self.name, self.kind,
                f"{self.name} does not match the required format", ErrorCode.E2002_INVALID_FORMAT,
                expected=f"match pattern '{self.pattern.pattern}'", actual=actual))
        return ValidationResult.ok()


@dataclass(frozen=True, slots=True)
class ISODateTimeValidator(Validator):
    """Fails when the value does not parse as an ISO 8601 date-time string."""
    kind: ClassVar[ValidatorKind] = ValidatorKind.ISO_DATE_TIME
    name: str
    value: Any
    
    @property
    def constraint_name(self) -> str:
        return "iso_date_time"
    
    def validate(self) -> ValidationResult:
        if isinstance(self.value, str):
            normalized = self.value[:-1] + "+00:00" if self.value.endswith(("Z", "z")) else self.value
            try:
                datetime.fromisoformat(normalized)
                return ValidationResult.ok()
            except ValueError:
                pass
        return ValidationResult.fail(ErrorDetail(self.name, self.kind,
            f"{self.name} must be an ISO 8601 date-time", ErrorCode.E2012_INVALID_DATE,
            expected="ISO8601 datetime", actual=self.value))


# ============================================================================
# Numeric
# ============================================================================

# ASCII decimal literal: no underscores, no non-ASCII digits, no inf/nan words
_NUMERIC_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(value: Any) -> float | None:
    """Parse a finite number from a numeric or string value; None if not a number."""
    if isinstance(value, bool): return None
    if isinstance(value, (int, float, Decimal)):
        try: num = float(value)
        except OverflowError: return None
    elif isinstance(value, str):
        if _NUMERIC_LITERAL.fullmatch(value.strip()) is None: return None
        num = float(value.strip())
    else: return None
    return num if math.isfinite(num) else None


@dataclass(frozen=True, slots=True)
class NumberRangeValidator(Validator):
    """Fails when the value is not a number or lies outside [min_value, max_value].
    
    Either bound may be None for an open-ended range.
    """
    kind: ClassVar[ValidatorKind] = ValidatorKind.NUMBER_RANGE
    name: str
    value: Any
    min_value: float | int | None = None
    max_value: float | int | None = None
    
    def __post_init__(self):
        check_bounds_order("NumberRange", self.min_value, self.max_value)
    
    @property
    def constraint_name(self) -> str:
        parts = []
        if self.min_value is not None: parts.append(f">={self.min_value}")
        if self.max_value is not None: parts.append(f"<={self.max_value}")
        return f"range[{', '.join(parts)}]" if parts else "numeric"
    
    def _expected(self) -> str:
        if self.min_value is not None and self.max_value is not None:
            return f"between {self.min_value} and {self.max_value}"
        if self.min_value is not None: return f"at least {self.min_value}"
        return f"at most {self.max_value}"
    
    def validate(self) -> ValidationResult:
        if (num := parse_number(self.value)) is None:
            return ValidationResult.fail(ErrorDetail(self.name, self.kind,
                f"{self.name} must be a number", ErrorCode.E2004_INVALID_TYPE,
                expected="number", actual=self.value))
        
        below = self.min_value is not None and num < self.min_value
        above = self.max_value is not None and num > self.max_value
        if below or above:
            return ValidationResult.fail(ErrorDetail(self.name, self.kind,
                f"{self.name} must be {self._expected()}", ErrorCode.E2003_OUT_OF_RANGE,
                expected=self._expected(), actual=self.value))
        return ValidationResult.ok()


# ============================================================================
# Membership
# ============================================================================

@dataclass(frozen=True, slots=True)
class ContainsValidator(Validator):
    """Fails when the value is not exactly equal to a member of the allowed set."""
    kind: ClassVar[ValidatorKind] = ValidatorKind.CONTAINS
    name: str
    value: Any
    master: tuple[str, ...]
    
    def __init__(self, name: str, value: Any, master: Sequence[str]):
        if isinstance(master, str):
            reject_configuration("Contains", "master", master, "master must be a collection of strings, not a string")
        object.__setattr__(self, "name", name); object.__setattr__(self, "value", value); object.__setattr__(self, "master", tuple(master))
    
    @property
    def constraint_name(self) -> str:
        opts = list(self.master[:5])
        suffix = f"... +{len(self.master) - 5}" if len(self.master) > 5 else ""
        return f"contains[{', '.join(str(o) for o in opts)}{suffix}]"
    
    def validate(self) -> ValidationResult:
        if self.value not in self.master:
            return ValidationResult.fail(ErrorDetail(self.name, self.kind,
                f"{self.name} must be one of: {', '.join(str(m) for m in self.master)}", ErrorCode.E2005_CONSTRAINT_VIOLATION,
                expected=list(self.master), actual=self.value))
        return ValidationResult.ok()


@dataclass(frozen=True, slots=True)
class LiteralTypeCheckValidator(Validator):
    """Fails when the value does not exactly equal one of the given literals.
    
    LiteralTypeCheckValidator(name, value, "") accepts only the empty string.
    """
    kind: ClassVar[ValidatorKind] = ValidatorKind.LITERAL_TYPE_CHECK
    name: str
    value: Any
    literals: tuple[str, ...]
    
    def __init__(self, name: str, value: Any, *literals: str):
        if not literals:
            reject_configuration("LiteralTypeCheck", "literals", literals, "at least one literal is required")
        object.__setattr__(self, "name", name); object.__setattr__(self, "value", value); object.__setattr__(self, "literals", literals)
    
    @property
    def constraint_name(self) -> str:
        return f"literal[{', '.join(repr(l) for l in self.literals)}]"
    
    def validate(self) -> ValidationResult:
        if not any(self.value == literal for literal in self.literals):
            return ValidationResult.fail(ErrorDetail(self.name, self.kind,
                f"{self.name} must be one of the literals: {', '.join(repr(l) for l in self.literals)}",
                ErrorCode.E2005_CONSTRAINT_VIOLATION, expected=list(self.literals), actual=self.value))
        return ValidationResult.ok()
