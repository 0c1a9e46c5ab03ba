"""Validation Result Types

A ValidationResult is the uniform report every validator returns: a
validity flag plus the ordered failure details gathered during evaluation.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from fieldrules.errors import AppError, ErrorCode, Ok, Result, validation_error

if TYPE_CHECKING:
    from .errors import ValidationError


class ValidatorKind(str, Enum):
    """Name of the rule an atomic validator checks."""
    NOT_EMPTY = "NotEmpty"
    MIN_LENGTH = "MinLength"
    MAX_LENGTH = "MaxLength"
    REG_EXP = "RegExp"
    NUMBER_RANGE = "NumberRange"
    CONTAINS = "Contains"
    LITERAL_TYPE_CHECK = "LiteralTypeCheck"
    ISO_DATE_TIME = "ISODateTime"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ErrorDetail:
    """A single failed check, keyed by field name and rule kind."""
    field_name: str
    kind: ValidatorKind
    message: str
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC
    expected: Any = None
    actual: Any = None
    
    def to_dict(self) -> dict[str, Any]:
        """Serialize for reporting."""
        result = {"field": self.field_name, "kind": self.kind.value, "message": self.message, "code": self.code.name}
        if self.expected is not None: result["expected"] = self.expected
        if self.actual is not None: result["actual"] = self.actual
        return result


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a validate() call."""
    valid: bool
    errors: tuple[ErrorDetail, ...] = ()
    
    @classmethod
    def ok(cls) -> ValidationResult: return cls(valid=True)
    
    @classmethod
    def fail(cls, *details: ErrorDetail) -> ValidationResult: return cls(valid=False, errors=tuple(details))
    
    def __bool__(self) -> bool: return self.valid
    
    def merge(self, other: ValidationResult) -> ValidationResult:
        """Conjunction of two results: valid only if both are, errors concatenated in order."""
        return ValidationResult(valid=self.valid and other.valid, errors=self.errors + other.errors)
    
    @property
    def field_errors(self) -> dict[str, list[ErrorDetail]]:
        """Group errors by field name, preserving order within each field."""
        grouped: dict[str, list[ErrorDetail]] = {}
        for detail in self.errors: grouped.setdefault(detail.field_name, []).append(detail)
        return grouped
    
    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "errors": [d.to_dict() for d in self.errors]}
    
    def raise_if_invalid(self, message: str = "Validation failed") -> None:
        """Raise ValidationError carrying the details if this result is a failure."""
        if self.valid: return
        from .errors import ValidationError
        raise ValidationError(message=message, details=list(self.errors))
    
    def to_result(self, value: Any = None, *, origin: str = "") -> Result[Any, AppError]:
        """Convert to Ok(value) on success or Err(AppError) on failure."""
        if self.valid: return Ok(value)
        if len(self.errors) == 1:
            d = self.errors[0]
            return validation_error(d.message, code=d.code, field=d.field_name, origin=origin, kind=d.kind.value)
        return validation_error(f"Validation failed: {len(self.errors)} errors", origin=origin,
            error_count=len(self.errors), errors=[d.to_dict() for d in self.errors])
