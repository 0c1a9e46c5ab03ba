"""Error Builders

Ergonomic constructors for typed errors. Each builder creates an AppError
with the appropriate code and context, wrapped in Err.
"""
from typing import Any

from .types import AppError, ErrorCode, ErrorContext, Err


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_configuration(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E7001_INVALID_VALIDATOR_CONFIG,
    validator: str | None = None,
    parameter: str | None = None,
    value: Any = None,
    origin: str = "",
) -> Err[AppError]:
    """Create error for a validator constructed with malformed parameters."""
    meta = {"validator": validator, "parameter": parameter, "value": value}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invalid_pattern(pattern: str, reason: str, origin: str = "") -> Err[AppError]:
    return invalid_configuration(
        f"Invalid regular expression {pattern!r}: {reason}",
        code=ErrorCode.E7002_INVALID_PATTERN,
        validator="RegExp",
        parameter="pattern",
        value=pattern,
        origin=origin,
    )
