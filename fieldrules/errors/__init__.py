"""Error Handling

- Result[T, E]: Ok/Err container for success/failure
- AppError: error value with code, message, context and metadata
- ErrorCode: hierarchical error code taxonomy
- Builders: ergonomic error construction
- Exceptions: for construction-time misuse only

Usage:
    from fieldrules.errors import Ok, Err, AppError, validation_error

    match result.to_result(value):
        case Ok(v):
            save(v)
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    validation_error,
    invalid_configuration,
    invalid_pattern,
)

from .exceptions import (
    AppErrorException,
    ValidatorConfigurationError,
    raise_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "validation_error",
    "invalid_configuration",
    "invalid_pattern",
    "AppErrorException",
    "ValidatorConfigurationError",
    "raise_result",
]
