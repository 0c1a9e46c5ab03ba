"""Exception wrappers for AppError.

Validation outcomes are reported as data; these exist for code paths that
cannot return a Result, chiefly validator construction.
"""
from __future__ import annotations

from .types import AppError, Result


class AppErrorException(Exception):
    """Exception wrapper for AppError."""
    
    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))


class ValidatorConfigurationError(AppErrorException, ValueError):
    """Raised when a validator is constructed with malformed parameters."""


def raise_result(result: Result) -> None:
    """Raise error if Result is Err, otherwise return."""
    if result.is_err():
        raise AppErrorException(result.unwrap_err())
