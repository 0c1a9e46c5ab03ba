"""Error Value Types

Validation failures are data, not exceptions. Callers that want a Result
instead of a ValidationResult get Ok/Err from here, with an AppError
carrying the code, message and tracing context.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Error code taxonomy.
    
    E2xxx: Validation failures (reported as data)
    E7xxx: Validator construction misuse (raised)
    """
    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2002_INVALID_FORMAT = 2002
    E2003_OUT_OF_RANGE = 2003
    E2004_INVALID_TYPE = 2004
    E2005_CONSTRAINT_VIOLATION = 2005
    E2012_INVALID_DATE = 2012
    
    E7001_INVALID_VALIDATOR_CONFIG = 7001
    E7002_INVALID_PATTERN = 7002

    @property
    def category(self) -> str:
        return "validation" if self.value < 7000 else "configuration"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error was produced."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Typed error value: code, message, context and structured metadata."""
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    
    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "origin": self.context.origin,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message} (correlation_id={self.context.correlation_id})"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T
    
    def is_ok(self) -> bool: return True
    
    def is_err(self) -> bool: return False

    def unwrap(self) -> T: return self.value
    
    def match(self, ok: Callable[[T], U], err: Callable[[AppError], U]) -> U:
        """Exhaustive handling of both variants."""
        return ok(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result. Wraps an AppError."""
    error: E
    
    def is_ok(self) -> bool: return False
    
    def is_err(self) -> bool: return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")
    
    def unwrap_err(self) -> E: return self.error
    
    def match(self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive handling of both variants."""
        return err(self.error)


Result = Union[Ok[T], Err[E]]
