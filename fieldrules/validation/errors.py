"""Validation Error Exception

Validators never raise for bad input. ValidationError is only raised when a
caller opts into exception flow via ValidationResult.raise_if_invalid().

Error Format:
{
    "error": {
        "type": "validation_error",
        "message": "Validation failed",
        "error_count": 1,
        "errors": [
            {"field": "name", "kind": "NotEmpty", "message": "name must not be empty", "code": "E2001_REQUIRED_FIELD_MISSING"}
        ]
    }
}
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fieldrules.errors import AppError, ErrorCode

from .result import ErrorDetail


@dataclass
class ValidationError(Exception):
    """Validation error with structured details."""
    message: str
    details: list[ErrorDetail]
    
    def __post_init__(self):
        super().__init__(self.message)
    
    def __str__(self) -> str:
        if not self.details: return self.message
        if len(self.details) == 1: return f"{(d := self.details[0]).field_name}: {d.message}"
        return f"{self.message} ({len(self.details)} errors)"
    
    @property
    def field_errors(self) -> dict[str, list[ErrorDetail]]:
        """Group errors by field name."""
        result: dict[str, list[ErrorDetail]] = {}
        for detail in self.details: result.setdefault(detail.field_name, []).append(detail)
        return result
    
    @property
    def first_error(self) -> ErrorDetail | None: return self.details[0] if self.details else None
    
    def get_errors_for_field(self, field_name: str) -> list[ErrorDetail]:
        return [d for d in self.details if d.field_name == field_name]
    
    def to_app_error(self) -> AppError:
        """Convert to AppError for the error handling system."""
        if len(self.details) == 1:
            d = self.details[0]
            return AppError(code=d.code, message=f"{d.field_name}: {d.message}",
                metadata={"field": d.field_name, "kind": d.kind.value})
        
        return AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message=f"{self.message}: {len(self.details)} errors",
            metadata={"error_count": len(self.details), "errors": [d.to_dict() for d in self.details]})
    
    def to_dict(self) -> dict[str, Any]:
        return {"error": {"type": "validation_error", "message": self.message,
            "error_count": len(self.details), "errors": [d.to_dict() for d in self.details]}}
