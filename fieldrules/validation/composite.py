"""Composite Validators

Combinators over Validator children. Children are evaluated in construction
order with no short-circuit, so a single call reports every violation.
None children are absent slots (e.g. an unset max length) and are skipped:
they count neither as a pass nor as a failure.

Empty-child policies differ on purpose:
- CompositeValidator()   -> valid (AND over nothing is true)
- OrCompositeValidator() -> invalid, no errors (OR over nothing is false)
"""
from __future__ import annotations

from dataclasses import dataclass, field

from fieldrules.config import get_settings
from fieldrules.logging import validation_logger

from .result import ValidationResult
from .validators import Validator, reject_configuration


def _checked_children(composite: str, validators: tuple) -> tuple[Validator | None, ...]:
    for position, child in enumerate(validators):
        if child is not None and not isinstance(child, Validator):
            reject_configuration(composite, f"validators[{position}]", child,
                f"children must be validators or None, got {type(child).__name__}")
    return validators


def _log_evaluation(composite: str, children: int, result: ValidationResult) -> None:
    validation_logger().debug("composite_evaluated", composite=composite, children=children,
        valid=result.valid, error_count=len(result.errors))


@dataclass(frozen=True, slots=True)
class CompositeValidator(Validator):
    """AND combinator: valid iff every present child is valid.
    
    Errors are the in-order concatenation of every failing child's errors.
    Whether evaluations are logged is fixed at construction.
    """
    validators: tuple[Validator | None, ...]
    log_evaluations: bool = field(default=False, compare=False)
    
    def __init__(self, *validators: Validator | None):
        object.__setattr__(self, "validators", _checked_children("Composite", tuple(validators)))
        object.__setattr__(self, "log_evaluations", get_settings().LOG_EVALUATIONS)
    
    @property
    def present(self) -> tuple[Validator, ...]:
        return tuple(v for v in self.validators if v is not None)
    
    @property
    def constraint_name(self) -> str:
        return f"all_of[{', '.join(v.constraint_name for v in self.present)}]"
    
    def validate(self) -> ValidationResult:
        present = self.present
        result = ValidationResult.ok()
        for v in present:
            result = result.merge(v.validate())
        if self.log_evaluations: _log_evaluation("and", len(present), result)
        return result


@dataclass(frozen=True, slots=True)
class OrCompositeValidator(Validator):
    """OR combinator: valid iff at least one present child is valid.
    
    A passing alternative suppresses the others' errors. When every
    alternative fails, errors are the in-order concatenation of all of them.
    """
    validators: tuple[Validator | None, ...]
    log_evaluations: bool = field(default=False, compare=False)
    
    def __init__(self, *validators: Validator | None):
        object.__setattr__(self, "validators", _checked_children("OrComposite", tuple(validators)))
        object.__setattr__(self, "log_evaluations", get_settings().LOG_EVALUATIONS)
    
    @property
    def present(self) -> tuple[Validator, ...]:
        return tuple(v for v in self.validators if v is not None)
    
    @property
    def constraint_name(self) -> str:
        return f"any_of[{', '.join(v.constraint_name for v in self.present)}]"
    
    def validate(self) -> ValidationResult:
        present = self.present
        results = [v.validate() for v in present]
        if any(r.valid for r in results):
            result = ValidationResult.ok()
        else:
            result = ValidationResult.fail(*(d for r in results for d in r.errors))
        if self.log_evaluations: _log_evaluation("or", len(present), result)
        return result
