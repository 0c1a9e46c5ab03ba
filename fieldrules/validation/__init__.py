"""Composable Field Validation

Atomic validators check one field value against one rule; composites
combine them under AND / OR semantics and are validators themselves, so
they nest to any depth. Every validate() call returns a ValidationResult
with structured ErrorDetails instead of raising.

Usage:
    from fieldrules.validation import (
        CompositeValidator, NotEmptyValidator, MaxLengthValidator,
        number_range_validator, or_,
    )

    name_rule = CompositeValidator(
        NotEmptyValidator("name", name),
        MaxLengthValidator("name", name, 64) if limit_names else None,
    )
    result = name_rule.validate()
    if not result:
        return [d.to_dict() for d in result.errors]
"""

from .result import (
    ValidatorKind,
    ErrorDetail,
    ValidationResult,
)

from .validators import (
    Validator,
    NotEmptyValidator,
    MinLengthValidator,
    MaxLengthValidator,
    RegExpValidator,
    NumberRangeValidator,
    ContainsValidator,
    LiteralTypeCheckValidator,
    ISODateTimeValidator,
    parse_number,
)

from .composite import (
    CompositeValidator,
    OrCompositeValidator,
)

from .factory import (
    format_validator,
    not_empty_validator,
    uuid_v4_check_validator,
    number_range_validator,
    length_validator,
    contains_validator,
    literal_check_validator,
    iso_date_validator,
    alphanumeric_validator,
    number_format_validator,
    empty_string_validator,
    and_,
    or_,
)

from .errors import ValidationError

from . import patterns

__all__ = [
    # Results
    "ValidatorKind",
    "ErrorDetail",
    "ValidationResult",
    # Atomic validators
    "Validator",
    "NotEmptyValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "RegExpValidator",
    "NumberRangeValidator",
    "ContainsValidator",
    "LiteralTypeCheckValidator",
    "ISODateTimeValidator",
    "parse_number",
    # Combinators
    "CompositeValidator",
    "OrCompositeValidator",
    # Factories
    "format_validator",
    "not_empty_validator",
    "uuid_v4_check_validator",
    "number_range_validator",
    "length_validator",
    "contains_validator",
    "literal_check_validator",
    "iso_date_validator",
    "alphanumeric_validator",
    "number_format_validator",
    "empty_string_validator",
    "and_",
    "or_",
    # Errors
    "ValidationError",
    # Pattern registry
    "patterns",
]
