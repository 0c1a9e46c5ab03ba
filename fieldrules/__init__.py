"""fieldrules: composable input-validation rules with structured reports."""
from fieldrules.config import Settings, get_settings
from fieldrules.logging import configure_logging, configure_from_settings, get_logger
from fieldrules.validation import (
    ValidatorKind,
    ErrorDetail,
    ValidationResult,
    ValidationError,
    Validator,
    NotEmptyValidator,
    MinLengthValidator,
    MaxLengthValidator,
    RegExpValidator,
    NumberRangeValidator,
    ContainsValidator,
    LiteralTypeCheckValidator,
    ISODateTimeValidator,
    CompositeValidator,
    OrCompositeValidator,
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

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "ValidatorKind",
    "ErrorDetail",
    "ValidationResult",
    "ValidationError",
    "Validator",
    "NotEmptyValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "RegExpValidator",
    "NumberRangeValidator",
    "ContainsValidator",
    "LiteralTypeCheckValidator",
    "ISODateTimeValidator",
    "CompositeValidator",
    "OrCompositeValidator",
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
]
