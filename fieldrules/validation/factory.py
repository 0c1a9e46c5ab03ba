"""Validator Factories

Pre-wired combinations for the common field rules. Every factory returns a
Validator; call validate() on it to get the report.

Usage:
    from fieldrules.validation import length_validator, or_, empty_string_validator

    nickname = or_(length_validator("nickname", value, 1, 20), empty_string_validator("nickname", value))
    result = nickname.validate()
"""
from __future__ import annotations

import re
from typing import Any, Sequence

from . import patterns
from .composite import CompositeValidator, OrCompositeValidator
from .validators import (
    ContainsValidator,
    ISODateTimeValidator,
    LiteralTypeCheckValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NotEmptyValidator,
    NumberRangeValidator,
    RegExpValidator,
    Validator,
    check_bounds_order,
    check_length_bound,
)


def format_validator(
    name: str,
    value: Any,
    *,
    min_length: int | None = None,
    max_length: int | None = None,
    format: str | re.Pattern | None = None,
) -> Validator:
    """NotEmpty && MinLength? && MaxLength? && RegExp?
    
    Unset (or zero) bounds and an unset format become absent slots.
    """
    for parameter, bound in (("min_length", min_length), ("max_length", max_length)):
        if bound is not None: check_length_bound("Length", parameter, bound)
    check_bounds_order("Length", min_length or None, max_length or None)
    required = NotEmptyValidator(name, value)
    min_ = MinLengthValidator(name, value, min_length) if min_length else None
    max_ = MaxLengthValidator(name, value, max_length) if max_length else None
    f = RegExpValidator(name, value, format) if format else None
    return CompositeValidator(required, min_, max_, f)


def not_empty_validator(name: str, value: Any) -> Validator:
    return NotEmptyValidator(name, value)


def uuid_v4_check_validator(name: str, value: Any) -> Validator:
    """NotEmpty && UUIDv4"""
    return CompositeValidator(NotEmptyValidator(name, value), RegExpValidator(name, value, patterns.UUID_V4))


def number_range_validator(name: str, value: Any, min: float | int, max: float | int) -> Validator:
    """NotEmpty && NumberRegex && NumberRange"""
    required = NotEmptyValidator(name, value)
    f = RegExpValidator(name, value, patterns.NUMBER)
    range_ = NumberRangeValidator(name, value, min, max)
    return CompositeValidator(required, f, range_)


def length_validator(name: str, value: Any, min_length: int, max_length: int | None = None) -> Validator:
    """NotEmpty && MinLength && MaxLength?"""
    check_length_bound("Length", "min_length", min_length)
    if max_length is not None: check_length_bound("Length", "max_length", max_length)
    check_bounds_order("Length", min_length, max_length)
    not_empty = NotEmptyValidator(name, value)
    min_ = MinLengthValidator(name, value, min_length)
    max_ = MaxLengthValidator(name, value, max_length) if max_length is not None else None
    return CompositeValidator(not_empty, min_, max_)


def contains_validator(name: str, value: Any, master: Sequence[str]) -> Validator:
    """Membership check that reports like every other validator."""
    return CompositeValidator(NotEmptyValidator(name, value), ContainsValidator(name, value, master))


def literal_check_validator(name: str, value: Any, *literals: str) -> Validator:
    return LiteralTypeCheckValidator(name, value, *literals)


def iso_date_validator(name: str, value: Any) -> Validator:
    return ISODateTimeValidator(name, value)


def alphanumeric_validator(name: str, value: Any, min_length: int, max_length: int) -> Validator:
    return format_validator(name, value, min_length=min_length, max_length=max_length, format=patterns.ALPHANUMERIC)


def number_format_validator(name: str, value: Any, min_length: int, max_length: int) -> Validator:
    return format_validator(name, value, min_length=min_length, max_length=max_length, format=patterns.NUMBER)


def empty_string_validator(name: str, value: Any) -> Validator:
    """Accepts only ''."""
    return literal_check_validator(name, value, "")


def and_(*validators: Validator | None) -> Validator:
    return CompositeValidator(*validators)


def or_(*validators: Validator | None) -> Validator:
    return OrCompositeValidator(*validators)
