# ArgBox CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Reusable value validators for ArgBox arguments.

Each factory returns a predicate taking the value found on the command line
(`None` when no value was given) and returning whether it is acceptable.
Apart from `always_valid`, every predicate rejects a missing value.

Included Validators:
- always_valid: Accepts everything (the default of every argument).
- non_blank: Requires at least one non-whitespace character.
- starts_with: Requires a given prefix.
- one_of: Restricts the value to a set of words (case-insensitive by default).
- int_range: Requires an integer between two bounds, inclusive.
- matches: Requires a full regular expression match.
- all_of: Combines predicates, all of which must accept the value.

`prompt_validator()` turns the predicate of an `ArgumentDefinition` into a
Prompt Toolkit `Validator`, for programs that ask again for a rejected value.
"""
from __future__ import annotations

import re
from typing import Iterable

from prompt_toolkit.validation import Validator

from argbox.argument import ArgumentDefinition, ArgumentValidator, always_valid


def non_blank() -> ArgumentValidator:
    """Validator for values holding at least one non-whitespace character."""

    def validate(value: str | None) -> bool:
        return value is not None and bool(value.strip())

    return validate


def starts_with(prefix: str) -> ArgumentValidator:
    """Validator for values starting with a prefix."""

    def validate(value: str | None) -> bool:
        return value is not None and value.startswith(prefix)

    return validate


def one_of(choices: Iterable[str], case_sensitive: bool = False) -> ArgumentValidator:
    """Validator for a fixed set of words."""
    if case_sensitive:
        allowed = set(choices)
    else:
        allowed = {choice.upper() for choice in choices}

    def validate(value: str | None) -> bool:
        if value is None:
            return False
        return (value if case_sensitive else value.upper()) in allowed

    return validate


def int_range(minimum: int, maximum: int) -> ArgumentValidator:
    """Validator for integer ranges."""

    def validate(value: str | None) -> bool:
        if value is None:
            return False
        try:
            number = int(value)
        except ValueError:
            return False
        return minimum <= number <= maximum

    return validate


def matches(pattern: str | re.Pattern[str]) -> ArgumentValidator:
    """Validator for values fully matching a regular expression."""
    compiled = re.compile(pattern)

    def validate(value: str | None) -> bool:
        return value is not None and compiled.fullmatch(value) is not None

    return validate


def all_of(*validators: ArgumentValidator) -> ArgumentValidator:
    """Validator accepting a value only when every given validator does."""

    def validate(value: str | None) -> bool:
        return all(validator(value) for validator in validators)

    return validate


def prompt_validator(
    definition: ArgumentDefinition, error_message: str | None = None
) -> Validator:
    """Prompt Toolkit validator applying the rule of an argument."""
    if error_message is None:
        error_message = f"Invalid value for '{definition.name}'."
    return Validator.from_callable(definition.validator, error_message=error_message)


__all__ = [
    "always_valid",
    "non_blank",
    "starts_with",
    "one_of",
    "int_range",
    "matches",
    "all_of",
    "prompt_validator",
]
