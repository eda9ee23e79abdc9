# ArgBox CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by ArgBox.

Every exception carries a primary `message` plus an ordered list of individual
problem descriptions in `errors`. Registration problems are raised one at a
time with an empty `errors` list, while resolution problems are collected and
raised together so the user sees the whole set in one report.

Exception Hierarchy:
- ArgBoxError
    ├── ArgumentRegistrationError
    │   └── DuplicateArgumentError
    └── ArgumentResolutionError
"""
from __future__ import annotations

from typing import Iterable


class ArgBoxError(Exception):
    """
    Base exception for ArgBox, able to carry several error messages.

    Attributes:
        message (str): The primary message.
        errors (list[str]): Individual problem descriptions, in the order found.
        multiple (bool): True when the error aggregates individual problems.
    """

    def __init__(self, message: str = "", errors: Iterable[str] | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.errors: list[str] = list(errors or [])
        self.multiple: bool = bool(self.errors)

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        lines = [self.message] if self.message else []
        lines.extend(f"- {error}" for error in self.errors)
        return "\n".join(lines)


class ArgumentRegistrationError(ArgBoxError):
    """Exception raised when an argument declaration is malformed."""


class DuplicateArgumentError(ArgumentRegistrationError):
    """Exception raised when a name or invocation token is already registered."""


class ArgumentResolutionError(ArgBoxError):
    """Exception raised when a command line fails resolution or validation."""
