# ArgBox CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentDefinition` dataclass, the immutable declaration of one
command-line argument registered with an `ArgumentRegistry`.

Key Attributes:
- `name`: Unique display identifier, also the identity of the definition
- `short_call` / `long_call`: Invocation tokens (e.g. `-nm`, `--name`)
- `help_text`: Description shown in the help manual
- `mandatory`: Whether the argument must appear on the command line
- `value_not_required`: Whether the argument is a flag consuming no value
- `validator`: Predicate applied to the value found on the command line

Two definitions with the same `name` compare equal and hash identically,
whatever their other fields. Sorting orders definitions by `name`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

ArgumentValidator = Callable[[str | None], bool]


def always_valid(value: str | None) -> bool:
    """Default validator, accepting every value."""
    return True


@dataclass(frozen=True, order=True)
class ArgumentDefinition:
    """
    Represents a declared command-line argument.

    Attributes:
        name (str): The unique name of the argument.
        short_call (str): Short invocation token, starting with '-'.
        long_call (str): Long invocation token, starting with '--'.
        help_text (str): Help line displayed in the help manual.
        mandatory (bool): True if the argument must be present on the command line.
        value_not_required (bool): True if the argument is a flag and takes no value.
        validator (ArgumentValidator): Predicate the value must satisfy.
    """

    name: str
    short_call: str = field(compare=False)
    long_call: str = field(compare=False)
    help_text: str = field(compare=False)
    mandatory: bool = field(default=False, compare=False)
    value_not_required: bool = field(default=False, compare=False)
    validator: ArgumentValidator = field(
        default=always_valid, compare=False, repr=False
    )

    @property
    def calls(self) -> tuple[str, str]:
        """Both invocation tokens, short first."""
        return (self.short_call, self.long_call)

    @property
    def requires_value(self) -> bool:
        return not self.value_not_required

    def matches(self, token: str) -> bool:
        """Check if a command-line token invokes this argument."""
        return token in self.calls
