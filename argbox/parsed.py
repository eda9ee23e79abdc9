# ArgBox CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result types produced by the `Resolver`.

A `ResolutionResult` maps each matched `ArgumentDefinition` to the
`ParsedArgument` holding the token that invoked it and the value consumed
after it, and keeps the tokens that matched nothing as leftovers. A result
belongs to a single resolve call.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from argbox.argument import ArgumentDefinition


@dataclass(frozen=True)
class ParsedArgument:
    """
    An argument found on the command line.

    Attributes:
        definition (ArgumentDefinition): The matched declaration.
        command_arg (str): The literal token that matched it.
        value (str | None): The value consumed after the token, if any.
    """

    definition: ArgumentDefinition
    command_arg: str
    value: str | None = None

    @property
    def name(self) -> str:
        return self.definition.name


@dataclass
class ResolutionResult:
    """
    Outcome of resolving one token sequence.

    Arguments are keyed by definition, in the order they were first
    encountered. Lookups also accept the argument name.
    """

    parsed: dict[ArgumentDefinition, ParsedArgument] = field(default_factory=dict)
    leftovers: list[str] = field(default_factory=list)

    def _key(self, key: ArgumentDefinition | str) -> ArgumentDefinition | None:
        if isinstance(key, ArgumentDefinition):
            return key
        return next((definition for definition in self.parsed if definition.name == key), None)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (ArgumentDefinition, str)):
            return False
        definition = self._key(key)
        return definition is not None and definition in self.parsed

    def __getitem__(self, key: ArgumentDefinition | str) -> ParsedArgument:
        definition = self._key(key)
        if definition is None or definition not in self.parsed:
            raise KeyError(key)
        return self.parsed[definition]

    def __iter__(self) -> Iterator[ParsedArgument]:
        return iter(self.parsed.values())

    def __len__(self) -> int:
        return len(self.parsed)

    def get(self, key: ArgumentDefinition | str) -> ParsedArgument | None:
        """Return the parsed argument for a definition or name, if present."""
        try:
            return self[key]
        except KeyError:
            return None

    def is_present(self, key: ArgumentDefinition | str) -> bool:
        return key in self

    def value(
        self, key: ArgumentDefinition | str, default: str | None = None
    ) -> str | None:
        """
        Return the value given to an argument.

        Args:
            key (ArgumentDefinition | str): The definition or its name.
            default (str | None): Returned when the argument is absent or has no value.
        """
        parsed = self.get(key)
        if parsed is None or parsed.value is None:
            return default
        return parsed.value

    def as_dict(self) -> dict[str, str | None]:
        """Map argument names to their values, in encounter order."""
        return {parsed.name: parsed.value for parsed in self.parsed.values()}
