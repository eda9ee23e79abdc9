# ArgBox CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentRegistry`, the set of `ArgumentDefinition`s a
program accepts on its command line.

The registry enforces its uniqueness invariant at registration time: no two
definitions share a name, a short call or a long call. A rejected registration
leaves the registry untouched. Every registry starts with the built-in help
argument (`-hlp` / `--help`).

Public Interface:
- `register(...)`: Declare a new argument from its fields.
- `add(definition)`: Register an already built `ArgumentDefinition`.
- `find(token)`: Return the definition invoked by a command-line token.
- `render_help()`: Build the plain-text help manual.
- `help_table()`: Build the same help as a Rich table.

Example Usage:
    registry = ArgumentRegistry()
    registry.register("Name", "-nm", "--name", "Your name", mandatory=True)
    print(registry.render_help())
"""
from __future__ import annotations

from typing import Iterator

from rich.markup import escape
from rich.table import Table

from argbox.argument import ArgumentDefinition, ArgumentValidator, always_valid
from argbox.exceptions import ArgumentRegistrationError, DuplicateArgumentError
from argbox.logger import logger
from argbox.utils import is_any_blank

HELP_NAME = "HELP"
HELP_SHORT_CALL = "-hlp"
HELP_LONG_CALL = "--help"
HELP_TEXT = (
    "If present on the command line, the program will print out the help manual "
    "and exit. #helpception"
)

MANDATORY_NOTE = "This argument is mandatory on the command line."
FLAG_NOTE = "This argument has no value. If a value is present, it will be ignored."


class ArgumentRegistry:
    """
    Registry of the arguments accepted by a program.

    Definitions are kept keyed by name and iterated in name order.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, ArgumentDefinition] = {}
        self._call_map: dict[str, ArgumentDefinition] = {}
        self.help_definition: ArgumentDefinition = self.register(
            HELP_NAME,
            HELP_SHORT_CALL,
            HELP_LONG_CALL,
            HELP_TEXT,
            mandatory=False,
            value_not_required=True,
        )

    def register(
        self,
        name: str,
        short_call: str,
        long_call: str,
        help_text: str,
        mandatory: bool = False,
        value_not_required: bool = False,
        validator: ArgumentValidator | None = None,
    ) -> ArgumentDefinition:
        """
        Declare a new argument.

        Args:
            name (str): Unique name of the argument.
            short_call (str): Short invocation token, e.g. "-nm".
            long_call (str): Long invocation token, e.g. "--name".
            help_text (str): Help line for the help manual.
            mandatory (bool): Whether the argument must be on the command line.
            value_not_required (bool): Whether the argument is a flag without value.
            validator (ArgumentValidator | None): Rule the value must satisfy.
                Defaults to accepting every value.

        Returns:
            ArgumentDefinition: The registered definition.

        Raises:
            ArgumentRegistrationError: If the declaration is malformed.
            DuplicateArgumentError: If the name or a call is already registered.
        """
        definition = ArgumentDefinition(
            name=name,
            short_call=short_call,
            long_call=long_call,
            help_text=help_text,
            mandatory=mandatory,
            value_not_required=value_not_required,
            validator=always_valid if validator is None else validator,
        )
        return self.add(definition)

    def add(self, definition: ArgumentDefinition) -> ArgumentDefinition:
        """Register a definition, checking it against every registered one."""
        self._validate_definition(definition)
        self._definitions[definition.name] = definition
        for call in definition.calls:
            self._call_map[call] = definition
        logger.debug(
            "Registered argument '%s' (%s | %s)",
            definition.name,
            definition.short_call,
            definition.long_call,
        )
        return definition

    def _validate_definition(self, definition: ArgumentDefinition) -> None:
        if is_any_blank(
            definition.name,
            definition.short_call,
            definition.long_call,
            definition.help_text,
        ):
            raise ArgumentRegistrationError(
                "At least one of these parameters is blank: "
                "name, short_call, long_call, help_text"
            )
        if not definition.short_call.startswith("-"):
            raise ArgumentRegistrationError(
                f"[{definition.name}] short_call must start with '-'"
            )
        if not definition.long_call.startswith("--"):
            raise ArgumentRegistrationError(
                f"[{definition.name}] long_call must start with '--'"
            )
        if definition.name in self._definitions:
            raise DuplicateArgumentError(
                f"An argument named '{definition.name}' has already been registered"
            )
        if definition.short_call in self._call_map:
            existing = self._call_map[definition.short_call]
            raise DuplicateArgumentError(
                f"An argument using the short_call '{definition.short_call}' "
                f"has already been registered by '{existing.name}'"
            )
        if definition.long_call in self._call_map:
            existing = self._call_map[definition.long_call]
            raise DuplicateArgumentError(
                f"An argument using the long_call '{definition.long_call}' "
                f"has already been registered by '{existing.name}'"
            )
        if definition.short_call == definition.long_call:
            raise DuplicateArgumentError(
                f"[{definition.name}] short_call and long_call must differ"
            )

    def get(self, name: str) -> ArgumentDefinition | None:
        """Return the definition registered under a name."""
        return self._definitions.get(name)

    def find(self, token: str) -> ArgumentDefinition | None:
        """Return the definition whose short or long call equals the token."""
        return self._call_map.get(token)

    def mandatory_definitions(self) -> list[ArgumentDefinition]:
        return [definition for definition in self if definition.mandatory]

    def __iter__(self) -> Iterator[ArgumentDefinition]:
        return iter(sorted(self._definitions.values()))

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, ArgumentDefinition):
            return key.name in self._definitions
        return key in self._definitions

    def render_help(self) -> str:
        """
        Build the help manual so the program can print it as it wishes,
        where it wishes.

        Returns:
            str: The help manual, one block per argument in name order.
        """
        lines = ["HELP MANUAL", ""]
        for definition in self:
            lines.append(
                f"- {definition.name} : {definition.short_call} | {definition.long_call}"
            )
            lines.append(definition.help_text)
            if definition.mandatory:
                lines.append(MANDATORY_NOTE)
            if definition.value_not_required:
                lines.append(FLAG_NOTE)
            lines.append("")
        return "\n".join(lines) + "\n"

    def help_table(self, title: str = "HELP MANUAL") -> Table:
        """
        Build the help manual as a Rich table.

        The table is returned, not printed, so the caller decides where it goes.
        """
        table = Table(title=title, title_justify="left", show_lines=False)
        table.add_column("Argument", style="bold", no_wrap=True)
        table.add_column("Calls", no_wrap=True)
        table.add_column("Description")
        for definition in self:
            notes = []
            if definition.mandatory:
                notes.append("[bold]mandatory[/bold]")
            if definition.value_not_required:
                notes.append("[dim]flag, value ignored if given[/dim]")
            description = escape(definition.help_text)
            if notes:
                description = f"{description}\n{', '.join(notes)}"
            table.add_row(
                escape(definition.name),
                f"{escape(definition.short_call)} | {escape(definition.long_call)}",
                description,
            )
        return table

    def __str__(self) -> str:
        mandatory = sum(definition.mandatory for definition in self)
        flags = sum(definition.value_not_required for definition in self)
        return (
            f"ArgumentRegistry(args={len(self)}, calls={len(self._call_map)}, "
            f"mandatory={mandatory}, flags={flags})"
        )

    def __repr__(self) -> str:
        return str(self)
