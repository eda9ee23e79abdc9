# ArgBox CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgBox`, the entry point programs use to register,
resolve and validate their command-line arguments.

An `ArgBox` owns an `ArgumentRegistry`. Resolution runs the `Resolver` over the
tokens, then the validation pipeline over its result, and reports every
problem at once in a single `ArgumentResolutionError`.

Example Usage:
    box = ArgBox()
    box.register(
        "Name", "-nm", "--name", "Your name", mandatory=True, validator=starts_with("B")
    )

    tokens = sys.argv[1:]
    if box.is_help_requested(tokens):
        print(box.render_help())
        sys.exit(0)

    result = box.resolve(tokens)
    result.value("Name")  # 'Bob'
"""
from __future__ import annotations

from typing import Sequence

from rich.table import Table

from argbox.argument import ArgumentDefinition, ArgumentValidator
from argbox.exceptions import ArgBoxError, ArgumentResolutionError
from argbox.logger import logger
from argbox.parsed import ResolutionResult
from argbox.registry import ArgumentRegistry
from argbox.resolver import Resolver
from argbox.validation import validate


class ArgBox:
    """
    Registers, resolves and validates the arguments of a program.

    Args:
        forbid_leftovers (bool): Default for `resolve`: whether tokens matching
            no argument are errors.
        program (str): Optional program name, used as the help table title.
    """

    def __init__(self, forbid_leftovers: bool = True, program: str = "") -> None:
        self.forbid_leftovers: bool = forbid_leftovers
        self.program: str = program
        self.registry: ArgumentRegistry = ArgumentRegistry()

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
        """Register an argument. See `ArgumentRegistry.register`."""
        return self.registry.register(
            name,
            short_call,
            long_call,
            help_text,
            mandatory=mandatory,
            value_not_required=value_not_required,
            validator=validator,
        )

    def add(self, definition: ArgumentDefinition) -> ArgumentDefinition:
        return self.registry.add(definition)

    def is_help_requested(self, tokens: Sequence[str] | None) -> bool:
        """Check if the help argument appears anywhere in the tokens."""
        if not tokens:
            return False
        return any(call in tokens for call in self.registry.help_definition.calls)

    def try_resolve(
        self,
        tokens: Sequence[str] | None,
        forbid_leftovers: bool | None = None,
    ) -> tuple[ResolutionResult, ArgBoxError | None]:
        """
        Resolve and validate tokens without raising on validation problems.

        Returns:
            tuple[ResolutionResult, ArgBoxError | None]: The result, and the
            aggregated error when at least one problem was found.
        """
        if forbid_leftovers is None:
            forbid_leftovers = self.forbid_leftovers
        result = Resolver(self.registry).resolve(tokens)
        errors = validate(self.registry, result, forbid_leftovers=forbid_leftovers)
        if not errors:
            return result, None
        logger.debug("Command line rejected with %d problem(s)", len(errors))
        error = ArgumentResolutionError(
            f"{len(errors)} problem(s) found on the command line", errors
        )
        return result, error

    def resolve(
        self,
        tokens: Sequence[str] | None,
        forbid_leftovers: bool | None = None,
    ) -> ResolutionResult:
        """
        Resolve and validate tokens.

        Args:
            tokens (Sequence[str] | None): Command-line tokens, without the program name.
            forbid_leftovers (bool | None): Whether unused tokens are errors.
                Defaults to the value given at construction.

        Returns:
            ResolutionResult: The validated result.

        Raises:
            ArgumentResolutionError: Carrying every problem found.
        """
        result, error = self.try_resolve(tokens, forbid_leftovers=forbid_leftovers)
        if error is not None:
            raise error
        return result

    def render_help(self) -> str:
        return self.registry.render_help()

    def help_table(self) -> Table:
        return self.registry.help_table(title=self.program or "HELP MANUAL")

    def __str__(self) -> str:
        return f"ArgBox(program={self.program!r}, registry={self.registry})"

    def __repr__(self) -> str:
        return str(self)
