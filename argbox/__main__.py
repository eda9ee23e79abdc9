"""
ArgBox CLI Arguments

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Resolve a command line against arguments declared in a configuration file:

    argbox --config greeter.yaml -- -nm Bob --shout
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from argbox.argbox import ArgBox
from argbox.config import loader
from argbox.console import console, error_console
from argbox.exceptions import ArgBoxError
from argbox.parsed import ResolutionResult
from argbox.utils import setup_logging
from argbox.validators import one_of

TOKEN_SEPARATOR = "--"


def file_exists(value: str | None) -> bool:
    return value is not None and Path(value).is_file()


def get_argbox() -> ArgBox:
    box = ArgBox(forbid_leftovers=True, program="argbox")
    box.register(
        "Config",
        "-cfg",
        "--config",
        "YAML or TOML file declaring the arguments to resolve.",
        mandatory=True,
        validator=file_exists,
    )
    box.register(
        "LogMode",
        "-lm",
        "--log-mode",
        "Logging output mode: cli or json.",
        validator=one_of(["cli", "json"]),
    )
    box.register(
        "Verbose",
        "-v",
        "--verbose",
        "Log how each token is resolved.",
        value_not_required=True,
    )
    return box


def split_tokens(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split the tokens for argbox itself from the tokens to resolve."""
    argv = list(argv)
    if TOKEN_SEPARATOR not in argv:
        return argv, []
    index = argv.index(TOKEN_SEPARATOR)
    return argv[:index], argv[index + 1 :]


def result_table(result: ResolutionResult, title: str = "Resolved arguments") -> Table:
    table = Table(title=title, title_justify="left")
    table.add_column("Argument", style="bold")
    table.add_column("Token")
    table.add_column("Value")
    for parsed in result:
        value = "" if parsed.value is None else parsed.value
        table.add_row(escape(parsed.name), escape(parsed.command_arg), escape(value))
    return table


def print_error(error: ArgBoxError) -> None:
    error_console.print(f"[bold red]error:[/] {escape(error.message)}", soft_wrap=True)
    for message in error.errors:
        error_console.print(f"  - {escape(message)}", soft_wrap=True)


def main(argv: Sequence[str] | None = None) -> int:
    own_tokens, tokens = split_tokens(sys.argv[1:] if argv is None else argv)
    box = get_argbox()
    if box.is_help_requested(own_tokens):
        console.print(box.help_table())
        return 0

    own, error = box.try_resolve(own_tokens)
    if error is not None:
        print_error(error)
        return 1

    setup_logging(
        mode=own.value("LogMode"),
        console_log_level=logging.DEBUG if "Verbose" in own else logging.WARNING,
    )

    try:
        target = loader(own.value("Config", ""))
    except ArgBoxError as error:
        print_error(error)
        return 1
    except (OSError, ValueError) as error:
        error_console.print(f"[bold red]error:[/] {escape(str(error))}", soft_wrap=True)
        return 1

    if target.is_help_requested(tokens):
        console.print(target.help_table())
        return 0

    result, error = target.try_resolve(tokens)
    if error is not None:
        print_error(error)
        return 1
    console.print(result_table(result, title=target.program or "Resolved arguments"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
