# ArgBox CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for ArgBox argument declarations.

A configuration file lists the arguments of a program in YAML or TOML:

    program: greeter
    forbid_leftovers: true
    arguments:
      - name: Name
        short_call: -nm
        long_call: --name
        help_text: Who to greet
        mandatory: true
        validator:
          starts_with: B
      - name: Shout
        short_call: -sh
        long_call: --shout
        help_text: Greet loudly
        value_not_required: true

A validator is either the dotted import path of a predicate
(`my_module.is_valid`) or a single-key mapping naming a factory of
`argbox.validators` with its arguments.
"""
from __future__ import annotations

import importlib
import re
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from argbox import validators
from argbox.argbox import ArgBox
from argbox.argument import ArgumentValidator
from argbox.logger import logger


def import_validator(dotted_path: str) -> ArgumentValidator:
    """Dynamically imports a predicate from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ValueError(f"Invalid validator path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ValueError(f"Could not import '{dotted_path}': {error}") from error
    try:
        validator = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ValueError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(validator):
        raise ValueError(f"Validator '{dotted_path}' is not callable")
    return validator


def build_validator(spec: str | dict[str, Any] | None) -> ArgumentValidator | None:
    """
    Build a validator from its configuration form.

    Args:
        spec: None, a dotted import path, or a single-key mapping such as
            `{"int_range": [1, 10]}` or `{"one_of": {"choices": ["a", "b"]}}`.
    """
    if spec is None:
        return None
    if isinstance(spec, str):
        return import_validator(spec)
    if len(spec) != 1:
        raise ValueError(
            f"Validator mapping must have exactly one factory name, got {list(spec)}"
        )
    factory_name, params = next(iter(spec.items()))
    if factory_name not in validators.__all__ or factory_name == "prompt_validator":
        raise ValueError(f"Unknown validator factory: {factory_name}")
    factory = getattr(validators, factory_name)
    if factory_name == "always_valid":
        return factory
    try:
        return _call_factory(factory_name, factory, params)
    except (TypeError, re.error) as error:
        raise ValueError(
            f"Invalid arguments for validator factory '{factory_name}': {error}"
        ) from error


def _call_factory(
    factory_name: str, factory: Callable[..., ArgumentValidator], params: Any
) -> ArgumentValidator:
    if factory_name == "all_of":
        return factory(*(build_validator(item) for item in params or []))
    if isinstance(params, dict):
        return factory(**params)
    if isinstance(params, list):
        if factory_name == "one_of":
            return factory(params)
        return factory(*params)
    if params is None:
        return factory()
    return factory(params)


class RawArgument(BaseModel):
    """Raw argument model for ArgBox configuration."""

    name: str
    short_call: str
    long_call: str
    help_text: str
    mandatory: bool = False
    value_not_required: bool = False
    validator: str | dict[str, Any] | None = None

    @field_validator("validator")
    @classmethod
    def validate_validator(
        cls, value: str | dict[str, Any] | None
    ) -> str | dict[str, Any] | None:
        if isinstance(value, dict) and len(value) != 1:
            raise ValueError("validator mapping must name exactly one factory.")
        return value


class ArgBoxConfig(BaseModel):
    """ArgBox configuration model."""

    program: str = ""
    forbid_leftovers: bool = True
    arguments: list[RawArgument] = Field(default_factory=list)

    def to_argbox(self) -> ArgBox:
        box = ArgBox(forbid_leftovers=self.forbid_leftovers, program=self.program)
        for raw_argument in self.arguments:
            box.register(
                raw_argument.name,
                raw_argument.short_call,
                raw_argument.long_call,
                raw_argument.help_text,
                mandatory=raw_argument.mandatory,
                value_not_required=raw_argument.value_not_required,
                validator=build_validator(raw_argument.validator),
            )
        return box


def loader(file_path: Path | str) -> ArgBox:
    """
    Load argument declarations from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        ArgBox: An ArgBox with every argument of the file registered.

    Raises:
        TypeError: If file_path is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or its content is invalid.
        ArgumentRegistrationError: If a declared argument is rejected.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of arguments.\n"
            "Example:\n"
            "program: 'greeter'\n"
            "arguments:\n"
            "  - name: 'Name'\n"
            "    short_call: '-nm'\n"
            "    long_call: '--name'\n"
            "    help_text: 'Who to greet'"
        )

    logger.debug("Loading argument declarations from '%s'", path)
    return ArgBoxConfig.model_validate(raw_config).to_argbox()
