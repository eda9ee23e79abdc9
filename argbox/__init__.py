"""
ArgBox CLI Arguments

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argbox import ArgBox
from .argument import ArgumentDefinition, always_valid
from .exceptions import (
    ArgBoxError,
    ArgumentRegistrationError,
    ArgumentResolutionError,
    DuplicateArgumentError,
)
from .logger import logger
from .parsed import ParsedArgument, ResolutionResult
from .registry import ArgumentRegistry
from .resolver import Resolver

__version__ = "0.1.0"

__all__ = [
    "ArgBox",
    "ArgumentDefinition",
    "ArgumentRegistry",
    "Resolver",
    "ParsedArgument",
    "ResolutionResult",
    "ArgBoxError",
    "ArgumentRegistrationError",
    "ArgumentResolutionError",
    "DuplicateArgumentError",
    "always_valid",
    "logger",
]
