# ArgBox CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Matches a raw token sequence against an `ArgumentRegistry`.

Tokens are read left to right with a single lookahead:
- A token matching no definition is kept as a leftover.
- A token invoking a value-requiring argument consumes the next token as its
  value, whatever that token looks like.
- A flag, or a value-requiring argument at the end of the sequence, is
  recorded without value. The missing value is reported by validation.
- An argument found twice keeps its last occurrence.

The resolver only reads the registry.
"""
from __future__ import annotations

from typing import Sequence

from argbox.logger import logger
from argbox.parsed import ParsedArgument, ResolutionResult
from argbox.registry import ArgumentRegistry


class Resolver:
    """Resolves command-line tokens into a `ResolutionResult`."""

    def __init__(self, registry: ArgumentRegistry) -> None:
        self.registry = registry

    def resolve(self, tokens: Sequence[str] | None) -> ResolutionResult:
        """
        Resolve a token sequence.

        Args:
            tokens (Sequence[str] | None): The command-line tokens, without the
                program name.

        Returns:
            ResolutionResult: Parsed arguments and leftovers for these tokens only.
        """
        result = ResolutionResult()
        tokens = list(tokens or [])
        i = 0
        while i < len(tokens):
            token = tokens[i]
            definition = self.registry.find(token)
            if definition is None:
                logger.debug("Token '%s' matches no argument", token)
                result.leftovers.append(token)
                i += 1
                continue

            if definition.requires_value and i + 1 < len(tokens):
                value: str | None = tokens[i + 1]
                i += 2
            else:
                value = None
                i += 1

            if definition in result.parsed:
                logger.debug(
                    "Argument '%s' given again as '%s', keeping the last one",
                    definition.name,
                    token,
                )
            result.parsed[definition] = ParsedArgument(definition, token, value)
            logger.debug("Resolved '%s' to argument '%s'", token, definition.name)

        return result
