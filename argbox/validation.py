# ArgBox CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Validation pipeline run over a `ResolutionResult`.

Each check returns the list of problems it found and never stops at the first
one. `validate()` runs them all and concatenates their findings:
- `check_mandatory`: mandatory arguments missing from the command line.
- `check_values`: value-requiring arguments without value or with a value
  their validator rejects. Flags are skipped.
- `check_leftovers`: tokens no argument consumed.
"""
from __future__ import annotations

from argbox.logger import logger
from argbox.parsed import ResolutionResult
from argbox.registry import ArgumentRegistry


def check_mandatory(registry: ArgumentRegistry, result: ResolutionResult) -> list[str]:
    """Report every mandatory argument absent from the result."""
    return [
        f"argument '{definition.name}' is required"
        for definition in registry.mandatory_definitions()
        if definition not in result.parsed
    ]


def check_values(result: ResolutionResult) -> list[str]:
    """Report missing and invalid values of value-requiring arguments."""
    errors = []
    for parsed in result:
        definition = parsed.definition
        if definition.value_not_required:
            continue
        if parsed.value is None:
            errors.append(f"argument '{definition.name}' has no value")
            continue
        try:
            valid = definition.validator(parsed.value)
        except Exception as error:
            logger.debug(
                "Validator for '%s' raised on '%s': %s", definition.name, parsed.value, error
            )
            errors.append(
                f"value '{parsed.value}' for argument '{definition.name}' "
                f"is not valid: {error}"
            )
            continue
        if not valid:
            errors.append(
                f"value '{parsed.value}' for argument '{definition.name}' is not valid"
            )
    return errors


def check_leftovers(result: ResolutionResult) -> list[str]:
    return [f"token '{token}' was not used" for token in result.leftovers]


def validate(
    registry: ArgumentRegistry,
    result: ResolutionResult,
    forbid_leftovers: bool = True,
) -> list[str]:
    """
    Run every check over a resolution result.

    Args:
        registry (ArgumentRegistry): The registry the result was resolved against.
        result (ResolutionResult): The result of the current resolve call.
        forbid_leftovers (bool): Whether unused tokens are errors.

    Returns:
        list[str]: All problems found, mandatory first, then values, then leftovers.
    """
    errors = check_mandatory(registry, result)
    errors.extend(check_values(result))
    if forbid_leftovers:
        errors.extend(check_leftovers(result))
    logger.debug("Validation found %d problem(s)", len(errors))
    return errors
