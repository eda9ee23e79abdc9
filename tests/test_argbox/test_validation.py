import pytest

from argbox import ArgumentRegistry, Resolver
from argbox.validation import check_leftovers, check_mandatory, check_values, validate
from argbox.validators import starts_with


@pytest.fixture
def registry():
    registry = ArgumentRegistry()
    registry.register(
        "Name", "-nm", "--name", "Your name", mandatory=True, validator=starts_with("B")
    )
    registry.register("City", "-c", "--city", "Your city")
    registry.register(
        "Verbose",
        "-v",
        "--verbose",
        "Talk more",
        value_not_required=True,
        validator=lambda value: False,
    )
    return registry


def resolve(registry, tokens):
    return Resolver(registry).resolve(tokens)


def test_mandatory_missing(registry):
    assert check_mandatory(registry, resolve(registry, [])) == [
        "argument 'Name' is required"
    ]


def test_mandatory_present_without_value(registry):
    result = resolve(registry, ["-nm"])
    assert check_mandatory(registry, result) == []
    assert check_values(result) == ["argument 'Name' has no value"]


def test_invalid_value(registry):
    result = resolve(registry, ["-nm", "Sam"])
    assert check_values(result) == ["value 'Sam' for argument 'Name' is not valid"]


def test_valid_value(registry):
    assert check_values(resolve(registry, ["-nm", "Bob", "-c", "Paris"])) == []


def test_flags_skip_value_validation(registry):
    assert check_values(resolve(registry, ["-v"])) == []


def test_raising_validator_reported_as_invalid():
    registry = ArgumentRegistry()
    registry.register("Count", "-n", "--count", "A number", validator=lambda value: int(value) > 0)
    errors = check_values(resolve(registry, ["-n", "ten"]))
    assert len(errors) == 1
    assert errors[0].startswith("value 'ten' for argument 'Count' is not valid: ")


def test_leftovers(registry):
    result = resolve(registry, ["foo", "-nm", "Bob", "bar"])
    assert check_leftovers(result) == ["token 'foo' was not used", "token 'bar' was not used"]


def test_validate_aggregates_everything(registry):
    result = resolve(registry, ["foo", "-c"])
    assert validate(registry, result) == [
        "argument 'Name' is required",
        "argument 'City' has no value",
        "token 'foo' was not used",
    ]


def test_validate_allows_leftovers(registry):
    result = resolve(registry, ["foo", "-nm", "Bob"])
    assert validate(registry, result, forbid_leftovers=False) == []
    assert validate(registry, result, forbid_leftovers=True) == ["token 'foo' was not used"]


def test_validate_clean_result(registry):
    assert validate(registry, resolve(registry, ["-nm", "Bill", "-v"])) == []
