import pytest

from argbox.validators import all_of, matches, non_blank, one_of, starts_with


def test_starts_with():
    validator = starts_with("B")
    assert validator("Bob")
    assert validator("B")
    assert not validator("bob")
    assert not validator("Sam")
    assert not validator(None)


@pytest.mark.parametrize("valid", ["cli", "CLI", "Json"])
def test_one_of_case_insensitive(valid):
    assert one_of(["cli", "json"])(valid)


def test_one_of_case_sensitive():
    validator = one_of(["cli", "json"], case_sensitive=True)
    assert validator("cli")
    assert not validator("CLI")
    assert not validator(None)


def test_one_of_accepts_any_iterable():
    validator = one_of(choice for choice in ("a", "b"))
    assert validator("A")
    assert validator("b")
    assert not validator("c")


def test_matches_full_value():
    validator = matches(r"\d{3}")
    assert validator("123")
    assert not validator("1234")
    assert not validator("12a")
    assert not validator(None)


@pytest.mark.parametrize("invalid", ["", "   ", "\t", None])
def test_non_blank_rejects(invalid):
    assert not non_blank()(invalid)


def test_non_blank_accepts():
    assert non_blank()(" x ")


def test_all_of():
    validator = all_of(starts_with("B"), matches(r"[A-Za-z]+"))
    assert validator("Bob")
    assert not validator("B0b")
    assert not validator("Sam")


def test_all_of_without_validators_accepts():
    assert all_of()("anything")
