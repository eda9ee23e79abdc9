import logging

import pytest

import argbox.__main__ as cli
from argbox.__main__ import get_argbox, main, split_tokens

CONFIG = """
program: greeter
arguments:
  - name: Name
    short_call: -nm
    long_call: --name
    help_text: Who to greet
    mandatory: true
    validator:
      starts_with: B
"""


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "greeter.yaml"
    path.write_text(CONFIG, encoding="UTF-8")
    return str(path)


@pytest.fixture
def logging_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: calls.append(kwargs))
    return calls


def test_split_tokens():
    assert split_tokens(["-cfg", "a.yaml", "--", "-nm", "Bob"]) == (
        ["-cfg", "a.yaml"],
        ["-nm", "Bob"],
    )
    assert split_tokens(["-cfg", "a.yaml"]) == (["-cfg", "a.yaml"], [])
    assert split_tokens(["--", "--", "x"]) == ([], ["--", "x"])


def test_own_arguments():
    box = get_argbox()
    assert [arg.name for arg in box.registry] == ["Config", "HELP", "LogMode", "Verbose"]
    assert box.registry.get("Config").mandatory


def test_success(config_path, logging_calls, capsys):
    assert main(["--config", config_path, "--", "-nm", "Bob"]) == 0
    out = capsys.readouterr().out
    assert "greeter" in out
    assert "Bob" in out
    assert logging_calls == [{"mode": None, "console_log_level": logging.WARNING}]


def test_verbose_and_log_mode(config_path, logging_calls):
    assert main(["-cfg", config_path, "-v", "-lm", "json", "--", "-nm", "Bob"]) == 0
    assert logging_calls == [{"mode": "json", "console_log_level": logging.DEBUG}]


def test_validation_failure(config_path, logging_calls, capsys):
    assert main(["-cfg", config_path, "--", "-nm", "Sam", "foo"]) == 1
    err = capsys.readouterr().err
    assert "2 problem(s) found on the command line" in err
    assert "value 'Sam' for argument 'Name' is not valid" in err
    assert "token 'foo' was not used" in err


def test_missing_config_argument(logging_calls, capsys):
    assert main([]) == 1
    err = capsys.readouterr().err
    assert "argument 'Config' is required" in err
    assert logging_calls == []


def test_config_file_must_exist(tmp_path, logging_calls, capsys):
    assert main(["-cfg", str(tmp_path / "missing.yaml")]) == 1
    assert "for argument 'Config' is not valid" in capsys.readouterr().err


def test_invalid_log_mode(config_path, logging_calls, capsys):
    assert main(["-cfg", config_path, "-lm", "xml"]) == 1
    assert "value 'xml' for argument 'LogMode' is not valid" in capsys.readouterr().err


def test_bad_config(tmp_path, logging_calls, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("- not a mapping\n", encoding="UTF-8")
    assert main(["-cfg", str(path)]) == 1
    assert "must contain a dictionary" in capsys.readouterr().err


@pytest.mark.parametrize("validator", ["{int_range: 5}", "{matches: '['}"])
def test_config_with_bad_validator_arguments(tmp_path, logging_calls, capsys, validator):
    path = tmp_path / "bad.yaml"
    path.write_text(
        "arguments:\n"
        "  - name: Count\n"
        "    short_call: -c\n"
        "    long_call: --count\n"
        "    help_text: How many\n"
        f"    validator: {validator}\n",
        encoding="UTF-8",
    )
    assert main(["-cfg", str(path)]) == 1
    assert "Invalid arguments for validator factory" in capsys.readouterr().err


def test_own_help(logging_calls, capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "--config" in out
    assert logging_calls == []


def test_config_help(config_path, logging_calls, capsys):
    assert main(["-cfg", config_path, "--", "-hlp"]) == 0
    out = capsys.readouterr().out
    assert "--name" in out
    assert "Who to greet" in out
