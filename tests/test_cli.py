"""Test the cli module."""

import logging
import sys

import pytest

from extarg import Ref, Set, SetInt, cli, command, usage

USAGE_MSG = "Usage: prog [options] files..."


@pytest.fixture
def table(flag):
    """Build a small table of documented commands."""
    return [
        command("-v", Set(flag), " enable verbose"),
        command("-n", SetInt(Ref(0)), "<count> number of runs"),
    ]


def test_handle_returns_anonymous(table, flag):
    """Test handle returns the anonymous arguments and applies the commands."""
    assert cli.handle(table, USAGE_MSG, ["prog", "a", "-v", "b"]) == ["a", "b"]
    assert flag.value is True


def test_handle_defaults_to_sys_argv(table, flag, faker, monkeypatch):
    """Test handle parses the process command line by default."""
    files = faker.words(nb=3)
    monkeypatch.setattr(sys, "argv", ["prog", "-v", *files])
    assert cli.handle(table) == files
    assert flag.value is True


@pytest.mark.parametrize("help_keyword", ("-help", "--help"))
def test_handle_help_exits_successfully(table, help_keyword, capsys):
    """Test help is printed to stdout followed by a successful exit."""
    with pytest.raises(SystemExit) as exc_info:
        cli.handle(table, USAGE_MSG, ["prog", help_keyword])

    assert exc_info.value.code == 0
    captured = capsys.readouterr()
    assert captured.out == usage(table, USAGE_MSG)
    assert captured.err == ""


@pytest.mark.parametrize(
    "argv,error_message",
    (
        (["prog", "-z"], "prog: unknown option '-z'."),
        (["prog", "-n"], "prog: option '-n' needs an argument."),
        (
            ["/bin/prog", "-n", "many"],
            "prog: wrong argument 'many'; option '-n' expects an integer.",
        ),
    ),
)
def test_handle_error_exits_with_usage(table, argv, error_message, capsys):
    """Test parse errors print the reason and usage to stderr, then exit 2."""
    with pytest.raises(SystemExit) as exc_info:
        cli.handle(table, USAGE_MSG, argv)

    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == f"{error_message}\n{usage(table, USAGE_MSG)}"


def test_handle_without_usage_message(table, capsys):
    """Test handle prints only the option list when no usage message is given."""
    with pytest.raises(SystemExit):
        cli.handle(table, argv=["prog", "--help"])
    assert capsys.readouterr().out == usage(table, "")


def test_handle_logs_exit(table, mocker, caplog):
    """Test handle logs why it exits."""
    mock_sys = mocker.patch.object(cli, "sys")
    caplog.set_level(logging.DEBUG, logger="extarg.cli")

    cli.handle(table, USAGE_MSG, ["prog", "-z"])

    mock_sys.exit.assert_called_once_with(2)
    assert caplog.messages == ["Exiting after parse error at index 1."]
