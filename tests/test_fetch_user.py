"""Tests for the fetch_user example script."""

from typer.testing import CliRunner

import fetch_user
import pyoresult as pr
from pyoresult import result

runner = CliRunner()


def test_fetch_known_user() -> None:
    """Test the known id returns an Ok user."""
    res = fetch_user.fetch_user(1)
    assert result.is_ok(res)
    assert result.unwrap(res).name == "John"


def test_fetch_unknown_user() -> None:
    """Test an unknown id returns an Err with the lookup path."""
    res = fetch_user.fetch_user(7)
    assert res == pr.Err(fetch_user.UserError("User not found", "/users/7"))


def test_cli_known_user() -> None:
    """Test the command prints the user name twice and succeeds."""
    outcome = runner.invoke(fetch_user.app, ["--user-id", "1"])
    assert outcome.exit_code == 0
    assert outcome.output.count("John") == 2


def test_cli_unknown_user() -> None:
    """Test the command reports the error, falls back to the default user and fails."""
    outcome = runner.invoke(fetch_user.app, ["--user-id", "3"])
    assert outcome.exit_code == 1
    assert "User not found (/users/3)" in outcome.output
    assert "Default" in outcome.output
