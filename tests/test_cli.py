import sys
from pathlib import Path

import pytest

from attendees_finder.cli import Cli


@pytest.fixture
def config_path() -> str:
    return str(Path(__file__).parent / "fixtures" / "test.attendees_finder.toml")


def test_cli(config_path: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        sys,
        "argv",
        ["test.py", "--query", "Chri", "--attendees", '["Marc","Christelle"]', "--config", config_path],
    )
    cli = Cli()
    assert cli.query == "Chri"
    assert cli.attendees == ["Marc", "Christelle"]
    assert cli.config == Path(config_path)


def test_cli_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["test.py"])
    cli = Cli()
    assert cli.query == ""
    assert cli.attendees == []
    assert cli.config is None


def test_cli_comma_separated_attendees(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["test.py", "--attendees", "Marc,Christophe"])
    cli = Cli()
    assert cli.attendees == ["Marc", "Christophe"]


def test_cli_ignores_unprefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUERY", "Chri")
    monkeypatch.setenv("ATTENDEES", '["Paul"]')
    monkeypatch.setattr(sys, "argv", ["test.py", "--attendees", "Marc,Christelle"])
    cli = Cli()
    assert cli.query == ""
    assert cli.attendees == ["Marc", "Christelle"]


def test_cli_reads_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ATTENDEES_FINDER_CLI_QUERY", "Chri")
    monkeypatch.setattr(sys, "argv", ["test.py"])
    cli = Cli()
    assert cli.query == "Chri"
