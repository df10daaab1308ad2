"""Tests for the typer command-line interface."""

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from src.bookstore.cli import app
from src.bookstore.core.services import DbSessionService

runner = CliRunner()


@pytest.fixture
def db_args(tmp_path: Path) -> list[str]:
    return ["--database-url", f"sqlite:///{tmp_path / 'cli.db'}"]


def test_init_db(db_args: list[str]):
    result = runner.invoke(app, [*db_args, "init-db"])
    assert result.exit_code == 0
    assert "Database initialized" in result.output


def test_add_get_update_delete(db_args: list[str]):
    added = runner.invoke(app, [*db_args, "add", "--title", "Dune", "--author", "Herbert"])
    assert added.exit_code == 0
    assert "Dune" in added.output
    assert "Herbert" in added.output

    fetched = runner.invoke(app, [*db_args, "get", "0"])
    assert fetched.exit_code == 0
    assert "Dune" in fetched.output

    updated = runner.invoke(
        app, [*db_args, "update", "0", "--title", "Children", "--author", "Herbert"]
    )
    assert updated.exit_code == 0
    assert "Children" in updated.output

    deleted = runner.invoke(app, [*db_args, "delete", "0"])
    assert deleted.exit_code == 0

    missing = runner.invoke(app, [*db_args, "get", "0"])
    assert missing.exit_code == 1
    assert "NotFound" in missing.output


def test_add_with_empty_title_fails(db_args: list[str]):
    result = runner.invoke(app, [*db_args, "add", "--title", "", "--author", "Herbert"])
    assert result.exit_code == 1
    assert "InvalidInput" in result.output


def test_ids_continue_across_invocations(db_args: list[str]):
    runner.invoke(app, [*db_args, "add", "--title", "A", "--author", "B"])
    runner.invoke(app, [*db_args, "delete", "0"])
    runner.invoke(app, [*db_args, "add", "--title", "Emma", "--author", "Austen"])

    assert runner.invoke(app, [*db_args, "get", "0"]).exit_code == 1
    result = runner.invoke(app, [*db_args, "get", "1"])
    assert result.exit_code == 0
    assert "Emma" in result.output


@pytest.mark.parametrize(
    "command",
    [
        ["add", "--title", "Dune", "--author", "Herbert"],
        ["get", "0"],
        ["update", "0", "--title", "Emma", "--author", "Austen"],
        ["delete", "0"],
    ],
)
def test_book_commands_release_the_database(db_args: list[str], command: list[str]):
    with patch.object(
        DbSessionService, "dispose", autospec=True, side_effect=DbSessionService.dispose
    ) as dispose:
        runner.invoke(app, [*db_args, *command])
    assert dispose.call_count == 1
