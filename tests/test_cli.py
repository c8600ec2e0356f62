"""
Tests for the pilot-passport command line.
"""

import pytest
from typer.testing import CliRunner

from pilot_passport.main import app
from pilot_passport.services.errors import Messages

runner = CliRunner()


@pytest.fixture
def db_args(tmp_path):
    """Global options pointing the CLI at a throwaway SQLite file."""
    return ["--database-url", f"sqlite:///{tmp_path / 'passport.db'}"]


def invoke(db_args, *args):
    return runner.invoke(app, [*db_args, *args])


class TestPassportCli:
    """Command line round trips against a SQLite file."""

    def test_init_db(self, db_args):
        result = invoke(db_args, "init-db")
        assert result.exit_code == 0
        assert "Database ready" in result.output

    def test_list_empty(self, db_args):
        result = invoke(db_args, "list")
        assert result.exit_code == 0
        assert "No airports recorded yet" in result.output

    def test_add_then_list_and_show(self, db_args):
        result = invoke(db_args, "add", "KMSN", "Madison", "--date", "2024-05-01", "--rating", "4")
        assert result.exit_code == 0
        assert "Added KMSN" in result.output

        listed = invoke(db_args, "list")
        assert listed.exit_code == 0
        assert "KMSN" in listed.output
        assert "Madison" in listed.output

        shown = invoke(db_args, "show", "KMSN")
        assert shown.exit_code == 0
        assert "2024-05-01" in shown.output

    def test_add_duplicate_fails(self, db_args):
        invoke(db_args, "add", "KMSN", "Madison", "--date", "2024-05-01", "--rating", "4")
        result = invoke(db_args, "add", "KMSN", "Madison", "--date", "2024-05-01", "--rating", "4")

        assert result.exit_code == 1
        assert Messages.DUPLICATE_ID_MSG in result.output

    def test_add_future_date_fails(self, db_args):
        result = invoke(db_args, "add", "KMSN", "Madison", "--date", "2999-01-01", "--rating", "4")
        assert result.exit_code == 1
        assert Messages.INVALID_DATE_MSG in result.output

    def test_add_bad_identifier_fails(self, db_args):
        result = invoke(db_args, "add", "LONGID", "Madison", "--date", "2024-05-01", "--rating", "4")
        assert result.exit_code == 1
        assert Messages.ILLEGAL_ID_MSG in result.output

    def test_edit_and_delete(self, db_args):
        invoke(db_args, "add", "KORD", "Chicago", "--date", "2022-11-15", "--rating", "3")

        edited = invoke(db_args, "edit", "KORD", "Chicago O'Hare", "--date", "2022-11-15", "--rating", "5")
        assert edited.exit_code == 0
        assert "Updated KORD" in edited.output

        deleted = invoke(db_args, "delete", "KORD")
        assert deleted.exit_code == 0
        assert "Removed KORD" in deleted.output

        missing = invoke(db_args, "show", "KORD")
        assert missing.exit_code == 1

    def test_edit_out_of_range_rating_fails(self, db_args):
        invoke(db_args, "add", "KORD", "Chicago", "--date", "2022-11-15", "--rating", "3")
        result = invoke(db_args, "edit", "KORD", "Chicago", "--date", "2022-11-15", "--rating", "6")

        assert result.exit_code == 1
        assert Messages.ILLEGAL_RATING_MSG in result.output

    def test_edit_and_delete_unknown_are_no_ops(self, db_args):
        edited = invoke(db_args, "edit", "ZZZZ", "Nowhere", "--date", "2022-11-15", "--rating", "3")
        assert edited.exit_code == 0
        assert "nothing changed" in edited.output

        deleted = invoke(db_args, "delete", "ZZZZ")
        assert deleted.exit_code == 0
        assert "nothing removed" in deleted.output

    def test_memory_store(self):
        result = runner.invoke(app, ["--memory", "add", "TEST", "Notrealsville", "--date", "1970-01-01", "--rating", "4"])
        assert result.exit_code == 0
        assert "Added TEST" in result.output
