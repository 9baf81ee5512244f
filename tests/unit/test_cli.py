"""Tests for the bookstore command line."""

import json

import pytest
from typer.testing import CliRunner

from bookstore.cli import app
from bookstore.runtime.config.config_data import ConfigData
from bookstore.runtime.context import with_context

runner = CliRunner()


@pytest.fixture
def file_database(tmp_path):
    """Point the CLI at a SQLite file so data survives between commands."""
    override = ConfigData()
    override.database.url = f"sqlite:///{tmp_path / 'books.db'}"
    with with_context(override):
        yield


class TestCli:
    def test_init_db(self, file_database):
        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        assert "Database tables created" in result.output

    def test_load_then_list(self, file_database, tmp_path, power_up, new_book):
        books_file = tmp_path / "books.json"
        books_file.write_text(json.dumps([power_up, new_book]))

        loaded = runner.invoke(app, ["load", str(books_file)])
        listed = runner.invoke(app, ["list"])

        assert loaded.exit_code == 0, loaded.output
        assert "Loaded 2 book(s)" in loaded.output
        assert listed.exit_code == 0
        assert power_up["isbn"] in listed.output
        assert new_book["isbn"] in listed.output

    def test_load_reports_invalid_records(self, file_database, tmp_path, power_up):
        books_file = tmp_path / "books.json"
        books_file.write_text(json.dumps([power_up, {"isbn": "1234567890"}]))

        result = runner.invoke(app, ["load", str(books_file)])

        assert result.exit_code == 1
        assert 'instance requires property "author"' in result.output
        assert "1 of 2 book(s) rejected" in result.output

    def test_load_rejects_non_array(self, file_database, tmp_path, power_up):
        books_file = tmp_path / "books.json"
        books_file.write_text(json.dumps(power_up))

        result = runner.invoke(app, ["load", str(books_file)])

        assert result.exit_code == 1
        assert "Expected a JSON array" in result.output

    def test_load_reports_oversized_integer(self, file_database, tmp_path, power_up, new_book):
        new_book["pages"] = 10**30
        books_file = tmp_path / "books.json"
        books_file.write_text(json.dumps([power_up, new_book]))

        loaded = runner.invoke(app, ["load", str(books_file)])
        listed = runner.invoke(app, ["list"])

        assert loaded.exit_code == 1
        assert "instance.pages must be less than or equal to" in loaded.output
        assert "1 of 2 book(s) rejected" in loaded.output
        assert power_up["isbn"] in listed.output
        assert new_book["isbn"] not in listed.output
