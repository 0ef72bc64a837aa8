"""Tests for CLI interface."""

import json
from pathlib import Path

import pytest

from passthrough_helper.cli import run_cli


@pytest.fixture
def fixtures_path():
    return Path(__file__).parent / "fixtures"


class TestCLI:
    def given_store_file(self, fixtures_path):
        self.path = str(fixtures_path / "store.py")
        self.args = [self.path]

    def given_named_type(self, fixtures_path):
        self.path = str(fixtures_path / "klass.py")
        self.args = [self.path, "--type", "Other"]

    def given_method_filter(self, fixtures_path):
        self.path = str(fixtures_path / "store.py")
        self.args = [self.path, "-m", "clear", "-m", "get_value"]

    def given_file_without_classes(self, fixtures_path):
        self.path = str(fixtures_path / "no_classes.py")
        self.args = [self.path]

    def given_missing_file(self, fixtures_path):
        self.path = str(fixtures_path / "missing.py")
        self.args = [self.path]

    def given_no_args(self):
        self.args = []

    def when_cli_is_run_capturing_output(self, capsys):
        self.exit_code = run_cli(self.args)
        self.captured = capsys.readouterr()

    def then_exit_code_is_zero(self):
        assert self.exit_code == 0

    def then_exit_code_is_nonzero(self):
        assert self.exit_code != 0

    def then_stdout_lists_methods(self, expected_type, expected_names):
        output = json.loads(self.captured.out)
        assert output["file"] == self.path
        assert output["type"] == expected_type
        assert [m["name"] for m in output["methods"]] == expected_names

    def then_stderr_mentions(self, text):
        assert text in self.captured.err.lower()

    def test_outputs_methods_as_json(self, fixtures_path, capsys):
        """CLI prints the first class's methods as JSON."""
        self.given_store_file(fixtures_path)
        self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_zero()
        self.then_stdout_lists_methods(
            "Store", ["get_value", "put_value", "has_value", "clear"]
        )

    def test_method_descriptor_fields(self, fixtures_path, capsys):
        self.given_store_file(fixtures_path)
        self.when_cli_is_run_capturing_output(capsys)
        put_value = json.loads(self.captured.out)["methods"][1]
        assert put_value == {"name": "put_value", "num_parameters": 2, "is_void": True}

    def test_selects_type_by_name(self, fixtures_path, capsys):
        self.given_named_type(fixtures_path)
        self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_zero()
        self.then_stdout_lists_methods("Other", ["other_method"])

    def test_filters_methods_keeping_declaration_order(self, fixtures_path, capsys):
        self.given_method_filter(fixtures_path)
        self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_zero()
        self.then_stdout_lists_methods("Store", ["get_value", "clear"])

    def test_missing_type_returns_nonzero(self, fixtures_path, capsys):
        self.given_file_without_classes(fixtures_path)
        self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_nonzero()
        self.then_stderr_mentions("no matching class")

    def test_missing_file_returns_nonzero(self, fixtures_path, capsys):
        self.given_missing_file(fixtures_path)
        self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_nonzero()
        assert self.captured.out == ""

    def test_returns_nonzero_for_missing_path(self, capsys):
        """CLI returns non-zero exit code when the path argument is missing."""
        self.given_no_args()
        self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_nonzero()
        self.then_stderr_mentions("usage")
