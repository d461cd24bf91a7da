"""
Tests for the gridfilter command line.

Commands run through click's CliRunner against small CSV and JSON files.
"""

import json
import os

import pytest
from click.testing import CliRunner

from gridfilter.__main__ import cli
from gridfilter.cli.output import OutputFormatter
from gridfilter.cli.utils import load_records, parse_where_items
from gridfilter.exceptions import DataLoadError


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path, restore_root_logger):
    """Run every command in an empty directory without GRIDFILTER_ variables."""
    for key in list(os.environ):
        if key.startswith("GRIDFILTER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def people_csv(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text("age,name\n25,Tom\n9,Foobar\n40,foo\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def numbers_json(tmp_path):
    path = tmp_path / "numbers.json"
    path.write_text(json.dumps([{"n": 5}, {"n": 50}, {"n": 500}]), encoding="utf-8")
    return str(path)


# =============================================================================
# FILTER COMMAND
# =============================================================================

class TestFilterCommand:
    """gridfilter filter PATH --where COLUMN=KEYWORD"""

    def test_ids_output(self, runner, people_csv):
        result = runner.invoke(cli, [
            "filter", people_csv, "-w", "age=>10", "-w", "name=foo", "--format", "ids", "-q",
        ])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["2"]

    def test_no_filters_prints_every_row(self, runner, people_csv):
        result = runner.invoke(cli, ["filter", people_csv, "-f", "ids", "-q"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["0", "1", "2"]

    def test_range_on_json_numbers(self, runner, numbers_json):
        result = runner.invoke(cli, ["filter", numbers_json, "-w", "n=10:100", "-f", "json", "-q"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [{"n": 50}]

    def test_csv_output(self, runner, people_csv):
        result = runner.invoke(cli, ["filter", people_csv, "-w", "age=<25", "-f", "csv", "-q"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["age,name", "9,Foobar"]

    def test_table_output(self, runner, people_csv):
        result = runner.invoke(cli, ["filter", people_csv, "-w", "age==9", "-q"])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0].split() == ["age", "name"]
        assert lines[2].split() == ["9", "Foobar"]

    def test_limit(self, runner, people_csv):
        result = runner.invoke(cli, ["filter", people_csv, "-f", "ids", "--limit", "1", "-q"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["0"]

    def test_strategy_option(self, runner, tmp_path):
        path = tmp_path / "titles.csv"
        path.write_text("title\nCat show\nBig cat sanctuary\nDog walk\n", encoding="utf-8")
        default = runner.invoke(cli, ["filter", str(path), "-w", "title=s cat", "-f", "ids", "-q"])
        fuzzy = runner.invoke(cli, [
            "filter", str(path), "-w", "title=s cat", "--strategy", "fuzzy", "-f", "ids", "-q",
        ])
        assert default.output.splitlines() == []
        assert fuzzy.output.splitlines() == ["0", "1"]

    def test_strategy_from_environment(self, runner, tmp_path):
        path = tmp_path / "titles.csv"
        path.write_text("title\nCat show\nconcatenate show\n", encoding="utf-8")
        result = runner.invoke(
            cli,
            ["filter", str(path), "-w", "title=cat show", "-f", "ids", "-q"],
            env={"GRIDFILTER_FILTER__MATCH_STRATEGY": "tokens"},
        )
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["0"]

    def test_unknown_column_fails(self, runner, people_csv):
        result = runner.invoke(cli, ["filter", people_csv, "-w", "height=>1"])
        assert result.exit_code == 1
        assert "Unknown column: height" in result.output

    def test_malformed_where_is_usage_error(self, runner, people_csv):
        result = runner.invoke(cli, ["filter", people_csv, "-w", "age"])
        assert result.exit_code == 2
        assert "Invalid filter" in result.output

    def test_unsupported_file_type_fails(self, runner, tmp_path):
        path = tmp_path / "people.txt"
        path.write_text("age\n1\n", encoding="utf-8")
        result = runner.invoke(cli, ["filter", str(path)])
        assert result.exit_code == 1
        assert "Unsupported file type" in result.output

    def test_missing_file_is_usage_error(self, runner, tmp_path):
        result = runner.invoke(cli, ["filter", str(tmp_path / "missing.csv")])
        assert result.exit_code == 2


# =============================================================================
# CLASSIFY AND CONFIG COMMANDS
# =============================================================================

class TestClassifyCommand:
    """gridfilter classify KEYWORD"""

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["classify", ">25", "--format", "json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "keyword": ">25",
            "kind": "greaterThan",
            "operand": "25",
            "description": "> 25",
        }

    def test_range_operand_is_list(self, runner):
        result = runner.invoke(cli, ["classify", "1:10", "-f", "json"])
        assert json.loads(result.output)["operand"] == ["1", "10"]

    def test_table_output(self, runner):
        result = runner.invoke(cli, ["classify", "new york", "--strategy", "tokens"])
        assert result.exit_code == 0, result.output
        assert "  kind: tokens" in result.output.splitlines()


class TestConfigCommand:
    """gridfilter config show"""

    def test_show_defaults(self, runner):
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["filter"]["match_strategy"] == "default"
        assert data["logging"]["level"] == "INFO"

    def test_show_reads_yaml(self, runner, isolated):
        (isolated / "gridfilter.yaml").write_text("filter:\n  match_strategy: fuzzy\n", encoding="utf-8")
        result = runner.invoke(cli, ["config", "show"])
        assert json.loads(result.output)["filter"]["match_strategy"] == "fuzzy"


# =============================================================================
# UTILITIES
# =============================================================================

class TestParseWhereItems:
    """COLUMN=KEYWORD parsing."""

    def test_first_equals_separates(self):
        assert parse_where_items(["age=>10", "n==5"]) == {"age": ">10", "n": "=5"}

    def test_empty_keyword_allowed(self):
        assert parse_where_items(["name="]) == {"name": ""}

    def test_last_keyword_wins(self):
        assert parse_where_items(["a=1", "a=2"]) == {"a": "2"}

    @pytest.mark.parametrize("item", ["age", "=5", " =5"])
    def test_invalid_items(self, item):
        with pytest.raises(ValueError):
            parse_where_items([item])


class TestLoadRecords:
    """CSV, JSON and NDJSON loading."""

    def test_ndjson(self, tmp_path):
        path = tmp_path / "rows.ndjson"
        path.write_text('{"a": 1}\n\n{"a": 2}\n', encoding="utf-8")
        assert load_records(path) == [{"a": 1}, {"a": 2}]

    def test_json_must_be_list_of_objects(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text('{"a": 1}', encoding="utf-8")
        with pytest.raises(DataLoadError):
            load_records(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(DataLoadError) as exc_info:
            load_records(path)
        assert exc_info.value.file_type == ".json"


class TestOutputFormatter:
    """Table rendering details."""

    def test_long_cells_truncated_and_none_blank(self, capsys):
        OutputFormatter().print_table([{"a": "x" * 60, "b": None}], columns=["a", "b"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["a", "b"]
        assert lines[2].split() == ["x" * 47 + "..."]

    def test_quiet_suppresses_messages(self, capsys):
        OutputFormatter(quiet=True).print_message("3 of 10 rows")
        assert capsys.readouterr().err == ""
