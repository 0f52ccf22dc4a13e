#!/usr/bin/env python3
"""
Integration tests for the mtif CLI.

Invokes the click commands with CliRunner against real files.
"""
import json

import yaml

from mtif.pipeline.cli import cli


def invoke(runner, tmp_path, *args):
    return runner.invoke(cli, ["--log-dir", str(tmp_path / "logs"), *args])


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Movable Type export processing" in result.output

    def test_command_help(self, runner):
        for command in ("convert", "dump", "validate"):
            result = runner.invoke(cli, [command, "--help"])
            assert result.exit_code == 0

    def test_logs_written_under_operations(self, runner, tmp_path, example_export_path):
        invoke(runner, tmp_path, "validate", str(example_export_path))
        assert (tmp_path / "logs" / "operations" / "mtif.log").exists()


class TestValidate:
    """Tests for the validate command."""

    def test_valid_file(self, runner, tmp_path, example_export_path):
        result = invoke(runner, tmp_path, "validate", str(example_export_path))
        assert result.exit_code == 0
        assert "Entries: 2" in result.output
        assert "Comments: 3" in result.output
        assert "Pings: 1" in result.output

    def test_invalid_file(self, runner, tmp_path, broken_export):
        result = invoke(runner, tmp_path, "validate", str(broken_export))
        assert result.exit_code == 1
        assert "❌ GrammarMismatchError:" in result.output
        assert "line 2, column 9" in result.output

    def test_missing_date(self, runner, tmp_path):
        source = tmp_path / "nodate.txt"
        source.write_text("AUTHOR: Foo\n-----\n--------\n", encoding="utf-8")
        result = invoke(runner, tmp_path, "validate", str(source))
        assert result.exit_code == 1
        assert "❌ MissingRequiredFieldError: missing required field: date" in result.output

    def test_missing_input(self, runner, tmp_path):
        result = invoke(runner, tmp_path, "validate", str(tmp_path / "nope.txt"))
        assert result.exit_code != 0


class TestDump:
    """Tests for the dump command."""

    def test_json(self, runner, tmp_path, example_export_path):
        result = invoke(runner, tmp_path, "dump", str(example_export_path), "--format", "json")
        assert result.exit_code == 0
        records = json.loads(result.output)
        assert [r["metadata"]["author"] for r in records] == ["Foo Bar", "Baz Quux"]

    def test_yaml_default(self, runner, tmp_path, example_export_path):
        result = invoke(runner, tmp_path, "dump", str(example_export_path))
        assert result.exit_code == 0
        records = list(yaml.safe_load_all(result.output))
        assert len(records) == 2
        assert records[1]["excerpt"].startswith("See, this entry")


class TestConvert:
    """Tests for the convert command."""

    def test_convert_file(self, runner, tmp_path, example_export_path):
        output = tmp_path / "yaml"
        result = invoke(runner, tmp_path, "convert", "-i", str(example_export_path), "-o", str(output))
        assert result.exit_code == 0
        assert "Entries written: 2" in result.output
        assert (output / "2002" / "2002-01-31_a-dummy-title.yaml").exists()

    def test_convert_directory(self, runner, tmp_path, exports_dir):
        output = tmp_path / "yaml"
        result = invoke(runner, tmp_path, "convert", "-i", str(exports_dir), "-o", str(output))
        assert result.exit_code == 0
        assert "Files processed: 2" in result.output

    def test_dry_run_writes_nothing(self, runner, tmp_path, exports_dir):
        output = tmp_path / "yaml"
        result = invoke(
            runner, tmp_path, "convert", "-i", str(exports_dir), "-o", str(output), "--dry-run"
        )
        assert result.exit_code == 0
        assert "DRY RUN" in result.output
        assert "Would process 2 .txt files" in result.output
        assert not output.exists()

    def test_second_run_skips(self, runner, tmp_path, example_export_path):
        args = ["convert", "-i", str(example_export_path), "-o", str(tmp_path / "yaml")]
        invoke(runner, tmp_path, *args)
        result = invoke(runner, tmp_path, *args)
        assert "Entries skipped: 2" in result.output

    def test_broken_file_fails(self, runner, tmp_path, broken_export):
        result = invoke(runner, tmp_path, "convert", "-i", str(broken_export), "-o", str(tmp_path / "yaml"))
        assert result.exit_code == 1
        assert "❌ Mtif2YamlError:" in result.output
