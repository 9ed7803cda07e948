"""Tests for the codestamp command line."""

import pytest
from click.testing import CliRunner

from codestamp.cli import cli

SOURCE_JSON = '{\n  "players": ["Stephen Curry", "LeBron James", "Klay Thompson"]\n}\n'


@pytest.fixture
def runner_in_project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "source.json").write_text(SOURCE_JSON, encoding="utf-8")
    return CliRunner(), tmp_path


def test_help(runner_in_project):
    runner, _ = runner_in_project
    help_result = runner.invoke(cli, ["--help"])
    assert help_result.exit_code == 0
    assert "--deps" in help_result.output
    assert "%STAMP%" in help_result.output
    assert runner.invoke(cli, ["-h"]).output == help_result.output


def test_version(runner_in_project):
    runner, _ = runner_in_project
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "codestamp" in result.output


def test_missing_target_argument(runner_in_project):
    runner, _ = runner_in_project
    assert runner.invoke(cli, []).exit_code != 0


def test_target_does_not_exist(runner_in_project):
    runner, _ = runner_in_project
    result = runner.invoke(cli, ["doesNotExist.file"])
    assert result.exit_code == 1
    assert "CodeStamp Error:" in result.output


@pytest.mark.parametrize("option, label", [
    ("-t", "-t, --template"),
    ("--deps", "-d, --deps"),
])
def test_empty_option_value(runner_in_project, option, label):
    runner, _ = runner_in_project
    result = runner.invoke(cli, ["source.json", option, ""])
    assert result.exit_code == 1
    assert f"CodeStamp Error: Received empty value for option `{label}`." in result.output


def test_template_errors(runner_in_project):
    runner, _ = runner_in_project

    result = runner.invoke(cli, ["source.json", "--template", "hello"])
    assert result.exit_code == 1
    assert "CodeStamp: `initial_stamp_placer` didn't return a stamp." in result.output
    assert 'Placer: "hello"' in result.output
    assert 'Placer return value: "hello"' in result.output

    result = runner.invoke(cli, ["source.json", "--template", "%STAMP% %STAMP%"])
    assert result.exit_code == 1
    assert "returned multiple stamps." in result.output


def test_verify_prints_diff_and_fails(runner_in_project):
    runner, tmp_path = runner_in_project
    result = runner.invoke(cli, ["source.json", "-t", "// %STAMP%\\n%CONTENT%"])

    assert result.exit_code == 1
    assert "+ // CodeStamp<<76cdbd71e69511b76d911eaeea731eda>>" in result.output
    assert (tmp_path / "source.json").read_text(encoding="utf-8") == SOURCE_JSON


def test_write_then_verify(runner_in_project):
    runner, tmp_path = runner_in_project
    (tmp_path / "dep.txt").write_text("dep", encoding="utf-8")

    result = runner.invoke(cli, ["source.json", "--deps", "dep.txt,,missing/*.txt", "--write"])
    assert result.exit_code == 0
    assert "Stamped `source.json`" in result.output
    assert (tmp_path / "source.json").read_text(encoding="utf-8").startswith("/* @generated CodeStamp<<")

    result = runner.invoke(cli, ["source.json", "--deps", "dep.txt"])
    assert result.exit_code == 0
    assert "Verified `source.json`" in result.output

    result = runner.invoke(cli, ["source.json"])
    assert result.exit_code == 1


def test_config_file_supplies_defaults(runner_in_project):
    runner, tmp_path = runner_in_project
    (tmp_path / "codestamp.yml").write_text(
        "targets:\n  source.json:\n    template: \"# %STAMP%\\n%CONTENT%\"\n    write: true\n",
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["source.json"])
    assert result.exit_code == 0
    assert (tmp_path / "source.json").read_text(encoding="utf-8").startswith("# CodeStamp<<")


def test_invalid_config_file(runner_in_project):
    runner, tmp_path = runner_in_project
    (tmp_path / "codestamp.yml").write_text("deps: 3\n", encoding="utf-8")

    result = runner.invoke(cli, ["source.json"])
    assert result.exit_code == 1
    assert "'deps' must be a string or a list of strings" in result.output


@pytest.mark.parametrize("args", [
    ["target.bin"],
    ["source.json", "--deps", "target.bin"],
])
def test_non_utf8_file(runner_in_project, args):
    runner, tmp_path = runner_in_project
    (tmp_path / "target.bin").write_bytes(b"\xff\xfe abc")

    result = runner.invoke(cli, args)
    assert result.exit_code == 1
    assert "CodeStamp Error:" in result.output
    assert "utf-8" in result.output
    assert not isinstance(result.exception, UnicodeDecodeError)
