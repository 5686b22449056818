import json

from typer.testing import CliRunner

from gedcom_records.cli.app import app
from gedcom_records.utils import mock_file_path

runner = CliRunner()

SAMPLE = str(mock_file_path("sample.ged"))
ISSUES = str(mock_file_path("with_issues.ged"))
EMPTY = str(mock_file_path("empty.ged"))


def test_stats_command():
    result = runner.invoke(app, ["stats", SAMPLE])
    assert result.exit_code == 0
    assert "Individuals" in result.stdout
    assert "Families" in result.stdout


def test_validate_clean_file():
    result = runner.invoke(app, ["validate", SAMPLE, "--strict"])
    # unknown tags are informational only
    assert result.exit_code == 0
    assert "3 diagnostic(s), 0 warning(s)" in result.stdout


def test_validate_reports_warnings():
    result = runner.invoke(app, ["validate", ISSUES])
    assert result.exit_code == 0
    assert "6 diagnostic(s), 5 warning(s)" in result.stdout


def test_verbose_prints_load_timing():
    quiet = runner.invoke(app, ["validate", SAMPLE])
    loud = runner.invoke(app, ["validate", SAMPLE, "--verbose"])
    assert "Loaded GEDCOM in" not in quiet.stdout
    assert "Loaded GEDCOM in" in loud.stdout


def test_validate_strict_fails_on_warnings():
    result = runner.invoke(app, ["validate", ISSUES, "--strict"])
    assert result.exit_code == 1


def test_fatal_input_exit_code():
    for command in ("stats", "validate", "export", "rewrite"):
        result = runner.invoke(app, [command, EMPTY])
        assert result.exit_code == 2, command


def test_export_to_stdout():
    result = runner.invoke(app, ["export", SAMPLE, "--diagnostics"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["stats"]["INDI"] == 3
    assert len(data["diagnostics"]) == 3


def test_export_to_file(tmp_path):
    out = tmp_path / "sample.json"
    result = runner.invoke(app, ["export", SAMPLE, "--out", str(out), "--pretty"])
    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding="utf-8"))["stats"]["FAM"] == 1


def test_rewrite_to_stdout():
    result = runner.invoke(app, ["rewrite", SAMPLE])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "0 HEAD"
    assert lines[-1] == "0 TRLR"
    assert "1 _UID 1A2B3C4D" in lines


def test_rewrite_to_file_with_wrapping(tmp_path):
    out = tmp_path / "rewritten.ged"
    result = runner.invoke(
        app, ["rewrite", SAMPLE, "--out", str(out), "--max-line-length", "30"]
    )
    assert result.exit_code == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert all(len(line) <= 30 for line in lines)
    assert any(" CONC " in line for line in lines)
