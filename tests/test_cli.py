# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from ftt_parser.cli import app
from ftt_parser.utils import mock_file_path

runner = CliRunner()


def test_validate_valid_file() -> None:
    result = runner.invoke(app, ["validate", str(mock_file_path("family_1.ftt"))])
    assert result.exit_code == 0, result.output
    assert "OK" in result.output


def test_validate_fatal_file_exits_nonzero() -> None:
    result = runner.invoke(app, ["validate", str(mock_file_path("circular_lineage.ftt"))])
    assert result.exit_code == 1
    assert "CIRCULAR_LINEAGE" in result.output


def test_validate_strict_fails_on_errors() -> None:
    path = str(mock_file_path("recoverable_errors.ftt"))

    relaxed = runner.invoke(app, ["validate", path])
    assert relaxed.exit_code == 0, relaxed.output

    strict = runner.invoke(app, ["validate", path, "--strict"])
    assert strict.exit_code == 1


def test_validate_missing_file() -> None:
    result = runner.invoke(app, ["validate", "does-not-exist.ftt"])
    assert result.exit_code != 0


def test_export_to_stdout() -> None:
    result = runner.invoke(app, ["export", str(mock_file_path("family_1.ftt"))])
    assert result.exit_code == 0, result.output

    data = json.loads(result.stdout)
    assert data["headers"]["HEAD_TITLE"] == "The Smith Family"
    assert data["records"]["MARY-1952"]["fields"]["UNION"][0]["is_implicit"] is True


def test_export_to_file(tmp_path) -> None:
    out = tmp_path / "out.json"
    result = runner.invoke(
        app, ["export", str(mock_file_path("family_1.ftt")), "--out", str(out), "--pretty"]
    )
    assert result.exit_code == 0, result.output

    text = out.read_text(encoding="utf-8")
    assert text.startswith("{\n  ")
    assert json.loads(text)["fatal"] == []


def test_stats() -> None:
    result = runner.invoke(app, ["stats", str(mock_file_path("family_1.ftt"))])
    assert result.exit_code == 0, result.output
    assert "FTT Statistics" in result.output
    assert "Implicit fields" in result.output
