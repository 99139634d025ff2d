"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from openpyxl import load_workbook
from schema_paths.cli import cli, main
from schema_paths.report_export import PATHS_SHEET_NAME, SCHEMA_SHEET_NAME

_SCHEMA_DOCUMENT = {
    "schema": {
        "type": "object",
        "fields": {
            "title": "string",
            "items": {
                "type": "array",
                "items": {
                    "type": "object",
                    "fields": {
                        "id": "number",
                        "tags": {"type": "array", "items": "string"},
                    },
                },
            },
            "labels": {"type": "dictionary", "values": "string"},
        },
    }
}


def _write_config(tmp_path: Path, max_depth: int = 5) -> Path:
    config = {
        "schema": {"inline": json.dumps(_SCHEMA_DOCUMENT)},
        "traversal": {"max_depth": max_depth, "dictionary_descents": 1},
    }
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def test_paths_command_prints_sorted_patterns(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["paths", "--config", str(config_path)])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines == sorted(lines)
    assert set(lines) == {
        "items",
        "items[*]",
        "items[*].id",
        "items[*].tags",
        "items[*].tags[*]",
        "labels",
        "labels.*",
        "title",
    }


def test_paths_command_max_depth_override_truncates(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["paths", "--config", str(config_path), "--max-depth", "1"])

    assert result.exit_code == 0
    lines = set(result.output.splitlines())
    assert "items[*]" in lines
    assert "items[*].id" not in lines


def test_resolve_command_prints_shape(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["resolve", "--config", str(config_path), "items[0].tags[1]"])

    assert result.exit_code == 0
    assert result.output.strip() == "string"


def test_resolve_command_explain_lists_rule_attempts(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(
        cli, ["resolve", "--config", str(config_path), "--explain", "labels.en"]
    )

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[-1] == "string"
    assert any(line.startswith("nested_explicit_key 'labels.en'") for line in lines)
    assert any(line.startswith("index_signature_key 'en'") for line in lines)


def test_resolve_command_reports_unresolvable_path(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path)

    exit_code = main(["resolve", "--config", str(config_path), "items.id"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "unresolvable: items.id" in captured.err


def test_export_inventory_command_writes_workbook(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    output_path = tmp_path / "reports" / "inventory.xlsx"

    result = runner.invoke(
        cli,
        ["export-inventory", "--config", str(config_path), "--output", str(output_path)],
    )

    assert result.exit_code == 0
    assert str(output_path.resolve()) in result.output
    workbook = load_workbook(output_path)
    assert workbook.sheetnames == [PATHS_SHEET_NAME, SCHEMA_SHEET_NAME]
    rows = list(workbook[PATHS_SHEET_NAME].iter_rows(min_row=2, values_only=True))
    assert ("items[*].tags[*]", "items[0].tags[0]", "string") in rows
    assert ("labels.*", "labels.key", "string") in rows


def test_generate_config_output_feeds_paths_command(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "config.yaml"

    generated = runner.invoke(cli, ["generate-config", "--output", str(config_path)])
    listed = runner.invoke(cli, ["paths", "--config", str(config_path), "--max-depth", "2"])

    assert generated.exit_code == 0
    assert listed.exit_code == 0
    assert set(listed.output.splitlines()) == {"child", "child.child", "child.name", "name"}


def test_export_inventory_max_depth_override_is_recorded(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    output_path = tmp_path / "inventory.xlsx"

    result = runner.invoke(
        cli,
        [
            "export-inventory",
            "--config",
            str(config_path),
            "--output",
            str(output_path),
            "--max-depth",
            "1",
        ],
    )

    assert result.exit_code == 0
    workbook = load_workbook(output_path)
    patterns = {row[0] for row in workbook[PATHS_SHEET_NAME].iter_rows(min_row=2, values_only=True)}
    metadata = dict(workbook[SCHEMA_SHEET_NAME].iter_rows(values_only=True))
    assert "items[*].id" not in patterns
    assert metadata["max_depth"] == 1
