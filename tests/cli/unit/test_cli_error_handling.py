"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from schema_paths.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["export-inventory", "--output", "/tmp/out.xlsx"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["paths", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_negative_max_depth_override_is_rejected(capsys, tmp_path: Path) -> None:
    exit_code = main(["paths", "--config", str(tmp_path / "config.yaml"), "--max-depth", "-1"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--max-depth" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_file_returns_exit_code_one(capsys, tmp_path: Path) -> None:
    exit_code = main(["paths", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_generate_config_refuses_to_overwrite_existing_file(capsys, tmp_path: Path) -> None:
    existing = tmp_path / "config.yaml"
    existing.write_text("keep: me\n", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(existing)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert existing.read_text(encoding="utf-8") == "keep: me\n"
