"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from schema_paths.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from schema_paths.configuration.loader import load_configuration
from schema_paths.schema_model import Reference


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Path configuration template" in scaffold
    assert "schema:" in scaffold
    assert "inline: |" in scaffold
    assert "# path:" in scaffold
    assert "traversal:" in scaffold
    assert "max_depth: 5" in scaffold
    assert "dictionary_descents: 1" in scaffold
    assert "<REQUIRED>" in scaffold


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "config.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()
    assert "traversal:" in output_path.read_text(encoding="utf-8")


def test_written_placeholder_configuration_loads(tmp_path: Path) -> None:
    output_path = write_placeholder_configuration(tmp_path / "config.yaml")

    configuration = load_configuration(output_path)

    assert configuration.traversal.max_depth == 5
    assert configuration.traversal.dictionary_descents == 1
    assert "Node" in configuration.schema_graph.definitions
    assert configuration.schema_graph.root.field("child").schema == Reference("Node")


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "config.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
