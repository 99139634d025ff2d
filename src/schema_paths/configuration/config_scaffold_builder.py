"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Path configuration template for schema-paths.
# Replace the example schema before running paths, resolve or export-inventory.

schema:
  # Provide either an inline schema document or a schema document path, not both.
  inline: |
    schema:
      type: object
      fields:
        name: string
        child: {ref: Node}
      optional: [child]
    definitions:
      Node:
        type: object
        fields:
          name: string
          child: {ref: Node}
        optional: [child]
  # path: "<REQUIRED>"

traversal:
  # Object and dictionary levels explored while listing paths.
  max_depth: 5
  # Wildcard dictionary keys that may be followed by a nested path.
  dictionary_descents: 1
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with an example schema and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
