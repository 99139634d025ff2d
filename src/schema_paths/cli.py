"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from schema_paths.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from schema_paths.path_enumeration import enumerate_paths
from schema_paths.path_resolution import Unresolvable, explain, resolve
from schema_paths.report_export import build_path_inventory, write_path_inventory_workbook
from schema_paths.schema_model import describe_schema

UNRESOLVABLE_OUTPUT = "unresolvable"


class CliError(Exception):
    """Custom CLI error."""


class UnresolvedPathError(CliError):
    """Raised when a requested path has no shape."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-paths")
@click.option("--verbose", is_flag=True, default=False, help="Log traversal details to stderr.")
def cli(verbose: bool) -> None:
    """Schema-directed path enumeration and resolution utility."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with an example schema and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="paths")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--max-depth",
    "max_depth",
    required=False,
    type=click.IntRange(min=0),
    help="Override traversal.max_depth from the configuration",
)
def list_paths(config_path: str, max_depth: int | None) -> None:
    """Print every path pattern of the configured schema, one per line."""
    try:
        configuration = load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    depth = configuration.traversal.max_depth if max_depth is None else max_depth
    patterns = enumerate_paths(
        configuration.schema_graph,
        depth,
        dictionary_descents=configuration.traversal.dictionary_descents,
    )
    for pattern in sorted(patterns):
        click.echo(pattern)


@cli.command(name="resolve")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--explain",
    "show_attempts",
    is_flag=True,
    default=False,
    help="Also print every interpretation tried while resolving.",
)
@click.argument("path")
def resolve_path(config_path: str, show_attempts: bool, path: str) -> None:
    """Print the shape reachable at PATH."""
    try:
        configuration = load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    descents = configuration.traversal.dictionary_descents
    if show_attempts:
        report = explain(configuration.schema_graph, path, dictionary_descents=descents)
        for attempt in report.attempts:
            status = "ok" if attempt.resolved else "no match"
            click.echo(f"{attempt.rule.value} '{attempt.key}' on {attempt.node}: {status}")
        shape = report.shape
    else:
        shape = resolve(configuration.schema_graph, path, dictionary_descents=descents)
    if isinstance(shape, Unresolvable):
        raise UnresolvedPathError(f"{UNRESOLVABLE_OUTPUT}: {path}")
    click.echo(describe_schema(shape))


@cli.command(name="export-inventory")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the path inventory workbook to write",
)
@click.option(
    "--max-depth",
    "max_depth",
    required=False,
    type=click.IntRange(min=0),
    help="Override traversal.max_depth from the configuration",
)
def export_inventory(config_path: str, output_path: str, max_depth: int | None) -> None:
    """Write a workbook listing every path pattern with an example path and its shape."""
    try:
        configuration = load_configuration(config_path)
        if max_depth is not None:
            configuration = replace(
                configuration, traversal=replace(configuration.traversal, max_depth=max_depth)
            )
        entries = build_path_inventory(configuration.schema_graph, configuration.traversal)
        write_path_inventory_workbook(configuration, entries, output_path)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
