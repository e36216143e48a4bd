"""CLI entry point: vouchpy.

Subcommands:
    vouchpy name                              # Extension name
    vouchpy registries                        # Supported registry host names
    vouchpy dependencies [DIRECTORY]          # Dependencies from the nearest lockfile
    vouchpy metadata numpy --version 1.18.5   # Registry metadata for a package
"""

from __future__ import annotations

import json
import sys
from dataclasses import asdict
from pathlib import Path

import click

from vouchpy.config import RegistryConfig
from vouchpy.core.logging import setup_logging
from vouchpy.exceptions import VouchError
from vouchpy.extension import PyExtension


def _extension(ctx: click.Context) -> PyExtension:
    return ctx.obj["extension"]


def _echo_json(data: object) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """vouchpy: Python package discovery and PyPI metadata."""
    setup_logging("DEBUG" if verbose else None)
    ctx.ensure_object(dict)
    if "extension" not in ctx.obj:
        ctx.obj["extension"] = PyExtension(RegistryConfig.from_env())


@main.command()
@click.pass_context
def name(ctx: click.Context) -> None:
    """Print the extension name."""
    click.echo(_extension(ctx).name())


@main.command()
@click.pass_context
def registries(ctx: click.Context) -> None:
    """Print the registry host names as JSON."""
    _echo_json(_extension(ctx).registries())


@main.command()
@click.argument(
    "directory",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.pass_context
def dependencies(ctx: click.Context, directory: Path | None) -> None:
    """Print dependencies declared in the nearest lockfile above DIRECTORY."""
    working_directory = (directory or Path.cwd()).resolve()
    try:
        found = _extension(ctx).identify_file_defined_dependencies(working_directory)
    except VouchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _echo_json(
        [
            {
                "path": str(group.path),
                "registry_host_name": group.registry_host_name,
                "dependencies": sorted(
                    (asdict(d) for d in group.dependencies), key=lambda d: d["name"]
                ),
            }
            for group in found
        ]
    )


@main.command()
@click.argument("package_name")
@click.option("--version", "package_version", default=None, help="Package version (default: latest)")
@click.pass_context
def metadata(ctx: click.Context, package_name: str, package_version: str | None) -> None:
    """Print registry metadata for PACKAGE_NAME."""
    try:
        results = _extension(ctx).registries_package_metadata(package_name, package_version)
    except VouchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _echo_json([r.to_dict() for r in results])


if __name__ == "__main__":
    main()
