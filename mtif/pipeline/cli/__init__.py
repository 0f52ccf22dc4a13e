#!/usr/bin/env python3
"""
mtif CLI
--------

Command-line interface for Movable Type export files.

Commands:
    - convert: Export files -> one YAML file per entry
    - dump: Print every entry of an export file as YAML or JSON
    - validate: Parse an export file and report what it contains

Usage:
    # Convert everything under data/exports
    mtif convert

    # One file, overwriting existing YAML
    mtif convert -i blog.txt -o yaml/ -f

    # Inspect
    mtif dump blog.txt --format json
    mtif validate blog.txt
"""
from __future__ import annotations

import click
from pathlib import Path

from mtif.core.paths import LOG_DIR
from mtif.core.cli import setup_logger


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """Movable Type export processing"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "mtif")


# Import and register commands from submodules
from .convert import convert
from .inspection import dump, validate

cli.add_command(convert)
cli.add_command(dump)
cli.add_command(validate)


if __name__ == "__main__":
    cli(obj={})
