"""
Inspection Commands
-------------------

Read-only commands for looking at export files.

Commands:
    - dump: Print all entries as YAML or JSON
    - validate: Parse and report entry, comment and ping counts
"""
from __future__ import annotations

import json

import click
import yaml
from pathlib import Path

from mtif.core.logging_manager import MTIFLogger, handle_cli_error
from mtif.dataclasses.mtif_entry import MTIFEntry


@click.command()
@click.argument("input", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    show_default=True,
    help="Output format",
)
@click.option("--fix-encoding", is_flag=True, help="Repair mojibake before parsing")
@click.pass_context
def dump(ctx: click.Context, input: str, output_format: str, fix_encoding: bool) -> None:
    """Print every entry of INPUT to stdout."""
    logger: MTIFLogger = ctx.obj["logger"]

    try:
        entries = MTIFEntry.from_file(Path(input), fix_encoding=fix_encoding)
        records = [entry.to_dict() for entry in entries]
        logger.log_operation("dump", {"input": input, "entries": len(records)})

        if output_format == "json":
            click.echo(json.dumps(records, indent=2, ensure_ascii=False))
        else:
            click.echo(
                yaml.safe_dump_all(
                    records,
                    allow_unicode=True,
                    sort_keys=False,
                    default_flow_style=False,
                ),
                nl=False,
            )

    except Exception as e:
        handle_cli_error(ctx, e, "dump", additional_context={"input": input})


@click.command()
@click.argument("input", type=click.Path(exists=True, dir_okay=False))
@click.option("--fix-encoding", is_flag=True, help="Repair mojibake before parsing")
@click.pass_context
def validate(ctx: click.Context, input: str, fix_encoding: bool) -> None:
    """
    Check that INPUT parses as an export file.

    Exits with status 1 and the first error on failure.
    """
    logger: MTIFLogger = ctx.obj["logger"]

    try:
        entries = MTIFEntry.from_file(Path(input), fix_encoding=fix_encoding)
        comments = sum(len(entry.comments) for entry in entries)
        pings = sum(len(entry.pings) for entry in entries)
        logger.log_operation(
            "validate",
            {"input": input, "entries": len(entries), "comments": comments, "pings": pings},
        )

        click.echo(f"✅ {Path(input).name} is valid")
        click.echo(f"  Entries: {len(entries)}")
        click.echo(f"  Comments: {comments}")
        click.echo(f"  Pings: {pings}")

    except Exception as e:
        handle_cli_error(ctx, e, "validate", additional_context={"input": input})


__all__ = ["dump", "validate"]
