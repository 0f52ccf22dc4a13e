"""
Conversion Commands
-------------------

Commands for turning export files into YAML.

Commands:
    - convert: Export files to per-entry YAML (txt → yaml)
"""
from __future__ import annotations

import click
from pathlib import Path

from mtif.core.paths import EXPORT_DIR, YAML_DIR
from mtif.core.logging_manager import MTIFLogger, handle_cli_error
from mtif.pipeline.mtif2yaml import convert_directory, convert_file


@click.command()
@click.option(
    "-i",
    "--input",
    type=click.Path(),
    default=str(EXPORT_DIR),
    help="Export file, or directory of .txt export files",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=str(YAML_DIR),
    help="Output directory for YAML files",
)
@click.option("-f", "--force", is_flag=True, help="Force overwrite existing files")
@click.option("--dry-run", is_flag=True, help="Preview changes without modifying files")
@click.option(
    "--fix-encoding",
    is_flag=True,
    help="Repair mojibake (e.g. 'Ã©' for 'é') before parsing",
)
@click.pass_context
def convert(
    ctx: click.Context,
    input: str,
    output: str,
    force: bool,
    dry_run: bool,
    fix_encoding: bool,
) -> None:
    """
    Convert export files to YAML, one file per entry.

    Files are written to OUTPUT/<YYYY>/<YYYY-MM-DD>_<basename>.yaml.
    """
    logger: MTIFLogger = ctx.obj["logger"]
    input_path = Path(input)

    if dry_run:
        click.echo("📝 Converting exports to YAML (DRY RUN - no files will be modified)...")
        click.echo()

        if input_path.is_dir():
            export_files = sorted(input_path.rglob("*.txt"))
            click.echo(f"Would process {len(export_files)} .txt files:")
            for export_file in export_files:
                click.echo(f"  • {export_file.relative_to(input_path)}")
        elif input_path.is_file():
            click.echo("Would process 1 file:")
            click.echo(f"  • {input_path.name}")
        else:
            click.echo(f"Input not found: {input_path}")

        click.echo(f"\nOutput directory: {output}")
        click.echo(f"Force overwrite: {force}")
        click.echo("\n💡 Run without --dry-run to execute conversion")
        return

    click.echo("📝 Converting exports to YAML...")

    try:
        if input_path.is_dir():
            stats = convert_directory(
                input_dir=input_path,
                output_dir=Path(output),
                force_overwrite=force,
                logger=logger,
                fix_encoding=fix_encoding,
            )
        else:
            stats = convert_file(
                input_path=input_path,
                output_dir=Path(output),
                force_overwrite=force,
                logger=logger,
                fix_encoding=fix_encoding,
            )

        click.echo("\n✅ Conversion complete:")
        click.echo(f"  Files processed: {stats.files_processed}")
        click.echo(f"  Entries parsed: {stats.entries_parsed}")
        click.echo(f"  Entries written: {stats.entries_written}")
        if stats.entries_skipped:
            click.echo(f"  Entries skipped: {stats.entries_skipped}")
        if stats.errors:
            click.echo(f"  Errors: {stats.errors}")
        click.echo(f"  Duration: {stats.duration():.2f}s")

    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "convert",
            additional_context={"input": input, "output": output},
        )


__all__ = ["convert"]
