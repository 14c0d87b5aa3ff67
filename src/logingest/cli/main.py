"""
Main CLI entry point for logingest.

A developer tool that loads submission JSON files into a fresh store
and prints the normalized result.
"""

import click
from rich.console import Console

from logingest import __version__

console = Console()
error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="logingest")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.pass_context
def cli(ctx: click.Context, quiet: bool) -> None:
    """
    logingest - Normalize log submissions into canonical logs

    Reads unstructured log and structured event submissions from JSON
    files and shows the canonical logs they produce.

    Examples:

    \b
        logingest normalize submission.json
        logingest normalize --kind events --output json events.json
        logingest normalize --epoch-unit us *.json
    """
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = console
    ctx.obj["error_console"] = error_console


@cli.command()
@click.argument("files", nargs=-1, type=click.Path(exists=True), required=True)
@click.option(
    "--kind", "-k",
    type=click.Choice(["auto", "unstructured", "events"]),
    default="auto",
    help="Submission kind (default: auto, by 'entries'/'events' key)"
)
@click.option(
    "--output", "-o", "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)"
)
@click.option(
    "--epoch-unit", "-u",
    type=click.Choice(["ms", "us"]),
    help="Resolution of ts_epoch_microseconds values (default: ms)"
)
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML settings file"
)
@click.pass_context
def normalize(
    ctx: click.Context,
    files: tuple[str, ...],
    kind: str,
    output_format: str,
    epoch_unit: str | None,
    config_path: str | None,
) -> None:
    """
    Normalize submission files and display the stored logs.

    Each file holds one submission object or a list of them.

    Examples:

    \b
        logingest normalize unstructured.json
        logingest normalize --kind events udm.json
        logingest normalize --output json a.json b.json
    """
    from logingest.cli.commands import normalize_command

    exit_code = normalize_command(
        files=files,
        kind=kind,
        output_format=output_format,
        epoch_unit=epoch_unit,
        config_path=config_path,
        quiet=ctx.obj.get("quiet", False),
        console=ctx.obj["console"],
        error_console=ctx.obj["error_console"],
    )
    ctx.exit(exit_code)


if __name__ == "__main__":
    cli()
