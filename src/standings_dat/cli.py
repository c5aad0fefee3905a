"""Command-line interface for standings-dat."""

from pathlib import Path
from typing import Optional

import click
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import get_settings
from .domain.exceptions import StandingsDatError
from .logging_config import configure_logging
from .services import compute_standings, create_conversion_service

console = Console()

INPUT_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.group()
@click.version_option(version=__version__)
def cli():
    """standings-dat - convert judge standings pages to TestSys .dat files."""
    configure_logging(get_settings().log_level)


@cli.command()
@click.option("--file", "file_path", type=INPUT_FILE, required=True, help="Standings page HTML.")
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write .dat here instead of stdout.",
)
@click.option("--verify", is_flag=True, help="Check standings survive a .dat round trip.")
def convert(file_path: Path, output_path: Optional[Path], verify: bool):
    """Convert a standings page to .dat."""
    service = create_conversion_service()
    html = _read_text(file_path)

    try:
        data = service.html_to_dat(html, verify=verify)
    except StandingsDatError as e:
        raise click.ClickException(str(e)) from e

    if output_path is None:
        click.echo(data, nl=False)
    else:
        output_path.write_text(data, encoding=get_settings().encoding)
        logger.info(f"Wrote {output_path}")


@cli.command()
@click.option("--file", "file_path", type=INPUT_FILE, required=True, help="Input file.")
@click.option(
    "--format",
    "input_format",
    type=click.Choice(["html", "dat"]),
    default="html",
    show_default=True,
    help="Input file format.",
)
def standings(file_path: Path, input_format: str):
    """Show standings computed from a standings page or .dat file."""
    service = create_conversion_service()
    text = _read_text(file_path)

    try:
        if input_format == "dat":
            contest = service.parse_dat(text)
        else:
            contest = service.parse_html(text)
    except StandingsDatError as e:
        raise click.ClickException(str(e)) from e

    rows = compute_standings(contest)
    if not rows:
        console.print("[yellow]No contestants found.[/yellow]")
        return

    table = Table(
        title=f"Standings ({len(contest.problem_names)} problems)",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Name", style="white")
    table.add_column("Solved", style="green", justify="right")
    table.add_column("Penalty (min)", style="yellow", justify="right")

    for rank, row in enumerate(rows, start=1):
        table.add_row(str(rank), row.name, str(row.solved), str(row.penalty // 60))

    console.print(table)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding=get_settings().encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Failed to read {path}: {e}") from e


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
