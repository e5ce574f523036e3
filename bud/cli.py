"""Typer console interface for ``bud``.

``bud [OPTIONS] [FILE]`` reads transaction lines from ``FILE`` (or standard
input when omitted or ``-``), prints a warning for every malformed line and
then the category report. Environment variables (``BUD_WIDTH``,
``BUD_LOG_LEVEL``) may be provided through a local ``.env`` which is loaded
with ``python-dotenv`` before the command line is parsed.

Exit codes: ``0`` on success (malformed lines are warnings only), ``1`` when
the input file cannot be opened or the command line is invalid.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import click
import typer
from dotenv import load_dotenv

from .accumulator import Ordering
from .api import summarize
from .logging_setup import configure_logging, get_logger
from .parsing import decode_lines
from .report import (
    ASCII_GLYPHS,
    ReportOptions,
    chart_width_for,
    default_glyphs,
    render_report,
    terminal_columns,
)

logger = get_logger("bud.cli")

STDIN_PATH = "-"

app = typer.Typer(add_completion=False)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def report_cmd(
    file: Annotated[
        Path | None,
        typer.Argument(
            help="Transaction file, one '<date> <category> <amount>' entry per line.",
            show_default=False,
        ),
    ] = None,
    *,
    inverse: bool = typer.Option(False, "--inverse", "-i", help="Inverse the sign of all input."),
    color: bool = typer.Option(False, "--color", "-c", help="Display with colors."),
    nochart: bool = typer.Option(False, "--nochart", help="Hide the chart, show percentages."),
    noheader: bool = typer.Option(False, "--noheader", help="Hide the header."),
    nototal: bool = typer.Option(False, "--nototal", help="Hide the total."),
    width: int | None = typer.Option(
        None,
        "--width",
        min=1,
        envvar="BUD_WIDTH",
        help="Terminal width used to size the chart (detected when omitted).",
    ),
    order: Ordering = typer.Option(
        Ordering.RECENT_FIRST,
        "--order",
        case_sensitive=False,
        help="Category order: most recently introduced first, or first seen first.",
    ),
    ascii_chart: bool = typer.Option(False, "--ascii", help="Draw the chart with ASCII characters."),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        envvar="BUD_LOG_LEVEL",
        help="Diagnostics level on stderr (e.g. debug); warnings only by default.",
    ),
) -> None:
    """Bud is a simple budget manager based on plain text files.

    If no input FILE is given, it reads from STDIN.
    """

    configure_logging(log_level)

    source = str(file) if file is not None else STDIN_PATH
    try:
        stream = typer.open_file(source, "rb")
    except OSError as e:
        logger.debug("failed to open %s", source, exc_info=True)
        typer.echo(f"Unable to open '{source}': {e.strerror or e}", err=True)
        raise typer.Exit(1) from e

    with stream:
        summary = summarize(decode_lines(stream), inverse=inverse, order=order)

    for warning in summary.warnings:
        typer.echo(warning)

    columns = width if width is not None else terminal_columns()
    options = ReportOptions(
        color=color,
        header=not noheader,
        chart=not nochart,
        total=not nototal,
        chart_width=chart_width_for(columns),
        glyphs=ASCII_GLYPHS if ascii_chart else default_glyphs(),
    )
    logger.debug("terminal columns %d, chart width %d", columns, options.chart_width)

    typer.echo(render_report(summary.buckets, summary.totals, options), nl=False, color=color)


def main(argv: list[str] | None = None) -> int:
    """Console entrypoint for ``bud``; returns the process exit code.

    Runs the Typer app in non-standalone mode so usage errors can be reported
    with exit code ``1`` instead of Click's default ``2``.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    try:
        rv = app(args=argv, prog_name="bud", standalone_mode=False)
    except click.UsageError as e:
        e.show()
        return 1
    except click.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    raise SystemExit(main())
