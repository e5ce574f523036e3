"""Fixed-width text report: one row per category plus an optional total.

Layout (column widths are fixed)::

    CATEGORY          EXPENSE  PERCENT
    ──────────────────────────────────────
    Food                15.50 ▕▆▆▆▆▆▆▆▆▆▆▏
    ──────────────────────────────────────
    TOTAL               15.50 ▕          ▏

The last column is either a numeric percentage or a bar chart. Percentages
are relative to the positive total. The total row shows the negative total
relative to the positive total (spending against income), not the share of
the net amount.

With a positive total of zero the division follows IEEE rules: any non-zero
amount renders as ``inf`` (a full chart), a zero amount as ``nan`` (an empty
chart).
"""

from __future__ import annotations

import math
import shutil
import sys
from collections.abc import Iterable

import typer
from pydantic import BaseModel, ConfigDict, field_validator

from .accumulator import Bucket
from .currency import Cents, format_cents
from .logging_setup import get_logger
from .totals import Totals

logger = get_logger("bud.report")

MAX_CHART_SIZE = 100
CATEGORY_WIDTH = 15
AMOUNT_WIDTH = 9
PERCENT_WIDTH = 8
# Category and amount columns plus the two separating spaces.
CHART_OFFSET = CATEGORY_WIDTH + 1 + AMOUNT_WIDTH + 1
ANSI_RESET = "\x1b[0m"
TOTAL_LABEL = "TOTAL"


class ChartGlyphs(BaseModel):
    """Characters used for the horizontal rule and the bar chart."""

    model_config = ConfigDict(strict=True, frozen=True, extra="forbid")

    rule: str
    filler: str
    border_left: str
    border_right: str
    empty: str = " "


UNICODE_GLYPHS = ChartGlyphs(rule="─", filler="▆", border_left="▕", border_right="▏")
ASCII_GLYPHS = ChartGlyphs(rule="-", filler="#", border_left="|", border_right="|")


def default_glyphs() -> ChartGlyphs:
    return ASCII_GLYPHS if sys.platform == "win32" else UNICODE_GLYPHS


class ReportOptions(BaseModel):
    """Display switches for :func:`render_report`."""

    model_config = ConfigDict(strict=True, frozen=True, extra="forbid")

    color: bool = False
    header: bool = True
    chart: bool = True
    total: bool = True
    chart_width: int = MAX_CHART_SIZE
    glyphs: ChartGlyphs = UNICODE_GLYPHS

    @field_validator("chart_width")
    @classmethod
    def _chart_width_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("chart_width must be at least 1")
        return v

    @property
    def rule_width(self) -> int:
        if self.chart:
            return CHART_OFFSET + self.chart_width + 2
        return CHART_OFFSET + PERCENT_WIDTH


def terminal_columns() -> int:
    """Best-effort terminal width (honours ``COLUMNS``; 80 when unknown)."""

    return shutil.get_terminal_size(fallback=(80, 24)).columns


def chart_width_for(columns: int) -> int:
    """Chart cells that fit next to the fixed columns, between 1 and 100."""

    return max(1, min(MAX_CHART_SIZE, columns - CHART_OFFSET - 2))


def percentage(cents: Cents, positive_total: Cents) -> float:
    """``abs(cents * 100 / positive_total)`` with IEEE results for a zero divisor."""

    if positive_total == 0:
        return math.nan if cents == 0 else math.inf
    return abs(cents * 100.0 / positive_total)


def filled_cells(pct: float, width: int) -> int:
    if math.isnan(pct):
        return 0
    pct = min(100.0, pct)
    return min(width, math.floor(pct * width / 100.0))


def render_chart(pct: float, width: int, glyphs: ChartGlyphs = UNICODE_GLYPHS) -> str:
    """Bracketed bar of ``width`` cells; never overflows past 100%."""

    filled = filled_cells(pct, width)
    return (
        glyphs.border_left
        + glyphs.filler * filled
        + glyphs.empty * (width - filled)
        + glyphs.border_right
    )


def _chart_or_percent(pct: float, options: ReportOptions) -> str:
    if options.chart:
        return render_chart(pct, options.chart_width, options.glyphs)
    return f"{pct:{PERCENT_WIDTH}.2f}"


def _row(label: str, cents: Cents, pct: float, options: ReportOptions) -> str:
    label_col = f"{label:<{CATEGORY_WIDTH}.{CATEGORY_WIDTH}}"
    amount_col = f"{format_cents(cents):>{AMOUNT_WIDTH}}"
    return f"{label_col} {amount_col} {_chart_or_percent(pct, options)}"


def _colorize(line: str, cents: Cents) -> str:
    if cents > 0:
        return typer.style(line, fg=typer.colors.GREEN)
    if cents < 0:
        return typer.style(line, fg=typer.colors.RED)
    return line


def render_report(
    buckets: Iterable[Bucket],
    totals: Totals,
    options: ReportOptions | None = None,
) -> str:
    """Render the full report as text ending in a newline.

    Rows follow the iteration order of ``buckets``. When ``options.color`` is
    set, every colored row carries its own reset and a final reset is
    appended after the last line.
    """

    options = options or ReportOptions()
    rule = options.glyphs.rule * options.rule_width
    lines: list[str] = []

    if options.header:
        header = (
            f"{'CATEGORY':<{CATEGORY_WIDTH}.{CATEGORY_WIDTH}} "
            f"{'EXPENSE':>{AMOUNT_WIDTH}} {'PERCENT':>{PERCENT_WIDTH}}"
        )
        lines.append(header)
        lines.append(rule)

    for bucket in buckets:
        pct = percentage(bucket.total_cents, totals.positive)
        line = _row(bucket.category, bucket.total_cents, pct, options)
        if options.color:
            line = _colorize(line, bucket.total_cents)
        lines.append(line)

    if options.total:
        lines.append(rule)
        pct = percentage(totals.negative, totals.positive)
        lines.append(_row(TOTAL_LABEL, totals.grand, pct, options))

    logger.debug(
        "rendered %d lines (chart=%s, width=%d)", len(lines), options.chart, options.chart_width
    )

    text = "".join(line + "\n" for line in lines)
    if options.color:
        text += ANSI_RESET
    return text


__all__ = [
    "ANSI_RESET",
    "ASCII_GLYPHS",
    "CHART_OFFSET",
    "ChartGlyphs",
    "MAX_CHART_SIZE",
    "ReportOptions",
    "UNICODE_GLYPHS",
    "chart_width_for",
    "default_glyphs",
    "filled_cells",
    "percentage",
    "render_chart",
    "render_report",
    "terminal_columns",
]
