"""Public interface for the ``bud`` package.

Symbol re-exports only; the console entrypoint lives in :mod:`bud.cli`.
"""

from .accumulator import Bucket, CategoryAccumulator, Ordering
from .api import Summary, accumulate, summarize
from .currency import format_cents, parse_amount, split_amount, to_cents
from .parsing import LineKind, ParsedLine, parse_line
from .report import ReportOptions, chart_width_for, percentage, render_chart, render_report
from .totals import Totals, calculate_totals

__all__ = [
    # Pipeline
    "summarize",
    "accumulate",
    "Summary",
    # Parsing
    "parse_line",
    "parse_amount",
    "split_amount",
    "to_cents",
    "format_cents",
    "LineKind",
    "ParsedLine",
    # Accumulation
    "CategoryAccumulator",
    "Bucket",
    "Ordering",
    "Totals",
    "calculate_totals",
    # Rendering
    "ReportOptions",
    "render_report",
    "render_chart",
    "percentage",
    "chart_width_for",
]
