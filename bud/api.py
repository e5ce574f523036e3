"""Read-all-then-report pipeline for ``bud``.

:func:`summarize` consumes every input line before anything is computed for
the report: each line is parsed, valid amounts are fed into a fresh
:class:`~bud.accumulator.CategoryAccumulator`, and the totals are calculated
once at the end. Malformed lines are collected as warnings in input order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .accumulator import Bucket, CategoryAccumulator, Ordering
from .logging_setup import get_logger
from .parsing import LineKind, parse_line
from .totals import Totals, calculate_totals

logger = get_logger("bud.api")


@dataclass(frozen=True, slots=True)
class Summary:
    """Result of one run: ordered buckets, their totals and line warnings."""

    buckets: tuple[Bucket, ...]
    totals: Totals
    warnings: tuple[str, ...] = ()


def accumulate(
    lines: Iterable[str],
    accumulator: CategoryAccumulator,
    *,
    inverse: bool = False,
) -> list[str]:
    """Feed ``lines`` into ``accumulator`` and return the malformed-line warnings.

    Line numbers start at 1. With ``inverse`` every parsed amount is negated
    before it reaches the accumulator.
    """

    warnings: list[str] = []
    count = 0
    for lineno, line in enumerate(lines, start=1):
        count = lineno
        parsed = parse_line(line, lineno)
        if parsed.kind is LineKind.VALID:
            cents = -parsed.cents if inverse else parsed.cents
            accumulator.add_entry(parsed.category, cents)
        elif parsed.kind is LineKind.MALFORMED:
            logger.debug("malformed line %d: %r", lineno, line)
            warnings.append(parsed.warning)
    logger.debug("read %d lines into %d buckets", count, len(accumulator))
    return warnings


def summarize(
    lines: Iterable[str],
    *,
    inverse: bool = False,
    order: Ordering = Ordering.RECENT_FIRST,
) -> Summary:
    """Parse every line, accumulate per category and compute the totals."""

    accumulator = CategoryAccumulator(order=order)
    warnings = accumulate(lines, accumulator, inverse=inverse)
    buckets = tuple(accumulator.buckets())
    return Summary(buckets=buckets, totals=calculate_totals(buckets), warnings=tuple(warnings))


__all__ = ["Summary", "accumulate", "summarize"]
