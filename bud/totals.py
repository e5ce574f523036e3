"""Positive/negative totals derived from the full bucket set."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from .accumulator import Bucket
from .currency import Cents


class Totals(NamedTuple):
    """Sums of non-negative and of strictly negative bucket totals."""

    positive: Cents
    negative: Cents

    @property
    def grand(self) -> Cents:
        return self.positive + self.negative


def calculate_totals(buckets: Iterable[Bucket]) -> Totals:
    """Partition bucket totals by sign in one pass; zero counts as positive."""

    positive = 0
    negative = 0
    for bucket in buckets:
        if bucket.total_cents >= 0:
            positive += bucket.total_cents
        else:
            negative += bucket.total_cents
    return Totals(positive=positive, negative=negative)


__all__ = ["Totals", "calculate_totals"]
