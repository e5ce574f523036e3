"""Per-category accumulation of signed totals.

The accumulator is the single owner of the running totals. Lookups are by
exact, case-sensitive category name. Report order defaults to the most
recently introduced category first; ``Ordering.FIRST_SEEN`` lists categories
in the order they first appeared instead.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from .currency import Cents


class Ordering(StrEnum):
    RECENT_FIRST = "recent"
    FIRST_SEEN = "first-seen"


@dataclass(frozen=True, slots=True)
class Bucket:
    """Read-only snapshot of one category and its signed total in cents."""

    category: str
    total_cents: Cents


class CategoryAccumulator:
    """Mapping from category name to running signed total.

    Totals live in a plain ``dict`` (insertion ordered, so it also records the
    first-seen order). Iteration yields :class:`Bucket` snapshots; callers
    cannot mutate totals except through :meth:`add_entry`.
    """

    __slots__ = ("_order", "_totals")

    def __init__(self, order: Ordering = Ordering.RECENT_FIRST) -> None:
        self._order = Ordering(order)
        self._totals: dict[str, Cents] = {}

    @property
    def order(self) -> Ordering:
        return self._order

    def add_entry(self, category: str, cents: Cents) -> None:
        """Add ``cents`` to ``category``, creating its bucket on first sight.

        Existing buckets keep their position; only a new category changes the
        order.
        """

        self._totals[category] = self._totals.get(category, 0) + cents

    def buckets(self) -> list[Bucket]:
        names = list(self._totals)
        if self._order is Ordering.RECENT_FIRST:
            names.reverse()
        return [Bucket(name, self._totals[name]) for name in names]

    def total_for(self, category: str) -> Cents:
        """Return the total for ``category``; raises ``KeyError`` if unseen."""

        return self._totals[category]

    def grand_total(self) -> Cents:
        return sum(self._totals.values())

    def __iter__(self) -> Iterator[Bucket]:
        return iter(self.buckets())

    def __len__(self) -> int:
        return len(self._totals)

    def __contains__(self, category: object) -> bool:
        return category in self._totals

    def __repr__(self) -> str:  # pragma: no cover - trivial repr
        return f"CategoryAccumulator(order={self._order.value!r}, buckets={len(self)})"


__all__ = ["Bucket", "CategoryAccumulator", "Ordering"]
