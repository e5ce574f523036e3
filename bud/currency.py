"""Amount parsing: textual major/minor pairs to signed integer cents.

Amounts are kept as ``int`` cents end to end so accumulation never drifts.
Conversion of each part is deliberately lenient (C ``atoi`` rules): leading
whitespace and an optional sign, then leading digits; anything else counts as
zero. The sign of an amount is carried by the major part only, so ``-0.50``
parses as ``+50`` cents.
"""

from __future__ import annotations

import re

type Cents = int

# Major part ends at the first currency separator; minor part is the next
# space/tab-delimited token, so a bare line terminator still counts as one.
# Leading separators are skipped.
_AMOUNT_RE = re.compile(r"[,.]*(?P<major>[^,.]+)[,.][ \t]*(?P<minor>[^ \t]+)")
_LEADING_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def to_int(text: str) -> int:
    """Convert the leading integer of ``text``; ``0`` when there is none."""

    m = _LEADING_INT_RE.match(text)
    return int(m.group(1)) if m else 0


def to_cents(major: str, minor: str) -> Cents:
    """Combine a major and a minor part into signed cents.

    ``minor`` is an unsigned magnitude added away from zero: it is added when
    the major total is non-negative and subtracted otherwise. No range check
    is applied, ``"5"`` is five cents and ``"500"`` is five hundred.
    """

    total = to_int(major) * 100
    if total >= 0:
        total += to_int(minor)
    else:
        total -= to_int(minor)
    return total


def split_amount(text: str) -> tuple[str, str] | None:
    """Split an amount field into ``(major, minor)`` or ``None`` if incomplete.

    >>> split_amount("-12.50 rent")
    ('-12', '50')
    >>> split_amount("12") is None
    True
    """

    m = _AMOUNT_RE.match(text)
    if m is None:
        return None
    return m.group("major"), m.group("minor")


def parse_amount(text: str) -> Cents | None:
    parts = split_amount(text)
    if parts is None:
        return None
    return to_cents(*parts)


def format_cents(cents: Cents) -> str:
    """Render cents as a fixed-point decimal with two places (``-800.00``)."""

    return f"{cents / 100.0:.2f}"


__all__ = ["Cents", "format_cents", "parse_amount", "split_amount", "to_cents", "to_int"]
