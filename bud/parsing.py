"""Line parser for plain-text transaction records.

A record line looks like::

    <date> <category> <major>[,.]<minor> [<anything>]

Fields are separated by spaces or tabs only; a line terminator is ordinary
text to the tokenizer, so ``10.\\n`` still has a (zero) minor part. The date is
read but not interpreted. Every line is classified as valid, blank or
malformed; malformed lines never abort a run.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from .currency import Cents, parse_amount

FIELD_SEPARATORS = " \t"
BLANK_CHARS = " \t\r\n"
ENCODING = "utf-8"
WARNING_TEMPLATE = "WARNING: Entry ignored. Parsing error in line {lineno}."


class LineKind(Enum):
    VALID = "valid"
    BLANK = "blank"
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """Outcome of parsing one input line.

    ``date``, ``category`` and ``cents`` are only set for ``LineKind.VALID``.
    """

    lineno: int
    kind: LineKind
    date: str | None = None
    category: str | None = None
    cents: Cents | None = None

    @property
    def warning(self) -> str | None:
        if self.kind is not LineKind.MALFORMED:
            return None
        return WARNING_TEMPLATE.format(lineno=self.lineno)


def decode_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    """Decode ``\\n``-terminated byte lines; a lone ``\\r`` never splits a record."""

    for raw in raw_lines:
        yield raw.decode(ENCODING, errors="replace")


def next_token(text: str, pos: int, separators: str = FIELD_SEPARATORS) -> tuple[str | None, int]:
    """Return the next token at or after ``pos`` and the position after it.

    Leading separators are skipped. The returned position is past the single
    separator that ended the token, so the remainder of the line starts right
    after it. ``None`` means no token is left.
    """

    n = len(text)
    while pos < n and text[pos] in separators:
        pos += 1
    if pos >= n:
        return None, n
    start = pos
    while pos < n and text[pos] not in separators:
        pos += 1
    token = text[start:pos]
    return token, min(pos + 1, n)


def is_blank(line: str) -> bool:
    return line.strip(BLANK_CHARS) == ""


def parse_line(line: str, lineno: int) -> ParsedLine:
    """Tokenize and classify ``line`` (``lineno`` is 1-indexed)."""

    date, pos = next_token(line, 0)
    category, pos = next_token(line, pos)
    cents = parse_amount(line[pos:]) if category is not None else None

    if date is None or category is None or cents is None:
        kind = LineKind.BLANK if is_blank(line) else LineKind.MALFORMED
        return ParsedLine(lineno=lineno, kind=kind)

    return ParsedLine(lineno=lineno, kind=LineKind.VALID, date=date, category=category, cents=cents)


__all__ = [
    "BLANK_CHARS",
    "FIELD_SEPARATORS",
    "LineKind",
    "ParsedLine",
    "WARNING_TEMPLATE",
    "decode_lines",
    "is_blank",
    "next_token",
    "parse_line",
]
