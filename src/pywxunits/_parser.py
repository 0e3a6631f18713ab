"""Lark grammar for fixed-format date/time strings.

Accepted shape::

    ["-"] digits "-" digits "-" digits [ SEP digits ":" digits ":" digits [ "Z" ] ]

``SEP`` is any single non-digit character, so ``T``, a space and other
separators all parse. This is a deliberate relaxation of ISO 8601.
The year may carry a leading ``-`` for dates before 0000 (proleptic
Gregorian, astronomical year numbering: year 0 is 1 BC).
Field ranges are checked by the caller, not the grammar.
"""

from __future__ import annotations

from dataclasses import dataclass

from lark import Lark, Token, Transformer

DATETIME_GRAMMAR = r"""
    ?start: datetime

    datetime: date (_SEP time)?
    date: YEAR "-" INT "-" INT
    time: INT ":" INT ":" INT UTC?

    YEAR: /-?[0-9]+/
    INT: /[0-9]+/
    _SEP: /[^0-9]/
    UTC: "Z"
"""


@dataclass(frozen=True)
class DateTimeFields:
    """Raw numeric fields of a parsed date/time string, not yet range-checked."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    utc: bool = False


class _FieldsTransformer(Transformer):
    def date(self, items: list[Token]) -> tuple[int, int, int]:
        year, month, day = items
        return int(year), int(month), int(day)

    def time(self, items: list[Token]) -> tuple[int, int, int, bool]:
        hour, minute, second = items[:3]
        return int(hour), int(minute), int(second), len(items) == 4

    def datetime(self, items: list[tuple]) -> DateTimeFields:
        year, month, day = items[0]
        if len(items) == 1:
            return DateTimeFields(year, month, day)
        hour, minute, second, utc = items[1]
        return DateTimeFields(year, month, day, hour, minute, second, utc)


class DateTimeParser:
    """LALR parser producing :class:`DateTimeFields`.

    The transformer runs inline during parsing, so no parse tree is built.

    Raises:
        lark.exceptions.UnexpectedInput: If the text does not match the grammar.
    """

    def __init__(self) -> None:
        self._lark = Lark(
            DATETIME_GRAMMAR,
            parser="lalr",
            transformer=_FieldsTransformer(),
        )

    def parse(self, text: str) -> DateTimeFields:
        return self._lark.parse(text)
