"""ISO 8601 duration parser built on a Lark LALR grammar."""

from __future__ import annotations

import math

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from pyisoduration._constants import MAX_COMPONENT_VALUE
from pyisoduration._duration import Duration
from pyisoduration._errors import (
    ERR_MSG_EMPTY_DURATION,
    ERR_MSG_INVALID_DURATION,
    ERR_MSG_OUT_OF_RANGE,
    ComponentRangeError,
    ParseError,
)

# Every group is optional but their order is fixed. No %ignore directive:
# whitespace anywhere in the token is a syntax error.
DURATION_GRAMMAR = r"""
    duration: SIGN? "P" years? months? weeks? days? time_part?
    time_part: "T" hours? minutes? seconds?

    years: INT "Y"
    months: INT "M"
    weeks: INT "W"
    days: INT "D"
    hours: INT "H"
    minutes: INT "M"
    seconds: INT FRACTION? "S"

    SIGN: "-"
    INT: /[0-9]+/
    FRACTION: /\.[0-9]+/
"""

_lark = Lark(DURATION_GRAMMAR, start="duration", parser="lalr")


class _ComponentCollector(Transformer):
    """Flatten a duration parse tree into (field name, digits) pairs."""

    def years(self, children: list[Token]) -> tuple[str, str]:
        return "years", str(children[0])

    def months(self, children: list[Token]) -> tuple[str, str]:
        return "months", str(children[0])

    def weeks(self, children: list[Token]) -> tuple[str, str]:
        return "weeks", str(children[0])

    def days(self, children: list[Token]) -> tuple[str, str]:
        return "days", str(children[0])

    def hours(self, children: list[Token]) -> tuple[str, str]:
        return "hours", str(children[0])

    def minutes(self, children: list[Token]) -> tuple[str, str]:
        return "minutes", str(children[0])

    def seconds(self, children: list[Token]) -> tuple[str, str]:
        # Integer digits plus the optional ".fraction" token
        return "seconds", "".join(str(tok) for tok in children)

    def time_part(self, children: list) -> list[tuple[str, str]]:
        return list(children)

    def duration(self, children: list) -> tuple[bool, list[tuple[str, str]]]:
        negative = False
        parts: list[tuple[str, str]] = []
        for child in children:
            if isinstance(child, Token) and child.type == "SIGN":
                negative = True
            elif isinstance(child, list):
                parts.extend(child)
            else:
                parts.append(child)
        return negative, parts


_collector = _ComponentCollector()


def _to_int(name: str, digits: str, text: str) -> int:
    try:
        value = int(digits)
    except ValueError as e:
        # Digit strings beyond the interpreter's int conversion limit
        raise ComponentRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"{name} component of {text!r} cannot be converted",
            wrapped=e,
        ) from e
    if value > MAX_COMPONENT_VALUE:
        raise ComponentRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"{name} component of {text!r} exceeds {MAX_COMPONENT_VALUE}",
        )
    return value


def _to_float(name: str, digits: str, text: str) -> float:
    value = float(digits)
    if not math.isfinite(value):
        raise ComponentRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"{name} component of {text!r} is not representable as a float",
        )
    return value


def parse(text: str, *, allow_empty: bool = True) -> Duration:
    """Parse an ISO 8601 duration literal into a Duration.

    Args:
        text: The literal, e.g. ``P1Y2M3DT4H5M6.5S`` or ``-PT1H``.
        allow_empty: Accept ``P`` and ``PT``, which carry no components, as
            the zero duration. When False they raise ParseError.

    Returns:
        The parsed Duration. A leading ``-`` negates every present component.

    Raises:
        ParseError: If the text does not match the duration grammar.
        ComponentRangeError: If a numeric component is out of range.
    """
    try:
        tree = _lark.parse(text)
    except UnexpectedInput as e:
        raise ParseError(
            ERR_MSG_INVALID_DURATION,
            f"cannot parse duration {text!r}: {e}",
            wrapped=e,
        ) from e

    negative, parts = _collector.transform(tree)
    if not parts and not allow_empty:
        raise ParseError(
            ERR_MSG_EMPTY_DURATION,
            f"duration {text!r} has no components",
        )

    sign = -1 if negative else 1
    fields: dict[str, int | float] = {}
    for name, digits in parts:
        if name == "seconds":
            fields[name] = sign * _to_float(name, digits, text)
        else:
            fields[name] = sign * _to_int(name, digits, text)
    return Duration(**fields)
