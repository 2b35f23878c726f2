"""Limits and literal constants for ISO 8601 duration handling."""

MAX_COMPONENT_VALUE = 2**63 - 1
"""Largest magnitude accepted for an integer component when parsing."""

ZERO_DURATION_LITERAL = "P0D"
"""Canonical spelling of the empty duration."""

DAYS_PER_WEEK = 7

DURATION_DESIGNATOR = "P"
TIME_DESIGNATOR = "T"
NEGATIVE_SIGN = "-"

# Field name -> unit designator, in output order
DATE_UNITS: dict[str, str] = {
    "years": "Y",
    "months": "M",
    "weeks": "W",
    "days": "D",
}

TIME_UNITS: dict[str, str] = {
    "hours": "H",
    "minutes": "M",
    "seconds": "S",
}
