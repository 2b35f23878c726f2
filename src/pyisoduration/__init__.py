"""pyisoduration - Parse, format and apply ISO 8601 durations."""

from __future__ import annotations

import logging

try:
    from pyisoduration._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pyisoduration._bridge import from_timedelta, to_timedelta
from pyisoduration._calendar import shift, unshift
from pyisoduration._duration import Duration
from pyisoduration._errors import (
    ComponentRangeError,
    DecodeError,
    DurationError,
    ElapsedRangeError,
    ParseError,
)
from pyisoduration._formatter import format_duration
from pyisoduration._json import DurationJSONEncoder, dumps, loads
from pyisoduration._logging import configure_logging
from pyisoduration._parser import parse

__all__ = [
    "parse",
    "format_duration",
    "shift",
    "unshift",
    "to_timedelta",
    "from_timedelta",
    "dumps",
    "loads",
    "configure_logging",
    "Duration",
    "DurationJSONEncoder",
    "DurationError",
    "ParseError",
    "ComponentRangeError",
    "DecodeError",
    "ElapsedRangeError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
