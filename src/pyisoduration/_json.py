"""JSON encoding of durations as their canonical ISO 8601 text."""

from __future__ import annotations

import json
from typing import Any

from pyisoduration._duration import Duration
from pyisoduration._errors import ERR_MSG_INVALID_JSON, DecodeError
from pyisoduration._formatter import format_duration
from pyisoduration._parser import parse


class DurationJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes Duration values as ISO 8601 strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Duration):
            return format_duration(o)
        return super().default(o)


def dumps(d: Duration) -> str:
    """Serialize a Duration as a JSON string literal, e.g. ``"P1DT2H"``."""
    return json.dumps(format_duration(d))


def loads(data: str | bytes) -> Duration:
    """Decode a JSON string literal holding an ISO 8601 duration.

    Raises:
        DecodeError: If ``data`` is not JSON or does not hold a string.
        ParseError: If the string is not a valid duration.
    """
    try:
        value = json.loads(data)
    except ValueError as e:  # JSONDecodeError, or undecodable bytes
        raise DecodeError(
            ERR_MSG_INVALID_JSON,
            f"malformed JSON document: {e}",
            wrapped=e,
        ) from e
    if not isinstance(value, str):
        raise DecodeError(
            ERR_MSG_INVALID_JSON,
            f"expected a JSON string, got {type(value).__name__}",
        )
    return parse(value)
