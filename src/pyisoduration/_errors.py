"""Exception hierarchy for ISO 8601 duration handling."""


class DurationError(Exception):
    """Base exception for duration errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details (offending input, wrapped cause) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class ParseError(DurationError):
    """Raised when text does not conform to the duration grammar."""


class ComponentRangeError(ParseError):
    """Raised when a numeric component cannot be represented."""


class DecodeError(DurationError):
    """Raised when a serialized container is malformed."""


class ElapsedRangeError(DurationError, OverflowError):
    """Raised when a time component exceeds the range of ``timedelta``."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_DURATION = "input does not conform to the duration grammar"
ERR_MSG_OUT_OF_RANGE = "numeric component out of range"
ERR_MSG_EMPTY_DURATION = "duration has no components"
ERR_MSG_INVALID_JSON = "invalid JSON duration value"
ERR_MSG_ELAPSED_OUT_OF_RANGE = "time component exceeds the elapsed-time range"
