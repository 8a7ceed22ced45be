from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories shared by both advisor operations."""

    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT_FAILURE = "transport_failure"
    RESPONSE_PARSE_FAILURE = "response_parse_failure"
    RESPONSE_SHAPE_INVALID = "response_shape_invalid"


class AdvisorError(RuntimeError):
    """Base class for every error raised by sales_advisor."""

    kind: ErrorKind = ErrorKind.TRANSPORT_FAILURE


class MissingCredentialError(AdvisorError):
    """Raised when no API credential is configured."""

    kind = ErrorKind.MISSING_CREDENTIAL


class TransportError(AdvisorError):
    """Raised when the generation service call does not complete."""

    kind = ErrorKind.TRANSPORT_FAILURE


class ResponseParseError(AdvisorError):
    """Raised when the service returns text that is not valid JSON."""

    kind = ErrorKind.RESPONSE_PARSE_FAILURE


class ResponseShapeError(AdvisorError):
    """Raised when parsed JSON lacks the required fields or types."""

    kind = ErrorKind.RESPONSE_SHAPE_INVALID


class SuggestionError(AdvisorError):
    """Single error surfaced by get_variable_suggestions.

    Wraps whatever failed (transport, parsing or shape validation). The
    wrapped exception is chained as __cause__ and its kind is copied here.
    """

    def __init__(self, message: str, *, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class ConfigError(ValueError):
    """Raised when an environment setting cannot be interpreted."""
