"""Exceptions raised by the PRIDE Archive project client."""

from typing import Any, Optional


class PrideProjectsError(Exception):
    """Base class for all errors raised by this package."""


class ValidationError(PrideProjectsError):
    """A record field does not satisfy the record invariants."""

    def __init__(self, field: str, reason: str, value: Any = None):
        self.field = field
        self.reason = reason
        self.value = value
        super().__init__(f"'{field}' {reason}")


class MappingError(PrideProjectsError):
    """
    A JSON document from the service could not be turned into a record.

    The decoded document is kept in ``payload`` for diagnostics; the
    underlying error is available as ``__cause__``.
    """

    def __init__(self, message: str, payload: Any = None):
        self.payload = payload
        super().__init__(message)


class RemoteAccessError(PrideProjectsError):
    """The service could not be reached or returned an unusable response."""

    def __init__(
        self,
        endpoint: str,
        cause: Any,
        status_code: Optional[int] = None,
    ):
        self.endpoint = endpoint
        self.cause = cause
        self.status_code = status_code
        if status_code is not None:
            message = f"GET {endpoint} failed with HTTP {status_code}: {cause}"
        else:
            message = f"GET {endpoint} failed: {cause}"
        super().__init__(message)
