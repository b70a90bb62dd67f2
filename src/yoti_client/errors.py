"""Error classes for the Yoti client."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .transport import YotiResponse


class YotiError(Exception):
    """Base error for Yoti client operations."""


class RequestError(YotiError):
    """Raised when the API answers with a non-2xx status.

    The message is the upstream status text (e.g. ``"Bad Request"``).
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response: YotiResponse | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class SchemaError(YotiError, TypeError):
    """Raised when a response field is missing or has the wrong type."""


class CredentialError(YotiError, ValueError):
    """Raised when key material cannot be loaded or used."""


class ActivityDetailsError(YotiError):
    """Raised when a profile share did not complete successfully."""

    def __init__(self, message: str, outcome: str | None = None):
        super().__init__(message)
        self.outcome = outcome
