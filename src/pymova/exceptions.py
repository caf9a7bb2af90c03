"""Custom exception hierarchy for pymova."""

from __future__ import annotations


class MovaError(Exception):
    """Base exception for all pymova errors."""


class MovaConfigError(MovaError):
    """Invalid or missing configuration."""


class MovaTransportError(MovaError):
    """HTTP-level failure (network, timeout, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        path: str = "",
    ) -> None:
        self.status_code = status_code
        self.path = path
        super().__init__(message)


class MovaPayloadError(MovaError):
    """Backend returned JSON that does not match the expected schema.

    Treated exactly like a transport failure by the stores: the previous
    snapshot is kept and nobody is notified.
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)
