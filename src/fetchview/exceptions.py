"""Custom exception hierarchy for fetchview."""

from __future__ import annotations


class FetchViewError(Exception):
    """Base exception for all fetchview errors."""


class FetchViewConfigError(FetchViewError):
    """Invalid or missing configuration."""


class FetchViewTransportError(FetchViewError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class FetchFailedError(FetchViewError):
    """Response arrived but its body is not a usable payload."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class FetchViewActionError(FetchViewError):
    """A dispatched value is not a recognised action."""
