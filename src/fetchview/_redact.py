"""Helpers for safe debug logging.

Request headers may carry bearer tokens and cookies, and response bodies
can be arbitrarily large.
"""

from __future__ import annotations

from collections.abc import Mapping

_SENSITIVE_HEADERS: frozenset[str] = frozenset(
    {
        "authorization",
        "proxy-authorization",
        "cookie",
        "x-api-key",
    }
)


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of *headers* with credential values replaced."""
    return {
        key: "<redacted>" if key.lower() in _SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def truncate_for_log(text: str, *, max_string: int = 512) -> str:
    """Cut *text* to *max_string* characters, marking the cut."""
    if len(text) > max_string:
        return f"{text[:max_string]}…<truncated>"
    return text
