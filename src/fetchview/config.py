"""Client configuration for fetchview."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from fetchview._constants import BASE_URL, DEFAULT_TIMEOUT, ENDPOINT, USER_AGENT
from fetchview.exceptions import FetchViewConfigError


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise FetchViewConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class FetchViewConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Scheme and host of the data service, without a trailing slash.
    endpoint : str
        Path of the fixed resource fetched on every trigger.
    timeout : float
        Total request timeout in seconds, enforced by the HTTP client.
    auth_token : str or None
        Optional bearer token sent as ``Authorization`` header.
        Never written to logs.
    user_agent : str
        ``User-Agent`` header value.
    """

    base_url: str = BASE_URL
    endpoint: str = ENDPOINT
    timeout: float = DEFAULT_TIMEOUT
    auth_token: str | None = None
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if not self.base_url.strip():
            raise FetchViewConfigError("base_url must be non-empty")
        if self.timeout <= 0:
            raise FetchViewConfigError(f"timeout must be positive, got {self.timeout}")
        # Normalise the join point so ``url`` never doubles or drops a slash.
        object.__setattr__(self, "base_url", self.base_url.strip().rstrip("/"))
        endpoint = self.endpoint.strip()
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        object.__setattr__(self, "endpoint", endpoint)

    @property
    def url(self) -> str:
        """Absolute URL of the fetched resource."""
        return f"{self.base_url}{self.endpoint}"

    @classmethod
    def from_env(cls, **overrides: Any) -> FetchViewConfig:
        """Create configuration from environment variables.

        Reads the optional ``FETCHVIEW_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.
            ``None`` values are ignored so unset CLI flags fall through.

        Returns
        -------
        FetchViewConfig
            Populated configuration.
        """
        env = os.environ
        overrides = {k: v for k, v in overrides.items() if v is not None}

        _ENV_CONFIG_MAP = {
            "FETCHVIEW_BASE_URL": "base_url",
            "FETCHVIEW_ENDPOINT": "endpoint",
            "FETCHVIEW_AUTH_TOKEN": "auth_token",
            "FETCHVIEW_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # timeout is numeric, handle separately
        timeout_env = env.get("FETCHVIEW_TIMEOUT")
        if timeout_env is not None and "timeout" not in overrides:
            config_kwargs["timeout"] = _env_float("FETCHVIEW_TIMEOUT", timeout_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
