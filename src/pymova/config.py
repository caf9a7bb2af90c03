"""Client configuration for pymova."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pymova._constants import DEFAULT_LANGUAGE, DEFAULT_REQUEST_TIMEOUT, USER_AGENT
from pymova.exceptions import MovaConfigError


@dataclasses.dataclass(frozen=True)
class MovaConfig:
    """Content layer configuration.

    Parameters
    ----------
    base_url : str
        Content backend base URL (e.g. ``"https://cms.example.org"``).
        Trailing slashes are removed.
    default_language : str
        Language code used until the active language is resolved, and
        whenever resolution fails.
    access_token : str or None
        Optional static bearer token sent with every request.
    request_timeout : float
        Total timeout of a single HTTP request in seconds.
    availability_poll_interval : float
        Seconds between backend handshakes while the backend is
        unreachable.  ``0`` disables the background watcher.
    user_agent : str
        User agent sent to the backend.
    """

    base_url: str
    default_language: str = DEFAULT_LANGUAGE
    access_token: str | None = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    availability_poll_interval: float = 0.0
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        base_url = (self.base_url or "").strip().rstrip("/")
        if not base_url:
            raise MovaConfigError("base_url must be non-empty")
        if not base_url.startswith(("http://", "https://")):
            raise MovaConfigError(f"base_url must be an http(s) URL, got {base_url!r}")
        language = (self.default_language or "").strip().lower()
        if not language:
            raise MovaConfigError("default_language must be non-empty")
        if self.request_timeout <= 0:
            raise MovaConfigError("request_timeout must be positive")
        if self.availability_poll_interval < 0:
            raise MovaConfigError("availability_poll_interval must not be negative")
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "base_url", base_url)
        object.__setattr__(self, "default_language", language)

    @classmethod
    def from_env(cls, **overrides: Any) -> MovaConfig:
        """Create configuration from environment variables.

        Reads ``MOVA_BASE_URL`` and the optional ``MOVA_*`` variables.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        MovaConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "MOVA_BASE_URL": "base_url",
            "MOVA_DEFAULT_LANGUAGE": "default_language",
            "MOVA_ACCESS_TOKEN": "access_token",
            "MOVA_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # Numeric fields, handle separately
        _ENV_FLOAT_MAP = {
            "MOVA_REQUEST_TIMEOUT": "request_timeout",
            "MOVA_AVAILABILITY_POLL_INTERVAL": "availability_poll_interval",
        }
        for env_key, field_name in _ENV_FLOAT_MAP.items():
            val = env.get(env_key)
            if val is None or field_name in overrides:
                continue
            try:
                config_kwargs[field_name] = float(val)
            except ValueError as exc:
                raise MovaConfigError(f"{env_key} must be a number, got {val!r}") from exc

        config_kwargs.update(overrides)

        if "base_url" not in config_kwargs:
            raise MovaConfigError("MOVA_BASE_URL is not set")

        return cls(**config_kwargs)
