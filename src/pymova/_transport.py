"""HTTP transport for the content backend."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pymova._redact import redact_for_log
from pymova.config import MovaConfig
from pymova.exceptions import MovaTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the backend proxy.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, path: str, params: Mapping[str, str] | None = None) -> Any:
        ...

    async def ping(self, path: str) -> None:
        ...


class HttpTransport:
    """GET-only transport backed by an aiohttp session."""

    def __init__(self, config: MovaConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def _build_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        if self._config.access_token:
            headers["authorization"] = f"Bearer {self._config.access_token}"
        return headers

    async def _get_body(self, path: str, params: Mapping[str, str] | None) -> tuple[bytes, str]:
        """GET ``base_url + path`` and return the raw body with its charset."""
        url = f"{self._config.base_url}{path}"
        _logger.debug("GET %s params=%s", url, dict(params or {}))

        try:
            async with self._http.get(
                url,
                params=dict(params) if params else None,
                headers=self._build_headers(),
                timeout=self._timeout,
            ) as resp:
                body = await resp.read()
                if not 200 <= resp.status < 300:
                    raise MovaTransportError(
                        f"HTTP {resp.status} from {path}: {body[:200].decode('utf-8', 'replace')}",
                        status_code=resp.status,
                        path=path,
                    )
                return body, resp.charset or "utf-8"
        except MovaTransportError:
            raise
        except TimeoutError as exc:
            raise MovaTransportError(f"Request to {path} timed out", path=path) from exc
        except aiohttp.ClientError as exc:
            raise MovaTransportError(f"Request to {path} failed: {exc}", path=path) from exc

    async def get_json(self, path: str, params: Mapping[str, str] | None = None) -> Any:
        """GET ``base_url + path`` and return the decoded JSON body.

        Raises
        ------
        MovaTransportError
            On network errors, timeouts, non-2xx responses and bodies that
            are not JSON text in the declared charset.
        """
        raw, encoding = await self._get_body(path, params)
        try:
            body = json.loads(raw.decode(encoding))
        except (UnicodeDecodeError, LookupError) as exc:
            raise MovaTransportError(f"Invalid JSON from {path}: body is not {encoding} text", path=path) from exc
        except json.JSONDecodeError as exc:
            preview = raw[:200].decode(encoding, "replace")
            raise MovaTransportError(f"Invalid JSON from {path}: {preview}", path=path) from exc

        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("Response %s: %s", path, redact_for_log(body))
        return body

    async def ping(self, path: str) -> None:
        """GET *path* and ignore the body; raises like :meth:`get_json`."""
        await self._get_body(path, None)
