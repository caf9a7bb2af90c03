"""Backend proxy: swallow-and-log fetches plus a readiness signal."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any

from pymova._constants import PING_PATH
from pymova._transport import Transport
from pymova.events import EventChannel, Subscription
from pymova.exceptions import MovaError, MovaTransportError

_logger = logging.getLogger(__name__)


class BackendProxy:
    """Access layer in front of a :class:`Transport`.

    Fetch failures never propagate: they are logged and reported as
    ``None``.  The proxy also tracks whether the backend is reachable and
    notifies subscribers each time it becomes ready again, so stores that
    were created while the backend was down still get populated.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport
        self._ready = False
        self._on_ready: EventChannel[None] = EventChannel("backend-ready")

    @property
    def is_ready(self) -> bool:
        return self._ready

    def subscribe(self, callback: Callable[[], None]) -> Subscription:
        """Call *callback* once per transition into the ready state."""
        return self._on_ready.subscribe(lambda _: callback())

    def mark_ready(self) -> None:
        if self._ready:
            return
        self._ready = True
        _logger.info("Backend is ready")
        self._on_ready.publish(None)

    def mark_unavailable(self) -> None:
        if self._ready:
            _logger.info("Backend became unavailable")
        self._ready = False

    async def fetch_json(self, path: str, params: Mapping[str, str] | None = None) -> Any | None:
        """GET *path* and return the decoded JSON, or ``None`` on any failure."""
        try:
            body = await self._transport.get_json(path, params)
        except MovaTransportError as exc:
            _logger.warning("Fetching %s failed: %s", path, exc)
            self.mark_unavailable()
            return None
        except MovaError as exc:
            _logger.warning("Fetching %s failed: %s", path, exc)
            return None
        self.mark_ready()
        return body

    async def check_availability(self) -> bool:
        """Handshake with the backend ping endpoint and update readiness."""
        try:
            await self._transport.ping(PING_PATH)
        except MovaError as exc:
            _logger.debug("Availability check failed: %s", exc)
            self.mark_unavailable()
            return False
        self.mark_ready()
        return True

    async def watch_availability(self, interval: float) -> None:
        """Handshake every *interval* seconds while the backend is not ready.

        Runs until cancelled.
        """
        while True:
            if not self._ready:
                await self.check_availability()
            await asyncio.sleep(interval)
