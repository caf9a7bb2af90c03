"""Application context owning the content layer.

Build one :class:`MovaContext` at startup and hand it (or its stores) to
the consumers that need content.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Any

import aiohttp

from pymova._transport import HttpTransport, Transport
from pymova.backend import BackendProxy
from pymova.config import MovaConfig
from pymova.exceptions import MovaError
from pymova.language import LanguageManager, LanguagePersist, LanguageResolver
from pymova.store import ContentStore
from pymova.stores import ActivitiesStore, InfoPagesStore, NewsStore

_logger = logging.getLogger(__name__)


class MovaContext:
    """Owns the transport, backend proxy, language manager and stores.

    Usage::

        async with MovaContext(config) as ctx:
            await ctx.reload_all()
            pages = ctx.infopages.get_main_pages()
    """

    def __init__(
        self,
        config: MovaConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        language_resolver: LanguageResolver | None = None,
        language_persist: LanguagePersist | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport = transport
        self._language_resolver = language_resolver
        self._language_persist = language_persist
        self._backend: BackendProxy | None = None
        self._languages: LanguageManager | None = None
        self._activities: ActivitiesStore | None = None
        self._infopages: InfoPagesStore | None = None
        self._news: NewsStore | None = None
        self._watcher: asyncio.Task[None] | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> MovaContext:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)

        self._backend = BackendProxy(self._transport)
        self._languages = LanguageManager(
            self._config.default_language,
            resolver=self._language_resolver,
            persist=self._language_persist,
        )
        self._activities = ActivitiesStore(self._backend, self._languages)
        self._infopages = InfoPagesStore(self._backend, self._languages)
        self._news = NewsStore(self._backend, self._languages)

        interval = self._config.availability_poll_interval
        if interval > 0:
            self._watcher = asyncio.create_task(self._backend.watch_availability(interval))
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if self._watcher is not None:
            self._watcher.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._watcher
            self._watcher = None
        for store in self._stores_or_empty():
            await store.join()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def _require(self, value: Any, name: str) -> Any:
        if value is None:
            raise MovaError(f"{name} not initialized. Use 'async with MovaContext(...) as ctx:'")
        return value

    @property
    def config(self) -> MovaConfig:
        return self._config

    @property
    def backend(self) -> BackendProxy:
        return self._require(self._backend, "Backend proxy")

    @property
    def languages(self) -> LanguageManager:
        return self._require(self._languages, "Language manager")

    @property
    def activities(self) -> ActivitiesStore:
        return self._require(self._activities, "Activities store")

    @property
    def infopages(self) -> InfoPagesStore:
        return self._require(self._infopages, "Info pages store")

    @property
    def news(self) -> NewsStore:
        return self._require(self._news, "News store")

    @property
    def stores(self) -> tuple[ContentStore[Any], ...]:
        return (self.activities, self.infopages, self.news)

    def _stores_or_empty(self) -> tuple[ContentStore[Any], ...]:
        if self._activities is None or self._infopages is None or self._news is None:
            return ()
        return (self._activities, self._infopages, self._news)

    async def reload_all(self) -> dict[str, bool]:
        """Reload every store concurrently; maps collection name to success."""
        stores = self.stores
        results = await asyncio.gather(*(store.reload() for store in stores))
        return {store.collection: result for store, result in zip(stores, results, strict=True)}
