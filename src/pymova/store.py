"""In-memory content store.

One store instance owns the cached collection of one content kind.  The
snapshot is an immutable tuple that is replaced wholesale on every
successful reload, so observers and readers only ever see a complete
collection.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import ClassVar, Generic, TypeVar, cast

from pymova.backend import BackendProxy
from pymova.events import EventChannel, Subscription
from pymova.exceptions import MovaPayloadError
from pymova.language import LanguageManager
from pymova.models import ContentItem, parse_collection

_logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=ContentItem)


class StoreState(StrEnum):
    EMPTY = "empty"
    LOADING = "loading"
    READY = "ready"


class LanguageFilter(StrEnum):
    """Where the collection gets narrowed down to the active language."""

    SERVER = "server"
    CLIENT = "client"


class ContentStore(Generic[ItemT]):
    """Cache and synchronization unit for one remote collection.

    Subclasses set :attr:`collection`, :attr:`item_model` and optionally
    :attr:`query` and :attr:`language_filter`.

    A store reloads itself whenever the active language changes and
    whenever the backend becomes ready.  Reloads are serialized, and a
    result fetched for a language that is no longer active is dropped.
    """

    collection: ClassVar[str]
    item_model: ClassVar[type[ContentItem]]
    query: ClassVar[Mapping[str, str]] = {}
    language_filter: ClassVar[LanguageFilter] = LanguageFilter.CLIENT

    def __init__(self, backend: BackendProxy, languages: LanguageManager) -> None:
        self._backend = backend
        self._languages = languages
        self._items: tuple[ItemT, ...] = ()
        self._state = StoreState.EMPTY
        self._lock = asyncio.Lock()
        self._scheduled: set[asyncio.Task[bool]] = set()
        self._updates: EventChannel[tuple[ItemT, ...]] = EventChannel(self.collection)
        self._language_subscription = languages.on_change.subscribe(lambda _: self._schedule_reload("language changed"))
        self._backend_subscription = backend.subscribe(lambda: self._schedule_reload("backend ready"))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.collection} state={self._state} items={len(self._items)}>"

    @property
    def path(self) -> str:
        return f"/items/{self.collection}"

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state is StoreState.LOADING

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    def get(self) -> tuple[ItemT, ...]:
        """Current snapshot in backend order."""
        return self._items

    def get_by_id(self, item_id: str | int) -> ItemT | None:
        key = str(item_id)
        for item in self._items:
            if item.id == key:
                return item
        return None

    def get_filtered(self, predicate: Callable[[ItemT], bool]) -> tuple[ItemT, ...]:
        return tuple(item for item in self._items if predicate(item))

    def subscribe(self, observer: Callable[[tuple[ItemT, ...]], None]) -> Subscription:
        """Call *observer* with every new snapshot."""
        return self._updates.subscribe(observer)

    # ------------------------------------------------------------------
    # Reload
    # ------------------------------------------------------------------

    def _params(self, language: str) -> dict[str, str]:
        params = dict(self.query)
        if self.language_filter is LanguageFilter.SERVER:
            params["filter[language]"] = language
        return params

    async def _fetch(self) -> tuple[ItemT, ...] | None:
        language = await self._languages.get_current_language_async()
        payload = await self._backend.fetch_json(self.path, self._params(language))
        if payload is None:
            return None

        try:
            items = cast(tuple[ItemT, ...], parse_collection(self.item_model, payload, path=self.path))
        except MovaPayloadError as exc:
            _logger.warning("Discarding %s payload: %s", self.collection, exc)
            return None

        current = self._languages.current_language
        if current != language:
            _logger.debug("Discarding %s fetched for %r; active language is now %r", self.collection, language, current)
            return None

        if self.language_filter is LanguageFilter.CLIENT:
            items = tuple(item for item in items if item.language == language)
        return items

    async def reload(self) -> bool:
        """Fetch the collection for the active language and publish it.

        Returns ``True`` when the snapshot was replaced.  On failure the
        previous snapshot stays in place and observers are not notified.
        """
        async with self._lock:
            previous_state = self._state
            self._state = StoreState.LOADING
            try:
                items = await self._fetch()
            finally:
                self._state = previous_state

            if items is None:
                return False

            self._items = items
            self._state = StoreState.READY
            _logger.debug("Loaded %d %s", len(items), self.collection)
            self._updates.publish(items)
            return True

    def _schedule_reload(self, reason: str) -> None:
        # Triggers fire from inside the event loop (language switch, fetch).
        task = asyncio.get_running_loop().create_task(self.reload())
        _logger.debug("Scheduled %s reload (%s)", self.collection, reason)
        self._scheduled.add(task)
        task.add_done_callback(self._scheduled.discard)

    async def join(self) -> None:
        """Wait until reloads scheduled by language or backend events finish."""
        while self._scheduled:
            await asyncio.gather(*self._scheduled, return_exceptions=True)
