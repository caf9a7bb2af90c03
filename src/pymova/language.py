"""Active display language and its change notification."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from pymova.events import EventChannel
from pymova.exceptions import MovaConfigError

_logger = logging.getLogger(__name__)

LanguageResolver = Callable[[], Awaitable[str | None]]
LanguagePersist = Callable[[str], Awaitable[None]]


def normalize_language(value: str | None) -> str:
    """Return the canonical (stripped, lower-case) form of a language code."""
    return (value or "").strip().lower()


class LanguageManager:
    """Holds the active locale for one application context.

    The synchronous getter returns the last known value.  The async getter
    resolves the initial value once through *resolver* (device setting,
    saved preference, ...) and falls back to *default_language* when that
    yields nothing or fails.
    """

    def __init__(
        self,
        default_language: str,
        *,
        resolver: LanguageResolver | None = None,
        persist: LanguagePersist | None = None,
    ) -> None:
        default = normalize_language(default_language)
        if not default:
            raise MovaConfigError("default_language must be non-empty")
        self._default = default
        self._current = default
        self._resolver = resolver
        self._persist = persist
        self._resolved = resolver is None
        self._resolving: asyncio.Task[str] | None = None
        self.on_change: EventChannel[str] = EventChannel("language")

    @property
    def default_language(self) -> str:
        return self._default

    @property
    def current_language(self) -> str:
        return self._current

    def get_current_language(self) -> str:
        return self._current

    async def get_current_language_async(self) -> str:
        if self._resolved:
            return self._current
        if self._resolving is None:
            self._resolving = asyncio.ensure_future(self._resolve())
        return await asyncio.shield(self._resolving)

    async def _resolve(self) -> str:
        assert self._resolver is not None  # noqa: S101
        try:
            language = normalize_language(await self._resolver())
        except Exception:
            _logger.warning("Language resolution failed; using default %r", self._default, exc_info=True)
            language = ""
        # set_language() may have run while the resolver was pending.
        if not self._resolved:
            self._current = language or self._default
            self._resolved = True
            _logger.debug("Resolved initial language %r", self._current)
        return self._current

    async def set_language(self, language: str) -> None:
        """Switch the active language and notify every subscriber.

        Subscribers are notified even when the language did not change.
        """
        value = normalize_language(language)
        if not value:
            raise MovaConfigError("language must be non-empty")
        self._current = value
        self._resolved = True
        if self._persist is not None:
            try:
                await self._persist(value)
            except Exception:
                _logger.warning("Persisting language %r failed", value, exc_info=True)
        _logger.debug("Language set to %r", value)
        self.on_change.publish(value)
