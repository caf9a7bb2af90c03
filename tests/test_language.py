from __future__ import annotations

import asyncio

import pytest

from pymova.exceptions import MovaConfigError
from pymova.language import LanguageManager


def test_sync_getter_starts_with_default() -> None:
    manager = LanguageManager(" DE ")
    assert manager.get_current_language() == "de"
    assert manager.current_language == "de"
    assert manager.default_language == "de"


def test_empty_default_rejected() -> None:
    with pytest.raises(MovaConfigError):
        LanguageManager("  ")


@pytest.mark.asyncio
async def test_async_getter_resolves_once() -> None:
    calls = 0

    async def resolver() -> str | None:
        nonlocal calls
        calls += 1
        await asyncio.sleep(0)
        return "EN"

    manager = LanguageManager("de", resolver=resolver)
    assert manager.get_current_language() == "de"

    results = await asyncio.gather(
        manager.get_current_language_async(),
        manager.get_current_language_async(),
    )

    assert results == ["en", "en"]
    assert await manager.get_current_language_async() == "en"
    assert manager.get_current_language() == "en"
    assert calls == 1


@pytest.mark.asyncio
async def test_resolver_failure_falls_back_to_default() -> None:
    async def resolver() -> str | None:
        raise OSError("settings unavailable")

    manager = LanguageManager("de", resolver=resolver)
    assert await manager.get_current_language_async() == "de"


@pytest.mark.asyncio
async def test_resolver_without_value_falls_back_to_default() -> None:
    async def resolver() -> str | None:
        return None

    manager = LanguageManager("de", resolver=resolver)
    assert await manager.get_current_language_async() == "de"


@pytest.mark.asyncio
async def test_set_language_publishes_even_when_unchanged() -> None:
    manager = LanguageManager("en")
    seen: list[str] = []
    manager.on_change.subscribe(seen.append)

    await manager.set_language("de")
    await manager.set_language("de")

    assert seen == ["de", "de"]
    assert manager.get_current_language() == "de"


@pytest.mark.asyncio
async def test_set_language_persists_before_notifying() -> None:
    order: list[str] = []

    async def persist(language: str) -> None:
        order.append(f"persist:{language}")

    manager = LanguageManager("en", persist=persist)
    manager.on_change.subscribe(lambda language: order.append(f"notify:{language}"))

    await manager.set_language("fr")

    assert order == ["persist:fr", "notify:fr"]


@pytest.mark.asyncio
async def test_persist_failure_still_notifies() -> None:
    async def persist(language: str) -> None:
        raise OSError("disk full")

    manager = LanguageManager("en", persist=persist)
    seen: list[str] = []
    manager.on_change.subscribe(seen.append)

    await manager.set_language("de")

    assert seen == ["de"]


@pytest.mark.asyncio
async def test_set_language_rejects_empty_value() -> None:
    manager = LanguageManager("en")
    with pytest.raises(MovaConfigError):
        await manager.set_language("")


@pytest.mark.asyncio
async def test_explicit_choice_beats_late_resolution() -> None:
    release = asyncio.Event()

    async def resolver() -> str | None:
        await release.wait()
        return "fr"

    manager = LanguageManager("en", resolver=resolver)
    pending = asyncio.create_task(manager.get_current_language_async())
    await asyncio.sleep(0)

    await manager.set_language("de")
    release.set()

    assert await pending == "de"
    assert manager.get_current_language() == "de"
