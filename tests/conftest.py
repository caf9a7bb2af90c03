from __future__ import annotations

import asyncio
import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from pymova.exceptions import MovaTransportError


@dataclass
class FakeContentBackend:
    """In-memory stand-in for the content backend (implements ``Transport``).

    ``items`` maps a collection name to every item of that collection in
    every language; ``filter[language]`` is honoured like the real backend.
    """

    items: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    calls: list[tuple[str, dict[str, str]]] = field(default_factory=list)
    failing_paths: set[str] = field(default_factory=set)
    payloads: dict[str, Any] = field(default_factory=dict)
    gates: dict[str, asyncio.Event] = field(default_factory=dict)
    ping_ok: bool = True

    def count(self, path: str) -> int:
        return sum(1 for called, _ in self.calls if called == path)

    async def get_json(self, path: str, params: Mapping[str, str] | None = None) -> Any:
        self.calls.append((path, dict(params or {})))
        gate = self.gates.get(path)
        if gate is not None:
            await gate.wait()
        if path in self.failing_paths:
            raise MovaTransportError(f"HTTP 503 from {path}", status_code=503, path=path)
        if path in self.payloads:
            return copy.deepcopy(self.payloads[path])

        collection = path.rsplit("/", 1)[-1]
        items = self.items.get(collection, [])
        language = (params or {}).get("filter[language]")
        if language is not None:
            items = [item for item in items if item.get("language") == language]
        return {"data": copy.deepcopy(items)}

    async def ping(self, path: str) -> None:
        self.calls.append((path, {}))
        if not self.ping_ok:
            raise MovaTransportError(f"Request to {path} failed: connection refused", path=path)


@pytest.fixture
def fake_backend() -> FakeContentBackend:
    return FakeContentBackend(
        items={
            "infopages": [
                {"id": "1", "language": "en", "title": "A", "content": "Opening hours", "sub_page": False},
                {"id": "2", "language": "en", "title": "B", "content": "Wheelchair access", "sub_page": True},
                {"id": "3", "language": "de", "title": "C", "content": "Öffnungszeiten", "sub_page": False},
            ],
            "activities": [
                {"id": 10, "language": "en", "title": "Choir", "is_permanent": True},
                {"id": 11, "language": "en", "title": "Summer fest", "is_permanent": False},
                {"id": 12, "language": "de", "title": "Chor", "is_permanent": True},
            ],
            "news": [
                {"id": "n2", "language": "en", "title": "New", "date": "2021-06-01", "excerpt": "..."},
                {"id": "n1", "language": "en", "title": "Old", "date": "2021-05-01", "excerpt": "..."},
                {"id": "n3", "language": "de", "title": "Neu", "date": "2021-06-02"},
            ],
        }
    )
