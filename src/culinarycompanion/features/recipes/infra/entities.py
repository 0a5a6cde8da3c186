from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Protocol, Sequence, Set

import httpx

from culinarycompanion.shared.config.settings import settings
from culinarycompanion.shared.web.fetch import post_json

log = logging.getLogger("recipes.entities")

ENTITY_TYPES = ["food", "restaurant"]


class EntitySearch(Protocol):
    async def search(self, token: str) -> List[Dict[str, Any]]:
        ...


class NullEntitySearch:
    """Used when no API key is configured; never leaves the process."""

    async def search(self, token: str) -> List[Dict[str, Any]]:
        return []


class QlooEntitySearch:
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.qloo.com/v1",
        limit: int = 5,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not api_key:
            raise ValueError("QlooEntitySearch requires an API key")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.limit = limit
        self.timeout = timeout
        self._transport = transport

    async def search(self, token: str) -> List[Dict[str, Any]]:
        data = await post_json(
            f"{self.base_url}/search",
            {"query": token, "entity_types": ENTITY_TYPES, "limit": self.limit},
            headers={"X-Api-Key": self.api_key},
            timeout=self.timeout,
            transport=self._transport,
        )
        if data is None:
            return []
        if isinstance(data, dict):
            results = data.get("results") or data.get("entities") or []
            return [r for r in results if isinstance(r, dict)] if isinstance(results, list) else [data]
        if isinstance(data, list):
            return [r for r in data if isinstance(r, dict)]
        return []


def build_entity_search() -> EntitySearch:
    if not settings.QLOO_API_KEY:
        return NullEntitySearch()
    return QlooEntitySearch(
        settings.QLOO_API_KEY,
        base_url=settings.QLOO_BASE_URL,
        limit=settings.PROBE_RESULT_LIMIT,
        timeout=settings.PROBE_TIMEOUT,
    )


class EntityProber:
    """
    Best-effort enrichment: one lookup per ingredient token.
    A failing lookup contributes nothing; probe() itself never raises.
    """

    def __init__(self, search: EntitySearch, *, max_concurrency: int = 5) -> None:
        self.search = search
        self.max_concurrency = max(1, max_concurrency)
        self._pending: Set[asyncio.Task] = set()

    async def _lookup(self, token: str, sem: asyncio.Semaphore) -> List[Dict[str, Any]]:
        async with sem:
            try:
                return await self.search.search(token)
            except Exception as e:
                log.warning("Entity search for %r failed: %s", token, e)
                return []

    async def probe(self, tokens: Sequence[str]) -> List[Dict[str, Any]]:
        sem = asyncio.Semaphore(self.max_concurrency)
        batches = await asyncio.gather(*(self._lookup(t, sem) for t in tokens if t))
        entities = [e for batch in batches for e in batch]
        log.debug("Entity probe for %d token(s) returned %d entities", len(tokens), len(entities))
        return entities

    @property
    def pending(self) -> Set[asyncio.Task]:
        """Background probes that have not finished yet."""
        return set(self._pending)

    def probe_in_background(self, tokens: Sequence[str]) -> Optional[asyncio.Task]:
        """Schedule probe() on the running loop without waiting for it."""
        if not tokens:
            return None
        task = asyncio.create_task(self.probe(list(tokens)))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task


_prober: Optional[EntityProber] = None


def get_entity_prober() -> EntityProber:
    global _prober
    if _prober is None:
        _prober = EntityProber(build_entity_search(), max_concurrency=settings.PROBE_MAX_CONCURRENCY)
    return _prober
