from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from cleanos.app_logger import get_logger
from cleanos.catalog.grouping import models_for_provider
from cleanos.catalog.parser import EMPTY_CATALOG, parse_catalog
from cleanos.exceptions import CatalogFetchError, GatewayError
from cleanos.gateway import Gateway
from cleanos.models.providers import CatalogModel
from cleanos.services.requests import RequestCounter, TaskHandle

logger = get_logger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60

type Clock = Callable[[], float]


@dataclass(slots=True, frozen=True)
class CacheEntry:
    models: tuple[CatalogModel, ...]
    fetched_at: float


class ModelCatalogCache:
    """Time-bounded cache of the catalog service's model list.

    Reads inside the TTL never touch the gateway. Once the entry is stale a
    read tries a fresh fetch and, if that fails or comes back empty, keeps
    serving the stale models rather than nothing.
    """

    def __init__(
        self,
        gateway: Gateway,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Clock = time.monotonic,
    ) -> None:
        self._gateway = gateway
        self._ttl = ttl_seconds
        self._clock = clock
        self._entry: CacheEntry | None = None
        self._requests = RequestCounter()
        self._committed = 0

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    @property
    def fetched_at(self) -> float | None:
        return self._entry.fetched_at if self._entry is not None else None

    @property
    def is_valid(self) -> bool:
        if self._entry is None:
            return False
        return self._clock() - self._entry.fetched_at < self._ttl

    @property
    def cached_models(self) -> tuple[CatalogModel, ...]:
        return self._entry.models if self._entry is not None else EMPTY_CATALOG

    def invalidate(self) -> None:
        self._entry = None

    async def load(self) -> tuple[CatalogModel, ...]:
        if self.is_valid:
            return self.cached_models
        try:
            return await self._fetch()
        except CatalogFetchError as exc:
            logger.warning("%s; serving %d cached models", exc, len(self.cached_models))
            return self.cached_models
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected catalog failure; serving cached models")
            return self.cached_models

    async def refresh(self) -> tuple[CatalogModel, ...]:
        """Drop the entry and fetch again.

        Raises ``CatalogFetchError`` when the fetch fails, leaving the cache
        empty; the next ``load()`` tries again.
        """
        self.invalidate()
        return await self._fetch()

    def refresh_in_background(self) -> TaskHandle[tuple[CatalogModel, ...]]:
        return TaskHandle.start(self.refresh())

    async def models_for(self, provider_id: str) -> tuple[CatalogModel, ...]:
        return models_for_provider(await self.load(), provider_id)

    async def _fetch(self) -> tuple[CatalogModel, ...]:
        token = self._requests.next()
        try:
            raw = await self._gateway.fetch_available_models()
        except GatewayError as exc:
            raise CatalogFetchError(exc.message) from exc
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected catalog gateway failure")
            raise CatalogFetchError(str(exc) or type(exc).__name__) from exc

        models = parse_catalog(raw)
        if not models:
            raise CatalogFetchError("catalog returned no models")

        if token < self._committed:
            # A newer request already landed; do not roll the cache back.
            logger.debug("Dropping superseded catalog fetch #%d", token)
            return self.cached_models
        self._committed = token
        self._entry = CacheEntry(models=models, fetched_at=self._clock())
        logger.info("Cached %d catalog models", len(models))
        return models
