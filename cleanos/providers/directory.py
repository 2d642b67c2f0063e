from __future__ import annotations

from dataclasses import replace

from cleanos.app_logger import get_logger
from cleanos.catalog.cache import ModelCatalogCache
from cleanos.catalog.grouping import models_for_provider, to_model_definition
from cleanos.models.providers import ModelDefinition, ProviderDefinition
from cleanos.providers.defaults import FALLBACK_MODELS, PROVIDERS

logger = get_logger(__name__)


class ProviderDirectory:
    """Static provider metadata merged with live or fallback model lists.

    The directory only reads from the catalog cache. It is safe to call while
    a refresh of that cache is in flight.
    """

    def __init__(
        self,
        cache: ModelCatalogCache,
        providers: tuple[ProviderDefinition, ...] = PROVIDERS,
        fallback_models: dict[str, tuple[ModelDefinition, ...]] | None = None,
    ) -> None:
        self._cache = cache
        self._providers = providers
        self._fallback = FALLBACK_MODELS if fallback_models is None else fallback_models

    @property
    def provider_ids(self) -> tuple[str, ...]:
        return tuple(p.id for p in self._providers)

    def get(self, provider_id: str) -> ProviderDefinition | None:
        return next((p for p in self._providers if p.id == provider_id), None)

    def fallback_models(self, provider_id: str) -> tuple[ModelDefinition, ...]:
        return self._fallback.get(provider_id, ())

    def static_providers(self) -> list[ProviderDefinition]:
        return [replace(meta, models=self.fallback_models(meta.id)) for meta in self._providers]

    async def get_providers_with_models(self) -> list[ProviderDefinition]:
        try:
            catalog = await self._cache.load()
        except Exception:  # noqa: BLE001
            logger.exception("Catalog read failed; using fallback models")
            return self.static_providers()

        merged: list[ProviderDefinition] = []
        for meta in self._providers:
            live = models_for_provider(catalog, meta.id)
            if live:
                models = tuple(to_model_definition(m) for m in live)
            else:
                models = self.fallback_models(meta.id)
            merged.append(replace(meta, models=models))
        return merged
