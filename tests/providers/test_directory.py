from __future__ import annotations

import asyncio

from cleanos.catalog.cache import ModelCatalogCache
from cleanos.models.providers import CatalogModel
from cleanos.providers.defaults import FALLBACK_MODELS, PROVIDERS
from cleanos.providers.directory import ProviderDirectory
from tests.gateway_mock import MemoryGateway, catalog_item, catalog_json

_KNOWN_IDS = [p.id for p in PROVIDERS]


def _directory(gateway: MemoryGateway) -> ProviderDirectory:
    return ProviderDirectory(ModelCatalogCache(gateway))


def test_static_providers_use_fallback_models() -> None:
    directory = _directory(MemoryGateway())
    providers = directory.static_providers()

    assert [p.id for p in providers] == _KNOWN_IDS
    for provider in providers:
        assert provider.models == FALLBACK_MODELS[provider.id]


def test_live_models_replace_fallback_for_matching_providers() -> None:
    gateway = MemoryGateway().with_catalog(
        catalog_json(
            catalog_item(
                "openai/gpt-5",
                name="GPT-5",
                pricing={"prompt": "0.000005", "completion": "0.00001"},
                architecture={"modality": "text+image->text"},
            ),
            catalog_item("mistralai/mistral-large"),
        )
    )

    providers = asyncio.run(_directory(gateway).get_providers_with_models())
    by_id = {p.id: p for p in providers}

    (gpt5,) = by_id["openai"].models
    assert gpt5.id == "gpt-5"
    assert gpt5.cost_per_1k_input == 0.005
    assert gpt5.capabilities == ("chat", "vision", "json")
    # No live models for the rest, so they fall back.
    assert by_id["claude"].models == FALLBACK_MODELS["claude"]
    assert by_id["kimi"].models == FALLBACK_MODELS["kimi"]


def test_every_provider_present_when_catalog_fails() -> None:
    gateway = MemoryGateway().fail("fetch_available_models", "network down")

    providers = asyncio.run(_directory(gateway).get_providers_with_models())

    assert [p.id for p in providers] == _KNOWN_IDS
    assert all(p.models for p in providers)


def test_empty_catalog_falls_back_for_openai() -> None:
    gateway = MemoryGateway().with_catalog(catalog_json())

    providers = asyncio.run(_directory(gateway).get_providers_with_models())
    openai = next(p for p in providers if p.id == "openai")

    assert openai.models == FALLBACK_MODELS["openai"]
    assert openai.models


def test_unexpected_cache_error_yields_static_providers() -> None:
    class BrokenCache(ModelCatalogCache):
        async def load(self) -> tuple[CatalogModel, ...]:
            raise RuntimeError("corrupted")

    directory = ProviderDirectory(BrokenCache(MemoryGateway()))

    providers = asyncio.run(directory.get_providers_with_models())

    assert [p.id for p in providers] == _KNOWN_IDS


def test_repeated_calls_do_not_refetch_within_ttl() -> None:
    gateway = MemoryGateway().with_catalog(catalog_json(catalog_item("google/gemini-2.5-pro")))
    directory = _directory(gateway)

    async def scenario() -> None:
        await asyncio.gather(*(directory.get_providers_with_models() for _ in range(3)))
        await directory.get_providers_with_models()

    asyncio.run(scenario())

    # Concurrent first reads may each fetch; later reads are cache hits.
    first_round = gateway.calls["fetch_available_models"]
    assert 1 <= first_round <= 3
    asyncio.run(directory.get_providers_with_models())
    assert gateway.calls["fetch_available_models"] == first_round


def test_lookup_helpers() -> None:
    directory = _directory(MemoryGateway())
    openai = directory.get("openai")
    assert openai is not None and openai.default_model == "gpt-4o-mini"
    assert directory.get("nope") is None
    assert directory.fallback_models("nope") == ()
    assert directory.provider_ids == tuple(_KNOWN_IDS)
