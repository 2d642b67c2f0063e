from __future__ import annotations

from cleanos.catalog.cache import CacheEntry, ModelCatalogCache
from cleanos.catalog.grouping import (
    PROVIDER_PREFIXES,
    infer_capabilities,
    latest,
    models_for_provider,
    price_per_1k,
    to_model_definition,
)
from cleanos.catalog.parser import EMPTY_CATALOG, parse_catalog

__all__ = [
    "EMPTY_CATALOG",
    "PROVIDER_PREFIXES",
    "CacheEntry",
    "ModelCatalogCache",
    "infer_capabilities",
    "latest",
    "models_for_provider",
    "parse_catalog",
    "price_per_1k",
    "to_model_definition",
]
