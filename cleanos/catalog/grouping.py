from __future__ import annotations

import math
import re
from typing import Iterable

from cleanos.models.providers import CatalogModel, ModelDefinition

PROVIDER_PREFIXES: dict[str, tuple[str, ...]] = {
    "openai": ("openai/",),
    "claude": ("anthropic/",),
    "gemini": ("google/",),
    "kimi": ("moonshot/", "moonshotai/"),
}

_VISION_MARKERS = ("image", "multimodal")

# Leading decimal number; trailing junk is ignored, as catalog clients do.
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def models_for_provider(models: Iterable[CatalogModel], provider_id: str) -> tuple[CatalogModel, ...]:
    """Models whose id starts with one of *provider_id*'s prefixes.

    Unknown providers get nothing; there is no catch-all group.
    """
    prefixes = PROVIDER_PREFIXES.get(provider_id)
    if not prefixes:
        return ()
    return tuple(m for m in models if m.id.startswith(prefixes))


def latest(models: Iterable[CatalogModel], family: str) -> CatalogModel | None:
    # The catalog lists newer models first.
    return next((m for m in models if family in m.id), None)


def local_id(model_id: str) -> str:
    _, sep, rest = model_id.partition("/")
    return rest if sep else model_id


def price_per_1k(per_token: str) -> float:
    match = _NUMBER_PREFIX.match(per_token) if isinstance(per_token, str) else None
    if match is None:
        return 0.0
    value = float(match.group(1))
    if not math.isfinite(value):
        return 0.0
    return round(value * 1000, 12)


def infer_capabilities(model: CatalogModel) -> tuple[str, ...]:
    caps = ["chat"]
    modality = model.modality.lower()
    if any(marker in modality for marker in _VISION_MARKERS):
        caps.append("vision")
    caps.append("json")
    return tuple(caps)


def to_model_definition(model: CatalogModel) -> ModelDefinition:
    return ModelDefinition(
        id=local_id(model.id),
        name=model.name or local_id(model.id),
        description=model.description or model.name,
        max_tokens=model.context_length,
        cost_per_1k_input=price_per_1k(model.prompt_price),
        cost_per_1k_output=price_per_1k(model.completion_price),
        capabilities=infer_capabilities(model),
    )
