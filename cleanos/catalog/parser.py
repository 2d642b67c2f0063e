"""Decoder for the catalog service's model listing.

The payload is expected to look like::

    {"data": [{"id": ..., "name": ..., "description": ...,
               "pricing": {"prompt": ..., "completion": ...},
               "context_length": ...,
               "architecture": {"modality": ..., "tokenizer": ...}}]}

Anything missing or of the wrong type is replaced by an explicit default.
A payload that cannot be read at all decodes to ``EMPTY_CATALOG``.
"""

from __future__ import annotations

import json
from typing import Any

from cleanos.models.providers import CatalogModel

EMPTY_CATALOG: tuple[CatalogModel, ...] = ()


def _str_field(payload: dict[str, Any], key: str, default: str) -> str:
    value = payload.get(key)
    if isinstance(value, str) and value:
        return value
    return default


def _price_field(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    # Prices arrive as decimal strings; tolerate bare numbers too.
    if isinstance(value, bool):
        return "0"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str) and value:
        return value
    return "0"


def _int_field(payload: dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, float) and value.is_integer():
        return max(0, int(value))
    return 0


def _object_field(payload: dict[str, Any], key: str) -> dict[str, Any]:
    value = payload.get(key)
    return value if isinstance(value, dict) else {}


def decode_model(item: dict[str, Any]) -> CatalogModel:
    pricing = _object_field(item, "pricing")
    architecture = _object_field(item, "architecture")
    return CatalogModel(
        id=_str_field(item, "id", ""),
        name=_str_field(item, "name", ""),
        description=_str_field(item, "description", ""),
        prompt_price=_price_field(pricing, "prompt"),
        completion_price=_price_field(pricing, "completion"),
        context_length=_int_field(item, "context_length"),
        modality=_str_field(architecture, "modality", "text"),
        tokenizer=_str_field(architecture, "tokenizer", "unknown"),
    )


def parse_catalog(raw: str) -> tuple[CatalogModel, ...]:
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError):
        return EMPTY_CATALOG
    if not isinstance(payload, dict):
        return EMPTY_CATALOG
    data = payload.get("data")
    if not isinstance(data, list):
        return EMPTY_CATALOG
    return tuple(decode_model(item) for item in data if isinstance(item, dict))
