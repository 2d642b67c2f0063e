from __future__ import annotations

from dataclasses import dataclass, field

from cleanos.models.enums import AuthType


@dataclass(slots=True, frozen=True)
class AuthMethod:
    type: AuthType
    label: str
    description: str | None = None
    key_placeholder: str | None = None
    help_url: str | None = None


@dataclass(slots=True, frozen=True)
class ProviderCapabilities:
    chat: bool = True
    vision: bool = False
    json: bool = True
    streaming: bool = True
    tools: bool = False


@dataclass(slots=True, frozen=True)
class ModelDefinition:
    id: str
    name: str
    description: str
    max_tokens: int
    cost_per_1k_input: float | None = None
    cost_per_1k_output: float | None = None
    capabilities: tuple[str, ...] = ("chat",)


@dataclass(slots=True, frozen=True)
class ProviderDefinition:
    id: str
    name: str
    description: str
    auth_methods: tuple[AuthMethod, ...]
    default_model: str
    capabilities: ProviderCapabilities
    models: tuple[ModelDefinition, ...] = field(default_factory=tuple)


@dataclass(slots=True, frozen=True)
class ProviderStatus:
    id: str
    connected: bool
    model: str
    error: str | None = None


@dataclass(slots=True, frozen=True)
class CatalogModel:
    """A model as listed by the catalog service, with defaults already applied."""

    id: str
    name: str = ""
    description: str = ""
    prompt_price: str = "0"
    completion_price: str = "0"
    context_length: int = 0
    modality: str = "text"
    tokenizer: str = "unknown"
