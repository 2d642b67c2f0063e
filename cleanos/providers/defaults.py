from __future__ import annotations

from cleanos.models.enums import AuthType
from cleanos.models.providers import AuthMethod, ModelDefinition, ProviderCapabilities, ProviderDefinition

_FULL = ("chat", "vision", "json", "tools")
_TEXT = ("chat", "json")

# Served when the catalog has nothing for a provider.
FALLBACK_MODELS: dict[str, tuple[ModelDefinition, ...]] = {
    "openai": (
        ModelDefinition(
            "gpt-4o",
            "GPT-4o",
            "Most capable model with vision support and advanced reasoning.",
            128_000,
            0.005,
            0.015,
            _FULL,
        ),
        ModelDefinition(
            "gpt-4o-mini",
            "GPT-4o Mini",
            "Fast and cost-effective for routine file analysis tasks.",
            128_000,
            0.00015,
            0.0006,
            _FULL,
        ),
        ModelDefinition(
            "o1",
            "o1",
            "Advanced reasoning model for complex analysis.",
            200_000,
            0.015,
            0.06,
            _TEXT,
        ),
        ModelDefinition(
            "o1-mini",
            "o1 Mini",
            "Efficient reasoning model for focused tasks.",
            128_000,
            0.003,
            0.012,
            _TEXT,
        ),
    ),
    "claude": (
        ModelDefinition(
            "claude-opus-4-20250514",
            "Claude Opus 4",
            "Most capable model for complex file analysis and reasoning.",
            200_000,
            0.015,
            0.075,
            _FULL,
        ),
        ModelDefinition(
            "claude-sonnet-4-20250514",
            "Claude Sonnet 4",
            "Balanced performance for everyday file analysis.",
            200_000,
            0.003,
            0.015,
            _FULL,
        ),
        ModelDefinition(
            "claude-3-5-haiku-20241022",
            "Claude 3.5 Haiku",
            "Fast and affordable for high-volume tasks.",
            200_000,
            0.001,
            0.005,
            _FULL,
        ),
    ),
    "gemini": (
        ModelDefinition(
            "gemini-2.0-flash",
            "Gemini 2.0 Flash",
            "Fast and capable with a 1M token context window.",
            1_048_576,
            0.0001,
            0.0004,
            _FULL,
        ),
        ModelDefinition(
            "gemini-1.5-pro",
            "Gemini 1.5 Pro",
            "Advanced reasoning with extended context for large file sets.",
            2_097_152,
            0.00125,
            0.005,
            _FULL,
        ),
    ),
    "kimi": (
        ModelDefinition(
            "moonshot-v1-128k",
            "Kimi 128K",
            "Long context model for analyzing large file sets.",
            128_000,
            capabilities=_TEXT,
        ),
        ModelDefinition(
            "moonshot-v1-32k",
            "Kimi 32K",
            "Balanced context model for general file analysis.",
            32_000,
            capabilities=_TEXT,
        ),
    ),
}


def _api_key(description: str, placeholder: str, help_url: str) -> tuple[AuthMethod, ...]:
    return (
        AuthMethod(
            AuthType.API,
            "API Key",
            description=description,
            key_placeholder=placeholder,
            help_url=help_url,
        ),
    )


_ALL_CAPS = ProviderCapabilities(chat=True, vision=True, json=True, streaming=True, tools=True)

# Order is the display order of the settings page.
PROVIDERS: tuple[ProviderDefinition, ...] = (
    ProviderDefinition(
        id="openai",
        name="OpenAI",
        description="GPT-4o and o1 models for file analysis and intelligent categorization.",
        auth_methods=_api_key("Your OpenAI API key", "sk-...", "https://platform.openai.com/api-keys"),
        default_model="gpt-4o-mini",
        capabilities=_ALL_CAPS,
    ),
    ProviderDefinition(
        id="gemini",
        name="Google Gemini",
        description="Gemini models with large context windows for bulk file analysis.",
        auth_methods=_api_key("Your Google AI Studio API key", "AIza...", "https://aistudio.google.com/apikey"),
        default_model="gemini-2.0-flash",
        capabilities=_ALL_CAPS,
    ),
    ProviderDefinition(
        id="claude",
        name="Anthropic Claude",
        description="Claude models with strong analytical capabilities for file organization.",
        auth_methods=_api_key(
            "Your Anthropic API key", "sk-ant-...", "https://console.anthropic.com/settings/keys"
        ),
        default_model="claude-sonnet-4-20250514",
        capabilities=_ALL_CAPS,
    ),
    ProviderDefinition(
        id="kimi",
        name="Moonshot Kimi",
        description="Kimi models for multilingual file analysis with long context support.",
        auth_methods=_api_key("Your Moonshot API key", "sk-...", "https://platform.moonshot.cn/console/api-keys"),
        default_model="moonshot-v1-128k",
        capabilities=ProviderCapabilities(chat=True, vision=False, json=True, streaming=True, tools=False),
    ),
)
