from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_CATALOG_URL = "https://openrouter.ai/api/v1/models"
DEFAULT_SETTINGS_PATH = "~/.config/cleanos/settings.json"


@dataclass(slots=True)
class AppConfig:
    catalog_url: str = DEFAULT_CATALOG_URL
    catalog_ttl_seconds: int = 3600
    request_timeout_seconds: float = 15.0
    refresh_interval_seconds: int = 30
    settings_path: str = DEFAULT_SETTINGS_PATH
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        return {
            "catalogUrl": self.catalog_url,
            "catalogTtlSeconds": self.catalog_ttl_seconds,
            "requestTimeoutSeconds": self.request_timeout_seconds,
            "refreshIntervalSeconds": self.refresh_interval_seconds,
            "settingsPath": self.settings_path,
            "logLevel": self.log_level,
        }


def from_dict(data: dict[str, Any], defaults: AppConfig) -> AppConfig:
    return AppConfig(
        catalog_url=str(data.get("catalogUrl", defaults.catalog_url)),
        catalog_ttl_seconds=max(1, int(data.get("catalogTtlSeconds", defaults.catalog_ttl_seconds))),
        request_timeout_seconds=max(
            1.0,
            float(data.get("requestTimeoutSeconds", defaults.request_timeout_seconds)),
        ),
        refresh_interval_seconds=max(
            1,
            int(data.get("refreshIntervalSeconds", defaults.refresh_interval_seconds)),
        ),
        settings_path=str(data.get("settingsPath", defaults.settings_path)),
        log_level=str(data.get("logLevel", defaults.log_level)).upper(),
    )
