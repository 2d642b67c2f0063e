from __future__ import annotations

from cleanos.config.schema import AppConfig


def default_config() -> AppConfig:
    return AppConfig()
