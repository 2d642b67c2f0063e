from __future__ import annotations

from dataclasses import dataclass

from cleanos.catalog.cache import ModelCatalogCache
from cleanos.config.schema import AppConfig
from cleanos.gateway import Gateway
from cleanos.providers.directory import ProviderDirectory
from cleanos.services.connections import ProviderConnections
from cleanos.services.monitor import SystemMonitor
from cleanos.services.scan import ScanController
from cleanos.services.settings import ScanDirectories
from cleanos.store.store import AppStore, DarkModeHook


@dataclass(slots=True)
class AppContext:
    """Everything a view surface needs, wired once and passed around explicitly."""

    config: AppConfig
    gateway: Gateway
    store: AppStore
    catalog: ModelCatalogCache
    directory: ProviderDirectory
    scanner: ScanController
    monitor: SystemMonitor
    connections: ProviderConnections
    scan_directories: ScanDirectories


def build_context(config: AppConfig, gateway: Gateway, on_dark_mode: DarkModeHook | None = None) -> AppContext:
    store = AppStore(on_dark_mode=on_dark_mode)
    catalog = ModelCatalogCache(gateway, ttl_seconds=config.catalog_ttl_seconds)
    directory = ProviderDirectory(catalog)
    return AppContext(
        config=config,
        gateway=gateway,
        store=store,
        catalog=catalog,
        directory=directory,
        scanner=ScanController(gateway, store),
        monitor=SystemMonitor(gateway, store, interval=config.refresh_interval_seconds),
        connections=ProviderConnections(gateway, store, directory),
        scan_directories=ScanDirectories(gateway),
    )
