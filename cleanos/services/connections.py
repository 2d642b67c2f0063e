from __future__ import annotations

from result import Err, Ok, Result

from cleanos.app_logger import get_logger
from cleanos.exceptions import GatewayError
from cleanos.gateway import Gateway
from cleanos.models.providers import ProviderStatus
from cleanos.providers.directory import ProviderDirectory
from cleanos.store.store import AppStore

logger = get_logger(__name__)


class ProviderConnections:
    """Credential checks for AI providers, reflected into the store's provider slice."""

    def __init__(self, gateway: Gateway, store: AppStore, directory: ProviderDirectory) -> None:
        self._gateway = gateway
        self._store = store
        self._directory = directory

    def _default_model(self, provider_id: str) -> str:
        meta = self._directory.get(provider_id)
        return meta.default_model if meta is not None else ""

    async def sync(self) -> list[ProviderStatus]:
        """Build one status per known provider from the saved credentials."""
        statuses: list[ProviderStatus] = []
        for provider_id in self._directory.provider_ids:
            previous = self._store.state.provider_status(provider_id)
            model = previous.model if previous is not None else self._default_model(provider_id)
            try:
                connected = await self._gateway.has_api_key(provider_id)
                statuses.append(ProviderStatus(id=provider_id, connected=connected, model=model))
            except GatewayError as exc:
                statuses.append(ProviderStatus(id=provider_id, connected=False, model=model, error=exc.message))
        self._store.set_providers(statuses)
        return statuses

    async def connect(self, provider_id: str, api_key: str, model: str | None = None) -> Result[ProviderStatus, str]:
        if not api_key:
            return Err("An API key is required.")
        chosen = model or self._default_model(provider_id)
        try:
            ok = await self._gateway.test_ai_connection(provider_id, api_key, chosen)
            if ok:
                await self._gateway.store_api_key(provider_id, api_key)
        except GatewayError as exc:
            logger.warning("Connecting %s failed: %s", provider_id, exc.message)
            self._store.update_provider_status(
                ProviderStatus(id=provider_id, connected=False, model=chosen, error=exc.message)
            )
            return Err(exc.message)

        if not ok:
            status = ProviderStatus(id=provider_id, connected=False, model=chosen, error="Connection failed")
            self._store.update_provider_status(status)
            return Err("Connection failed")

        status = ProviderStatus(id=provider_id, connected=True, model=chosen)
        self._store.update_provider_status(status)
        return Ok(status)

    async def disconnect(self, provider_id: str) -> Result[None, str]:
        try:
            await self._gateway.delete_api_key(provider_id)
        except GatewayError as exc:
            return Err(exc.message)

        previous = self._store.state.provider_status(provider_id)
        model = previous.model if previous is not None else self._default_model(provider_id)
        self._store.update_provider_status(ProviderStatus(id=provider_id, connected=False, model=model))
        if self._store.state.active_provider == provider_id:
            self._store.set_active_provider(None)
        return Ok(None)

    def activate(self, provider_id: str) -> Result[None, str]:
        status = self._store.state.provider_status(provider_id)
        if status is None or not status.connected:
            return Err(f"{provider_id} is not connected.")
        self._store.set_active_provider(provider_id)
        return Ok(None)
