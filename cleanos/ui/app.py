from __future__ import annotations

from typing import Callable, override

from result import Err
from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import DataTable, Static

from cleanos.context import AppContext
from cleanos.exceptions import CatalogFetchError
from cleanos.models.enums import Theme
from cleanos.models.providers import ProviderDefinition
from cleanos.services.aggregates import (
    disk_percent,
    memory_percent,
    reclaimable_space,
    selected_size,
    total_scanned_size,
)
from cleanos.services.formatting import format_bytes, relative_bar
from cleanos.services.requests import TaskHandle
from cleanos.store.state import AppState

_DARK_THEME = "textual-dark"
_LIGHT_THEME = "textual-light"


class DashboardApp(App[None]):
    CSS = """
    #app-grid {
        padding: 0 1;
    }
    #host-row, #usage-row, #files-row {
        height: 1;
    }
    #provider-table {
        height: 1fr;
    }
    #status-row {
        height: 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("t", "toggle_theme", "Theme"),
        Binding("r", "refresh_models", "Refresh models"),
        Binding("s", "scan", "Scan"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, ctx: AppContext) -> None:
        super().__init__()
        self.ctx = ctx
        self._providers: list[ProviderDefinition] = ctx.directory.static_providers()
        self._notice = ""
        self._unsubscribe: Callable[[], None] | None = None
        self._monitor: TaskHandle[None] | None = None

    @override
    def compose(self) -> ComposeResult:
        yield Container(
            Static(id="host-row"),
            Static(id="usage-row"),
            Static(id="files-row"),
            DataTable(id="provider-table"),
            Static(id="status-row"),
            id="app-grid",
        )

    async def on_mount(self) -> None:
        table = self.query_one("#provider-table", DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True
        table.add_columns("PROVIDER", "STATUS", "ACTIVE", "MODELS", "DEFAULT MODEL")

        self.ctx.store.set_dark_mode_hook(self._apply_dark)
        self._apply_dark(self.ctx.store.state.theme is Theme.DARK)
        self._unsubscribe = self.ctx.store.subscribe(self._on_state)
        self._monitor = self.ctx.monitor.start()

        await self.ctx.scan_directories.load()
        await self.ctx.connections.sync()
        self._providers = await self.ctx.directory.get_providers_with_models()
        self._render_all(self.ctx.store.state)

    def on_unmount(self) -> None:
        self.ctx.monitor.stop()
        if self._monitor is not None:
            self._monitor.abandon()
        if self._unsubscribe is not None:
            self._unsubscribe()
        self.ctx.store.set_dark_mode_hook(None)

    def _apply_dark(self, dark: bool) -> None:
        self.theme = _DARK_THEME if dark else _LIGHT_THEME

    def _on_state(self, state: AppState) -> None:
        if self.is_mounted:
            self._render_all(state)

    def _render_all(self, state: AppState) -> None:
        self._render_host(state)
        self._render_files(state)
        self._render_providers(state)
        self.query_one("#status-row", Static).update(
            Text(self._notice or "t theme | r refresh models | s scan | q quit")
        )

    def _render_host(self, state: AppState) -> None:
        info = state.system_info
        if info is None:
            host = "Loading system info..." if self.ctx.monitor.error is None else self.ctx.monitor.error
            self.query_one("#host-row", Static).update(Text(host))
            self.query_one("#usage-row", Static).update(Text(""))
            return
        self.query_one("#host-row", Static).update(
            Text.from_markup(f"[b #81a2be]{escape(info.hostname)}[/] {escape(info.os)}")
        )
        disk = disk_percent(info)
        memory = memory_percent(info)
        self.query_one("#usage-row", Static).update(
            Text.from_markup(
                f"[#b5bd68]Disk[/] {relative_bar(disk, 100, 16)} {disk}%"
                + f"    [#f0c674]Memory[/] {relative_bar(memory, 100, 16)} {memory}%"
            )
        )

    def _render_files(self, state: AppState) -> None:
        scanning = " (scanning...)" if state.is_scanning else ""
        self.query_one("#files-row", Static).update(
            Text.from_markup(
                f"[#8abeb7]Files[/] {len(state.scanned_files):,} / {format_bytes(total_scanned_size(state))}"
                + f"    [#8abeb7]Selected[/] {len(state.selected_files):,} / {format_bytes(selected_size(state))}"
                + f"    [#de935f]Reclaimable[/] {format_bytes(reclaimable_space(state, include_system=True))}"
                + scanning
            )
        )

    def _render_providers(self, state: AppState) -> None:
        table = self.query_one("#provider-table", DataTable)
        table.clear()
        for provider in self._providers:
            status = state.provider_status(provider.id)
            connected = status is not None and status.connected
            table.add_row(
                provider.name,
                "connected" if connected else "not connected",
                "*" if state.active_provider == provider.id else "",
                str(len(provider.models)),
                status.model if status is not None else provider.default_model,
            )

    def action_toggle_theme(self) -> None:
        current = self.ctx.store.state.theme
        self.ctx.store.set_theme(Theme.LIGHT if current is Theme.DARK else Theme.DARK)

    async def action_refresh_models(self) -> None:
        try:
            await self.ctx.catalog.refresh()
        except CatalogFetchError as exc:
            self._notice = str(exc)
            self._providers = self.ctx.directory.static_providers()
        else:
            self._notice = ""
            self._providers = await self.ctx.directory.get_providers_with_models()
        self._render_all(self.ctx.store.state)

    async def action_scan(self) -> None:
        directories = self.ctx.scan_directories.directories
        if not directories:
            return
        result = await self.ctx.scanner.scan(directories[0])
        self._notice = result.unwrap_err() if isinstance(result, Err) else ""
        self._render_all(self.ctx.store.state)
