from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from result import Err

from cleanos.app_logger import set_console_level
from cleanos.config.defaults import default_config
from cleanos.config.loader import load_config, sample_config_json
from cleanos.config.schema import AppConfig
from cleanos.context import AppContext, build_context
from cleanos.exceptions import CatalogFetchError
from cleanos.gateway.local import LocalGateway
from cleanos.models.providers import ProviderDefinition
from cleanos.services.aggregates import disk_percent, memory_percent
from cleanos.services.formatting import format_bytes, format_context_length, format_cost, relative_bar
from cleanos.ui.app import DashboardApp

console = Console()
app = typer.Typer(help="Inspect and clean up disk usage with AI assistance.", no_args_is_help=True)
dirs_app = typer.Typer(help="Manage the directories included in scans.")
app.add_typer(dirs_app, name="dirs")


def _load_config() -> AppConfig:
    config_result = load_config()
    if isinstance(config_result, Err):
        console.print(f"[yellow]{escape(config_result.unwrap_err())} Using defaults.[/]")
        config = default_config()
    else:
        config = config_result.unwrap()
    set_console_level(config.log_level)
    return config


def _context() -> AppContext:
    config = _load_config()
    return build_context(config, LocalGateway(config))


def _models_table(provider: ProviderDefinition) -> Table:
    table = Table(title=f"{provider.name} ({provider.id})", header_style="bold cyan")
    table.add_column("Model")
    table.add_column("Name")
    table.add_column("Context", justify="right")
    table.add_column("In / 1K", justify="right")
    table.add_column("Out / 1K", justify="right")
    table.add_column("Capabilities")
    for model in provider.models:
        model_id = f"[bold]{escape(model.id)}[/bold]" if model.id == provider.default_model else escape(model.id)
        table.add_row(
            model_id,
            escape(model.name),
            format_context_length(model.max_tokens),
            format_cost(model.cost_per_1k_input),
            format_cost(model.cost_per_1k_output),
            ", ".join(model.capabilities),
        )
    return table


@app.callback(invoke_without_command=True)
def main(
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample config JSON.")] = False,
) -> None:
    if sample_config:
        console.print(sample_config_json())
        raise typer.Exit(0)


@app.command()
def models(
    provider: Annotated[str | None, typer.Option("--provider", "-p", help="Only show this provider.")] = None,
    refresh: Annotated[bool, typer.Option("--refresh", "-r", help="Ignore the cache and refetch.")] = False,
) -> None:
    """List AI providers and the models available for each."""
    ctx = _context()

    async def collect() -> list[ProviderDefinition]:
        if refresh:
            try:
                await ctx.catalog.refresh()
            except CatalogFetchError as exc:
                console.print(f"[yellow]{escape(str(exc))}. Showing built-in models.[/]")
                return ctx.directory.static_providers()
        return await ctx.directory.get_providers_with_models()

    with console.status("[bold #8abeb7]Loading model catalog...[/]"):
        providers = asyncio.run(collect())

    if provider is not None:
        providers = [p for p in providers if p.id == provider]
        if not providers:
            known = ", ".join(ctx.directory.provider_ids)
            console.print(f"[red]Unknown provider: {escape(provider)}. Use one of: {known}.[/]")
            raise typer.Exit(1)

    for item in providers:
        console.print(_models_table(item))


@app.command()
def status() -> None:
    """Show host, disk and memory usage."""
    ctx = _context()
    result = asyncio.run(ctx.monitor.refresh())
    if isinstance(result, Err):
        console.print(f"[red]Could not read system info: {escape(result.unwrap_err())}[/]")
        raise typer.Exit(1)

    info = result.unwrap()
    disk = disk_percent(info)
    memory = memory_percent(info)
    table = Table(title=f"{escape(info.hostname)} - {escape(info.os)}", header_style="bold cyan")
    table.add_column("Resource")
    table.add_column("Used", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Usage")
    table.add_row(
        "Disk",
        format_bytes(info.disk_used),
        format_bytes(info.disk_total),
        f"{relative_bar(disk, 100)} {disk}%",
    )
    table.add_row(
        "Memory",
        format_bytes(info.memory_used),
        format_bytes(info.memory_total),
        f"{relative_bar(memory, 100)} {memory}%",
    )
    console.print(table)


@app.command()
def dashboard() -> None:
    """Launch the interactive dashboard."""
    DashboardApp(_context()).run()


@dirs_app.command("list")
def dirs_list() -> None:
    ctx = _context()
    for directory in asyncio.run(ctx.scan_directories.load()):
        console.print(escape(directory))


@dirs_app.command("add")
def dirs_add(directory: Annotated[str, typer.Argument(help="Directory to add.")]) -> None:
    ctx = _context()

    async def add() -> None:
        await ctx.scan_directories.load()
        result = await ctx.scan_directories.add(directory)
        if isinstance(result, Err):
            console.print(f"[red]{escape(result.unwrap_err())}[/]")
            raise typer.Exit(1)

    asyncio.run(add())


@dirs_app.command("remove")
def dirs_remove(directory: Annotated[str, typer.Argument(help="Directory to remove.")]) -> None:
    ctx = _context()

    async def remove() -> None:
        await ctx.scan_directories.load()
        result = await ctx.scan_directories.remove(directory)
        if isinstance(result, Err):
            console.print(f"[red]{escape(result.unwrap_err())}[/]")
            raise typer.Exit(1)

    asyncio.run(remove())


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
