"""DNS inspection commands."""

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from aliddns.config import DDNSConfig, get_fqdn, load_config, load_env_settings
from aliddns.errors import DDNSError
from aliddns.providers.dns import AliDNSProvider
from aliddns.resolver import resolve_address

app = typer.Typer()
console = Console(emoji=False)


def get_config() -> DDNSConfig:
    """Load the configuration or exit with a readable message."""
    try:
        return load_config()
    except FileNotFoundError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]✗[/red] Invalid configuration: {escape(str(e))}")
        raise typer.Exit(1)


def get_dns_provider(config: DDNSConfig) -> AliDNSProvider:
    """Get the AliDNS provider for the configured endpoint."""
    settings = load_env_settings()

    if not settings.access_key_id or not settings.access_key_secret:
        console.print("[red]✗[/red] AliDNS credentials not configured")
        console.print("  Set ALIDDNS_ACCESS_KEY_ID and ALIDDNS_ACCESS_KEY_SECRET")
        raise typer.Exit(1)

    return AliDNSProvider(
        access_key_id=settings.access_key_id,
        access_key_secret=settings.access_key_secret,
        endpoint=config.endpoints.alidns,
        timeout=config.timeout,
    )


@app.command()
def show() -> None:
    """Show the current record for each enabled address family."""
    config = get_config()
    fqdn = get_fqdn(config)

    console.print(f"[bold]DNS records for {escape(fqdn)}[/bold]")

    table = Table()
    table.add_column("Type")
    table.add_column("Name")
    table.add_column("Value")
    table.add_column("Record ID")

    with get_dns_provider(config) as provider:
        for family in config.mode.families:
            try:
                record = provider.lookup_record(config.domain, config.rr, family.record_type)
            except DDNSError as e:
                table.add_row(family.record_type, fqdn, f"[red]{escape(str(e))}[/red]", "-")
                continue

            if record is None:
                table.add_row(family.record_type, fqdn, "[dim]not set[/dim]", "-")
            else:
                table.add_row(record.record_type, fqdn, record.value, record.record_id)

    console.print(table)


@app.command()
def ip() -> None:
    """Show the public address detected for each enabled address family."""
    config = get_config()

    for family in config.mode.families:
        try:
            address = resolve_address(family, config.endpoints, config.timeout)
            console.print(f"[green]✓[/green] {family.label}: {address}")
        except DDNSError as e:
            console.print(f"[red]✗[/red] {family.label}: {escape(str(e))}")
