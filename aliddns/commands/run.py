"""Record synchronization command."""

import typer
from rich.console import Console
from rich.markup import escape

from aliddns.commands.dns import get_config, get_dns_provider
from aliddns.config import AddressMode, get_fqdn
from aliddns.reconciler import Reconciler
from aliddns.scheduler import run_scheduled

console = Console(emoji=False)


def run(
    once: bool = typer.Option(False, "--once", help="Run a single pass and exit"),
    interval: int | None = typer.Option(
        None, "--interval", "-i", min=0, help="Seconds between passes (0 runs once)"
    ),
    mode: AddressMode | None = typer.Option(
        None, "--mode", "-m", help="Address families to synchronize"
    ),
) -> None:
    """Synchronize the public address into the DNS record."""
    config = get_config()

    overrides: dict = {}
    if mode is not None:
        overrides["mode"] = mode
    if interval is not None:
        overrides["interval"] = interval
    if once:
        overrides["interval"] = 0
    if overrides:
        config = config.model_copy(update=overrides)

    provider = get_dns_provider(config)
    reconciler = Reconciler(config, provider, console=console)
    fqdn = escape(get_fqdn(config))

    def one_pass() -> None:
        if config.interval:
            console.log(f"Checking {fqdn}")
        reconciler.run_pass()

    if config.interval:
        console.print(f"[bold]Updating {fqdn} every {config.interval}s[/bold]")

    try:
        with provider:
            run_scheduled(one_pass, config.interval)
    except KeyboardInterrupt:
        console.print("[yellow]![/yellow] Stopped")
