"""CLI entry point for aliddns."""

import typer
from rich.console import Console

from aliddns import __version__
from aliddns.commands import dns, run
from aliddns.config import AddressMode

app = typer.Typer(
    name="aliddns",
    help="Keep an AliDNS A/AAAA record pointed at this machine's public address.",
    no_args_is_help=True,
)
console = Console()

# Register sub-commands
app.add_typer(dns.app, name="dns", help="Inspect DNS records and public addresses")


@app.command()
def init(
    rr: str = typer.Option(..., prompt="Enter the subdomain label", help="Record label, e.g. ddns"),
    domain: str = typer.Option(..., prompt="Enter your domain", help="Your domain name"),
    mode: AddressMode = typer.Option(AddressMode.IPV4, "--mode", "-m", help="Address families"),
    interval: int = typer.Option(0, "--interval", "-i", min=0, help="Seconds between passes"),
) -> None:
    """Initialize a new aliddns configuration."""
    from pathlib import Path

    import yaml

    config_path = Path.cwd() / "aliddns.yaml"

    if config_path.exists():
        overwrite = typer.confirm("aliddns.yaml already exists. Overwrite?")
        if not overwrite:
            raise typer.Abort()

    config = {
        "rr": rr,
        "domain": domain,
        "mode": mode.value,
        "interval": interval,
        "timeout": 10,
        "endpoints": {
            "alidns": "https://alidns.aliyuncs.com/",
            "ipv4": "https://api.ipify.org/?format=json",
            "ipv6": "https://api6.ipify.org/?format=json",
        },
    }

    with open(config_path, "w") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)

    env_example_path = Path.cwd() / ".env.example"
    env_content = """# aliddns environment variables
# Copy this to .env and fill in your AccessKey pair

ALIDDNS_ACCESS_KEY_ID=your-access-key-id
ALIDDNS_ACCESS_KEY_SECRET=your-access-key-secret
"""
    with open(env_example_path, "w") as f:
        f.write(env_content)

    console.print("[green]✓[/green] Created aliddns.yaml")
    console.print("[green]✓[/green] Created .env.example")
    console.print()
    console.print("Next steps:")
    console.print("  1. Copy .env.example to .env and fill in your AccessKey pair")
    console.print("  2. Run [bold]aliddns dns ip[/bold] to check address detection")
    console.print("  3. Run [bold]aliddns run[/bold] to synchronize the record")


@app.command()
def version() -> None:
    """Show the aliddns version."""
    console.print(f"aliddns v{__version__}")


@app.callback()
def main() -> None:
    """aliddns - dynamic DNS for AliDNS."""
    pass


# Expose the sync command at root level
app.command(name="run")(run.run)

if __name__ == "__main__":
    app()
