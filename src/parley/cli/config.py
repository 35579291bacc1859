"""CLI: parley config set-url|show|reset"""

import click
from rich.console import Console

from parley.client import resolve_api_url
from parley.errors import ConfigError

console = Console()


def _load_config() -> dict:
    from parley.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from parley.cli.main import _save_config
    _save_config(cfg)


@click.group()
def config():
    """Responder configuration."""


@config.command("set-url")
@click.argument("url")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds")
def config_set_url(url: str, timeout):
    """Save the responder URL."""
    from parley.cli.main import _check_timeout, _check_url
    cfg = {**_load_config(), "api_url": url}
    try:
        _check_url(url)
        if timeout is not None:
            cfg["timeout"] = _check_timeout(timeout)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    _save_config(cfg)
    console.print(f"[green]Responder set to {url}[/green]")


@config.command("show")
def config_show():
    """Show the responder in use."""
    cfg = _load_config()
    if cfg.get("api_url"):
        console.print(f"Responder: {cfg['api_url']}")
    else:
        console.print(f"Responder: {resolve_api_url()} [dim](environment/default)[/dim]")
    if cfg.get("timeout"):
        console.print(f"Timeout: {cfg['timeout']}s")


@config.command("reset")
def config_reset():
    """Clear saved configuration."""
    _save_config({})
    console.print("[green]Configuration cleared.[/green]")
