"""
Parley CLI — `parley` command.

Commands:
  parley chat              Interactive REPL chat
  parley send <message>    One-shot message
  parley config <cmd>      Show or change the responder URL
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install parley[cli]")

import httpx

from parley.client import AsyncParley
from parley.errors import ConfigError
from parley.transport.http import DEFAULT_TIMEOUT_S

console = Console()
CONFIG_FILE = Path.home() / ".parley" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _check_url(url: str) -> str:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ConfigError(f"Invalid URL {url!r}: {e}")
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigError(f"Responder URL must be http(s)://host/..., got {url!r}")
    return url


def _check_timeout(value) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Timeout must be a number of seconds, got {value!r}")
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive, got {value!r}")
    return timeout


def _get_client(api_url: Optional[str] = None) -> AsyncParley:
    cfg = _load_config()
    url = api_url or cfg.get("api_url")
    try:
        if url:
            _check_url(url)
        timeout = _check_timeout(cfg.get("timeout", DEFAULT_TIMEOUT_S))
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    return AsyncParley(api_url=url, timeout=timeout)


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log requests and state changes.")
def main(verbose: bool):
    """Parley CLI — chat with a remote responder."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")


# Register subcommands from separate modules
from parley.cli.chat import chat_cmd, send_cmd
from parley.cli.config import config

main.add_command(chat_cmd)
main.add_command(send_cmd)
main.add_command(config)


if __name__ == "__main__":
    main()
