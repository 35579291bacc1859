"""CLI: parley chat, parley send"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from parley.models.message import ASSISTANT_ROLE, USER_ROLE, Message
from parley.models.state import ChatView, SubmitOutcome

console = Console()


def _get_client(api_url: Optional[str] = None):
    from parley.cli.main import _get_client
    return _get_client(api_url)


def _run(coro):
    from parley.cli.main import _run
    return _run(coro)


def render_message(message: Message) -> str:
    if message.role == USER_ROLE:
        return f"[blue]You:[/blue] {escape(message.content)}"
    return f"[green]Assistant:[/green] {escape(message.content)}"


@click.command("chat")
@click.option("--url", "api_url", default=None, help="Responder URL (overrides config)")
def chat_cmd(api_url: Optional[str]):
    """Interactive chat with the responder."""

    async def _chat():
        client = _get_client(api_url)
        shown = 0

        def on_change(view: ChatView) -> None:
            nonlocal shown
            for message in view.transcript[shown:]:
                # the prompt already echoed the user's line
                if message.role == ASSISTANT_ROLE:
                    console.print(render_message(message))
            shown = len(view.transcript)

        remove = client.subscribe(on_change)
        console.print(f"[dim]Responder: {client.api_url}[/dim]")
        console.print("[cyan]Type your message (/quit to exit)[/cyan]\n")
        try:
            while True:
                msg = click.prompt("You", prompt_suffix=": ")
                if msg.strip().lower() in ("/quit", "/exit"):
                    break
                client.update_draft(msg)
                with console.status("Waiting for reply..."):
                    outcome = await client.submit()
                if outcome is SubmitOutcome.REJECTED:
                    console.print("[dim]Nothing to send.[/dim]")
                elif client.last_error is not None:
                    console.print(f"[red]{client.last_error.message}[/red]")
        except (KeyboardInterrupt, EOFError, click.Abort):
            pass
        finally:
            remove()
            await client.close()

    _run(_chat())


@click.command("send")
@click.argument("message")
@click.option("--url", "api_url", default=None, help="Responder URL (overrides config)")
@click.option("--json-output", "--json", is_flag=True)
def send_cmd(message: str, api_url: Optional[str], json_output: bool):
    """Send a one-shot message."""

    async def _send() -> SubmitOutcome:
        client = _get_client(api_url)
        try:
            outcome = await client.say(message)
        finally:
            await client.close()
        view = client.snapshot()
        if json_output:
            click.echo(json.dumps({
                "outcome": outcome.value,
                "transcript": [m.model_dump() for m in view.transcript],
                "error": view.error.model_dump() if view.error else None,
            }))
        elif outcome is SubmitOutcome.REPLIED:
            console.print(render_message(view.transcript[-1]))
        elif outcome is SubmitOutcome.REJECTED:
            console.print("[yellow]Nothing to send.[/yellow]")
        else:
            console.print(f"[red]{view.error.message}[/red]")
        return outcome

    if _run(_send()) is not SubmitOutcome.REPLIED:
        raise SystemExit(1)
