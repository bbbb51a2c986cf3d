"""Main CLI application using Typer."""
import asyncio
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..config import THEME_NAMES
from ..conversation import ConversationStore, Role
from ..formatting import MessageFormatter, render_terminal, render_transcript_html
from ..preferences import ThemePreferences
from ..session import ChatSession
from .providers import get_store, require_llm

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="beanstash",
    help="Bean Stash: a friendly chat client with formatted transcripts",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

EXIT_COMMANDS = ("exit", "quit", "q")


def _print_message(role: Role, content: str) -> None:
    if role == Role.USER:
        console.print(f"[bold yellow]You:[/bold yellow] {content}", markup=True, highlight=False)
    else:
        console.print("[bold green]Bean Stash:[/bold green]")
        console.print(render_terminal(content))
        console.print()


@app.command()
def chat():
    """Interactive chat with Bean Stash.

    Commands inside the chat: /new, /open <id>, /history, /clear.
    """
    async def _chat():
        llm = require_llm(console)
        store = get_store()

        try:
            await store.connect()
            session = ChatSession(ConversationStore(store), llm)

            console.print("[bold cyan]Bean Stash[/bold cyan]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave. /new starts a new chat.[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                command = user_input.strip()
                if not command:
                    continue

                if command.lower() in EXIT_COMMANDS:
                    console.print("[dim]Goodbye![/dim]")
                    break

                if command == "/new":
                    session.new_chat()
                    console.print("[dim]Started a new conversation.[/dim]\n")
                    continue

                if command == "/history":
                    _print_history(await session.refresh_conversations())
                    continue

                if command.startswith("/open "):
                    conversation_id = command[len("/open "):].strip()
                    for message in await session.open(conversation_id):
                        _print_message(message.role, message.content)
                    continue

                if command == "/clear":
                    cleared = await session.clear_history(
                        lambda: typer.confirm(
                            "Are you sure you want to clear all chat history? "
                            "This action cannot be undone."
                        )
                    )
                    if cleared:
                        console.print("[green]Chat history cleared.[/green]\n")
                    continue

                with console.status("[dim]Bean Stash is typing...[/dim]"):
                    result = await session.send(command)

                if result is not None:
                    _print_message(result.assistant_message.role, result.assistant_message.content)

        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await store.disconnect()
            await llm.close()

    asyncio.run(_chat())


@app.command(name="format")
def format_command(
    text: str = typer.Argument(
        "-",
        help="Message text to format, or '-' to read from stdin"
    ),
    escape: bool = typer.Option(
        False,
        "--escape",
        "-e",
        help="HTML-escape the source text before formatting"
    )
):
    """Print the display markup for a message."""
    source = sys.stdin.read() if text == "-" else text
    typer.echo(MessageFormatter(escape_html=escape).format(source))


@app.command()
def export(
    conversation_id: str = typer.Argument(..., help="Conversation id (see 'beanstash history')"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the HTML transcript to this file instead of stdout"
    ),
    escape: bool = typer.Option(
        False,
        "--escape",
        "-e",
        help="HTML-escape message text before formatting"
    )
):
    """Export a stored conversation as an HTML transcript."""
    async def _export():
        store = get_store()
        try:
            await store.connect()
            conversations = ConversationStore(store)
            messages = await conversations.load(conversation_id)
            if not messages:
                console.print(f"[yellow]No messages stored for {conversation_id}[/yellow]")
                raise typer.Exit(code=1)

            document = render_transcript_html(
                conversations.title or conversation_id,
                messages,
                formatter=MessageFormatter(escape_html=escape),
            )
            if output is None:
                typer.echo(document)
            else:
                output.write_text(document, encoding="utf-8")
                console.print(f"[green]Wrote {len(messages)} messages to {output}[/green]")
        finally:
            await store.disconnect()

    asyncio.run(_export())


def _print_history(summaries) -> None:
    if not summaries:
        console.print("[dim]No conversations yet. Start a new conversation to see it here.[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Id", style="cyan")
    table.add_column("Title")
    for i, summary in enumerate(summaries, 1):
        table.add_row(str(i), summary.id, summary.title)
    console.print(table)


@app.command()
def history():
    """List stored conversations."""
    async def _history():
        store = get_store()
        try:
            await store.connect()
            _print_history(await ConversationStore(store).list_conversations())
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await store.disconnect()

    asyncio.run(_history())


@app.command()
def clear(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip confirmation prompt"
    )
):
    """Delete every stored conversation."""
    async def _clear():
        if not yes:
            console.print("[yellow]WARNING: This will delete all chat history![/yellow]")
            confirm = typer.confirm("Are you sure you want to continue?")
            if not confirm:
                console.print("[dim]Aborted.[/dim]")
                return

        store = get_store()
        try:
            await store.connect()
            deleted = await ConversationStore(store).clear_all()
            console.print(f"[green]Success! Deleted {deleted} conversations.[/green]")
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await store.disconnect()

    asyncio.run(_clear())


@app.command()
def theme(
    name: str | None = typer.Argument(
        None,
        help=f"Theme to select ({', '.join(THEME_NAMES)}); omit to show the current one"
    )
):
    """Show or set the TUI theme."""
    async def _theme():
        store = get_store()
        try:
            await store.connect()
            preferences = ThemePreferences(store)
            if name is None:
                current = await preferences.load_theme() or "default"
                console.print(f"Theme: [bold]{current}[/bold]")
                return
            await preferences.save_theme(name)
            console.print(f"[green]Theme set to {name}[/green]")
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await store.disconnect()

    asyncio.run(_theme())


@app.command(name="tui")
def tui_command():
    """Launch the interactive TUI chat interface."""
    async def _tui():
        from ..ui import run_textual_tui

        llm = require_llm(console)
        store = get_store()

        try:
            await store.connect()
            await run_textual_tui(llm=llm, kv_store=store)
        finally:
            await store.disconnect()
            await llm.close()
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
