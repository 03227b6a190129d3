# cli.py
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from pokedex_sdk.client import PokedexClient

console = Console()
c = PokedexClient(base_url=os.getenv("POKEDEX_URL", "http://127.0.0.1:3000"))


# Global state for status messages and the records created in this session
status_message = "Ready"
my_pokemons: Dict[int, Dict[str, Any]] = {}
page_offset = 0
page_limit = 20

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_catalog(page: Dict[str, Any], offset: int):
    results = page.get("results", []) if isinstance(page, dict) else []
    if not results:
        console.print("[italic yellow]No catalog entries[/italic yellow]")
        return

    table = Table(
        title=f"📖 Catalog (offset {offset}, {page.get('count', '?')} total)",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
    )
    table.add_column("#", style="dim", justify="right", width=6)
    table.add_column("Name", style="bold", width=24)
    table.add_column("URL", width=50)

    for i, entry in enumerate(results, start=offset + 1):
        table.add_row(str(i), entry.get("name", "N/A"), entry.get("url", ""))
    console.print(table)


def show_pokemons(pokemons: List[Dict[str, Any]]):
    if not pokemons:
        console.print("[italic yellow]No pokemons in this session[/italic yellow]")
        return

    table = Table(
        title="🎒 My Pokémon",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", justify="right", width=6)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Category", width=15)

    for p in pokemons:
        table.add_row(str(p.get("id", "N/A")), p.get("name", "N/A"), p.get("category", "N/A"))
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Errors are reported in the status panel and turn into None.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        message = _error_message(e)
        status_message = f"Error: {message}"
        console.print(show_status(status_message, False))
        return None


def _error_message(exc: Exception) -> str:
    # the service answers {"message": ...} on every failure
    response = getattr(exc, "response", None)
    if response is not None:
        try:
            return response.json().get("message", str(exc))
        except ValueError:
            pass
    return str(exc)


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_id_completer():
    return WordCompleter([str(pid) for pid in my_pokemons], ignore_case=True)


def remember(pokemon: Optional[Dict[str, Any]]):
    if pokemon and "id" in pokemon:
        my_pokemons[pokemon["id"]] = pokemon


# ---------------------------
# Layout and Header
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "⚡ Pokedex SDK",
        "[bold blue]Pokémon Collection CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_id() -> Optional[int]:
    raw = prompt_with_autocomplete("Enter pokemon ID", completer=get_id_completer()).strip()
    try:
        return int(raw)
    except ValueError:
        console.print("[red]Please enter a numeric ID.[/red]")
        return None


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, page_offset, page_limit

    console.clear()
    console.print(create_header())

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📖 Browse catalog", "4", "✏️ Update pokemon"),
            ("2", "⏭️ Next catalog page", "5", "🗑️ Delete pokemon"),
            ("3", "➕ Add pokemon", "6", "🎒 My pokemons"),
            ("", "", "q", "👋 Quit")
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 7)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            page_offset = IntPrompt.ask("Offset", default=0)
            page_limit = IntPrompt.ask("Limit", default=page_limit)
            page = try_api(c.list_pokemons, page_offset, page_limit, success_msg="Catalog loaded")
            if page is not None:
                show_catalog(page, page_offset)

        elif choice == "2":
            page_offset += page_limit
            page = try_api(c.list_pokemons, page_offset, page_limit, success_msg=f"Catalog page at {page_offset}")
            if page is not None:
                show_catalog(page, page_offset)

        elif choice == "3":
            name = prompt_with_autocomplete("Enter name").strip()
            category = prompt_with_autocomplete("🏷️ Category").strip()
            resp = try_api(c.add_pokemon, name, category, success_msg=f"Pokemon '{name}' added")
            if resp:
                remember(resp)
                show_pokemons([resp])

        elif choice == "4":
            pid = ask_id()
            if pid is None:
                continue
            current = my_pokemons.get(pid, {})
            console.print("[dim]Leave a field empty to keep it unchanged.[/dim]")
            name = prompt_with_autocomplete("New name", default=current.get("name", "")).strip()
            category = prompt_with_autocomplete("New category", default=current.get("category", "")).strip()
            resp = try_api(c.update_pokemon, pid, name or None, category or None,
                           success_msg=f"Pokemon {pid} updated")
            if resp:
                remember(resp)
                show_pokemons([resp])

        elif choice == "5":
            pid = ask_id()
            if pid is None:
                continue
            if Confirm.ask(f"[red]Delete pokemon {pid}?[/red]"):
                deleted = try_api(lambda: c.delete_pokemon(pid) or True, success_msg=f"Pokemon {pid} deleted")
                if deleted:
                    my_pokemons.pop(pid, None)

        elif choice == "6":
            show_pokemons(sorted(my_pokemons.values(), key=lambda p: p["id"]))

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Gotta catch 'em all! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n\n[bold red]Unexpected error: {e}[/bold red]")
        sys.exit(1)
