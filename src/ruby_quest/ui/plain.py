"""
plain.py

PURPOSE: Plain text output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module provides formatted console output using Rich.
It handles:
- Narrative lines (printed literally, no markup)
- Refusals and errors
- The title, intro and game-over panels
- Debug output
"""

import json

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

# Global console instance
console = Console()

PROMPT = "WHAT NOW? "


def print_lines(lines: list[str]) -> None:
    """Print narrative lines exactly as the engine produced them."""
    for line in lines:
        console.print(line, markup=False, highlight=False)


def print_error(lines: list[str]) -> None:
    """Print a refusal or parser complaint."""
    for line in lines:
        console.print(Text(line, style="red"))


def print_prompt() -> str:
    """Print the input prompt and get user input."""
    console.print()
    return console.input(f"[bold cyan]{PROMPT}[/bold cyan]")


def print_title(title: str) -> None:
    """Print a game title in a panel."""
    panel = Panel(
        Text(title, justify="center", style="bold"),
        border_style="blue",
    )
    console.print(panel)


def print_intro(text: str) -> None:
    """Print the opening story."""
    console.print()
    console.print(Text(text, style="italic"))


def print_debug(data: dict[str, object]) -> None:
    """Print debug information."""
    console.print("[dim]--- DEBUG ---[/dim]")
    console.print(Text(json.dumps(data, indent=2, default=str), style="dim"))
    console.print("[dim]-------------[/dim]")


def print_game_over(won: bool, message: str) -> None:
    """Print game over message."""
    if won:
        style = "bold green"
        border = "green"
    else:
        style = "bold red"
        border = "red"

    panel = Panel(
        Text(message, justify="center", style=style),
        title="Game Over",
        border_style=border,
    )
    console.print(panel)
