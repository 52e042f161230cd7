"""
cli.py

PURPOSE: Command-line interface for the adventure.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI is the read-evaluate loop around the engine:
- play: Play the game interactively
- config: Show the effective configuration

It reads one line per turn, hands it to GameEngine.process_input, and prints
the lines it gets back. It stops on QUIT, on a win, or at end of input.
"""

import logging
from typing import Annotated

import typer
from rich.console import Console

from ruby_quest import __version__
from ruby_quest.catalog import INTRO, TITLE, WIN_MESSAGE
from ruby_quest.config import get_settings
from ruby_quest.engine.engine import GameEngine
from ruby_quest.observability import init_telemetry, shutdown_telemetry
from ruby_quest.ui import plain

app = typer.Typer(
    name="ruby-quest",
    help="Find the magic ruby in Uncle Simon's other world.",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"ruby-quest version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """The Magic Ruby - a text adventure."""
    pass


@app.command()
def play(
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Show debug information after each turn",
        ),
    ] = False,
    no_intro: Annotated[
        bool,
        typer.Option(
            "--no-intro",
            help="Skip the opening story",
        ),
    ] = False,
) -> None:
    """Play the game interactively."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    init_telemetry(settings.otel)
    debug = debug or settings.debug

    engine = GameEngine()

    plain.print_title(TITLE)
    if settings.show_intro and not no_intro:
        plain.print_intro(INTRO)

    # Show initial room description
    plain.print_lines(engine.describe_current_room())

    # Main game loop
    try:
        while True:
            try:
                user_input = plain.print_prompt()
            except (EOFError, KeyboardInterrupt):
                console.print()
                break

            result = engine.process_input(user_input)

            if result.error:
                plain.print_error(result.lines)
            else:
                plain.print_lines(result.lines)

            if result.won:
                console.print()
                plain.print_game_over(True, WIN_MESSAGE)
                break
            if not result.keep_playing:
                break

            # Debug output
            if debug:
                plain.print_debug(
                    {
                        "room": engine.state.current_room.name,
                        "carrying": [obj.name for obj in engine.state.carried()],
                        "turns": engine.state.turns,
                        "flags": engine.state.flags.model_dump(),
                    }
                )
    finally:
        shutdown_telemetry()


@app.command("config")
def config_cmd() -> None:
    """Show the current configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Debug: {settings.debug}")
    console.print(f"  Show intro: {settings.show_intro}")
    console.print()
    console.print("[bold]OpenTelemetry Settings:[/bold]")
    console.print(f"  Enabled: {settings.otel.enabled}")
    console.print(f"  Service name: {settings.otel.service_name}")
    endpoint_status = settings.otel.endpoint if settings.otel.endpoint else "(console only)"
    console.print(f"  Endpoint: {endpoint_status}")


if __name__ == "__main__":
    app()
