from typing import Optional, TextIO
from rich.console import Console
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from maze_game.algo.builder import MazeBuilder

# Menu return codes
PLAY = 1
MAIN_MENU = 2
QUIT = 0

def main_menu(console: Console, stream: Optional[TextIO] = None) -> int:
    """Returns PLAY or QUIT."""
    console.clear()
    console.print(Panel.fit(
        "1. [bold green]Play Game[/]\n"
        "2. [bold red]Quit[/]",
        title="WELCOME TO THE MAZE",
    ))
    choice = Prompt.ask("Enter your choice", choices=["1", "2"], console=console, stream=stream)
    return PLAY if choice == "1" else QUIT

def prompt_size(console: Console, low: int = MazeBuilder.MIN_SIZE, high: int = MazeBuilder.MAX_SIZE,
                stream: Optional[TextIO] = None) -> int:
    console.clear()
    console.print("[bold]--- Random Maze Generator ---[/]")
    while True:
        size = IntPrompt.ask(
            f"Enter the desired maze size (N for NxN, min {low}, max {high})",
            console=console,
            stream=stream,
        )
        if low <= size <= high:
            return size
        console.print(f"[red]Invalid input. Please enter a number between {low} and {high}.[/]")

def post_game_menu(console: Console, stream: Optional[TextIO] = None) -> int:
    """Returns PLAY (new maze), MAIN_MENU or QUIT."""
    console.print(Panel.fit(
        "1. [bold green]Play New Maze[/]\n"
        "2. [bold blue]Back to Main Menu[/]\n"
        "3. [bold red]Quit Game[/]",
        title="What would you like to do?",
    ))
    choice = Prompt.ask("Enter your choice", choices=["1", "2", "3"], console=console, stream=stream)
    return {"1": PLAY, "2": MAIN_MENU, "3": QUIT}[choice]

def generating_notice(console: Console, size: int):
    n = MazeBuilder.effective_size(size)
    console.print(f"\nGenerating a random maze of size {n}x{n}...")
