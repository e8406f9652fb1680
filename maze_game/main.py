import argparse
import sys
import os
import logging
from typing import Callable, Optional

# Ensure project root is in path so we can import 'maze_game' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_game.core.grid import Grid
from maze_game.core.session import GameSession, SessionResult, Token

logger = logging.getLogger("maze_game")

TEXT_GLYPHS = {Grid.WALL: "#", Grid.OPEN: " ", Grid.START: "S", Grid.END: "E"}

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def grid_to_text(grid: Grid) -> str:
    return "\n".join("".join(TEXT_GLYPHS[kind] for kind in row) for row in grid.rows())

def play_round(session: GameSession, next_token: Callable[[], Token], renderer) -> SessionResult:
    """
    Feeds tokens into the session until the player wins or quits.
    The renderer is told about every result; it decides what to redraw.
    """
    renderer.draw_initial()
    while True:
        result = session.apply(next_token())
        renderer.update(result)
        if result in (SessionResult.WON, SessionResult.QUIT):
            return result

def play_terminal(size: Optional[int], seed: Optional[int]):
    from rich.console import Console
    from maze_game.algo.builder import MazeBuilder
    from maze_game.io.keyboard import KeyReader
    from maze_game.viz import menu
    from maze_game.viz.terminal import TerminalRenderer

    console = Console(highlight=False)
    builder = MazeBuilder(seed=seed)

    while menu.main_menu(console) == menu.PLAY:
        # One or more mazes until the player quits or goes back to the menu
        while True:
            if size is None:
                requested = menu.prompt_size(console)
            else:
                requested, size = size, None
            menu.generating_notice(console, requested)

            grid = builder.build(requested)
            session = GameSession(grid)
            renderer = TerminalRenderer(session, console)

            try:
                with KeyReader() as reader:
                    result = play_round(session, reader.read_token, renderer)
            finally:
                renderer.close()

            if result is SessionResult.QUIT:
                logger.info(f"Quit {grid.width}x{grid.height} maze at {session.position}")
                break

            logger.info(f"Solved {grid.width}x{grid.height} maze in {session.final_time:.2f}s")
            choice = menu.post_game_menu(console)
            if choice == menu.PLAY:
                continue
            if choice == menu.QUIT:
                console.print("Program finished. Goodbye!")
                return
            break

    console.print("Program finished. Goodbye!")

def play_window(size: int, seed: Optional[int], cell_size: int, record: bool):
    from maze_game.algo.builder import MazeBuilder
    from maze_game.viz.renderer import Renderer

    builder = MazeBuilder(seed=seed)
    while True:
        grid = builder.build(size)
        session = GameSession(grid)

        logger.info(f"Opening window for {grid.width}x{grid.height} maze...")
        renderer = Renderer(session, cell_size=cell_size, record=record)
        renderer.init_window()
        result = renderer.run_loop()

        if result is not SessionResult.WON:
            logger.info("Window closed.")
            return
        logger.info(f"Solved in {session.final_time:.2f}s, generating a new maze...")

def main(argv=None):
    parser = argparse.ArgumentParser(description="Maze: random maze generator and terminal game")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Play Command
    play_parser = subparsers.add_parser("play", help="Play the maze game")
    play_parser.add_argument("--size", type=int, default=None, help="Maze size N for NxN (10-50), skips the prompt")
    play_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    play_parser.add_argument("--window", action="store_true", help="Play in a pygame window instead of the terminal")
    play_parser.add_argument("--cell-size", type=int, default=16, help="Pixels per cell in window mode")
    play_parser.add_argument("--record", action="store_true", help="Record window gameplay video")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it")
    gen_parser.add_argument("--size", type=int, default=21, help="Maze size N for NxN (10-50)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time maze generation across sizes")
    bench_parser.add_argument("--runs", type=int, default=20, help="Builds per size")

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return

    from maze_game.algo.builder import MazeBuilder

    size = getattr(args, "size", None)
    if size is not None and not (MazeBuilder.MIN_SIZE <= size <= MazeBuilder.MAX_SIZE):
        parser.error(f"--size must be between {MazeBuilder.MIN_SIZE} and {MazeBuilder.MAX_SIZE}")

    logger.info(f"Running command: {args.command}")

    if args.command == "play":
        if args.window:
            play_window(size or 21, args.seed, args.cell_size, args.record)
        else:
            play_terminal(size, args.seed)

    elif args.command == "generate":
        from maze_game.core.complexity import MazeAnalyzer

        grid = MazeBuilder(seed=args.seed).build(args.size)
        logger.info(f"Generated {grid.width}x{grid.height} maze (seed={args.seed})")
        print(grid_to_text(grid))

        stats = MazeAnalyzer.calculate_stats(grid)
        logger.info(f"Stats: {stats}")

    elif args.command == "benchmark":
        import time

        print(f"\n{'SIZE':<10} | {'AVG (ms)':<10} | {'OPEN':<8} | {'DEAD ENDS':<10}")
        print("-" * 46)

        from maze_game.core.complexity import MazeAnalyzer
        builder = MazeBuilder()
        for size in range(MazeBuilder.MIN_SIZE, MazeBuilder.MAX_SIZE + 1, 10):
            t_start = time.perf_counter()
            for _ in range(args.runs):
                grid = builder.build(size)
            duration = (time.perf_counter() - t_start) / args.runs

            stats = MazeAnalyzer.calculate_stats(grid)
            label = f"{grid.width}x{grid.height}"
            print(f"{label:<10} | {duration * 1000:<10.3f} | {stats['open_cells']:<8} | {stats['dead_ends']:<10}")

if __name__ == "__main__":
    main()
