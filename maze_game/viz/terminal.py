from typing import Optional
from rich.console import Console
from rich.control import Control
from rich.text import Text
from maze_game.core.grid import Grid
from maze_game.core.session import GameSession, SessionResult

class TerminalRenderer:
    """
    Draws a session into a terminal with cursor addressing.

    The whole board is printed once per round; after that only the cell the
    player left, the cell the player entered and the status line are
    rewritten.
    """

    # Each maze cell is two characters wide so the board looks square
    GLYPH_WALL = "▓▓"
    GLYPH_PATH = "  "
    GLYPH_START = "SS"
    GLYPH_END = "EE"
    GLYPH_PLAYER = "@@"

    STYLE_WALL = "grey27"
    STYLE_START = "bold green"
    STYLE_END = "bold red"
    STYLE_PLAYER = "bold yellow"

    # Title, message, status line, blank
    HEADER_ROWS = 4
    STATUS_WIDTH = 60

    HELP = "Move with W/A/S/D or arrows. Press 'R' to reset or 'Q' to quit."
    WIN_MESSAGE = "*** CONGRATULATIONS! YOU REACHED THE END (E)! ***"

    def __init__(self, session: GameSession, console: Optional[Console] = None):
        self.session = session
        self.grid = session.grid
        self.console = console or Console(highlight=False)

    def _glyph(self, row: int, col: int) -> Text:
        if (row, col) == self.session.position:
            return Text(self.GLYPH_PLAYER, style=self.STYLE_PLAYER)
        kind = self.grid.get(row, col)
        if kind == Grid.WALL:
            return Text(self.GLYPH_WALL, style=self.STYLE_WALL)
        if kind == Grid.START:
            return Text(self.GLYPH_START, style=self.STYLE_START)
        if kind == Grid.END:
            return Text(self.GLYPH_END, style=self.STYLE_END)
        return Text(self.GLYPH_PATH)

    def _move_to(self, row: int, col: int = 0):
        self.console.control(Control.move_to(col, row))

    def status_line(self) -> Text:
        row, col = self.session.position
        line = Text(f"Current Pos: ({row}, {col}) | ")
        if self.session.final_time is not None:
            line.append(f"Final Time: {self.session.final_time:.2f}s", style="bold green")
        elif self.session.timer_running:
            line.append(f"Time: {self.session.elapsed():.2f}s")
        else:
            line.append("Time: --.--s (Start moving!)")
        # Pad so a shorter line fully overwrites the previous one
        line.pad_right(max(0, self.STATUS_WIDTH - len(line)))
        return line

    def draw_header(self, message: str = HELP, style: Optional[str] = None):
        self._move_to(0)
        self.console.print(Text(f"+---[ MAZE: {self.grid.height}x{self.grid.width} ]---+", style="bold"), soft_wrap=True)
        self.console.print(Text(message.ljust(self.STATUS_WIDTH), style=style), soft_wrap=True)
        self.console.print(self.status_line(), soft_wrap=True)
        self.console.print(soft_wrap=True)

    def draw_initial(self):
        self.console.clear()
        self.console.show_cursor(False)
        self.draw_header()
        for row in range(self.grid.height):
            line = Text()
            for col in range(self.grid.width):
                line.append_text(self._glyph(row, col))
            self.console.print(line, soft_wrap=True)
        self.console.print(Text("+" + "-" * (self.grid.width * 2 - 2) + "+", style="bold"), soft_wrap=True)
        self.park_cursor()

    def draw_cell(self, row: int, col: int):
        self._move_to(row + self.HEADER_ROWS, col * 2)
        self.console.print(self._glyph(row, col), end="", soft_wrap=True)

    def draw_player_update(self, message: str = HELP, style: Optional[str] = None):
        self.draw_cell(*self.session.previous_position)
        self.draw_cell(*self.session.position)
        self.draw_header(message, style=style)
        self.park_cursor()

    def park_cursor(self):
        # Below the board and its footer line
        self._move_to(self.grid.height + self.HEADER_ROWS + 1)

    def update(self, result: SessionResult):
        if result is SessionResult.MOVED:
            self.draw_player_update()
        elif result is SessionResult.WON:
            self.draw_player_update(self.WIN_MESSAGE, style="bold green")
        elif result is SessionResult.RESET:
            # Previous position is Start after a reset, so redraw everything
            self.draw_initial()

    def close(self):
        self.park_cursor()
        self.console.show_cursor(True)
