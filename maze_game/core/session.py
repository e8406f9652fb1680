import time
from enum import Enum
from typing import Callable, Dict, Optional, Tuple
from maze_game.core.grid import Grid

Position = Tuple[int, int]

class Token(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    RESET = "reset"
    QUIT = "quit"
    NONE = "none"

class SessionResult(Enum):
    IDLE = "idle"
    MOVED = "moved"
    WON = "won"
    RESET = "reset"
    QUIT = "quit"

class SessionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"

DELTAS: Dict[Token, Position] = {
    Token.UP: Grid.UP,
    Token.DOWN: Grid.DOWN,
    Token.LEFT: Grid.LEFT,
    Token.RIGHT: Grid.RIGHT,
}

class PlayerState:
    __slots__ = ('position', 'previous_position', 'start_time', 'final_time')

    def __init__(self, start: Position):
        self.position = start
        self.previous_position = start
        self.start_time: Optional[float] = None
        self.final_time: Optional[float] = None

    def snapshot(self) -> tuple:
        return (self.position, self.previous_position, self.start_time, self.final_time)

class GameSession:
    """
    Player movement, timing and win detection over one generated grid.

    The clock is only read, never polled: it is sampled when the first
    accepted move starts the timer, when the player reaches End, and whenever
    a caller asks for elapsed().
    """

    START = (1, 1)

    def __init__(self, grid: Grid, clock: Callable[[], float] = time.monotonic):
        self.grid = grid
        self.clock = clock
        self.begin()

    def begin(self):
        """Place the player on Start and clear all timing."""
        self.player = PlayerState(self.START)
        self.state = SessionState.IDLE

    def reset(self) -> SessionResult:
        self.begin()
        return SessionResult.RESET

    @property
    def position(self) -> Position:
        return self.player.position

    @property
    def previous_position(self) -> Position:
        return self.player.previous_position

    @property
    def timer_started(self) -> bool:
        return self.player.start_time is not None

    @property
    def timer_running(self) -> bool:
        return self.player.start_time is not None and self.player.final_time is None

    @property
    def final_time(self) -> Optional[float]:
        return self.player.final_time

    @property
    def is_finished(self) -> bool:
        return self.state is SessionState.FINISHED

    def elapsed(self) -> float:
        if self.player.final_time is not None:
            return self.player.final_time
        if self.player.start_time is None:
            return 0.0
        return self.clock() - self.player.start_time

    def apply(self, token: Token) -> SessionResult:
        if token is Token.QUIT:
            return SessionResult.QUIT
        if token is Token.RESET:
            return self.reset()

        delta = DELTAS.get(token)
        if delta is None or self.state is SessionState.FINISHED:
            return SessionResult.IDLE

        row, col = self.player.position
        nr, nc = row + delta[0], col + delta[1]
        if not self.grid.in_bounds(nr, nc) or self.grid.is_wall(nr, nc):
            return SessionResult.IDLE

        # First accepted move starts the clock
        if self.player.start_time is None:
            self.player.start_time = self.clock()

        self.player.previous_position = self.player.position
        self.player.position = (nr, nc)

        if self.grid.get(nr, nc) == Grid.END:
            self.player.final_time = self.clock() - self.player.start_time
            self.state = SessionState.FINISHED
            return SessionResult.WON

        self.state = SessionState.RUNNING
        return SessionResult.MOVED
