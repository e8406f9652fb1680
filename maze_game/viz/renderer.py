import pygame
from maze_game.core.grid import Grid
from maze_game.core.session import GameSession, SessionResult, Token

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (70, 70, 70)
    COLOR_PATH = (20, 20, 20)
    COLOR_START = (40, 180, 80)
    COLOR_END = (220, 30, 30)
    COLOR_PLAYER = (255, 215, 0)# Gold
    COLOR_TEXT = (255, 255, 255)

    HUD_HEIGHT = 70
    WIN_HOLD_SECONDS = 1.5

    KEYMAP = {
        pygame.K_UP: Token.UP, pygame.K_w: Token.UP,
        pygame.K_DOWN: Token.DOWN, pygame.K_s: Token.DOWN,
        pygame.K_LEFT: Token.LEFT, pygame.K_a: Token.LEFT,
        pygame.K_RIGHT: Token.RIGHT, pygame.K_d: Token.RIGHT,
        pygame.K_r: Token.RESET,
        pygame.K_q: Token.QUIT, pygame.K_ESCAPE: Token.QUIT,
    }

    def __init__(self, session: GameSession, cell_size: int = 16, record=False):
        self.session = session
        self.grid = session.grid
        self.cell_size = cell_size
        self.screen_width = self.grid.width * cell_size
        self.screen_height = self.grid.height * cell_size + self.HUD_HEIGHT

        # Tools
        from maze_game.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record, label=f"{self.grid.width}x{self.grid.height}")

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.last_result = SessionResult.IDLE

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.last_result = self.session.apply(Token.QUIT)
            elif event.type == pygame.KEYDOWN:
                token = self.KEYMAP.get(event.key, Token.NONE)
                result = self.session.apply(token)
                if result is not SessionResult.IDLE:
                    self.last_result = result

            if self.last_result in (SessionResult.QUIT, SessionResult.WON):
                self.running = False
                return

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        size = self.cell_size
        colors = {
            Grid.WALL: self.COLOR_WALL,
            Grid.OPEN: self.COLOR_PATH,
            Grid.START: self.COLOR_START,
            Grid.END: self.COLOR_END,
        }

        for row in range(self.grid.height):
            for col in range(self.grid.width):
                kind = self.grid.cells[row * self.grid.width + col]
                rect = (col * size, self.HUD_HEIGHT + row * size, size, size)
                pygame.draw.rect(self.surface, colors[kind], rect)

        # Player on top
        prow, pcol = self.session.position
        center = (pcol * size + size // 2, self.HUD_HEIGHT + prow * size + size // 2)
        pygame.draw.circle(self.surface, self.COLOR_PLAYER, center, max(2, size // 2 - 2))

    def draw_hud(self):
        row, col = self.session.position
        if self.session.final_time is not None:
            timer = f"Final Time: {self.session.final_time:.2f}s"
        elif self.session.timer_running:
            timer = f"Time: {self.session.elapsed():.2f}s"
        else:
            timer = "Time: --.--s (Start moving!)"
        rec_status = "REC" if self.recorder.active else ""
        info = [
            f"Pos: ({row}, {col})  {timer}  {rec_status}",
            "Arrows/WASD move, R reset, Q quit",
        ]
        if self.session.is_finished:
            info[1] = "*** YOU REACHED THE END! ***"

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self) -> SessionResult:
        """Plays until the session is won or quit, returning that result."""
        while self.running:
            self.handle_input()

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            self.recorder.capture_frame(self.surface)

            self.clock.tick(60)

        # Hold the finished board briefly so the final time is visible
        if self.last_result is SessionResult.WON:
            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()
            self.recorder.hold(self.surface, self.WIN_HOLD_SECONDS)
            pygame.time.wait(int(self.WIN_HOLD_SECONDS * 1000))

        self.recorder.stop()
        pygame.quit()
        return self.last_result
