import io
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from rich.console import Console

from maze_game.core.session import GameSession, Token
from maze_game.viz.terminal import TerminalRenderer
from maze_game.viz import menu

from test_session import FakeClock, corridor_grid, SOLUTION

def make_console():
    return Console(file=io.StringIO(), force_terminal=True, color_system=None, width=200)

class TestTerminalRenderer(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.session = GameSession(corridor_grid(), clock=self.clock)
        self.console = make_console()
        self.renderer = TerminalRenderer(self.session, self.console)

    def output(self):
        text = self.console.file.getvalue()
        self.console.file.seek(0)
        self.console.file.truncate()
        return text

    def test_initial_draw(self):
        self.renderer.draw_initial()
        out = self.output()
        self.assertIn("MAZE: 7x7", out)
        self.assertIn("Time: --.--s (Start moving!)", out)
        self.assertIn("Current Pos: (1, 1)", out)
        # Player is drawn over Start, End is visible
        self.assertIn(TerminalRenderer.GLYPH_PLAYER, out)
        self.assertIn(TerminalRenderer.GLYPH_END, out)
        self.assertIn(TerminalRenderer.GLYPH_WALL * 7, out)

    def test_move_redraws_two_cells(self):
        self.renderer.draw_initial()
        self.output()

        self.clock.advance(1.0)
        self.renderer.update(self.session.apply(Token.DOWN))
        out = self.output()
        self.assertIn("Current Pos: (2, 1)", out)
        self.assertIn("Time: 0.00s", out)
        # Old cell at board row 1 and new cell at board row 2, both column 1
        self.assertIn("\x1b[6;3H" + TerminalRenderer.GLYPH_START, out)
        self.assertIn("\x1b[7;3H" + TerminalRenderer.GLYPH_PLAYER, out)

    def test_idle_draws_nothing(self):
        self.renderer.draw_initial()
        self.output()
        self.renderer.update(self.session.apply(Token.RIGHT))
        self.assertEqual(self.output(), "")

    def test_win_shows_final_time(self):
        self.renderer.draw_initial()
        for token in SOLUTION:
            self.clock.advance(0.5)
            self.renderer.update(self.session.apply(token))
        out = self.output()
        self.assertIn(TerminalRenderer.WIN_MESSAGE, out)
        self.assertIn("Final Time: 4.50s", out)

    def test_reset_redraws_board(self):
        self.renderer.draw_initial()
        self.session.apply(Token.DOWN)
        self.output()
        self.renderer.update(self.session.apply(Token.RESET))
        out = self.output()
        self.assertIn("Current Pos: (1, 1)", out)
        self.assertIn("Start moving!", out)

class TestMenus(unittest.TestCase):
    def test_main_menu(self):
        console = make_console()
        self.assertEqual(menu.main_menu(console, stream=io.StringIO("1\n")), menu.PLAY)
        self.assertEqual(menu.main_menu(console, stream=io.StringIO("2\n")), menu.QUIT)

    def test_main_menu_reprompts(self):
        console = make_console()
        self.assertEqual(menu.main_menu(console, stream=io.StringIO("7\n2\n")), menu.QUIT)

    def test_prompt_size_validates_range(self):
        console = make_console()
        size = menu.prompt_size(console, stream=io.StringIO("abc\n5\n51\n20\n"))
        self.assertEqual(size, 20)
        self.assertIn("between 10 and 50", console.file.getvalue())

    def test_post_game_menu(self):
        console = make_console()
        self.assertEqual(menu.post_game_menu(console, stream=io.StringIO("1\n")), menu.PLAY)
        self.assertEqual(menu.post_game_menu(console, stream=io.StringIO("2\n")), menu.MAIN_MENU)
        self.assertEqual(menu.post_game_menu(console, stream=io.StringIO("3\n")), menu.QUIT)

    def test_menu_codes_are_distinct(self):
        self.assertEqual(len({menu.PLAY, menu.MAIN_MENU, menu.QUIT}), 3)
        console = make_console()
        # "Play New Maze" and "Play Game" share the PLAY code
        self.assertEqual(menu.post_game_menu(console, stream=io.StringIO("1\n")),
                         menu.main_menu(console, stream=io.StringIO("1\n")))

    def test_generating_notice_rounds_up(self):
        console = make_console()
        menu.generating_notice(console, 10)
        self.assertIn("11x11", console.file.getvalue())

if __name__ == '__main__':
    unittest.main()
