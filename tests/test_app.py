import contextlib
import io
import os
import unittest
from collections import deque

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from main import MazeApp
from game.game_state import GameState
from maze.maze_core import is_perfect
from utils.constants import DELTA_TO_MOVE


MOVE_KEYS = {
    'up': pygame.K_UP,
    'right': pygame.K_RIGHT,
    'down': pygame.K_DOWN,
    'left': pygame.K_LEFT,
}


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def route(maze, start, goal):
    """Move names along the only path from start to goal"""
    came_from = {start: None}
    q = deque([start])
    while q:
        cell = q.popleft()
        for n in maze.neighbors_open(*cell):
            if n not in came_from:
                came_from[n] = cell
                q.append(n)

    names = []
    cell = goal
    while came_from[cell] is not None:
        prev = came_from[cell]
        names.append(DELTA_TO_MOVE[(cell[0] - prev[0], cell[1] - prev[1])].name)
        cell = prev
    return names[::-1]


class AppTestCase(unittest.TestCase):
    def setUp(self):
        self._quiet = contextlib.redirect_stdout(io.StringIO())
        self._quiet.__enter__()

    def tearDown(self):
        self._quiet.__exit__(None, None, None)
        pygame.quit()

    def make_app(self, **kwargs):
        kwargs.setdefault("seed", 4)
        return MazeApp(**kwargs)

    def press(self, app, *codes):
        for code in codes:
            app.handle_event(key(code))

    def state(self, app):
        return app.state_manager.current_state


class PlayingFlowTests(AppTestCase):
    def setUp(self):
        super().setUp()
        self.app = self.make_app(size=3)
        self.press(self.app, pygame.K_RETURN)

    def test_menu_enter_starts_game(self):
        self.assertIs(self.state(self.app), GameState.PLAYING)
        self.assertEqual((self.app.session.maze.cols, self.app.session.maze.rows), (3, 3))
        self.assertEqual(self.app.session.trail, [(0, 0)])

    def test_reaching_goal_wins(self):
        session = self.app.session
        for name in route(session.maze, session.start, session.goal):
            self.press(self.app, MOVE_KEYS[name])

        self.assertIs(self.state(self.app), GameState.WIN)
        self.assertTrue(session.won)
        self.assertFalse(session.controls.running)

    def test_control_key_after_win_starts_new_game(self):
        session = self.app.session
        for name in route(session.maze, session.start, session.goal):
            self.press(self.app, MOVE_KEYS[name])
        self.press(self.app, pygame.K_r)

        self.assertIs(self.state(self.app), GameState.PLAYING)
        self.assertIsNot(self.app.session, session)
        self.assertEqual(self.app.session.moves, 0)
        self.assertFalse(self.app.session.won)

    def test_control_key_asks_before_restart(self):
        session = self.app.session
        self.press(self.app, pygame.K_SPACE)
        self.assertIs(self.state(self.app), GameState.CONFIRM_RESTART)

        # moves are ignored while the dialog is open
        for code in MOVE_KEYS.values():
            self.press(self.app, code)
        self.assertEqual(session.moves, 0)

        self.press(self.app, pygame.K_n)
        self.assertIs(self.state(self.app), GameState.PLAYING)
        self.assertIs(self.app.session, session)

    def test_escape_in_dialog_resumes(self):
        session = self.app.session
        self.press(self.app, pygame.K_SPACE, pygame.K_ESCAPE)
        self.assertIs(self.state(self.app), GameState.PLAYING)
        self.assertIs(self.app.session, session)
        self.assertTrue(session.controls.running)

    def test_confirm_replaces_session(self):
        for confirm in (pygame.K_y, pygame.K_RETURN):
            session = self.app.session
            self.press(self.app, pygame.K_SPACE, confirm)
            self.assertIs(self.state(self.app), GameState.PLAYING)
            self.assertIsNot(self.app.session, session)
            self.assertFalse(session.controls.running)

    def test_escape_returns_to_menu(self):
        session = self.app.session
        self.press(self.app, pygame.K_ESCAPE)
        self.assertIs(self.state(self.app), GameState.DIFFICULTY_SELECT)
        self.assertIsNone(self.app.session)
        self.assertFalse(session.controls.running)

    def test_arrow_button_click_moves(self):
        self.app.draw()
        session = self.app.session
        name = route(session.maze, session.start, session.goal)[0]
        pos = self.app.button_rects[name].center
        self.app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos))

        self.assertEqual(session.moves, 1)
        self.assertEqual(len(session.trail), 2)


class GenerationFlowTests(AppTestCase):
    def test_enter_skips_animation(self):
        app = self.make_app(size=6, animate=True)
        self.press(app, pygame.K_RETURN)
        self.assertIs(self.state(app), GameState.GENERATING)
        self.assertIsNone(app.session)

        self.press(app, pygame.K_RETURN)
        self.assertIs(self.state(app), GameState.PLAYING)
        self.assertTrue(is_perfect(app.session.maze))
        self.assertIsNone(app.generator)

    def test_escape_cancels_generation(self):
        app = self.make_app(size=6, animate=True)
        self.press(app, pygame.K_RETURN, pygame.K_ESCAPE)
        self.assertIs(self.state(app), GameState.DIFFICULTY_SELECT)
        self.assertIsNone(app.generator)

    def test_stepping_finishes_into_play(self):
        app = self.make_app(size=3, animate=True)
        self.press(app, pygame.K_RETURN)
        app._step_generation(1)
        self.assertIs(self.state(app), GameState.GENERATING)
        app._step_generation(100)
        self.assertIs(self.state(app), GameState.PLAYING)


class MenuTests(AppTestCase):
    def test_selection_wraps_and_clears_custom_size(self):
        app = self.make_app(difficulty=0, size=7)
        self.press(app, pygame.K_UP)
        self.assertEqual(app.selected_difficulty, 4)
        self.assertIsNone(app.size_override)
        self.press(app, pygame.K_s)
        self.assertEqual(app.selected_difficulty, 0)

    def test_escape_quits(self):
        app = self.make_app()
        self.press(app, pygame.K_ESCAPE)
        self.assertFalse(app.running)

    def test_single_cell_game_is_won_at_once(self):
        app = self.make_app(size=1)
        self.press(app, pygame.K_RETURN)

        self.assertIs(self.state(app), GameState.WIN)
        self.assertTrue(app.session.won)
        self.assertFalse(app.session.controls.running)

        first = app.session
        self.press(app, pygame.K_RETURN)
        self.assertIs(self.state(app), GameState.WIN)
        self.assertIsNot(app.session, first)
        self.assertTrue(app.session.won)

    def test_single_cell_animated_game_is_won(self):
        app = self.make_app(size=1, animate=True)
        self.press(app, pygame.K_RETURN, pygame.K_RETURN)
        self.assertIs(self.state(app), GameState.WIN)


if __name__ == "__main__":
    unittest.main()
