"""
Maze Trail - find the way from the top left to the bottom right corner
"""

import argparse
import random

import pygame

from game.game_state import GameStateManager, GameState
from game.input_map import (
    key_token, move_for_key, move_for_button, is_control_key, is_confirm_key, is_cancel_key
)
from game.renderer import BoardLayout, compute_cell_size, draw_session, draw_generation
from game.session import GameSession
from game.ui_manager import UIManager, button_at
from maze.difficulty import DIFFICULTY_CONFIGS, get_difficulty_config, get_difficulty_by_name
from maze.errors import InvalidDimension
from maze.generator import gen_dfs_backtracker, maze_from_state, check_dimensions
from utils.colors import COLOR_BG
from utils.constants import FPS, PANEL_H
from config import (
    GAME_TITLE, GAME_VERSION, DEFAULT_DIFFICULTY, WINDOW_W, WINDOW_H,
    MAX_BOARD_W, MAX_BOARD_H, GEN_SPEED, KEY_REPEAT_DELAY, KEY_REPEAT_INTERVAL
)


class MazeApp:
    """
    Main game class
    """
    def __init__(self, difficulty=DEFAULT_DIFFICULTY, size=None, seed=None, animate=False):
        """
        Args:
            difficulty: Initially selected difficulty (0-4)
            size: Square maze size overriding the difficulty's size
            seed: Seed for reproducible mazes
            animate: Show carving step by step
        """
        pygame.init()
        pygame.key.set_repeat(KEY_REPEAT_DELAY, KEY_REPEAT_INTERVAL)

        self.state_manager = GameStateManager()
        self.ui_manager = UIManager()

        self.selected_difficulty = get_difficulty_config(difficulty).level
        self.size_override = size
        self.rng = random.Random(seed) if seed is not None else None
        self.animate = animate

        # Current game
        self.session = None
        self.layout = None
        self.button_rects = {}

        # Animated generation state
        self.generator = None
        self.gen_state = None
        self.gen_accum = 0.0

        self.screen = None
        self.screen_w = WINDOW_W
        self.screen_h = WINDOW_H
        self._create_screen(WINDOW_W, WINDOW_H)

        self.clock = pygame.time.Clock()
        self.running = True

    def _create_screen(self, width, height):
        self.screen_w = width
        self.screen_h = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

    def board_size(self):
        """Square maze size for the next game"""
        if self.size_override:
            return self.size_override
        return get_difficulty_config(self.selected_difficulty).size

    def difficulty_name(self):
        if self.size_override:
            return "CUSTOM"
        return get_difficulty_config(self.selected_difficulty).name

    def _setup_board(self, cols, rows):
        """Size the window to the maze"""
        cell_size = compute_cell_size(cols, rows, MAX_BOARD_W, MAX_BOARD_H)
        self.layout = BoardLayout(cols, rows, cell_size)
        width = max(self.layout.width, 420)
        self.layout.origin = ((width - self.layout.width) // 2, 0)
        self._create_screen(width, self.layout.height + PANEL_H)

    # ========== SESSION LIFECYCLE ==========

    def start_game(self):
        """Throw away the current game and start a new one"""
        if self.session is not None:
            self.session.controls.stop()
        self.session = None

        size = self.board_size()
        self._setup_board(size, size)

        if self.animate:
            self.generator = gen_dfs_backtracker(size, size, rng=self.rng)
            self.gen_state = next(self.generator)
            self.gen_accum = 0.0
            self.state_manager.transition_to(GameState.GENERATING)
        else:
            self._begin(GameSession.new(size, size, rng=self.rng))

    def _step_generation(self, steps):
        """Advance animated generation (all the way when steps is None)"""
        while not self.gen_state["done"] and (steps is None or steps > 0):
            self.gen_state = next(self.generator)
            if steps is not None:
                steps -= 1

        if self.gen_state["done"]:
            maze = maze_from_state(self.layout.cols, self.layout.rows, self.gen_state)
            self.generator = None
            self.gen_state = None
            self._begin(GameSession(maze))

    def _begin(self, session):
        self.session = session
        self.state_manager.transition_to(GameState.PLAYING)
        print(f"New game: {self.difficulty_name()} {session.maze.cols}x{session.maze.rows}")
        if session.won:
            self._announce_win()

    def request_restart(self):
        """Control key while playing asks first"""
        self.state_manager.transition_to(GameState.CONFIRM_RESTART)

    def apply_move(self, move):
        """Send a resolved move to the session"""
        outcome = self.session.move(move)
        if outcome is not None and outcome.goal_reached:
            self._announce_win()

    def _announce_win(self):
        self.state_manager.transition_to(GameState.WIN)
        print(f"YOU WIN! Time {self.session.controls.elapsed_text()}, moves {self.session.moves}")

    def back_to_menu(self):
        if self.session is not None:
            self.session.controls.stop()
        self.session = None
        self.generator = None
        self.gen_state = None
        self.state_manager.transition_to(GameState.DIFFICULTY_SELECT)
        self._create_screen(WINDOW_W, WINDOW_H)

    # ========== EVENTS ==========

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
            return

        state = self.state_manager.current_state

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.state_manager.accepts_moves():
                move = move_for_button(button_at(self.button_rects, event.pos))
                if move is not None:
                    self.apply_move(move)
            return

        if event.type != pygame.KEYDOWN:
            return

        token = key_token(event)

        if state == GameState.DIFFICULTY_SELECT:
            self._handle_menu_key(token)
        elif state == GameState.GENERATING:
            if is_control_key(token):
                self._step_generation(None)
            elif is_cancel_key(token):
                self.back_to_menu()
        elif state == GameState.PLAYING:
            move = move_for_key(token)
            if move is not None:
                self.apply_move(move)
            elif is_control_key(token):
                self.request_restart()
            elif token == 'escape':
                self.back_to_menu()
        elif state == GameState.CONFIRM_RESTART:
            if is_confirm_key(token):
                self.start_game()
            elif is_cancel_key(token):
                self.state_manager.transition_to(GameState.PLAYING)
        elif state == GameState.WIN:
            if is_control_key(token):
                self.start_game()
            elif token == 'escape':
                self.back_to_menu()

    def _handle_menu_key(self, token):
        if token in ('up', 'w'):
            self.selected_difficulty = (self.selected_difficulty - 1) % len(DIFFICULTY_CONFIGS)
            self.size_override = None
        elif token in ('down', 's'):
            self.selected_difficulty = (self.selected_difficulty + 1) % len(DIFFICULTY_CONFIGS)
            self.size_override = None
        elif is_control_key(token):
            self.start_game()
        elif token == 'escape':
            self.running = False

    # ========== DRAW ==========

    def draw(self):
        self.screen.fill(COLOR_BG)
        state = self.state_manager.current_state

        if state == GameState.DIFFICULTY_SELECT:
            self.ui_manager.draw_difficulty_select(self.screen, self.selected_difficulty)
        elif state == GameState.GENERATING:
            draw_generation(self.screen, self.layout, self.gen_state)
            self.ui_manager.draw_generating(self.screen, self.screen_w, self.layout.height, PANEL_H)
        else:
            draw_session(self.screen, self.layout, self.session)
            self.button_rects = self.ui_manager.draw_hud(
                self.screen, self.session, self.difficulty_name(),
                self.layout.height, self.screen_w, PANEL_H
            )
            if state == GameState.CONFIRM_RESTART:
                self.ui_manager.draw_confirm_restart(self.screen)
            elif state == GameState.WIN:
                self.ui_manager.draw_win(self.screen, self.session)

        pygame.display.flip()

    def run(self):
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                self.handle_event(event)
                if not self.running:
                    break

            if self.running and self.state_manager.is_state(GameState.GENERATING):
                self.gen_accum += dt * GEN_SPEED
                steps = int(self.gen_accum)
                self.gen_accum -= steps
                self._step_generation(steps)

            if self.running:
                self.draw()

        pygame.quit()
        print("Game closed.")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=f"{GAME_TITLE} - a maze game")
    parser.add_argument("--difficulty", default=get_difficulty_config(DEFAULT_DIFFICULTY).name.lower(),
                        choices=[config.name.lower() for config in DIFFICULTY_CONFIGS],
                        help="starting difficulty (sets the maze size)")
    parser.add_argument("--size", type=int, default=None, help="square maze size, overrides difficulty")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible mazes")
    parser.add_argument("--animate", action="store_true", help="show maze carving")
    args = parser.parse_args(argv)
    if args.size is not None:
        try:
            check_dimensions(args.size, args.size)
        except InvalidDimension as e:
            parser.error(str(e))
    return args


def main(argv=None):
    args = parse_args(argv)
    difficulty = get_difficulty_by_name(args.difficulty).level
    app = MazeApp(difficulty=difficulty, size=args.size, seed=args.seed, animate=args.animate)
    app.run()


if __name__ == "__main__":
    main()
