"""
UI Manager - handles HUD, arrow buttons, difficulty menu and dialogs
"""

import pygame
from utils.colors import (
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM, COLOR_PANEL_BG,
    COLOR_MENU_SELECTION, COLOR_MENU_BORDER, COLOR_MENU_OVERLAY,
    COLOR_BUTTON, COLOR_BUTTON_BORDER
)
from utils.constants import MOVE_UP, MOVE_LEFT, MOVE_DOWN, MOVE_RIGHT
from maze.difficulty import DIFFICULTY_CONFIGS

BUTTON_SIZE = 30
BUTTON_GAP = 4

# Arrow glyph points on a unit square, per move
ARROW_POINTS = {
    MOVE_UP.name: [(0.5, 0.25), (0.75, 0.7), (0.25, 0.7)],
    MOVE_RIGHT.name: [(0.75, 0.5), (0.3, 0.25), (0.3, 0.75)],
    MOVE_DOWN.name: [(0.5, 0.75), (0.25, 0.3), (0.75, 0.3)],
    MOVE_LEFT.name: [(0.25, 0.5), (0.7, 0.25), (0.7, 0.75)],
}


def arrow_button_rects(screen_w, panel_y, panel_h):
    """
    On-screen arrow buttons at the right of the panel, laid out like a
    keyboard's arrow cluster (up on top, left/down/right below)

    Returns:
        dict: move name -> pygame.Rect
    """
    step = BUTTON_SIZE + BUTTON_GAP
    left = screen_w - 12 - 3 * BUTTON_SIZE - 2 * BUTTON_GAP
    top = panel_y + (panel_h - 2 * BUTTON_SIZE - BUTTON_GAP) // 2
    slots = {
        MOVE_UP.name: (1, 0),
        MOVE_LEFT.name: (0, 1),
        MOVE_DOWN.name: (1, 1),
        MOVE_RIGHT.name: (2, 1),
    }
    return {
        name: pygame.Rect(left + col * step, top + row * step, BUTTON_SIZE, BUTTON_SIZE)
        for name, (col, row) in slots.items()
    }


def button_at(rects, pos):
    """Name of the arrow button under pos, or None"""
    for name, rect in rects.items():
        if rect.collidepoint(pos):
            return name
    return None


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self):
        # Fonts
        self.font_small = None
        self.font_medium = None
        self.font_large = None
        self.font_title = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_large = pygame.font.SysFont("consolas", 28, bold=True)
        self.font_title = pygame.font.SysFont("consolas", 40, bold=True)

    def draw_hud(self, screen, session, difficulty_name, panel_y, screen_w, panel_h):
        """
        Draw HUD (Heads-Up Display)

        Args:
            screen: Pygame screen
            session: Current GameSession
            difficulty_name: Label of the selected difficulty
            panel_y: Y position of panel
            screen_w: Screen width
            panel_h: Panel height

        Returns:
            dict: arrow button rects, for hit testing clicks
        """
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))

        # Timer and moves (left)
        time_text = self.font_large.render(f"Time {session.controls.elapsed_text()}", True, COLOR_TEXT)
        screen.blit(time_text, (12, panel_y + 10))
        moves_text = self.font_large.render(f"Moves {session.moves}", True, COLOR_TEXT)
        screen.blit(moves_text, (12, panel_y + 44))

        # Size and help (bottom left)
        info = f"{difficulty_name} {session.maze.cols}x{session.maze.rows} | R/ENTER: new game | ESC: menu"
        screen.blit(self.font_small.render(info, True, COLOR_TEXT_DIM), (12, panel_y + panel_h - 22))

        rects = arrow_button_rects(screen_w, panel_y, panel_h)
        self._draw_arrow_buttons(screen, rects)
        return rects

    def _draw_arrow_buttons(self, screen, rects):
        """Draw the on-screen arrow buttons"""
        for name, rect in rects.items():
            pygame.draw.rect(screen, COLOR_BUTTON, rect, border_radius=5)
            pygame.draw.rect(screen, COLOR_BUTTON_BORDER, rect, 2, border_radius=5)
            points = [(rect.x + px * rect.w, rect.y + py * rect.h) for px, py in ARROW_POINTS[name]]
            pygame.draw.polygon(screen, COLOR_TEXT, points)

    def draw_difficulty_select(self, screen, selected_difficulty):
        """Draw difficulty selection screen"""
        screen_w, screen_h = screen.get_size()

        title = self.font_title.render("SELECT DIFFICULTY", True, COLOR_TEXT_HIGHLIGHT)
        title_rect = title.get_rect(center=(screen_w // 2, 60))
        screen.blit(title, title_rect)

        start_y = 140
        gap = 60

        for i, config in enumerate(DIFFICULTY_CONFIGS):
            is_selected = i == selected_difficulty
            color = COLOR_MENU_SELECTION if is_selected else COLOR_TEXT

            text = self.font_large.render(config.name, True, color)
            text_rect = text.get_rect(center=(screen_w // 2, start_y + i * gap))

            if is_selected:
                border_rect = text_rect.inflate(50, 25)
                pygame.draw.rect(screen, COLOR_MENU_BORDER, border_rect, 3, border_radius=8)

                desc = self.font_small.render(f"{config.cols} x {config.rows} cells", True, COLOR_TEXT_DIM)
                desc_rect = desc.get_rect(center=(screen_w // 2, start_y + i * gap + 25))
                screen.blit(desc, desc_rect)

            screen.blit(text, text_rect)

        help_text = self.font_small.render("UP/DOWN: Navigate | ENTER: Start | ESC: Quit", True, COLOR_TEXT_DIM)
        help_rect = help_text.get_rect(center=(screen_w // 2, screen_h - 40))
        screen.blit(help_text, help_rect)

    def draw_dialog(self, screen, title, lines, title_color=COLOR_TEXT_HIGHLIGHT):
        """Draw a centered dialog over a dimmed screen"""
        screen_w, screen_h = screen.get_size()

        overlay = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        overlay.fill(COLOR_MENU_OVERLAY)
        screen.blit(overlay, (0, 0))

        box = pygame.Rect(0, 0, min(screen_w - 40, 420), 100 + 32 * len(lines))
        box.center = (screen_w // 2, screen_h // 2)
        pygame.draw.rect(screen, COLOR_PANEL_BG, box, border_radius=10)
        pygame.draw.rect(screen, COLOR_MENU_BORDER, box, 3, border_radius=10)

        title_text = self.font_large.render(title, True, title_color)
        screen.blit(title_text, title_text.get_rect(center=(box.centerx, box.top + 36)))

        for i, line in enumerate(lines):
            text = self.font_medium.render(line, True, COLOR_TEXT)
            screen.blit(text, text.get_rect(center=(box.centerx, box.top + 80 + i * 32)))

    def draw_confirm_restart(self, screen):
        """Ask before throwing away a running game"""
        self.draw_dialog(screen, "START NEW GAME?", [
            "Current progress will be lost",
            "Y / ENTER: new game   N / ESC: keep playing",
        ])

    def draw_win(self, screen, session):
        """Draw win dialog with total time and moves"""
        self.draw_dialog(screen, "YOU WIN!", [
            f"Time: {session.controls.elapsed_text()}",
            f"Moves: {session.moves}",
            "ENTER: new game   ESC: menu",
        ], title_color=(255, 220, 120))

    def draw_generating(self, screen, screen_w, panel_y, panel_h):
        """Panel text while the maze is being carved"""
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))
        text = self.font_medium.render("Generating maze... ENTER: skip", True, COLOR_TEXT_DIM)
        screen.blit(text, (12, panel_y + 14))
