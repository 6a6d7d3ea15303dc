"""
Color palette for Maze Trail
"""

# Background colors
COLOR_BG = (20, 22, 28)           # Main background
COLOR_MAZE_BG = (16, 18, 24)      # Maze area background
COLOR_PANEL_BG = (12, 14, 18)     # Panel background

# UI colors
COLOR_WALL = (230, 230, 230)      # Maze walls
COLOR_TEXT = (210, 210, 210)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Highlighted text
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text

# Board markers
COLOR_PLAYER = (70, 140, 255)     # Player
COLOR_PLAYER_TRAIL = (160, 230, 255)  # Trail segments
COLOR_GOAL = (60, 200, 120)       # Goal/Exit
COLOR_CARVING = (255, 170, 90)    # Current cell while generating
COLOR_VISITED_CELL = (28, 32, 40)  # Visited during generation

# Arrow buttons
COLOR_BUTTON = (40, 44, 56)
COLOR_BUTTON_BORDER = (120, 130, 150)

# Dialogs
COLOR_MENU_OVERLAY = (10, 12, 16, 200)     # Overlay (with alpha)
COLOR_MENU_SELECTION = (255, 220, 120)     # Selected menu item
COLOR_MENU_BORDER = (255, 220, 120)        # Dialog border
