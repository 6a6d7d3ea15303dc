"""
Input mapping - turns key names and button ids into moves
"""

import pygame
from utils.constants import MOVES, MOVES_BY_NAME, CONTROL_KEYS


KEY_TO_MOVE = {key: move for move in MOVES for key in move.keys}


def key_token(event):
    """Lowercase pygame key name for a KEYDOWN event"""
    return pygame.key.name(event.key).lower()


def move_for_key(token):
    """Move bound to a key name, or None"""
    if token is None:
        return None
    return KEY_TO_MOVE.get(token.lower())


def move_for_button(button_id):
    """Move bound to an on-screen arrow button, or None"""
    if button_id is None:
        return None
    return MOVES_BY_NAME.get(button_id)


def is_control_key(token):
    """Start / restart keys (Enter, Space, R)"""
    return token is not None and token.lower() in CONTROL_KEYS


def is_confirm_key(token):
    return token is not None and (token.lower() == 'y' or is_control_key(token))


def is_cancel_key(token):
    return token is not None and token.lower() in ('n', 'escape')
