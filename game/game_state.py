"""
Game State Machine - manages app screens and transitions
"""

from enum import Enum, auto


class GameState(Enum):
    """App states"""
    DIFFICULTY_SELECT = auto()
    GENERATING = auto()
    PLAYING = auto()
    CONFIRM_RESTART = auto()
    WIN = auto()


# Allowed transitions, anything else is a bug in the caller
TRANSITIONS = {
    GameState.DIFFICULTY_SELECT: {GameState.GENERATING, GameState.PLAYING},
    GameState.GENERATING: {GameState.PLAYING, GameState.DIFFICULTY_SELECT},
    GameState.PLAYING: {GameState.CONFIRM_RESTART, GameState.WIN, GameState.DIFFICULTY_SELECT},
    GameState.CONFIRM_RESTART: {GameState.PLAYING, GameState.GENERATING, GameState.DIFFICULTY_SELECT},
    GameState.WIN: {GameState.GENERATING, GameState.PLAYING, GameState.DIFFICULTY_SELECT},
}


class GameStateManager:
    """
    Manages app state transitions
    """
    def __init__(self, initial=GameState.DIFFICULTY_SELECT):
        self.current_state = initial
        self.previous_state = None

    def can_transition(self, new_state):
        return new_state in TRANSITIONS[self.current_state]

    def transition_to(self, new_state):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value
        """
        if not self.can_transition(new_state):
            raise ValueError(f"cannot go from {self.current_state.name} to {new_state.name}")
        self.previous_state = self.current_state
        self.current_state = new_state

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    def accepts_moves(self):
        """Moves only reach the session while playing"""
        return self.current_state == GameState.PLAYING

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"
