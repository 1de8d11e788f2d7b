"""Session state resource describing where the game loop currently is."""
from dataclasses import dataclass
from enum import Enum, auto


class SessionPhase(Enum):
    """Phases of one play session, in the order they are entered."""
    INTRO = auto()
    SELECT_LUCKY_COLOR = auto()
    SELECT_PACKAGE = auto()
    PLAYING = auto()
    FINISHED = auto()


@dataclass
class GameState:
    """Singleton component storing the active phase and round counter."""
    phase: SessionPhase = SessionPhase.INTRO
    round_number: int = 0
    draws_made: int = 0
