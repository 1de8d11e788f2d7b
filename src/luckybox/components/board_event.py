"""Scoring occurrences produced while placing and resolving a round."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class EventKind(Enum):
    """Kinds of board events, valued by their display name."""
    LUCKY_COLOR = "Lucky Color"
    ONE_PAIR = "One Pair"
    LUCKY_STRIKE = "Lucky Strike"
    ALL_DIFFERENT = "Family Portrait"
    CLEAR = "Clear The Board"

    @property
    def label(self) -> str:
        return self.value


@dataclass(slots=True)
class BoardEvent:
    """A resolved occurrence and the toys it grants.

    tokens: mapping of color id -> number of toys granted for that color (may be empty).
    Events are transient; reward accounting consumes them in the round they are created.
    """
    kind: EventKind
    tokens: Dict[int, int] = field(default_factory=dict)
