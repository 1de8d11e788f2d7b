import logging
import random

from esper import World
from luckybox.events.bus import EventBus, EVENT_ROUND_STARTED, EVENT_DRAWS_PLACED
from luckybox.components.board import Board
from luckybox.components.draw_budget import DrawBudget
from luckybox.components.game_rules import GameRules
from luckybox.components.game_state import GameState
from luckybox.components.lucky_color import LuckyColor
from luckybox.systems.board_ops import place_draws
from luckybox.utils.game_state import get_singleton

logger = logging.getLogger(__name__)


class PlacementSystem:
    """Draws toys onto the board at the start of every round.

    On EVENT_ROUND_STARTED the free slots are filled lowest index first until
    the board is full or the budget is spent, then EVENT_DRAWS_PLACED carries a
    snapshot of the board and any Lucky Color events to the resolution step.
    """
    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.event_bus.subscribe(EVENT_ROUND_STARTED, self.on_round_started)

    def on_round_started(self, sender, **kwargs):
        round_number = kwargs.get('round_number', 0)
        board = get_singleton(self.world, Board)
        budget = get_singleton(self.world, DrawBudget)
        rules = get_singleton(self.world, GameRules)
        lucky = get_singleton(self.world, LuckyColor)
        before = budget.remaining
        budget.remaining, events, board.empty_slots = place_draws(
            board.cells,
            board.empty_slots,
            budget.remaining,
            lucky.color,
            self._rng,
            rules,
        )
        placed = before - budget.remaining
        get_singleton(self.world, GameState).draws_made += placed
        logger.debug("Round %d: placed %d toys, %d draws left", round_number, placed, budget.remaining)
        self.event_bus.emit(
            EVENT_DRAWS_PLACED,
            round_number=round_number,
            cells=tuple(board.cells),
            placed=placed,
            events=events,
            remaining=budget.remaining,
        )
