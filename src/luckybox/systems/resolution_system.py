import logging

from esper import World
from luckybox.events.bus import EventBus, EVENT_DRAWS_PLACED, EVENT_BOARD_RESOLVED
from luckybox.components.board import Board
from luckybox.components.game_rules import GameRules
from luckybox.constants import EMPTY
from luckybox.systems.board_ops import resolve_board
from luckybox.utils.game_state import get_singleton

logger = logging.getLogger(__name__)


class ResolutionSystem:
    """Scores matches once the round's draws are on the board."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_DRAWS_PLACED, self.on_draws_placed)

    def on_draws_placed(self, sender, **kwargs):
        board = get_singleton(self.world, Board)
        rules = get_singleton(self.world, GameRules)
        occupied_before = [index for index, color in enumerate(board.cells) if color != EMPTY]
        events, board.empty_slots = resolve_board(
            board.cells,
            board.empty_slots,
            kwargs.get('events', []),
            rules,
        )
        cleared = [index for index in occupied_before if board.cells[index] == EMPTY]
        if events:
            logger.debug("Resolved %s", ", ".join(event.kind.label for event in events))
        logger.debug("%d toys left on the board", board.occupied_count())
        self.event_bus.emit(
            EVENT_BOARD_RESOLVED,
            round_number=kwargs.get('round_number', 0),
            events=events,
            cleared=cleared,
            empty_slots=list(board.empty_slots),
        )
