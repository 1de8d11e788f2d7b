import logging

from esper import World
from luckybox.events.bus import EventBus, EVENT_BOARD_RESOLVED, EVENT_REWARDS_APPLIED
from luckybox.components.acquired_totals import AcquiredTotals
from luckybox.components.draw_budget import DrawBudget
from luckybox.components.game_rules import GameRules
from luckybox.systems.board_ops import apply_rewards
from luckybox.utils.game_state import get_singleton

logger = logging.getLogger(__name__)


class RewardSystem:
    """Turns resolved events into extra draws and won toys.

    Logic:
      - On EVENT_BOARD_RESOLVED: add each event's points to the draw budget and
        its token grant to the player's AcquiredTotals.
      - Emit EVENT_REWARDS_APPLIED with the new counts and budget.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_BOARD_RESOLVED, self.on_board_resolved)

    def on_board_resolved(self, sender, **kwargs):
        events = kwargs.get('events', [])
        budget = get_singleton(self.world, DrawBudget)
        totals = get_singleton(self.world, AcquiredTotals)
        rules = get_singleton(self.world, GameRules)
        before = budget.remaining
        budget.remaining = apply_rewards(events, totals.counts, budget.remaining, rules)
        points = budget.remaining - before
        if points:
            logger.debug("Rewards: +%d draws, %d left", points, budget.remaining)
        self.event_bus.emit(
            EVENT_REWARDS_APPLIED,
            round_number=kwargs.get('round_number', 0),
            events=events,
            points=points,
            counts=dict(totals.counts),
            remaining=budget.remaining,
        )
