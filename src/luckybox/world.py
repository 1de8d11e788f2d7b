import random

from esper import World
from .events.bus import EventBus
from luckybox.components.acquired_totals import AcquiredTotals
from luckybox.components.board import Board
from luckybox.components.draw_budget import DrawBudget
from luckybox.components.game_rules import GameRules
from luckybox.components.game_state import GameState, SessionPhase
from luckybox.constants import EMPTY


def create_world(
    event_bus: EventBus,
    *,
    rules: GameRules | None = None,
    rng: random.Random | None = None,
    initial_phase: SessionPhase = SessionPhase.INTRO,
) -> World:
    """Build the session world: state, board, budget, totals and rules entities.

    ``rng`` is the only source of draws; pass a seeded ``random.Random`` for
    reproducible sessions. The lucky color is attached later, when chosen.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    rules = rules or GameRules.default()

    # Player-facing session resources live on one entity.
    world.create_entity(
        GameState(phase=initial_phase),
        DrawBudget(remaining=0),
        AcquiredTotals.for_colors(rules.color_ids()),
    )
    world.create_entity(Board(
        cells=[EMPTY] * rules.slot_count,
        empty_slots=list(range(rules.slot_count)),
    ))
    world.create_entity(rules)
    return world


def session_entity(world: World) -> int:
    """Entity holding GameState; the lucky color is added to it once chosen."""
    for entity, _ in world.get_component(GameState):
        return entity
    raise RuntimeError("GameState not found; build the world with create_world")
