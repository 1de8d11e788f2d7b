from __future__ import annotations

from typing import Type, TypeVar

from esper import World

from luckybox.components.game_state import GameState, SessionPhase
from luckybox.events.bus import EVENT_SESSION_PHASE_CHANGED, EventBus

C = TypeVar("C")


def get_singleton(world: World, component_type: Type[C]) -> C:
    """Return the only instance of ``component_type`` in the world."""
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} not found; build the world with create_world")


def set_session_phase(world: World, event_bus: EventBus, phase: SessionPhase) -> None:
    """Update the session phase and emit a change event when it differs."""

    state = get_singleton(world, GameState)
    previous_phase = state.phase
    if previous_phase == phase:
        return
    state.phase = phase
    event_bus.emit(
        EVENT_SESSION_PHASE_CHANGED,
        previous_phase=previous_phase,
        new_phase=phase,
    )
