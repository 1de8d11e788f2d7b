import dataclasses
import random

import pytest

from luckybox.components.acquired_totals import AcquiredTotals
from luckybox.components.board import Board
from luckybox.components.board_event import EventKind
from luckybox.components.draw_budget import DrawBudget
from luckybox.components.game_rules import GameRules
from luckybox.components.game_state import GameState, SessionPhase
from luckybox.components.lucky_color import LuckyColor
from luckybox.events.bus import EVENT_SESSION_PHASE_CHANGED, EventBus
from luckybox.utils.game_state import get_singleton, set_session_phase
from luckybox.world import create_world


def test_create_world_registers_session_components():
    bus = EventBus(); world = create_world(bus)
    board = get_singleton(world, Board)
    assert board.cells == [0] * 9
    assert board.empty_slots == list(range(9))
    assert get_singleton(world, DrawBudget).remaining == 0
    assert get_singleton(world, AcquiredTotals).counts == {color: 0 for color in range(1, 11)}
    assert get_singleton(world, GameState).phase == SessionPhase.INTRO


def test_world_exposes_injected_rng():
    rng = random.Random(3)
    world = create_world(EventBus(), rng=rng)
    assert world.random is rng


def test_lucky_color_is_absent_until_chosen():
    world = create_world(EventBus())
    with pytest.raises(RuntimeError):
        get_singleton(world, LuckyColor)


def test_rules_tables_are_read_only():
    rules = get_singleton(create_world(EventBus()), GameRules)
    with pytest.raises(TypeError):
        rules.reward_points[EventKind.CLEAR] = 50
    with pytest.raises(dataclasses.FrozenInstanceError):
        rules.color_names = ("Grey",)
    assert rules.color_name(1) == "Red"
    assert rules.color_name(10) == "Magenta"
    assert rules.package_sizes == (9, 18, 30)
    assert rules.package_labels() == ["9 toys", "18 toys", "30 toys"]
    assert rules.triple_lines[-1] == (2, 3, 6)


def test_lucky_color_cannot_be_changed():
    lucky = LuckyColor(color=4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        lucky.color = 5


def test_board_counts_occupied_cells():
    board = Board()
    assert board.is_empty()
    board.cells[4] = 7
    board.empty_slots = [0, 1, 2, 3, 5, 6, 7, 8]
    assert board.occupied_count() == 1
    assert not board.is_empty()


def test_set_session_phase_emits_only_on_change():
    bus = EventBus(); world = create_world(bus)
    changes = []
    bus.subscribe(EVENT_SESSION_PHASE_CHANGED, lambda s, **k: changes.append(k))
    set_session_phase(world, bus, SessionPhase.INTRO)
    set_session_phase(world, bus, SessionPhase.PLAYING)
    assert changes == [{"previous_phase": SessionPhase.INTRO, "new_phase": SessionPhase.PLAYING}]
    assert get_singleton(world, GameState).phase == SessionPhase.PLAYING
