from __future__ import annotations

from typing import Iterable, Sequence

from esper import World

from luckybox.components.lucky_color import LuckyColor
from luckybox.components.draw_budget import DrawBudget
from luckybox.constants import EMPTY
from luckybox.errors import SelectionError
from luckybox.events.bus import EventBus
from luckybox.systems.placement_system import PlacementSystem
from luckybox.systems.resolution_system import ResolutionSystem
from luckybox.systems.reward_system import RewardSystem
from luckybox.utils.game_state import get_singleton
from luckybox.world import create_world, session_entity


class ScriptedRandom:
    """Stand-in draw source returning a fixed sequence of colors."""

    def __init__(self, draws: Iterable[int]):
        self.draws = list(draws)
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        if not self.draws:
            raise AssertionError("scripted draws exhausted")
        value = self.draws.pop(0)
        assert a <= value <= b, f"scripted draw {value} outside {a}..{b}"
        self.calls += 1
        return value


class FakePrompts:
    """Prompt surface answering menus from a queue of indices."""

    def __init__(self, answers: Sequence[int] = (), *, max_acknowledgments: int = 10_000):
        self.answers = list(answers)
        self.selections: list[tuple[str, list[str]]] = []
        self.acknowledged: list[str] = []
        self.max_acknowledgments = max_acknowledgments

    def select(self, label: str, items: Sequence[str]) -> int:
        self.selections.append((label, list(items)))
        if not self.answers:
            raise SelectionError(label, "no scripted answer")
        return self.answers.pop(0)

    def acknowledge(self, label: str) -> None:
        self.acknowledged.append(label)
        assert len(self.acknowledged) <= self.max_acknowledgments, "session did not terminate"


def empty_slots_of(cells: Sequence[int]) -> list[int]:
    return [index for index, color in enumerate(cells) if color == EMPTY]


def build_round_world(bus: EventBus, rng, *, lucky_color: int = 10, budget: int = 9) -> World:
    """World with the round pipeline wired and selections already made."""
    world = create_world(bus, rng=rng)
    world.add_component(session_entity(world), LuckyColor(color=lucky_color))
    get_singleton(world, DrawBudget).remaining = budget
    PlacementSystem(world, bus)
    ResolutionSystem(world, bus)
    RewardSystem(world, bus)
    return world
