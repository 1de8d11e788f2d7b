"""Session loop: selections, rounds and the final tally."""
from __future__ import annotations

import logging
from typing import Any

from esper import World

from luckybox.components.acquired_totals import AcquiredTotals
from luckybox.components.board import Board
from luckybox.components.board_event import EventKind
from luckybox.components.draw_budget import DrawBudget
from luckybox.components.game_rules import GameRules
from luckybox.components.game_state import GameState, SessionPhase
from luckybox.components.lucky_color import LuckyColor
from luckybox.errors import SelectionError
from luckybox.events.bus import (
    EVENT_DRAWS_PLACED,
    EVENT_GAME_FINISHED,
    EVENT_GAME_INTRO,
    EVENT_LUCKY_COLOR_SELECTED,
    EVENT_PACKAGE_SELECTED,
    EVENT_RESIDUAL_FOLDED,
    EVENT_REWARDS_APPLIED,
    EVENT_ROUND_COMPLETED,
    EVENT_ROUND_STARTED,
    EventBus,
)
from luckybox.systems.board_ops import fold_residual
from luckybox.ui.prompts import PromptSurface
from luckybox.utils.game_state import get_singleton, set_session_phase
from luckybox.world import session_entity

logger = logging.getLogger(__name__)

START_LABEL = "Please type enter to start game"
CONTINUE_LABEL = "Please type enter to continue game"
LUCKY_COLOR_LABEL = "Select your lucky color"
PACKAGE_LABEL = "Select your toy package"
LUCKY_COLOR_ACTION = "choose lucky color"
PACKAGE_ACTION = "choose toy package"


class SessionSystem:
    """Drives one play session from the introduction to the final tally.

    Each round emits EVENT_ROUND_STARTED and lets the placement, resolution
    and reward systems react in turn; the pieces they report are gathered
    into a single EVENT_ROUND_COMPLETED for display. The budget is checked
    only before a round starts, so rewards earned in the last round keep the
    game going.
    """

    def __init__(self, world: World, event_bus: EventBus, prompts: PromptSurface) -> None:
        self.world = world
        self.event_bus = event_bus
        self.prompts = prompts
        self._round: dict[str, Any] = {}
        self.event_bus.subscribe(EVENT_DRAWS_PLACED, self._on_draws_placed)
        self.event_bus.subscribe(EVENT_REWARDS_APPLIED, self._on_rewards_applied)

    # ------------------------------------------------------------------
    # Public flow
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Play a whole session and return the number of toys won."""
        self.show_intro()
        self.select_lucky_color()
        self.select_package()
        set_session_phase(self.world, self.event_bus, SessionPhase.PLAYING)
        budget = get_singleton(self.world, DrawBudget)
        while not budget.exhausted():
            self.play_round()
            self.prompts.acknowledge(CONTINUE_LABEL)
        return self.finish()

    def show_intro(self) -> None:
        set_session_phase(self.world, self.event_bus, SessionPhase.INTRO)
        self.event_bus.emit(EVENT_GAME_INTRO, lines=self.intro_lines())
        self.prompts.acknowledge(START_LABEL)

    def intro_lines(self) -> list[str]:
        rules = self._rules()
        lines = ["Game Introduction"]
        for number, kind in enumerate(EventKind, start=1):
            lines.append(f"{number}. {kind.label} +{rules.points_for(kind)}")
        return lines

    def select_lucky_color(self) -> int:
        set_session_phase(self.world, self.event_bus, SessionPhase.SELECT_LUCKY_COLOR)
        rules = self._rules()
        index = self._select(LUCKY_COLOR_LABEL, LUCKY_COLOR_ACTION, list(rules.color_names))
        color = index + 1
        self.world.add_component(session_entity(self.world), LuckyColor(color=color))
        logger.info("Lucky color: %s", rules.color_name(color))
        self.event_bus.emit(EVENT_LUCKY_COLOR_SELECTED, color=color, color_name=rules.color_name(color))
        return color

    def select_package(self) -> int:
        set_session_phase(self.world, self.event_bus, SessionPhase.SELECT_PACKAGE)
        rules = self._rules()
        labels = rules.package_labels()
        index = self._select(PACKAGE_LABEL, PACKAGE_ACTION, labels)
        size = rules.package_sizes[index]
        get_singleton(self.world, DrawBudget).remaining = size
        logger.info("Package: %d toys", size)
        self.event_bus.emit(EVENT_PACKAGE_SELECTED, size=size, label=labels[index])
        return size

    def play_round(self) -> None:
        state = get_singleton(self.world, GameState)
        state.round_number += 1
        self._round = {}
        self.event_bus.emit(EVENT_ROUND_STARTED, round_number=state.round_number)
        counts = self._round.get('counts', dict(get_singleton(self.world, AcquiredTotals).counts))
        self.event_bus.emit(
            EVENT_ROUND_COMPLETED,
            round_number=state.round_number,
            cells=self._round.get('cells', tuple(get_singleton(self.world, Board).cells)),
            events=self._round.get('events', []),
            counts=counts,
            remaining=get_singleton(self.world, DrawBudget).remaining,
        )

    def finish(self) -> int:
        """Fold the toys left on the board into the totals and report them."""
        set_session_phase(self.world, self.event_bus, SessionPhase.FINISHED)
        totals = get_singleton(self.world, AcquiredTotals)
        folded = fold_residual(get_singleton(self.world, Board).cells, totals.counts)
        if folded:
            self.event_bus.emit(EVENT_RESIDUAL_FOLDED, folded=folded)
        total = totals.total()
        rounds = get_singleton(self.world, GameState).round_number
        logger.info("Session finished after %d rounds with %d toys", rounds, total)
        self.event_bus.emit(EVENT_GAME_FINISHED, counts=dict(totals.counts), total=total, rounds=rounds)
        return total

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_draws_placed(self, sender, **payload) -> None:
        self._round['cells'] = payload.get('cells', ())

    def _on_rewards_applied(self, sender, **payload) -> None:
        self._round['events'] = list(payload.get('events', []))
        self._round['counts'] = payload.get('counts', {})

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _rules(self) -> GameRules:
        return get_singleton(self.world, GameRules)

    def _select(self, label: str, action: str, items: list[str]) -> int:
        """Ask with the menu ``label``; failures are reported under ``action``."""
        try:
            index = self.prompts.select(label, items)
        except SelectionError as exc:
            raise SelectionError(action, exc.reason) from exc
        if not isinstance(index, int) or not 0 <= index < len(items):
            raise SelectionError(action, f"invalid choice {index!r}")
        return index
