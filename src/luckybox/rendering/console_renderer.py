"""Console display for the session, drawn with rich."""
from __future__ import annotations

from typing import Mapping, Sequence

from esper import World
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from luckybox.components.board_event import BoardEvent
from luckybox.components.game_rules import GameRules
from luckybox.constants import BOARD_COLS, COLOR_STYLES, EMPTY, EMPTY_LABEL
from luckybox.events.bus import (
    EVENT_GAME_FINISHED,
    EVENT_GAME_INTRO,
    EVENT_LUCKY_COLOR_SELECTED,
    EVENT_PACKAGE_SELECTED,
    EVENT_ROUND_COMPLETED,
    EventBus,
)
from luckybox.utils.game_state import get_singleton


def section_rule(title: str) -> str:
    return f"========== {title} =========="


class ConsoleRenderSystem:
    """Prints everything the player sees; reads nothing but event payloads and rules."""

    def __init__(self, world: World, event_bus: EventBus, console: Console | None = None):
        self.world = world
        self.event_bus = event_bus
        self.console = console or Console()
        self.event_bus.subscribe(EVENT_GAME_INTRO, self.on_game_intro)
        self.event_bus.subscribe(EVENT_LUCKY_COLOR_SELECTED, self.on_selection)
        self.event_bus.subscribe(EVENT_PACKAGE_SELECTED, self.on_selection)
        self.event_bus.subscribe(EVENT_ROUND_COMPLETED, self.on_round_completed)
        self.event_bus.subscribe(EVENT_GAME_FINISHED, self.on_game_finished)

    def on_game_intro(self, sender, **payload):
        lines = payload.get('lines') or []
        if not lines:
            return
        self.console.print(lines[0], style="bold")
        for line in lines[1:]:
            self.console.print(line)

    def on_selection(self, sender, **payload):
        chosen = payload.get('label') or payload.get('color_name')
        if chosen:
            self.console.print(f"You choose {chosen}")

    def on_round_completed(self, sender, **payload):
        self.render_board(payload.get('cells', ()))
        self.render_events(payload.get('events', []))
        self.render_acquired(payload.get('counts', {}))
        self.console.print(f"Remaining: {payload.get('remaining', 0)}")

    def on_game_finished(self, sender, **payload):
        self.render_acquired(payload.get('counts', {}))
        self.console.print(f"You have received {payload.get('total', 0)} toys", style="bold")

    # ------------------------------------------------------------------

    def render_board(self, cells: Sequence[int]) -> None:
        rules = self._rules()
        self.console.print(section_rule("board"))
        table = Table(show_header=False, box=box.SQUARE, show_lines=True)
        for _ in range(BOARD_COLS):
            table.add_column(min_width=10)
        for start in range(0, len(cells), BOARD_COLS):
            table.add_row(*(self._cell_text(color, rules) for color in cells[start:start + BOARD_COLS]))
        self.console.print(table)

    def render_events(self, events: Sequence[BoardEvent]) -> None:
        if not events:
            return
        rules = self._rules()
        self.console.print(section_rule("events"))
        for event in events:
            self.console.print(f"Event: {event.kind.label:<20} +{rules.points_for(event.kind)}")

    def render_acquired(self, counts: Mapping[int, int]) -> None:
        rules = self._rules()
        self.console.print(section_rule("acquired"))
        line = Text()
        for color in rules.color_ids():
            name = rules.color_name(color)
            line.append(name, style=COLOR_STYLES.get(name, ""))
            line.append(f": {counts.get(color, 0)}; ")
        self.console.print(line)

    def _cell_text(self, color: int, rules: GameRules) -> Text:
        if color == EMPTY:
            return Text(EMPTY_LABEL, style="dim")
        name = rules.color_name(color)
        return Text(name, style=COLOR_STYLES.get(name, ""))

    def _rules(self) -> GameRules:
        return get_singleton(self.world, GameRules)
