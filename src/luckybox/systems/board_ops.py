"""Board engine operations on plain cell and slot lists.

These functions hold all scoring rules. Systems call them with the lists
stored on the Board component; tests call them directly.
"""
from __future__ import annotations

import logging
import random
from typing import Dict, List, MutableMapping, Sequence, Tuple

from luckybox.components.board_event import BoardEvent, EventKind
from luckybox.components.game_rules import GameRules
from luckybox.constants import EMPTY

logger = logging.getLogger(__name__)


def draw_color(rng: random.Random, rules: GameRules) -> int:
    """Pick a color id uniformly from the whole palette."""
    return rng.randint(1, rules.color_count)


def place_draws(
    cells: List[int],
    empty_slots: Sequence[int],
    remaining: int,
    lucky_color: int,
    rng: random.Random,
    rules: GameRules,
) -> Tuple[int, List[BoardEvent], List[int]]:
    """Fill free slots, lowest index first, until the board or the budget runs out.

    ``cells`` is updated in place. Returns the new budget, the Lucky Color
    events raised by the draws and the slots still free.
    """
    slots = list(empty_slots)
    events: List[BoardEvent] = []
    while slots and remaining > 0:
        remaining -= 1
        color = draw_color(rng, rules)
        if color == lucky_color:
            events.append(BoardEvent(EventKind.LUCKY_COLOR, {color: rules.tokens_for(EventKind.LUCKY_COLOR)}))
        slot = slots.pop(0)
        cells[slot] = color
        logger.debug("Drew %s into slot %d (%d draws left)", rules.color_name(color), slot, remaining)
    return remaining, events, slots


def _clear_triples(cells: List[int], slots: List[int], events: List[BoardEvent], rules: GameRules) -> int:
    cleared = 0
    for line in rules.triple_lines:
        color = cells[line[0]]
        # Earlier lines in this scan may already have emptied shared cells.
        if color == EMPTY or cells[line[1]] != color or cells[line[2]] != color:
            continue
        events.append(BoardEvent(EventKind.LUCKY_STRIKE, {color: rules.tokens_for(EventKind.LUCKY_STRIKE)}))
        for index in line:
            cells[index] = EMPTY
        slots.extend(line)
        cleared += len(line)
        logger.debug("Lucky Strike: %s on %s", rules.color_name(color), line)
    return cleared


def _clear_pairs(cells: List[int], slots: List[int], events: List[BoardEvent], rules: GameRules) -> int:
    cleared = 0
    first_seen: Dict[int, int] = {}
    for index, color in enumerate(cells):
        if color == EMPTY:
            continue
        if color not in first_seen:
            first_seen[color] = index
            continue
        partner = first_seen.pop(color)
        events.append(BoardEvent(EventKind.ONE_PAIR, {color: rules.tokens_for(EventKind.ONE_PAIR)}))
        cells[partner] = EMPTY
        cells[index] = EMPTY
        slots.extend((partner, index))
        cleared += 2
        logger.debug("One Pair: %s on (%d, %d)", rules.color_name(color), partner, index)
    return cleared


def resolve_board(
    cells: List[int],
    empty_slots: Sequence[int],
    events: Sequence[BoardEvent],
    rules: GameRules,
) -> Tuple[List[BoardEvent], List[int]]:
    """Score and clear matches on a freshly placed board.

    Checks run in a fixed order against the live board: triples, pairs,
    cleared board, then a full board of distinct colors. Returns the event
    list extended with what was found and the free slots in ascending order.
    """
    resolved = list(events)
    slots = list(empty_slots)
    cleared = _clear_triples(cells, slots, resolved, rules)
    cleared += _clear_pairs(cells, slots, resolved, rules)

    # Only a board emptied by this pass counts as cleared.
    if cleared and len(slots) == rules.slot_count:
        resolved.append(BoardEvent(EventKind.CLEAR, {}))
        logger.debug("Board cleared")

    if not slots:
        per_color = rules.tokens_for(EventKind.ALL_DIFFERENT)
        resolved.append(BoardEvent(EventKind.ALL_DIFFERENT, {color: per_color for color in cells}))
        cells[:] = [EMPTY] * rules.slot_count
        slots = list(range(rules.slot_count))
        logger.debug("Family Portrait: board reset")

    slots.sort()
    return resolved, slots


def apply_rewards(
    events: Sequence[BoardEvent],
    counts: MutableMapping[int, int],
    remaining: int,
    rules: GameRules,
) -> int:
    """Add each event's draws to the budget and its toys to ``counts``."""
    points = 0
    for event in events:
        points += rules.points_for(event.kind)
        for color, amount in event.tokens.items():
            counts[color] = counts.get(color, 0) + amount
    return remaining + points


def fold_residual(cells: Sequence[int], counts: MutableMapping[int, int]) -> Dict[int, int]:
    """Credit every toy still on the board one-for-one. Returns what was added."""
    folded: Dict[int, int] = {}
    for color in cells:
        if color == EMPTY:
            continue
        counts[color] = counts.get(color, 0) + 1
        folded[color] = folded.get(color, 0) + 1
    return folded
