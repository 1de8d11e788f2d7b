from dataclasses import dataclass, field
from typing import List

from luckybox.constants import EMPTY, SLOT_COUNT


def _empty_cells() -> List[int]:
    return [EMPTY] * SLOT_COUNT


def _all_slots() -> List[int]:
    return list(range(SLOT_COUNT))


@dataclass(slots=True)
class Board:
    """The 3x3 board, stored row-major.

    cells: color id per slot, EMPTY (0) for a free slot.
    empty_slots: free slot indices, kept ascending between rounds so the
    lowest free slot is always filled first.
    """
    cells: List[int] = field(default_factory=_empty_cells)
    empty_slots: List[int] = field(default_factory=_all_slots)

    def occupied_count(self) -> int:
        return sum(1 for color in self.cells if color != EMPTY)

    def is_empty(self) -> bool:
        return self.occupied_count() == 0
