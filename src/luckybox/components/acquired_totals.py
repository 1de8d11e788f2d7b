from dataclasses import dataclass, field
from typing import Dict, Iterable


@dataclass(slots=True)
class AcquiredTotals:
    """Toys won by the player, per color id.

    Counts only ever grow: reward accounting and the end-of-game residual
    fold are the only writers.
    """
    counts: Dict[int, int] = field(default_factory=dict)

    @classmethod
    def for_colors(cls, color_ids: Iterable[int]) -> "AcquiredTotals":
        return cls(counts={color: 0 for color in color_ids})

    def total(self) -> int:
        return sum(self.counts.values())
