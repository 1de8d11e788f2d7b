from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from luckybox.components.board_event import EventKind
from luckybox.constants import COLOR_NAMES, PACKAGE_SIZES, SLOT_COUNT, TRIPLE_LINES

# Extra draws granted per event.
DEFAULT_REWARD_POINTS = {
    EventKind.LUCKY_COLOR: 1,
    EventKind.ONE_PAIR: 1,
    EventKind.LUCKY_STRIKE: 3,
    EventKind.ALL_DIFFERENT: 5,
    EventKind.CLEAR: 5,
}

# Toys granted for the event's color. Family Portrait grants this many per color on the board.
DEFAULT_REWARD_TOKENS = {
    EventKind.LUCKY_COLOR: 0,
    EventKind.ONE_PAIR: 2,
    EventKind.LUCKY_STRIKE: 3,
    EventKind.ALL_DIFFERENT: 1,
    EventKind.CLEAR: 0,
}


@dataclass(frozen=True, slots=True)
class GameRules:
    """Read-only game configuration stored on the rules entity.

    Built once by ``create_world``; the mappings are wrapped in
    ``MappingProxyType`` so systems cannot edit them.
    """
    color_names: Tuple[str, ...]
    package_sizes: Tuple[int, ...]
    triple_lines: Tuple[Tuple[int, int, int], ...]
    reward_points: Mapping[EventKind, int]
    reward_tokens: Mapping[EventKind, int]
    slot_count: int = SLOT_COUNT

    @classmethod
    def default(cls) -> "GameRules":
        return cls(
            color_names=tuple(COLOR_NAMES),
            package_sizes=tuple(PACKAGE_SIZES),
            triple_lines=tuple(tuple(line) for line in TRIPLE_LINES),
            reward_points=MappingProxyType(dict(DEFAULT_REWARD_POINTS)),
            reward_tokens=MappingProxyType(dict(DEFAULT_REWARD_TOKENS)),
        )

    @property
    def color_count(self) -> int:
        return len(self.color_names)

    def color_ids(self) -> range:
        return range(1, self.color_count + 1)

    def color_name(self, color: int) -> str:
        return self.color_names[color - 1]

    def points_for(self, kind: EventKind) -> int:
        return self.reward_points.get(kind, 0)

    def tokens_for(self, kind: EventKind) -> int:
        return self.reward_tokens.get(kind, 0)

    def package_labels(self) -> list[str]:
        return [f"{size} toys" for size in self.package_sizes]
