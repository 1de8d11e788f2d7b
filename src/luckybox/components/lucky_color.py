from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LuckyColor:
    """Color id picked at the start of the session. Never changes afterwards."""
    color: int
