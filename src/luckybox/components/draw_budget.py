from dataclasses import dataclass


@dataclass(slots=True)
class DrawBudget:
    """Draws the player may still make; rewards add to it."""
    remaining: int = 0

    def exhausted(self) -> bool:
        return self.remaining <= 0
