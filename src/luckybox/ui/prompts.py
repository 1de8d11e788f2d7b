"""Prompt surfaces that feed player choices into the session loop."""
from __future__ import annotations

from typing import Protocol, Sequence, TextIO

from rich.console import Console
from rich.prompt import IntPrompt

from luckybox.errors import SelectionError


class PromptSurface(Protocol):
    """What the session loop needs from whoever is playing."""

    def select(self, label: str, items: Sequence[str]) -> int:
        """Return the 0-based index of the chosen item or raise SelectionError."""

    def acknowledge(self, label: str) -> None:
        """Block until the player confirms. Never raises."""


class MenuPrompt(IntPrompt):
    """Integer prompt that reports an exhausted input stream as EOFError."""

    @classmethod
    def get_input(cls, console, prompt, password, stream=None):
        value = super().get_input(console, prompt, password, stream=stream)
        if stream is not None and value == "":
            raise EOFError("input stream exhausted")
        return value


class ConsolePrompts:
    """Numbered menus and enter-to-continue prompts on a rich console."""

    def __init__(self, console: Console | None = None, *, stream: TextIO | None = None):
        self.console = console or Console()
        self._stream = stream

    def select(self, label: str, items: Sequence[str]) -> int:
        if not items:
            raise SelectionError(label, "nothing to choose from")
        for number, item in enumerate(items, start=1):
            self.console.print(f"  [bold]{number}[/bold]. {item}")
        try:
            choice = MenuPrompt.ask(
                label,
                console=self.console,
                choices=[str(number) for number in range(1, len(items) + 1)],
                show_choices=False,
                stream=self._stream,
            )
        except (EOFError, KeyboardInterrupt) as exc:
            raise SelectionError(label, type(exc).__name__) from exc
        return choice - 1

    def acknowledge(self, label: str) -> None:
        try:
            self.console.input(f"{label} ", stream=self._stream)
        except (EOFError, KeyboardInterrupt):
            # A missed acknowledgment counts as confirmed.
            pass
