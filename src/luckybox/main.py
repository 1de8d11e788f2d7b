"""Entry point for the Lucky Box console game.

Sets up the ECS world, event bus, systems and the rich console.
"""
import logging
import os
import random
import sys

from rich.console import Console

from luckybox.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, ENV_SEED
from luckybox.errors import SelectionError
from luckybox.events.bus import EventBus
from luckybox.rendering.console_renderer import ConsoleRenderSystem
from luckybox.systems.placement_system import PlacementSystem
from luckybox.systems.resolution_system import ResolutionSystem
from luckybox.systems.reward_system import RewardSystem
from luckybox.systems.session_system import SessionSystem
from luckybox.ui.prompts import ConsolePrompts
from luckybox.world import create_world

logger = logging.getLogger(__name__)


def configure_logging(environ=os.environ) -> None:
    level_name = environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def make_rng(environ=os.environ) -> random.Random:
    """Seeded generator when LUCKYBOX_SEED holds an integer, else a fresh one."""
    raw = environ.get(ENV_SEED)
    if raw is None:
        return random.Random()
    try:
        return random.Random(int(raw))
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", ENV_SEED, raw)
        return random.Random()


def build_session(console: Console, prompts, *, rng: random.Random | None = None) -> SessionSystem:
    """Create the world and wire every system to one event bus."""
    event_bus = EventBus()
    world = create_world(event_bus, rng=rng)
    PlacementSystem(world, event_bus)
    ResolutionSystem(world, event_bus)
    RewardSystem(world, event_bus)
    session = SessionSystem(world, event_bus, prompts)
    ConsoleRenderSystem(world, event_bus, console)
    return session


def main() -> None:
    configure_logging()
    console = Console()
    session = build_session(console, ConsolePrompts(console), rng=make_rng())
    try:
        session.run()
    except SelectionError as exc:
        console.print(str(exc), style="bold red", markup=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
