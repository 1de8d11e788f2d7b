import io
import logging
import random

import pytest
from rich.console import Console

from luckybox import main as entry
from luckybox.constants import ENV_SEED
from tests.helpers import FakePrompts, ScriptedRandom


def test_make_rng_uses_seed_from_environment():
    rng = entry.make_rng({ENV_SEED: "7"})
    assert rng.random() == random.Random(7).random()


def test_make_rng_ignores_bad_seed(caplog):
    with caplog.at_level(logging.WARNING):
        rng = entry.make_rng({ENV_SEED: "lucky"})
    assert isinstance(rng, random.Random)
    assert "LUCKYBOX_SEED" in caplog.text


def test_build_session_plays_through_console():
    console = Console(file=io.StringIO(), record=True, width=120, color_system=None)
    prompts = FakePrompts([9, 0])
    draws = ScriptedRandom([1, 2, 3, 4, 5, 6, 7, 8, 9, 1, 2, 3, 4, 5])
    session = entry.build_session(console, prompts, rng=draws)
    assert session.run() == 14
    text = console.export_text()
    assert "You choose Magenta" in text
    assert "You choose 9 toys" in text
    assert "Event: Family Portrait" in text
    assert "You have received 14 toys" in text


def test_main_exits_with_status_one_on_selection_failure(monkeypatch, capsys):
    monkeypatch.setattr(entry, "configure_logging", lambda: None)
    monkeypatch.setattr(entry, "ConsolePrompts", lambda console: FakePrompts([]))
    with pytest.raises(SystemExit) as excinfo:
        entry.main()
    assert excinfo.value.code == 1
    assert "choose lucky color failed, no scripted answer" in capsys.readouterr().out
