from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep systems alive even when the caller drops them.
        sig.connect(fn, weak=False)

    def emit(self, name: str, /, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SESSION FLOW
# ============================================================================
EVENT_GAME_INTRO = "game_intro"                            # payload: lines=list[str]
EVENT_SESSION_PHASE_CHANGED = "session_phase_changed"      # payload: previous_phase=SessionPhase|None, new_phase=SessionPhase
EVENT_LUCKY_COLOR_SELECTED = "lucky_color_selected"        # payload: color=int, color_name=str
EVENT_PACKAGE_SELECTED = "package_selected"                # payload: size=int, label=str


# ============================================================================
# ROUND PIPELINE
# ============================================================================
EVENT_ROUND_STARTED = "round_started"          # payload: round_number=int
EVENT_DRAWS_PLACED = "draws_placed"            # payload: round_number=int, cells=tuple[int,...], placed=int, events=list[BoardEvent], remaining=int
EVENT_BOARD_RESOLVED = "board_resolved"        # payload: round_number=int, events=list[BoardEvent], cleared=list[int], empty_slots=list[int]
EVENT_REWARDS_APPLIED = "rewards_applied"      # payload: round_number=int, events=list[BoardEvent], points=int, counts=dict[int,int], remaining=int
EVENT_ROUND_COMPLETED = "round_completed"      # payload: round_number=int, cells=tuple[int,...], events=list[BoardEvent], counts=dict[int,int], remaining=int


# ============================================================================
# FINAL TALLY
# ============================================================================
EVENT_RESIDUAL_FOLDED = "residual_folded"      # payload: folded=dict[int,int]
EVENT_GAME_FINISHED = "game_finished"          # payload: counts=dict[int,int], total=int, rounds=int
