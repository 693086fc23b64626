"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object the UI interacts with during playback.
It owns a fully computed run (a list of Snapshots), the index of the
snapshot currently on screen, and the auto-advance timer.

State machine:
    IDLE     →  load()              →  PAUSED
    PAUSED   →  play()              →  PLAYING
    PLAYING  →  pause()             →  PAUSED
    PLAYING  →  (last step reached) →  FINISHED
    any      →  reset()             →  IDLE

The run is computed eagerly before playback starts; cancelling is just
reset().  An empty run is valid: load() leaves the stepper FINISHED with
nothing to show.

Thread safety:
  This class is NOT thread-safe.  Call tick() / navigation from a single
  thread (or from the browser's timer through the web layer).
"""

import logging
import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

from search.snapshot import Snapshot

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Auto-advance interval bounds (milliseconds per step)
# ---------------------------------------------------------------------------
MIN_INTERVAL_MS:     int = 200
MAX_INTERVAL_MS:     int = 2000
DEFAULT_INTERVAL_MS: int = 1000


def clamp_interval(ms: float) -> int:
    return int(max(MIN_INTERVAL_MS, min(MAX_INTERVAL_MS, ms)))


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The run being played.
        current_idx : Index into `steps` that is currently displayed (-1 if none).
        interval_ms : Milliseconds between auto-advance ticks.
        on_step     : Optional callback(Snapshot) fired every time the current step changes.
    """

    def __init__(self, on_step: Optional[Callable[[Snapshot], None]] = None):
        self.steps:       List[Snapshot] = []
        self.current_idx: int           = -1
        self.state:       StepperState  = StepperState.IDLE
        self.interval_ms: int           = DEFAULT_INTERVAL_MS
        self.on_step:     Optional[Callable[[Snapshot], None]] = on_step

        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: Sequence[Snapshot], index: int = 0) -> None:
        """Attach a computed run and show step `index`."""
        self.steps = list(steps)
        if not self.steps:
            self.current_idx = -1
            self.state = StepperState.FINISHED
            logger.debug("Loaded empty run")
            return
        self.state = StepperState.PAUSED
        self._goto(max(0, min(index, len(self.steps) - 1)))
        logger.debug("Loaded run of %d steps", len(self.steps))

    def reset(self) -> None:
        """Back to IDLE — caller must call load() again."""
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        if self.current_idx >= len(self.steps) - 1:
            if self.steps:
                self.state = StepperState.FINISHED
            return False
        self._goto(self.current_idx + 1)
        if self.at_end and self.state == StepperState.PLAYING:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index."""
        if not 0 <= idx < len(self.steps):
            return False
        self._goto(idx)
        if self.state == StepperState.FINISHED and not self.at_end:
            self.state = StepperState.PAUSED
        return True

    def rewind(self) -> None:
        """Jump back to step 0."""
        self.goto_step(0)

    def jump_to_end(self) -> None:
        if self.steps:
            self._goto(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.IDLE, StepperState.FINISHED) or self.at_end:
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 50 ms).  If playing and at least
        `interval_ms` has elapsed since the last advance, moves one step
        forward.  Returns True if a step was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if (now - self._last_tick) * 1000 < self.interval_ms:
            return False
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_interval(self, ms: float) -> None:
        self.interval_ms = clamp_interval(ms)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Snapshot]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def at_end(self) -> bool:
        return self.current_idx == len(self.steps) - 1

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        step = self.current_step
        if self.on_step and step is not None:
            self.on_step(step)
