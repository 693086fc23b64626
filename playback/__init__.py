"""
playback/
---------
Playback layer.

    from playback import Stepper
"""

from playback.stepper import (
    Stepper,
    StepperState,
    clamp_interval,
    MIN_INTERVAL_MS,
    MAX_INTERVAL_MS,
    DEFAULT_INTERVAL_MS,
)

__all__ = [
    "Stepper",
    "StepperState",
    "clamp_interval",
    "MIN_INTERVAL_MS",
    "MAX_INTERVAL_MS",
    "DEFAULT_INTERVAL_MS",
]
