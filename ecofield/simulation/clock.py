"""Frame pacing for the simulation loop."""

from __future__ import annotations

import time
from collections.abc import Callable

from ecofield.config.types import ConfigurationError


class Clock:
    """Cap the epoch rate at ``max_fps``.

    Each ``tick`` only looks at the previous tick: if less than one frame
    interval has passed it sleeps for the remainder, otherwise it returns at
    once. Epochs that ran long are not compensated for.
    """

    def __init__(
        self,
        max_fps: int,
        timer: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if isinstance(max_fps, bool) or not isinstance(max_fps, int) or max_fps < 1:
            raise ConfigurationError("max_fps must be >= 1")
        self.max_fps = max_fps
        self.frame_interval = 1.0 / max_fps
        self._timer = timer
        self._sleep = sleep
        self._last_time: float | None = None

    def tick(self) -> float:
        """Block until a frame interval has passed since the last tick.

        Returns the number of seconds slept.
        """
        now = self._timer()
        slept = 0.0
        if self._last_time is not None:
            time_to_sleep = self.frame_interval - (now - self._last_time)
            if time_to_sleep > 0.0:
                self._sleep(time_to_sleep)
                slept = time_to_sleep
        self._last_time = self._timer()
        return slept
