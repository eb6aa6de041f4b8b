"""Centralized default constants for the field simulation.

These are the values the simulation runs with when nothing else is
configured. Consuming modules should import from this module rather than
defining their own inline literals.
"""

from __future__ import annotations

FPS_LIMIT = 60
"""Maximum epochs (frames) per second."""

WIDTH = 100
"""Default field width, in terminal columns."""

HEIGHT = 30
"""Default field height, in terminal lines."""

EAT_RATE = 0.1
"""Probability that a cell eats one given neighbor during a sweep."""

SPAWN_RATE = 0.5
"""Probability of spawning one random cell after each sweep."""

FLUSH_THRESHOLD = 4_096
"""Flush epoch-log rows to Parquet once this in-memory row count is reached."""

EXIT_CODE_INTERRUPTED = 130
"""Process exit status after SIGINT/SIGTERM cleanup."""
