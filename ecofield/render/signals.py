"""Terminal cleanup on SIGINT/SIGTERM."""

from __future__ import annotations

import signal
import sys
from collections.abc import Callable
from types import FrameType
from typing import TextIO

from ecofield.config.constants import EXIT_CODE_INTERRUPTED
from ecofield.render.terminal import cleanup_output

TERMINATION_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)

SignalHandler = Callable[[int, FrameType | None], None]


def make_termination_handler(out: TextIO) -> SignalHandler:
    """Build a handler that resets the terminal and exits with status 130."""

    def _handle(signum: int, frame: FrameType | None) -> None:
        cleanup_output(out)
        sys.exit(EXIT_CODE_INTERRUPTED)

    return _handle


def install_termination_handler(out: TextIO) -> dict[signal.Signals, object]:
    """Install the handler for SIGINT and SIGTERM; return the previous handlers."""
    handler = make_termination_handler(out)
    previous: dict[signal.Signals, object] = {}
    for signum in TERMINATION_SIGNALS:
        previous[signum] = signal.signal(signum, handler)
    return previous


def restore_handlers(previous: dict[signal.Signals, object]) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)  # type: ignore[arg-type]
