"""CLI entrypoint for running the field simulation in a terminal.

This module owns argument parsing and logging setup only; the loop lives
in ``ecofield.simulation.engine``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ecofield.config.constants import EAT_RATE, FPS_LIMIT, HEIGHT, SPAWN_RATE, WIDTH
from ecofield.config.types import ConfigurationError, SimulationConfig
from ecofield.simulation.engine import run_simulation

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_log_level(raw_level: str) -> int:
    """Parse a log level name into its ``logging`` constant."""
    level = raw_level.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log-level must be one of {', '.join(LOG_LEVELS)}")
    return getattr(logging, level)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run the cellular ecosystem in the terminal")
    parser.add_argument("--fps", type=int, default=FPS_LIMIT, help="maximum epochs per second")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--eat-rate", type=float, default=EAT_RATE)
    parser.add_argument("--spawn-rate", type=float, default=SPAWN_RATE)
    parser.add_argument("--seed", type=int, default=None, help="seed for eat/spawn draws")
    parser.add_argument("--type-seed", type=int, default=None, help="seed for spawned cell kinds")
    parser.add_argument(
        "--epochs",
        type=int,
        default=None,
        help="stop after this many epochs (default: run until interrupted)",
    )
    parser.add_argument("--epoch-log", type=Path, default=None, help="Parquet population log")
    parser.add_argument("--snapshot", type=Path, default=None, help="PNG of the final field")
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        log_level = _parse_log_level(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SimulationConfig(
            max_fps=args.fps,
            width=args.width,
            height=args.height,
            eat_rate=args.eat_rate,
            spawn_rate=args.spawn_rate,
            seed=args.seed,
            type_seed=args.type_seed,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))
    if args.epochs is not None and args.epochs < 0:
        parser.error("epochs must be >= 0")

    summary = run_simulation(
        config,
        out=sys.stdout,
        max_epochs=args.epochs,
        epoch_log_path=args.epoch_log,
        snapshot_path=args.snapshot,
        install_signals=True,
    )
    print(
        json.dumps(
            {
                "epochs": summary.epochs,
                "average_fps": round(summary.average_fps, 1),
                "population": {
                    cell.name.lower(): count for cell, count in summary.final_population.items()
                },
            },
            ensure_ascii=False,
            indent=2,
        )
    )


if __name__ == "__main__":
    main()
