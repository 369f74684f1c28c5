"""Entry point for ``python -m turmite``.

Loads the default YAML config, applies command-line overrides, builds a
simulation engine, and drives it headlessly at the configured tick rate.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

from turmite.errors import ConfigurationError
from turmite.pattern.turns import ALPHABETS
from turmite.simulation.clock import FixedRateClock
from turmite.simulation.config import SimulationConfig
from turmite.simulation.engine import SimulationEngine

logger = logging.getLogger("turmite")

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turmite",
        description="Turmite - generalized Langton's ant simulator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        help="Turn pattern to use, e.g. RL or RLLR (overrides config)",
    )
    parser.add_argument(
        "-r",
        "--rate",
        type=float,
        help="Simulation ticks per second (overrides config)",
    )
    parser.add_argument(
        "--alphabet",
        choices=sorted(ALPHABETS),
        help="Turn alphabet (overrides config)",
    )
    parser.add_argument("--seed", type=int, help="Seed for marker colours")
    parser.add_argument(
        "--ticks",
        type=int,
        default=1000,
        help="Number of ticks to simulate (default: 1000)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def load_config(args: argparse.Namespace) -> SimulationConfig:
    """Read the YAML config (if present) and apply CLI overrides."""
    if args.config.exists():
        config = SimulationConfig.from_yaml(args.config)
    else:
        logger.warning("Config %s not found, using defaults", args.config)
        config = SimulationConfig()

    if args.pattern is not None:
        config.pattern = args.pattern
    if args.rate is not None:
        config.ticks_per_second = args.rate
    if args.alphabet is not None:
        config.alphabet = args.alphabet
    if args.seed is not None:
        config.seed = args.seed
    return config


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, create engine, run it, print a summary."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args)
        engine = SimulationEngine.from_config(config)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2

    clock = FixedRateClock(engine, ticks_per_second=config.ticks_per_second)
    try:
        clock.run(max_ticks=args.ticks)
    except KeyboardInterrupt:
        logger.info("Interrupted at tick %d", engine.tick)

    bounds = engine.grid.bounds()
    print(f"Pattern: {engine.table.symbols}")
    print(f"Ticks: {engine.tick}")
    print(f"Visited cells: {engine.visited_cells}")
    if bounds is not None:
        print(
            f"Bounds: x {bounds.min_x}..{bounds.max_x}, "
            f"y {bounds.min_y}..{bounds.max_y}",
        )
    heading = engine.ant.heading.name.lower()
    print(f"Ant: cell {engine.ant.cell}, facing {heading}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
