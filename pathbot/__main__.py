"""Command line entry point for running a robot simulation."""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from .domain.world import GridWorld
from .app.simulation import Simulation, SimulationResult
from .utils.config import SimulationConfig, ConfigError, load_config
from .utils.map_loader import MapFormatError, load_world, render_map
from .utils.world_factory import generate_random_world


def parse_size(value: str) -> Tuple[int, int]:
    """Parse a ROWSxCOLS size argument."""
    try:
        rows, cols = value.lower().split("x")
        return int(rows), int(cols)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected ROWSxCOLS, got {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathbot",
        description="Drive a robot to its target one A* step at a time",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--map", type=str, help="Path to a text map file")
    source.add_argument("--random", type=parse_size, metavar="ROWSxCOLS",
                        help="Generate a random world of the given size")
    parser.add_argument("--seed", type=int, help="Seed for --random")
    parser.add_argument("--walls", type=float, default=0.25, help="Wall density for --random")
    parser.add_argument("--config", type=str, help="Path to a properties config file")
    parser.add_argument("--iterations", type=int, help="Override the step budget")
    parser.add_argument("--delay", type=int, help="Override the tick delay in milliseconds")
    parser.add_argument("--realtime", action="store_true",
                        help="Tick on a timer with the configured delay")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every step")
    return parser


def run_realtime(world: GridWorld, config: SimulationConfig) -> SimulationResult:
    """Run the simulation on a QTimer inside a Qt event loop."""
    from PySide6.QtCore import QCoreApplication
    from .app.controller import SimulationController

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    controller = SimulationController(world, config)
    controller.simulation_finished.connect(lambda _result: app.quit())
    controller.start()
    app.exec()
    return controller.simulation.result()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the command line."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        overrides = {}
        if args.iterations is not None:
            overrides["iterations"] = args.iterations
        if args.delay is not None:
            overrides["delay_ms"] = args.delay
        if overrides:
            config = replace(config, **overrides)

        if args.map:
            world = load_world(args.map)
        else:
            rows, cols = args.random
            world = generate_random_world(rows, cols, args.walls, seed=args.seed)
    except (ConfigError, MapFormatError, ValueError, OSError) as e:
        print(f"Error: {e}")
        return 2

    print(f"Grid: {world.rows}x{world.cols}")
    print(f"Start: {tuple(world.current_position())} -> Target: {tuple(world.target_position())}")
    if config.debug:
        print(render_map(world))

    try:
        if args.realtime:
            result = run_realtime(world, config)
        else:
            simulation = Simulation(world, iterations=config.iterations, debug=config.debug)
            result = simulation.run()
    except KeyboardInterrupt:
        print("Simulation interrupted by user")
        return 1

    print(f"Final position: {tuple(result.final_position)}, agent crashes: {result.crashes}")
    return 0 if result.goal_reached else 1


if __name__ == "__main__":
    sys.exit(main())
