"""
Conway's Game of Life - Terminal Simulation

Seeds a bounded grid, then for a fixed number of frames clears the terminal,
prints the grid and advances one generation.

Usage: python -m game_of_life [--width W] [--height H] [--iterations N]
                              [--delay MS] [--pattern NAME] [--render MODE]
       python -m game_of_life --benchmark [--sizes N [N ...]] [-n GENERATIONS]
"""

import argparse
import csv
import sys
import time
from pathlib import Path
from typing import Callable, TextIO

from .config import (
    DEFAULT_FRAME_DELAY_MS,
    DEFAULT_HEIGHT,
    DEFAULT_ITERATIONS,
    DEFAULT_WIDTH,
    SimulationConfig,
)
from .grid import Grid, step_array
from .patterns import PATTERNS, init_random, place
from .render import CLEAR_SCREEN, RENDER_MODES, render
from .rules import conway_rule

ENGINES = ("cells", "numpy")
BENCHMARK_CSV = Path("benchmarks") / "benchmark_engines.csv"
BENCHMARK_GENERATIONS = 20

# animation flags the benchmark has no use for
ANIMATION_FLAGS = ("width", "height", "delay", "pattern", "offset", "density", "render")


def run_simulation(config: SimulationConfig, out: TextIO | None = None,
                   sleep: Callable[[float], None] = time.sleep) -> Grid:
    """
    Run the animation described by `config`.

    Args:
        config: Grid size, seed, frame count and pacing
        out: Stream the frames are written to (stdout by default)
        sleep: Called with the frame delay in seconds after every frame

    Returns:
        The grid after the last generation
    """
    if out is None:
        out = sys.stdout

    grid = Grid(config.width, config.height)
    grid.seed(config.seed)

    for _ in range(config.iterations):
        out.write(CLEAR_SCREEN + render(grid, config.render_mode))
        out.flush()
        grid = grid.advance(conway_rule)
        sleep(config.frame_delay)

    return grid


def time_engine(engine: str, size: int, generations: int, seed: int) -> dict:
    """Time one engine on a random size x size grid."""
    if generations <= 0:
        raise ValueError(f"Generations must be positive, got {generations}")

    grid = Grid(size, size)
    grid.seed(init_random(size, size, density=0.3, seed=seed))

    if engine == "cells":
        start_time = time.perf_counter()
        for _ in range(generations):
            grid = grid.advance(conway_rule)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        final_live = grid.live_count()
    elif engine == "numpy":
        array = grid.to_array()
        start_time = time.perf_counter()
        for _ in range(generations):
            array = step_array(array)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        final_live = int(array.sum())
    else:
        raise ValueError(f"Unknown engine {engine!r}, expected one of {ENGINES}")

    # keep nonzero for the throughput division
    elapsed_ms = max(elapsed_ms, 1e-6)

    return {
        "engine": engine,
        "size": size,
        "generations": generations,
        "final_live_cells": final_live,
        "total_time_ms": elapsed_ms,
        "time_per_generation_ms": elapsed_ms / generations,
        "cells_per_second_million": size * size * generations / elapsed_ms / 1000,
    }


def benchmark(sizes: list[int] | None = None, generations: int = BENCHMARK_GENERATIONS, seed: int = 42,
              engines: tuple[str, ...] = ENGINES,
              csv_path: Path | None = BENCHMARK_CSV) -> list[dict]:
    """
    Run benchmarks for different grid sizes.
    Compares the cell-by-cell Grid engine with the vectorized NumPy one.

    Args:
        sizes: List of grid sizes to test
        generations: Number of generations per test
        seed: Random seed for reproducibility
        engines: Engines to time
        csv_path: Where to save the results, None to skip saving

    Returns:
        One result dict per (engine, size)
    """
    if sizes is None:
        sizes = [16, 32, 64, 128]
    if generations <= 0:
        raise ValueError(f"Generations must be positive, got {generations}")

    print("=" * 60)
    print("BENCHMARK: Game of Life engines")
    print("=" * 60)

    results = []
    for size in sizes:
        for engine in engines:
            result = time_engine(engine, size, generations, seed)
            print(f"Size {size:>5}x{size:<5} {engine:>6}: {result['total_time_ms']:>10.2f} ms")
            results.append(result)

    # Summary table
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"{'Engine':>8} | {'Size':>6} | {'Total (ms)':>12} | {'Per Gen (ms)':>12} | {'M cells/s':>10}")
    print("-" * 60)
    for r in results:
        print(f"{r['engine']:>8} | {r['size']:>6} | {r['total_time_ms']:>12.2f} | "
              f"{r['time_per_generation_ms']:>12.4f} | {r['cells_per_second_million']:>10.2f}")
    print("=" * 60)

    if csv_path is not None:
        csv_path = Path(csv_path)
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        with open(csv_path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["engine", "size", "generations", "total_time_ms",
                             "time_per_generation_ms", "cells_per_second_million"])
            for r in results:
                writer.writerow([r["engine"], r["size"], r["generations"],
                                 f"{r['total_time_ms']:.4f}",
                                 f"{r['time_per_generation_ms']:.6f}",
                                 f"{r['cells_per_second_million']:.4f}"])
        print(f"\nResults saved to {csv_path}")

    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="game_of_life",
        description="Conway's Game of Life in the terminal",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="grid columns")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="grid rows")
    parser.add_argument("-n", "--iterations", type=int, default=None,
                        help=f"total frames to simulate (default {DEFAULT_ITERATIONS}); "
                             f"generations per run with --benchmark (default {BENCHMARK_GENERATIONS})")
    parser.add_argument("--delay", type=float, default=DEFAULT_FRAME_DELAY_MS,
                        help="pause between frames in milliseconds")
    parser.add_argument("--pattern", choices=sorted(PATTERNS) + ["random"], default="glider",
                        help="initial live cells")
    parser.add_argument("--offset", type=int, nargs=2, default=[1, 1], metavar=("X", "Y"),
                        help="top-left corner of the pattern")
    parser.add_argument("--density", type=float, default=0.3,
                        help="alive probability for --pattern random")
    parser.add_argument("--random-seed", type=int, default=None,
                        help="random seed for --pattern random and --benchmark")
    parser.add_argument("--render", choices=RENDER_MODES, default="glyph",
                        help="glyph: X for live cells; counts: live neighbor count")
    parser.add_argument("--benchmark", action="store_true",
                        help="time the simulation engines instead of animating")
    parser.add_argument("--sizes", type=int, nargs="+", default=None, metavar="N",
                        help="grid sizes for --benchmark")
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    if args.pattern == "random":
        if args.width <= 0 or args.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {args.width} x {args.height}")
        seed = init_random(args.width, args.height, args.density, args.random_seed)
    else:
        seed = place(PATTERNS[args.pattern], *args.offset)

    return SimulationConfig(
        width=args.width,
        height=args.height,
        iterations=DEFAULT_ITERATIONS if args.iterations is None else args.iterations,
        frame_delay_ms=args.delay,
        seed=seed,
        render_mode=args.render,
    )


def run_benchmark(parser: argparse.ArgumentParser, args: argparse.Namespace) -> list[dict]:
    """Run the benchmark from parsed command line arguments."""
    ignored = [name for name in ANIMATION_FLAGS
               if getattr(args, name) != parser.get_default(name)]
    if ignored:
        flags = ", ".join("--" + name for name in ignored)
        parser.error(f"{flags} not used with --benchmark")

    try:
        return benchmark(
            sizes=args.sizes,
            generations=BENCHMARK_GENERATIONS if args.iterations is None else args.iterations,
            seed=42 if args.random_seed is None else args.random_seed,
        )
    except ValueError as e:
        parser.error(str(e))


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.benchmark:
        run_benchmark(parser, args)
        return

    if args.sizes is not None:
        parser.error("--sizes is only used with --benchmark")

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    run_simulation(config)


if __name__ == "__main__":
    main()
