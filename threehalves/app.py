"""Command line runs: a benchmark of European calls and rho sweeps of barrier options."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from pathlib import Path

from .csvlogger import CSVLogger
from .engines import MonteCarloEngine
from .factory import Factory
from .options import BarrierOption, EuropeanOption
from .p32 import ThreeHalvesProcess

BENCHMARK_TITLE = ["simulations", "time_usage", "result", "std_err"]
DEFAULT_SIMULATIONS = 2560
DEFAULT_SUFFIX = "0.8dt7.2T"

_MODEL = {
    "r": 0.05,
    "rho": -0.5,
    "kappa": 2.0,
    "theta": 1.5,
    "epsilon": 0.2,
    "S0": 1.0,
    "V0": 1.125,
}


def _prepare(target: Path) -> Path:
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def benchmark(
    csv_path: str | Path = "data/benchmark.csv",
    sizes: Sequence[int] | None = None,
    simulations: int = DEFAULT_SIMULATIONS,
) -> list[tuple[int, float]]:
    """Price an at-the-money European call under the 3/2 model at several sizes.

    Without ``sizes`` the runs use ``simulations``, four times and sixteen
    times as many simulations. Each run is logged to ``csv_path``.
    Returns (size, price) pairs.
    """
    if sizes is None:
        sizes = (simulations, 4 * simulations, 16 * simulations)
    target = _prepare(Path(csv_path))
    factory = Factory(ThreeHalvesProcess, MonteCarloEngine, EuropeanOption)
    results: list[tuple[int, float]] = []
    with CSVLogger(str(target), BENCHMARK_TITLE) as logger:
        factory.set("csv_name", str(target))
        factory.set("csv_title", list(BENCHMARK_TITLE))
        factory.set("csv", logger)
        factory.set("CP", "CALL")
        for key, value in _MODEL.items():
            factory.set(key, value)
        factory.set("dt", 1.0)
        factory.set("T", 1.0)
        factory.set("K", 1.0)
        factory.set("verbose", True)
        for size in sizes:
            factory.set("nos", size)
            factory.build()
            print(f"Case : {size} sims")
            results.append((size, factory.price()))
    return results


def _sweep(start: float, stop: float, step: float) -> Iterator[float]:
    value = start
    while value <= stop:
        yield value
        value += step


def rho_sweep(
    csv_dir: str | Path = "data",
    kind: str = "PUT",
    direction: str = "UP",
    knock: str = "OUT",
    suffix: str = DEFAULT_SUFFIX,
    simulations: int = DEFAULT_SIMULATIONS,
) -> list[tuple[float, float]]:
    """Price a barrier option under the 3/2 model for rho from -1 to 1 in steps of 0.05.

    Every run is logged, with its rho, to ``B<kind>rho<direction><knock><suffix>.csv``
    in ``csv_dir``. Returns (rho, price) pairs.
    """
    label = f"B{kind}rho{direction}"
    target = _prepare(Path(csv_dir) / f"{label}{knock}{suffix}.csv")
    title = [*BENCHMARK_TITLE, "rho"]
    factory = Factory(ThreeHalvesProcess, MonteCarloEngine, BarrierOption)
    results: list[tuple[float, float]] = []
    with CSVLogger(str(target), title) as logger:
        factory.set("csv_name", str(target))
        factory.set("csv_title", title)
        factory.set("csv", logger)
        factory.set("obv", "rho")
        factory.set("CP", kind)
        factory.set("UD", direction)
        factory.set("IO", knock)
        for key, value in _MODEL.items():
            factory.set(key, value)
        factory.set("dt", 0.8)
        factory.set("nos", simulations)
        factory.set("T", 7.2)
        factory.set("K", 1.0)
        factory.set("B", 1.5)
        factory.set("verbose", True)
        for rho in _sweep(-1.0, 1.0, 0.05):
            factory.set("rho", rho)
            factory.build()
            results.append((rho, factory.price()))
            print(f"{label}{rho:g}")
    return results


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="threehalves",
        description="Monte Carlo option pricing under the 3/2 stochastic volatility model.",
    )
    parser.set_defaults(
        command="benchmark",
        csv="data/benchmark.csv",
        sizes=None,
        simulations=DEFAULT_SIMULATIONS,
    )
    commands = parser.add_subparsers(dest="command")

    bench = commands.add_parser("benchmark", help="price a European call at several sizes")
    bench.add_argument("--csv", default="data/benchmark.csv", help="CSV file to log to")
    bench.add_argument("--simulations", type=int, default=DEFAULT_SIMULATIONS)
    bench.add_argument("--sizes", type=int, nargs="*", default=None)

    sweep = commands.add_parser("sweep", help="price a barrier option over rho")
    sweep.add_argument("--dir", default="data", help="directory for the CSV file")
    sweep.add_argument("--kind", choices=("CALL", "PUT"), default="PUT")
    sweep.add_argument("--direction", choices=("UP", "DOWN"), default="UP")
    sweep.add_argument("--knock", choices=("IN", "OUT"), default="OUT")
    sweep.add_argument("--suffix", default=DEFAULT_SUFFIX)
    sweep.add_argument("--simulations", type=int, default=DEFAULT_SIMULATIONS)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark (the default) or a rho sweep."""
    args = _parser().parse_args(argv)
    if args.command == "sweep":
        rho_sweep(
            args.dir,
            args.kind,
            args.direction,
            args.knock,
            args.suffix,
            args.simulations,
        )
    else:
        benchmark(args.csv, args.sizes, args.simulations)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())