"""Pricing engines: a base engine and a Monte Carlo engine."""

from __future__ import annotations

import math
import sys
import time

from .arguments import Arguments
from .options import Option
from .process import Process

_PROGRESS_EVERY = 50
_BACKSPACES = "\b" * 6


class PricingEngine:
    """Prices one option."""

    def __init__(self, option: Option) -> None:
        self.option = option

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> PricingEngine:
        """Build from the ``option`` argument."""
        return PricingEngine(arguments["option"])

    def price(self, arguments: Arguments) -> float:
        """A bare engine has no model and prices every option at zero."""
        return 0.0


class MonteCarloEngine(PricingEngine):
    """Averages discounted payoffs over ``nos`` simulations of a process.

    After pricing, ``std_err`` and ``elapsed`` hold the standard error of
    the estimate and the processor time used.
    """

    def __init__(self, option: Option, process: Process) -> None:
        super().__init__(option)
        self.process = process
        self.std_err = math.nan
        self.elapsed = 0.0

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> MonteCarloEngine:
        """Build from the ``option`` and ``process`` arguments."""
        return cls(arguments["option"], arguments["process"])

    @staticmethod
    def parameters() -> list[tuple[str, type]]:
        """Arguments this engine needs, in the order they are asked for."""
        return [("nos", int), ("T", float)]

    def price(self, arguments: Arguments) -> float:
        """Estimate the price from ``nos`` simulations, discounted at ``r`` over ``T``.

        With ``simp`` set a single step is simulated, otherwise a whole path.
        With ``verbose`` set progress and results are printed and, if a
        ``csv`` logger is present, a result row is added to it. With ``dbg``
        set every payoff is written to that stream.
        """
        start = time.process_time()
        count = int(arguments["nos"])
        horizon = arguments["T"]
        rate = arguments["r"]
        if count < 1:
            raise ValueError(f"nos must be at least 1, got {count}")
        single_step = bool(arguments.get("simp", False))
        verbose = bool(arguments.get("verbose", False))
        debug = arguments.get("dbg") if "dbg" in arguments else None
        out = sys.stdout

        if verbose:
            print("simulating...", file=out)
            out.write("------")
            out.flush()
        if debug is not None:
            debug.write("[")

        total = 0.0
        var2 = 0.0
        for i in range(count):
            if verbose and i % _PROGRESS_EVERY == 0:
                out.write(_BACKSPACES + f"{i / count * 100.0:05.2f}%")
                out.flush()
            if single_step:
                self.process.simulate_with(arguments)
            else:
                self.process.simulate_path(arguments)
            poff = self.option.payoff(arguments)
            if i > 1:
                deviation = poff - total / i
                var2 = (i - 1.0) / i * var2 + deviation * deviation / (i + 1)
            total += poff
            if debug is not None:
                debug.write(f"{poff:g},")
        if debug is not None:
            debug.write("]\n\n")

        discount = math.exp(-rate * horizon)
        result = total * discount / count
        self.elapsed = time.process_time() - start
        self.std_err = math.sqrt(var2) * discount / math.sqrt(count)

        if verbose:
            self._report(arguments, count, result)
        return result

    def _report(self, arguments: Arguments, count: int, result: float) -> None:
        out = sys.stdout
        out.write(_BACKSPACES)
        row = [float(count), self.elapsed, result, self.std_err]
        if "obv" in arguments:
            row.append(arguments[arguments["obv"]])
        rate = count / self.elapsed if self.elapsed > 0 else math.inf
        print("100%--", file=out)
        print("done.", file=out)
        print(f"result: {result:g}", file=out)
        print(f"std err: {self.std_err:g}", file=out)
        print(f"time usage: {self.elapsed:g}", file=out)
        print(f"avg sims per sec: {rate:g}", file=out)
        print(file=out)
        logger = arguments.get("csv")
        if logger is not None:
            logger.add(row)