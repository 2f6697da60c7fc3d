"""Options priced by the engines: a generic payoff plus European, barrier and Asian options."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .arguments import Arguments
from .exceptions import BadAccessError, OptionTypeError
from .path import Path

PayoffFunc = Callable[[Arguments], float]

_CALL = "CALL"
_PUT = "PUT"


def _call_put_sign(kind: str) -> float:
    if kind == _CALL:
        return 1.0
    if kind == _PUT:
        return -1.0
    raise OptionTypeError()


class Option:
    """An option maturing at ``maturity`` with an optional payoff function."""

    def __init__(self, maturity: float, payoff_func: PayoffFunc | None = None) -> None:
        self.maturity = float(maturity)
        self.payoff_func = payoff_func

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> Option:
        """Build from ``T``, using the ``payoff`` callable if one is given."""
        return Option(arguments["T"], arguments.get("payoff"))

    def payoff(self, arguments: Arguments) -> float:
        """Evaluate the payoff on the current ``arguments``."""
        if self.payoff_func is None:
            raise BadAccessError("option has no payoff function")
        return self.payoff_func(arguments)


class EuropeanOption(Option):
    """A vanilla call or put on the terminal price ``ST``."""

    def __init__(self, maturity: float, strike: float, kind: str) -> None:
        super().__init__(maturity)
        self.strike = float(strike)
        self.kind = kind

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> EuropeanOption:
        """Build from ``T``, ``K`` and ``CP``; marks the pricing as single-step (``simp``)."""
        option = cls(arguments["T"], arguments["K"], arguments["CP"])
        option.payoff_func = arguments.get("payoff")
        arguments["simp"] = True
        return option

    @staticmethod
    def parameters() -> list[tuple[str, type]]:
        """Arguments this option needs, in the order they are asked for."""
        return [("K", float), ("T", float), ("CP", str)]

    def payoff(self, arguments: Arguments) -> float:
        """max(ST - K, 0) for a call, max(K - ST, 0) for a put."""
        if self.kind == _CALL:
            return max(0.0, arguments["ST"] - self.strike)
        if self.kind == _PUT:
            return max(0.0, self.strike - arguments["ST"])
        raise OptionTypeError()


class BarrierOption(Option):
    """A knock-in or knock-out call or put with a single barrier."""

    def __init__(
        self,
        maturity: float,
        strike: float,
        barrier: float,
        kind: str,
        direction: str,
        knock: str,
    ) -> None:
        super().__init__(maturity)
        if knock not in ("IN", "OUT"):
            raise OptionTypeError(f"knock must be IN or OUT, got {knock!r}")
        self.strike = float(strike)
        self.barrier = float(barrier)
        self.kind = kind
        self.direction = direction
        self.knock = knock

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> BarrierOption:
        """Build from ``T``, ``K``, ``B``, ``CP``, ``UD`` and ``IO``."""
        option = cls(
            arguments["T"],
            arguments["K"],
            arguments["B"],
            arguments["CP"],
            arguments["UD"],
            arguments["IO"],
        )
        option.payoff_func = arguments.get("payoff")
        return option

    @staticmethod
    def parameters() -> list[tuple[str, type]]:
        """Arguments this option needs, in the order they are asked for."""
        return [("K", float), ("T", float), ("CP", str), ("UD", str), ("IO", str)]

    def payoff(self, arguments: Arguments) -> float:
        """Vanilla payoff on ``ST`` if the barrier condition on ``path`` holds, else zero."""
        path: Path = arguments["path"]
        broke_up = path.breaks_up(self.barrier)
        broke_down = path.breaks_down(self.barrier)
        sign = _call_put_sign(self.kind)
        st = arguments["ST"]
        if self.direction == "UP":
            broke = broke_up
        elif self.direction == "DOWN":
            broke = broke_down
        else:
            raise OptionTypeError()
        if not broke and self.knock == "IN":
            return 0.0
        if broke and self.knock == "OUT":
            return 0.0
        return max(sign * (st - self.strike), 0.0)


class AsianOption(Option):
    """An average-rate or average-strike call or put on the path average."""

    def __init__(self, maturity: float, kind: str, fixing: str, averaging: str) -> None:
        super().__init__(maturity)
        self.kind = kind
        self.fixing = fixing
        self.averaging = averaging

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> AsianOption:
        """Build from ``T``, ``CP``, ``FF`` (RATE/STRIKE) and ``AG`` (ARI/GEO)."""
        option = cls(arguments["T"], arguments["CP"], arguments["FF"], arguments["AG"])
        option.payoff_func = arguments.get("payoff")
        return option

    @staticmethod
    def parameters() -> list[tuple[str, type]]:
        """Arguments this option needs, in the order they are asked for."""
        return [("K", float), ("T", float), ("CP", str), ("FF", str), ("AG", str)]

    def payoff(self, arguments: Arguments) -> float:
        """Average rate: the average replaces ``ST``; average strike: it replaces ``K``."""
        path: Path = arguments["path"]
        st: Any = arguments["ST"]
        strike = arguments["K"] if self.fixing == "RATE" else 0.0
        if self.averaging == "ARI":
            average = path.arithmetic_avg()
        elif self.averaging == "GEO":
            average = path.geometric_avg()
        else:
            raise OptionTypeError()
        if self.fixing == "RATE":
            st = average
        elif self.fixing == "STRIKE":
            strike = average
        else:
            raise OptionTypeError()
        sign = _call_put_sign(self.kind)
        return max(sign * (st - strike), 0.0)