"""Errors raised while setting up and running a pricing."""


class PricingError(Exception):
    """Base class for every error raised by this package."""

    default_message = "pricing failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class NonCentralChi2Error(PricingError, ArithmeticError):
    """A non-central chi-squared draw failed; drawing again may succeed."""

    default_message = "non-central chi-squared draw failed; try again"


class NonCentralChi2Dead(PricingError, ArithmeticError):
    """Repeated non-central chi-squared draws failed; further tries are pointless."""

    def __init__(self, delta: float, lam: float) -> None:
        self.delta = delta
        self.lam = lam
        super().__init__(f"nc chi 2 dead. (delta: {delta}, lambda: {lam})")


class FactoryNotBuiltError(PricingError, RuntimeError):
    """A factory was used before it built its components."""

    default_message = "factory need to be built"


class RequiredArgumentMissing(PricingError, KeyError):
    """A required argument is not present."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(str(name))

    def __str__(self) -> str:
        return str(self.name)


class ProcessNotLoadedError(PricingError, RuntimeError):
    """A process was simulated before its initial state was loaded."""

    default_message = "process not loaded"


class BadAccessError(PricingError, NotImplementedError):
    """An operation was called on a component that does not support it."""

    default_message = "operation not supported"


class PathAbnormalError(PricingError, ArithmeticError):
    """A NaN appeared while a path was being generated."""

    default_message = "nan encountered during path generating"


class RandomLibraryError(PricingError, RuntimeError):
    """The random variate generator returned unusable values."""

    default_message = "rv_library broken"


class BesselInputError(PricingError, ValueError):
    """The Bessel function was given an input it cannot evaluate."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} = {value}")


class OptionTypeError(PricingError, ValueError):
    """An option was given an unknown type (call/put, direction, fixing...)."""

    default_message = "wrong option type"