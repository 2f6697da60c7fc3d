"""Assemble a process, a pricing engine and an option from one shared argument store."""

from __future__ import annotations

from typing import Any

from .arguments import Arguments, Reader, Writer, build_arguments
from .engines import PricingEngine
from .exceptions import FactoryNotBuiltError
from .options import Option
from .process import Process


class Factory:
    """Builds the parts needed to price an option and prices it.

    ``process_cls``, ``engine_cls`` and ``option_cls`` are classes with a
    ``from_arguments`` constructor; those used with :meth:`prompt` must also
    list their ``parameters``.
    """

    def __init__(
        self,
        process_cls: type[Process],
        engine_cls: type[PricingEngine],
        option_cls: type[Option],
    ) -> None:
        self.process_cls = process_cls
        self.engine_cls = engine_cls
        self.option_cls = option_cls
        self._arguments = Arguments()
        self._process: Process | None = None
        self._engine: PricingEngine | None = None
        self._option: Option | None = None
        self._built = False

    def prompt(self, reader: Reader | None = None, writer: Writer | None = None) -> Arguments:
        """Ask for every parameter of the three components that is not yet set."""
        for component in (self.process_cls, self.engine_cls, self.option_cls):
            build_arguments(component, self._arguments, reader, writer)  # type: ignore[arg-type]
        return self._arguments

    def build(self) -> None:
        """Build the option, then the process, then the engine from the arguments.

        The option and process are stored back as ``option`` and ``process``.
        With ``verbose`` present a notice is printed first.
        """
        if "verbose" in self._arguments:
            print("building...")
        option = self.option_cls.from_arguments(self._arguments)
        self._arguments["option"] = option
        self._option = option
        process = self.process_cls.from_arguments(self._arguments)
        self._arguments["process"] = process
        self._process = process
        self._engine = self.engine_cls.from_arguments(self._arguments)
        self._built = True

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` in the arguments."""
        self._arguments[key] = value

    @property
    def arguments(self) -> Arguments:
        """The current arguments."""
        return self._arguments

    def _require_built(self) -> None:
        if not self._built:
            raise FactoryNotBuiltError()

    @property
    def process(self) -> Process:
        """The built process."""
        self._require_built()
        assert self._process is not None
        return self._process

    @property
    def option(self) -> Option:
        """The built option."""
        self._require_built()
        assert self._option is not None
        return self._option

    @property
    def engine(self) -> PricingEngine:
        """The built pricing engine."""
        self._require_built()
        assert self._engine is not None
        return self._engine

    def price(self) -> float:
        """Price the option with the built engine and process."""
        self._require_built()
        assert self._engine is not None
        return self._engine.price(self._arguments)