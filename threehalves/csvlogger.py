"""Append numeric result rows to a CSV file with a counter column."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from types import TracebackType

from .arguments import Arguments


class CSVLogger:
    """Writes a ``#,title...`` header, then numbered rows of numbers."""

    def __init__(self, filename: str, title: Sequence[str]) -> None:
        self.filename = filename
        self.title = list(title)
        self.count = 0
        self._file = open(filename, "w", encoding="utf-8", newline="")
        self._file.write("#" + "".join(f",{name}" for name in self.title) + "\n")

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> CSVLogger:
        """Open the file named by ``csv_name`` with the titles in ``csv_title``."""
        return cls(arguments["csv_name"], arguments["csv_title"])

    def add(self, row: Iterable[float]) -> None:
        """Write one row, preceded by its running number."""
        cells = "".join(f",{value:g}" for value in row)
        self._file.write(f"{self.count}{cells}\n")
        self._file.flush()
        self.count += 1

    def close(self) -> None:
        """Close the file."""
        self._file.close()

    def __enter__(self) -> CSVLogger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()