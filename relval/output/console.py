"""Console output abstraction.

Services print through ConsoleProtocol so tests can capture output with
MockConsole. RichConsole is the production implementation: only the report
table goes to stdout, progress and errors go to stderr.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()
    WARNING = auto()
    DIM = auto()
    BOLD = auto()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a report line to stdout as-is (no markup interpretation)."""
        ...

    def status(self, message: str, style: Style = Style.DIM) -> None:
        """Print progress or summary text to stderr."""
        ...

    def error(self, message: str) -> None: ...


class RichConsole:
    """Console implementation using Rich."""

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._out = Console(soft_wrap=True)
        self._err = Console(stderr=True, soft_wrap=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.DIM: "dim",
            Style.BOLD: "bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        # Tracker data and usage text may contain brackets; never treat them as markup.
        self._out.print(message, style=self._rich_style(style), markup=False, highlight=False)

    def status(self, message: str, style: Style = Style.DIM) -> None:
        self._err.print(message, style=self._rich_style(style), markup=False, highlight=False)

    def error(self, message: str) -> None:
        self._err.print("[red bold]error:[/red bold] ", end="")
        self._err.print(message, markup=False, highlight=False)

    def _rich_style(self, style: Style) -> str | None:
        return self._style_map.get(style) or None


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style
    stderr: bool = False


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def status(self, message: str, style: Style = Style.DIM) -> None:
        self.outputs.append(OutputRecord(message, style, stderr=True))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR, stderr=True))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]

    @property
    def stdout(self) -> list[str]:
        """Messages that would have gone to stdout."""
        return [o.message for o in self.outputs if not o.stderr]

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
