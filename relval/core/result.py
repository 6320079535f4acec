"""Result type for explicit error handling.

Operations that talk to git, the network or the filesystem return either
``Ok(value)`` or ``Err(error)`` instead of raising. Only the CLI layer turns
an ``Err`` into a process exit.

Usage:
    match repo.log_oneline("v1.0", "HEAD"):
        case Ok(lines):
            for line in lines:
                print(line)
        case Err(e):
            print(f"git failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result carrying ``value``."""

    value: T

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result carrying ``error``."""

    error: E

    def unwrap_or(self, default: T) -> T:
        return default


Result: TypeAlias = Ok[T] | Err[E]
