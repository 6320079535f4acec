"""Invocation options and their validation.

Raw values come straight from the command line, where ``None`` means the
flag was not given and ``""`` means it was given empty (``--end=``). Both
count as missing once defaults have been applied.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import Config
from .result import Err, Ok, Result

__all__ = ["DEFAULT_END_REF", "OptionsError", "ValidationOptions", "resolve_options"]

DEFAULT_END_REF = "HEAD"


@dataclass(frozen=True, slots=True)
class OptionsError:
    """A required option is missing or empty."""

    option: str

    @property
    def message(self) -> str:
        return f"missing required option: --{self.option}"


@dataclass(frozen=True, slots=True)
class ValidationOptions:
    """Fully resolved options for one validation run."""

    version: str
    start: str
    end: str
    repo: str
    branch: str
    assume_yes: bool = False


def resolve_options(
    *,
    version: str | None,
    start: str | None,
    end: str | None,
    repo: str | None,
    branch: str | None,
    config: Config,
    assume_yes: bool = False,
) -> Result[ValidationOptions, OptionsError]:
    """Apply defaults and check that every field ends up non-empty.

    The first missing field (in flag order) is reported.
    """
    resolved = {
        "version": version,
        "start": start,
        "end": DEFAULT_END_REF if end is None else end,
        "repo": config.repository.url if repo is None else repo,
        "branch": config.repository.branch if branch is None else branch,
    }

    values: dict[str, str] = {}
    for name, value in resolved.items():
        stripped = (value or "").strip()
        if not stripped:
            return Err(OptionsError(option=name))
        values[name] = stripped

    return Ok(ValidationOptions(assume_yes=assume_yes, **values))
