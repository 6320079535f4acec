"""Command-line normalisation applied before typer parses argv."""

from __future__ import annotations

import re

__all__ = ["VALUE_FLAGS", "normalize_argv"]

# short letter -> long name, for every option that takes a value
VALUE_FLAGS = {
    "v": "version",
    "s": "start",
    "e": "end",
    "r": "repo",
    "b": "branch",
    "c": "config",
}

_SHORT_WITH_EQUALS = re.compile(r"^-([A-Za-z])=(.*)$", re.DOTALL)


def _bare_value_flag(arg: str) -> str | None:
    """Long name if ``arg`` is a value flag written without an attached value."""
    if arg.startswith("--"):
        name = arg[2:]
        return name if name in VALUE_FLAGS.values() else None
    if len(arg) == 2 and arg[0] == "-":
        return VALUE_FLAGS.get(arg[1])
    return None


def normalize_argv(argv: list[str]) -> list[str]:
    """Rewrite argv so click reads every value flag the way the tool expects.

    - ``-v=1.0`` becomes ``-v 1.0``; click would otherwise read ``=1.0``.
    - A value flag with nothing after it, or followed by another option
      (``--version --start=v0.9``), becomes ``--version=`` so it is reported
      as a missing option instead of swallowing the next flag.

    Unknown flags and everything after ``--`` are passed through unchanged.
    """
    out: list[str] = []
    for i, arg in enumerate(argv):
        if arg == "--":
            out.extend(argv[i:])
            break
        match = _SHORT_WITH_EQUALS.match(arg)
        if match and match.group(1) in VALUE_FLAGS:
            out.extend([f"-{match.group(1)}", match.group(2)])
            continue
        name = _bare_value_flag(arg)
        following = argv[i + 1] if i + 1 < len(argv) else None
        if name is not None and (following is None or following.startswith("-")):
            out.append(f"--{name}=")
        else:
            out.append(arg)
    return out
