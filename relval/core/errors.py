"""Exit codes for the release validator.

- 0: Help shown, or the report was printed (even if issues need fixing)
- 1: Missing or malformed option, declined workspace overwrite, git or
  config failure
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values must remain stable."""

    OK = 0
    FAILURE = 1
