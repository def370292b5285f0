"""Exit codes for the relman CLI.

The numeric values are used as process exit codes and should remain stable:
- 0: Success
- 1: User error (no prior release to report)
- 2: Environment error (invalid config, missing executable)
- 3: Build error (relx or another release step failed)
- 5: I/O error (unreadable release directory)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    BUILD_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
