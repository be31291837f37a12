from __future__ import annotations

"""Exception hierarchy for argvfile.

Only configuration problems and, in strict mode, unreadable option files are
surfaced. Missing files, directories and files already read during the same
call are not errors: such hints simply expand to nothing.
"""

from pathlib import Path
from typing import Optional


class ArgvFileError(Exception):
    """Base class for every error raised by argvfile."""


class InvalidConfigError(ArgvFileError, ValueError):
    """Raised when the expansion options are malformed."""


class OptionFileReadError(ArgvFileError, OSError):
    """Raised in strict mode when an existing option file cannot be read."""

    def __init__(self, path: Path, reason: Optional[BaseException] = None) -> None:
        self.path = path
        self.reason = reason
        detail = f": {reason}" if reason is not None else ""
        super().__init__(f"cannot read option file {path}{detail}")
