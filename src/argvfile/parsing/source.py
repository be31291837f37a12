from __future__ import annotations
"""Option file source model.

Carries the origin of an option-file line (filename, line) so the tokenizer
and reader can emit helpful diagnostics. It never alters the token stream.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class OptionFileSource:
    """Represents the origin of an option-file line.

    Attributes:
        path: Path of the option file if known.
        line: 1-based line number in the file.
    """
    path: Optional[Path] = None
    line: Optional[int] = None

    def format(self) -> str:
        """Return a human-readable source label."""
        parts: list[str] = []
        if self.path:
            parts.append(str(self.path))
        if self.line is not None:
            parts.append(f"line {self.line}")
        return ":".join(parts) if parts else "<argv>"

    def with_line(self, line: int) -> "OptionFileSource":
        """Return a copy pointing at *line*."""
        return OptionFileSource(path=self.path, line=line)
