from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class StartupTier(str, Enum):
    """Startup option file locations, in injection order."""

    DEFAULT = 'default'
    HOME = 'home'
    CURRENT = 'current'


STARTUP_ORDER = (StartupTier.DEFAULT, StartupTier.HOME, StartupTier.CURRENT)


@dataclass(frozen=True)
class CascadedHint:
    """Hint addressed to a downstream tool, kept out of the expansion loop.

    ``name`` is the hint with exactly one prefix removed; unmasking puts a
    single prefix back in front of it.
    """
    name: str


@dataclass(frozen=True)
class StartupCandidate:
    tier: StartupTier
    directory: str
    path: str


WorkingToken = Union[str, CascadedHint]
WorkingList = List[WorkingToken]
