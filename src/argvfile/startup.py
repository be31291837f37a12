from __future__ import annotations

"""
startup – Locate startup option files and turn them into leading hints.

Three locations are known, scanned in this fixed order:

    default  → directory of the running program
    home     → $HOME (skipped when unset or empty)
    current  → current working directory

Each enabled location contributes `<abs dir>/<startup filename>` if that file
exists and was not already contributed by an earlier location. Surviving
files are injected in front of the caller's tokens in the same order, so a
"last value wins" option parser sees current over home over default, and the
explicit command line over all of them.
"""

import logging
import os
from typing import List, Optional, Sequence, Set

from argvfile.config import ExpansionConfig
from argvfile.core.interfaces.fs import HostEnvironmentProtocol
from argvfile.core.models import STARTUP_ORDER, StartupCandidate, StartupTier
from argvfile.logging.helpers import get_logger
from argvfile.utils.paths import canonical_name


class StartupPathResolver:
    """Resolve, deduplicate and inject startup option files."""

    def __init__(self, host: HostEnvironmentProtocol, *, logger: Optional[logging.Logger] = None) -> None:
        self._host = host
        self._log = logger or get_logger("startup")

    def directory_for(self, tier: StartupTier) -> Optional[str]:
        """Return the directory searched for *tier*, or None if it has none."""
        if tier is StartupTier.DEFAULT:
            return os.path.dirname(self._host.program_path())
        if tier is StartupTier.HOME:
            return self._host.home()
        return self._host.cwd()

    def candidates(self, config: ExpansionConfig, filename: str) -> List[StartupCandidate]:
        """Return the startup files to inject, in injection order."""
        accepted: List[StartupCandidate] = []
        seen: Set[str] = set()

        for tier in STARTUP_ORDER:
            if not config.tier_enabled(tier):
                continue
            directory = self.directory_for(tier)
            if directory is None:
                self._log.debug("startup tier %s skipped: no home directory", tier.value)
                continue

            path = self._host.join(self._host.abspath(directory), filename)
            key = canonical_name(self._host, path)
            if key in seen:
                self._log.debug("startup tier %s skipped: %s already used", tier.value, path)
                continue
            if not os.path.exists(path):
                self._log.debug("startup tier %s skipped: %s does not exist", tier.value, path)
                continue

            seen.add(key)
            accepted.append(StartupCandidate(tier=tier, directory=directory, path=path))
            self._log.debug("startup tier %s uses %s", tier.value, path)

        return accepted

    @staticmethod
    def inject(tokens: Sequence[str], candidates: Sequence[StartupCandidate], prefix: str) -> List[str]:
        """Return *tokens* preceded by one hint per candidate."""
        return [prefix + c.path for c in candidates] + list(tokens)
