from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Set

from argvfile.core.interfaces.fs import HostEnvironmentProtocol
from argvfile.core.models import CascadedHint, WorkingList, WorkingToken
from argvfile.errors import OptionFileReadError
from argvfile.logging.helpers import get_logger
from argvfile.parsing.reader import OptionFileReader
from argvfile.utils.paths import canonical_name


class ExpansionEngine:
    """Replace option-file hints by the tokens stored in the files.

    The engine works on a flat list and repeats full passes until no hint is
    left, instead of recursing into nested files. Every pass consumes all the
    hints it finds:

        * ``@file``   → the tokens of *file*, or nothing if the file is
          missing, is a directory, or was already read during this run;
        * ``@@name``  → a `CascadedHint` marker, restored to ``@name`` by
          `unmask` once the loop is over.

    A file is read at most once per `run`, which is what stops
    self-referencing files from looping.
    """

    def __init__(
        self,
        *,
        prefix: str,
        host: HostEnvironmentProtocol,
        reader: OptionFileReader,
        strict: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._prefix = prefix
        self._host = host
        self._reader = reader
        self._strict = strict
        self._log = logger or get_logger("engine")

    def is_hint(self, token: WorkingToken) -> bool:
        return isinstance(token, str) and token.startswith(self._prefix)

    def has_hints(self, tokens: WorkingList) -> bool:
        return any(self.is_hint(tok) for tok in tokens)

    def run(self, tokens: List[str]) -> List[str]:
        """Return the fully expanded and unmasked version of *tokens*."""
        work: WorkingList = list(tokens)
        seen: Set[str] = set()
        passes = 0
        while self.has_hints(work):
            passes += 1
            work = self.expand_pass(work, seen)
        self._log.debug("expansion finished after %d pass(es), %d file(s) read", passes, len(seen))
        return self.unmask(work)

    def expand_pass(self, tokens: WorkingList, seen: Set[str]) -> WorkingList:
        """Run a single pass, consuming every hint currently in *tokens*."""
        out: WorkingList = []
        for tok in tokens:
            if not self.is_hint(tok):
                out.append(tok)
                continue

            name = tok[1:]
            if name.startswith(self._prefix):
                self._log.debug("cascaded hint %r left for a downstream tool", name)
                out.append(CascadedHint(name[1:]))
                continue

            out.extend(self._inline(name, seen))
        return out

    def unmask(self, tokens: WorkingList) -> List[str]:
        """Turn every `CascadedHint` back into a single-prefix string."""
        return [self._prefix + tok.name if isinstance(tok, CascadedHint) else tok for tok in tokens]

    def _inline(self, name: str, seen: Set[str]) -> List[str]:
        if not name or not os.path.exists(name):
            self._log.debug("option file %r not found, hint dropped", name)
            return []
        if os.path.isdir(name):
            self._log.debug("option file %r is a directory, hint dropped", name)
            return []

        key = canonical_name(self._host, name)
        if key in seen:
            self._log.debug("option file %r already read, hint dropped", name)
            return []
        seen.add(key)

        path = Path(name)
        try:
            tokens = self._reader.read(path)
        except (OSError, UnicodeDecodeError) as exc:
            if self._strict:
                raise OptionFileReadError(path, exc) from exc
            self._log.warning("skipping unreadable option file %s: %s", path, exc)
            return []

        self._log.debug("option file %s expanded to %d token(s)", path, len(tokens))
        return tokens
