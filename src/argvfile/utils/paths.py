# src/argvfile/utils/paths.py
"""
paths – Host filesystem and process helpers for argvfile.

Provides:
  • SystemHostEnvironment        – os/os.path backed HostEnvironmentProtocol
  • host_is_case_sensitive()     – platform-inferred filename case rule
  • canonical_name(host, name)   – key used by the seen-file set
"""

from __future__ import annotations

import os
import sys
from typing import Mapping, Optional

from argvfile.constants import HOME_ENV_VAR
from argvfile.core.interfaces.fs import HostEnvironmentProtocol


def host_is_case_sensitive() -> bool:
    """Return False on hosts whose filenames compare case-insensitively."""
    return os.name != "nt" and not sys.platform.startswith(("win", "cygwin", "os2"))


class SystemHostEnvironment:
    """HostEnvironmentProtocol backed by the running process."""

    def __init__(
        self,
        *,
        program: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        case_sensitive: Optional[bool] = None,
    ) -> None:
        self._program = program
        self._environ = environ
        self._case_sensitive = case_sensitive

    def abspath(self, path: str) -> str:
        return os.path.realpath(os.path.abspath(path or os.curdir))

    def join(self, directory: str, name: str) -> str:
        return os.path.join(directory, name)

    def cwd(self) -> str:
        return os.getcwd()

    def home(self) -> Optional[str]:
        env = os.environ if self._environ is None else self._environ
        # An empty value would resolve to the current directory.
        return env.get(HOME_ENV_VAR) or None

    def program_path(self) -> str:
        if self._program is not None:
            return self._program
        return sys.argv[0] if sys.argv else ""

    def case_sensitive(self) -> bool:
        if self._case_sensitive is None:
            return host_is_case_sensitive()
        return bool(self._case_sensitive)


def canonical_name(host: HostEnvironmentProtocol, name: str) -> str:
    """Return the seen-set key for *name*: absolute, resolved, case-folded when needed."""
    resolved = host.abspath(name)
    return resolved if host.case_sensitive() else resolved.lower()
