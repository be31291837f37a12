from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HostEnvironmentProtocol(Protocol):
    """Filesystem and process facts the expander consumes as pure functions."""

    def abspath(self, path: str) -> str:
        ...

    def join(self, directory: str, name: str) -> str:
        ...

    def cwd(self) -> str:
        ...

    def home(self) -> Optional[str]:
        ...

    def program_path(self) -> str:
        ...

    def case_sensitive(self) -> bool:
        ...
