from __future__ import annotations

"""Public surface for argvfile.core: collaborator protocols and data models."""

from argvfile.core.interfaces import HostEnvironmentProtocol, LoggerLikeProtocol
from argvfile.core.models import (
    STARTUP_ORDER,
    CascadedHint,
    StartupCandidate,
    StartupTier,
)

__all__ = [
    "HostEnvironmentProtocol",
    "LoggerLikeProtocol",
    "STARTUP_ORDER",
    "CascadedHint",
    "StartupCandidate",
    "StartupTier",
]
