from .fs import HostEnvironmentProtocol
from .logging import LoggerLikeProtocol

__all__ = [
    'HostEnvironmentProtocol',
    'LoggerLikeProtocol',
]
