from internal.logging import LogLevel, StructuredLogger, AsyncFileLogger, get_logger
from core.errors import BaseRaceError, ArenaError, ConfigError

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "AsyncFileLogger",
    "get_logger",
    "BaseRaceError",
    "ArenaError",
    "ConfigError",
]
