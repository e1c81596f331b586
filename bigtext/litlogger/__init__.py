"""Lightweight logger built from scratch."""
from .levels import LogLevel
from .handlers import ConsoleHandler, FileHandler, Handler
from .logger import Logger
from .formats import LogFormat

__all__ = [
    "Logger",
    "LogLevel",
    "Handler",
    "ConsoleHandler",
    "FileHandler",
    "LogFormat",
]
