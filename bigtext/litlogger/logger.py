import os
import sys
import threading
import traceback
from datetime import datetime
from typing import List, Optional

from .levels import LogLevel
from .formats import LogFormat
from .handlers import Handler, ConsoleHandler


class Logger:
    def __init__(
        self,
        name: str = "bigtext",
        level: LogLevel = LogLevel.INFO,
        handlers: Optional[List[Handler]] = None,
        fmt: str = LogFormat.DEFAULT,
        include_context: bool = False,
    ):
        self.name = name
        self.level = level
        self.format = fmt
        self.include_context = include_context
        self.handlers = handlers or [ConsoleHandler()]

    def _format(self, level: LogLevel, message: str) -> str:
        now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        fields = dict(time=now, level=level.name, name=self.name, message=message)
        if not self.include_context:
            return self.format.format(**fields)
        thread_name = threading.current_thread().name
        try:
            return self.format.format(thread=thread_name, process=os.getpid(), **fields)
        except KeyError:
            # format has no thread/process placeholders
            return f"{self.format.format(**fields)} | Thread: {thread_name} | Process: {os.getpid()}"

    def set_format(self, fmt: str, include_context: bool = False):
        """Dynamically change the log format and context inclusion."""
        self.format = fmt
        self.include_context = include_context

    def set_level(self, level: LogLevel):
        self.level = level

    def _should_log(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, message: str):
        if not self._should_log(level):
            return
        record = self._format(level, message)
        for h in self.handlers:
            if level >= h.level:
                h.emit(record, level)

    def trace(self, message: str):
        self.log(LogLevel.TRACE, message)

    def debug(self, message: str):
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str):
        self.log(LogLevel.INFO, message)

    def warning(self, message: str):
        self.log(LogLevel.WARNING, message)

    def error(self, message: str):
        self.log(LogLevel.ERROR, message)

    def critical(self, message: str):
        self.log(LogLevel.CRITICAL, message)

    def exception(self, message: str):
        exc = sys.exc_info()
        formatted = f"{message}\n" + "".join(traceback.format_exception(*exc))
        self.error(formatted)
