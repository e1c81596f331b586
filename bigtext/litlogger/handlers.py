import sys
from pathlib import Path

from .levels import LogLevel

RESET = "\033[0m"
LEVEL_COLORS = {
    LogLevel.TRACE: "\033[90m",
    LogLevel.DEBUG: "\033[36m",
    LogLevel.INFO: "\033[32m",
    LogLevel.WARNING: "\033[33m",
    LogLevel.ERROR: "\033[31m",
    LogLevel.CRITICAL: "\033[41m\033[97m",
}


class Handler:
    def __init__(self, level: LogLevel = LogLevel.DEBUG):
        self.level = level

    def emit(self, message: str, level: LogLevel):
        raise NotImplementedError


class ConsoleHandler(Handler):
    """Writes records to a text stream, stderr by default.

    Colors are only applied when the stream is a terminal.
    """

    def __init__(self, stream=None, level: LogLevel = LogLevel.DEBUG, color: bool = None):
        super().__init__(level)
        self._stream = stream
        self.color = color

    @property
    def stream(self):
        # resolved lazily so redirected/captured stderr is honoured
        return self._stream if self._stream is not None else sys.stderr

    def _use_color(self) -> bool:
        if self.color is not None:
            return self.color
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def emit(self, message: str, level: LogLevel):
        if self._use_color():
            message = f"{LEVEL_COLORS.get(level, '')}{message}{RESET}"
        self.stream.write(message + "\n")
        self.stream.flush()


class FileHandler(Handler):
    def __init__(self, path: str, level: LogLevel = LogLevel.DEBUG, max_bytes: int = 0, backups: int = 0):
        super().__init__(level)
        self.path = Path(path)
        self.max_bytes = max_bytes
        self.backups = backups
        self._open()

    def _open(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.path, "a", encoding="utf-8")

    def _rotate(self):
        self._file.close()
        if self.backups <= 0:
            self.path.unlink(missing_ok=True)
            self._open()
            return
        for i in range(self.backups, 0, -1):
            src = self.path if i == 1 else self.path.with_suffix(f".{i - 1}")
            dst = self.path.with_suffix(f".{i}")
            if src.exists():
                if dst.exists():
                    dst.unlink()
                src.rename(dst)
        self._open()

    def emit(self, message: str, level: LogLevel):
        if level < self.level:
            return
        self._file.write(message + "\n")
        self._file.flush()
        if self.max_bytes and self._file.tell() >= self.max_bytes:
            self._rotate()

    def close(self):
        self._file.close()
