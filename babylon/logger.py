"""A small thread-safe logger writing to a console stream and a log file."""

from __future__ import annotations

import enum
import inspect
import sys
import threading
import time
from typing import IO

MAX_LOG_MESSAGE_SIZE = 1024
MAX_TIME_STRING_SIZE = 64
MAX_FULL_LOG_LINE_SIZE = MAX_TIME_STRING_SIZE + 64 + MAX_LOG_MESSAGE_SIZE

DEFAULT_FORMAT = "%s - [%s:%s]: %s"


class LoggerLevel(enum.IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


DEFAULT_LEVEL = LoggerLevel.INFO


def level_name(level: int) -> str:
    """Return the display name of a level, or ``UNKNOWN``."""
    try:
        return LoggerLevel(level).name
    except ValueError:
        return "UNKNOWN"


def _valid_level(level: int) -> LoggerLevel | None:
    try:
        return LoggerLevel(level)
    except ValueError:
        return None


def _caller_file() -> str:
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        return caller.f_code.co_filename if caller else "<unknown>"
    finally:
        del frame


class Logger:
    """Logger configured lazily on first use, defaulting to standard output."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._console: IO[str] | None = None
        self._logfile: IO[str] | None = None
        self._level = DEFAULT_LEVEL
        self._format: str | None = None
        self._initialized = False

    @property
    def level(self) -> LoggerLevel:
        return self._level

    @property
    def format(self) -> str | None:
        return self._format

    @property
    def console(self) -> IO[str] | None:
        return self._console

    def _lazy_init(self) -> None:
        with self._lock:
            if self._initialized:
                return
            self._level = DEFAULT_LEVEL
            self._format = DEFAULT_FORMAT
            self._console = sys.stdout
            self._logfile = None
            self._initialized = True
            sys.stdout.write(
                "LOGGER INFO: Logger core lazily initialized (default to stdout).\n"
            )

    def _info_stream(self) -> IO[str]:
        return self._console if self._console is not None else sys.stderr

    def _close_logfile(self) -> None:
        if self._logfile is not None and self._logfile not in (sys.stdout, sys.stderr):
            self._logfile.close()
        self._logfile = None

    def init(
        self,
        stream: IO[str] | None = None,
        filename: str | None = None,
        level: int = DEFAULT_LEVEL,
        fmt: str | None = None,
    ) -> None:
        """Configure console stream, log file, level and line format."""
        self._lazy_init()
        with self._lock:
            if self._initialized and self._console is not None:
                self._console.write("LOGGER INFO: Logger re-configuring with new settings.\n")
            else:
                sys.stderr.write(
                    "LOGGER WARNING: Logger_Init called in an unexpected state. "
                    "Proceeding with configuration.\n"
                )

            valid = _valid_level(level)
            if valid is None:
                sys.stderr.write(
                    f"LOGGER ERROR: Invalid log level provided: {level}. Reverting to default.\n"
                )
                self._level = DEFAULT_LEVEL
            else:
                self._level = valid

            if stream is not None and (stream is sys.stdout or stream is sys.stderr):
                self._console = stream
            else:
                self._console = sys.stdout
                if stream is not None:
                    sys.stderr.write(
                        "LOGGER WARNING: Invalid console stream provided. Defaulting to stdout.\n"
                    )

            self._format = fmt if fmt is not None else DEFAULT_FORMAT

            self._close_logfile()
            if filename is not None:
                try:
                    self._logfile = open(filename, "a", encoding="utf-8")
                except OSError:
                    sys.stderr.write(
                        f"LOGGER ERROR: Failed to open log file: {filename}. "
                        "File logging is disabled.\n"
                    )
                else:
                    self._console.write(f"LOGGER INFO: Log file opened: {filename}\n")

    def set_level(self, level: int) -> None:
        """Change the minimum level; an invalid level leaves it unchanged."""
        self._lazy_init()
        with self._lock:
            valid = _valid_level(level)
            if valid is None:
                sys.stderr.write(
                    f"LOGGER ERROR: Invalid log level provided: {level}. Level not changed.\n"
                )
                return
            self._info_stream().write(
                f"LOGGER INFO: Log level set from {level_name(self._level)} "
                f"to {level_name(valid)}\n"
            )
            self._level = valid

    def set_format(self, fmt: str | None) -> None:
        """Set the line format; ``None`` restores the default."""
        self._lazy_init()
        with self._lock:
            self._format = fmt if fmt is not None else DEFAULT_FORMAT
            self._info_stream().write(f"LOGGER INFO: Log format set to: {self._format}\n")

    def destroy(self) -> None:
        """Close the log file and forget all configuration."""
        with self._lock:
            if not self._initialized:
                return
            if self._logfile is not None and self._logfile not in (sys.stdout, sys.stderr):
                self._logfile.write("LOGGER INFO: Logger shutting down file log...\n")
                self._logfile.flush()
            self._close_logfile()
            self._console = None
            self._format = None
            self._initialized = False

    def is_fully_initialized(self) -> bool:
        """True when configured with both a console stream and a log file."""
        return self._initialized and self._console is not None and self._logfile is not None

    def log(self, level: int, file: str, message: str, *args: object) -> None:
        """Format ``message % args`` into a line and write it to every output."""
        self._lazy_init()
        if level < self._level:
            return
        with self._lock:
            if not self._initialized or (self._console is None and self._logfile is None):
                sys.stderr.write(
                    "LOGGER ERROR: Logger not ready to log (no active output streams).\n"
                )
                return

            user_message = message % args if args else message
            time_str = time.strftime("%H:%M:%S", time.localtime())
            line = (self._format or DEFAULT_FORMAT) % (
                time_str,
                level_name(level),
                file,
                user_message,
            )
            if len(line) >= MAX_FULL_LOG_LINE_SIZE:
                sys.stderr.write(
                    "LOGGER WARNING: Log line truncated. Increase MAX_FULL_LOG_LINE_SIZE.\n"
                )
                line = line[: MAX_FULL_LOG_LINE_SIZE - 1]

            for out in (self._console, self._logfile):
                if out is not None:
                    out.write(line)
                    out.flush()

    def debug(self, message: str, *args: object) -> None:
        self.log(LoggerLevel.DEBUG, _caller_file(), message, *args)

    def info(self, message: str, *args: object) -> None:
        self.log(LoggerLevel.INFO, _caller_file(), message, *args)

    def warn(self, message: str, *args: object) -> None:
        self.log(LoggerLevel.WARN, _caller_file(), message, *args)

    def error(self, message: str, *args: object) -> None:
        self.log(LoggerLevel.ERROR, _caller_file(), message, *args)


_default_logger = Logger()


def get_logger() -> Logger:
    """Return the process-wide logger."""
    return _default_logger