"""A small leveled logger writing to the screen, to daily files and to a callback."""

from __future__ import annotations

import contextlib
import dataclasses
import datetime
import os
import sys
import threading
from typing import IO, Any, ContextManager, Optional

from simlog.levels import (
    BUILD_NUMBER,
    COLOR_BLUE,
    COLOR_CYAN,
    COLOR_GREEN,
    COLOR_MAGENTA,
    COLOR_RED,
    COLOR_RESET,
    COLOR_YELLOW,
    EMPTY,
    FLAGS_ALL,
    INDENT,
    INFO_MAX,
    MESSAGE_MAX,
    NAME_DEFAULT,
    NAME_MAX,
    NEWLINE,
    SPACE,
    TAG_MAX,
    VERSION_MAJOR,
    VERSION_MINOR,
    Coloring,
    DateControl,
    Flag,
    LogCallback,
    LogConfig,
    LogDate,
)

_BUILD_DATE = datetime.date.today()

_TAGS = {
    Flag.NOTE: "note",
    Flag.INFO: "info",
    Flag.WARN: "warn",
    Flag.DEBUG: "debug",
    Flag.ERROR: "error",
    Flag.TRACE: "trace",
    Flag.FATAL: "fatal",
}

_COLORS = {
    Flag.INFO: COLOR_GREEN,
    Flag.WARN: COLOR_YELLOW,
    Flag.DEBUG: COLOR_BLUE,
    Flag.ERROR: COLOR_RED,
    Flag.TRACE: COLOR_CYAN,
    Flag.FATAL: COLOR_MAGENTA,
}


def current_millis() -> int:
    """Return the millisecond part of the current wall-clock time."""
    return datetime.datetime.now().microsecond // 1000


def current_date() -> LogDate:
    """Return the current local time broken into fields."""
    now = datetime.datetime.now()
    return LogDate(
        year=now.year,
        month=now.month,
        day=now.day,
        hour=now.hour,
        minute=now.minute,
        second=now.second,
        millis=now.microsecond // 1000,
    )


def version(short: bool = True) -> str:
    """Return the logger version, short ("1.8.37") or long with the build date."""
    if short:
        return f"{VERSION_MAJOR}.{VERSION_MINOR}.{BUILD_NUMBER}"
    built = f"{_BUILD_DATE:%b} {_BUILD_DATE.day:2d} {_BUILD_DATE.year}"
    return f"{VERSION_MAJOR}.{VERSION_MINOR} build {BUILD_NUMBER} ({built})"


def _flags_check(mask: int, flag: int) -> bool:
    return (mask & flag) == flag


def _zeroed_config() -> LogConfig:
    return LogConfig(
        date_control=DateControl.DISABLE,
        color_format=Coloring.DISABLE,
        callback=None,
        callback_context=None,
        keep_open=False,
        trace_tid=False,
        to_screen=False,
        use_heap=False,
        to_file=False,
        indent=False,
        rotate=False,
        flush=False,
        flags=0,
        separator=EMPTY,
        file_name=EMPTY,
        file_path=EMPTY,
    )


class Logger:
    """Leveled logger; each line carries an optional time, thread id and tag."""

    def __init__(
        self,
        name: Optional[str] = None,
        flags: int = FLAGS_ALL,
        thread_safe: bool = True,
    ) -> None:
        file_name = name if name is not None else NAME_DEFAULT
        self._config = LogConfig(flags=int(flags), file_name=file_name[: NAME_MAX - 1])
        self._handle: Optional[IO[str]] = None
        self._current_day = 0
        self._thread_safe = thread_safe
        self._lock: ContextManager[Any] = (
            threading.RLock() if thread_safe else contextlib.nullcontext()
        )

    # -- line building -------------------------------------------------

    def _indent_for(self, flag: Flag) -> str:
        if not self._config.indent:
            return EMPTY
        if flag == Flag.NOTAG:
            return INDENT
        if flag in (Flag.NOTE, Flag.INFO, Flag.WARN):
            return SPACE
        return EMPTY

    def _create_tag(self, flag: Flag, color: str) -> str:
        indent = self._indent_for(flag)
        tag = _TAGS.get(flag)
        if tag is None:
            text = indent
        elif self._config.color_format != Coloring.TAG:
            text = f"<{tag}>{indent}"
        else:
            text = f"{color}<{tag}>{COLOR_RESET}{indent}"
        return text[: TAG_MAX - 1]

    def _create_info(self, flag: Flag, date: LogDate) -> str:
        cfg = self._config
        if cfg.date_control == DateControl.TIME_ONLY:
            stamp = f"{date.hour:02d}:{date.minute:02d}:{date.second:02d}.{date.millis:03d} "
        elif cfg.date_control == DateControl.DATE_FULL:
            stamp = (
                f"{date.year:04d}.{date.month:02d}.{date.day:02d}-"
                f"{date.hour:02d}:{date.minute:02d}:{date.second:02d}.{date.millis:03d} "
            )
        else:
            stamp = EMPTY
        full_color = cfg.color_format == Coloring.FULL
        color_code = _COLORS.get(flag, EMPTY)
        color = color_code if full_color else EMPTY
        tid = f"({threading.get_native_id()}) " if cfg.trace_tid else EMPTY
        tag = self._create_tag(flag, color_code)
        return f"{color}{tid}{stamp}{tag}"[: INFO_MAX - 1]

    # -- file handling -------------------------------------------------

    def _close_file(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def _open_file(self, date: LogDate) -> bool:
        self._close_file()
        cfg = self._config
        path = (
            f"{cfg.file_path}/{cfg.file_name}-"
            f"{date.year:04d}-{date.month:02d}-{date.day:02d}.log"
        )
        try:
            self._handle = open(path, "a", encoding="utf-8")
        except OSError as exc:
            sys.stderr.write(f"[ERROR] Failed to open file: {path} ({exc.strerror})\n")
            return False
        self._current_day = date.day
        return True

    def _emit(self, flag: Flag, date: LogDate, info: str, message: str, newline: bool) -> None:
        cfg = self._config
        separator = cfg.separator if info else EMPTY
        end = NEWLINE if newline else EMPTY
        reset = COLOR_RESET if cfg.color_format == Coloring.FULL else EMPTY
        line = f"{info}{separator}{message}{reset}{end}"

        verdict = 1
        if cfg.callback is not None:
            verdict = cfg.callback(line, len(line), flag, cfg.callback_context)

        if cfg.to_screen and verdict > 0:
            sys.stdout.write(line)
            if cfg.flush:
                sys.stdout.flush()

        if not cfg.to_file or verdict < 0:
            return
        if self._current_day != date.day and cfg.rotate:
            self._close_file()
        if self._handle is None and not self._open_file(date):
            return
        assert self._handle is not None
        self._handle.write(line)
        if cfg.flush:
            self._handle.flush()
        if not cfg.keep_open:
            self._close_file()

    # -- public API ----------------------------------------------------

    def display(self, flag: Flag, message: str, newline: bool = True) -> None:
        """Write one message at the given level, if that level is enabled."""
        with self._lock:
            cfg = self._config
            if not _flags_check(cfg.flags, flag) or not (cfg.to_screen or cfg.to_file):
                return
            flag = Flag(flag)
            date = current_date()
            text = message if message is not None else EMPTY
            if not cfg.use_heap:
                text = text[: MESSAGE_MAX - 1]
            info = self._create_info(flag, date)
            self._emit(flag, date, info, text, newline)

    @staticmethod
    def _location() -> str:
        frame = sys._getframe(2)
        return f"[{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}] "

    def log(self, message: str) -> None:
        """Write an untagged message."""
        self.display(Flag.NOTAG, message)

    def note(self, message: str) -> None:
        """Write a note."""
        self.display(Flag.NOTE, message)

    def info(self, message: str) -> None:
        """Write an informational message."""
        self.display(Flag.INFO, message)

    def warn(self, message: str) -> None:
        """Write a warning."""
        self.display(Flag.WARN, message)

    def debug(self, message: str) -> None:
        """Write a debug message."""
        self.display(Flag.DEBUG, message)

    def error(self, message: str) -> None:
        """Write an error message."""
        self.display(Flag.ERROR, message)

    def trace(self, message: str) -> None:
        """Write a trace message prefixed with the caller's file and line."""
        self.display(Flag.TRACE, self._location() + message)

    def fatal(self, message: str) -> None:
        """Write a fatal message prefixed with the caller's file and line."""
        self.display(Flag.FATAL, self._location() + message)

    def current_config(self) -> LogConfig:
        """Return a copy of the current settings."""
        with self._lock:
            return dataclasses.replace(self._config)

    def apply_config(self, config: LogConfig) -> None:
        """Replace the settings, closing the log file if its target changed."""
        with self._lock:
            old = self._config
            if (
                not config.to_file
                or old.file_path != config.file_path
                or old.file_name != config.file_name
            ):
                self._close_file()
            self._config = dataclasses.replace(config)

    def enable(self, flag: int) -> None:
        """Allow messages of the given level(s)."""
        with self._lock:
            if flag == FLAGS_ALL:
                self._config.flags = FLAGS_ALL
            elif not _flags_check(self._config.flags, flag):
                self._config.flags |= int(flag)

    def disable(self, flag: int) -> None:
        """Suppress messages of the given level(s)."""
        with self._lock:
            if flag == FLAGS_ALL:
                self._config.flags = 0
            elif _flags_check(self._config.flags, flag):
                self._config.flags &= ~int(flag)

    def separate_with(self, separator: str) -> None:
        """Set the text between the line prefix and the message; empty means a space."""
        with self._lock:
            text = separator[: NAME_MAX - 1]
            self._config.separator = text if text else SPACE

    def indent(self, enabled: bool) -> None:
        """Turn indentation after tags on or off."""
        with self._lock:
            self._config.indent = bool(enabled)

    def on_log(self, callback: Optional[LogCallback], context: Any = None) -> None:
        """Install a callback that sees every line before it is written."""
        with self._lock:
            self._config.callback = callback
            self._config.callback_context = context

    def close(self) -> None:
        """Clear all settings and close the log file."""
        with self._lock:
            self._config = _zeroed_config()
            self._close_file()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()