"""Log level flags, output options and the logger configuration record."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Optional

VERSION_MAJOR = 1
VERSION_MINOR = 8
BUILD_NUMBER = 37

COLOR_NORMAL = "\x1b[0m"
COLOR_RED = "\x1b[31m"
COLOR_GREEN = "\x1b[32m"
COLOR_YELLOW = "\x1b[33m"
COLOR_BLUE = "\x1b[34m"
COLOR_MAGENTA = "\x1b[35m"
COLOR_CYAN = "\x1b[36m"
COLOR_WHITE = "\x1b[37m"
COLOR_RESET = "\x1b[0m"

MESSAGE_MAX = 8196
VERSION_MAX = 128
PATH_MAX = 2048
INFO_MAX = 512
NAME_MAX = 256
DATE_MAX = 64
TAG_MAX = 32
COLOR_MAX = 16

FLAGS_ALL = 255

NAME_DEFAULT = "slog"
NEWLINE = "\n"
INDENT = "       "
SPACE = " "
EMPTY = ""


class Flag(enum.IntFlag):
    """Log level flags; several may be combined into an allowed-levels mask."""

    NOTAG = 1 << 0
    NOTE = 1 << 1
    INFO = 1 << 2
    WARN = 1 << 3
    DEBUG = 1 << 4
    TRACE = 1 << 5
    ERROR = 1 << 6
    FATAL = 1 << 7


class Coloring(enum.IntEnum):
    """How much of each line is coloured."""

    DISABLE = 0
    TAG = 1
    FULL = 2


class DateControl(enum.IntEnum):
    """How much of the timestamp is shown in front of each line."""

    DISABLE = 0
    TIME_ONLY = 1
    DATE_FULL = 2


@dataclass(frozen=True)
class LogDate:
    """A local timestamp broken into fields, with milliseconds."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millis: int


LogCallback = Callable[[str, int, Flag, Any], int]


@dataclass
class LogConfig:
    """Settings of a logger; the defaults are those a fresh logger starts with."""

    date_control: DateControl = DateControl.TIME_ONLY
    color_format: Coloring = Coloring.TAG
    callback: Optional[LogCallback] = None
    callback_context: Any = None
    keep_open: bool = False
    trace_tid: bool = False
    to_screen: bool = True
    use_heap: bool = False
    to_file: bool = False
    indent: bool = False
    rotate: bool = True
    flush: bool = False
    flags: int = FLAGS_ALL
    separator: str = SPACE
    file_name: str = NAME_DEFAULT
    file_path: str = "."