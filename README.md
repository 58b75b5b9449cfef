# simlog

A small logging library. Bit flags select which log levels are written. Tags
can be colored with ANSI codes. Each line can carry a timestamp and a thread
id. Lines go to the screen, to a callback, and to daily log files. The package
also has compact byte records for the shift-light, haptic and wind peripherals
of a sim-racing rig.

## Installing

```
pip install .
```

## Logging

```python
from simlog.levels import FLAGS_ALL, DateControl, Flag
from simlog.slog import Logger

with Logger("myapp", FLAGS_ALL, thread_safe=True) as log:
    log.info("engine started")
    log.warn("oil temperature high")
    log.error("lost connection to wheel base")
```

Every level is one bit in `Flag`: `NOTAG`, `NOTE`, `INFO`, `WARN`, `DEBUG`,
`TRACE`, `ERROR` and `FATAL`. The `flags` argument is a mask of these bits,
and `simlog.levels.FLAGS_ALL` (255) allows every level.

- `log.enable(flag)` allows more levels.
- `log.disable(flag)` suppresses levels.
- Passing `FLAGS_ALL` to either one sets or clears the whole mask.

All output goes through `Logger.display(flag, message, newline=True)`. Each
level also has a shortcut: `log`, `note`, `info`, `warn`, `debug`, `error`,
`trace` and `fatal`. The `log` shortcut writes a line with no tag. `trace`
and `fatal` put `[file:line] ` of the caller in front of the message.

A line is made of these parts, in this order:

1. an optional color,
2. the thread id,
3. the time,
4. the tag, such as `<info>`,
5. the separator,
6. the message.

By default, a line shows the time (`HH:MM:SS.mmm`) and a colored tag, and a
single space separates them from the message.

When the logger is used as a context manager, leaving the block calls
`log.close()`. `close()` clears every setting, which disables all output, and
closes any open log file.

### Configuration

`log.current_config()` returns a copy of the settings as a `LogConfig`
dataclass. Change the fields you need and pass the copy to
`log.apply_config(config)`:

```python
config = log.current_config()
config.date_control = DateControl.DATE_FULL
config.to_file = True
config.file_path = "/tmp"
log.apply_config(config)
```

The `LogConfig` fields are:

- `date_control`: one of `DateControl.DISABLE`, `TIME_ONLY` or `DATE_FULL`.
- `color_format`: one of `Coloring.DISABLE`, `TAG` or `FULL`.
- `callback`, `callback_context`
- `keep_open`, `trace_tid`, `to_screen`, `use_heap`, `to_file`, `indent`,
  `rotate`, `flush`
- `flags`
- `separator`, `file_name`, `file_path`

With `to_file` on, lines are appended to
`<file_path>/<file_name>-YYYY-MM-DD.log`.

- With `rotate` on, the logger starts a new file when the day changes.
- With `keep_open` off, the file is closed after every line.
- Unless `use_heap` is set, messages are cut to 8195 characters.

Some settings have their own methods:

- `log.separate_with(" | ")` sets the text between the prefix and the message.
  An empty string resets it to a single space.
- `log.indent(True)` pads after tags so that messages line up.
- `log.on_log(callback, context)` registers a callback. It is called as
  `callback(line, length, flag, context)` for every line. The return value
  decides where else the line goes:
  - positive: the line is written to the screen and to the file.
  - zero: the line is written to the file only, not to the screen.
  - negative: the line is written to neither.

`simlog.slog.version(True)` returns `"1.8.37"`. `version(False)` returns the
long form with a build date. `current_date()` returns the local time as a
`LogDate`, and `current_millis()` returns the millisecond part of the clock.

## Peripheral records

`simlog.devicedata` has three frozen dataclasses:

- `ShiftLightsData(litleds)`
- `SimHapticData(motor1, effect1, ..., motor4, effect4)`
- `SimWindData(velocity, fanpower)`

Each field is an unsigned byte. A value outside 0..255 raises `ValueError`.
`to_bytes()` packs a record. `from_bytes(data)` unpacks one and needs exactly
the record's size in bytes:

```python
from simlog.devicedata import SimWindData

packet = SimWindData(velocity=120, fanpower=200).to_bytes()
assert SimWindData.from_bytes(packet).fanpower == 200
```

## What it does not do

There is no command-line tool. The peripheral records are byte layouts only:
the package does not open serial ports or talk to any device.

## Tests

```
pip install .[test]
pytest
```