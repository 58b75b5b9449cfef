import re
import threading

import pytest

from simlog.levels import (
    COLOR_GREEN,
    COLOR_RESET,
    FLAGS_ALL,
    MESSAGE_MAX,
    Coloring,
    DateControl,
    Flag,
)
from simlog.slog import Logger, current_date, current_millis, version


def plain_logger(**changes):
    logger = Logger("test", FLAGS_ALL, True)
    cfg = logger.current_config()
    cfg.date_control = DateControl.DISABLE
    cfg.color_format = Coloring.DISABLE
    for key, value in changes.items():
        setattr(cfg, key, value)
    logger.apply_config(cfg)
    return logger


def test_version_short():
    assert version(True) == "1.8.37"


def test_version_long():
    assert version(False).startswith("1.8 build 37 (")
    assert version(False).endswith(")")


def test_current_millis_range():
    assert 0 <= current_millis() <= 999


def test_current_date_fields():
    d = current_date()
    assert 1 <= d.month <= 12
    assert 1 <= d.day <= 31
    assert 0 <= d.hour <= 23
    assert 0 <= d.millis <= 999


def test_default_info_line(capsys):
    logger = Logger("test", FLAGS_ALL, False)
    logger.info("hello")
    out = capsys.readouterr().out
    assert re.fullmatch(r"\d\d:\d\d:\d\d\.\d\d\d ", out[:13])
    assert out[13:] == f"{COLOR_GREEN}<info>{COLOR_RESET} hello\n"


def test_untagged_plain(capsys):
    plain_logger().log("hello")
    assert capsys.readouterr().out == "hello\n"


def test_tagged_plain(capsys):
    plain_logger().warn("careful")
    assert capsys.readouterr().out == "<warn> careful\n"


def test_no_newline(capsys):
    plain_logger().display(Flag.ERROR, "x", False)
    assert capsys.readouterr().out == "<error> x"


def test_indent(capsys):
    logger = plain_logger()
    logger.indent(True)
    logger.note("n")
    logger.debug("d")
    assert capsys.readouterr().out == "<note>  n\n<debug> d\n"


def test_full_coloring(capsys):
    plain_logger(color_format=Coloring.FULL).info("m")
    out = capsys.readouterr().out
    assert out.startswith(COLOR_GREEN)
    assert out.endswith("m" + COLOR_RESET + "\n")


def test_disable_and_enable(capsys):
    logger = plain_logger()
    logger.disable(Flag.INFO)
    logger.info("hidden")
    logger.warn("shown")
    logger.enable(Flag.INFO)
    logger.info("back")
    assert capsys.readouterr().out == "<warn> shown\n<info> back\n"


def test_disable_all_sets_zero():
    logger = plain_logger()
    logger.disable(FLAGS_ALL)
    assert logger.current_config().flags == 0
    logger.enable(FLAGS_ALL)
    assert logger.current_config().flags == FLAGS_ALL


def test_separator(capsys):
    logger = plain_logger()
    logger.separate_with(" | ")
    logger.info("a")
    logger.separate_with("")
    assert logger.current_config().separator == " "
    assert capsys.readouterr().out == "<info> | a\n"


def test_callback_receives_line_and_suppresses(capsys):
    seen = []

    def cb(line, length, flag, ctx):
        seen.append((line, length, flag, ctx))
        return 0

    logger = plain_logger()
    logger.on_log(cb, "ctx")
    logger.error("boom")
    assert capsys.readouterr().out == ""
    assert seen == [("<error> boom\n", len("<error> boom\n"), Flag.ERROR, "ctx")]


def test_file_output(tmp_path):
    logger = plain_logger(to_screen=False, to_file=True, file_path=str(tmp_path))
    logger.info("first")
    logger.info("second")
    d = current_date()
    path = tmp_path / f"test-{d.year:04d}-{d.month:02d}-{d.day:02d}.log"
    assert path.read_text() == "<info> first\n<info> second\n"


def test_negative_callback_blocks_file(tmp_path):
    logger = plain_logger(to_screen=False, to_file=True, file_path=str(tmp_path))
    logger.on_log(lambda *a: -1)
    logger.info("x")
    assert list(tmp_path.iterdir()) == []


def test_zero_callback_still_writes_file(tmp_path, capsys):
    logger = plain_logger(to_file=True, file_path=str(tmp_path))
    logger.on_log(lambda *a: 0)
    logger.info("x")
    assert capsys.readouterr().out == ""
    files = list(tmp_path.iterdir())
    assert len(files) == 1
    assert files[0].read_text() == "<info> x\n"


def test_trace_has_location(capsys):
    plain_logger().trace("t")
    out = capsys.readouterr().out
    assert out.startswith("<trace> [test_slog.py:")
    assert out.endswith("] t\n")


def test_message_truncated_without_heap():
    lines = []
    logger = plain_logger(to_screen=True)
    logger.on_log(lambda line, *a: lines.append(line) or -1)
    logger.display(Flag.NOTAG, "a" * (MESSAGE_MAX + 10), False)
    cfg = logger.current_config()
    cfg.use_heap = True
    logger.apply_config(cfg)
    logger.display(Flag.NOTAG, "a" * (MESSAGE_MAX + 10), False)
    assert len(lines[0]) == MESSAGE_MAX - 1
    assert len(lines[1]) == MESSAGE_MAX + 10


def test_config_copy_is_independent():
    logger = plain_logger()
    cfg = logger.current_config()
    cfg.flags = 0
    assert logger.current_config().flags == FLAGS_ALL


def test_close_and_context_manager(capsys):
    with plain_logger() as logger:
        logger.info("inside")
    logger.info("after")
    assert capsys.readouterr().out == "<info> inside\n"
    assert logger.current_config().flags == 0


def test_constructor_flags(capsys):
    logger = Logger(None, Flag.ERROR, False)
    cfg = logger.current_config()
    assert cfg.file_name == "slog"
    logger.info("no")
    assert capsys.readouterr().out == ""