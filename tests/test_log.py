from datetime import datetime

import pytest

from nxdnkit import log
from nxdnkit.log import LogLevel


@pytest.fixture(autouse=True)
def _reset_log(tmp_path):
    yield
    log.finalise()
    log.initialise(str(tmp_path), "reset", 0, 2)


def test_format_line_layout():
    when = datetime(2018, 5, 17, 12, 34, 56, 789000)
    assert log.format_line(LogLevel.INFO, "hello", when) == "I: 2018-05-17 12:34:56.789 hello"


@pytest.mark.parametrize(
    "level, letter",
    [
        (LogLevel.DEBUG, "D"),
        (LogLevel.MESSAGE, "M"),
        (LogLevel.INFO, "I"),
        (LogLevel.WARNING, "W"),
        (LogLevel.ERROR, "E"),
        (LogLevel.FATAL, "F"),
    ],
)
def test_format_line_level_letters(level, letter):
    line = log.format_line(level, "x", datetime(2020, 1, 2, 3, 4, 5))
    assert line.startswith(letter + ": ")


def test_log_written_to_file(tmp_path):
    log.initialise(str(tmp_path), "NXDN", 1, 0)
    log.log(LogLevel.INFO, "hello")
    log.finalise()
    files = list(tmp_path.glob("NXDN-*.log"))
    assert len(files) == 1
    content = files[0].read_text(encoding="utf-8")
    assert content.startswith("I: ")
    assert content.endswith(" hello\n")


def test_log_displayed(tmp_path, capsys):
    log.initialise(str(tmp_path), "NXDN", 0, 1)
    log.log(LogLevel.WARNING, "shown")
    out = capsys.readouterr().out
    assert out.startswith("W: ")
    assert out.endswith(" shown\n")


def test_levels_below_threshold_are_dropped(tmp_path, capsys):
    log.initialise(str(tmp_path), "Quiet", 4, 4)
    log.log(LogLevel.INFO, "quiet")
    log.finalise()
    assert capsys.readouterr().out == ""
    files = list(tmp_path.glob("Quiet-*.log"))
    assert len(files) == 1
    assert files[0].read_text(encoding="utf-8") == ""


def test_zero_file_level_creates_no_file(tmp_path):
    log.initialise(str(tmp_path), "None", 0, 0)
    log.log(LogLevel.ERROR, "nothing")
    assert list(tmp_path.glob("None-*.log")) == []


def test_initialise_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        log.initialise(str(tmp_path / "missing"), "NXDN", 1, 0)


def test_fatal_exits(tmp_path, capsys):
    log.initialise(str(tmp_path), "F", 0, 6)
    with pytest.raises(SystemExit) as info:
        log.log(LogLevel.FATAL, "boom")
    assert info.value.code == 1
    assert capsys.readouterr().out.endswith(" boom\n")