"""Test suite for logging-module."""

from io import StringIO
import re

import pytest

from dcm_json.logging import Logging, map_loglevel


@pytest.fixture(name="log")
def _log(monkeypatch):
    buffer = StringIO()
    monkeypatch.setattr(Logging, "LOGFILE", buffer)
    monkeypatch.setattr(Logging, "LOGPREFIX", "[test]")
    return buffer


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("none", Logging.LEVEL_NONE),
        ("error", Logging.LEVEL_ERROR),
        ("info", Logging.LEVEL_INFO),
        ("debug", Logging.LEVEL_DEBUG),
    ],
)
def test_map_loglevel(level, expected):
    """Test function `map_loglevel`."""
    assert map_loglevel(level) == expected


def test_map_loglevel_unknown():
    """Test function `map_loglevel` for unknown level."""
    with pytest.raises(ValueError):
        map_loglevel("verbose")


def test_print_to_log_format(log, monkeypatch):
    """Test format of method `print_to_log`."""
    monkeypatch.setattr(Logging, "LOGLEVEL", Logging.LEVEL_ERROR)
    Logging.error("Something failed.")
    assert re.fullmatch(
        r"\[test\] \[[0-9.]{13}\] ERROR Something failed\.\n", log.getvalue()
    )


@pytest.mark.parametrize(
    ("loglevel", "expected"),
    [
        (Logging.LEVEL_NONE, []),
        (Logging.LEVEL_ERROR, ["ERROR"]),
        (Logging.LEVEL_INFO, ["ERROR", "INFO"]),
        (Logging.LEVEL_DEBUG, ["ERROR", "INFO", "DEBUG"]),
    ],
)
def test_print_to_log_level(log, monkeypatch, loglevel, expected):
    """Test filtering by level of method `print_to_log`."""
    monkeypatch.setattr(Logging, "LOGLEVEL", loglevel)
    Logging.error("a")
    Logging.info("b")
    Logging.debug("c")
    assert [
        line.split(" ")[2] for line in log.getvalue().splitlines()
    ] == expected
