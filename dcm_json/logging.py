"""Global logging-settings of `dcm_json`."""

import os
import sys
from time import time


def map_loglevel(level: str) -> int:
    """Returns integer-representation of the given loglevel."""
    match level:
        case "none":
            return -1
        case "error":
            return 0
        case "info":
            return 1
        case "debug":
            return 2
        case _:
            raise ValueError(f"Unknown loglevel '{level}'.")


class Logging:
    """Global logging-settings of `dcm_json`."""

    LEVEL_NONE = -1
    LEVEL_ERROR = 0
    LEVEL_INFO = 1
    LEVEL_DEBUG = 2
    LOGLEVEL = map_loglevel(
        os.environ.get("JSON_SERIALIZATION_LOGLEVEL", "error")
    )
    LOGFILE = sys.stderr
    LOGPREFIX = os.environ.get("JSON_SERIALIZATION_LOGPREFIX", "[dcm-json]")

    @classmethod
    def print_to_log(cls, msg: str, level: int):
        """Print to log if `level` is enabled."""
        if level <= cls.LOGLEVEL:
            print(
                cls.LOGPREFIX
                + f" [{(str(time()) + '000')[:13]}] "
                + msg,
                file=cls.LOGFILE,
            )

    @classmethod
    def error(cls, msg: str):
        """Print `msg` with level 'error'."""
        cls.print_to_log("ERROR " + msg, cls.LEVEL_ERROR)

    @classmethod
    def info(cls, msg: str):
        """Print `msg` with level 'info'."""
        cls.print_to_log("INFO " + msg, cls.LEVEL_INFO)

    @classmethod
    def debug(cls, msg: str):
        """Print `msg` with level 'debug'."""
        cls.print_to_log("DEBUG " + msg, cls.LEVEL_DEBUG)
