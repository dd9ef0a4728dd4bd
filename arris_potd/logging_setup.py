"""
Logging configuration for the password-of-the-day generator.

Passwords are the program's output and go to stdout; every log record goes
to stderr so that ``arris-potd -r ... > list.txt`` stays clean.
"""

import logging
import sys

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

log = logging.getLogger("arris-potd")

_FORMAT = "[%(levelname)s] %(message)s"
# Debug records also name the module, useful when tracing key/block values
_DEBUG_FORMAT = "[%(levelname)s] %(module)s: %(message)s"


def _log_level(debug: bool = False, quiet: bool = False) -> int:
    """--debug wins over --quiet; quiet leaves only errors."""
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.INFO


def _build_handler(fmt: str) -> logging.Handler:
    if _COLORLOG_AVAILABLE:
        handler = colorlog.StreamHandler(sys.stderr)
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s" + fmt.replace("%(levelname)s]", "%(levelname)s]%(reset)s"),
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "bold_red",
            },
        ))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
    return handler


def _setup_logging(debug: bool = False, quiet: bool = False) -> None:
    level = _log_level(debug, quiet)
    log.setLevel(level)
    log.handlers.clear()
    # Records stop here instead of reaching a root handler a second time
    log.propagate = False
    log.addHandler(_build_handler(_DEBUG_FORMAT if debug else _FORMAT))
