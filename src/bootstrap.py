"""One-time process setup: console logging and the uncaught-exception hook.

Runs before any command logic and has no further interaction with it.
"""

import logging
import sys

from log_format import ColoredFormatter

LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

NOISY_LOGGERS = ("websocket", "obsws_python")

logger = logging.getLogger(__name__)


def resolve_log_level(level_name: str, verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    level = LOG_LEVELS.get(level_name.lower())
    if level is None:
        valid = ", ".join(sorted(LOG_LEVELS))
        raise ValueError(f"Invalid log level '{level_name}'. Choose from: {valid}")
    return level


def configure_logging(level: int, stream=None) -> None:
    stream = stream or sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColoredFormatter(use_color=stream.isatty()))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()
    root.addHandler(handler)
    root.setLevel(level)

    if level <= logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.INFO)


def install_exception_hook() -> None:
    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception


def bootstrap(level_name: str = "info", verbose: bool = False, stream=None) -> None:
    configure_logging(resolve_log_level(level_name, verbose), stream=stream)
    install_exception_hook()
