import logging

RESET = "\033[0m"
DIM = "\033[2m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
MAGENTA = "\033[35m"

LEVEL_COLORS = {
    logging.DEBUG: DIM,
    logging.INFO: GREEN,
    logging.WARNING: YELLOW,
    logging.ERROR: RED,
    logging.CRITICAL: RED + BOLD,
}

STATUS_STYLES = (
    ("Recording", BOLD + GREEN),
    ("Stopped recording", BOLD + GREEN),
    ("Starting recording", CYAN),
    ("Stopping recording", CYAN),
    ("Connecting to OBS", MAGENTA),
)


class ColoredFormatter(logging.Formatter):
    def __init__(self, fmt: str | None = None, datefmt: str | None = "%H:%M:%S", use_color: bool = True) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        time = self.formatTime(record, self.datefmt)
        name = record.name.split(".")[-1]
        msg = record.getMessage()
        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"

        if not self._use_color:
            return f"{time} {level:<5} {name:<16} {msg}"

        color = LEVEL_COLORS.get(record.levelno, "")
        if record.levelno >= logging.WARNING:
            msg = f"{color}{msg}{RESET}"
        elif "State:" in msg and "->" in msg:
            msg = f"{BOLD}{CYAN}{msg}{RESET}"
        elif record.levelno == logging.DEBUG:
            msg = f"{DIM}{msg}{RESET}"
        else:
            msg = _style_status(msg)

        return f"{DIM}{time}{RESET} {color}{level:<5}{RESET} {DIM}{name:<16}{RESET} {msg}"


def _style_status(msg: str) -> str:
    for prefix, style in STATUS_STYLES:
        if msg.startswith(prefix):
            return f"{style}{msg}{RESET}"
    return msg
