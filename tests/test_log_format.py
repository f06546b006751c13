import logging
import sys

from log_format import BOLD, CYAN, GREEN, RED, RESET, YELLOW, ColoredFormatter


def make_record(msg: str, level: int = logging.INFO, name: str = "domain.runner", exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, exc_info)


class TestColoredFormatter:
    def test_plain_output_without_color(self):
        formatter = ColoredFormatter(use_color=False)
        line = formatter.format(make_record("Recording"))
        assert "\033[" not in line
        assert "INFO" in line
        assert "runner" in line
        assert line.endswith("Recording")

    def test_success_status_highlighted(self):
        line = ColoredFormatter().format(make_record("Stopped recording"))
        assert f"{BOLD}{GREEN}Stopped recording{RESET}" in line

    def test_progress_status_highlighted(self):
        line = ColoredFormatter().format(make_record("Starting recording..."))
        assert f"{CYAN}Starting recording...{RESET}" in line

    def test_state_transition_highlighted(self):
        line = ColoredFormatter().format(make_record("State: IDLE -> ATTEMPTING", level=logging.DEBUG))
        assert f"{BOLD}{CYAN}State: IDLE -> ATTEMPTING{RESET}" in line

    def test_error_colored_red(self):
        line = ColoredFormatter().format(make_record("Failed to issue command 'record'", level=logging.ERROR))
        assert f"{RED}Failed to issue command 'record'{RESET}" in line

    def test_warning_colored_yellow(self):
        line = ColoredFormatter().format(make_record("Interrupted", level=logging.WARNING))
        assert f"{YELLOW}Interrupted{RESET}" in line

    def test_unstyled_info_left_alone(self):
        line = ColoredFormatter().format(make_record("something else"))
        assert line.endswith(" something else")

    def test_exception_included(self):
        try:
            raise ValueError("bad value")
        except ValueError:
            record = make_record("Uncaught exception", level=logging.CRITICAL, exc_info=sys.exc_info())

        line = ColoredFormatter(use_color=False).format(record)
        assert "Traceback" in line
        assert "ValueError: bad value" in line
