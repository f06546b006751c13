import math
from collections.abc import Callable
from dataclasses import dataclass, field

RETRY_WINDOW_SECONDS = 2.0
POLL_INTERVAL_SECONDS = 0.1
CALL_TIMEOUT_SECONDS = 1.0


def retry_all_errors(exc: BaseException) -> bool:
    return True


@dataclass(frozen=True)
class RetryPolicy:
    """How long a command may keep being retried, and which failures qualify.

    ``max_duration`` is checked before each attempt, so a run can overshoot it
    by at most one ``poll_interval`` plus one ``call_timeout``.
    """

    max_duration: float = RETRY_WINDOW_SECONDS
    poll_interval: float = POLL_INTERVAL_SECONDS
    call_timeout: float | None = CALL_TIMEOUT_SECONDS
    is_retryable: Callable[[BaseException], bool] = field(default=retry_all_errors, compare=False)

    def __post_init__(self) -> None:
        if self.max_duration < 0:
            raise ValueError(f"max_duration must be >= 0, got {self.max_duration}")
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be > 0, got {self.poll_interval}")
        if self.call_timeout is not None and self.call_timeout <= 0:
            raise ValueError(f"call_timeout must be > 0 or None, got {self.call_timeout}")

    @property
    def expected_attempts(self) -> int:
        return math.ceil(self.max_duration / self.poll_interval)

    def should_retry(self, exc: BaseException) -> bool:
        return self.is_retryable(exc)

    def window_exhausted(self, elapsed: float) -> bool:
        return elapsed >= self.max_duration
