import asyncio
import logging

import pytest

OBSWS_ENV_VARS = (
    "OBSWS_ADDR",
    "OBSWS_PORT",
    "OBSWS_PASSWORD",
    "OBSWS_RETRY_WINDOW_SECONDS",
    "OBSWS_POLL_INTERVAL_SECONDS",
    "OBSWS_CALL_TIMEOUT_SECONDS",
    "OBSWS_CONNECT_TIMEOUT_SECONDS",
    "OBSWS_LOG_LEVEL",
)


class FakeClock:
    """Monotonic clock whose sleep advances time instantly."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeRecordingControl:
    """In-memory stand-in for an OBS recording session.

    ``failures`` makes the first N calls fail; ``always_fail`` fails every
    call. With ``reject_redundant`` the fake behaves like OBS and refuses to
    start an active recording or stop an inactive one.
    """

    def __init__(
        self,
        failures: int = 0,
        always_fail: bool = False,
        error: Exception | None = None,
        clock: FakeClock | None = None,
        call_duration: float = 0.0,
        hang: bool = False,
        recording: bool = False,
        reject_redundant: bool = False,
    ) -> None:
        self._failures = failures
        self._always_fail = always_fail
        self._error = error or RuntimeError("OBS is not ready")
        self._clock = clock
        self._call_duration = call_duration
        self._hang = hang
        self._reject_redundant = reject_redundant
        self.recording = recording
        self.calls: list[str] = []
        self.closed = False

    async def start_recording(self) -> None:
        await self._call("start_recording")
        if self._reject_redundant and self.recording:
            raise RuntimeError("OutputRunning")
        self.recording = True

    async def stop_recording(self) -> None:
        await self._call("stop_recording")
        if self._reject_redundant and not self.recording:
            raise RuntimeError("OutputNotRunning")
        self.recording = False

    async def close(self) -> None:
        self.closed = True

    async def _call(self, name: str) -> None:
        self.calls.append(name)
        if self._clock is not None and self._call_duration:
            self._clock.advance(self._call_duration)
        if self._hang:
            await asyncio.Event().wait()
        if self._always_fail or len(self.calls) <= self._failures:
            raise self._error


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_control():
    return FakeRecordingControl()


@pytest.fixture
def clean_obsws_env(monkeypatch):
    # setenv first so monkeypatch remembers the original value and undoes
    # anything python-dotenv writes during the test.
    for name in OBSWS_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
