import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from domain.commands import Command
from domain.retry import RetryPolicy
from domain.state import InvalidTransitionError, RunnerState, validate_transition
from ports.recording import RecordingControlPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOutcome:
    command: Command
    state: RunnerState
    attempts: int
    elapsed: float

    @property
    def succeeded(self) -> bool:
        return self.state is RunnerState.SUCCEEDED


class CommandRunner:
    """Issues one recording command, polling until it succeeds or the window closes.

    A runner is single-use: once it reaches a terminal state, calling ``run``
    again raises ``InvalidTransitionError``.
    """

    def __init__(
        self,
        control: RecordingControlPort,
        policy: RetryPolicy | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._control = control
        self._policy = policy or RetryPolicy()
        self._clock = clock
        self._sleep = sleep
        self._state = RunnerState.IDLE

    @property
    def state(self) -> RunnerState:
        return self._state

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    async def run(self, command: Command) -> RunOutcome:
        if self._state.is_terminal:
            raise InvalidTransitionError(f"Runner already finished with {self._state.name}")
        self._transition(RunnerState.ATTEMPTING)
        logger.info(command.progress_message)

        started = self._clock()
        attempts = 0

        while not self._policy.window_exhausted(self._clock() - started):
            await self._sleep(self._policy.poll_interval)
            attempts += 1
            try:
                await self._attempt(command)
            except Exception as exc:
                if not self._policy.should_retry(exc):
                    raise
                logger.debug("Attempt %d failed, retrying", attempts)
                self._transition(RunnerState.ATTEMPTING)
                continue

            self._transition(RunnerState.SUCCEEDED)
            logger.info(command.done_message)
            return self._outcome(command, attempts, started)

        self._transition(RunnerState.TIMED_OUT)
        outcome = self._outcome(command, attempts, started)
        logger.error(
            "Failed to issue command '%s' after %d attempts in %.1fs",
            command.value,
            outcome.attempts,
            outcome.elapsed,
        )
        return outcome

    async def _attempt(self, command: Command) -> None:
        if command is Command.RECORD:
            call = self._control.start_recording
        else:
            call = self._control.stop_recording
        await asyncio.wait_for(call(), timeout=self._policy.call_timeout)

    def _transition(self, target: RunnerState) -> None:
        validate_transition(self._state, target)
        if target is not self._state:
            logger.debug("State: %s -> %s", self._state.name, target.name)
        self._state = target

    def _outcome(self, command: Command, attempts: int, started: float) -> RunOutcome:
        return RunOutcome(
            command=command,
            state=self._state,
            attempts=attempts,
            elapsed=self._clock() - started,
        )
