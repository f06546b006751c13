from enum import Enum, auto


class RunnerState(Enum):
    IDLE = auto()
    ATTEMPTING = auto()
    SUCCEEDED = auto()
    TIMED_OUT = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (RunnerState.SUCCEEDED, RunnerState.TIMED_OUT)


VALID_TRANSITIONS: dict[RunnerState, set[RunnerState]] = {
    RunnerState.IDLE: {RunnerState.ATTEMPTING},
    RunnerState.ATTEMPTING: {RunnerState.ATTEMPTING, RunnerState.SUCCEEDED, RunnerState.TIMED_OUT},
    RunnerState.SUCCEEDED: set(),
    RunnerState.TIMED_OUT: set(),
}


class InvalidTransitionError(Exception):
    pass


def validate_transition(current: RunnerState, target: RunnerState) -> None:
    if target not in VALID_TRANSITIONS.get(current, set()):
        raise InvalidTransitionError(f"Cannot transition from {current.name} to {target.name}")
