from enum import Enum


class Command(Enum):
    RECORD = "record"
    STOP = "stop"

    @property
    def progress_message(self) -> str:
        return _PROGRESS_MESSAGES[self]

    @property
    def done_message(self) -> str:
        return _DONE_MESSAGES[self]

    @classmethod
    def from_name(cls, name: str) -> "Command":
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown command '{name}'. Choose from: {valid}") from None


_PROGRESS_MESSAGES = {
    Command.RECORD: "Starting recording...",
    Command.STOP: "Stopping recording...",
}

_DONE_MESSAGES = {
    Command.RECORD: "Recording",
    Command.STOP: "Stopped recording",
}
