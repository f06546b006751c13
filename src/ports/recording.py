from typing import Protocol


class RecordingControlPort(Protocol):
    async def start_recording(self) -> None: ...
    async def stop_recording(self) -> None: ...
    async def close(self) -> None: ...
