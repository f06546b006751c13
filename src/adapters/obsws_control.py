import asyncio
import logging
import threading
from collections.abc import Callable

import obsws_python as obs

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT_SECONDS = 5.0


class ObsConnectionError(ConnectionError):
    def __init__(self, host: str, port: int, reason: str) -> None:
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Could not connect to OBS at {host}:{port}: {reason}")


class RequestInFlightError(RuntimeError):
    pass


class ControlClosedError(RuntimeError):
    pass


class ObswsRecordingControl:
    """Recording control over an authenticated obs-websocket session.

    ``ReqClient`` is blocking, so every request runs in a worker thread. A
    request that outlived its caller's timeout keeps the socket busy; any
    request made meanwhile fails at once instead of queueing behind it, so
    nothing reaches OBS after the caller has moved on.
    """

    def __init__(self, client: obs.ReqClient) -> None:
        self._client = client
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    async def start_recording(self) -> None:
        await asyncio.to_thread(self._request, self._client.start_record)

    async def stop_recording(self) -> None:
        await asyncio.to_thread(self._request, self._client.stop_record)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        # Not behind the lock: closing the socket also unblocks a hung request.
        try:
            await asyncio.to_thread(self._client.disconnect)
        except Exception:
            logger.warning("Error while disconnecting from OBS", exc_info=True)
            return
        logger.debug("Disconnected from OBS")

    def _request(self, request: Callable[[], object]) -> None:
        if self._closed:
            raise ControlClosedError("Connection to OBS is closed")
        if not self._lock.acquire(blocking=False):
            raise RequestInFlightError("Previous request to OBS is still in flight")
        try:
            if self._closed:
                raise ControlClosedError("Connection to OBS is closed")
            request()
        finally:
            self._lock.release()


async def connect(
    host: str,
    port: int,
    password: str | None = None,
    timeout: float | None = DEFAULT_CONNECT_TIMEOUT_SECONDS,
    request_timeout: float | None = None,
) -> ObswsRecordingControl:
    """Open an authenticated session.

    ``timeout`` bounds the handshake. ``request_timeout``, when given, then
    replaces it as the socket timeout for every later request.
    """
    logger.info("Connecting to OBS at %s:%d", host, port)
    try:
        client = await asyncio.to_thread(
            obs.ReqClient,
            host=host,
            port=port,
            password=password or "",
            timeout=timeout,
        )
    except Exception as exc:
        raise ObsConnectionError(host, port, str(exc) or type(exc).__name__) from exc

    if request_timeout is not None:
        client.base_client.ws.settimeout(request_timeout)

    logger.debug("Connected to OBS at %s:%d", host, port)
    return ObswsRecordingControl(client)
