import logging

from config import ObsClientConfig
from adapters.obsws_control import ObswsRecordingControl, connect
from domain.retry import RetryPolicy
from domain.runner import CommandRunner
from ports.recording import RecordingControlPort

logger = logging.getLogger(__name__)


def create_retry_policy(config: ObsClientConfig) -> RetryPolicy:
    return RetryPolicy(
        max_duration=config.retry_window_seconds,
        poll_interval=config.poll_interval_seconds,
        call_timeout=config.call_timeout_seconds,
    )


async def create_control(config: ObsClientConfig) -> ObswsRecordingControl:
    return await connect(
        host=config.addr,
        port=config.port,
        password=config.password,
        timeout=config.connect_timeout_seconds,
        request_timeout=config.call_timeout_seconds,
    )


def create_runner(config: ObsClientConfig, control: RecordingControlPort) -> CommandRunner:
    policy = create_retry_policy(config)
    logger.debug(
        "Retry policy: window=%.2fs poll=%.2fs call_timeout=%.2fs (about %d attempts)",
        policy.max_duration,
        policy.poll_interval,
        policy.call_timeout,
        policy.expected_attempts,
    )
    return CommandRunner(control=control, policy=policy)
