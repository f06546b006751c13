from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.retry import CALL_TIMEOUT_SECONDS, POLL_INTERVAL_SECONDS, RETRY_WINDOW_SECONDS


class ObsClientConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OBSWS_")

    addr: str | None = None
    port: int | None = Field(default=None, ge=1, le=65535)
    password: str | None = None

    retry_window_seconds: float = RETRY_WINDOW_SECONDS
    poll_interval_seconds: float = POLL_INTERVAL_SECONDS
    call_timeout_seconds: float = CALL_TIMEOUT_SECONDS
    connect_timeout_seconds: float = 5.0

    log_level: str = "INFO"

    def missing_connection_settings(self) -> list[str]:
        missing = []
        if not self.addr:
            missing.append("address (OBSWS_ADDR)")
        if self.port is None:
            missing.append("port (OBSWS_PORT)")
        return missing
