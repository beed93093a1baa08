from __future__ import annotations
import math
import os
from dataclasses import dataclass


class ConfigurationError(RuntimeError):
    pass


def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


DEFAULT_API_URL = "https://volkern.app/api"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    api_url: str
    api_key: str
    timeout: float = DEFAULT_TIMEOUT
    service_name: str = "volkern-mcp-server"
    version: str = "1.0.0"
    log_level: str = "INFO"

    def __repr__(self) -> str:
        # api_key stays out of logs and tracebacks
        return (
            f"Settings(api_url={self.api_url!r}, timeout={self.timeout}, "
            f"service_name={self.service_name!r}, version={self.version!r})"
        )


def load_settings() -> Settings:
    api_key = env("VOLKERN_API_KEY")
    if not api_key:
        raise ConfigurationError("VOLKERN_API_KEY environment variable is required")

    raw_timeout = env("VOLKERN_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError as e:
        raise ConfigurationError(f"VOLKERN_TIMEOUT must be a number, got {raw_timeout!r}") from e
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError("VOLKERN_TIMEOUT must be a positive, finite number")

    return Settings(
        api_url=env("VOLKERN_API_URL", DEFAULT_API_URL).rstrip("/"),
        api_key=api_key,
        timeout=timeout,
        service_name=env("SERVICE_NAME", "volkern-mcp-server"),
        version=env("VERSION", "1.0.0"),
        log_level=env("LOG_LEVEL", "INFO").upper(),
    )
