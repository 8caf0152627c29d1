import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from checkout_service.errors import StartupConfigError

DEFAULT_CLIENT_URL = "https://r2a.netlify.app"
DEFAULT_PORT = 5000
LOCAL_DEV_ORIGIN = "http://localhost:3000"
STRIPE_API_VERSION = "2023-10-16"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    secret_key: str = field(repr=False)
    client_url: str = DEFAULT_CLIENT_URL
    port: int = DEFAULT_PORT
    api_version: str = STRIPE_API_VERSION
    log_level: str = "INFO"

    @property
    def allowed_origins(self) -> list[str]:
        origins = [self.client_url]
        if LOCAL_DEV_ORIGIN not in origins:
            origins.append(LOCAL_DEV_ORIGIN)
        return origins

    @property
    def success_url(self) -> str:
        return f"{self.client_url}/get-involved?payment=success"

    @property
    def cancel_url(self) -> str:
        return f"{self.client_url}/get-involved?payment=cancelled"


def _parse_port(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw.strip())
    except ValueError:
        raise StartupConfigError(f"PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise StartupConfigError(f"PORT out of range: {port}")
    return port


def _parse_log_level(raw: str | None) -> str:
    level = (raw or "INFO").strip().upper()
    if level not in LOG_LEVELS:
        raise StartupConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


def load_config(environ=None) -> Config:
    """
    Build the process Config from the environment.

    When `environ` is None the `.env` file in the working directory is loaded
    first (existing variables win) and os.environ is read. Raises
    StartupConfigError if STRIPE_SECRET_KEY is absent or PORT is malformed.
    """
    if environ is None:
        load_dotenv(dotenv_path=".env")
        environ = os.environ

    secret_key = (environ.get("STRIPE_SECRET_KEY") or "").strip()
    if not secret_key:
        raise StartupConfigError("Missing STRIPE_SECRET_KEY in environment or .env file.")

    client_url = (environ.get("CLIENT_URL") or "").strip().rstrip("/") or DEFAULT_CLIENT_URL

    return Config(
        secret_key=secret_key,
        client_url=client_url,
        port=_parse_port(environ.get("PORT")),
        log_level=_parse_log_level(environ.get("LOG_LEVEL")),
    )
