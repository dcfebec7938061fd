"""Runtime settings for the monitor, read once from the environment."""

import os
from dataclasses import dataclass, field

REQUIRED_VARS = ("EMAIL_USER", "EMAIL_PASS", "EMAIL_TO")

DEFAULT_JOBS_URL = "https://jobs.wordpress.net/"
DEFAULT_SMTP_HOST = "smtp.gmail.com"
DEFAULT_SMTP_PORT = 587
DEFAULT_HTTP_TIMEOUT = 30.0


def _default_seen_path() -> str:
    return os.path.join("data", "seen-jobs.json") if os.path.isdir("data") else "seen-jobs.json"


class ConfigError(ValueError):
    """Raised when required environment variables are missing or invalid."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


@dataclass(frozen=True)
class Settings:
    email_user: str
    email_pass: str = field(repr=False)
    email_to: str
    smtp_host: str = DEFAULT_SMTP_HOST
    smtp_port: int = DEFAULT_SMTP_PORT
    jobs_url: str = DEFAULT_JOBS_URL
    seen_jobs_path: str = "seen-jobs.json"
    http_timeout: float = DEFAULT_HTTP_TIMEOUT


def load_settings(environ=None) -> Settings:
    """Build Settings from the environment. Raises ConfigError naming every missing variable."""
    env = os.environ if environ is None else environ

    values = {name: (env.get(name) or "").strip() for name in REQUIRED_VARS}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}", missing=missing)

    try:
        smtp_port = int(env.get("SMTP_PORT") or DEFAULT_SMTP_PORT)
        http_timeout = float(env.get("HTTP_TIMEOUT") or DEFAULT_HTTP_TIMEOUT)
    except ValueError as e:
        raise ConfigError(f"Invalid numeric setting: {e}") from e

    return Settings(
        email_user=values["EMAIL_USER"],
        email_pass=values["EMAIL_PASS"],
        email_to=values["EMAIL_TO"],
        smtp_host=(env.get("SMTP_HOST") or DEFAULT_SMTP_HOST).strip(),
        smtp_port=smtp_port,
        jobs_url=(env.get("JOBS_URL") or DEFAULT_JOBS_URL).strip(),
        seen_jobs_path=env.get("SEEN_JOBS_FILE") or _default_seen_path(),
        http_timeout=http_timeout,
    )
