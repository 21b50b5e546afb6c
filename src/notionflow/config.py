"""Environment-driven settings."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from notionflow.errors import ConfigurationError

TOKEN_VAR = "NOTION_TOKEN"
PARENT_VAR = "NOTION_PAGE_ID"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class Settings:
    token: str
    parent_id: str
    log_level: str = "INFO"
    max_retries: int = 3
    timeout: float = 30.0

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None, dotenv: bool = True) -> "Settings":
        """Build settings from the environment, loading a .env file first.

        Raises ConfigurationError naming every missing variable.
        """
        if dotenv and environ is None:
            load_dotenv()
        env = os.environ if environ is None else environ

        missing = [name for name in (TOKEN_VAR, PARENT_VAR) if not env.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing {', '.join(missing)}. Set {TOKEN_VAR} to your integration's "
                f"secret key and {PARENT_VAR} to the ID of the page that will hold "
                "the imported table (a .env file in the working directory is read)."
            )

        try:
            max_retries = int(env.get("NOTIONFLOW_MAX_RETRIES", "3"))
            timeout = float(env.get("NOTIONFLOW_TIMEOUT", "30"))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e
        log_level = env.get("NOTIONFLOW_LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"NOTIONFLOW_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level}"
            )
        if max_retries < 0:
            raise ConfigurationError(f"NOTIONFLOW_MAX_RETRIES must be 0 or more, got {max_retries}")
        if timeout <= 0:
            raise ConfigurationError(f"NOTIONFLOW_TIMEOUT must be positive, got {timeout}")

        return cls(
            token=env[TOKEN_VAR],
            parent_id=env[PARENT_VAR],
            log_level=log_level,
            max_retries=max_retries,
            timeout=timeout,
        )
