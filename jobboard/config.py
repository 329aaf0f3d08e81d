# jobboard/config.py
import os
import logging
from dataclasses import dataclass

from dotenv import load_dotenv

log = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """ Process-wide configuration, built once at startup and passed down explicitly. """
    secret_key: str
    db_url: str = "sqlite:///./jobboard.db"
    algorithm: str = "HS256"
    seed_sample_data: bool = False
    app_env: str = "production"
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> "Settings":
        """Reads settings from the environment (and a .env file if present)."""
        load_dotenv()
        secret_key = os.getenv("SECRET_KEY")
        if not secret_key:
            log.critical("FATAL: SECRET_KEY not found in environment variables!")
            raise ValueError("SECRET_KEY must be set in the environment variables.")
        return cls(
            secret_key=secret_key,
            db_url=os.getenv("DB_URL", cls.db_url),
            algorithm=os.getenv("ALGORITHM", cls.algorithm),
            seed_sample_data=os.getenv("SEED_SAMPLE_DATA", "false").strip().lower() in TRUTHY,
            app_env=os.getenv("APP_ENV", cls.app_env).lower(),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            cors_origins=tuple(
                origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
            ),
        )
