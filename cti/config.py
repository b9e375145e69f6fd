from datetime import datetime
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_log_filename() -> str:
    return datetime.now().replace(microsecond=0).isoformat() + ".log"


def default_log_dir() -> str:
    return str(Path.cwd() / "log")


class Settings(BaseSettings):
    # Logging (file name first, then directory, everywhere)
    logging_enabled: bool = True
    log_file: str = Field(default_factory=default_log_filename)
    log_dir: str = Field(default_factory=default_log_dir)
    log_level: str = "INFO"
    log_json: bool = False
    log_stderr: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            level = v.strip().upper()
            if level not in LOG_LEVELS:
                raise ValueError(f"unknown log level: {v}")
            return level
        return v

    model_config = SettingsConfigDict(env_prefix="CTI_", env_file=".env", extra="ignore")
