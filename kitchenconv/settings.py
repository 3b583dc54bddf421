from functools import lru_cache
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KITCHENCONV_", env_file=".env", extra="ignore")

    # Logging (overridden by --verbose)
    log_level: LogLevel = "WARNING"

    # Output
    result_digits: int = Field(6, ge=1)  # significant digits, printf %g style

    # "did you mean" list; None prints every known name
    suggestion_limit: Optional[int] = Field(None, ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    """Settings from the environment, built on first use."""
    return Settings()
