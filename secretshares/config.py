"""Library configuration."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from SECRETSHARES_* environment variables."""

    # Statistical security (bits) for integer sharing when the caller omits it
    default_stat_sec_param: int = Field(default=40, ge=0)

    # Strict mode: probabilistic primality check of field sizes, positive and
    # distinct evaluation points, degree < n_shares, |secret| <= bound,
    # matching scale factors on addition
    strict_validation: bool = False

    # Miller-Rabin rounds used by strict mode
    primality_rounds: int = Field(default=40, ge=1)

    # Logging (applied by setup_logging, never on import)
    log_level: str = "WARNING"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SECRETSHARES_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
