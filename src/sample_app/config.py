"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Sample App"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./sample_app.db"

    # Password hashing
    bcrypt_rounds: int = 12

    # Remember tokens
    remember_token_bytes: int = 16

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """Validate that the bcrypt cost factor is one bcrypt accepts."""
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("remember_token_bytes")
    @classmethod
    def validate_remember_token_bytes(cls, v: int) -> int:
        """Validate that remember tokens stay unguessable."""
        if v < 16:
            raise ValueError("REMEMBER_TOKEN_BYTES must be at least 16")
        return v

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        if self.bcrypt_rounds < 10:
            warnings.append(
                f"BCRYPT_ROUNDS is {self.bcrypt_rounds} - use at least 10 outside of tests"
            )

        if ":memory:" in self.database_url:
            warnings.append("DATABASE_URL points at an in-memory database - data will not persist")

        # Warn about debug mode in production
        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
