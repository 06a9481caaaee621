"""
App configuration - using pydantic settings for env vars
"""

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_SECRET_KEY = "insecure-dev-secret-change-this"


class Settings(BaseSettings):
    """App settings - loads from .env file"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # basic app stuff
    app_name: str = Field(default="Notekeeper API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)  # set to True for dev

    # server config
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)
    reload: bool = Field(default=False)

    # DB settings - a single sqlite file holds users and notes
    database_url: str = Field(default="sqlite+aiosqlite:///./notes.sqlite3")
    database_echo: bool = Field(default=False)  # useful for debugging

    # JWT
    secret_key: str = Field(
        default=DEV_SECRET_KEY,
        validation_alias=AliasChoices("secret_key", "jwt_secret"),
        description="JWT signing key",
    )
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_days: int = Field(default=7, description="Access token lifetime in days")

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31, description="bcrypt work factor")

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="CORS allowed origins",
    )
    cors_allow_credentials: bool = Field(default=True, description="CORS allow credentials")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default="logs", description="Directory for rotating log files")
    log_to_file: bool = Field(default=True, description="Write log files in addition to stdout")

    # Environment
    environment: str = Field(default="development", description="Environment name")

    @model_validator(mode="after")
    def _require_real_secret_in_production(self) -> "Settings":
        if self.environment.lower() == "production" and self.secret_key == DEV_SECRET_KEY:
            raise ValueError("SECRET_KEY must be set in production")
        return self

    @property
    def uses_dev_secret(self) -> bool:
        return self.secret_key == DEV_SECRET_KEY


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings
