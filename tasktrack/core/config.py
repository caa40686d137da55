"""Configuration management for tasktrack."""

from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Process-wide settings, built once at startup and passed to the app."""

    jwt_secret: Optional[SecretStr] = Field(
        default=None,
        description="Secret used to sign bearer tokens",
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    token_ttl_days: int = Field(
        default=7,
        ge=1,
        description="Days a freshly issued token stays valid",
    )
    database_url: str = Field(
        default="sqlite:///data/tasktrack.db",
        description="SQLAlchemy database URL",
    )
    bcrypt_rounds: int = Field(
        default=10,
        ge=4,
        le=16,
        description="bcrypt cost factor for password hashing",
    )
    enable_cors: bool = Field(
        default=True,
        description="Enable CORS for the HTTP API",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the HTTP server",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the HTTP server",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    model_config = {
        "env_prefix": "TASKTRACK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from environment and files."""
        from dotenv import load_dotenv
        load_dotenv()
        return cls()

    def require_secret(self) -> str:
        """Return the signing secret or fail loudly at startup."""
        if self.jwt_secret is None or not self.jwt_secret.get_secret_value():
            raise RuntimeError("TASKTRACK_JWT_SECRET is not set")
        return self.jwt_secret.get_secret_value()


# Global settings instance
settings = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global settings
    if settings is None:
        settings = Settings.load()
    return settings
