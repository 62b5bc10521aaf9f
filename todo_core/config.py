"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["http://localhost:5173"]
    log_level: str = "INFO"

    # JWT Configuration
    jwt_secret_key: str = "change-me-in-production-use-env-var"
    jwt_expiry_hours: int = 24

    # Bcrypt work factor (higher = more secure but slower)
    # 10 keeps a hash in the tens of milliseconds; tests use 4
    bcrypt_work_factor: int = 10

    # Load sample users and todos at startup (development only)
    seed_demo_data: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
