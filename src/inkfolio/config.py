"""Configuration for the Inkfolio API."""

from pydantic_settings import BaseSettings


DEFAULT_JWT_SECRET = "dev_secret_change_in_production"


class Settings(BaseSettings):
    """Inkfolio configuration settings."""

    # Admin credential: bcrypt hash, or plaintext (hashed once at startup)
    ADMIN_PASSWORD: str = ""

    # Token signing
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    TOKEN_TTL_HOURS: int = 24

    # Store
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/inkfolio.db"

    # HTTP
    CORS_ORIGINS: list[str] = ["*"]
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3001
    API_RELOAD: bool = False

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


# Global settings instance
settings = Settings()
