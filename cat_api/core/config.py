# cat_api/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Server settings read from environment variables or a local .env file.
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./data/app.db"

    SESSION_COOKIE_NAME: str = "session_id"
    SESSION_TTL_HOURS: int = 24
    SESSION_COOKIE_SECURE: bool = False

    BCRYPT_ROUNDS: int = 10

    SEED_SAMPLE_DATA: bool = True
    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"


settings = Settings()
