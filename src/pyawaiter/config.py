from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from `PYAWAITER_` environment variables."""

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PYAWAITER_", env_file=".env", env_ignore_empty=True, extra="ignore"
    )


settings = Settings()
