from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./tennis_courts.db"
    LOG_LEVEL: str = "INFO"

    # tests and migrations manage the schema themselves
    SKIP_DB_INIT: bool = False
    SEED_DEMO_DATA: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
