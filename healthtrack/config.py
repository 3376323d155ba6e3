from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "sqlite:///./healthtrack.db"
    app_env: str = "dev"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    allowed_origins: str = "http://localhost:3000,http://localhost:3001"
    default_language: str = "vi"
    label_max_length: int = 50
    seed_catalog_on_startup: bool = True


settings = Settings()
