from pydantic_settings import BaseSettings, SettingsConfigDict


class QuotesSettings(BaseSettings):
    app_name: str = "utilities-quotes"
    app_version: str = "0.1.0"
    app_env: str = "development"
    log_level: str = "INFO"
    # "json" or "console"
    log_format: str = "json"
    host: str = "0.0.0.0"
    port: int = 3002

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
