from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_RATE_CITIES = ["new-york", "london", "tokyo", "sydney", "paris"]


class AppSettings(BaseSettings):
    app_name: str = "utilities-rates"
    app_version: str = "0.1.0"
    app_env: str = "development"
    log_level: str = "INFO"
    # "json" or "console"
    log_format: str = "json"
    host: str = "0.0.0.0"
    port: int = 3002

    # Upstream weather service
    weather_service_url: str = "http://weather-service:3001"
    weather_timeout_s: Optional[float] = None

    # Cities covered by GET /api/rates, fetched in this order
    rate_cities: List[str] = DEFAULT_RATE_CITIES

    # Unprefixed so PORT and WEATHER_SERVICE_URL work as-is
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
