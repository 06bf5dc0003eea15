from pydantic import BaseModel, ConfigDict, Field


class WeatherReading(BaseModel):
    """Normalized reading for one city, as served by the weather service."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    city: str
    temperature: float = Field(..., allow_inf_nan=False, description="Degrees Fahrenheit")
    conditions: str = Field(..., description="Free-text description, e.g. 'partly cloudy'")
    humidity: float = Field(..., ge=0, le=100, allow_inf_nan=False, description="Relative humidity in percent")


class WeatherSummary(BaseModel):
    temperature: float
    conditions: str
    humidity: float
